# -*- coding: utf-8 -*-
"""
test_conf

Tests for settings normalization and the settings manager.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from notestore.conf import NoteStoreSettings, SettingsManager


def test_settings_default_to_unconfigured_remote() -> None:
    """Verify fresh settings carry no remote credentials."""

    settings = NoteStoreSettings(local_store_path=":memory:")

    assert settings.api_url == ""
    assert settings.api_key == ""
    assert settings.remote_configured is False


def test_settings_normalize_remote_url() -> None:
    """Ensure missing schemes are defaulted and trailing slashes removed."""

    settings = NoteStoreSettings(
        api_url="  project.supabase.co///  ", api_key="  secret  "
    )

    assert settings.api_url == "https://project.supabase.co"
    assert settings.api_key == "secret"
    assert settings.remote_configured is True


def test_settings_keep_database_urls() -> None:
    """Check database URLs keep their scheme and path."""

    settings = NoteStoreSettings(api_url="postgres://notes@db:5432/notes/", api_key="pw")

    assert settings.api_url == "postgres://notes@db:5432/notes"


def test_settings_require_both_url_and_key() -> None:
    """A URL without a key leaves the remote backend unconfigured."""

    assert NoteStoreSettings(api_url="https://x.example").remote_configured is False
    assert NoteStoreSettings(api_key="key").remote_configured is False


def test_settings_from_env_reads_prefixed_values() -> None:
    """Confirm environment variables populate every field."""

    env = {
        "NOTESTORE_API_URL": "https://remote.example/",
        "NOTESTORE_API_KEY": "abc",
        "NOTESTORE_LOCAL_STORE_PATH": "/tmp/notes.sqlite3",
        "NOTESTORE_REMOTE_TABLE": "items",
        "NOTESTORE_REQUEST_TIMEOUT": "2.5",
        "NOTESTORE_GENERATE_SCHEMA": "yes",
        "UNRELATED": "ignored",
    }

    settings = NoteStoreSettings.from_env(env)

    assert settings.api_url == "https://remote.example"
    assert settings.api_key == "abc"
    assert settings.local_store_path == "/tmp/notes.sqlite3"
    assert settings.remote_table == "items"
    assert settings.request_timeout == 2.5
    assert settings.generate_schema is True


def test_settings_from_env_tolerates_bad_numbers() -> None:
    """Invalid numeric values fall back to defaults."""

    settings = NoteStoreSettings.from_env({"NOTESTORE_REQUEST_TIMEOUT": "soon"})

    assert settings.request_timeout == 10.0


def test_masked_settings_hide_the_key() -> None:
    """The masked copy only reveals the last characters of long keys."""

    settings = NoteStoreSettings(api_url="https://x.example", api_key="0123456789abcd")

    masked = settings.masked()

    assert masked.api_key == "****abcd"
    assert settings.api_key == "0123456789abcd"
    assert NoteStoreSettings(api_key="short").masked().api_key == "****"


def test_settings_manager_notifies_observers() -> None:
    """Observers receive every newly installed settings instance."""

    manager = SettingsManager(NoteStoreSettings(local_store_path=":memory:"))
    received: list[NoteStoreSettings] = []
    manager.register(received.append)

    updated = NoteStoreSettings(api_url="https://x.example", api_key="k")
    manager.configure(updated)
    manager.unregister(received.append)
    manager.configure(NoteStoreSettings())

    assert received == [updated]
    assert manager.current().api_url == ""


# The End
