# -*- coding: utf-8 -*-
"""
test_hub

Wiring and saved database configuration of ``NoteStoreHub``.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path

import pytest

from notestore.conf import NoteStoreSettings, SettingsManager
from notestore.hub import DATABASE_CONFIG_KEY, NoteStoreHub
from tests.stubs import CONFIGURED, InMemoryBackend, StaticFactory


def _hub(path: Path) -> NoteStoreHub:
    return NoteStoreHub(
        NoteStoreSettings(local_store_path=str(path)),
        manager=SettingsManager(),
        factory=StaticFactory(InMemoryBackend()),
    )


class TestSavedDatabaseConfig:
    """Runtime credentials survive rebuilding the hub on the same store."""

    @pytest.mark.asyncio
    async def test_reconfigured_credentials_are_reloaded(self, tmp_path: Path) -> None:
        store = tmp_path / "local.sqlite3"
        first = _hub(store)
        first.reconfigure(
            replace(first.settings, api_url="example.supabase.co/", api_key=" key-5678 ")
        )
        saved = json.loads(first.kv_store.get(DATABASE_CONFIG_KEY))
        await first.aclose()

        second = _hub(store)
        try:
            assert saved == {"apiUrl": "https://example.supabase.co", "apiKey": "key-5678"}
            assert second.settings.api_url == "https://example.supabase.co"
            assert second.settings.api_key == "key-5678"
            assert second.gate.is_configured()
        finally:
            await second.aclose()

    @pytest.mark.asyncio
    async def test_clearing_credentials_removes_saved_config(self, tmp_path: Path) -> None:
        store = tmp_path / "local.sqlite3"
        first = _hub(store)
        first.reconfigure(replace(first.settings, **CONFIGURED))
        first.reconfigure(replace(first.settings, api_url="", api_key=""))
        await first.aclose()

        second = _hub(store)
        try:
            assert second.kv_store.get(DATABASE_CONFIG_KEY) is None
            assert not second.gate.is_configured()
        finally:
            await second.aclose()

    @pytest.mark.asyncio
    async def test_unreadable_saved_config_is_ignored(self, tmp_path: Path) -> None:
        store = tmp_path / "local.sqlite3"
        first = _hub(store)
        first.kv_store.set(DATABASE_CONFIG_KEY, "{not json")
        await first.aclose()

        second = _hub(store)
        try:
            assert second.settings.api_url == ""
            assert not second.gate.is_configured()
        finally:
            await second.aclose()

    @pytest.mark.asyncio
    async def test_initial_settings_are_not_saved(self, tmp_path: Path) -> None:
        hub = NoteStoreHub(
            NoteStoreSettings(local_store_path=str(tmp_path / "local.sqlite3"), **CONFIGURED),
            manager=SettingsManager(),
            factory=StaticFactory(InMemoryBackend()),
        )
        try:
            assert hub.gate.is_configured()
            assert hub.kv_store.get(DATABASE_CONFIG_KEY) is None
        finally:
            await hub.aclose()


# The End
