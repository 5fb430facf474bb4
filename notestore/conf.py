# -*- coding: utf-8 -*-
"""
conf

Runtime configuration utilities for the NoteStore package.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from threading import RLock
from typing import Callable, Mapping


@dataclass
class NoteStoreSettings:
    """Container for persistence configuration derived from environment variables."""

    api_url: str = ""
    api_key: str = ""
    local_store_path: str = field(
        default_factory=lambda: str(Path.cwd() / "notestore-local.sqlite3")
    )
    remote_table: str = "notes"
    request_timeout: float = 10.0
    generate_schema: bool = False

    def __post_init__(self) -> None:
        """Normalize the remote endpoint and credentials."""
        self.api_url = self._normalize_url(self.api_url or "")
        self.api_key = (self.api_key or "").strip()
        if isinstance(self.local_store_path, Path):
            self.local_store_path = str(self.local_store_path)
        if not self.local_store_path or not self.local_store_path.strip():
            self.local_store_path = ":memory:"
        self.remote_table = (self.remote_table or "notes").strip() or "notes"

    @property
    def remote_configured(self) -> bool:
        """Return ``True`` when both the remote URL and key are present."""

        return bool(self.api_url and self.api_key)

    def masked(self) -> "NoteStoreSettings":
        """Return a copy whose API key is safe to display."""

        if not self.api_key:
            return replace(self)
        hint = self.api_key[-4:] if len(self.api_key) > 8 else ""
        return replace(self, api_key=f"****{hint}")

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        *,
        prefix: str = "NOTESTORE_",
    ) -> "NoteStoreSettings":
        """Build a settings instance from environment variables."""
        source = env if env is not None else os.environ
        data = {key[len(prefix) :]: value for key, value in source.items() if key.startswith(prefix)}
        api_url = data.get("API_URL") or ""
        api_key = data.get("API_KEY") or ""
        local_store_path = data.get("LOCAL_STORE_PATH") or str(
            Path.cwd() / "notestore-local.sqlite3"
        )
        remote_table = data.get("REMOTE_TABLE") or "notes"
        request_timeout = cls._to_float(data.get("REQUEST_TIMEOUT"), default=10.0)
        generate_schema = cls._to_bool(data.get("GENERATE_SCHEMA"))
        return cls(
            api_url=api_url,
            api_key=api_key,
            local_store_path=local_store_path,
            remote_table=remote_table,
            request_timeout=request_timeout,
            generate_schema=generate_schema,
        )

    @staticmethod
    def _to_float(value: str | None, *, default: float) -> float:
        """Return a float from ``value`` or ``default`` when conversion fails."""
        if value is None:
            return default
        try:
            return float(value)
        except (TypeError, ValueError):
            return default

    @staticmethod
    def _to_bool(value: str | None, *, default: bool = False) -> bool:
        """Return a boolean parsed from ``value`` with a ``default`` fallback."""

        if value is None:
            return default
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        return default

    @staticmethod
    def _normalize_url(value: str) -> str:
        """Trim trailing slashes and default to ``https`` when no scheme is given."""
        normalized = value.strip()
        if not normalized:
            return ""
        if "://" not in normalized:
            normalized = f"https://{normalized}"
        scheme, _, rest = normalized.partition("://")
        stripped = rest.rstrip("/")
        if not stripped:
            return ""
        return f"{scheme.lower()}://{stripped}"


class SettingsManager:
    """Central storage for the active ``NoteStoreSettings`` instance."""

    def __init__(self, initial: NoteStoreSettings | None = None) -> None:
        """Prepare storage with an optional preconfigured ``initial`` settings."""

        self._lock = RLock()
        self._settings = initial
        self._callbacks: list[Callable[[NoteStoreSettings], None]] = []

    def configure(self, settings: NoteStoreSettings) -> None:
        """Install a new settings instance and notify observers."""
        with self._lock:
            self._settings = settings
            for callback in list(self._callbacks):
                callback(settings)

    def current(self) -> NoteStoreSettings:
        """Return the active settings, lazily initializing from the environment."""
        with self._lock:
            if self._settings is None:
                self._settings = NoteStoreSettings.from_env()
            return self._settings

    def register(self, callback: Callable[[NoteStoreSettings], None]) -> None:
        """Register a callback invoked whenever settings change."""
        with self._lock:
            self._callbacks.append(callback)

    def unregister(self, callback: Callable[[NoteStoreSettings], None]) -> None:
        """Remove a previously registered settings change callback if present."""
        with self._lock:
            if callback in self._callbacks:
                self._callbacks.remove(callback)


_settings_manager = SettingsManager()


def settings_manager() -> SettingsManager:
    """Return the process-wide settings manager."""
    return _settings_manager


def configure(settings: NoteStoreSettings) -> None:
    """Public entry point to install application specific settings."""
    _settings_manager.configure(settings)


def current_settings() -> NoteStoreSettings:
    """Return the active settings instance used by NoteStore components."""
    return _settings_manager.current()


def register_settings_observer(callback: Callable[[NoteStoreSettings], None]) -> None:
    """Subscribe to configuration changes for global singletons."""
    _settings_manager.register(callback)


def unregister_settings_observer(callback: Callable[[NoteStoreSettings], None]) -> None:
    """Remove a configuration change subscription."""
    _settings_manager.unregister(callback)


__all__ = [
    "NoteStoreSettings",
    "SettingsManager",
    "configure",
    "current_settings",
    "register_settings_observer",
    "settings_manager",
    "unregister_settings_observer",
]


# The End
