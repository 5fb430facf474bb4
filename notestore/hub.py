# -*- coding: utf-8 -*-
"""
hub

Assemble the persistence stack from the active settings.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import json
import logging
from dataclasses import replace

from .conf import NoteStoreSettings, SettingsManager, settings_manager
from .core.cache import SQLiteKeyValueStore
from .core.gate import BackendAvailabilityGate, BackendFactory
from .core.orchestrator import PersistenceOrchestrator
from .core.storage import LocalFallbackStore, LocalItemRepository


logger = logging.getLogger(__name__)

DATABASE_CONFIG_KEY = "databaseConfig"


class NoteStoreHub:
    """Own the key/value store, gate and orchestrator for one process.

    Remote credentials installed at runtime are saved in the key/value store
    under ``databaseConfig`` and layered over the initial settings when a hub
    is built on the same store again.
    """

    def __init__(
        self,
        settings: NoteStoreSettings | None = None,
        *,
        manager: SettingsManager | None = None,
        factory: BackendFactory | None = None,
    ) -> None:
        """Build every component, installing ``settings`` when given."""

        self._manager = manager or settings_manager()
        if settings is not None:
            self._manager.configure(settings)
        active = self._manager.current()
        self.kv_store = SQLiteKeyValueStore(active.local_store_path)
        stored = self._load_database_config(active)
        if stored is not None:
            self._manager.configure(stored)
            active = stored
        self.gate = BackendAvailabilityGate(self._manager, factory=factory)
        self.orchestrator = PersistenceOrchestrator(
            self.gate,
            LocalItemRepository(LocalFallbackStore(self.kv_store)),
        )
        self._manager.register(self._on_settings_changed)
        logger.debug("Local fallback store at %s", active.local_store_path)

    @property
    def settings(self) -> NoteStoreSettings:
        """Return the settings currently in force."""

        return self._manager.current()

    def reconfigure(self, settings: NoteStoreSettings) -> None:
        """Install ``settings`` through the gate's reconfiguration entry point."""

        self.gate.reconfigure(settings)

    async def aclose(self) -> None:
        """Release remote clients and the local database connection."""

        self._manager.unregister(self._on_settings_changed)
        self.gate.detach()
        await self.gate.aclose()
        self.kv_store.close()

    def _on_settings_changed(self, settings: NoteStoreSettings) -> None:
        self.kv_store.reconfigure(settings.local_store_path)
        self._save_database_config(settings)

    def _load_database_config(
        self, settings: NoteStoreSettings
    ) -> NoteStoreSettings | None:
        """Return ``settings`` with saved remote credentials applied, if any."""

        payload = self.kv_store.get(DATABASE_CONFIG_KEY)
        if payload is None:
            return None
        try:
            data = json.loads(payload)
            api_url = data["apiUrl"]
            api_key = data["apiKey"]
            if not isinstance(api_url, str) or not isinstance(api_key, str):
                raise TypeError("apiUrl and apiKey must be strings")
        except (ValueError, KeyError, TypeError) as exc:
            logger.warning("Ignoring unreadable stored database config: %s", exc)
            return None
        return replace(settings, api_url=api_url, api_key=api_key)

    def _save_database_config(self, settings: NoteStoreSettings) -> None:
        if not settings.api_url and not settings.api_key:
            self.kv_store.delete(DATABASE_CONFIG_KEY)
            return
        self.kv_store.set(
            DATABASE_CONFIG_KEY,
            json.dumps({"apiUrl": settings.api_url, "apiKey": settings.api_key}),
        )


__all__ = ["DATABASE_CONFIG_KEY", "NoteStoreHub"]


# The End
