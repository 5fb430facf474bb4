# -*- coding: utf-8 -*-
"""
gate

Backend availability gate deciding whether the remote path may be attempted.

The gate reads the active settings on every check, builds the remote adapter
lazily and forgets it whenever the configuration changes.  It never probes
the network: reachability is discovered by the real operation.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Protocol

from ..conf import NoteStoreSettings, SettingsManager, settings_manager
from .exceptions import RemoteUnavailable
from .storage.remote import RemoteBackend


logger = logging.getLogger(__name__)


class BackendFactory(Protocol):
    """Callable building a remote adapter from settings."""

    def build(self, settings: NoteStoreSettings) -> RemoteBackend:  # pragma: no cover - structural
        """Return an adapter for ``settings``."""


class GateState(str, Enum):
    """Configuration state reported by the gate."""

    UNCONFIGURED = "unconfigured"
    CONFIGURED = "configured"


class BackendAvailabilityGate:
    """Answer whether the remote backend is configured and hand out its client."""

    def __init__(
        self,
        manager: SettingsManager | None = None,
        *,
        factory: BackendFactory | None = None,
    ) -> None:
        """Bind the gate to ``manager`` and subscribe to its changes."""

        if factory is None:
            from ..contrib.adapters import RemoteBackendFactory

            factory = RemoteBackendFactory()
        self._manager = manager or settings_manager()
        self._factory = factory
        self._backend: RemoteBackend | None = None
        self._stale: list[RemoteBackend] = []
        self._manager.register(self._on_settings_changed)

    @property
    def settings(self) -> NoteStoreSettings:
        """Return the settings currently in force."""

        return self._manager.current()

    @property
    def state(self) -> GateState:
        """Return the configuration state at call time."""

        if self.settings.remote_configured:
            return GateState.CONFIGURED
        return GateState.UNCONFIGURED

    def is_configured(self) -> bool:
        """Return ``True`` when remote credentials are present."""

        return self.state is GateState.CONFIGURED

    async def acquire(self) -> RemoteBackend | None:
        """Return the remote adapter, or ``None`` when it cannot be used."""

        await self._close_stale()
        if not self.is_configured():
            return None
        if self._backend is None:
            try:
                self._backend = self._factory.build(self.settings)
            except Exception as exc:
                error = RemoteUnavailable(f"{type(exc).__name__}: {exc}")
                logger.warning("Remote backend client could not be created: %s", error)
                return None
            logger.info("Remote backend %s ready", self._backend.name)
        return self._backend

    def reset(self) -> None:
        """Forget the cached adapter so the next call rebuilds it."""

        if self._backend is not None:
            self._stale.append(self._backend)
            self._backend = None

    def reconfigure(self, settings: NoteStoreSettings) -> None:
        """Install ``settings`` for the whole process and reset the client."""

        self._manager.configure(settings)

    async def aclose(self) -> None:
        """Close every adapter built by the gate."""

        self.reset()
        await self._close_stale()

    def detach(self) -> None:
        """Stop observing configuration changes."""

        self._manager.unregister(self._on_settings_changed)

    def _on_settings_changed(self, settings: NoteStoreSettings) -> None:
        logger.debug("Settings changed; remote configured=%s", settings.remote_configured)
        self.reset()

    async def _close_stale(self) -> None:
        while self._stale:
            backend = self._stale.pop()
            try:
                await backend.aclose()
            except Exception as exc:  # pragma: no cover - runtime guard
                logger.warning("Failed to close remote backend %s: %s", backend.name, exc)


__all__ = ["BackendAvailabilityGate", "BackendFactory", "GateState"]


# The End
