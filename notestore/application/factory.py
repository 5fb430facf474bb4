# -*- coding: utf-8 -*-
"""
application.factory

Factories for assembling FastAPI applications serving the note store.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import inspect
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from ..api import ItemsAPI
from ..conf import NoteStoreSettings, SettingsManager
from ..core.gate import BackendFactory
from ..hub import NoteStoreHub

LifecycleHook = Callable[[], Awaitable[None] | None]


class ApplicationFactory:
    """Create FastAPI applications wired to a ``NoteStoreHub``."""

    def __init__(
        self,
        *,
        settings: NoteStoreSettings | None = None,
        manager: SettingsManager | None = None,
        factory: BackendFactory | None = None,
        prefix: str = "/api",
        title: str = "NoteStore",
    ) -> None:
        """Persist configuration used for application builds."""

        self._settings = settings
        self._manager = manager
        self._factory = factory
        self._prefix = prefix
        self._title = title
        self._startup_hooks: list[LifecycleHook] = []
        self._shutdown_hooks: list[LifecycleHook] = []

    def register_startup_hook(self, hook: LifecycleHook) -> None:
        """Store a coroutine or callable to execute during application startup."""

        self._startup_hooks.append(hook)

    def register_shutdown_hook(self, hook: LifecycleHook) -> None:
        """Store a coroutine or callable to execute during application shutdown."""

        self._shutdown_hooks.append(hook)

    def build(self) -> FastAPI:
        """Return a FastAPI instance exposing the item endpoints."""

        hub = NoteStoreHub(
            self._settings, manager=self._manager, factory=self._factory
        )
        app = FastAPI(title=self._title, lifespan=self._lifespan(hub))
        app.state.notestore = hub
        app.include_router(ItemsAPI(hub.orchestrator).router, prefix=self._prefix)
        return app

    def _lifespan(self, hub: NoteStoreHub) -> Callable[[FastAPI], Any]:
        """Return the lifespan running registered hooks around ``hub``."""

        startup_hooks = list(self._startup_hooks)
        shutdown_hooks = list(self._shutdown_hooks)

        @asynccontextmanager
        async def lifespan(app: FastAPI) -> AsyncIterator[None]:
            for hook in startup_hooks:
                await self._run_hook(hook)
            try:
                yield
            finally:
                for hook in shutdown_hooks:
                    await self._run_hook(hook)
                await hub.aclose()

        return lifespan

    @staticmethod
    async def _run_hook(hook: LifecycleHook) -> None:
        result = hook()
        if inspect.isawaitable(result):
            await result


def create_app(settings: NoteStoreSettings | None = None) -> FastAPI:
    """Build an application using ``settings`` or the environment."""

    return ApplicationFactory(settings=settings).build()


__all__ = ["ApplicationFactory", "LifecycleHook", "create_app"]


# The End
