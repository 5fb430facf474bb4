# -*- coding: utf-8 -*-
"""stubs

Remote backend doubles and builders shared by the test-suite.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Mapping

from notestore.conf import NoteStoreSettings, SettingsManager
from notestore.core.cache import SQLiteKeyValueStore
from notestore.core.gate import BackendAvailabilityGate
from notestore.core.orchestrator import PersistenceOrchestrator
from notestore.core.storage import (
    LocalFallbackStore,
    LocalItemRepository,
    Record,
    RemoteBackend,
    RemoteResult,
)

CONFIGURED = {"api_url": "https://example.supabase.co", "api_key": "service-key-1234"}


class InMemoryBackend(RemoteBackend):
    """Remote backend keeping rows in a dictionary."""

    name = "memory"

    def __init__(self) -> None:
        """Start with an empty table and no recorded calls."""
        self.rows: dict[str, Record] = {}
        self.calls: list[str] = []
        self.closed = False

    async def insert(self, record: Mapping[str, Any]) -> RemoteResult[None]:
        self.calls.append("insert")
        self.rows[record["id"]] = dict(record)
        return RemoteResult.success()

    async def update(self, item_id: str, fields: Mapping[str, Any]) -> RemoteResult[None]:
        self.calls.append("update")
        if item_id in self.rows:
            self.rows[item_id].update(fields)
        return RemoteResult.success()

    async def delete(self, item_id: str) -> RemoteResult[None]:
        self.calls.append("delete")
        self.rows.pop(item_id, None)
        return RemoteResult.success()

    async def list_children(self, parent_id: str | None) -> RemoteResult[list[Record]]:
        self.calls.append("list_children")
        rows = [row for row in self.rows.values() if row.get("parent_id") == parent_id]
        return RemoteResult.success(sorted(rows, key=lambda row: row["created_at"]))

    async def get(self, item_id: str) -> RemoteResult[Record]:
        self.calls.append("get")
        row = self.rows.get(item_id)
        return RemoteResult.success(dict(row) if row else None)

    async def search(self, text: str) -> RemoteResult[list[Record]]:
        self.calls.append("search")
        needle = text.lower()
        rows = [
            row
            for row in self.rows.values()
            if needle in (row.get("title") or "").lower()
            or needle in (row.get("content") or "").lower()
        ]
        return RemoteResult.success(rows)

    async def aclose(self) -> None:
        self.closed = True


class FailingBackend(RemoteBackend):
    """Remote backend whose every call reports a service error."""

    name = "failing"

    def __init__(self) -> None:
        """Start with no recorded calls."""
        self.calls: list[str] = []

    def _fail(self, operation: str) -> RemoteResult[Any]:
        self.calls.append(operation)
        return RemoteResult.failure("service unavailable", operation=operation, status_code=503)

    async def insert(self, record: Mapping[str, Any]) -> RemoteResult[None]:
        return self._fail("insert")

    async def update(self, item_id: str, fields: Mapping[str, Any]) -> RemoteResult[None]:
        return self._fail("update")

    async def delete(self, item_id: str) -> RemoteResult[None]:
        return self._fail("delete")

    async def list_children(self, parent_id: str | None) -> RemoteResult[list[Record]]:
        return self._fail("list_children")

    async def get(self, item_id: str) -> RemoteResult[Record]:
        return self._fail("get")

    async def search(self, text: str) -> RemoteResult[list[Record]]:
        return self._fail("search")


class RaisingBackend(FailingBackend):
    """Remote backend raising instead of returning an error value."""

    name = "raising"

    def _fail(self, operation: str) -> RemoteResult[Any]:
        self.calls.append(operation)
        raise RuntimeError(f"{operation} exploded")


class StaticFactory:
    """Adapter factory returning prebuilt backends and counting builds."""

    def __init__(self, *backends: RemoteBackend) -> None:
        """Hand out ``backends`` in order, repeating the last one."""
        self._backends = list(backends)
        self.builds: list[NoteStoreSettings] = []

    def build(self, settings: NoteStoreSettings) -> RemoteBackend:
        self.builds.append(settings)
        index = min(len(self.builds), len(self._backends)) - 1
        return self._backends[index]


class ExplodingFactory:
    """Adapter factory that cannot construct a client."""

    def __init__(self) -> None:
        self.builds = 0

    def build(self, settings: NoteStoreSettings) -> RemoteBackend:
        self.builds += 1
        raise ValueError("bad endpoint")


def build_orchestrator(
    backend: RemoteBackend | None = None,
    *,
    configured: bool = True,
    factory: Any = None,
) -> tuple[PersistenceOrchestrator, SQLiteKeyValueStore, Any]:
    """Return an orchestrator over an in-memory local store.

    When ``configured`` is false the settings carry no credentials so the gate
    reports the remote backend as unconfigured.
    """

    options = dict(CONFIGURED) if configured else {}
    manager = SettingsManager(NoteStoreSettings(local_store_path=":memory:", **options))
    if factory is None:
        factory = StaticFactory(backend or InMemoryBackend())
    gate = BackendAvailabilityGate(manager, factory=factory)
    kv_store = SQLiteKeyValueStore(":memory:")
    repository = LocalItemRepository(LocalFallbackStore(kv_store))
    return PersistenceOrchestrator(gate, repository), kv_store, factory


# The End
