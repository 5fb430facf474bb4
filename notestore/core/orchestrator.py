# -*- coding: utf-8 -*-
"""
orchestrator

Two-tier persistence for folders and notes.

Every operation consults the availability gate, attempts the remote backend
when it is configured and falls back to the local repository when it is not
or when the remote call fails.  Callers never learn which substrate served
them and never receive an exception from either one.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Mapping, Protocol, TypeVar

from .collaborators import SystemClock, UUIDGenerator
from .exceptions import RemoteCallFailed
from .gate import BackendAvailabilityGate
from .models import EDITABLE_FIELDS, Item, ItemKind
from .storage.local import LocalItemRepository
from .storage.remote import Record, RemoteBackend, RemoteResult


logger = logging.getLogger(__name__)

T = TypeVar("T")


class Clock(Protocol):
    """Source of record timestamps."""

    def now(self) -> str:  # pragma: no cover - structural
        """Return the current timestamp."""


class IdentifierGenerator(Protocol):
    """Source of item identifiers."""

    def new_id(self) -> str:  # pragma: no cover - structural
        """Return a new unique identifier."""


class PersistenceOrchestrator:
    """Create, read, update, delete and search items across both substrates."""

    def __init__(
        self,
        gate: BackendAvailabilityGate,
        local: LocalItemRepository,
        *,
        clock: Clock | None = None,
        ids: IdentifierGenerator | None = None,
    ) -> None:
        """Wire the orchestrator with its gate, fallback store and collaborators."""

        self._gate = gate
        self._local = local
        self._clock = clock or SystemClock()
        self._ids = ids or UUIDGenerator()

    @property
    def gate(self) -> BackendAvailabilityGate:
        """Return the availability gate consulted on every call."""

        return self._gate

    @property
    def local(self) -> LocalItemRepository:
        """Return the local fallback repository."""

        return self._local

    async def create_folder(
        self,
        title: str,
        parent_id: str | None = None,
        *,
        icon: str | None = None,
    ) -> Item:
        """Create a folder under ``parent_id`` (root when ``None``)."""

        return await self._create(ItemKind.FOLDER, title, parent_id, icon=icon)

    async def create_note(self, title: str, parent_id: str | None = None) -> Item:
        """Create an empty note under ``parent_id`` (root when ``None``)."""

        return await self._create(ItemKind.NOTE, title, parent_id)

    async def update_item(self, item_id: str, fields: Mapping[str, Any]) -> None:
        """Merge editable ``fields`` into the item and stamp ``updated_at``."""

        changes = self._editable(item_id, fields)
        changes["updated_at"] = self._clock.now()
        result = await self._attempt(
            "update", lambda backend: backend.update(item_id, changes)
        )
        if result is not None and result.ok:
            return
        current = self._local.find(item_id)
        if current is None:
            logger.debug("Item %s not found in local storage; update skipped", item_id)
            return
        self._local.replace(current.merged(changes))

    async def move_item(self, item_id: str, parent_id: str | None) -> None:
        """Reparent ``item_id`` under ``parent_id`` (root when ``None``)."""

        await self.update_item(item_id, {"parent_id": parent_id})

    async def delete_item(self, item_id: str) -> None:
        """Delete ``item_id`` whatever its kind; children are left in place."""

        result = await self._attempt("delete", lambda backend: backend.delete(item_id))
        if result is not None and result.ok:
            return
        self._local.remove(item_id)

    async def list_children(self, parent_id: str | None = None) -> list[Item]:
        """Return the direct children of ``parent_id`` (root when ``None``)."""

        result = await self._attempt(
            "list_children", lambda backend: backend.list_children(parent_id)
        )
        if result is not None and result.ok:
            return self._decode_rows(result.data or [])
        return [item for item in self._local.all() if item.parent_id == parent_id]

    async def get_by_id(self, item_id: str) -> Item | None:
        """Return the item ``item_id`` or ``None`` when it does not exist."""

        result = await self._attempt("get", lambda backend: backend.get(item_id))
        if result is not None and result.ok:
            if result.data is None:
                return None
            decoded = self._decode_rows([result.data])
            return decoded[0] if decoded else None
        return self._local.find(item_id)

    async def search(self, text: str) -> list[Item]:
        """Return items whose title or content contains ``text`` ignoring case."""

        result = await self._attempt("search", lambda backend: backend.search(text))
        if result is not None and result.ok:
            return self._decode_rows(result.data or [])
        return [item for item in self._local.all() if item.matches(text)]

    async def get_path(self, item_id: str) -> list[Item]:
        """Return the ancestors of ``item_id`` root first, ending with the item.

        The walk stops at a parent that cannot be resolved or that was already
        visited, so dangling references and cycles yield a truncated path.
        """

        item = await self.get_by_id(item_id)
        if item is None:
            return []
        path = [item]
        seen = {item.id}
        while item.parent_id is not None and item.parent_id not in seen:
            parent = await self.get_by_id(item.parent_id)
            if parent is None:
                break
            path.append(parent)
            seen.add(parent.id)
            item = parent
        path.reverse()
        return path

    async def _create(
        self,
        kind: ItemKind,
        title: str,
        parent_id: str | None,
        *,
        icon: str | None = None,
    ) -> Item:
        timestamp = self._clock.now()
        item = Item(
            id=self._ids.new_id(),
            kind=kind,
            title=title,
            content="" if kind is ItemKind.NOTE else None,
            parent_id=parent_id,
            created_at=timestamp,
            updated_at=timestamp,
            icon=icon,
        )
        record = item.to_record()
        result = await self._attempt("insert", lambda backend: backend.insert(record))
        if result is None or not result.ok:
            self._local.append(item)
        return item

    async def _attempt(
        self,
        operation: str,
        call: Callable[[RemoteBackend], Awaitable[RemoteResult[T]]],
    ) -> RemoteResult[T] | None:
        """Run ``call`` against the remote backend.

        Returns ``None`` when the remote path is not available at all, otherwise
        the call result with unexpected adapter faults turned into failures.
        """

        if not self._gate.is_configured():
            logger.debug("Remote backend not configured; %s served locally", operation)
            return None
        backend = await self._gate.acquire()
        if backend is None:
            return None
        try:
            result = await call(backend)
        except Exception as exc:
            logger.exception("Remote %s raised unexpectedly: %s", operation, exc)
            result = RemoteResult.failure(
                RemoteCallFailed(f"{type(exc).__name__}: {exc}", operation=operation)
            )
        if not result.ok:
            logger.warning(
                "Remote %s failed, falling back to local storage: %s",
                operation,
                result.error,
            )
        return result

    @staticmethod
    def _editable(item_id: str, fields: Mapping[str, Any]) -> dict[str, Any]:
        changes: dict[str, Any] = {}
        for key, value in fields.items():
            if key in EDITABLE_FIELDS:
                changes[key] = value
            else:
                logger.warning("Ignoring non-editable field %r for item %s", key, item_id)
        return changes

    @staticmethod
    def _decode_rows(rows: list[Record]) -> list[Item]:
        items: list[Item] = []
        for row in rows:
            try:
                items.append(Item.from_record(row))
            except (TypeError, ValueError) as exc:
                logger.warning("Skipping malformed remote row: %s", exc)
        return items


__all__ = ["Clock", "IdentifierGenerator", "PersistenceOrchestrator"]


# The End
