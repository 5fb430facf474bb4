# -*- coding: utf-8 -*-
"""
local

On-device fallback storage for items.

``LocalFallbackStore`` keeps each named collection as one JSON document in a
key/value surface and never raises: unreadable payloads are logged and
replaced by an empty collection.  ``LocalItemRepository`` presents the
``folders`` and ``notes`` partitions as a single record store keyed by
``Item.kind``.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import json
import logging
from typing import Iterable, Protocol, runtime_checkable

from ..exceptions import LocalCorrupt
from ..models import Item, ItemKind


logger = logging.getLogger(__name__)

FOLDERS_COLLECTION = "folders"
NOTES_COLLECTION = "notes"

_COLLECTION_KINDS: dict[str, ItemKind] = {
    FOLDERS_COLLECTION: ItemKind.FOLDER,
    NOTES_COLLECTION: ItemKind.NOTE,
}


@runtime_checkable
class KeyValueSurface(Protocol):
    """Synchronous persistent text storage keyed by collection name."""

    def get(self, key: str) -> str | None:  # pragma: no cover - structural
        """Return the text stored under ``key`` or ``None``."""

    def set(self, key: str, value: str) -> None:  # pragma: no cover - structural
        """Store ``value`` under ``key``."""


class LocalFallbackStore:
    """Typed load/save of item collections that never raises."""

    def __init__(self, surface: KeyValueSurface) -> None:
        """Bind the store to the key/value ``surface`` holding collections."""

        self._surface = surface

    @property
    def surface(self) -> KeyValueSurface:
        """Return the key/value surface backing the store."""

        return self._surface

    def load(self, collection: str) -> list[Item]:
        """Return the items of ``collection`` or an empty list on any failure."""

        try:
            payload = self._surface.get(collection)
        except Exception as exc:
            logger.exception("Error loading %s from local storage: %s", collection, exc)
            return []
        if payload is None:
            return []
        try:
            records = self._decode(collection, payload)
        except LocalCorrupt as exc:
            logger.warning("Local collection %s is unreadable: %s", collection, exc)
            return []
        items: list[Item] = []
        default_kind = _COLLECTION_KINDS.get(collection)
        for record in records:
            try:
                items.append(Item.from_record(record, default_kind=default_kind))
            except (TypeError, ValueError) as exc:
                logger.warning("Skipping malformed record in %s: %s", collection, exc)
        return items

    def save(self, collection: str, items: Iterable[Item]) -> bool:
        """Overwrite ``collection`` with ``items`` and report success."""

        try:
            payload = json.dumps(
                [item.to_record() for item in items], ensure_ascii=False
            )
            self._surface.set(collection, payload)
        except Exception as exc:
            logger.exception("Error saving %s to local storage: %s", collection, exc)
            return False
        return True

    @staticmethod
    def _decode(collection: str, payload: str) -> list[dict]:
        try:
            data = json.loads(payload)
        except (TypeError, ValueError) as exc:
            raise LocalCorrupt(f"{collection}: {exc}") from exc
        if not isinstance(data, list):
            raise LocalCorrupt(f"{collection}: expected a list, got {type(data).__name__}")
        return [record for record in data if isinstance(record, dict)]


class LocalItemRepository:
    """One logical item store physically partitioned by ``kind``."""

    def __init__(self, store: LocalFallbackStore) -> None:
        """Wrap ``store`` which persists the individual partitions."""

        self._store = store

    @property
    def store(self) -> LocalFallbackStore:
        """Return the underlying collection store."""

        return self._store

    @staticmethod
    def collection_for(kind: ItemKind) -> str:
        """Return the partition name holding items of ``kind``."""

        return FOLDERS_COLLECTION if kind is ItemKind.FOLDER else NOTES_COLLECTION

    def all(self) -> list[Item]:
        """Return every stored item, notes first, in storage order."""

        return self._store.load(NOTES_COLLECTION) + self._store.load(FOLDERS_COLLECTION)

    def find(self, item_id: str) -> Item | None:
        """Return the item with ``item_id`` or ``None``."""

        for item in self.all():
            if item.id == item_id:
                return item
        return None

    def append(self, item: Item) -> None:
        """Add ``item`` to the end of its partition."""

        collection = self.collection_for(item.kind)
        items = self._store.load(collection)
        items.append(item)
        self._store.save(collection, items)

    def replace(self, item: Item) -> bool:
        """Rewrite the partition holding ``item``; return ``False`` if absent."""

        preferred = self.collection_for(item.kind)
        ordered = [preferred] + [
            name for name in (NOTES_COLLECTION, FOLDERS_COLLECTION) if name != preferred
        ]
        for collection in ordered:
            items = self._store.load(collection)
            for index, existing in enumerate(items):
                if existing.id == item.id:
                    items[index] = item
                    self._store.save(collection, items)
                    return True
        return False

    def remove(self, item_id: str) -> None:
        """Drop ``item_id`` from every partition, rewriting each of them."""

        for collection in (NOTES_COLLECTION, FOLDERS_COLLECTION):
            items = self._store.load(collection)
            self._store.save(
                collection, [item for item in items if item.id != item_id]
            )


__all__ = [
    "FOLDERS_COLLECTION",
    "KeyValueSurface",
    "LocalFallbackStore",
    "LocalItemRepository",
    "NOTES_COLLECTION",
]


# The End
