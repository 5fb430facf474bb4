# -*- coding: utf-8 -*-
"""
models

Item record shared by the local and remote substrates.

Folders and notes live in one identifier space and one logical collection;
``kind`` is the discriminant.  Records are serialized with the column names of
the remote ``notes`` table so both substrates store the same shape.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Mapping


class ItemKind(str, Enum):
    """Discriminant separating containers from leaves."""

    FOLDER = "folder"
    NOTE = "note"


EDITABLE_FIELDS: frozenset[str] = frozenset({"title", "content", "parent_id", "icon"})

_FIELD_ALIASES: dict[str, str] = {
    "parentId": "parent_id",
    "folderId": "parent_id",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}


@dataclass(frozen=True)
class Item:
    """Folder or note persisted by the store."""

    id: str
    kind: ItemKind
    title: str
    created_at: str
    updated_at: str
    parent_id: str | None = None
    content: str | None = None
    icon: str | None = None

    @property
    def is_folder(self) -> bool:
        """Return ``True`` for container items."""

        return self.kind is ItemKind.FOLDER

    def to_record(self) -> dict[str, Any]:
        """Return the serializable column mapping for this item."""

        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "parent_id": self.parent_id,
            "type": self.kind.value,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "icon": self.icon,
        }

    def merged(self, fields: Mapping[str, Any]) -> "Item":
        """Return a copy with editable ``fields`` and ``updated_at`` applied."""

        changes = {key: value for key, value in fields.items() if key in EDITABLE_FIELDS}
        if "updated_at" in fields:
            changes["updated_at"] = fields["updated_at"]
        return replace(self, **changes)

    def matches(self, needle: str) -> bool:
        """Return ``True`` when ``needle`` occurs in the title or content.

        An empty ``needle`` matches every item.
        """

        if not needle:
            return True
        lowered = needle.lower()
        for value in (self.title, self.content):
            if value and lowered in value.lower():
                return True
        return False

    @classmethod
    def from_record(
        cls,
        record: Mapping[str, Any],
        *,
        default_kind: ItemKind | None = None,
    ) -> "Item":
        """Decode a stored record, tolerating legacy key spellings.

        Folders written by older clients carry ``name`` rather than ``title``
        and camel-cased keys; ``default_kind`` is used when ``type`` is absent.

        Raises:
            ValueError: If the record has no identifier or an unknown type.
        """

        data = {_FIELD_ALIASES.get(key, key): value for key, value in record.items()}
        identifier = data.get("id")
        if not identifier:
            raise ValueError("Record has no identifier")
        raw_kind = data.get("type")
        if raw_kind is None:
            if default_kind is None:
                raise ValueError(f"Record {identifier!r} has no type")
            kind = default_kind
        else:
            kind = ItemKind(str(raw_kind))
        title = data.get("title")
        if title is None:
            title = data.get("name") or ""
        content = data.get("content")
        if content is None and kind is ItemKind.NOTE:
            content = ""
        created_at = str(data.get("created_at") or "")
        updated_at = str(data.get("updated_at") or created_at)
        parent_id = data.get("parent_id")
        return cls(
            id=str(identifier),
            kind=kind,
            title=str(title),
            content=content,
            parent_id=str(parent_id) if parent_id else None,
            created_at=created_at,
            updated_at=updated_at,
            icon=data.get("icon"),
        )


__all__ = ["EDITABLE_FIELDS", "Item", "ItemKind"]


# The End
