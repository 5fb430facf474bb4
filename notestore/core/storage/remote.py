# -*- coding: utf-8 -*-
"""
remote

Contract implemented by remote backend adapters.

Adapters never raise for network or service failures: every operation
returns a ``RemoteResult`` carrying either data or a ``RemoteCallFailed``.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, Mapping, TypeVar

from ..exceptions import RemoteCallFailed


T = TypeVar("T")

Record = dict[str, Any]


@dataclass(frozen=True)
class RemoteResult(Generic[T]):
    """Outcome of a single remote round trip."""

    data: T | None = None
    error: RemoteCallFailed | None = None

    @property
    def ok(self) -> bool:
        """Return ``True`` when the call succeeded."""

        return self.error is None

    @classmethod
    def success(cls, data: T | None = None) -> "RemoteResult[T]":
        """Wrap a successful payload."""

        return cls(data=data)

    @classmethod
    def failure(
        cls,
        detail: str | RemoteCallFailed,
        *,
        operation: str | None = None,
        status_code: int | None = None,
    ) -> "RemoteResult[T]":
        """Wrap an error descriptor."""

        if isinstance(detail, RemoteCallFailed):
            return cls(error=detail)
        return cls(
            error=RemoteCallFailed(detail, operation=operation, status_code=status_code)
        )


class RemoteBackend(ABC):
    """Single flat table of folders and notes reachable over the network."""

    name: str = "remote"

    @abstractmethod
    async def insert(self, record: Mapping[str, Any]) -> RemoteResult[None]:
        """Insert one row."""

    @abstractmethod
    async def update(self, item_id: str, fields: Mapping[str, Any]) -> RemoteResult[None]:
        """Apply a partial field set to the row ``item_id``."""

    @abstractmethod
    async def delete(self, item_id: str) -> RemoteResult[None]:
        """Delete the row ``item_id``."""

    @abstractmethod
    async def list_children(self, parent_id: str | None) -> RemoteResult[list[Record]]:
        """Return rows whose ``parent_id`` equals ``parent_id`` by ``created_at``."""

    @abstractmethod
    async def get(self, item_id: str) -> RemoteResult[Record]:
        """Return the row ``item_id`` or ``None`` when absent."""

    @abstractmethod
    async def search(self, text: str) -> RemoteResult[list[Record]]:
        """Return rows whose title or content contains ``text`` ignoring case."""

    async def aclose(self) -> None:
        """Release client resources held by the adapter."""


__all__ = ["Record", "RemoteBackend", "RemoteResult"]


# The End
