# -*- coding: utf-8 -*-
"""
adapter

Tortoise ORM backed remote adapter.

Lets the items table live in any database Tortoise can reach
(PostgreSQL, MySQL, SQLite).  The connection is established lazily on the
first operation so building the adapter never touches the network.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Mapping, TypeVar
from urllib.parse import quote, urlsplit, urlunsplit

from tortoise import Tortoise
from tortoise.exceptions import BaseORMException
from tortoise.expressions import Q

from ....core.storage.remote import Record, RemoteBackend, RemoteResult
from .models import ItemRecord


logger = logging.getLogger(__name__)

T = TypeVar("T")

DATABASE_SCHEMES: frozenset[str] = frozenset(
    {"sqlite", "postgres", "asyncpg", "psycopg", "mysql", "mssql", "oracle"}
)
MODELS_MODULE = "notestore.contrib.adapters.tortoise.models"


class TortoiseRemoteAdapter(RemoteBackend):
    """Remote backend issuing SQL through Tortoise ORM."""

    name = "tortoise"
    app_label = "notestore"

    def __init__(
        self,
        db_url: str,
        api_key: str = "",
        *,
        table: str = "notes",
        generate_schema: bool = False,
    ) -> None:
        """Store connection parameters for deferred initialization.

        Raises:
            ValueError: If ``db_url`` does not use a supported database scheme.
        """

        scheme = urlsplit(db_url).scheme.lower()
        if scheme not in DATABASE_SCHEMES:
            raise ValueError(f"Unsupported database URL scheme: {scheme!r}")
        self._db_url = self.with_password(db_url, api_key)
        self._table = table
        self._generate_schema = generate_schema
        self._ready = False
        self._init_lock = asyncio.Lock()

    @staticmethod
    def with_password(db_url: str, password: str) -> str:
        """Insert ``password`` into ``db_url`` when it names a user without one."""

        parts = urlsplit(db_url)
        if not password or not parts.username or parts.password:
            return db_url
        host = parts.hostname or ""
        if parts.port:
            host = f"{host}:{parts.port}"
        netloc = f"{parts.username}:{quote(password, safe='')}@{host}"
        return urlunsplit((parts.scheme, netloc, parts.path, parts.query, parts.fragment))

    async def insert(self, record: Mapping[str, Any]) -> RemoteResult[None]:
        """Create one row."""
        return await self._call("insert", lambda: ItemRecord.create(**dict(record)))

    async def update(self, item_id: str, fields: Mapping[str, Any]) -> RemoteResult[None]:
        """Update the row ``item_id`` with ``fields``."""
        return await self._call(
            "update", lambda: ItemRecord.filter(id=item_id).update(**dict(fields))
        )

    async def delete(self, item_id: str) -> RemoteResult[None]:
        """Delete the row ``item_id``."""
        return await self._call("delete", lambda: ItemRecord.filter(id=item_id).delete())

    async def list_children(self, parent_id: str | None) -> RemoteResult[list[Record]]:
        """Return rows under ``parent_id`` ordered by creation time."""

        def query() -> Awaitable[list[Record]]:
            if parent_id is None:
                queryset = ItemRecord.filter(parent_id__isnull=True)
            else:
                queryset = ItemRecord.filter(parent_id=parent_id)
            return queryset.order_by("created_at").values()

        return await self._call("list_children", query)

    async def get(self, item_id: str) -> RemoteResult[Record]:
        """Return the row ``item_id`` or ``None``."""
        result = await self._call(
            "get", lambda: ItemRecord.filter(id=item_id).limit(1).values()
        )
        if not result.ok:
            return RemoteResult.failure(result.error)
        return RemoteResult.success(result.data[0] if result.data else None)

    async def search(self, text: str) -> RemoteResult[list[Record]]:
        """Return rows whose title or content contains ``text``."""
        return await self._call(
            "search",
            lambda: ItemRecord.filter(
                Q(title__icontains=text) | Q(content__icontains=text)
            )
            .order_by("created_at")
            .values(),
        )

    async def aclose(self) -> None:
        """Close database connections opened by the adapter."""
        if not self._ready:
            return
        self._ready = False
        try:
            await Tortoise.close_connections()
        except (BaseORMException, OSError) as exc:  # pragma: no cover - runtime guard
            logger.warning("Failed to close database connections: %s", exc)

    async def _ensure_ready(self) -> None:
        async with self._init_lock:
            if self._ready:
                return
            ItemRecord._meta.db_table = self._table
            await Tortoise.init(
                db_url=self._db_url,
                modules={self.app_label: [MODELS_MODULE]},
            )
            if self._generate_schema:
                await Tortoise.generate_schemas(safe=True)
            self._ready = True

    async def _call(
        self, operation: str, action: Callable[[], Awaitable[T]]
    ) -> RemoteResult[T]:
        try:
            await self._ensure_ready()
            data = await action()
        except (BaseORMException, OSError) as exc:
            return RemoteResult.failure(
                f"{type(exc).__name__}: {exc}", operation=operation
            )
        if operation in {"insert", "update", "delete"}:
            return RemoteResult.success()
        return RemoteResult.success(data)


__all__ = ["DATABASE_SCHEMES", "TortoiseRemoteAdapter"]


# The End
