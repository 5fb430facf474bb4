# -*- coding: utf-8 -*-
"""
adapter

PostgREST table adapter built on ``httpx``.

Talks to a Supabase-style REST endpoint exposing the ``notes`` table under
``/rest/v1``.  Every call is one round trip; failures are returned as
``RemoteResult`` values rather than raised.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from ....core.storage.remote import Record, RemoteBackend, RemoteResult


logger = logging.getLogger(__name__)

LIKE_SPECIAL_CHARACTERS = frozenset("\\%_*")


class RestRemoteAdapter(RemoteBackend):
    """Remote backend speaking the PostgREST query dialect."""

    name = "rest"
    api_prefix = "/rest/v1"

    def __init__(
        self,
        api_url: str,
        api_key: str,
        *,
        table: str = "notes",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Build the HTTP client for ``api_url`` authenticated with ``api_key``.

        Raises:
            ValueError: If ``api_url`` is not an absolute ``http(s)`` URL or
                ``api_key`` is empty.
        """

        url = httpx.URL(api_url)
        if url.scheme not in {"http", "https"} or not url.host:
            raise ValueError(f"Invalid REST endpoint: {api_url!r}")
        if not api_key:
            raise ValueError("REST endpoint requires an API key")
        self._table = table
        self._client = httpx.AsyncClient(
            base_url=f"{str(url).rstrip('/')}{self.api_prefix}",
            headers={
                "apikey": api_key,
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    @property
    def table_path(self) -> str:
        """Return the relative path of the items table."""

        return f"/{self._table}"

    async def insert(self, record: Mapping[str, Any]) -> RemoteResult[None]:
        """POST one row."""
        result = await self._request(
            "insert",
            "POST",
            json=[dict(record)],
            headers={"Prefer": "return=minimal"},
        )
        return RemoteResult.success() if result.ok else RemoteResult.failure(result.error)

    async def update(self, item_id: str, fields: Mapping[str, Any]) -> RemoteResult[None]:
        """PATCH the row matching ``item_id``."""
        result = await self._request(
            "update",
            "PATCH",
            params={"id": f"eq.{item_id}"},
            json=dict(fields),
            headers={"Prefer": "return=minimal"},
        )
        return RemoteResult.success() if result.ok else RemoteResult.failure(result.error)

    async def delete(self, item_id: str) -> RemoteResult[None]:
        """DELETE the row matching ``item_id``."""
        result = await self._request(
            "delete",
            "DELETE",
            params={"id": f"eq.{item_id}"},
        )
        return RemoteResult.success() if result.ok else RemoteResult.failure(result.error)

    async def list_children(self, parent_id: str | None) -> RemoteResult[list[Record]]:
        """GET rows under ``parent_id`` ordered by creation time."""
        params = {
            "select": "*",
            "parent_id": "is.null" if parent_id is None else f"eq.{parent_id}",
            "order": "created_at.asc",
        }
        return await self._fetch_rows("list_children", params)

    async def get(self, item_id: str) -> RemoteResult[Record]:
        """GET at most one row matching ``item_id``."""
        rows = await self._fetch_rows(
            "get", {"select": "*", "id": f"eq.{item_id}", "limit": "1"}
        )
        if not rows.ok:
            return RemoteResult.failure(rows.error)
        return RemoteResult.success(rows.data[0] if rows.data else None)

    async def search(self, text: str) -> RemoteResult[list[Record]]:
        """GET rows whose title or content contains ``text``."""
        pattern = self.quote_pattern(text)
        params = {
            "select": "*",
            "or": f"(title.ilike.{pattern},content.ilike.{pattern})",
        }
        return await self._fetch_rows("search", params)

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    @staticmethod
    def quote_pattern(text: str) -> str:
        """Return ``text`` as a double-quoted ``ilike`` substring pattern.

        ``%``, ``_`` and ``*`` in ``text`` are escaped so they match literally;
        the result is then quoted so PostgREST keeps commas and parentheses.
        """

        literal = "".join(
            f"\\{char}" if char in LIKE_SPECIAL_CHARACTERS else char for char in text
        )
        escaped = literal.replace("\\", "\\\\").replace('"', '\\"')
        return f'"*{escaped}*"'

    async def _fetch_rows(
        self, operation: str, params: dict[str, str]
    ) -> RemoteResult[list[Record]]:
        result = await self._request(operation, "GET", params=params)
        if not result.ok:
            return RemoteResult.failure(result.error)
        response = result.data
        try:
            payload = response.json()
        except ValueError as exc:
            return RemoteResult.failure(
                f"invalid JSON payload: {exc}", operation=operation
            )
        if not isinstance(payload, list):
            return RemoteResult.failure(
                "expected a list of rows", operation=operation
            )
        return RemoteResult.success([row for row in payload if isinstance(row, dict)])

    async def _request(
        self,
        operation: str,
        method: str,
        *,
        params: dict[str, str] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> RemoteResult[httpx.Response]:
        try:
            response = await self._client.request(
                method,
                self.table_path,
                params=params,
                json=json,
                headers=headers,
            )
        except httpx.HTTPError as exc:
            return RemoteResult.failure(
                f"{type(exc).__name__}: {exc}", operation=operation
            )
        if response.status_code >= 400:
            return RemoteResult.failure(
                self._describe_error(response),
                operation=operation,
                status_code=response.status_code,
            )
        logger.debug("%s %s -> %s", method, response.request.url, response.status_code)
        return RemoteResult.success(response)

    @staticmethod
    def _describe_error(response: httpx.Response) -> str:
        try:
            payload = response.json()
        except ValueError:
            return response.text or response.reason_phrase
        if isinstance(payload, dict):
            return str(payload.get("message") or payload.get("hint") or payload)
        return str(payload)


__all__ = ["RestRemoteAdapter"]


# The End
