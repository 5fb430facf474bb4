# -*- coding: utf-8 -*-
"""
items

HTTP endpoints exposing the persistence orchestrator.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from dataclasses import asdict, replace
from typing import Any

from fastapi import APIRouter, Body, HTTPException, Query, Response

from ..conf import NoteStoreSettings
from ..core.exceptions import ItemNotFound
from ..core.models import Item
from ..core.orchestrator import PersistenceOrchestrator


class ItemsAPI:
    """Build an ``APIRouter`` serving folders, notes and database settings."""

    SETTINGS_FIELDS = ("api_url", "api_key", "remote_table", "request_timeout")

    def __init__(self, orchestrator: PersistenceOrchestrator) -> None:
        """Bind the views to ``orchestrator``."""

        self._logger = logging.getLogger(__name__)
        self._orchestrator = orchestrator
        self.router = APIRouter()
        self._register_routes()

    @staticmethod
    def serialize(item: Item) -> dict[str, Any]:
        """Return the JSON representation of ``item``."""

        return item.to_record()

    async def _require(self, item_id: str) -> Item:
        item = await self._orchestrator.get_by_id(item_id)
        if item is None:
            error = ItemNotFound(f"Item '{item_id}' not found")
            raise HTTPException(status_code=404, detail=error.detail)
        return item

    @staticmethod
    def _title(payload: dict[str, Any]) -> str:
        title = payload.get("title")
        if not isinstance(title, str) or not title.strip():
            raise HTTPException(status_code=400, detail="Missing param 'title'")
        return title

    @staticmethod
    def _parent(payload: dict[str, Any]) -> str | None:
        parent_id = payload.get("parent_id")
        if parent_id is not None and not isinstance(parent_id, str):
            raise HTTPException(status_code=400, detail="Invalid type for param 'parent_id'")
        return parent_id or None

    def _register_routes(self) -> None:
        router = self.router
        orchestrator = self._orchestrator

        @router.get("/items")
        async def list_items(parent_id: str | None = Query(default=None)) -> list[dict[str, Any]]:
            items = await orchestrator.list_children(parent_id or None)
            return [self.serialize(item) for item in items]

        @router.post("/folders", status_code=201)
        async def create_folder(payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
            icon = payload.get("icon")
            item = await orchestrator.create_folder(
                self._title(payload),
                self._parent(payload),
                icon=icon if isinstance(icon, str) else None,
            )
            return self.serialize(item)

        @router.post("/notes", status_code=201)
        async def create_note(payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
            item = await orchestrator.create_note(
                self._title(payload), self._parent(payload)
            )
            return self.serialize(item)

        @router.get("/items/{item_id}")
        async def get_item(item_id: str) -> dict[str, Any]:
            return self.serialize(await self._require(item_id))

        @router.get("/items/{item_id}/path")
        async def get_item_path(item_id: str) -> list[dict[str, Any]]:
            await self._require(item_id)
            path = await orchestrator.get_path(item_id)
            return [
                {"id": item.id, "title": item.title, "type": item.kind.value}
                for item in path
            ]

        @router.patch("/items/{item_id}")
        async def update_item(
            item_id: str, payload: dict[str, Any] = Body(...)
        ) -> dict[str, Any]:
            await self._require(item_id)
            await orchestrator.update_item(item_id, payload)
            return self.serialize(await self._require(item_id))

        @router.post("/items/{item_id}/move")
        async def move_item(
            item_id: str, payload: dict[str, Any] = Body(...)
        ) -> dict[str, Any]:
            await self._require(item_id)
            await orchestrator.move_item(item_id, self._parent(payload))
            return self.serialize(await self._require(item_id))

        @router.delete("/items/{item_id}", status_code=204)
        async def delete_item(item_id: str) -> Response:
            await orchestrator.delete_item(item_id)
            return Response(status_code=204)

        @router.get("/search")
        async def search(q: str = Query(..., min_length=1)) -> list[dict[str, Any]]:
            items = await orchestrator.search(q)
            return [self.serialize(item) for item in items]

        @router.get("/settings/database")
        async def read_settings() -> dict[str, Any]:
            return self._settings_payload(orchestrator.gate.settings)

        @router.put("/settings/database")
        async def write_settings(payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
            payload = {name: value for name, value in payload.items() if name != "state"}
            unexpected = [name for name in payload if name not in self.SETTINGS_FIELDS]
            if unexpected:
                raise HTTPException(
                    status_code=400, detail=f"Unexpected param '{unexpected[0]}'"
                )
            current = orchestrator.gate.settings
            changes = self._settings_changes(payload)
            if current.api_key and changes.get("api_key") == current.masked().api_key:
                changes["api_key"] = current.api_key
            try:
                updated = replace(current, **changes)
            except (TypeError, ValueError) as exc:
                raise HTTPException(status_code=400, detail=str(exc)) from exc
            orchestrator.gate.reconfigure(updated)
            self._logger.info(
                "Database settings updated; remote configured=%s",
                updated.remote_configured,
            )
            return self._settings_payload(updated)

    def _settings_changes(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Validate the settings ``payload`` and coerce the timeout."""

        changes: dict[str, Any] = {}
        for name, value in payload.items():
            if name == "request_timeout":
                if isinstance(value, bool) or not isinstance(value, (int, float, str)):
                    raise HTTPException(
                        status_code=400, detail=f"Invalid type for param '{name}'"
                    )
                try:
                    changes[name] = float(value)
                except ValueError as exc:
                    raise HTTPException(status_code=400, detail=str(exc)) from exc
            elif isinstance(value, str):
                changes[name] = value
            else:
                raise HTTPException(
                    status_code=400, detail=f"Invalid type for param '{name}'"
                )
        return changes

    def _settings_payload(self, settings: NoteStoreSettings) -> dict[str, Any]:
        masked = asdict(settings.masked())
        payload = {name: masked[name] for name in self.SETTINGS_FIELDS}
        payload["state"] = (
            "configured" if settings.remote_configured else "unconfigured"
        )
        return payload


__all__ = ["ItemsAPI"]


# The End
