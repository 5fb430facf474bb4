# -*- coding: utf-8 -*-
"""
commands

Click command factories for the notestore CLI.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import asyncio
from dataclasses import replace
from typing import Any, Optional

import click

from ...conf import NoteStoreSettings, SettingsManager
from ...core.models import Item
from ...core.orchestrator import PersistenceOrchestrator
from ...hub import NoteStoreHub


class SessionOptions:
    """Carry the group-level options shared by every command."""

    def __init__(
        self,
        *,
        local_store: Optional[str] = None,
        api_url: Optional[str] = None,
        api_key: Optional[str] = None,
    ) -> None:
        """Record overrides applied on top of the environment settings."""
        self.local_store = local_store
        self.api_url = api_url
        self.api_key = api_key

    def settings(self) -> NoteStoreSettings:
        """Return environment settings with command line overrides applied."""
        settings = NoteStoreSettings.from_env()
        overrides: dict[str, Any] = {}
        if self.local_store:
            overrides["local_store_path"] = self.local_store
        if self.api_url is not None:
            overrides["api_url"] = self.api_url
        if self.api_key is not None:
            overrides["api_key"] = self.api_key
        return replace(settings, **overrides) if overrides else settings


class ItemCommand:
    """Base class turning an async orchestrator call into a Click command."""

    name: str = ""
    help: str = ""

    def params(self) -> list[click.Parameter]:
        """Return the Click parameters accepted by the command."""
        return []

    async def run(self, orchestrator: PersistenceOrchestrator, **kwargs: Any) -> None:
        """Perform the command against ``orchestrator``."""
        raise NotImplementedError

    def execute(self, **kwargs: Any) -> None:
        """Build a hub for the invocation and run the command to completion."""
        ctx = click.get_current_context()
        options = ctx.find_object(SessionOptions) or SessionOptions()
        asyncio.run(self._run_with_hub(options.settings(), kwargs))

    def to_click_command(self) -> click.Command:
        """Return the Click command bound to :meth:`execute`."""
        return click.Command(
            name=self.name,
            callback=self.execute,
            params=self.params(),
            help=self.help,
        )

    async def _run_with_hub(
        self, settings: NoteStoreSettings, kwargs: dict[str, Any]
    ) -> None:
        hub = NoteStoreHub(settings, manager=SettingsManager())
        try:
            await self.run(hub.orchestrator, **kwargs)
        finally:
            await hub.aclose()

    @staticmethod
    def echo_item(item: Item) -> None:
        """Print a one-line summary of ``item``."""
        marker = "[dir]" if item.is_folder else "     "
        click.echo(f"{marker} {item.id}  {item.title}")

    @staticmethod
    def fail_missing(item_id: str) -> None:
        """Abort with a non-zero exit status for an unknown ``item_id``."""
        click.secho(f"Item '{item_id}' not found", fg="red", err=True)
        raise click.exceptions.Exit(1)


class ListCommand(ItemCommand):
    """Produce the `ls` command."""

    name = "ls"
    help = "List the items inside PARENT (root when omitted)."

    def params(self) -> list[click.Parameter]:
        return [click.Argument(["parent"], required=False)]

    async def run(self, orchestrator: PersistenceOrchestrator, **kwargs: Any) -> None:
        for item in await orchestrator.list_children(kwargs.get("parent")):
            self.echo_item(item)


class MakeFolderCommand(ItemCommand):
    """Produce the `mkdir` command."""

    name = "mkdir"
    help = "Create a folder."

    def params(self) -> list[click.Parameter]:
        return [
            click.Argument(["title"], required=True),
            click.Option(["--parent"], help="Identifier of the containing folder"),
            click.Option(["--icon"], help="Icon displayed next to the folder"),
        ]

    async def run(self, orchestrator: PersistenceOrchestrator, **kwargs: Any) -> None:
        item = await orchestrator.create_folder(
            kwargs["title"], kwargs.get("parent"), icon=kwargs.get("icon")
        )
        click.secho(item.id, fg="green")


class NewNoteCommand(ItemCommand):
    """Produce the `new` command."""

    name = "new"
    help = "Create an empty note."

    def params(self) -> list[click.Parameter]:
        return [
            click.Argument(["title"], required=True),
            click.Option(["--parent"], help="Identifier of the containing folder"),
        ]

    async def run(self, orchestrator: PersistenceOrchestrator, **kwargs: Any) -> None:
        item = await orchestrator.create_note(kwargs["title"], kwargs.get("parent"))
        click.secho(item.id, fg="green")


class ShowCommand(ItemCommand):
    """Produce the `show` command."""

    name = "show"
    help = "Print an item and its content."

    def params(self) -> list[click.Parameter]:
        return [click.Argument(["item_id"], required=True)]

    async def run(self, orchestrator: PersistenceOrchestrator, **kwargs: Any) -> None:
        item = await orchestrator.get_by_id(kwargs["item_id"])
        if item is None:
            self.fail_missing(kwargs["item_id"])
            return
        click.echo(f"id:       {item.id}")
        click.echo(f"type:     {item.kind.value}")
        click.echo(f"title:    {item.title}")
        click.echo(f"parent:   {item.parent_id or '-'}")
        click.echo(f"created:  {item.created_at}")
        click.echo(f"updated:  {item.updated_at}")
        if item.content:
            click.echo("")
            click.echo(item.content)


class EditCommand(ItemCommand):
    """Produce the `edit` command."""

    name = "edit"
    help = "Change the title or content of an item."

    def params(self) -> list[click.Parameter]:
        return [
            click.Argument(["item_id"], required=True),
            click.Option(["--title"], help="New title"),
            click.Option(["--content"], help="New note content"),
        ]

    async def run(self, orchestrator: PersistenceOrchestrator, **kwargs: Any) -> None:
        fields = {
            name: kwargs[name]
            for name in ("title", "content")
            if kwargs.get(name) is not None
        }
        if not fields:
            click.secho("Nothing to change", fg="yellow")
            return
        if await orchestrator.get_by_id(kwargs["item_id"]) is None:
            self.fail_missing(kwargs["item_id"])
            return
        await orchestrator.update_item(kwargs["item_id"], fields)
        click.secho("Updated", fg="green")


class MoveCommand(ItemCommand):
    """Produce the `mv` command."""

    name = "mv"
    help = "Move an item into PARENT (root when omitted)."

    def params(self) -> list[click.Parameter]:
        return [
            click.Argument(["item_id"], required=True),
            click.Argument(["parent"], required=False),
        ]

    async def run(self, orchestrator: PersistenceOrchestrator, **kwargs: Any) -> None:
        if await orchestrator.get_by_id(kwargs["item_id"]) is None:
            self.fail_missing(kwargs["item_id"])
            return
        await orchestrator.move_item(kwargs["item_id"], kwargs.get("parent"))
        click.secho("Moved", fg="green")


class RemoveCommand(ItemCommand):
    """Produce the `rm` command."""

    name = "rm"
    help = "Delete an item. Children of a folder are kept."

    def params(self) -> list[click.Parameter]:
        return [click.Argument(["item_id"], required=True)]

    async def run(self, orchestrator: PersistenceOrchestrator, **kwargs: Any) -> None:
        await orchestrator.delete_item(kwargs["item_id"])
        click.secho("Deleted", fg="green")


class FindCommand(ItemCommand):
    """Produce the `find` command."""

    name = "find"
    help = "Search titles and contents, ignoring case."

    def params(self) -> list[click.Parameter]:
        return [click.Argument(["text"], required=True)]

    async def run(self, orchestrator: PersistenceOrchestrator, **kwargs: Any) -> None:
        for item in await orchestrator.search(kwargs["text"]):
            self.echo_item(item)


class PathCommand(ItemCommand):
    """Produce the `path` command."""

    name = "path"
    help = "Print the folder path leading to an item."

    def params(self) -> list[click.Parameter]:
        return [click.Argument(["item_id"], required=True)]

    async def run(self, orchestrator: PersistenceOrchestrator, **kwargs: Any) -> None:
        path = await orchestrator.get_path(kwargs["item_id"])
        if not path:
            self.fail_missing(kwargs["item_id"])
            return
        click.echo(" / ".join(item.title for item in path))


__all__ = [
    "EditCommand",
    "FindCommand",
    "ItemCommand",
    "ListCommand",
    "MakeFolderCommand",
    "MoveCommand",
    "NewNoteCommand",
    "PathCommand",
    "RemoveCommand",
    "SessionOptions",
    "ShowCommand",
]


# The End
