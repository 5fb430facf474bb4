# -*- coding: utf-8 -*-
"""
cli

Click entry point for the notestore toolkit.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Optional

import click

from .commands import (
    EditCommand,
    FindCommand,
    ItemCommand,
    ListCommand,
    MakeFolderCommand,
    MoveCommand,
    NewNoteCommand,
    PathCommand,
    RemoveCommand,
    SessionOptions,
    ShowCommand,
)


class NoteStoreCLI:
    """Aggregate all CLI commands exposed by the package."""

    def __init__(self) -> None:
        """Create command instances required to build the CLI group."""
        self._commands: list[ItemCommand] = [
            ListCommand(),
            MakeFolderCommand(),
            NewNoteCommand(),
            ShowCommand(),
            EditCommand(),
            MoveCommand(),
            RemoveCommand(),
            FindCommand(),
            PathCommand(),
        ]

    def configure_session(
        self,
        local_store: Optional[str],
        api_url: Optional[str],
        api_key: Optional[str],
        verbose: bool,
    ) -> None:
        """Store session options on the Click context and set up logging."""
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )
        ctx = click.get_current_context()
        ctx.obj = SessionOptions(
            local_store=local_store, api_url=api_url, api_key=api_key
        )

    def create_cli(self) -> click.Group:
        """Build the Click group with all registered commands."""
        group = click.Group(
            name="notestore",
            callback=self.configure_session,
            params=[
                click.Option(
                    ["--local-store"],
                    envvar="NOTESTORE_LOCAL_STORE_PATH",
                    help="SQLite file holding the local fallback collections",
                ),
                click.Option(["--api-url"], help="Remote backend URL"),
                click.Option(["--api-key"], help="Remote backend API key"),
                click.Option(["-v", "--verbose"], is_flag=True, help="Enable debug logging"),
            ],
            help="Manage folders and notes from the command line.",
        )
        for command in self._commands:
            group.add_command(command.to_click_command())
        return group


cli = NoteStoreCLI().create_cli()


# The End
