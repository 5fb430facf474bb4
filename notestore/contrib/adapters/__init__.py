# -*- coding: utf-8 -*-
"""
__init__

Registry selecting a remote adapter from the configured endpoint.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Callable
from urllib.parse import urlsplit

from ...conf import NoteStoreSettings
from ...core.storage.remote import RemoteBackend

AdapterBuilder = Callable[[NoteStoreSettings], RemoteBackend]


def _build_rest(settings: NoteStoreSettings) -> RemoteBackend:
    from .rest import RestRemoteAdapter

    return RestRemoteAdapter(
        settings.api_url,
        settings.api_key,
        table=settings.remote_table,
        timeout=settings.request_timeout,
    )


def _build_tortoise(settings: NoteStoreSettings) -> RemoteBackend:
    from .tortoise import TortoiseRemoteAdapter

    return TortoiseRemoteAdapter(
        settings.api_url,
        settings.api_key,
        table=settings.remote_table,
        generate_schema=settings.generate_schema,
    )


class RemoteBackendFactory:
    """Map URL schemes to adapter builders."""

    def __init__(self) -> None:
        """Register the adapters shipped with the package."""

        self._builders: dict[str, AdapterBuilder] = {}
        self.register(("http", "https"), _build_rest)
        self.register(
            ("sqlite", "postgres", "asyncpg", "psycopg", "mysql", "mssql", "oracle"),
            _build_tortoise,
        )

    def register(self, schemes: tuple[str, ...], builder: AdapterBuilder) -> None:
        """Use ``builder`` for every URL scheme in ``schemes``."""
        for scheme in schemes:
            self._builders[scheme.lower()] = builder

    def build(self, settings: NoteStoreSettings) -> RemoteBackend:
        """Return an adapter for ``settings.api_url``.

        Raises:
            ValueError: If no adapter handles the URL scheme or the adapter
                rejects the configuration.
        """
        scheme = urlsplit(settings.api_url).scheme.lower()
        try:
            builder = self._builders[scheme]
        except KeyError as exc:
            raise ValueError(f"No remote adapter registered for scheme {scheme!r}") from exc
        return builder(settings)


__all__ = ["AdapterBuilder", "RemoteBackendFactory"]


# The End
