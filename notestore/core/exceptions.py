# -*- coding: utf-8 -*-
"""
exceptions

Error taxonomy for the persistence layer.

Remote failures travel as values inside ``RemoteResult``; these classes
describe them and are only raised by the outer HTTP and CLI surfaces.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations


class NoteStoreError(Exception):
    """Base class for NoteStore-specific exceptions."""

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or "")
        self.detail = detail


class RemoteUnavailable(NoteStoreError):
    """The remote backend is not configured or its client cannot be built."""


class RemoteCallFailed(NoteStoreError):
    """A network or service error occurred during a remote operation."""

    def __init__(
        self,
        detail: str | None = None,
        *,
        operation: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(detail)
        self.operation = operation
        self.status_code = status_code

    def __str__(self) -> str:
        parts = [self.detail or "remote call failed"]
        if self.operation:
            parts.insert(0, f"{self.operation}:")
        if self.status_code is not None:
            parts.append(f"(HTTP {self.status_code})")
        return " ".join(parts)


class LocalCorrupt(NoteStoreError):
    """A local collection payload could not be decoded."""


class ItemNotFound(NoteStoreError):
    """No item exists with the requested identifier."""


__all__ = [
    "ItemNotFound",
    "LocalCorrupt",
    "NoteStoreError",
    "RemoteCallFailed",
    "RemoteUnavailable",
]


# The End
