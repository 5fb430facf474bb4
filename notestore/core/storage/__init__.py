# -*- coding: utf-8 -*-
"""
__init__

Local and remote storage substrates for items.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .local import (
    FOLDERS_COLLECTION,
    NOTES_COLLECTION,
    KeyValueSurface,
    LocalFallbackStore,
    LocalItemRepository,
)
from .remote import Record, RemoteBackend, RemoteResult

__all__ = [
    "FOLDERS_COLLECTION",
    "KeyValueSurface",
    "LocalFallbackStore",
    "LocalItemRepository",
    "NOTES_COLLECTION",
    "Record",
    "RemoteBackend",
    "RemoteResult",
]

# The End
