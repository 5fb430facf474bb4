# -*- coding: utf-8 -*-
"""
__init__

Core persistence primitives.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .exceptions import (
    ItemNotFound,
    LocalCorrupt,
    NoteStoreError,
    RemoteCallFailed,
    RemoteUnavailable,
)
from .models import Item, ItemKind

__all__ = [
    "Item",
    "ItemKind",
    "ItemNotFound",
    "LocalCorrupt",
    "NoteStoreError",
    "RemoteCallFailed",
    "RemoteUnavailable",
]

# The End
