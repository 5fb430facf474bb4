# -*- coding: utf-8 -*-
"""
__init__

Hierarchical folder and note persistence with local fallback.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .conf import NoteStoreSettings, configure, current_settings
from .core.models import Item, ItemKind
from .core.orchestrator import PersistenceOrchestrator
from .hub import NoteStoreHub

__version__ = "0.1.0"

__all__ = [
    "Item",
    "ItemKind",
    "NoteStoreHub",
    "NoteStoreSettings",
    "PersistenceOrchestrator",
    "__version__",
    "configure",
    "current_settings",
]

# The End
