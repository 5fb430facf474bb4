# -*- coding: utf-8 -*-
"""
Tests package exports.

Expose shared test doubles for external imports.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from .stubs import (
    FailingBackend,
    InMemoryBackend,
    RaisingBackend,
    StaticFactory,
    build_orchestrator,
)

__all__ = [
    "FailingBackend",
    "InMemoryBackend",
    "RaisingBackend",
    "StaticFactory",
    "build_orchestrator",
]


# The End
