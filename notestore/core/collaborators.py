# -*- coding: utf-8 -*-
"""
collaborators

Clock and identifier providers injected into the orchestrator.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from threading import RLock
from typing import Callable
from uuid import uuid4


class SystemClock:
    """Issue strictly increasing UTC timestamps in record format."""

    def __init__(self, source: Callable[[], datetime] | None = None) -> None:
        """Use ``source`` for wall-clock readings, defaulting to ``datetime.now``."""

        self._source = source or (lambda: datetime.now(timezone.utc))
        self._last: datetime | None = None
        self._lock = RLock()

    def now(self) -> str:
        """Return the current timestamp, never equal to a previously issued one."""

        with self._lock:
            current = self._source().astimezone(timezone.utc)
            if self._last is not None and current <= self._last:
                current = self._last + timedelta(microseconds=1)
            self._last = current
        return self.format(current)

    @staticmethod
    def format(moment: datetime) -> str:
        """Render ``moment`` in the fixed-width record format."""

        return moment.astimezone(timezone.utc).isoformat(timespec="microseconds")


class UUIDGenerator:
    """Supply opaque identifiers for newly created items."""

    def new_id(self) -> str:
        """Return a fresh universally unique identifier string."""
        return str(uuid4())


__all__ = ["SystemClock", "UUIDGenerator"]


# The End
