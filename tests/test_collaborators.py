# -*- coding: utf-8 -*-
"""
test_collaborators

Tests for the clock and identifier providers.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from datetime import datetime, timezone

from notestore.core.collaborators import SystemClock, UUIDGenerator


def test_clock_formats_utc_with_microseconds() -> None:
    """Timestamps use one fixed-width ISO-8601 layout."""

    moment = datetime(2026, 10, 17, 9, 15, 2, tzinfo=timezone.utc)
    clock = SystemClock(source=lambda: moment)

    assert clock.now() == "2026-10-17T09:15:02.000000+00:00"


def test_clock_never_repeats_a_timestamp() -> None:
    """Frozen or backwards wall clocks still yield increasing stamps."""

    moment = datetime(2026, 10, 17, 9, 15, 2, tzinfo=timezone.utc)
    clock = SystemClock(source=lambda: moment)

    stamps = [clock.now() for _ in range(3)]

    assert stamps == sorted(stamps)
    assert len(set(stamps)) == 3
    assert stamps[-1] == "2026-10-17T09:15:02.000002+00:00"


def test_identifiers_are_unique() -> None:
    """Each call yields a distinct identifier."""

    generator = UUIDGenerator()

    assert len({generator.new_id() for _ in range(50)}) == 50


# The End
