# -*- coding: utf-8 -*-
"""
test_gate

Tests for the backend availability gate.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import pytest

from notestore.conf import NoteStoreSettings, SettingsManager
from notestore.contrib.adapters import RemoteBackendFactory
from notestore.contrib.adapters.rest import RestRemoteAdapter
from notestore.contrib.adapters.tortoise import TortoiseRemoteAdapter
from notestore.core.gate import BackendAvailabilityGate, GateState
from tests.stubs import CONFIGURED, ExplodingFactory, InMemoryBackend, StaticFactory


def _manager(**options) -> SettingsManager:
    return SettingsManager(NoteStoreSettings(local_store_path=":memory:", **options))


class TestBackendAvailabilityGate:
    """Exercise configuration checks and client lifecycle."""

    @pytest.mark.asyncio
    async def test_unconfigured_gate_never_builds_a_client(self) -> None:
        factory = StaticFactory(InMemoryBackend())
        gate = BackendAvailabilityGate(_manager(), factory=factory)

        assert gate.state is GateState.UNCONFIGURED
        assert await gate.acquire() is None
        assert factory.builds == []

    @pytest.mark.asyncio
    async def test_configured_gate_caches_its_client(self) -> None:
        backend = InMemoryBackend()
        factory = StaticFactory(backend)
        gate = BackendAvailabilityGate(_manager(**CONFIGURED), factory=factory)

        assert gate.is_configured()
        assert await gate.acquire() is backend
        assert await gate.acquire() is backend
        assert len(factory.builds) == 1

    @pytest.mark.asyncio
    async def test_reconfigure_resets_and_closes_previous_client(self) -> None:
        first, second = InMemoryBackend(), InMemoryBackend()
        factory = StaticFactory(first, second)
        manager = _manager(**CONFIGURED)
        gate = BackendAvailabilityGate(manager, factory=factory)
        assert await gate.acquire() is first

        gate.reconfigure(
            NoteStoreSettings(api_url="https://other.example", api_key="other-key")
        )

        assert await gate.acquire() is second
        assert first.closed is True
        assert factory.builds[-1].api_url == "https://other.example"

    @pytest.mark.asyncio
    async def test_gate_reflects_latest_configuration(self) -> None:
        manager = _manager(**CONFIGURED)
        gate = BackendAvailabilityGate(manager, factory=StaticFactory(InMemoryBackend()))
        assert gate.is_configured()

        manager.configure(NoteStoreSettings(local_store_path=":memory:"))

        assert gate.is_configured() is False
        assert await gate.acquire() is None

    @pytest.mark.asyncio
    async def test_construction_failure_degrades_to_none(self) -> None:
        factory = ExplodingFactory()
        gate = BackendAvailabilityGate(_manager(**CONFIGURED), factory=factory)

        assert await gate.acquire() is None
        assert factory.builds == 1

    @pytest.mark.asyncio
    async def test_aclose_closes_active_client(self) -> None:
        backend = InMemoryBackend()
        gate = BackendAvailabilityGate(_manager(**CONFIGURED), factory=StaticFactory(backend))
        await gate.acquire()

        await gate.aclose()

        assert backend.closed is True


class TestRemoteBackendFactory:
    """Validate adapter selection by URL scheme."""

    @pytest.mark.asyncio
    async def test_http_urls_use_rest_adapter(self) -> None:
        adapter = RemoteBackendFactory().build(NoteStoreSettings(**CONFIGURED))

        assert isinstance(adapter, RestRemoteAdapter)
        await adapter.aclose()

    def test_database_urls_use_tortoise_adapter(self) -> None:
        settings = NoteStoreSettings(api_url="sqlite://:memory:", api_key="unused")

        assert isinstance(RemoteBackendFactory().build(settings), TortoiseRemoteAdapter)

    def test_unknown_scheme_is_rejected(self) -> None:
        settings = NoteStoreSettings(api_url="ftp://files.example", api_key="k")

        with pytest.raises(ValueError):
            RemoteBackendFactory().build(settings)


# The End
