"""Pytest configuration for mock region server unit tests."""

from __future__ import annotations

import pytest

from mock_regionserver.adapters.fakes import FakeCoordinationClient, FakeMetricsAdapter
from mock_regionserver.domain.server_name import ServerName
from mock_regionserver.domain.settings import RegionServerSettings
from mock_regionserver.mock_region_server import MockRegionServer


@pytest.fixture
def server_name() -> ServerName:
    return ServerName(hostname="rs1.example.org", port=60020, start_code=1700000000000)


@pytest.fixture
def settings(server_name: ServerName) -> RegionServerSettings:
    """Settings with a fixed scanner seed so handles are reproducible."""
    return RegionServerSettings(
        server_name=server_name,
        properties={"hbase.client.retries.number": "3"},
        scanner_seed=42,
    )


@pytest.fixture
def fake_coordination() -> FakeCoordinationClient:
    """Provide FakeCoordinationClient for unit tests.

    Example:
        def test_stop_closes_session(server, fake_coordination):
            server.stop("done")
            assert fake_coordination.is_closed
    """
    return FakeCoordinationClient()


@pytest.fixture
def fake_metrics() -> FakeMetricsAdapter:
    return FakeMetricsAdapter()


@pytest.fixture
def server(
    settings: RegionServerSettings,
    fake_coordination: FakeCoordinationClient,
    fake_metrics: FakeMetricsAdapter,
) -> MockRegionServer:
    """Provide a registered MockRegionServer wired to fakes."""
    return MockRegionServer(
        settings, coordination=fake_coordination, metrics=fake_metrics
    )
