"""Protocol compliance tests for port implementations."""

import pytest

from mock_regionserver.adapters.admin_protocol import NoOpAdminProtocol
from mock_regionserver.adapters.client_protocol import FixtureClientProtocol
from mock_regionserver.adapters.fakes import FakeCoordinationClient, FakeMetricsAdapter
from mock_regionserver.adapters.ports import (
    AbortablePort,
    AdminProtocolPort,
    ClientProtocolPort,
    CoordinationPort,
)
from mock_regionserver.adapters.metrics_port import RegionServerMetricsPort
from mock_regionserver.usecases.fixture_store import FixtureStore
from mock_regionserver.usecases.scanner_registry import ScannerRegistry


@pytest.mark.unit
@pytest.mark.tier(1)
@pytest.mark.tra("Port.Compliance")
class TestPortCompliance:
    """Each implementation satisfies exactly the ports it claims."""

    def test_mock_region_server_implements_both_capability_sets(self, server) -> None:
        assert isinstance(server, AdminProtocolPort)
        assert isinstance(server, ClientProtocolPort)

    def test_mock_region_server_is_abortable(self, server) -> None:
        assert isinstance(server, AbortablePort)

    def test_client_layer_is_not_admin_port(self) -> None:
        store = FixtureStore()
        client = FixtureClientProtocol(store, ScannerRegistry(store))

        assert isinstance(client, ClientProtocolPort)
        assert not isinstance(client, AdminProtocolPort)

    def test_admin_layer_is_admin_port(self) -> None:
        assert isinstance(NoOpAdminProtocol(), AdminProtocolPort)

    def test_fake_coordination_is_coordination_port(self) -> None:
        assert isinstance(FakeCoordinationClient(), CoordinationPort)

    def test_fake_metrics_is_metrics_port(self) -> None:
        assert isinstance(FakeMetricsAdapter(), RegionServerMetricsPort)

    def test_plain_object_satisfies_no_port(self) -> None:
        for port in (AdminProtocolPort, ClientProtocolPort, CoordinationPort):
            assert not isinstance(object(), port)
