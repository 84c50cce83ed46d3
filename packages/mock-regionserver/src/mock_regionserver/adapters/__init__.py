"""Interface adapters: protocol capability sets, coordination and metrics."""

from mock_regionserver.adapters.ports import (
    AbortablePort,
    AdminProtocolPort,
    ClientProtocolPort,
    CoordinationPort,
)
from mock_regionserver.adapters.metrics_port import (
    NoOpMetricsAdapter,
    RegionServerMetricsPort,
)
from mock_regionserver.adapters.admin_protocol import NoOpAdminProtocol
from mock_regionserver.adapters.client_protocol import FixtureClientProtocol

__all__ = [
    "AbortablePort",
    "AdminProtocolPort",
    "ClientProtocolPort",
    "CoordinationPort",
    "RegionServerMetricsPort",
    "NoOpMetricsAdapter",
    "NoOpAdminProtocol",
    "FixtureClientProtocol",
]
