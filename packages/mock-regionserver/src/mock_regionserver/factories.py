"""Factory functions for creating mock region servers.

Wires a MockRegionServer from settings, choosing default coordination and
metrics adapters. Handles the optional prometheus-client dependency.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mock_regionserver.adapters.fakes.fake_coordination import FakeCoordinationClient
from mock_regionserver.adapters.metrics_port import (
    NoOpMetricsAdapter,
    RegionServerMetricsPort,
)
from mock_regionserver.adapters.ports import CoordinationPort
from mock_regionserver.domain.settings import RegionServerSettings
from mock_regionserver.mock_region_server import MockRegionServer

if TYPE_CHECKING:
    from prometheus_client import CollectorRegistry


class PrometheusNotInstalledError(ImportError):
    """Raised when metrics are enabled but prometheus-client is not installed.

    Install with: pip install mock-regionserver[metrics]
    """

    def __init__(self) -> None:
        super().__init__(
            "prometheus-client is not installed. "
            "Install with: pip install mock-regionserver[metrics]"
        )


def create_metrics(
    settings: RegionServerSettings,
    registry: CollectorRegistry | None = None,
) -> RegionServerMetricsPort:
    """Create the metrics adapter settings ask for.

    Each Prometheus adapter gets its own CollectorRegistry unless one is
    passed, so several mock servers with the same prefix can live in one
    process. Read a server's samples through adapter.registry.

    Args:
        settings: Settings with metrics_enabled and metrics_prefix.
        registry: Registry to register collectors with. Defaults to a new
                  CollectorRegistry.

    Returns:
        PrometheusMetricsAdapter if metrics are enabled, else NoOpMetricsAdapter.

    Raises:
        PrometheusNotInstalledError: If metrics are enabled and
            prometheus-client is not installed.
    """
    if not settings.metrics_enabled:
        return NoOpMetricsAdapter()

    try:
        from prometheus_client import CollectorRegistry

        from mock_regionserver.adapters.prometheus_metrics import (
            PrometheusMetricsAdapter,
        )

        return PrometheusMetricsAdapter(
            prefix=settings.metrics_prefix,
            registry=registry if registry is not None else CollectorRegistry(),
        )
    except ImportError as exc:
        raise PrometheusNotInstalledError() from exc


def create_mock_region_server(
    settings: RegionServerSettings,
    coordination: CoordinationPort | None = None,
    metrics: RegionServerMetricsPort | None = None,
) -> MockRegionServer:
    """Create a MockRegionServer from settings.

    Args:
        settings: Server identity, configuration and options.
        coordination: Coordination client. Defaults to a new
                      FakeCoordinationClient.
        metrics: Metrics port. Defaults to create_metrics(settings).

    Returns:
        A registered, running MockRegionServer.

    Raises:
        PrometheusNotInstalledError: If metrics are enabled, none are passed
            and prometheus-client is not installed.

    Example:
        >>> settings = RegionServerSettings(
        ...     server_name=ServerName("rs1.example.org", 60020, 1),
        ... )
        >>> server = create_mock_region_server(settings)
        >>> server.is_stopped()
        False
    """
    if coordination is None:
        coordination = FakeCoordinationClient()
    if metrics is None:
        metrics = create_metrics(settings)

    return MockRegionServer(settings, coordination=coordination, metrics=metrics)
