"""Prometheus metrics adapter for the mock region server.

Implements RegionServerMetricsPort using prometheus-client library.
Gracefully handles missing prometheus-client (raises ImportError at init).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prometheus_client import CollectorRegistry, Counter, Gauge


class PrometheusMetricsAdapter:
    """Prometheus implementation of RegionServerMetricsPort.

    Creates a request counter labelled by operation and an open scanners
    gauge, both named with a configurable prefix.

    This adapter requires prometheus-client to be installed:
        pip install mock-regionserver[metrics]

    Example:
        >>> adapter = PrometheusMetricsAdapter(prefix="rs1")
        >>> adapter.record_request("scan")  # rs1_requests_total{operation="scan"} += 1
        >>> adapter.set_open_scanners(2)  # rs1_open_scanners = 2

    Raises:
        ImportError: If prometheus-client is not installed.
    """

    def __init__(
        self,
        prefix: str = "mock_regionserver",
        registry: CollectorRegistry | None = None,
    ) -> None:
        """Initialize Prometheus collectors.

        Args:
            prefix: Metric name prefix. Defaults to "mock_regionserver".
            registry: Registry to register with. Defaults to the global
                      prometheus_client REGISTRY. Pass a fresh
                      CollectorRegistry when several mock servers share a
                      process.

        Raises:
            ImportError: If prometheus-client is not installed.
        """
        # Import here to make prometheus-client optional
        from prometheus_client import REGISTRY, Counter, Gauge

        target = registry if registry is not None else REGISTRY
        self._registry = target
        self._requests: Counter = Counter(
            f"{prefix}_requests",
            "Protocol requests handled, by operation",
            ["operation"],
            registry=target,
        )
        self._open_scanners: Gauge = Gauge(
            f"{prefix}_open_scanners",
            "Scanners currently registered",
            registry=target,
        )

    @property
    def registry(self) -> CollectorRegistry:
        """Registry holding this adapter's collectors."""
        return self._registry

    def record_request(self, operation: str) -> None:
        """Increment the request counter for operation."""
        self._requests.labels(operation=operation).inc()

    def set_open_scanners(self, count: int) -> None:
        """Set the open scanners gauge."""
        self._open_scanners.set(count)
