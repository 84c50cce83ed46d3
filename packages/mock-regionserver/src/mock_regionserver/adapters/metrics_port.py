"""Port interface and no-op implementation for metrics collection.

Metrics ports follow fire-and-forget semantics: implementations may
buffer, sample, or drop metrics as needed. No exceptions should propagate.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RegionServerMetricsPort(Protocol):
    """Port interface for metrics collection.

    Implementations handle metrics recording to various backends
    (Prometheus, test fakes). Lets a harness see which protocol paths
    production code exercised without asserting on every response.

    Contract:
        - All methods are fire-and-forget (no return value, no exceptions)
        - record_request increments a per-operation counter
        - set_open_scanners updates a gauge to a specific value
        - Thread safety is implementation-defined
    """

    def record_request(self, operation: str) -> None:
        """Count one protocol request.

        Args:
            operation: Protocol operation name (e.g., "scan", "open_region").
        """
        ...

    def set_open_scanners(self, count: int) -> None:
        """Set the open scanners gauge.

        Args:
            count: Number of currently registered scanners.
        """
        ...


class NoOpMetricsAdapter:
    """No-operation metrics adapter for when metrics are disabled.

    Example:
        >>> adapter = NoOpMetricsAdapter()
        >>> adapter.record_request("get")  # Does nothing
    """

    def record_request(self, operation: str) -> None:
        """No-op."""
        pass

    def set_open_scanners(self, count: int) -> None:
        """No-op."""
        pass
