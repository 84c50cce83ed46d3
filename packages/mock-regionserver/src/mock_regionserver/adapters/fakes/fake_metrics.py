"""Fake metrics adapter for testing.

Provides a test double for RegionServerMetricsPort that records all metric
updates for assertion in tests.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass


@dataclass(frozen=True)
class MetricCall:
    """Record of a single metric update.

    Attributes:
        metric_name: Name of the metric that was updated.
        value: Value that was set, or the operation that was counted.
    """

    metric_name: str
    value: int | str


class FakeMetricsAdapter:
    """Fake implementation of RegionServerMetricsPort for testing.

    Example:
        >>> fake = FakeMetricsAdapter()
        >>> fake.record_request("scan")
        >>> fake.request_count("scan")
        1
        >>> fake.calls
        [MetricCall(metric_name='requests', value='scan')]
    """

    def __init__(self) -> None:
        """Initialize with no recorded state."""
        self._requests: Counter[str] = Counter()
        self._open_scanners: int | None = None
        self._calls: list[MetricCall] = []

    @property
    def calls(self) -> list[MetricCall]:
        """Return a copy of all metric update calls, in order of invocation."""
        return list(self._calls)

    @property
    def current_open_scanners(self) -> int | None:
        """Return last set open scanners count, or None if never set."""
        return self._open_scanners

    def request_count(self, operation: str) -> int:
        """Return how many times operation was recorded."""
        return self._requests[operation]

    def record_request(self, operation: str) -> None:
        self._requests[operation] += 1
        self._calls.append(MetricCall("requests", operation))

    def set_open_scanners(self, count: int) -> None:
        self._open_scanners = count
        self._calls.append(MetricCall("open_scanners", count))

    def reset(self) -> None:
        """Reset all state and calls."""
        self._requests.clear()
        self._open_scanners = None
        self._calls.clear()
