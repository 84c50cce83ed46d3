"""Fake adapters for testing.

This module provides test doubles for port interfaces, enabling
deterministic testing without a coordination service or metrics backend.
"""

from mock_regionserver.adapters.fakes.fake_coordination import (
    FakeCoordinationClient,
    Registration,
)
from mock_regionserver.adapters.fakes.fake_metrics import FakeMetricsAdapter, MetricCall

__all__ = [
    "FakeCoordinationClient",
    "Registration",
    "FakeMetricsAdapter",
    "MetricCall",
]
