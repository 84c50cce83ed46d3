"""Tests for FakeMetricsAdapter."""

import pytest

from mock_regionserver.adapters.fakes import FakeMetricsAdapter, MetricCall


@pytest.mark.unit
@pytest.mark.tier(1)
@pytest.mark.tra("Adapter.FakeMetrics")
class TestFakeMetricsAdapter:
    """Tests for the recording metrics fake."""

    def test_initial_state(self) -> None:
        fake = FakeMetricsAdapter()

        assert fake.calls == []
        assert fake.current_open_scanners is None
        assert fake.request_count("scan") == 0

    def test_records_calls_in_order(self) -> None:
        fake = FakeMetricsAdapter()

        fake.record_request("scan")
        fake.set_open_scanners(1)

        assert fake.calls == [
            MetricCall("requests", "scan"),
            MetricCall("open_scanners", 1),
        ]

    def test_request_count_per_operation(self) -> None:
        fake = FakeMetricsAdapter()

        fake.record_request("get")
        fake.record_request("get")
        fake.record_request("scan")

        assert fake.request_count("get") == 2
        assert fake.request_count("scan") == 1

    def test_calls_returns_copy(self) -> None:
        fake = FakeMetricsAdapter()
        fake.record_request("get")

        fake.calls.clear()

        assert len(fake.calls) == 1

    def test_reset_clears_everything(self) -> None:
        fake = FakeMetricsAdapter()
        fake.record_request("get")
        fake.set_open_scanners(2)

        fake.reset()

        assert fake.calls == []
        assert fake.current_open_scanners is None
        assert fake.request_count("get") == 0
