"""MockRegionServer: a scriptable stand-in for a region server.

Combines the identity/lifecycle surface, the no-op administrative
capability set and the fixture-backed data-access capability set into one
object a test harness can treat as a cluster member.
"""

from __future__ import annotations

import random
from collections.abc import Iterable

from mock_regionserver.adapters.admin_protocol import NoOpAdminProtocol
from mock_regionserver.adapters.client_protocol import FixtureClientProtocol
from mock_regionserver.adapters.metrics_port import (
    NoOpMetricsAdapter,
    RegionServerMetricsPort,
)
from mock_regionserver.adapters.ports import CoordinationPort
from mock_regionserver.domain.keys import BytesLike
from mock_regionserver.domain.protocol import Result
from mock_regionserver.domain.settings import RegionServerSettings
from mock_regionserver.usecases.fixture_store import FixtureStore
from mock_regionserver.usecases.scanner_registry import ScannerRegistry
from mock_regionserver.usecases.server_lifecycle import ServerLifecycle


class MockRegionServer(ServerLifecycle, NoOpAdminProtocol, FixtureClientProtocol):
    """Region server test double backed by in-memory fixtures.

    Only get and scan do real work; every other protocol operation returns
    an EmptyResponse. Use it when a real region server is too heavy and a
    plain mock cannot express stateful scanning (e.g., returning nothing
    until the master times out, then a coherent catalog row).

    Thread safety:
        None. Populate fixtures before the harness sends requests and do not
        drive one scanner from several threads.

    Example:
        >>> server = MockRegionServer(settings, coordination=FakeCoordinationClient())
        >>> server.set_scan_results(b"meta,,1", [row1, row2])
        >>> opened = server.scan(ScanRequest(region=b"meta,,1", scan=Scan()))
        >>> server.scan(ScanRequest(scanner_id=opened.scanner_id)).results
        (row1,)
    """

    def __init__(
        self,
        settings: RegionServerSettings,
        coordination: CoordinationPort,
        metrics: RegionServerMetricsPort | None = None,
    ) -> None:
        """Initialize the mock and register it with the coordination service.

        Args:
            settings: Server identity, configuration and scanner seed.
            coordination: Coordination service client handle.
            metrics: Metrics port. Defaults to no-op.
        """
        metrics = metrics if metrics is not None else NoOpMetricsAdapter()
        fixtures = FixtureStore()
        scanners = ScannerRegistry(fixtures, rng=random.Random(settings.scanner_seed))

        self._settings = settings
        NoOpAdminProtocol.__init__(self, metrics=metrics)
        FixtureClientProtocol.__init__(self, fixtures, scanners, metrics=metrics)
        ServerLifecycle.__init__(
            self, settings.server_name, settings.configuration(), coordination
        )

    @property
    def settings(self) -> RegionServerSettings:
        return self._settings

    @property
    def fixtures(self) -> FixtureStore:
        return self._fixtures

    @property
    def scanners(self) -> ScannerRegistry:
        return self._scanners

    @property
    def metrics(self) -> RegionServerMetricsPort:
        return self._metrics

    def set_lookup_result(
        self, region: BytesLike, row: BytesLike, result: Result
    ) -> None:
        """Set what get returns for (region, row)."""
        self._fixtures.set_lookup_result(region, row, result)

    def set_scan_results(self, region: BytesLike, results: Iterable[Result]) -> None:
        """Set what scanners on region return as they are advanced."""
        self._fixtures.set_scan_results(region, results)

    def open_scanner(self, region: BytesLike) -> int:
        scanner_id = self._scanners.open_scanner(region)
        self._metrics.set_open_scanners(self._scanners.open_count)
        return scanner_id

    def next(self, scanner_id: int) -> Result | None:
        return self._scanners.next(scanner_id)

    def next_rows(
        self, scanner_id: int, number_of_rows: int
    ) -> tuple[Result, ...] | None:
        return self._scanners.next_rows(scanner_id, number_of_rows)

    def close_scanner(self, scanner_id: int) -> None:
        self._scanners.close(scanner_id)
        self._metrics.set_open_scanners(self._scanners.open_count)

    def __repr__(self) -> str:
        return f"MockRegionServer({self._server_name})"
