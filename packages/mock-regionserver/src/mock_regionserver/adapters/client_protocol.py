"""Fixture-backed implementation of the data-access capability set.

get and scan are answered from a FixtureStore through a ScannerRegistry.
The remaining data-access operations return EmptyResponse. This layer does
not inherit the admin no-op layer: data access has its own two real paths
and declares its stubs explicitly.
"""

from __future__ import annotations

import logging
from typing import Any

from mock_regionserver.adapters.metrics_port import (
    NoOpMetricsAdapter,
    RegionServerMetricsPort,
)
from mock_regionserver.domain.exceptions import ServiceError
from mock_regionserver.domain.protocol import (
    EmptyResponse,
    GetRequest,
    GetResponse,
    ScanRequest,
    ScanResponse,
)
from mock_regionserver.usecases.fixture_store import FixtureStore
from mock_regionserver.usecases.scanner_registry import ScannerRegistry

logger = logging.getLogger(__name__)


class FixtureClientProtocol:
    """Implements ClientProtocolPort over canned fixture data.

    Scan dispatch:
        - request with scan parameters: open a scanner on request.region and
          reply with the handle and more_results=True. The parameters
          themselves are ignored; the region's fixture sequence is replayed
          regardless of requested ranges or filters.
        - request with a scanner handle: reply with the next result and
          more_results=True, or with no results and more_results=False once
          the sequence is exhausted, closing the scanner.

    Any failure while composing a get or scan response is raised as
    ServiceError wrapping the underlying exception. Nothing is retried.
    """

    def __init__(
        self,
        fixtures: FixtureStore,
        scanners: ScannerRegistry,
        metrics: RegionServerMetricsPort | None = None,
    ) -> None:
        """Initialize the data-access layer.

        Args:
            fixtures: Store answering point lookups.
            scanners: Registry tracking open scanners over the same store.
            metrics: Metrics port counting requests. Defaults to no-op.
        """
        self._fixtures = fixtures
        self._scanners = scanners
        self._metrics = metrics if metrics is not None else NoOpMetricsAdapter()

    def get(self, request: GetRequest) -> GetResponse:
        """Return the fixture result for (request.region, request.row).

        An unset region or row yields GetResponse(result=None).

        Raises:
            ServiceError: If the request cannot be read.
        """
        self._metrics.record_request("get")
        try:
            result = self._fixtures.lookup(request.region, request.row)
        except Exception as e:
            raise ServiceError(f"get failed: {e}", original_error=e) from e
        return GetResponse(result=result)

    def scan(self, request: ScanRequest) -> ScanResponse:
        """Open a scanner or advance one.

        Raises:
            ServiceError: If the scanner handle is not open, or the request
                          cannot be read.
        """
        self._metrics.record_request("scan")
        try:
            if request.has_scan:
                return self._open(request)
            return self._advance(request)
        except Exception as e:
            raise ServiceError(f"scan failed: {e}", original_error=e) from e
        finally:
            self._metrics.set_open_scanners(self._scanners.open_count)

    def _open(self, request: ScanRequest) -> ScanResponse:
        scanner_id = self._scanners.open_scanner(request.region)
        return ScanResponse(scanner_id=scanner_id, more_results=True)

    def _advance(self, request: ScanRequest) -> ScanResponse:
        scanner_id = request.scanner_id
        result = self._scanners.next(scanner_id)
        if result is not None:
            return ScanResponse(
                scanner_id=scanner_id, results=(result,), more_results=True
            )

        self._scanners.close(scanner_id)
        return ScanResponse(scanner_id=scanner_id, more_results=False)

    def _client_stub(self, operation: str) -> EmptyResponse:
        self._metrics.record_request(operation)
        logger.debug("Client operation %s is not implemented by the mock", operation)
        return EmptyResponse(operation=operation)

    def mutate(self, request: Any) -> EmptyResponse:
        return self._client_stub("mutate")

    def lock_row(self, request: Any) -> EmptyResponse:
        return self._client_stub("lock_row")

    def unlock_row(self, request: Any) -> EmptyResponse:
        return self._client_stub("unlock_row")

    def bulk_load_hfile(self, request: Any) -> EmptyResponse:
        return self._client_stub("bulk_load_hfile")

    def exec_service(self, request: Any) -> EmptyResponse:
        return self._client_stub("exec_service")

    def multi(self, request: Any) -> EmptyResponse:
        return self._client_stub("multi")
