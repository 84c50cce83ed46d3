"""Default no-op implementation of the administrative capability set.

Region lifecycle (open, close, flush, split, compact), WAL handling and
server control are permanently unimplemented in the mock. Each operation
returns an EmptyResponse so a harness can tell "ran but did nothing"
apart from a failure.
"""

from __future__ import annotations

import logging
from typing import Any

from mock_regionserver.adapters.metrics_port import (
    NoOpMetricsAdapter,
    RegionServerMetricsPort,
)
from mock_regionserver.domain.protocol import (
    ROOT_REGION_INFO,
    EmptyResponse,
    GetRegionInfoRequest,
    GetRegionInfoResponse,
)

logger = logging.getLogger(__name__)


class NoOpAdminProtocol:
    """Implements AdminProtocolPort with empty responses and no side effects.

    get_region_info is the one operation with content: it always describes
    the catalog root region, whatever region the request names.
    """

    def __init__(self, metrics: RegionServerMetricsPort | None = None) -> None:
        """Initialize the admin layer.

        Args:
            metrics: Metrics port counting requests. Defaults to no-op.
        """
        self._metrics = metrics if metrics is not None else NoOpMetricsAdapter()

    def _admin_stub(self, operation: str) -> EmptyResponse:
        self._metrics.record_request(operation)
        logger.debug("Admin operation %s is not implemented by the mock", operation)
        return EmptyResponse(operation=operation)

    def get_region_info(self, request: GetRegionInfoRequest) -> GetRegionInfoResponse:
        self._metrics.record_request("get_region_info")
        return GetRegionInfoResponse(region_info=ROOT_REGION_INFO)

    def get_store_file(self, request: Any) -> EmptyResponse:
        return self._admin_stub("get_store_file")

    def get_online_region(self, request: Any) -> EmptyResponse:
        return self._admin_stub("get_online_region")

    def open_region(self, request: Any) -> EmptyResponse:
        return self._admin_stub("open_region")

    def close_region(self, request: Any) -> EmptyResponse:
        return self._admin_stub("close_region")

    def flush_region(self, request: Any) -> EmptyResponse:
        return self._admin_stub("flush_region")

    def split_region(self, request: Any) -> EmptyResponse:
        return self._admin_stub("split_region")

    def compact_region(self, request: Any) -> EmptyResponse:
        return self._admin_stub("compact_region")

    def replicate_wal_entry(self, request: Any) -> EmptyResponse:
        return self._admin_stub("replicate_wal_entry")

    def roll_wal_writer(self, request: Any) -> EmptyResponse:
        return self._admin_stub("roll_wal_writer")

    def get_server_info(self, request: Any) -> EmptyResponse:
        return self._admin_stub("get_server_info")

    def stop_server(self, request: Any) -> EmptyResponse:
        return self._admin_stub("stop_server")
