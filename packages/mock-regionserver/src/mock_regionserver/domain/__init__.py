"""Domain layer: Entities with zero external dependencies."""

from mock_regionserver.domain.exceptions import (
    InvalidScannerHandleError,
    RegionServerAbortError,
    RegionServerConfigError,
    RegionServerError,
    ServiceError,
)
from mock_regionserver.domain.protocol import (
    ROOT_REGION_INFO,
    EmptyResponse,
    GetRegionInfoRequest,
    GetRegionInfoResponse,
    GetRequest,
    GetResponse,
    RegionInfo,
    Scan,
    ScanRequest,
    ScanResponse,
)
from mock_regionserver.domain.server_name import ServerName
from mock_regionserver.domain.settings import RegionServerSettings, ServerConfiguration

__all__ = [
    "RegionServerError",
    "RegionServerConfigError",
    "InvalidScannerHandleError",
    "ServiceError",
    "RegionServerAbortError",
    "ServerName",
    "RegionServerSettings",
    "ServerConfiguration",
    "RegionInfo",
    "ROOT_REGION_INFO",
    "Scan",
    "GetRequest",
    "GetResponse",
    "ScanRequest",
    "ScanResponse",
    "GetRegionInfoRequest",
    "GetRegionInfoResponse",
    "EmptyResponse",
]
