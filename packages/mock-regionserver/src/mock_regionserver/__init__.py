"""mock-regionserver: Scriptable region server test double for Python."""

__version__ = "0.1.0"

from mock_regionserver.domain.exceptions import (
    InvalidScannerHandleError,
    RegionServerAbortError,
    RegionServerConfigError,
    RegionServerError,
    ServiceError,
)
from mock_regionserver.domain.protocol import (
    EmptyResponse,
    GetRequest,
    GetResponse,
    Scan,
    ScanRequest,
    ScanResponse,
)
from mock_regionserver.domain.server_name import ServerName
from mock_regionserver.domain.settings import RegionServerSettings
from mock_regionserver.mock_region_server import MockRegionServer
from mock_regionserver.factories import create_mock_region_server

__all__ = [
    "MockRegionServer",
    "create_mock_region_server",
    "RegionServerSettings",
    "ServerName",
    "GetRequest",
    "GetResponse",
    "Scan",
    "ScanRequest",
    "ScanResponse",
    "EmptyResponse",
    "RegionServerError",
    "RegionServerConfigError",
    "InvalidScannerHandleError",
    "ServiceError",
    "RegionServerAbortError",
]
