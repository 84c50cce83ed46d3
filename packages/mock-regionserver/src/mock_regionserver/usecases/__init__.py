"""Use cases: Application logic layer."""

from mock_regionserver.usecases.fixture_store import FixtureStore
from mock_regionserver.usecases.scanner_registry import ScanCursor, ScannerRegistry
from mock_regionserver.usecases.server_lifecycle import ServerLifecycle
from mock_regionserver.usecases.config_parser import ConfigParser

__all__ = [
    "FixtureStore",
    "ScanCursor",
    "ScannerRegistry",
    "ServerLifecycle",
    "ConfigParser",
]
