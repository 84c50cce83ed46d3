"""Mock region server settings domain entities."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from mock_regionserver.domain.exceptions import RegionServerConfigError
from mock_regionserver.domain.server_name import ServerName

_TRUE_VALUES = frozenset(["true", "yes", "on", "1"])
_FALSE_VALUES = frozenset(["false", "no", "off", "0"])


def parse_bool(value: str) -> bool | None:
    """Interpret a boolean word, or return None if value is not one."""
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    return None


class ServerConfiguration(Mapping[str, str]):
    """Read-only key/value configuration handed out by the server.

    Stands in for the cluster-wide configuration object production code
    reads through the server. Keys and values are strings; typed getters
    convert on read.

    Example:
        >>> conf = ServerConfiguration({"hbase.client.retries.number": "3"})
        >>> conf.get_int("hbase.client.retries.number", 10)
        3
    """

    def __init__(self, properties: Mapping[str, str] | None = None) -> None:
        self._properties = MappingProxyType(dict(properties or {}))

    def __getitem__(self, key: str) -> str:
        return self._properties[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def __repr__(self) -> str:
        return f"ServerConfiguration({dict(self._properties)!r})"

    def get_int(self, key: str, default: int) -> int:
        """Get an integer property.

        Args:
            key: Property name.
            default: Returned when the property is unset.

        Raises:
            RegionServerConfigError: If the value is not an integer.
        """
        value = self._properties.get(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError as e:
            raise RegionServerConfigError(
                f"property {key!r} must be an integer, got: {value!r}"
            ) from e

    def get_bool(self, key: str, default: bool) -> bool:
        """Get a boolean property ("true"/"false", "yes"/"no", "on"/"off", "1"/"0").

        Raises:
            RegionServerConfigError: If the value is not a recognized boolean.
        """
        value = self._properties.get(key)
        if value is None:
            return default
        parsed = parse_bool(value)
        if parsed is not None:
            return parsed
        raise RegionServerConfigError(
            f"property {key!r} must be a boolean, got: {value!r}"
        )


@dataclass(frozen=True)
class RegionServerSettings:
    """Mock region server configuration.

    Attributes:
        server_name: Identity the server registers under.
        properties: String key/value pairs exposed through
                    MockRegionServer.configuration. Defaults to empty.
        scanner_seed: Seed for scanner handle generation. None (default)
                      seeds from system entropy; an int makes handles
                      reproducible across runs.
        metrics_enabled: Whether to export Prometheus metrics. Defaults to False.
        metrics_prefix: Metric name prefix. Defaults to "mock_regionserver".
    """

    server_name: ServerName
    properties: Mapping[str, str] = field(default_factory=dict)
    scanner_seed: int | None = None
    metrics_enabled: bool = False
    metrics_prefix: str = "mock_regionserver"

    def __post_init__(self) -> None:
        """Validate settings."""
        self._validate_server_name()
        self._validate_properties()
        self._validate_scanner_seed()
        self._validate_metrics_enabled()
        self._validate_metrics_prefix()

    def _validate_server_name(self) -> None:
        if not isinstance(self.server_name, ServerName):
            raise RegionServerConfigError(
                f"server_name must be a ServerName, got: {self.server_name!r}"
            )

    def _validate_properties(self) -> None:
        for key, value in self.properties.items():
            if not isinstance(key, str) or not key.strip():
                raise RegionServerConfigError(
                    f"property names must be non-empty strings, got: {key!r}"
                )
            if not isinstance(value, str):
                raise RegionServerConfigError(
                    f"property {key!r} must have a string value, got: {value!r}"
                )

    def _validate_scanner_seed(self) -> None:
        if self.scanner_seed is None:
            return
        if isinstance(self.scanner_seed, bool) or not isinstance(
            self.scanner_seed, int
        ):
            raise RegionServerConfigError(
                f"scanner_seed must be an integer, got: {self.scanner_seed!r}"
            )

    def _validate_metrics_enabled(self) -> None:
        if not isinstance(self.metrics_enabled, bool):
            raise RegionServerConfigError(
                f"metrics_enabled must be a boolean, got: {self.metrics_enabled!r}"
            )

    def _validate_metrics_prefix(self) -> None:
        if not isinstance(self.metrics_prefix, str):
            raise RegionServerConfigError(
                f"metrics_prefix must be a string, got: {self.metrics_prefix!r}"
            )
        if not self.metrics_prefix or not self.metrics_prefix.strip():
            raise RegionServerConfigError("metrics_prefix cannot be empty")

    def configuration(self) -> ServerConfiguration:
        """Build the read-only configuration handle from properties."""
        return ServerConfiguration(self.properties)
