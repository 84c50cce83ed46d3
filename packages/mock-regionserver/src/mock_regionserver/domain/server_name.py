"""ServerName domain value object."""

from __future__ import annotations

from dataclasses import dataclass

from mock_regionserver.domain.exceptions import RegionServerConfigError

SERVER_NAME_SEPARATOR = ","


@dataclass(frozen=True)
class ServerName:
    """Identity of a region server within the cluster.

    Value object rendered as "hostname,port,start_code", the form the
    coordination service and the master use to name cluster members.

    Attributes:
        hostname: Host the server claims to run on. Must be non-empty and
                  contain no whitespace or separator characters.
        port: RPC port, 0..65535.
        start_code: Start timestamp distinguishing restarts of the same
                    host and port. Must be non-negative.
    """

    hostname: str
    port: int
    start_code: int = 0

    def __post_init__(self) -> None:
        """Validate server name components."""
        self._validate_hostname()
        self._validate_port()
        self._validate_start_code()

    def _validate_hostname(self) -> None:
        if not isinstance(self.hostname, str):
            raise RegionServerConfigError(
                f"hostname must be a string, got: {self.hostname!r}"
            )

        if not self.hostname or not self.hostname.strip():
            raise RegionServerConfigError("hostname cannot be empty")

        if any(c.isspace() for c in self.hostname):
            raise RegionServerConfigError(
                f"hostname cannot contain whitespace, got: {self.hostname!r}"
            )

        if SERVER_NAME_SEPARATOR in self.hostname:
            raise RegionServerConfigError(
                f"hostname cannot contain {SERVER_NAME_SEPARATOR!r}, got: {self.hostname!r}"
            )

    def _validate_port(self) -> None:
        # bool is an int subclass; reject it explicitly
        if isinstance(self.port, bool) or not isinstance(self.port, int):
            raise RegionServerConfigError(
                f"port must be an integer, got: {self.port!r}"
            )

        if not 0 <= self.port <= 65535:
            raise RegionServerConfigError(
                f"port must be between 0 and 65535, got: {self.port}"
            )

    def _validate_start_code(self) -> None:
        if isinstance(self.start_code, bool) or not isinstance(self.start_code, int):
            raise RegionServerConfigError(
                f"start_code must be an integer, got: {self.start_code!r}"
            )

        if self.start_code < 0:
            raise RegionServerConfigError(
                f"start_code cannot be negative, got: {self.start_code}"
            )

    @classmethod
    def parse(cls, value: str) -> ServerName:
        """Parse a "hostname,port,start_code" string.

        Args:
            value: Server name string.

        Returns:
            The parsed ServerName.

        Raises:
            RegionServerConfigError: If value is malformed.
        """
        parts = value.split(SERVER_NAME_SEPARATOR)
        if len(parts) != 3:
            raise RegionServerConfigError(
                f"server name must be 'hostname,port,start_code', got: {value!r}"
            )

        hostname, port, start_code = parts
        try:
            return cls(hostname=hostname, port=int(port), start_code=int(start_code))
        except ValueError as e:
            raise RegionServerConfigError(
                f"invalid server name {value!r}: {e}"
            ) from e

    def __str__(self) -> str:
        return SERVER_NAME_SEPARATOR.join(
            (self.hostname, str(self.port), str(self.start_code))
        )
