"""Request and response value objects for the region server protocol.

The transport is assumed to deliver already-decoded requests and to
serialize the returned responses. Only the fields the mock reads are
modelled; everything else a real request carries is opaque here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from mock_regionserver.domain.keys import to_key

# Opaque record payload. Stored and replayed verbatim.
Result = Any


@dataclass(frozen=True)
class RegionInfo:
    """Description of a region: a contiguous slice of a table's keyspace.

    Attributes:
        region_name: Full region name.
        table_name: Owning table.
        start_key: First row in the region (inclusive). Empty means unbounded.
        end_key: Last row boundary (exclusive). Empty means unbounded.
        region_id: Creation timestamp of the region.
    """

    region_name: bytes
    table_name: bytes
    start_key: bytes = b""
    end_key: bytes = b""
    region_id: int = 0


ROOT_REGION_INFO = RegionInfo(
    region_name=b"-ROOT-,,0",
    table_name=b"-ROOT-",
    region_id=0,
)


@dataclass(frozen=True)
class Scan:
    """Scan parameters. Carried on the open call and otherwise ignored."""

    start_row: bytes = b""
    stop_row: bytes = b""
    columns: tuple[bytes, ...] = ()


@dataclass(frozen=True)
class GetRequest:
    """Point lookup of one row in one region."""

    region: bytes
    row: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "region", to_key(self.region))
        object.__setattr__(self, "row", to_key(self.row))


@dataclass(frozen=True)
class GetResponse:
    """Point lookup response. result is None when no data is set."""

    result: Result = None


@dataclass(frozen=True)
class ScanRequest:
    """Scan request.

    A request carrying scan parameters opens a scanner on region; a request
    without them advances the scanner named by scanner_id.

    Attributes:
        region: Target region for the open call.
        scan: Scan parameters. Presence marks the open call.
        scanner_id: Handle of an open scanner for next calls.
        number_of_rows: Rows requested per call. Not honoured by the mock.
    """

    region: bytes | None = None
    scan: Scan | None = None
    scanner_id: int | None = None
    number_of_rows: int = 1

    def __post_init__(self) -> None:
        if self.region is not None:
            object.__setattr__(self, "region", to_key(self.region))

    @property
    def has_scan(self) -> bool:
        return self.scan is not None


@dataclass(frozen=True)
class ScanResponse:
    """Scan response.

    Attributes:
        scanner_id: Handle the response refers to.
        results: Zero or one result.
        more_results: False once the scanner ran out and was closed.
    """

    scanner_id: int | None = None
    results: tuple[Result, ...] = field(default_factory=tuple)
    more_results: bool = False


@dataclass(frozen=True)
class GetRegionInfoRequest:
    """Region info query. The region is not consulted by the mock."""

    region: bytes = b""


@dataclass(frozen=True)
class GetRegionInfoResponse:
    region_info: RegionInfo


@dataclass(frozen=True)
class EmptyResponse:
    """Well-formed default response for operations the mock does not implement.

    Signals "ran but did nothing", as opposed to a failure.

    Attributes:
        operation: Name of the protocol operation that produced it.
    """

    operation: str
