"""FixtureStore use case: canned data backing get and scan."""

from __future__ import annotations

from collections.abc import Iterable

from mock_regionserver.domain.keys import BytesLike, to_key
from mock_regionserver.domain.protocol import Result


class FixtureStore:
    """Test-author-writable tables replacing a real storage engine.

    Holds two tables:
        - lookup results keyed by (region, row), read by get
        - ordered scan results keyed by region, replayed by scanners

    Unknown regions and rows are "no data", never errors.

    Thread safety:
        None. Populate from the test thread before the harness starts
        sending requests; concurrent writers and readers are undefined.

    Example:
        >>> store = FixtureStore()
        >>> store.set_lookup_result(b"region", b"row1", "v1")
        >>> store.lookup(b"region", b"row1")
        'v1'
        >>> store.lookup(b"region", b"row2") is None
        True
    """

    def __init__(self) -> None:
        self._lookups: dict[bytes, dict[bytes, Result]] = {}
        self._scans: dict[bytes, tuple[Result, ...]] = {}

    def set_lookup_result(
        self, region: BytesLike, row: BytesLike, result: Result
    ) -> None:
        """Set the result get returns for (region, row). Last write wins.

        Args:
            region: Region key.
            row: Row key within the region.
            result: Opaque result object returned verbatim.
        """
        rows = self._lookups.setdefault(to_key(region), {})
        rows[to_key(row)] = result

    def set_scan_results(self, region: BytesLike, results: Iterable[Result]) -> None:
        """Replace the sequence scanners on region replay.

        The sequence is copied; mutating the caller's list afterwards has
        no effect.

        Args:
            region: Region key.
            results: Results in the order next returns them.
        """
        self._scans[to_key(region)] = tuple(results)

    def lookup(self, region: BytesLike, row: BytesLike) -> Result | None:
        """Get the result set for (region, row), or None if unset."""
        rows = self._lookups.get(to_key(region))
        if rows is None:
            return None
        return rows.get(to_key(row))

    def scan_sequence(self, region: BytesLike) -> tuple[Result, ...]:
        """Get the scan sequence for region, or an empty tuple if unset."""
        return self._scans.get(to_key(region), ())

    def clear(self) -> None:
        """Drop every lookup result and scan sequence."""
        self._lookups.clear()
        self._scans.clear()
