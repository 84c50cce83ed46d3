"""ScannerRegistry use case: open scan cursors over fixture sequences."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from mock_regionserver.domain.exceptions import InvalidScannerHandleError
from mock_regionserver.domain.keys import BytesLike, to_key
from mock_regionserver.domain.protocol import Result
from mock_regionserver.usecases.fixture_store import FixtureStore

logger = logging.getLogger(__name__)

SCANNER_ID_BITS = 64


@dataclass
class ScanCursor:
    """Position of one open scanner.

    Attributes:
        region: Region whose fixture sequence the scanner replays.
        index: Index of the next result to return. Only ever grows.
    """

    region: bytes
    index: int = 0

    def get_then_increment(self) -> int:
        current = self.index
        self.index += 1
        return current


class ScannerRegistry:
    """Tracks open scanners and replays fixture sequences through them.

    Scanner lifecycle:
        - open_scanner() registers a cursor at index 0 (Open)
        - next() returns results in order, then None once the index is past
          the end (Exhausted). The scanner stays registered; further next()
          calls keep returning None.
        - close() removes the cursor (Closed). Idempotent.

    Handles are random 64-bit integers. There is no collision detection: a
    new handle equal to an open one silently replaces that scanner's cursor.
    Callers must not rely on handles being unique, only on them being
    unpredictable.

    Thread safety:
        None. Concurrent next() calls on the same handle are undefined.

    Example:
        >>> store = FixtureStore()
        >>> store.set_scan_results(b"r", ["v1"])
        >>> registry = ScannerRegistry(store)
        >>> handle = registry.open_scanner(b"r")
        >>> registry.next(handle), registry.next(handle)
        ('v1', None)
    """

    def __init__(
        self,
        fixtures: FixtureStore,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the registry.

        Args:
            fixtures: Store resolving a region to its scan sequence.
            rng: Source of scanner handles. Defaults to an unseeded
                 random.Random; pass a seeded one for reproducible handles.
        """
        self._fixtures = fixtures
        self._rng = rng if rng is not None else random.Random()
        self._cursors: dict[int, ScanCursor] = {}

    @property
    def open_count(self) -> int:
        """Number of registered scanners, exhausted ones included."""
        return len(self._cursors)

    def is_open(self, scanner_id: int) -> bool:
        return scanner_id in self._cursors

    def cursor(self, scanner_id: int) -> ScanCursor:
        """Get the cursor behind a handle.

        Raises:
            InvalidScannerHandleError: If the handle is not registered.
        """
        try:
            return self._cursors[scanner_id]
        except KeyError:
            raise InvalidScannerHandleError(scanner_id) from None

    def open_scanner(self, region: BytesLike) -> int:
        """Open a scanner on region.

        Args:
            region: Region whose scan sequence to replay.

        Returns:
            The new scanner handle.
        """
        scanner_id = self._rng.getrandbits(SCANNER_ID_BITS)
        self._cursors[scanner_id] = ScanCursor(region=to_key(region))
        logger.debug("Opened scanner %d on region %r", scanner_id, region)
        return scanner_id

    def next(self, scanner_id: int) -> Result | None:
        """Return the scanner's next result, or None once exhausted.

        The cursor advances on every call, including calls past the end.

        Raises:
            InvalidScannerHandleError: If the handle is not registered.
        """
        cursor = self.cursor(scanner_id)
        index = cursor.get_then_increment()
        results = self._fixtures.scan_sequence(cursor.region)
        return results[index] if index < len(results) else None

    def next_rows(
        self, scanner_id: int, number_of_rows: int
    ) -> tuple[Result, ...] | None:
        """Batch form of next().

        number_of_rows is ignored: exactly one next() is performed and its
        result returned as a one-element tuple, or None when exhausted.

        Raises:
            InvalidScannerHandleError: If the handle is not registered.
        """
        result = self.next(scanner_id)
        return None if result is None else (result,)

    def close(self, scanner_id: int) -> None:
        """Close a scanner. Closing an unknown handle is a no-op."""
        if self._cursors.pop(scanner_id, None) is not None:
            logger.debug("Closed scanner %d", scanner_id)
