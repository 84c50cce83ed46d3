"""Fake coordination service client for testing.

Provides an in-memory CoordinationPort so a mock region server can be
constructed without a running coordination ensemble.
"""

from __future__ import annotations

from dataclasses import dataclass

from mock_regionserver.adapters.ports import AbortablePort


@dataclass(frozen=True)
class Registration:
    """Record of a single register() call.

    Attributes:
        node_name: Name the node registered under.
        abortable: Node the session aborts when it expires.
    """

    node_name: str
    abortable: AbortablePort


class FakeCoordinationClient:
    """In-memory fake for CoordinationPort - no real coordination session.

    Records registrations and close() calls for assertion, and can simulate
    session expiry, which aborts every registered node the way a real
    coordination watcher does when its session is lost.

    Example:
        def test_server_deregisters_on_stop():
            coordination = FakeCoordinationClient()
            server = MockRegionServer(settings, coordination=coordination)
            server.stop("test over")
            assert coordination.is_closed
            assert coordination.close_calls == 1
    """

    def __init__(self) -> None:
        """Initialize with no registrations and an open session."""
        self._registrations: list[Registration] = []
        self._close_calls = 0

    @property
    def registrations(self) -> list[Registration]:
        """Return a copy of recorded registrations, in call order."""
        return list(self._registrations)

    @property
    def registered_names(self) -> list[str]:
        return [r.node_name for r in self._registrations]

    @property
    def is_closed(self) -> bool:
        return self._close_calls > 0

    @property
    def close_calls(self) -> int:
        return self._close_calls

    def register(self, node_name: str, abortable: AbortablePort) -> None:
        """Record a registration.

        Args:
            node_name: Name the node registers under.
            abortable: Node to abort on session expiry.
        """
        self._registrations.append(Registration(node_name, abortable))

    def close(self) -> None:
        """Record a close() call."""
        self._close_calls += 1

    def expire_session(self, reason: str = "coordination session expired") -> None:
        """Simulate session loss by aborting every registered node.

        Whatever the nodes raise from abort() propagates to the caller.

        Args:
            reason: Reason passed to each node's abort().
        """
        for registration in self._registrations:
            registration.abortable.abort(reason)
