"""Port interfaces for the mock region server.

Ports define the contracts that adapters must implement.
These are Protocol classes (structural subtyping) for flexible testing.

The region server request surface is split into two capability sets:
    - AdminProtocolPort: region and server lifecycle operations
    - ClientProtocolPort: data access (get, scan, mutate, ...)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from mock_regionserver.domain.protocol import (
        EmptyResponse,
        GetRegionInfoRequest,
        GetRegionInfoResponse,
        GetRequest,
        GetResponse,
        ScanRequest,
        ScanResponse,
    )


@runtime_checkable
class AbortablePort(Protocol):
    """Anything the coordination service can abort on session loss.

    Contract:
        - abort(reason, cause) never returns normally
        - is_aborted() reports whether abort() was called
    """

    def abort(self, reason: str, cause: BaseException | None = None) -> None:
        """Abort the node.

        Args:
            reason: Why the node is being aborted.
            cause: Exception that triggered the abort, if any.
        """
        ...

    def is_aborted(self) -> bool:
        ...


@runtime_checkable
class CoordinationPort(Protocol):
    """Port interface for the coordination (liveness/leader) service client.

    A region server registers with the coordination service when it is
    constructed and releases its session when it stops. The mock only holds
    the handle; it never implements the service.

    Contract:
        - register(node_name, abortable) announces the node; the service may
          later call abortable.abort() if the session is lost
        - close() releases the session; idempotent
    """

    def register(self, node_name: str, abortable: AbortablePort) -> None:
        """Register a node with the coordination service.

        Args:
            node_name: String form of the node's ServerName.
            abortable: Node to abort when the session is lost.
        """
        ...

    def close(self) -> None:
        """Release the coordination session."""
        ...


@runtime_checkable
class ClientProtocolPort(Protocol):
    """Port interface for the data-access capability set.

    Contract:
        - get() and scan() answer from data the node holds
        - scan() opens a scanner when the request carries scan parameters,
          otherwise advances the scanner named by request.scanner_id
        - failures are raised as ServiceError
        - request payloads not listed here are opaque (typed Any)
    """

    def get(self, request: GetRequest) -> GetResponse:
        """Point lookup of one row.

        Raises:
            ServiceError: If the lookup fails.
        """
        ...

    def scan(self, request: ScanRequest) -> ScanResponse:
        """Open or advance a scanner.

        Raises:
            ServiceError: If the scanner handle is invalid.
        """
        ...

    def mutate(self, request: Any) -> EmptyResponse:
        ...

    def lock_row(self, request: Any) -> EmptyResponse:
        ...

    def unlock_row(self, request: Any) -> EmptyResponse:
        ...

    def bulk_load_hfile(self, request: Any) -> EmptyResponse:
        ...

    def exec_service(self, request: Any) -> EmptyResponse:
        ...

    def multi(self, request: Any) -> EmptyResponse:
        ...


@runtime_checkable
class AdminProtocolPort(Protocol):
    """Port interface for the administrative capability set.

    Contract:
        - every operation returns a well-formed response, never None
        - get_region_info() describes a region hosted by the node
    """

    def get_region_info(self, request: GetRegionInfoRequest) -> GetRegionInfoResponse:
        ...

    def get_store_file(self, request: Any) -> EmptyResponse:
        ...

    def get_online_region(self, request: Any) -> EmptyResponse:
        ...

    def open_region(self, request: Any) -> EmptyResponse:
        ...

    def close_region(self, request: Any) -> EmptyResponse:
        ...

    def flush_region(self, request: Any) -> EmptyResponse:
        ...

    def split_region(self, request: Any) -> EmptyResponse:
        ...

    def compact_region(self, request: Any) -> EmptyResponse:
        ...

    def replicate_wal_entry(self, request: Any) -> EmptyResponse:
        ...

    def roll_wal_writer(self, request: Any) -> EmptyResponse:
        ...

    def get_server_info(self, request: Any) -> EmptyResponse:
        ...

    def stop_server(self, request: Any) -> EmptyResponse:
        ...
