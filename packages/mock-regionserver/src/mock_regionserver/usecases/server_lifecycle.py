"""ServerLifecycle use case: identity, liveness flags and stop/abort."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from mock_regionserver.domain.exceptions import RegionServerAbortError

if TYPE_CHECKING:
    from mock_regionserver.adapters.ports import CoordinationPort
    from mock_regionserver.domain.server_name import ServerName
    from mock_regionserver.domain.settings import ServerConfiguration

logger = logging.getLogger(__name__)


class ServerLifecycle:
    """Identity and lifecycle surface of a mock region server.

    Registers with the coordination service on construction and releases the
    session on stop(). The liveness queries report a running server until
    stop() or abort() is called. Protocol calls made after stop() are not
    rejected.

    Every storage resource accessor (file system, WAL, leases, accounting,
    online regions, ...) deliberately returns None: a caller reaching for
    one is exercising a path the mock does not support.

    Dependencies:
        - CoordinationPort: liveness/leader service client handle
    """

    def __init__(
        self,
        server_name: ServerName,
        configuration: ServerConfiguration,
        coordination: CoordinationPort,
    ) -> None:
        """Initialize and register with the coordination service.

        Args:
            server_name: Identity of this server.
            configuration: Configuration handle returned to callers.
            coordination: Coordination service client. register() is
                          called immediately with this server as abortable.
        """
        self._server_name = server_name
        self._configuration = configuration
        self._coordination = coordination
        self._stopped = False
        self._aborted = False
        coordination.register(str(server_name), abortable=self)

    @property
    def server_name(self) -> ServerName:
        return self._server_name

    @property
    def configuration(self) -> ServerConfiguration:
        return self._configuration

    @property
    def coordination(self) -> CoordinationPort:
        return self._coordination

    def is_stopped(self) -> bool:
        return self._stopped

    def is_stopping(self) -> bool:
        # stop() completes synchronously; there is no in-between state
        return False

    def is_aborted(self) -> bool:
        return self._aborted

    def stop(self, reason: str) -> None:
        """Stop the server, releasing the coordination session.

        Calling stop() again does not close the session a second time.

        Args:
            reason: Why the server is stopping. Logged only.
        """
        if self._stopped:
            return
        logger.info("Stopping %s: %s", self._server_name, reason)
        self._coordination.close()
        self._stopped = True

    def abort(self, reason: str, cause: BaseException | None = None) -> None:
        """Abort the server. Never returns normally.

        Args:
            reason: Why the server is aborting.
            cause: Exception that triggered the abort, if any.

        Raises:
            RegionServerAbortError: Always, chained from cause.
        """
        self._aborted = True
        logger.error("Aborting %s: %s", self._server_name, reason, exc_info=cause)
        raise RegionServerAbortError(str(self._server_name), reason, cause) from cause

    @property
    def file_system(self) -> None:
        return None

    @property
    def wal(self) -> None:
        return None

    @property
    def leases(self) -> None:
        return None

    @property
    def region_server_accounting(self) -> None:
        return None

    @property
    def compaction_requester(self) -> None:
        return None

    @property
    def flush_requester(self) -> None:
        return None

    @property
    def rpc_server(self) -> None:
        return None

    @property
    def catalog_tracker(self) -> None:
        return None

    @property
    def regions_in_transition(self) -> None:
        return None

    def get_online_regions(self, table_name: bytes) -> None:
        return None

    def get_from_online_regions(self, encoded_region_name: str) -> None:
        return None

    def add_to_online_regions(self, region: Any) -> None:
        pass

    def remove_from_online_regions(
        self, encoded_region_name: str, destination: ServerName | None = None
    ) -> bool:
        return False

    def post_open_deploy_tasks(
        self, region: Any, catalog_tracker: Any, daughter: bool = False
    ) -> None:
        pass
