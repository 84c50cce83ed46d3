"""Domain exceptions.

Exception hierarchy:
- RegionServerError: Base domain exception for recoverable errors.
  - RegionServerConfigError: Invalid configuration or value objects.
  - InvalidScannerHandleError: Scanner handle is not registered.
  - ServiceError: Protocol-level failure envelope returned to callers.
- RegionServerAbortError: Fatal abort. Not a RegionServerError, so code
  handling recoverable errors never catches it by accident.
"""

from __future__ import annotations


class RegionServerError(Exception):
    """Base exception for all recoverable mock region server errors."""

    pass


class RegionServerConfigError(RegionServerError):
    """Raised when mock region server configuration is invalid.

    Raised by domain entities (e.g., ServerName, RegionServerSettings) and
    use cases (e.g., ConfigParser) when validation fails.
    """

    pass


class InvalidScannerHandleError(RegionServerError):
    """Raised when a scanner handle is not registered.

    Covers handles that were never opened and handles that were already
    closed.

    Attributes:
        scanner_id: The unregistered handle.
    """

    def __init__(self, scanner_id: int) -> None:
        """Initialize InvalidScannerHandleError.

        Args:
            scanner_id: The unregistered handle.
        """
        super().__init__(f"scanner {scanner_id} is not open")
        self.scanner_id = scanner_id


class ServiceError(RegionServerError):
    """Protocol failure envelope.

    Wraps any failure raised while composing a get or scan response, the
    way an RPC layer reports a remote exception to its caller.

    Attributes:
        message: Human-readable error description.
        original_error: The underlying exception that caused the failure.
    """

    def __init__(
        self,
        message: str,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize ServiceError.

        Args:
            message: Human-readable error description.
            original_error: The underlying exception that caused the failure.
        """
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class RegionServerAbortError(RuntimeError):
    """Raised by MockRegionServer.abort(); always fatal.

    Test harnesses catch this to detect that production code tried to
    force-kill the node.

    Attributes:
        server_name: Name of the aborted server.
        reason: Reason passed to abort().
        cause: Exception passed to abort(), if any.
    """

    def __init__(
        self,
        server_name: str,
        reason: str,
        cause: BaseException | None = None,
    ) -> None:
        """Initialize RegionServerAbortError.

        Args:
            server_name: Name of the aborted server.
            reason: Reason passed to abort().
            cause: Exception passed to abort(), if any.
        """
        super().__init__(f"{server_name}: {reason}")
        self.server_name = server_name
        self.reason = reason
        self.cause = cause
