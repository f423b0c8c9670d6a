"""
Exception hierarchy for the azmgmt client library.

Each exception maps to an HTTP status class returned by Azure Resource
Manager and preserves the ARM error code, the server message and the
request id of the failed call.
"""

from typing import Any, Dict, Optional


class AzureMgmtError(Exception):
    """
    Base exception for all azmgmt client errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (if applicable)
        error_code: ARM error code (e.g., "ResourceNotFound")
        details: Additional error details from the response
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}

    @property
    def request_id(self) -> Optional[str]:
        return self.details.get("request_id")

    def __str__(self) -> str:
        parts = [self.message]
        if self.error_code:
            parts.insert(0, f"[{self.error_code}]")
        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")
        return " ".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"status_code={self.status_code}, "
            f"error_code={self.error_code!r})"
        )


# =============================================================================
# Client Errors (4xx)
# =============================================================================


class BadRequestError(AzureMgmtError):
    """
    The request was malformed.

    Raised for invalid path or query parameters and invalid request bodies.
    """

    def __init__(
        self,
        message: str = "Bad request",
        *,
        status_code: int = 400,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )


class AuthenticationError(AzureMgmtError):
    """The bearer token is missing, expired or invalid."""

    def __init__(
        self,
        message: str = "Authentication required",
        *,
        status_code: int = 401,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )


class AuthorizationError(AzureMgmtError):
    """
    Access denied due to insufficient permissions.

    Raised when the caller's identity has no role assignment granting the
    requested action on the scope.
    """

    def __init__(
        self,
        message: str = "Access denied",
        *,
        status_code: int = 403,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )


class NotFoundError(AzureMgmtError):
    """
    Requested resource was not found.

    Raised when the identifier does not resolve (HTTP 404).
    """

    def __init__(
        self,
        message: str = "Resource not found",
        *,
        status_code: int = 404,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        resource_id: Optional[str] = None,
    ):
        if resource_id:
            details = details or {}
            details["resource_id"] = resource_id
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )
        self.resource_id = resource_id


class ConflictError(AzureMgmtError):
    """
    Request conflicts with current state of the resource.

    Raised when a state transition is not valid from the current state.
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        *,
        status_code: int = 409,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )


class RateLimitError(AzureMgmtError):
    """
    ARM throttled the request.

    The retry_after attribute holds the server's Retry-After hint in seconds.
    """

    def __init__(
        self,
        message: str = "Too many requests",
        *,
        status_code: int = 429,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        retry_after: Optional[int] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )
        self.retry_after = retry_after


# =============================================================================
# Server Errors (5xx)
# =============================================================================


class ServerError(AzureMgmtError):
    """Server-side error occurred (HTTP 5xx)."""

    def __init__(
        self,
        message: str = "Server error",
        *,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )


class ServiceUnavailableError(ServerError):
    """The service is temporarily unavailable."""

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        *,
        status_code: int = 503,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        retry_after: Optional[int] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )
        self.retry_after = retry_after


# =============================================================================
# Network Errors (Client-side)
# =============================================================================


class NetworkError(AzureMgmtError):
    """
    Network-level error occurred.

    Raised when no HTTP response was received at all.
    """

    def __init__(
        self,
        message: str = "Network error",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=None,
            error_code=None,
            details=details,
        )


class TimeoutError(NetworkError):
    """Request timed out."""

    def __init__(
        self,
        message: str = "Request timed out",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


class ConnectionError(NetworkError):
    """Failed to establish connection to the server."""

    def __init__(
        self,
        message: str = "Failed to connect to server",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


# =============================================================================
# Exception Mapping
# =============================================================================

STATUS_CODE_EXCEPTIONS = {
    400: BadRequestError,
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
    409: ConflictError,
    429: RateLimitError,
    500: ServerError,
    502: ServerError,
    503: ServiceUnavailableError,
    504: ServerError,
}


def exception_from_response(
    status_code: int,
    message: str,
    error_code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
) -> AzureMgmtError:
    """
    Create an appropriate exception from an HTTP response.

    Args:
        status_code: HTTP status code
        message: Error message
        error_code: ARM error code
        details: Additional error details

    Returns:
        Appropriate AzureMgmtError subclass
    """
    exception_class = STATUS_CODE_EXCEPTIONS.get(status_code)
    if exception_class is None:
        exception_class = ServerError if 500 <= status_code < 600 else AzureMgmtError
    return exception_class(
        message,
        status_code=status_code,
        error_code=error_code,
        details=details,
    )
