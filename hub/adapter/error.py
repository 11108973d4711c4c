"""Adapter layer errors."""

from typing import Any

DEFAULT_ERROR_MESSAGE = "An unexpected error occurred"
NETWORK_ERROR_MESSAGE = "Network error. Please check your connection and try again."


class AdapterError(Exception):
    """Base adapter error."""

    pass


class ApiError(AdapterError):
    """Error talking to the platform API."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class TransportError(ApiError):
    """No response was received (connection refused, timeout, DNS...)."""

    def __init__(self, message: str = NETWORK_ERROR_MESSAGE):
        super().__init__(message)


class ApplicationError(ApiError):
    """The server answered with `success: false`."""

    def __init__(
        self,
        message: str | None = None,
        status_code: int | None = None,
        errors: Any = None,
    ):
        self.errors = errors
        super().__init__(message or DEFAULT_ERROR_MESSAGE, status_code)


class UnauthorizedError(ApplicationError):
    """The server rejected the bearer token (HTTP 401)."""

    pass


class ProtocolError(ApiError):
    """The response does not follow the envelope contract."""

    pass


def error_message(error: BaseException) -> str:
    """Get a user-facing message for an error.

    Prefers the server-provided message, then the exception text, then a
    generic fallback.
    """
    if isinstance(error, ApiError) and error.message:
        return error.message
    if str(error):
        return str(error)
    return DEFAULT_ERROR_MESSAGE
