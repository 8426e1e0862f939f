"""Custom exceptions for the Form3 client."""

from typing import Optional


class Form3Error(Exception):
    """Base exception for all Form3 client errors."""
    pass


class TransportError(Form3Error):
    """Raised when a request could not be completed at the transport level.

    Covers request building, network failures and undecodable bodies. These
    are never API errors: no usable HTTP status was received or understood.
    """
    pass


class RequestError(TransportError):
    """Raised when a request cannot be built (bad URI or unserializable body)."""
    pass


class DecodeError(TransportError):
    """Raised when a response body cannot be decoded."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class TimeoutError(TransportError):
    """Raised when request times out."""
    pass


class ConnectionError(TransportError):
    """Raised when connection fails."""
    pass


class APIError(Form3Error):
    """Raised when the API answers with a non-2xx status code."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return f"Failed request with status code {self.status_code}: {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self.status_code!r}, message={self.message!r})"


class ValidationError(APIError):
    """Raised when request validation fails (400)."""
    pass


class AuthenticationError(APIError):
    """Raised when authentication fails (401)."""
    pass


class AuthorizationError(APIError):
    """Raised when authorization fails (403)."""
    pass


class NotFoundError(APIError):
    """Raised when resource is not found (404)."""
    pass


class ConflictError(APIError):
    """Raised on a conflicting write, e.g. a stale version on delete (409)."""
    pass


class RateLimitError(APIError):
    """Raised when rate limit is exceeded (429)."""
    pass


class ServerError(APIError):
    """Raised when server returns 5xx error."""
    pass


def create_api_error(status_code: int, message: str) -> APIError:
    """Create appropriate API error based on status code."""

    error_classes = {
        400: ValidationError,
        401: AuthenticationError,
        403: AuthorizationError,
        404: NotFoundError,
        409: ConflictError,
        429: RateLimitError,
    }

    if status_code in error_classes:
        return error_classes[status_code](message=message, status_code=status_code)
    elif 500 <= status_code < 600:
        return ServerError(message=message, status_code=status_code)
    else:
        return APIError(message=message, status_code=status_code)
