"""HTTP client module for the Form3 API."""

from form3_client.client.http_client import HTTPClient
from form3_client.client.exceptions import (
    Form3Error,
    TransportError,
    RequestError,
    DecodeError,
    TimeoutError,
    ConnectionError,
    APIError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ConflictError,
    RateLimitError,
    ServerError,
    create_api_error,
)

__all__ = [
    "HTTPClient",
    "Form3Error",
    "TransportError",
    "RequestError",
    "DecodeError",
    "TimeoutError",
    "ConnectionError",
    "APIError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "ServerError",
    "create_api_error",
]
