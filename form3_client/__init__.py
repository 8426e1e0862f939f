"""Form3 Python Client

An asynchronous Python client for the Form3 accounts API that provides:
- Typed request/response envelopes built on pydantic models
- Structured API errors carrying the HTTP status code and message
- Account create, fetch, delete and list operations
"""

__version__ = "0.1.0"

from form3_client.config.logging import setup_logging, get_logger
from form3_client.client.http_client import HTTPClient
from form3_client.client.exceptions import Form3Error, TransportError, APIError
from form3_client.api_client import Form3Client

__all__ = [
    "Form3Client",
    "HTTPClient",
    "Form3Error",
    "TransportError",
    "APIError",
    "setup_logging",
    "get_logger",
    "__version__",
]
