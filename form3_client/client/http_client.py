import json
import logging
from functools import lru_cache
from typing import Any, Dict, Optional, Type, TypeVar
from urllib.parse import urljoin, urlsplit, urlunsplit

import httpx
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError

from form3_client.config.logging import get_logger, mask_sensitive_data
from form3_client.config.settings import settings
from form3_client.client.exceptions import (
    ConnectionError,
    DecodeError,
    RequestError,
    TimeoutError,
    TransportError,
    create_api_error,
)
from form3_client.models.envelopes import ErrorBody

logger = get_logger(__name__)

T = TypeVar("T")

SENSITIVE_FIELDS = [
    "authorization", "token", "password", "secret", "key",
    "account_number", "iban", "card_number",
]


@lru_cache(maxsize=64)
def _type_adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


class HTTPClient:
    """HTTP client wrapper for the Form3 API.

    Resolves relative URIs against the base URL, encodes JSON bodies and
    decodes responses into typed results or structured errors. No retries are
    performed: every call is a single round trip.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize HTTP client.

        Args:
            base_url: Base URL for API requests (defaults to settings)
            http_client: Underlying transport; created and owned here if omitted
            timeout: Default request timeout in seconds for an owned transport
        """
        self.base_url = base_url or settings.api_base_url
        self.timeout = timeout if timeout is not None else settings.timeout

        if http_client is None:
            self.client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                headers={
                    "User-Agent": "form3-python-client/0.1.0",
                    "Accept": "application/json",
                },
            )
            self._owns_client = True
        else:
            self.client = http_client
            self._owns_client = False

        logger.info(f"HTTP client initialized with base URL: {self.base_url}")

    @property
    def base_url(self) -> str:
        return self._base_url

    @base_url.setter
    def base_url(self, value: str) -> None:
        parsed = urlsplit(value)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError(f"Base URL must be absolute: {value!r}")
        self._base_url = value

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def close(self):
        """Close the underlying transport if it was created by this client."""
        if self._owns_client:
            await self.client.aclose()
            logger.debug("HTTP client closed")

    def _build_url(self, uri: str) -> str:
        """Resolve the path and query of ``uri`` against the base URL.

        Scheme and host of ``uri`` are ignored, so a fully-qualified URL
        pointing elsewhere still targets the configured API.
        """
        try:
            parsed = urlsplit(uri)
        except ValueError as e:
            raise RequestError(f"Failed to parse uri {uri!r}: {e}") from e

        path = parsed.path
        if path.startswith("//"):
            # would otherwise be read back as a network-path reference
            path = "/" + path.lstrip("/")

        reference = urlunsplit(("", "", path, parsed.query, ""))
        return urljoin(self.base_url, reference)

    def _encode_body(self, body: Any) -> bytes:
        """Serialize a request body to JSON bytes."""
        try:
            if isinstance(body, BaseModel):
                payload = body.model_dump(mode="json", by_alias=True, exclude_unset=True)
            else:
                payload = body
            return json.dumps(payload).encode("utf-8")
        except (TypeError, ValueError, PydanticSerializationError) as e:
            raise RequestError(f"Failed to marshal body: {e}") from e

    def _sanitize_for_logging(self, data: Any) -> Any:
        """Sanitize sensitive data for logging."""
        if isinstance(data, list):
            return [self._sanitize_for_logging(item) for item in data]
        if not isinstance(data, dict):
            return data

        sanitized = {}
        for key, value in data.items():
            key_lower = str(key).lower()
            if any(field in key_lower for field in SENSITIVE_FIELDS):
                if isinstance(value, str):
                    sanitized[key] = mask_sensitive_data(value)
                else:
                    sanitized[key] = "[MASKED]"
            else:
                sanitized[key] = self._sanitize_for_logging(value)

        return sanitized

    def build_request(
        self,
        method: str,
        uri: str,
        body: Any = None,
        timeout: Optional[float] = None,
    ) -> httpx.Request:
        """Build a request for ``uri`` relative to the base URL.

        Args:
            method: HTTP method (GET, POST, etc.)
            uri: Relative path with optional query, or a full URL
            body: Optional JSON body (pydantic model, dict or list)
            timeout: Optional per-request timeout in seconds

        Returns:
            The request, ready to be sent

        Raises:
            RequestError: If the uri cannot be parsed or the body encoded
        """
        url = self._build_url(uri)

        headers: Dict[str, str] = {}
        content = b""
        if body is not None:
            content = self._encode_body(body)
            headers["Content-Type"] = "application/json"

        extra: Dict[str, Any] = {}
        if timeout is not None:
            extra["timeout"] = timeout

        if logger.isEnabledFor(logging.DEBUG):
            log_data: Dict[str, Any] = {"method": method, "url": url}
            if body is not None:
                log_data["json"] = self._sanitize_for_logging(json.loads(content))
            logger.debug(f"Making request: {log_data}")

        try:
            return self.client.build_request(method, url, content=content, headers=headers, **extra)
        except httpx.InvalidURL as e:
            raise RequestError(f"Failed to parse uri {uri!r}: {e}") from e

    async def _send(self, request: httpx.Request) -> httpx.Response:
        """Send the request and read the whole body, always releasing the response."""
        response = None
        try:
            response = await self.client.send(request, stream=True)
            await response.aread()
        except httpx.TimeoutException as e:
            raise TimeoutError(f"Request timed out: {request.method} {request.url}") from e
        except httpx.NetworkError as e:
            raise ConnectionError(f"Connection failed: {e}") from e
        except httpx.RequestError as e:
            raise TransportError(f"Failed to send request: {e}") from e
        finally:
            if response is not None:
                await response.aclose()

        logger.debug(
            f"{request.method} {request.url} -> {response.status_code} "
            f"({len(response.content)} bytes)"
        )
        return response

    def _decode_response(self, response: httpx.Response, result_type: Optional[Any]) -> Any:
        """Decode the response into ``result_type`` or raise the matching error."""
        status_code = response.status_code
        if status_code == httpx.codes.NO_CONTENT:
            return None

        content = response.content

        if not response.is_success:
            reason = httpx.codes.get_reason_phrase(status_code)
            if not content:
                raise create_api_error(status_code, reason)

            try:
                error_body = _type_adapter(Optional[ErrorBody]).validate_json(content)
            except PydanticValidationError as e:
                raise DecodeError(
                    f"Failed to decode error response body: {e}",
                    status_code=status_code,
                ) from e

            message = error_body.error_message if error_body is not None else None
            raise create_api_error(status_code, message or reason)

        if result_type is None:
            return None

        if not content:
            raise DecodeError("Failed to decode response body: empty body", status_code=status_code)

        try:
            return _type_adapter(result_type).validate_json(content)
        except PydanticValidationError as e:
            raise DecodeError(
                f"Failed to decode response body: {e}",
                status_code=status_code,
            ) from e

    async def do(
        self,
        method: str,
        uri: str,
        body: Any = None,
        result_type: Optional[Type[T]] = None,
        timeout: Optional[float] = None,
    ) -> Optional[T]:
        """Make HTTP request to API endpoint.

        Args:
            method: HTTP method (GET, POST, etc.)
            uri: API path relative to the base URL, with optional query
            body: Optional JSON body
            result_type: Type to decode a successful response body into
            timeout: Optional per-request timeout in seconds

        Returns:
            Decoded response, or None for 204 or when no result type is given

        Raises:
            RequestError: When the request cannot be built
            TimeoutError: When request times out
            ConnectionError: When connection fails
            TransportError: For other transport failures
            DecodeError: When the response body cannot be decoded
            APIError: For non-2xx responses
        """
        request = self.build_request(method, uri, body=body, timeout=timeout)
        response = await self._send(request)
        return self._decode_response(response, result_type)

    async def get(
        self,
        uri: str,
        result_type: Optional[Type[T]] = None,
        timeout: Optional[float] = None,
    ) -> Optional[T]:
        """Make GET request."""
        return await self.do("GET", uri, result_type=result_type, timeout=timeout)

    async def post(
        self,
        uri: str,
        body: Any = None,
        result_type: Optional[Type[T]] = None,
        timeout: Optional[float] = None,
    ) -> Optional[T]:
        """Make POST request."""
        return await self.do("POST", uri, body=body, result_type=result_type, timeout=timeout)

    async def delete(
        self,
        uri: str,
        result_type: Optional[Type[T]] = None,
        timeout: Optional[float] = None,
    ) -> Optional[T]:
        """Make DELETE request."""
        return await self.do("DELETE", uri, result_type=result_type, timeout=timeout)
