"""httpx-backed HTTP client tool with in-memory response capture."""

from __future__ import annotations

import logging
from typing import Any, Final

import httpx

from .http_errors import (
    HttpToolAllocationError,
    HttpToolConfigurationError,
    HttpToolTimeoutError,
    HttpToolTransportError,
)
from .interfaces import HttpClientToolPort, HttpToolFactory

logger = logging.getLogger(__name__)


class HttpxClientTool(HttpClientToolPort):
    """HTTP client tool issuing one configured request per call through `httpx.Client`."""

    _DEFAULT_USER_AGENT: Final[str] = "ensembl-service/1.0 (Python/httpx)"
    _JSON_CONTENT_TYPE: Final[str] = "application/json"

    def __init__(
        self,
        timeout_seconds: float = 30.0,
        user_agent: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the tool and its underlying HTTP client.

        Args:
            timeout_seconds: Request timeout in seconds.
            user_agent: Optional User-Agent header value.
            transport: Optional httpx transport, used to substitute network access.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when the timeout is not positive.
        """

        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")

        self._user_agent = (user_agent or self._DEFAULT_USER_AGENT).strip() or self._DEFAULT_USER_AGENT
        self._client = httpx.Client(timeout=httpx.Timeout(timeout_seconds), transport=transport)
        self._method: str | None = None
        self._headers: dict[str, str] = {}
        self._closed = False

    def __enter__(self) -> "HttpxClientTool":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.tool_close()

    def tool_configure_json_post(self) -> None:
        """Configure JSON POST headers for the next request.

        Raises:
            HttpToolConfigurationError: Raised when the tool has already been closed.
        """

        if self._closed:
            raise HttpToolConfigurationError("HTTP client tool is already closed")

        self._method = "POST"
        self._headers = {
            "Accept": self._JSON_CONTENT_TYPE,
            "Content-Type": self._JSON_CONTENT_TYPE,
            "User-Agent": self._user_agent,
        }

    def tool_post_json(
        self,
        url: str,
        body: Any,
        query_parameters: dict[str, str] | None = None,
    ) -> bytes | None:
        """Execute one JSON POST and return the response body captured in memory.

        Args:
            url: Target endpoint URL.
            body: JSON-serializable request body.
            query_parameters: Optional URL query parameters.

        Returns:
            bytes | None: Response body bytes, or None when the body is empty.

        Raises:
            HttpToolConfigurationError: Raised when the tool is closed or not configured for POST.
            HttpToolTimeoutError: Raised when the request times out.
            HttpToolTransportError: Raised for network failures, malformed URLs and HTTP status >= 400.
        """

        if self._closed:
            raise HttpToolConfigurationError("HTTP client tool is already closed")
        if self._method != "POST":
            raise HttpToolConfigurationError("HTTP client tool is not configured for JSON POST")

        try:
            response = self._client.post(
                url,
                json=body,
                params=query_parameters or None,
                headers=self._headers,
            )
        except httpx.TimeoutException as error:
            raise HttpToolTimeoutError("HTTP request timed out") from error
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as error:
            raise HttpToolTransportError(f"HTTP transport request failed: {error}") from error

        if response.status_code >= 400:
            raise HttpToolTransportError(
                f"upstream returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        payload = response.content
        if not payload:
            return None
        return bytes(payload)

    def tool_close(self) -> None:
        """Close the underlying HTTP client once."""

        if self._closed:
            return
        self._closed = True
        self._client.close()


def adapters_create_http_tool_factory(
    timeout_seconds: float = 30.0,
    user_agent: str | None = None,
    transport: httpx.BaseTransport | None = None,
) -> HttpToolFactory:
    """Build a factory that acquires one `HttpxClientTool` per call.

    Args:
        timeout_seconds: Request timeout applied to every tool.
        user_agent: Optional User-Agent header value.
        transport: Optional httpx transport shared by every tool.

    Returns:
        HttpToolFactory: Zero-argument callable returning a new tool.

    Raises:
        RuntimeError: This helper does not raise runtime errors; the returned factory
            raises `HttpToolAllocationError` when a tool cannot be built.
    """

    def _factory() -> HttpClientToolPort:
        try:
            return HttpxClientTool(timeout_seconds=timeout_seconds, user_agent=user_agent, transport=transport)
        except (ValueError, httpx.HTTPError) as error:
            logger.debug("HTTP client tool construction failed: %s", error)
            raise HttpToolAllocationError(f"failed to allocate HTTP client tool: {error}") from error

    return _factory


def adapters_validate_http_url(url: str) -> str:
    """Parse an absolute http(s) URL with httpx and return it stripped.

    Args:
        url: Candidate base URL.

    Returns:
        str: Stripped URL accepted by the HTTP client.

    Raises:
        ValueError: Raised when the URL cannot be parsed or is not an absolute http(s) URL.
    """

    stripped_url = url.strip()
    try:
        parsed_url = httpx.URL(stripped_url)
    except httpx.InvalidURL as error:
        raise ValueError(f"invalid URL {stripped_url!r}: {error}") from error
    if parsed_url.scheme not in ("http", "https") or not parsed_url.host:
        raise ValueError(f"URL must be an absolute http:// or https:// URL: {stripped_url!r}")
    return stripped_url
