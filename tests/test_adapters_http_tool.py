"""Regression tests for the httpx-backed HTTP client tool error mapping and capture."""

from __future__ import annotations

import json

import httpx
import pytest

from ensembl_service.adapters import (
    HttpToolAllocationError,
    HttpToolConfigurationError,
    HttpToolTimeoutError,
    HttpToolTransportError,
    HttpxClientTool,
    adapters_create_http_tool_factory,
    adapters_validate_http_url,
)


def test_adapters_http_tool_posts_json_body_and_captures_response() -> None:
    """Send a JSON POST with query parameters and return the body bytes.

    Returns:
        None: Assertions validate request shape and in-memory capture.

    Raises:
        AssertionError: Raised when the request or captured body is wrong.
    """

    captured_requests: list[httpx.Request] = []
    response_document = {"sequences": [{"id": "AT1G01010", "seq": "ATG..."}]}

    def _handler(request: httpx.Request) -> httpx.Response:
        captured_requests.append(request)
        return httpx.Response(200, json=response_document)

    with HttpxClientTool(transport=httpx.MockTransport(_handler), user_agent="test-agent") as tool:
        tool.tool_configure_json_post()
        payload = tool.tool_post_json(
            url="https://rest.example.test/sequence/id",
            body={"query": "AT1G01010"},
            query_parameters={"species": "arabidopsis_thaliana"},
        )

    assert payload is not None
    assert json.loads(payload) == response_document
    request = captured_requests[0]
    assert request.method == "POST"
    assert json.loads(request.content) == {"query": "AT1G01010"}
    assert request.url.params["species"] == "arabidopsis_thaliana"
    assert request.headers["Content-Type"] == "application/json"
    assert request.headers["User-Agent"] == "test-agent"


def test_adapters_http_tool_empty_body_returns_none() -> None:
    """Return None when upstream answers with an empty body.

    Returns:
        None: Assertions validate empty-body handling.

    Raises:
        AssertionError: Raised when an empty body is surfaced as bytes.
    """

    tool = HttpxClientTool(transport=httpx.MockTransport(lambda request: httpx.Response(200, content=b"")))
    tool.tool_configure_json_post()

    assert tool.tool_post_json(url="https://rest.example.test/sequence/id", body={"query": "X"}) is None
    tool.tool_close()


def test_adapters_http_tool_error_status_raises_transport_error() -> None:
    """Map HTTP status >= 400 onto a transport error carrying the status code.

    Returns:
        None: Assertions validate status error mapping.

    Raises:
        AssertionError: Raised when error status is not mapped.
    """

    tool = HttpxClientTool(transport=httpx.MockTransport(lambda request: httpx.Response(503, text="busy")))
    tool.tool_configure_json_post()

    with pytest.raises(HttpToolTransportError, match="HTTP 503") as error_info:
        tool.tool_post_json(url="https://rest.example.test/sequence/id", body={"query": "X"})

    assert error_info.value.status_code == 503


def test_adapters_http_tool_connection_refused_raises_transport_error() -> None:
    """Map httpx connection failures onto a transport error.

    Returns:
        None: Assertions validate connection error mapping.

    Raises:
        AssertionError: Raised when connection errors escape unmapped.
    """

    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    tool = HttpxClientTool(transport=httpx.MockTransport(_handler))
    tool.tool_configure_json_post()

    with pytest.raises(HttpToolTransportError, match="connection refused"):
        tool.tool_post_json(url="https://rest.example.test/sequence/id", body={"query": "X"})


def test_adapters_http_tool_timeout_raises_timeout_error() -> None:
    """Map httpx timeouts onto the typed timeout error.

    Returns:
        None: Assertions validate timeout mapping.

    Raises:
        AssertionError: Raised when timeouts are not distinguished.
    """

    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    tool = HttpxClientTool(transport=httpx.MockTransport(_handler))
    tool.tool_configure_json_post()

    with pytest.raises(HttpToolTimeoutError, match="timed out"):
        tool.tool_post_json(url="https://rest.example.test/sequence/id", body={"query": "X"})


def test_adapters_http_tool_requires_post_configuration() -> None:
    """Reject requests on unconfigured or closed tools.

    Returns:
        None: Assertions validate configuration guards.

    Raises:
        AssertionError: Raised when guards are bypassed.
    """

    tool = HttpxClientTool(transport=httpx.MockTransport(lambda request: httpx.Response(200, json={})))

    with pytest.raises(HttpToolConfigurationError, match="not configured"):
        tool.tool_post_json(url="https://rest.example.test/sequence/id", body={"query": "X"})

    tool.tool_close()
    tool.tool_close()

    with pytest.raises(HttpToolConfigurationError, match="already closed"):
        tool.tool_configure_json_post()


def test_adapters_http_tool_factory_maps_invalid_config_to_allocation_error() -> None:
    """Raise allocation error from the factory when the tool cannot be built.

    Returns:
        None: Assertions validate factory error mapping.

    Raises:
        AssertionError: Raised when invalid config is not mapped.
    """

    factory = adapters_create_http_tool_factory(timeout_seconds=0)

    with pytest.raises(HttpToolAllocationError, match="timeout_seconds"):
        factory()


def test_adapters_http_tool_factory_builds_independent_tools() -> None:
    """Build a new tool on every factory call.

    Returns:
        None: Assertions validate per-call acquisition.

    Raises:
        AssertionError: Raised when tools are shared between calls.
    """

    factory = adapters_create_http_tool_factory(
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json={})),
    )

    first_tool = factory()
    second_tool = factory()

    assert first_tool is not second_tool
    first_tool.tool_close()
    second_tool.tool_close()


def test_adapters_http_tool_malformed_url_raises_transport_error() -> None:
    """Map httpx URL parsing failures onto a transport error.

    Returns:
        None: Assertions validate malformed URL mapping.

    Raises:
        AssertionError: Raised when URL errors escape unmapped.
    """

    tool = HttpxClientTool(transport=httpx.MockTransport(lambda request: httpx.Response(200, json={})))
    tool.tool_configure_json_post()

    with pytest.raises(HttpToolTransportError, match="Invalid port"):
        tool.tool_post_json(url="http://localhost:notaport/sequence/id", body={"query": "X"})

    tool.tool_close()


@pytest.mark.parametrize(
    "candidate_url",
    ["http://localhost:notaport/", "ftp://rest.example.test/", "rest.example.test/sequence", "http://"],
)
def test_adapters_validate_http_url_rejects_unusable_urls(candidate_url: str) -> None:
    """Reject URLs the HTTP client cannot send requests to.

    Args:
        candidate_url: Candidate base URL.

    Returns:
        None: Assertions validate URL rejection.

    Raises:
        AssertionError: Raised when an unusable URL is accepted.
    """

    with pytest.raises(ValueError):
        adapters_validate_http_url(candidate_url)


def test_adapters_validate_http_url_returns_stripped_url() -> None:
    """Accept absolute http(s) URLs and strip surrounding whitespace.

    Returns:
        None: Assertions validate accepted URL output.

    Raises:
        AssertionError: Raised when a valid URL is rejected or altered.
    """

    assert adapters_validate_http_url(" https://rest.example.test:8443/ ") == "https://rest.example.test:8443/"
