"""Typed interfaces for adapter-layer responsibilities."""

from __future__ import annotations

from typing import Any, Callable, Protocol


class HttpClientToolPort(Protocol):
    """Port definition for issuing one configured HTTP request with in-memory capture."""

    def tool_configure_json_post(self) -> None:
        """Configure the tool for a POST request carrying a JSON body.

        Returns:
            None: Configures the tool as side effect.

        Raises:
            HttpToolConfigurationError: Raised when the tool cannot be configured.
        """

    def tool_post_json(
        self,
        url: str,
        body: Any,
        query_parameters: dict[str, str] | None = None,
    ) -> bytes | None:
        """Execute the configured POST and return the captured response body.

        Args:
            url: Target endpoint URL.
            body: JSON-serializable request body.
            query_parameters: Optional URL query parameters.

        Returns:
            bytes | None: Response body bytes, or None when the body is empty.

        Raises:
            HttpToolConfigurationError: Raised when the tool was not configured for POST.
            HttpToolTransportError: Raised for connectivity failures and non-success HTTP status.
            HttpToolTimeoutError: Raised when the request exceeds its timeout.
        """

    def tool_close(self) -> None:
        """Release transport resources held by the tool."""

    def __enter__(self) -> "HttpClientToolPort":
        """Enter the scoped acquisition block."""

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        """Release the tool when the scoped block exits."""


HttpToolFactory = Callable[[], HttpClientToolPort]
