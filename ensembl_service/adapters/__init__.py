"""Adapter layer package for outbound HTTP integration boundaries."""

from .http_errors import (
	HttpToolAllocationError,
	HttpToolConfigurationError,
	HttpToolError,
	HttpToolTimeoutError,
	HttpToolTransportError,
)
from .http_tool import HttpxClientTool, adapters_create_http_tool_factory, adapters_validate_http_url
from .interfaces import HttpClientToolPort, HttpToolFactory

__all__ = [
	"HttpClientToolPort",
	"HttpToolAllocationError",
	"HttpToolConfigurationError",
	"HttpToolError",
	"HttpToolFactory",
	"HttpToolTimeoutError",
	"HttpToolTransportError",
	"HttpxClientTool",
	"adapters_create_http_tool_factory",
	"adapters_validate_http_url",
]
