"""ABOUTME: Common MCP server utilities and shared infrastructure for the movie server."""

from .mcp_base import MCPServerBase
from .config import MovieSearchSettings, LauncherSettings, load_settings
from .error_handling import (
    # Error code constants
    ERROR_MISSING_CREDENTIAL,
    ERROR_UPSTREAM_HTTP,
    ERROR_NO_RESULTS,
    ERROR_NETWORK_OR_PARSE,
    # HTTP status code helpers
    HTTPStatusCodes,
    # Exception helpers
    describe_exception,
)

__all__ = [
    "MCPServerBase",
    "MovieSearchSettings",
    "LauncherSettings",
    "load_settings",
    # Error code constants
    "ERROR_MISSING_CREDENTIAL",
    "ERROR_UPSTREAM_HTTP",
    "ERROR_NO_RESULTS",
    "ERROR_NETWORK_OR_PARSE",
    # HTTP status code helpers
    "HTTPStatusCodes",
    # Exception helpers
    "describe_exception",
]
