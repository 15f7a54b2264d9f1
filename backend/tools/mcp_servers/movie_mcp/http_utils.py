"""ABOUTME: HTTP client utilities for MCP tools - async HTTP operations for upstream APIs."""

import logging
from typing import Optional, Dict, Any

import httpx

from .error_handling import HTTPStatusCodes

logger = logging.getLogger(__name__)

# httpx logs every request URL at INFO, and TMDB takes api_key as a query parameter
for _client_logger in ("httpx", "httpcore"):
    logging.getLogger(_client_logger).setLevel(logging.WARNING)

# Constants
DEFAULT_HTTP_TIMEOUT = 10.0


async def http_get(
    url: str,
    headers: Optional[Dict[str, str]] = None,
    params: Optional[Dict[str, Any]] = None,
    timeout: float = DEFAULT_HTTP_TIMEOUT,
    follow_redirects: bool = True,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> httpx.Response:
    """Perform a single async HTTP GET and return the fully read response.

    Non-2xx statuses are returned, not raised, so callers can classify them.
    Transport-level failures propagate as httpx exceptions.
    """
    async with httpx.AsyncClient(
        timeout=timeout,
        follow_redirects=follow_redirects,
        transport=transport
    ) as client:
        return await client.get(url, headers=headers, params=params)


def read_status_message(response: httpx.Response) -> Optional[str]:
    """Best-effort extraction of a provider's `status_message` from an error body.

    Returns None when the body is not JSON, is not an object, or carries no
    string status_message. Never raises for a malformed body.
    """
    try:
        body = response.json()
    except ValueError:
        logger.debug(f"Error body for HTTP {response.status_code} is not JSON")
        return None

    if isinstance(body, dict):
        message = body.get("status_message")
        if isinstance(message, str):
            return message
    return None


__all__ = [
    "DEFAULT_HTTP_TIMEOUT",
    "http_get",
    "read_status_message",
    "HTTPStatusCodes",
]
