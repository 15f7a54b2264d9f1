"""ABOUTME: Shared error handling utilities for the movie MCP tools.

Provides the error-kind codes a degraded search can carry, HTTP status code
helpers, and a helper that turns an arbitrary exception into display text.
Every failure kind ends up as a well-formed tool result, never as a raised
exception, so the widget always has a payload to render.
"""

from typing import Optional


# =============================================================================
# Error Code Constants
# =============================================================================

# Configuration errors
ERROR_MISSING_CREDENTIAL: str = "missing_credential"

# Upstream provider errors
ERROR_UPSTREAM_HTTP: str = "upstream_http_failure"
ERROR_NO_RESULTS: str = "no_results"

# Network and parsing errors
ERROR_NETWORK_OR_PARSE: str = "network_or_parse_failure"

# Error type per code, used in result metadata
ERROR_TYPES: dict[str, str] = {
    ERROR_MISSING_CREDENTIAL: "configuration_error",
    ERROR_UPSTREAM_HTTP: "upstream_error",
    ERROR_NO_RESULTS: "empty_result",
    ERROR_NETWORK_OR_PARSE: "network_error",
}

UNKNOWN_NETWORK_ERROR: str = "Unknown network error"


# =============================================================================
# HTTP Status Code Helpers
# =============================================================================

class HTTPStatusCodes:
    """Helper methods for HTTP status code checks.

    Provides semantic methods to check HTTP status codes instead of
    hardcoding numeric values throughout the codebase.
    """

    @staticmethod
    def is_success(status_code: int) -> bool:
        """Check if status code indicates success (2xx).

        Args:
            status_code: HTTP status code

        Returns:
            True if status code is in range 200-299
        """
        return 200 <= status_code < 300

    @staticmethod
    def is_rate_limit(status_code: int) -> bool:
        """Check if status code indicates rate limiting.

        Args:
            status_code: HTTP status code

        Returns:
            True if status code is 429 (Too Many Requests)
        """
        return status_code == 429

    @staticmethod
    def is_auth_error(status_code: int) -> bool:
        """Check if status code indicates authentication/authorization error.

        Args:
            status_code: HTTP status code

        Returns:
            True if status code is 401 (Unauthorized) or 403 (Forbidden)

        Example:
            if HTTPStatusCodes.is_auth_error(response.status_code):
                logger.warning("TMDB rejected the API key")
        """
        return status_code in (401, 403)

    @staticmethod
    def is_client_error(status_code: int) -> bool:
        """Check if status code indicates client error (4xx)."""
        return 400 <= status_code < 500

    @staticmethod
    def is_server_error(status_code: int) -> bool:
        """Check if status code indicates server error (5xx)."""
        return 500 <= status_code < 600


# =============================================================================
# Exception Helpers
# =============================================================================

def describe_exception(error: Optional[BaseException]) -> str:
    """Return the message carried by an exception.

    Falls back to UNKNOWN_NETWORK_ERROR when there is no exception or its
    message is empty (several httpx timeout exceptions have no text).

    Example:
        >>> describe_exception(ValueError("bad json"))
        'bad json'
        >>> describe_exception(TimeoutError())
        'Unknown network error'
    """
    if error is None:
        return UNKNOWN_NETWORK_ERROR
    message = str(error).strip()
    return message or UNKNOWN_NETWORK_ERROR


def error_type_for(error_code: Optional[str]) -> Optional[str]:
    """Map an error code to its error type category (None for success)."""
    if error_code is None:
        return None
    return ERROR_TYPES.get(error_code, "unexpected_error")
