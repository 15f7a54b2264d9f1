"""ABOUTME: Response shaping for the search_movies tool.

Turns a SearchOutcome into the dual-channel tool result: a one-line status
message for the model and the structured payload the widget renders.
Pure functions, no I/O.
"""

from typing import Any, Dict, Optional

from mcp.types import CallToolResult, TextContent

from ..error_handling import error_type_for
from .backend import SearchErrorKind, SearchOutcome
from .tmdb import no_results_message

# Status messages per error kind (success and no-results are built from the query)
STATUS_MESSAGES: Dict[SearchErrorKind, str] = {
    SearchErrorKind.MISSING_CREDENTIAL: "Movie search failed because the TMDB API key is not configured.",
    SearchErrorKind.UPSTREAM_HTTP_FAILURE: "Movie search failed due to an external API error.",
    SearchErrorKind.NETWORK_OR_PARSE_FAILURE: "Movie search failed due to a network or parsing error.",
}


def build_status_message(outcome: SearchOutcome) -> str:
    """Pick the one-line summary for an outcome.

    Examples:
        'Found 3 movie result(s) for "Alien".'
        'No movies found for "zzzz".'
    """
    if outcome.error_kind is None:
        return f'Found {len(outcome.movies)} movie result(s) for "{outcome.query}".'
    if outcome.error_kind == SearchErrorKind.NO_RESULTS:
        return no_results_message(outcome.query)
    return STATUS_MESSAGES[outcome.error_kind]


def build_widget_payload(outcome: SearchOutcome) -> Dict[str, Any]:
    """Structured payload for the widget: query, movies, and error when set."""
    payload: Dict[str, Any] = {
        "query": outcome.query,
        "movies": [movie.to_payload() for movie in outcome.movies],
    }
    if outcome.error:
        payload["error"] = outcome.error
    return payload


def build_result_metadata(outcome: SearchOutcome, backend_name: Optional[str] = None) -> Dict[str, Any]:
    """Debug metadata attached next to the payload (not rendered by the widget)."""
    error_code = outcome.error_kind.value if outcome.error_kind else None
    metadata: Dict[str, Any] = {
        "query_used": outcome.query,
        "results_count": len(outcome.movies),
    }
    if backend_name:
        metadata["search_backend"] = backend_name
    if error_code:
        metadata["error_code"] = error_code
        metadata["error_type"] = error_type_for(error_code)
    return metadata


def shape_search_response(outcome: SearchOutcome, backend_name: Optional[str] = None) -> CallToolResult:
    """Package a SearchOutcome as a CallToolResult.

    Degraded outcomes are still successful tool results (isError stays False)
    so the widget always receives a payload to render.
    """
    return CallToolResult(
        content=[TextContent(type="text", text=build_status_message(outcome))],
        structuredContent=build_widget_payload(outcome),
        metadata=build_result_metadata(outcome, backend_name)
    )
