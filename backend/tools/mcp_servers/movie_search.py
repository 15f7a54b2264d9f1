"""ABOUTME: Movie Search MCP Server - TMDB title search rendered in a results widget.

Exposes one tool, search_movies, which queries TMDB and returns dual-format
responses: a one-line status for LLM context + structured JSON for the widget.
The widget template itself is served as an MCP resource.
"""

import time
from typing import Annotated

from mcp.server.fastmcp import Context
from mcp.types import CallToolResult
from pydantic import Field

from movie_mcp.mcp_base import MCPServerBase
from movie_mcp.config import load_settings
from movie_mcp.search import SearchErrorKind, SearchOutcome, get_movie_backend, shape_search_response
from movie_mcp.search.tmdb import NETWORK_ERROR_PREFIX
from movie_mcp.search.widget import (
    SKYBRIDGE_MIME,
    TOOL_WIDGET_META,
    WIDGET_DESCRIPTION,
    WIDGET_HTML,
    WIDGET_NAME,
    WIDGET_RESOURCE_META,
    WIDGET_TITLE,
    WIDGET_URI,
)

# Initialize MCP server with base class
server = MCPServerBase("movie-mcp-server")
mcp = server.get_mcp()
logger = server.get_logger()

# ============================================================================
# CONSTANTS
# ============================================================================

TOOL_NAME = "search_movies"
TOOL_TITLE = "Search Movies"
TOOL_DESCRIPTION = "Search TMDB for movies by title and display the top results in a visual widget."

MIN_QUERY_LENGTH = 1


# ============================================================================
# SEARCH EXECUTION
# ============================================================================


async def run_search(query: str) -> CallToolResult:
    """Run one search against the configured backend and shape the result.

    Never raises: invalid settings or an unknown MOVIE_SEARCH_BACKEND degrade
    to a network/parse outcome like any other failure. Settings are loaded
    fresh on every call.
    """
    start = time.monotonic()
    server.log_tool_start(TOOL_NAME, query=query)

    try:
        settings = load_settings()
        backend = get_movie_backend(settings=settings)
    except ValueError as e:
        server.log_tool_error(TOOL_NAME, SearchErrorKind.NETWORK_OR_PARSE_FAILURE.value, str(e))
        outcome = SearchOutcome.failure(
            query,
            SearchErrorKind.NETWORK_OR_PARSE_FAILURE,
            f"{NETWORK_ERROR_PREFIX}: {e}"
        )
        return shape_search_response(outcome)

    outcome = await backend.search(query)
    duration_ms = int((time.monotonic() - start) * 1000)

    if outcome.ok:
        server.log_tool_complete(TOOL_NAME, results=len(outcome.movies), duration_ms=duration_ms)
    else:
        server.log_tool_error(
            TOOL_NAME,
            outcome.error_kind.value,
            outcome.error,
            query=query,
            duration_ms=duration_ms
        )

    return shape_search_response(outcome, backend.name)


# ============================================================================
# MCP RESOURCE + TOOL DEFINITIONS
# ============================================================================


@mcp.resource(
    WIDGET_URI,
    name=WIDGET_NAME,
    title=WIDGET_TITLE,
    description=WIDGET_DESCRIPTION,
    mime_type=SKYBRIDGE_MIME,
    meta=WIDGET_RESOURCE_META,
)
def search_movies_widget() -> str:
    """HTML template that renders search_movies results."""
    return WIDGET_HTML


@mcp.tool(
    name=TOOL_NAME,
    title=TOOL_TITLE,
    description=TOOL_DESCRIPTION,
    meta=TOOL_WIDGET_META,
)
async def search_movies(
    query: Annotated[str, Field(min_length=MIN_QUERY_LENGTH, description="The movie title to search for")],
    ctx: Context = None
) -> CallToolResult:
    """Search TMDB for movies by title.

    Returns the top 3 matches as movie cards (title, release year, rating,
    poster). Failures are reported in the payload's error field rather than
    raised, so the widget always has something to show.

    Examples:
        search_movies("The Matrix")
        search_movies("Spirited Away")
    """
    if ctx:
        await ctx.info(f"Searching movies: {query}")

    result = await run_search(query)

    if ctx:
        await ctx.info(result.content[0].text)
    return result


# ============================================================================
# SERVER ENTRY POINT
# ============================================================================


if __name__ == "__main__":
    logger.info("Starting Movie Search MCP server (Streamable HTTP)...")
    server.run(transport="streamable-http")
