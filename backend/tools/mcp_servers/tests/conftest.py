"""ABOUTME: Pytest configuration and shared fixtures for movie MCP server tests.

Provides sample TMDB payloads, settings objects, and mock httpx
transports that record outgoing requests instead of hitting the network.
"""

import pytest
import httpx

from movie_mcp.config import MovieSearchSettings


@pytest.fixture
def tmdb_settings():
    """Fixture providing settings with a TMDB API key set.

    Returns:
        MovieSearchSettings built from constructor values, not the environment
    """
    return MovieSearchSettings(tmdb_api_key="test-key")


@pytest.fixture
def missing_key_settings():
    """Fixture providing settings without a TMDB API key."""
    return MovieSearchSettings(tmdb_api_key=None)


@pytest.fixture
def tmdb_results():
    """Fixture providing sample /search/movie results in relevance order.

    Returns:
        List of four TMDB result dicts
    """
    return [
        {
            "id": 603,
            "title": "The Matrix",
            "release_date": "1999-03-31",
            "vote_average": 8.218,
            "poster_path": "/f89U3ADr1oiB1s9GkdPOEpXUk5H.jpg",
            "overview": "Set in the 22nd century...",
        },
        {
            "id": 604,
            "title": "The Matrix Reloaded",
            "release_date": "2003-05-15",
            "vote_average": 7.666,
            "poster_path": None,
        },
        {
            "id": 605,
            "title": "The Matrix Revolutions",
            "release_date": "",
            "vote_average": None,
        },
        {
            "id": 624860,
            "title": "The Matrix Resurrections",
            "release_date": "2021-12-16",
            "vote_average": 6.4,
            "poster_path": "/8c4a8kE7PizaGQQnditMmI1xbRp.jpg",
        },
    ]


@pytest.fixture
def make_transport():
    """Fixture providing a factory for recording mock transports.

    The factory returns (transport, requests); every request the transport
    receives is appended to requests.

    Example:
        transport, requests = make_transport(json={"results": []})
        transport, requests = make_transport(status_code=401, json={"status_message": "bad key"})
        transport, requests = make_transport(error=httpx.ConnectError("refused"))
    """
    def _make(status_code=200, json=None, content=None, error=None):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if error is not None:
                raise error
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=json)

        return httpx.MockTransport(handler), requests

    return _make
