"""ABOUTME: TMDB movie search backend.

Implements the MovieSearchBackend interface for The Movie Database (TMDB)
/search/movie endpoint: one GET per search, first page only, adult titles
excluded, top results mapped to MovieCard records.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

import httpx
from pydantic import ValidationError

from ..config import MovieSearchSettings, TMDB_API_KEY_ENV, load_settings
from ..error_handling import HTTPStatusCodes, describe_exception
from ..http_utils import http_get, read_status_message
from .backend import MovieSearchBackend, SearchErrorKind, SearchOutcome
from .models import MovieCard, TMDBMovieResult, TMDBSearchPayload

# Configure logging
logger = logging.getLogger(__name__)

TMDB_SEARCH_URL = "https://api.themoviedb.org/3/search/movie"
TMDB_POSTER_BASE_URL = "https://image.tmdb.org/t/p/w500"

MAX_MOVIE_RESULTS = 3
RELEASE_YEAR_FALLBACK = "N/A"
RATING_PRECISION = Decimal("0.1")

MISSING_KEY_MESSAGE = f"TMDB API key is missing. Set {TMDB_API_KEY_ENV} and try again."
NETWORK_ERROR_PREFIX = "Unable to fetch movie results right now"


# ============================================================================
# RESULT MAPPING
# ============================================================================


def format_release_year(release_date: Optional[str]) -> str:
    """Return the year segment of a TMDB release date, or 'N/A'.

    Examples:
        >>> format_release_year("1999-03-31")
        '1999'
        >>> format_release_year("2020")
        '2020'
        >>> format_release_year(None)
        'N/A'
    """
    if not release_date:
        return RELEASE_YEAR_FALLBACK
    year = release_date.split("-")[0]
    return year or RELEASE_YEAR_FALLBACK


def round_rating(vote_average: Optional[float]) -> float:
    """Round a vote average to one decimal, half-up on the exact value.

    None counts as 0.0. Half-up matches how the widget has always displayed
    ratings (7.25 -> 7.3), which Python's round() would not.
    """
    if vote_average is None:
        return 0.0
    return float(Decimal(vote_average).quantize(RATING_PRECISION, rounding=ROUND_HALF_UP))


def build_poster_url(poster_path: Optional[str]) -> Optional[str]:
    """Join the image CDN base with a poster path; None when there is no poster."""
    if not poster_path:
        return None
    return f"{TMDB_POSTER_BASE_URL}{poster_path}"


def map_movie_to_card(movie: TMDBMovieResult) -> MovieCard:
    """Convert one upstream result into a display-ready MovieCard."""
    return MovieCard(
        id=movie.id,
        title=movie.title,
        release_year=format_release_year(movie.release_date),
        rating=round_rating(movie.vote_average),
        poster_url=build_poster_url(movie.poster_path),
    )


def no_results_message(query: str) -> str:
    return f'No movies found for "{query}".'


# ============================================================================
# BACKEND
# ============================================================================


class TMDBSearchBackend(MovieSearchBackend):
    """TMDB search backend.

    Loads settings on every search unless given fixed ones; a missing key
    short-circuits before any network call. No retries, no caching, first page
    only.
    """

    def __init__(
        self,
        settings: Optional[MovieSearchSettings] = None,
        search_url: str = TMDB_SEARCH_URL,
        max_results: int = MAX_MOVIE_RESULTS,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """Initialize TMDB backend.

        Args:
            settings: Fixed settings. None means load from the environment per search.
            search_url: Search endpoint URL
            max_results: Number of top results to keep
            transport: Optional httpx transport (used by tests)
        """
        self.settings = settings
        self.search_url = search_url
        self.max_results = max_results
        self.transport = transport

    @property
    def name(self) -> str:
        """Backend name."""
        return "tmdb"

    def build_params(self, api_key: str, query: str) -> dict[str, str]:
        """Query parameters for one /search/movie request."""
        return {
            "api_key": api_key,
            "query": query,
            "page": "1",
            "include_adult": "false",
        }

    async def search(self, query: str) -> SearchOutcome:
        """Execute a TMDB movie search.

        Args:
            query: Movie title text, sent verbatim

        Returns:
            SearchOutcome with up to max_results cards, or an error outcome
            (missing credential, upstream HTTP failure, no results,
            network/parse failure)
        """
        try:
            settings = self.settings if self.settings is not None else load_settings()
        except ValidationError as e:
            logger.error(f"Invalid movie search settings: {e.error_count()} error(s)")
            return self._network_failure(query, e)

        api_key = settings.tmdb_api_key
        if not api_key:
            logger.warning(f"{TMDB_API_KEY_ENV} not set; skipping TMDB request")
            return SearchOutcome.failure(query, SearchErrorKind.MISSING_CREDENTIAL, MISSING_KEY_MESSAGE)

        try:
            logger.info(f"TMDB search: '{query}'")

            response = await http_get(
                self.search_url,
                params=self.build_params(api_key, query),
                timeout=float(settings.tmdb_timeout_seconds),
                transport=self.transport
            )

            if not HTTPStatusCodes.is_success(response.status_code):
                return self._http_failure(query, response)

            payload = TMDBSearchPayload.model_validate(response.json())
            movies = [map_movie_to_card(movie) for movie in payload.results[:self.max_results]]

        except ValidationError as e:
            logger.error(f"TMDB response did not match expected schema: {e.error_count()} error(s)")
            return self._network_failure(query, e)
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"TMDB request failed: {type(e).__name__}: {describe_exception(e)}")
            return self._network_failure(query, e)
        except Exception as e:
            logger.error(f"Unexpected error during TMDB search: {e}", exc_info=True)
            return self._network_failure(query, e)

        if not movies:
            logger.info(f"TMDB returned no results for '{query}'")
            return SearchOutcome.failure(query, SearchErrorKind.NO_RESULTS, no_results_message(query))

        logger.info(f"TMDB search completed: {len(movies)} result(s) for '{query}'")
        return SearchOutcome.success(query, movies)

    def _http_failure(self, query: str, response: httpx.Response) -> SearchOutcome:
        status = response.status_code
        if HTTPStatusCodes.is_auth_error(status):
            logger.warning(f"TMDB rejected credentials (HTTP {status}); check {TMDB_API_KEY_ENV}")
        elif HTTPStatusCodes.is_rate_limit(status):
            logger.warning("TMDB rate limit hit (HTTP 429)")
        elif HTTPStatusCodes.is_server_error(status):
            logger.error(f"TMDB server error (HTTP {status})")
        elif HTTPStatusCodes.is_client_error(status):
            logger.warning(f"TMDB rejected the request (HTTP {status})")
        else:
            logger.warning(f"TMDB returned unexpected HTTP {status}")

        details = read_status_message(response)
        error = f"TMDB request failed with status {status}."
        if details:
            error = f"{error} {details}".strip()
        return SearchOutcome.failure(query, SearchErrorKind.UPSTREAM_HTTP_FAILURE, error)

    def _network_failure(self, query: str, error: Exception) -> SearchOutcome:
        message = f"{NETWORK_ERROR_PREFIX}: {describe_exception(error)}"
        return SearchOutcome.failure(query, SearchErrorKind.NETWORK_OR_PARSE_FAILURE, message)
