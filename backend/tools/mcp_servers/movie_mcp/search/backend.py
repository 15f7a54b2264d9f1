"""ABOUTME: Abstract interface for movie search backends.

Defines the MovieSearchBackend interface that all search implementations must
follow, along with the SearchOutcome data class every search produces.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..error_handling import (
    ERROR_MISSING_CREDENTIAL,
    ERROR_NETWORK_OR_PARSE,
    ERROR_NO_RESULTS,
    ERROR_UPSTREAM_HTTP,
)
from .models import MovieCard


class SearchErrorKind(str, Enum):
    """Why a search produced no movies."""
    MISSING_CREDENTIAL = ERROR_MISSING_CREDENTIAL
    UPSTREAM_HTTP_FAILURE = ERROR_UPSTREAM_HTTP
    NO_RESULTS = ERROR_NO_RESULTS
    NETWORK_OR_PARSE_FAILURE = ERROR_NETWORK_OR_PARSE


@dataclass(frozen=True)
class SearchOutcome:
    """Result of one movie search.

    Attributes:
        query: Original query text, verbatim
        movies: At most MAX_MOVIE_RESULTS cards in upstream relevance order
        error: Human-readable reason the search returned nothing (optional)
        error_kind: Machine-readable category for error (optional)
    """
    query: str
    movies: tuple[MovieCard, ...] = ()
    error: Optional[str] = None
    error_kind: Optional[SearchErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    @classmethod
    def success(cls, query: str, movies: list[MovieCard]) -> "SearchOutcome":
        return cls(query=query, movies=tuple(movies))

    @classmethod
    def failure(cls, query: str, kind: SearchErrorKind, error: str) -> "SearchOutcome":
        return cls(query=query, movies=(), error=error, error_kind=kind)


class MovieSearchBackend(ABC):
    """Abstract interface for movie search backends.

    Implementations never raise from search(): every failure is reported as a
    SearchOutcome carrying an error_kind.
    """

    @abstractmethod
    async def search(self, query: str) -> SearchOutcome:
        """Search movies by title.

        Args:
            query: Movie title text (may be empty; passed upstream verbatim)

        Returns:
            SearchOutcome with up to MAX_MOVIE_RESULTS cards or an error
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Backend name (e.g., 'tmdb')."""
        pass
