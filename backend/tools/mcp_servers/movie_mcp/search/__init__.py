"""ABOUTME: Movie search infrastructure - backend interface, TMDB backend, shaping, and widget."""

from .backend import MovieSearchBackend, SearchErrorKind, SearchOutcome
from .models import MovieCard, TMDBMovieResult, TMDBSearchPayload
from .factory import get_movie_backend
from .shaping import shape_search_response

__all__ = [
    "MovieSearchBackend",
    "SearchErrorKind",
    "SearchOutcome",
    "MovieCard",
    "TMDBMovieResult",
    "TMDBSearchPayload",
    "get_movie_backend",
    "shape_search_response",
]
