"""ABOUTME: Backend factory for instantiating movie search backends.

Provides a factory interface for creating search backend instances, allowing
runtime selection of the backend implementation.
"""

import logging
from typing import Optional

from ..config import MovieSearchSettings, load_settings
from .backend import MovieSearchBackend
from .tmdb import TMDBSearchBackend

# Configure logging
logger = logging.getLogger(__name__)


def get_movie_backend(
    backend_type: Optional[str] = None,
    settings: Optional[MovieSearchSettings] = None,
    **kwargs
) -> MovieSearchBackend:
    """Create and return a movie search backend instance.

    Args:
        backend_type: Type of backend to create. If None, uses the
                     MOVIE_SEARCH_BACKEND setting. Default: "tmdb"
        settings: Settings passed to the backend. If None, loaded from the environment.
        **kwargs: Additional arguments to pass to backend constructor

    Returns:
        MovieSearchBackend instance

    Raises:
        ValueError: If backend_type is unknown or the settings are invalid
    """
    if settings is None:
        settings = load_settings()
    if backend_type is None:
        backend_type = settings.movie_search_backend

    logger.debug(f"Creating movie search backend: {backend_type}")

    if backend_type.lower() == "tmdb":
        return TMDBSearchBackend(settings=settings, **kwargs)

    raise ValueError(f"Unknown movie search backend: {backend_type}. Supported: tmdb")
