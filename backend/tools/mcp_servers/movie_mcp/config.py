"""ABOUTME: Configuration for the movie MCP server, loaded from the environment.

Settings objects are built fresh for every tool call (load_settings), so each
call sees the current environment and tests can pass their own values through
the constructor instead of mutating global state.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

TMDB_API_KEY_ENV = "TMDB_API_KEY"

DEFAULT_BACKEND = "tmdb"
DEFAULT_TIMEOUT_SECONDS = 10
MIN_TIMEOUT_SECONDS = 1
MAX_TIMEOUT_SECONDS = 300


class MovieSearchSettings(BaseSettings):
    """Movie search configuration from environment.

    Reads TMDB_API_KEY, TMDB_TIMEOUT_SECONDS and MOVIE_SEARCH_BACKEND.
    """

    tmdb_api_key: Optional[str] = None
    tmdb_timeout_seconds: int = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        ge=MIN_TIMEOUT_SECONDS,
        le=MAX_TIMEOUT_SECONDS
    )
    movie_search_backend: str = DEFAULT_BACKEND

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @field_validator("tmdb_api_key")
    @classmethod
    def empty_key_is_missing(cls, v: Optional[str]) -> Optional[str]:
        return v or None

    @field_validator("movie_search_backend")
    @classmethod
    def normalize_backend(cls, v: str) -> str:
        return v.strip().lower() or DEFAULT_BACKEND


class LauncherSettings(BaseSettings):
    """HTTP launcher bind address from environment (HOST, PORT)."""

    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @field_validator("host")
    @classmethod
    def validate_host(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("HOST cannot be empty or whitespace-only")
        return v


def load_settings() -> MovieSearchSettings:
    """Load movie search settings for one tool call.

    Raises:
        pydantic.ValidationError: If a setting is out of range
    """
    return MovieSearchSettings()
