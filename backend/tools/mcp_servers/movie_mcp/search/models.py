"""ABOUTME: Pydantic models for the TMDB search payload and the widget's movie cards.

TMDBSearchPayload is the structural check applied to every successful upstream
body; a body that does not fit raises pydantic.ValidationError. MovieCard is the
display-ready record the widget renders, serialized with camelCase keys.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TMDBMovieResult(BaseModel):
    """One candidate movie as returned by /search/movie."""

    model_config = ConfigDict(strict=True, frozen=True)

    id: int = Field(..., description="TMDB movie identifier")
    title: str = Field(..., description="Movie title")
    release_date: Optional[str] = Field(default=None, description="Release date, usually YYYY-MM-DD")
    vote_average: Optional[float] = Field(default=None, description="Average rating, 0.0-10.0")
    poster_path: Optional[str] = Field(default=None, description="Poster path fragment, e.g. '/abc.jpg'")


class TMDBSearchPayload(BaseModel):
    """Expected shape of a successful /search/movie response body."""

    model_config = ConfigDict(strict=True, frozen=True)

    results: list[TMDBMovieResult]


class MovieCard(BaseModel):
    """Normalized movie record rendered as a card by the widget."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    title: str
    release_year: str = Field(..., alias="releaseYear", description="4-digit year or 'N/A'")
    rating: float = Field(..., description="Average rating rounded to one decimal")
    poster_url: Optional[str] = Field(default=None, alias="posterUrl", description="Absolute poster URL")

    def to_payload(self) -> dict:
        """Serialize with the widget's key names, keeping a null posterUrl."""
        return self.model_dump(by_alias=True)
