"""ABOUTME: Tests for movie search data models and the backend factory.

Tests the TMDB payload schema, MovieCard serialization, SearchOutcome, and the
factory pattern for backend instantiation.
"""

import pytest
from pydantic import ValidationError

from movie_mcp.config import MovieSearchSettings
from movie_mcp.search import (
    MovieCard,
    MovieSearchBackend,
    SearchErrorKind,
    SearchOutcome,
    TMDBSearchPayload,
    get_movie_backend,
)
from movie_mcp.search.tmdb import TMDBSearchBackend


class TestTMDBSearchPayload:
    """Tests for the upstream payload schema."""

    def test_accepts_sample_payload(self, tmdb_results):
        """Test the sample payload validates and keeps order."""
        payload = TMDBSearchPayload.model_validate({"results": tmdb_results})
        assert [result.id for result in payload.results] == [603, 604, 605, 624860]

    def test_optional_fields_accept_null(self):
        """Test nullable fields accept explicit nulls."""
        payload = TMDBSearchPayload.model_validate({
            "results": [{
                "id": 1,
                "title": "Null Fields",
                "release_date": None,
                "vote_average": None,
                "poster_path": None,
            }]
        })
        result = payload.results[0]
        assert result.release_date is None
        assert result.vote_average is None
        assert result.poster_path is None

    def test_integer_vote_average(self):
        """Test an integer vote average is accepted as a number."""
        payload = TMDBSearchPayload.model_validate({"results": [{"id": 1, "title": "T", "vote_average": 8}]})
        assert payload.results[0].vote_average == 8

    def test_extra_fields_ignored(self, tmdb_results):
        """Test unknown upstream fields do not fail validation."""
        payload = TMDBSearchPayload.model_validate({"page": 1, "total_results": 4, "results": tmdb_results})
        assert not hasattr(payload.results[0], "overview")

    def test_missing_results_rejected(self):
        """Test a body without results fails validation."""
        with pytest.raises(ValidationError):
            TMDBSearchPayload.model_validate({"page": 1})

    def test_missing_title_rejected(self):
        """Test a result without a title fails validation."""
        with pytest.raises(ValidationError):
            TMDBSearchPayload.model_validate({"results": [{"id": 1}]})

    def test_wrong_types_rejected(self):
        """Test string ids and numeric titles are not coerced."""
        with pytest.raises(ValidationError):
            TMDBSearchPayload.model_validate({"results": [{"id": "1", "title": "T"}]})
        with pytest.raises(ValidationError):
            TMDBSearchPayload.model_validate({"results": [{"id": 1, "title": 42}]})
        with pytest.raises(ValidationError):
            TMDBSearchPayload.model_validate({"results": [{"id": 1, "title": "T", "vote_average": "7.1"}]})

    def test_non_object_body_rejected(self):
        """Test a top-level list fails validation."""
        with pytest.raises(ValidationError):
            TMDBSearchPayload.model_validate([])


class TestMovieCard:
    """Tests for MovieCard serialization."""

    def test_payload_uses_widget_keys(self):
        """Test camelCase keys in the widget payload."""
        card = MovieCard(id=603, title="The Matrix", release_year="1999", rating=8.2,
                         poster_url="https://image.tmdb.org/t/p/w500/x.jpg")
        assert card.to_payload() == {
            "id": 603,
            "title": "The Matrix",
            "releaseYear": "1999",
            "rating": 8.2,
            "posterUrl": "https://image.tmdb.org/t/p/w500/x.jpg",
        }

    def test_payload_keeps_null_poster(self):
        """Test posterUrl stays in the payload as None."""
        card = MovieCard(id=1, title="T", release_year="N/A", rating=0.0)
        payload = card.to_payload()
        assert "posterUrl" in payload
        assert payload["posterUrl"] is None

    def test_accepts_alias_names(self):
        """Test construction from widget key names."""
        card = MovieCard.model_validate({"id": 1, "title": "T", "releaseYear": "2020", "rating": 5.0, "posterUrl": None})
        assert card.release_year == "2020"


class TestSearchOutcome:
    """Tests for SearchOutcome data class."""

    def test_success(self):
        """Test a success outcome has no error."""
        card = MovieCard(id=1, title="T", release_year="2020", rating=5.0)
        outcome = SearchOutcome.success("T", [card])
        assert outcome.ok
        assert outcome.movies == (card,)
        assert outcome.error is None

    def test_failure(self):
        """Test a failure outcome carries kind and message with no movies."""
        outcome = SearchOutcome.failure("T", SearchErrorKind.NO_RESULTS, 'No movies found for "T".')
        assert not outcome.ok
        assert outcome.movies == ()
        assert outcome.error_kind == SearchErrorKind.NO_RESULTS

    def test_error_kind_values(self):
        """Test kind values match the shared error codes."""
        assert SearchErrorKind.MISSING_CREDENTIAL.value == "missing_credential"
        assert SearchErrorKind.UPSTREAM_HTTP_FAILURE.value == "upstream_http_failure"
        assert SearchErrorKind.NO_RESULTS.value == "no_results"
        assert SearchErrorKind.NETWORK_OR_PARSE_FAILURE.value == "network_or_parse_failure"


class TestMovieBackendFactory:
    """Tests for movie backend factory pattern."""

    def test_get_movie_backend_tmdb(self):
        """Test factory returns TMDB backend when requested."""
        backend = get_movie_backend("tmdb", settings=MovieSearchSettings(tmdb_api_key=None))
        assert isinstance(backend, TMDBSearchBackend)
        assert isinstance(backend, MovieSearchBackend)
        assert backend.name == "tmdb"

    def test_get_movie_backend_default(self):
        """Test factory uses tmdb as default backend."""
        backend = get_movie_backend(settings=MovieSearchSettings(tmdb_api_key=None))
        assert backend.name == "tmdb"

    def test_get_movie_backend_from_env(self, monkeypatch):
        """Test factory reads backend type from environment."""
        monkeypatch.setenv("MOVIE_SEARCH_BACKEND", "TMDB")

        backend = get_movie_backend()
        assert backend.name == "tmdb"

    def test_get_movie_backend_unknown_type(self):
        """Test factory raises ValueError for unknown backend."""
        with pytest.raises(ValueError, match="Unknown movie search backend"):
            get_movie_backend("imdb", settings=MovieSearchSettings(tmdb_api_key=None))

    def test_factory_does_not_require_api_key(self):
        """Test a missing key is reported at search time, not construction."""
        backend = get_movie_backend("tmdb", settings=MovieSearchSettings(tmdb_api_key=None))
        assert backend.settings.tmdb_api_key is None
