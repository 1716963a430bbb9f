"""
Tests for query parameter parsing
"""
import pytest
from starlette.datastructures import QueryParams

from popcornpick.core.enums import ContentKind
from popcornpick.schemas.movie import MovieListQuery


class TestMovieListQuery:

    def test_defaults(self):
        query = MovieListQuery.from_params({})
        assert query.kind is ContentKind.MOVIE
        assert query.page == 1
        assert query.search == ""
        assert query.first_genre == ""

    def test_unrecognized_keys_are_dropped(self):
        query = MovieListQuery.from_params({"type": "tv", "api_key": "leak", "sort_by": "x"})
        assert query.kind is ContentKind.SHOW
        assert "api_key" not in query.model_dump()

    @pytest.mark.parametrize("raw,expected", [("3", 3), ("0", 1), ("-2", 1), ("abc", 1), ("", 1), ("1.5", 1)])
    def test_page_coercion(self, raw, expected):
        assert MovieListQuery.from_params({"page": raw}).page == expected

    @pytest.mark.parametrize("raw,expected", [
        ("7", "7"), ("6.5", "6.5"), ("high", ""), ("", ""),
        ("nan", ""), ("inf", ""), ("-Infinity", ""),
    ])
    def test_rating_must_be_numeric(self, raw, expected):
        assert MovieListQuery.from_params({"rating": raw}).rating == expected

    def test_first_genre_only(self):
        assert MovieListQuery.from_params({"genre": "35, 18"}).first_genre == "35"

    def test_repeated_keys_keep_first_value(self):
        params = QueryParams("genre=28&genre=12&type=tv&type=movie")
        query = MovieListQuery.from_params(params)
        assert query.first_genre == "28"
        assert query.kind is ContentKind.SHOW

    @pytest.mark.parametrize("raw", ["xml", "Movie", "TV", ""])
    def test_unknown_kind(self, raw):
        assert MovieListQuery.from_params({"type": raw}).kind is None
