"""
Booklist Backend - Resource Definition and Serializer Tests
============================================================

What:  Field coercion, presence rules, filter allow-lists, and the canonical
       JSON shape produced by the serializer.
"""

import pytest

from app.exceptions import MalformedRequestError
from app.resources import BOOKS, MOVIES, RESOURCES, SHOWS, is_blank
from app.serializers import serialize, serialize_many
from app.store.base import FieldFilter, Match


class TestIsBlank:

    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
    def test_blank_values(self, value):
        assert is_blank(value)

    @pytest.mark.parametrize("value", ["Dune", " x ", 0, 0.0, 7.5])
    def test_present_values(self, value):
        """Zero is a present rating."""
        assert not is_blank(value)


class TestDefinitions:

    def test_registry_covers_three_resources(self):
        assert set(RESOURCES) == {"books", "movies", "shows"}

    def test_field_order_follows_declaration(self):
        assert BOOKS.fields == ("title", "author", "isbn", "image")
        assert MOVIES.fields == ("title", "director", "image", "rating")
        assert SHOWS.fields == MOVIES.fields

    def test_every_field_is_required(self):
        for definition in RESOURCES.values():
            assert set(definition.required) == set(definition.fields)

    def test_movie_and_show_filters_have_no_platform(self):
        for definition in (MOVIES, SHOWS):
            assert set(definition.filters) == {"title", "director", "rating"}


class TestCoerce:

    def test_numbers_become_strings_for_string_fields(self):
        values, errors = BOOKS.coerce({"isbn": 9780441013593, "title": "Dune"})
        assert errors == {}
        assert values == {"isbn": "9780441013593", "title": "Dune"}

    def test_numeric_string_rating(self):
        values, errors = MOVIES.coerce({"rating": "7.5"})
        assert errors == {}
        assert values == {"rating": 7.5}

    def test_invalid_value_is_kept_and_reported(self):
        values, errors = MOVIES.coerce({"rating": "great", "title": "Alien"})
        assert errors == {"rating": ["is invalid"]}
        assert values == {"rating": "great", "title": "Alien"}

    @pytest.mark.parametrize("value, echoed", [(float("nan"), "nan"), (float("inf"), "inf")])
    def test_non_finite_rating_is_invalid_and_echoed_as_text(self, value, echoed):
        values, errors = MOVIES.coerce({"rating": value})
        assert errors == {"rating": ["is invalid"]}
        assert values == {"rating": echoed}

    def test_values_longer_than_their_column_are_invalid(self):
        values, errors = BOOKS.coerce({"isbn": "9" * 65, "image": "i" * 1024})
        assert errors == {"isbn": ["is invalid"]}
        assert values["image"] == "i" * 1024

    def test_unknown_fields_are_dropped(self):
        values, _ = BOOKS.coerce({"id": "abc", "pages": 10, "title": "Dune"})
        assert values == {"title": "Dune"}

    def test_absent_fields_are_not_filled_in(self):
        values, _ = BOOKS.coerce({"title": "Dune"})
        assert "author" not in values


class TestBuildFilters:

    def test_title_is_prefix_others_equality(self):
        filters = BOOKS.build_filters({"title": "Har", "isbn": "123"})
        assert filters == [
            FieldFilter("title", Match.PREFIX, "Har"),
            FieldFilter("isbn", Match.EQUALS, "123"),
        ]

    def test_non_allow_listed_params_ignored(self):
        assert BOOKS.build_filters({"image": "x.jpg", "sort": "title"}) == []

    def test_rating_filter_is_numeric(self):
        assert MOVIES.build_filters({"rating": "8"}) == [FieldFilter("rating", Match.EQUALS, 8.0)]

    def test_bad_rating_filter(self):
        with pytest.raises(MalformedRequestError, match="rating"):
            SHOWS.build_filters({"rating": "abc"})


class TestSerializer:

    def test_serialize_orders_keys(self):
        document = {"image": "x.jpg", "isbn": "123", "id": "abc", "author": "Herbert", "title": "Dune"}
        data = serialize(BOOKS, document)
        assert list(data) == ["id", "title", "author", "isbn", "image"]
        assert "errors" not in data

    def test_serialize_id_is_string(self):
        import uuid
        record_id = uuid.uuid4()
        data = serialize(MOVIES, {"id": record_id, "title": "Alien"})
        assert data["id"] == str(record_id)
        assert data["rating"] is None

    def test_serialize_appends_errors(self):
        data = serialize(BOOKS, {"id": "abc", "title": ""}, {"title": ["can't be blank"]})
        assert list(data)[-1] == "errors"
        assert data["errors"] == {"title": ["can't be blank"]}

    def test_empty_errors_are_omitted(self):
        assert "errors" not in serialize(BOOKS, {"id": "abc"}, {})

    def test_serialize_many(self):
        documents = [{"id": "1", "title": "A"}, {"id": "2", "title": "B"}]
        assert [d["title"] for d in serialize_many(SHOWS, documents)] == ["A", "B"]
