"""Unit tests for request url composition."""

from __future__ import annotations

from datetime import date

import pytest

from cinevault.config.endpoints import EndpointConfiguration
from cinevault.services import request_builder
from cinevault.shared.errors import ErrorCode, PreconditionError
from cinevault.shared.models import (
    CollectionMethod,
    DiscoverySortBy,
    FilterOperator,
    MovieMethod,
    PersonMethod,
    SearchType,
    SortBy,
    SortOrder,
    TmdbImageConfiguration,
)

BASE = "https://api.themoviedb.org/3"


class TestBuildUrl:
    """Test cases for build_url."""

    def test_api_key_is_first_parameter(self):
        """Test that the key is the only parameter without optional ones."""
        url = request_builder.build_url(BASE, "configuration", (), "api_key", "k")

        assert url == f"{BASE}/configuration?api_key=k"

    def test_path_arguments_are_substituted_positionally(self):
        """Test positional placeholder substitution."""
        url = request_builder.build_url(
            BASE, "list/{0}/item_status", ["abc"], "api_key", "k"
        )

        assert url == f"{BASE}/list/abc/item_status?api_key=k"

    def test_optional_parameters_keep_insertion_order(self):
        """Test that optional parameters follow the key in insertion order."""
        # Given
        params = {"session_id": "s", "page": 2, "language": "de", "sort_by": "x"}

        # When
        url = request_builder.build_url(
            BASE, "account/{0}/favorite_movies", [7], "api_key", "k", params
        )

        # Then
        prefix, query = url.split("?")
        assert prefix == f"{BASE}/account/7/favorite_movies"
        assert query.split("&") == [
            "api_key=k",
            "session_id=s",
            "page=2",
            "language=de",
            "sort_by=x",
        ]

    def test_values_are_not_encoded(self):
        """Test that values are inserted verbatim."""
        url = request_builder.build_url(
            BASE, "search/movie", (), "api_key", "k", {"query": "fight club"}
        )

        assert url.endswith("&query=fight club")


class TestFlagsToParameter:
    """Test cases for flag folding."""

    def test_empty_flags_give_empty_string(self, endpoint_config: EndpointConfiguration):
        """Test that a flag set with no members folds to an empty string."""
        assert request_builder.movie_method_parameter(MovieMethod(0), endpoint_config) == ""

    def test_declared_order_is_used(self, endpoint_config: EndpointConfiguration):
        """Test that members are joined in declared order, not in given order."""
        flags = MovieMethod.TRAILERS | MovieMethod.CASTS

        result = request_builder.movie_method_parameter(flags, endpoint_config)

        assert result == "casts,trailers"

    def test_k_members_give_k_values(self, endpoint_config: EndpointConfiguration):
        """Test that every set member contributes exactly one value."""
        flags = MovieMethod.ALTERNATIVE_TITLES | MovieMethod.IMAGES | MovieMethod.CHANGES

        parts = request_builder.movie_method_parameter(flags, endpoint_config).split(",")

        assert parts == ["alternative_titles", "images", "changes"]

    def test_all_person_methods(self, endpoint_config: EndpointConfiguration):
        """Test folding of every person method."""
        flags = PersonMethod.CREDITS | PersonMethod.IMAGES | PersonMethod.CHANGES

        assert (
            request_builder.person_method_parameter(flags, endpoint_config)
            == "credits,images,changes"
        )

    def test_single_member(self, endpoint_config: EndpointConfiguration):
        """Test folding of a single member, without separators."""
        assert (
            request_builder.collection_method_parameter(
                CollectionMethod.IMAGES, endpoint_config
            )
            == "images"
        )

    def test_unmapped_members_are_skipped(self):
        """Test that members missing from the table are ignored."""
        flags = MovieMethod.CASTS | MovieMethod.IMAGES

        result = request_builder.flags_to_parameter(flags, {MovieMethod.IMAGES: "i"})

        assert result == "i"


class TestWireValues:
    """Test cases for enum to wire value conversions."""

    def test_filter_operator_separators(self, endpoint_config: EndpointConfiguration):
        """Test that AND and OR resolve to the configured characters."""
        assert (
            request_builder.filter_operator_separator(FilterOperator.AND, endpoint_config)
            == ";"
        )
        assert (
            request_builder.filter_operator_separator(FilterOperator.OR, endpoint_config)
            == "|"
        )

    def test_discovery_sort_by(self, endpoint_config: EndpointConfiguration):
        assert (
            request_builder.discovery_sort_by_parameter(
                DiscoverySortBy.VOTE_AVERAGE_DESC, endpoint_config
            )
            == "vote_average.desc"
        )

    def test_unmapped_value_raises_precondition_error(
        self, endpoint_config: EndpointConfiguration
    ):
        """Test that a value without wire mapping is caller misuse."""
        with pytest.raises(PreconditionError) as exc_info:
            request_builder.discovery_sort_by_parameter(
                DiscoverySortBy.NONE, endpoint_config
            )

        assert exc_info.value.code == ErrorCode.UNSUPPORTED_VALUE

    def test_search_and_sort_values(self, endpoint_config: EndpointConfiguration):
        assert request_builder.search_type_parameter(SearchType.NGRAM, endpoint_config) == "ngram"
        assert (
            request_builder.sort_by_parameter(SortBy.CREATED_AT, endpoint_config)
            == "created_at"
        )
        assert request_builder.sort_order_parameter(SortOrder.DESC, endpoint_config) == "desc"

    def test_wire_values_follow_configuration(self, endpoint_config: EndpointConfiguration):
        """Test that a customized wire value is used."""
        endpoint_config.values.sort_order_desc = "DESCENDING"

        assert (
            request_builder.sort_order_parameter(SortOrder.DESC, endpoint_config)
            == "DESCENDING"
        )


class TestHelpers:
    """Test cases for small formatting helpers."""

    @pytest.mark.parametrize(
        ("query", "expected"),
        [
            ("Fight Club", "Fight Club"),
            ("Face/Off", "Face-Off"),
            ('Alien: "Covenant"?', "Alien- -Covenant--"),
            ("a<b>c|d*e\\f", "a-b-c-d-e-f"),
        ],
    )
    def test_escape_query(self, query: str, expected: str):
        """Test replacement of file name unsafe characters."""
        assert request_builder.escape_query(query) == expected

    def test_format_value(self):
        """Test rendering of query values."""
        assert request_builder.format_value(True) == "True"
        assert request_builder.format_value(False) == "False"
        assert request_builder.format_value(7.5) == "7.5"
        assert request_builder.format_value(SortOrder.ASC) == SortOrder.ASC.value

    def test_format_date(self):
        assert request_builder.format_date(date(2024, 3, 9), "%Y-%m-%d") == "2024-03-09"

    def test_join_ids(self):
        assert request_builder.join_ids([1, 22, 333], ";") == "1;22;333"

    def test_image_url(self):
        """Test image url composition for both schemes."""
        images = TmdbImageConfiguration(
            base_url="http://image.tmdb.org/t/p",
            secure_base_url="https://image.tmdb.org/t/p",
        )

        assert (
            request_builder.image_url("abc.jpg", images, "w500")
            == "https://image.tmdb.org/t/p/w500/abc.jpg"
        )
        assert (
            request_builder.image_url("abc.jpg", images, "w500", use_secure_connection=False)
            == "http://image.tmdb.org/t/p/w500/abc.jpg"
        )
