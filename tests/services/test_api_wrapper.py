"""Tests for TmdbApiWrapper request building and response handling."""

from __future__ import annotations

from datetime import date
from unittest.mock import AsyncMock

import pytest
from conftest import (
    CONFIGURATION_PAYLOAD,
    NOT_FOUND_BODY,
    TEST_API_KEY,
    FakeTransport,
    not_found_error,
)

from cinevault.services.api_wrapper import TmdbApiWrapper
from cinevault.shared.errors import (
    DeserializationError,
    ErrorCode,
    PreconditionError,
    TransportError,
)
from cinevault.shared.models import (
    DiscoveryFilter,
    DiscoverySortBy,
    FilterOperator,
    GenreFilter,
    MovieMethod,
    NotRated,
    PersonMethod,
    RatedWithValue,
    SearchType,
    SortBy,
    SortOrder,
    TmdbConfiguration,
    TmdbCreateMovieListRequest,
    TmdbFavoriteRequest,
    TmdbListItemRequest,
    TmdbMovieRatingRequest,
)

BASE = "https://api.themoviedb.org/3"


def query_of(url: str) -> list[str]:
    return url.split("?", 1)[1].split("&")


class TestUrlComposition:
    """Test cases for the urls produced by wrapper operations."""

    @pytest.mark.asyncio
    async def test_movie_with_appended_methods(
        self, wrapper: TmdbApiWrapper, transport: FakeTransport
    ):
        """Test movie 550 with casts and trailers and no language."""
        # Given
        transport.queue({"id": 550, "title": "Fight Club"})

        # When
        await wrapper.get_movie(550, MovieMethod.CASTS | MovieMethod.TRAILERS)

        # Then
        url = transport.last_url
        assert url.startswith(f"{BASE}/movie/550?")
        assert query_of(url) == [
            f"api_key={TEST_API_KEY}",
            "append_to_response=casts,trailers",
        ]
        assert "language=" not in url

    @pytest.mark.asyncio
    async def test_empty_append_flags_are_omitted(
        self, wrapper: TmdbApiWrapper, transport: FakeTransport
    ):
        """Test that no append parameter is sent for empty or missing flags."""
        await wrapper.get_movie(550, MovieMethod(0), "de")
        await wrapper.get_person(287, None)

        assert query_of(transport.requests[0].url) == [
            f"api_key={TEST_API_KEY}",
            "language=de",
        ]
        assert query_of(transport.requests[1].url) == [f"api_key={TEST_API_KEY}"]

    @pytest.mark.asyncio
    async def test_person_append(self, wrapper: TmdbApiWrapper, transport: FakeTransport):
        await wrapper.get_person(287, PersonMethod.IMAGES | PersonMethod.CREDITS)

        assert transport.last_url == (
            f"{BASE}/person/287?api_key={TEST_API_KEY}&append_to_response=credits,images"
        )

    @pytest.mark.asyncio
    async def test_plain_http_base_url(
        self, wrapper: TmdbApiWrapper, transport: FakeTransport
    ):
        """Test that the insecure base url is used when TLS is off."""
        wrapper.config.use_secure_connection = False

        await wrapper.get_configuration()

        assert transport.last_url.startswith("http://api.themoviedb.org/3/configuration?")
        assert transport.requests[0].use_secure_connection is False

    @pytest.mark.asyncio
    async def test_search_movie_parameter_order(
        self, wrapper: TmdbApiWrapper, transport: FakeTransport
    ):
        """Test search parameter order and query escaping."""
        await wrapper.search_movie(
            "Face/Off",
            page=2,
            language="en",
            include_adult=False,
            year=1997,
            primary_release_year=1997,
            search_type=SearchType.PHRASE,
        )

        assert query_of(transport.last_url) == [
            f"api_key={TEST_API_KEY}",
            "query=Face-Off",
            "page=2",
            "language=en",
            "include_adult=False",
            "year=1997",
            "primary_release_year=1997",
            "search_type=phrase",
        ]

    @pytest.mark.asyncio
    async def test_search_person_without_optional_values(
        self, wrapper: TmdbApiWrapper, transport: FakeTransport
    ):
        await wrapper.search_person("Brad Pitt")

        assert query_of(transport.last_url) == [
            f"api_key={TEST_API_KEY}",
            "query=Brad Pitt",
        ]

    @pytest.mark.asyncio
    async def test_discover_movies_filter_order(
        self, wrapper: TmdbApiWrapper, transport: FakeTransport
    ):
        """Test that every present filter field adds one parameter in order."""
        # Given
        discovery_filter = DiscoveryFilter(
            certification_country="US",
            include_adult=False,
            year=1999,
            min_vote_count=100,
            min_vote_average=7.5,
            primary_release_year=1999,
            min_release_date=date(1999, 1, 1),
            max_release_date=date(1999, 12, 31),
            max_certification="R",
            companies=[508, 711],
            sort_by=DiscoverySortBy.POPULARITY_DESC,
            genre_filter=GenreFilter(genres=[18, 53], operator=FilterOperator.OR),
        )

        # When
        await wrapper.discover_movies(1, "en", discovery_filter)

        # Then
        url = transport.last_url
        assert url.startswith(f"{BASE}/discover/movie?")
        assert query_of(url) == [
            f"api_key={TEST_API_KEY}",
            "page=1",
            "language=en",
            "certification_country=US",
            "include_adult=False",
            "year=1999",
            "vote_count.gte=100",
            "vote_average.gte=7.5",
            "primary_release_year=1999",
            "release_date.gte=1999-01-01",
            "release_date.lte=1999-12-31",
            "certification.lte=R",
            "with_companies=508;711",
            "sort_by=popularity.desc",
            "with_genres=18|53",
        ]

    @pytest.mark.asyncio
    async def test_discover_movies_and_genres(
        self, wrapper: TmdbApiWrapper, transport: FakeTransport
    ):
        discovery_filter = DiscoveryFilter(
            genre_filter=GenreFilter(genres=[28, 12], operator=FilterOperator.AND),
        )

        await wrapper.discover_movies(discovery_filter=discovery_filter)

        assert query_of(transport.last_url) == [
            f"api_key={TEST_API_KEY}",
            "with_genres=28;12",
        ]

    @pytest.mark.asyncio
    async def test_account_movie_list_sorting(
        self, wrapper: TmdbApiWrapper, transport: FakeTransport
    ):
        """Test account list parameters including sort options."""
        await wrapper.get_account_favorite_movies(
            42, "sess", 3, SortBy.CREATED_AT, SortOrder.DESC, "fr"
        )

        url = transport.last_url
        assert url.startswith(f"{BASE}/account/42/favorite_movies?")
        assert query_of(url) == [
            f"api_key={TEST_API_KEY}",
            "session_id=sess",
            "page=3",
            "language=fr",
            "sort_by=created_at",
            "sort_order=desc",
        ]

    @pytest.mark.asyncio
    async def test_account_movie_list_defaults_omit_sorting(
        self, wrapper: TmdbApiWrapper, transport: FakeTransport
    ):
        await wrapper.get_account_watch_list(42, "sess")

        assert transport.last_url == (
            f"{BASE}/account/42/movie_watchlist?api_key={TEST_API_KEY}&session_id=sess"
        )

    @pytest.mark.asyncio
    async def test_changed_movies_date_range(
        self, wrapper: TmdbApiWrapper, transport: FakeTransport
    ):
        await wrapper.get_changed_movies(date(2024, 1, 2), date(2024, 1, 9))

        assert query_of(transport.last_url) == [
            f"api_key={TEST_API_KEY}",
            "start_date=2024-01-02",
            "end_date=2024-01-09",
        ]

    @pytest.mark.asyncio
    async def test_genre_movies_flags(
        self, wrapper: TmdbApiWrapper, transport: FakeTransport
    ):
        await wrapper.get_genre_movies(18, None, None, True, False)

        assert transport.last_url == (
            f"{BASE}/genre/18/movies?api_key={TEST_API_KEY}"
            "&include_all_movies=True&include_adult=False"
        )

    @pytest.mark.asyncio
    async def test_get_session_uses_request_token(
        self, wrapper: TmdbApiWrapper, transport: FakeTransport
    ):
        await wrapper.get_session("tok")

        assert transport.last_url == (
            f"{BASE}/authentication/session/new?api_key={TEST_API_KEY}&request_token=tok"
        )


class TestHttpMethods:
    """Test cases for request methods and bodies."""

    @pytest.mark.asyncio
    async def test_reads_use_get_without_body(
        self, wrapper: TmdbApiWrapper, transport: FakeTransport
    ):
        await wrapper.get_jobs()

        request = transport.requests[0]
        assert request.method == "GET"
        assert request.body is None
        assert request.timeout == wrapper.config.timeout

    @pytest.mark.asyncio
    async def test_mutations_post_json_body(
        self, wrapper: TmdbApiWrapper, transport: FakeTransport
    ):
        """Test that body-carrying calls are POSTed with the JSON body."""
        await wrapper.set_favorite(42, TmdbFavoriteRequest(movie_id=550, favorite=True), "s")
        await wrapper.create_movie_list(
            "s", TmdbCreateMovieListRequest(name="Noir", description="dark")
        )
        await wrapper.add_item_to_list("list1", TmdbListItemRequest(media_id=550), "s")

        methods = [r.method for r in transport.requests]
        assert methods == ["POST", "POST", "POST"]
        assert '"movie_id":550' in transport.requests[0].body
        assert '"favorite":true' in transport.requests[0].body
        assert '"name":"Noir"' in transport.requests[1].body
        assert '"language"' not in transport.requests[1].body
        assert transport.requests[2].body == '{"media_id":550}'
        assert transport.requests[2].url.startswith(f"{BASE}/list/list1/add_item?")

    @pytest.mark.asyncio
    async def test_delete_list_sends_delete(
        self, wrapper: TmdbApiWrapper, transport: FakeTransport
    ):
        """Test that deleting a list is an HTTP DELETE without body."""
        await wrapper.delete_list("list1", "sess")

        request = transport.requests[0]
        assert request.method == "DELETE"
        assert request.body is None
        assert request.url == f"{BASE}/list/list1?api_key={TEST_API_KEY}&session_id=sess"

    @pytest.mark.asyncio
    async def test_rate_movie_prefers_user_session(
        self, wrapper: TmdbApiWrapper, transport: FakeTransport
    ):
        rating = TmdbMovieRatingRequest(value=8.5)

        await wrapper.rate_movie(550, rating, "user", "guest")
        await wrapper.rate_movie(550, rating, guest_session_id="guest")

        assert transport.requests[0].url.endswith("&session_id=user")
        assert transport.requests[1].url.endswith("&guest_session_id=guest")
        assert transport.requests[0].body == '{"value":8.5}'


class TestResponseHandling:
    """Test cases for turning raw call results into TmdbResult."""

    @pytest.mark.asyncio
    async def test_success_payload_and_etag(
        self, wrapper: TmdbApiWrapper, transport: FakeTransport
    ):
        # Given
        transport.etag = '"abc"'
        transport.queue({"id": 550, "title": "Fight Club", "genres": [{"id": 18, "name": "Drama"}]})

        # When
        result = await wrapper.get_movie(550)

        # Then
        assert result.is_success
        assert result.result.title == "Fight Club"
        assert result.result.genre_names == "Drama"
        assert result.result.etag == '"abc"'

    @pytest.mark.asyncio
    async def test_empty_body_is_success_without_result(
        self, wrapper: TmdbApiWrapper, transport: FakeTransport
    ):
        """Test that an empty success body yields neither result nor error."""
        transport.queue("")

        result = await wrapper.get_movie(550)

        assert result.error is None
        assert result.result is None
        assert result.api_error_response is None

    @pytest.mark.asyncio
    async def test_error_with_status_body(
        self, wrapper: TmdbApiWrapper, transport: FakeTransport
    ):
        """Test that the status body is attached next to the original error."""
        # Given
        error = not_found_error()
        transport.queue(NOT_FOUND_BODY, error)

        # When
        result = await wrapper.get_movie(999999)

        # Then
        assert result.error is error
        assert result.result is None
        assert result.api_error_response is not None
        assert result.api_error_response.status_code == 34
        assert result.api_error_response.status_message == "not found"

    @pytest.mark.asyncio
    async def test_error_with_unparsable_body_keeps_original_error(
        self, wrapper: TmdbApiWrapper, transport: FakeTransport
    ):
        error = not_found_error()
        transport.queue("<html>gateway timeout</html>", error)

        result = await wrapper.get_movie(550)

        assert result.error is error
        assert result.api_error_response is None

    @pytest.mark.asyncio
    async def test_error_body_without_status_code_is_dropped(
        self, wrapper: TmdbApiWrapper, transport: FakeTransport
    ):
        """Test that a JSON error body of another shape is not taken as a status."""
        error = TransportError(
            ErrorCode.API_REQUEST_FAILED, "HTTP 422", status_code=422
        )
        transport.queue({"errors": ["page must be less than or equal to 500"]}, error)

        result = await wrapper.get_popular_movies(page=501)

        assert result.error is error
        assert result.api_error_response is None

    @pytest.mark.asyncio
    async def test_error_without_body(
        self, wrapper: TmdbApiWrapper, transport: FakeTransport
    ):
        error = not_found_error()
        transport.queue("", error)

        result = await wrapper.get_genres()

        assert result.error is error
        assert result.api_error_response is None

    @pytest.mark.asyncio
    async def test_malformed_json_is_captured(
        self, wrapper: TmdbApiWrapper, transport: FakeTransport
    ):
        """Test that malformed JSON becomes a result error, not an exception."""
        transport.queue("{not json")

        result = await wrapper.get_movie(550)

        assert result.is_error
        assert isinstance(result.error, DeserializationError)
        assert result.error.code == ErrorCode.DESERIALIZATION_ERROR
        assert result.error.model_name == "TmdbMovie"

    @pytest.mark.asyncio
    async def test_unexpected_shape_is_captured(
        self, wrapper: TmdbApiWrapper, transport: FakeTransport
    ):
        transport.queue({"title": "no id"})

        result = await wrapper.get_movie(550)

        assert isinstance(result.error, DeserializationError)
        assert result.error.validation_errors

    @pytest.mark.asyncio
    async def test_transport_exception_is_captured(self, endpoint_config):
        """Test that an exception raised by the transport never escapes."""
        # Given
        transport = AsyncMock()
        transport.perform_request.side_effect = RuntimeError("socket closed")
        wrapper = TmdbApiWrapper(transport, endpoint_config)

        # When
        result = await wrapper.get_latest_movie()

        # Then
        assert isinstance(result.error, RuntimeError)
        assert result.result is None

    @pytest.mark.asyncio
    async def test_unmapped_wire_value_raises(
        self, wrapper: TmdbApiWrapper, transport: FakeTransport
    ):
        """Test that caller misuse propagates instead of landing in the result."""
        with pytest.raises(PreconditionError) as exc_info:
            await wrapper.search_movie("fight club", search_type="phrase")

        assert exc_info.value.code == ErrorCode.UNSUPPORTED_VALUE
        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_transport_error_status_is_logged(
        self, wrapper: TmdbApiWrapper, transport: FakeTransport, caplog
    ):
        transport.queue(NOT_FOUND_BODY, not_found_error())

        with caplog.at_level("DEBUG", logger="cinevault"):
            await wrapper.get_movie(550)

        assert any("****" in record.getMessage() for record in caplog.records)
        assert all(TEST_API_KEY not in record.getMessage() for record in caplog.records)

    @pytest.mark.asyncio
    async def test_account_states_rated_union(
        self, wrapper: TmdbApiWrapper, transport: FakeTransport
    ):
        """Test both shapes of the rated field."""
        transport.queue({"id": 550, "favorite": True, "rated": False})
        transport.queue({"id": 550, "rated": {"value": 8.5}})

        not_rated = await wrapper.get_movie_account_state(550, "s")
        rated = await wrapper.get_movie_account_state(550, "s")

        assert isinstance(not_rated.result.rated, NotRated)
        assert not_rated.result.favorite is True
        assert isinstance(rated.result.rated, RatedWithValue)
        assert rated.result.rating == 8.5


class TestImages:
    """Test cases for image urls and transfers."""

    @pytest.fixture
    def tmdb_configuration(self) -> TmdbConfiguration:
        return TmdbConfiguration.model_validate(CONFIGURATION_PAYLOAD)

    def test_image_url_defaults_to_original_size(
        self, wrapper: TmdbApiWrapper, tmdb_configuration: TmdbConfiguration
    ):
        assert (
            wrapper.get_image_url("abc.jpg", tmdb_configuration)
            == "https://image.tmdb.org/t/p/original/abc.jpg"
        )
        assert (
            wrapper.get_image_url("abc.jpg", tmdb_configuration, "w92")
            == "https://image.tmdb.org/t/p/w92/abc.jpg"
        )

    @pytest.mark.asyncio
    async def test_download_image(
        self,
        wrapper: TmdbApiWrapper,
        transport: FakeTransport,
        tmdb_configuration: TmdbConfiguration,
    ):
        result = await wrapper.download_image(
            "abc.jpg", tmdb_configuration, "/tmp/poster.jpg", "w500"
        )

        assert result.result == "/tmp/poster.jpg"
        assert result.error is None
        assert transport.downloads == [
            ("https://image.tmdb.org/t/p/w500/abc.jpg", "/tmp/poster.jpg")
        ]

    @pytest.mark.asyncio
    async def test_get_image(
        self,
        wrapper: TmdbApiWrapper,
        transport: FakeTransport,
        tmdb_configuration: TmdbConfiguration,
    ):
        result = await wrapper.get_image("abc.jpg", tmdb_configuration)

        assert result.result == transport.image_bytes

    @pytest.mark.asyncio
    async def test_failed_image_read_keeps_error(
        self, endpoint_config, tmdb_configuration: TmdbConfiguration, mocker
    ):
        # Given
        error = TransportError(ErrorCode.NETWORK_ERROR, "connection reset")
        transport = mocker.AsyncMock()
        transport.read_to_bytes.return_value = mocker.Mock(content=None, error=error)
        wrapper = TmdbApiWrapper(transport, endpoint_config)

        # When
        result = await wrapper.get_image("abc.jpg", tmdb_configuration)

        # Then
        assert result.error is error
        assert result.result is None
