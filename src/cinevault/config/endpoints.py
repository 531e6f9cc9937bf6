"""TMDb endpoint configuration.

Every wire detail of the TMDb API (base urls, method path templates, query
parameter names and enum wire values) lives in one EndpointConfiguration
record, grouped by feature area. Path templates use positional ``{0}``
placeholders.

The record is persisted as TOML. Every field is required when a document
is loaded, so a missing name fails at load time instead of producing a
malformed url later; known-good values come from ``with_defaults()`` or
``restore_defaults()``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import toml
from pydantic import BaseModel, ConfigDict, ValidationError

from cinevault.shared.constants import NetworkConfig, TMDBConfig
from cinevault.shared.errors import create_config_error
from cinevault.shared.models.enums import CacheLevel

logger = logging.getLogger(__name__)


class _Section(BaseModel):
    model_config = ConfigDict(extra="ignore", validate_assignment=True)


class MethodNames(_Section):
    """Path templates of every TMDb method."""

    configuration: str
    new_authentication_token: str
    new_session: str
    new_guest_session: str

    account: str
    account_lists: str
    account_favorite_movies: str
    account_add_favorite: str
    account_rated_movies: str
    account_watch_list: str
    account_edit_watch_list: str

    get_movie: str
    movie_alternative_titles: str
    movie_cast: str
    movie_images: str
    movie_keywords: str
    movie_releases: str
    movie_trailers: str
    movie_translations: str
    similar_movies: str
    movie_reviews: str
    movie_lists: str
    movie_changes: str
    latest_movie: str
    upcoming_movies: str
    now_playing_movies: str
    popular_movies: str
    top_rated_movies: str
    movie_account_states: str
    movie_rating: str

    get_collection: str
    collection_images: str

    get_person: str
    person_credits: str
    person_images: str
    person_changes: str
    popular_persons: str
    latest_person: str

    get_list: str
    list_status: str
    create_list: str
    list_add_item: str
    list_remove_item: str
    delete_list: str

    get_company: str
    company_movies: str

    genre_list: str
    genre_movies: str

    get_keyword: str
    keyword_movies: str

    discover: str

    search_movie: str
    search_collection: str
    search_person: str
    search_list: str
    search_company: str
    search_keyword: str

    get_review: str
    changed_movies: str
    changed_people: str
    jobs: str


class ParameterNames(_Section):
    """Query parameter names."""

    authentication_token: str
    session_id: str
    guest_session_id: str
    language: str
    country: str
    page: str
    start_date: str
    end_date: str
    sort_by: str
    sort_order: str
    append_to_response: str
    movie_id: str
    include_adult: str
    include_all_movies: str
    query: str
    search_type: str

    # Discovery filters
    certification_country: str
    year: str
    min_vote_count: str
    min_vote_average: str
    primary_release_year: str
    min_release_date: str
    max_release_date: str
    max_certification: str
    with_companies: str
    discovery_sort_by: str
    with_genres: str


class WireValues(_Section):
    """Wire values of request enums and list separators."""

    and_char: str
    or_char: str

    discovery_popularity_asc: str
    discovery_popularity_desc: str
    discovery_release_date_asc: str
    discovery_release_date_desc: str
    discovery_vote_average_asc: str
    discovery_vote_average_desc: str

    search_type_phrase: str
    search_type_ngram: str

    sort_by_created_at: str
    sort_order_asc: str
    sort_order_desc: str

    movie_alternative_titles: str
    movie_casts: str
    movie_images: str
    movie_keywords: str
    movie_releases: str
    movie_trailers: str
    movie_translations: str
    movie_similar_movies: str
    movie_reviews: str
    movie_lists: str
    movie_changes: str

    person_credits: str
    person_images: str
    person_changes: str

    collection_images: str
    company_movies: str


def default_method_names() -> MethodNames:
    return MethodNames(
        configuration="configuration",
        new_authentication_token="authentication/token/new",
        new_session="authentication/session/new",
        new_guest_session="authentication/guest_session/new",
        account="account",
        account_lists="account/{0}/lists",
        account_favorite_movies="account/{0}/favorite_movies",
        account_add_favorite="account/{0}/favorite",
        account_rated_movies="account/{0}/rated_movies",
        account_watch_list="account/{0}/movie_watchlist",
        account_edit_watch_list="account/{0}/movie_watchlist",
        get_movie="movie/{0}",
        movie_alternative_titles="movie/{0}/alternative_titles",
        movie_cast="movie/{0}/casts",
        movie_images="movie/{0}/images",
        movie_keywords="movie/{0}/keywords",
        movie_releases="movie/{0}/releases",
        movie_trailers="movie/{0}/trailers",
        movie_translations="movie/{0}/translations",
        similar_movies="movie/{0}/similar_movies",
        movie_reviews="movie/{0}/reviews",
        movie_lists="movie/{0}/lists",
        movie_changes="movie/{0}/changes",
        latest_movie="movie/latest",
        upcoming_movies="movie/upcoming",
        now_playing_movies="movie/now_playing",
        popular_movies="movie/popular",
        top_rated_movies="movie/top_rated",
        movie_account_states="movie/{0}/account_states",
        movie_rating="movie/{0}/rating",
        get_collection="collection/{0}",
        collection_images="collection/{0}/images",
        get_person="person/{0}",
        person_credits="person/{0}/credits",
        person_images="person/{0}/images",
        person_changes="person/{0}/changes",
        popular_persons="person/popular",
        latest_person="person/latest",
        get_list="list/{0}",
        list_status="list/{0}/item_status",
        create_list="list",
        list_add_item="list/{0}/add_item",
        list_remove_item="list/{0}/remove_item",
        delete_list="list/{0}",
        get_company="company/{0}",
        company_movies="company/{0}/movies",
        genre_list="genre/list",
        genre_movies="genre/{0}/movies",
        get_keyword="keyword/{0}",
        keyword_movies="keyword/{0}/movies",
        discover="discover/movie",
        search_movie="search/movie",
        search_collection="search/collection",
        search_person="search/person",
        search_list="search/list",
        search_company="search/company",
        search_keyword="search/keyword",
        get_review="review/{0}",
        changed_movies="movie/changes",
        changed_people="person/changes",
        jobs="job/list",
    )


def default_parameter_names() -> ParameterNames:
    return ParameterNames(
        authentication_token="request_token",
        session_id="session_id",
        guest_session_id="guest_session_id",
        language="language",
        country="country",
        page="page",
        start_date="start_date",
        end_date="end_date",
        sort_by="sort_by",
        sort_order="sort_order",
        append_to_response="append_to_response",
        movie_id="movie_id",
        include_adult="include_adult",
        include_all_movies="include_all_movies",
        query="query",
        search_type="search_type",
        certification_country="certification_country",
        year="year",
        min_vote_count="vote_count.gte",
        min_vote_average="vote_average.gte",
        primary_release_year="primary_release_year",
        min_release_date="release_date.gte",
        max_release_date="release_date.lte",
        max_certification="certification.lte",
        with_companies="with_companies",
        discovery_sort_by="sort_by",
        with_genres="with_genres",
    )


def default_wire_values() -> WireValues:
    return WireValues(
        and_char=";",
        or_char="|",
        discovery_popularity_asc="popularity.asc",
        discovery_popularity_desc="popularity.desc",
        discovery_release_date_asc="release_date.asc",
        discovery_release_date_desc="release_date.desc",
        discovery_vote_average_asc="vote_average.asc",
        discovery_vote_average_desc="vote_average.desc",
        search_type_phrase="phrase",
        search_type_ngram="ngram",
        sort_by_created_at="created_at",
        sort_order_asc="asc",
        sort_order_desc="desc",
        movie_alternative_titles="alternative_titles",
        movie_casts="casts",
        movie_images="images",
        movie_keywords="keywords",
        movie_releases="releases",
        movie_trailers="trailers",
        movie_translations="translations",
        movie_similar_movies="similar_movies",
        movie_reviews="reviews",
        movie_lists="lists",
        movie_changes="changes",
        person_credits="credits",
        person_images="images",
        person_changes="changes",
        collection_images="images",
        company_movies="movies",
    )


class EndpointConfiguration(BaseModel):
    """All TMDb wire details used to build request urls.

    Instances are shared by every concurrent call of a client; mutate them
    only while no request is in flight.
    """

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    api_key: str
    api_key_parameter_name: str
    api_url: str
    secure_api_url: str
    use_secure_connection: bool
    original_image_size_value: str
    json_date_pattern: str
    json_datetime_pattern: str
    cache_level: CacheLevel
    timeout: float

    methods: MethodNames
    parameters: ParameterNames
    values: WireValues

    def __repr__(self) -> str:
        masked_key = "****" if self.api_key else "[empty]"
        return (
            f"EndpointConfiguration(api_key={masked_key}, "
            f"base_url={self.base_url!r}, timeout={self.timeout})"
        )

    @classmethod
    def with_defaults(cls, api_key: str | None = None) -> EndpointConfiguration:
        """Create a configuration holding the known-good TMDb defaults."""
        return cls(**cls._default_fields(api_key))

    @staticmethod
    def _default_fields(api_key: str | None) -> dict[str, Any]:
        return {
            "api_key": api_key or "",
            "api_key_parameter_name": TMDBConfig.API_KEY_PARAMETER_NAME,
            "api_url": TMDBConfig.API_URL,
            "secure_api_url": TMDBConfig.SECURE_API_URL,
            "use_secure_connection": True,
            "original_image_size_value": TMDBConfig.ORIGINAL_IMAGE_SIZE,
            "json_date_pattern": "%Y-%m-%d",
            "json_datetime_pattern": "%Y-%m-%d %H:%M:%S UTC",
            "cache_level": CacheLevel.DEFAULT,
            "timeout": NetworkConfig.DEFAULT_TIMEOUT,
            "methods": default_method_names(),
            "parameters": default_parameter_names(),
            "values": default_wire_values(),
        }

    def restore_defaults(self, api_key: str | None = None) -> None:
        """Reset every field to its default value in place.

        Args:
            api_key: New API key; the key becomes empty when omitted
        """
        for name, value in self._default_fields(api_key).items():
            setattr(self, name, value)

    @property
    def base_url(self) -> str:
        return self.secure_api_url if self.use_secure_connection else self.api_url

    def serialize(self) -> str:
        """Serialize the whole configuration as a TOML document."""
        return toml.dumps(self.model_dump(mode="json"))

    @classmethod
    def deserialize(cls, content: str) -> EndpointConfiguration:
        """Load a configuration from a TOML document.

        Raises:
            ApplicationError: If the document is not valid TOML or lacks a field
        """
        try:
            return cls.model_validate(toml.loads(content))
        except (toml.TomlDecodeError, ValidationError) as e:
            raise create_config_error(
                f"Invalid endpoint configuration: {e}",
                operation="deserialize_endpoint_configuration",
                original_error=e,
            ) from e

    def to_toml_file(self, file_path: str | Path) -> None:
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(self.serialize(), encoding="utf-8")
        logger.debug("Endpoint configuration saved to %s", file_path)

    @classmethod
    def from_toml_file(cls, file_path: str | Path) -> EndpointConfiguration:
        file_path = Path(file_path)
        if not file_path.exists():
            msg = f"Endpoint configuration file not found: {file_path}"
            raise FileNotFoundError(msg)
        return cls.deserialize(file_path.read_text(encoding="utf-8"))
