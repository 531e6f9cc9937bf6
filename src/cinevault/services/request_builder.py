"""Request url composition.

Pure functions turning an EndpointConfiguration, a method template and
optional parameters into the final TMDb url, plus the conversions of
request enums and flag sets into their wire strings.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from datetime import date
from enum import Enum, Flag
from typing import TypeVar

from cinevault.config.endpoints import EndpointConfiguration
from cinevault.shared.errors import create_unsupported_value_error
from cinevault.shared.models.configuration import TmdbImageConfiguration
from cinevault.shared.models.enums import (
    CollectionMethod,
    CompanyMethod,
    DiscoverySortBy,
    FilterOperator,
    MovieMethod,
    PersonMethod,
    SearchType,
    SortBy,
    SortOrder,
)

F = TypeVar("F", bound=Flag)

# Characters that are not allowed in file names on any supported platform
_INVALID_QUERY_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')

FLAG_SEPARATOR = ","


def build_url(
    base_url: str,
    method_template: str,
    path_args: Iterable[object] = (),
    api_key_name: str = "api_key",
    api_key: str = "",
    optional_params: Mapping[str, object] | None = None,
) -> str:
    """Compose a request url.

    The API key is always the first query parameter; optional parameters
    follow in insertion order. Values are not url-encoded.

    Args:
        base_url: Api base url without trailing slash
        method_template: Path template with positional ``{0}`` placeholders
        path_args: Values substituted into the template
        api_key_name: Name of the API key parameter
        api_key: API key value
        optional_params: Further query parameters

    Returns:
        The request url

    Example:
        >>> build_url("https://api.themoviedb.org/3", "movie/{0}", [550],
        ...           "api_key", "k", {"language": "en"})
        'https://api.themoviedb.org/3/movie/550?api_key=k&language=en'
    """
    path = method_template.format(*path_args)
    url = f"{base_url}/{path}?{api_key_name}={api_key}"
    for name, value in (optional_params or {}).items():
        url += f"&{name}={value}"
    return url


def flags_to_parameter(
    flags: F,
    flag_to_string: Mapping[F, str],
    separator: str = FLAG_SEPARATOR,
) -> str:
    """Join the wire strings of every member set in ``flags``.

    Members are visited in their declared order; members without a mapping
    are skipped. Returns an empty string when no mapped member is set.
    """
    parts = [
        flag_to_string[member]
        for member in type(flags)
        if member in flags and member in flag_to_string
    ]
    return separator.join(parts)


def join_ids(ids: Iterable[int], separator: str) -> str:
    return separator.join(str(value) for value in ids)


def filter_operator_separator(
    operator: FilterOperator,
    config: EndpointConfiguration,
) -> str:
    if operator is FilterOperator.AND:
        return config.values.and_char
    if operator is FilterOperator.OR:
        return config.values.or_char
    raise create_unsupported_value_error(operator, "filter_operator_separator")


def escape_query(text: str) -> str:
    """Replace characters that are invalid in file names with ``-``."""
    return _INVALID_QUERY_CHARS.sub("-", text)


def format_date(value: date, pattern: str) -> str:
    return value.strftime(pattern)


def format_value(value: object) -> str:
    """Render a query value; booleans are written as ``True``/``False``."""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def image_url(
    file_path: str,
    image_configuration: TmdbImageConfiguration,
    size: str,
    use_secure_connection: bool = True,
) -> str:
    """Url of an image file at the given size."""
    base = (
        image_configuration.secure_base_url
        if use_secure_connection
        else image_configuration.base_url
    )
    return f"{base}/{size}/{file_path}"


def _lookup(table: Mapping[Enum, str], value: Enum, operation: str) -> str:
    try:
        return table[value]
    except KeyError:
        raise create_unsupported_value_error(value, operation) from None


def movie_method_parameter(flags: MovieMethod, config: EndpointConfiguration) -> str:
    values = config.values
    return flags_to_parameter(
        flags,
        {
            MovieMethod.ALTERNATIVE_TITLES: values.movie_alternative_titles,
            MovieMethod.CASTS: values.movie_casts,
            MovieMethod.IMAGES: values.movie_images,
            MovieMethod.KEYWORDS: values.movie_keywords,
            MovieMethod.RELEASES: values.movie_releases,
            MovieMethod.TRAILERS: values.movie_trailers,
            MovieMethod.TRANSLATIONS: values.movie_translations,
            MovieMethod.SIMILAR_MOVIES: values.movie_similar_movies,
            MovieMethod.REVIEWS: values.movie_reviews,
            MovieMethod.LISTS: values.movie_lists,
            MovieMethod.CHANGES: values.movie_changes,
        },
    )


def person_method_parameter(
    flags: PersonMethod,
    config: EndpointConfiguration,
) -> str:
    values = config.values
    return flags_to_parameter(
        flags,
        {
            PersonMethod.CREDITS: values.person_credits,
            PersonMethod.IMAGES: values.person_images,
            PersonMethod.CHANGES: values.person_changes,
        },
    )


def collection_method_parameter(
    flags: CollectionMethod,
    config: EndpointConfiguration,
) -> str:
    return flags_to_parameter(
        flags,
        {CollectionMethod.IMAGES: config.values.collection_images},
    )


def company_method_parameter(
    flags: CompanyMethod,
    config: EndpointConfiguration,
) -> str:
    return flags_to_parameter(
        flags,
        {CompanyMethod.MOVIES: config.values.company_movies},
    )


def discovery_sort_by_parameter(
    sort_by: DiscoverySortBy,
    config: EndpointConfiguration,
) -> str:
    values = config.values
    table = {
        DiscoverySortBy.POPULARITY_ASC: values.discovery_popularity_asc,
        DiscoverySortBy.POPULARITY_DESC: values.discovery_popularity_desc,
        DiscoverySortBy.RELEASE_DATE_ASC: values.discovery_release_date_asc,
        DiscoverySortBy.RELEASE_DATE_DESC: values.discovery_release_date_desc,
        DiscoverySortBy.VOTE_AVERAGE_ASC: values.discovery_vote_average_asc,
        DiscoverySortBy.VOTE_AVERAGE_DESC: values.discovery_vote_average_desc,
    }
    return _lookup(table, sort_by, "discovery_sort_by_parameter")


def search_type_parameter(search_type: SearchType, config: EndpointConfiguration) -> str:
    table = {
        SearchType.PHRASE: config.values.search_type_phrase,
        SearchType.NGRAM: config.values.search_type_ngram,
    }
    return _lookup(table, search_type, "search_type_parameter")


def sort_by_parameter(sort_by: SortBy, config: EndpointConfiguration) -> str:
    table = {SortBy.CREATED_AT: config.values.sort_by_created_at}
    return _lookup(table, sort_by, "sort_by_parameter")


def sort_order_parameter(sort_order: SortOrder, config: EndpointConfiguration) -> str:
    table = {
        SortOrder.ASC: config.values.sort_order_asc,
        SortOrder.DESC: config.values.sort_order_desc,
    }
    return _lookup(table, sort_order, "sort_order_parameter")
