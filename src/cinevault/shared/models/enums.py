"""Enumerations used to build TMDb requests.

Flag enums describe the "append to response" sets. Members are folded into
the wire parameter in their declared order, which is also the order the
wire values appear in the generated URL.
"""

from __future__ import annotations

from enum import Enum, Flag, auto


class MovieMethod(Flag):
    """Additional movie data appended to a movie lookup."""

    ALTERNATIVE_TITLES = auto()
    CASTS = auto()
    IMAGES = auto()
    KEYWORDS = auto()
    RELEASES = auto()
    TRAILERS = auto()
    TRANSLATIONS = auto()
    SIMILAR_MOVIES = auto()
    REVIEWS = auto()
    LISTS = auto()
    CHANGES = auto()


class PersonMethod(Flag):
    """Additional person data appended to a person lookup."""

    CREDITS = auto()
    IMAGES = auto()
    CHANGES = auto()


class CollectionMethod(Flag):
    """Additional collection data appended to a collection lookup."""

    IMAGES = auto()


class CompanyMethod(Flag):
    """Additional company data appended to a company lookup."""

    MOVIES = auto()


class DiscoverySortBy(Enum):
    """Sort order of discovered movies."""

    NONE = "none"
    VOTE_AVERAGE_ASC = "vote_average_asc"
    VOTE_AVERAGE_DESC = "vote_average_desc"
    RELEASE_DATE_ASC = "release_date_asc"
    RELEASE_DATE_DESC = "release_date_desc"
    POPULARITY_ASC = "popularity_asc"
    POPULARITY_DESC = "popularity_desc"


class SortBy(Enum):
    """Sort field of account movie lists."""

    NONE = "none"
    CREATED_AT = "created_at"


class SortOrder(Enum):
    """Sort direction of account movie lists."""

    UNSET = "unset"
    ASC = "asc"
    DESC = "desc"


class SearchType(Enum):
    """Matching algorithm for searches."""

    NONE = "none"
    PHRASE = "phrase"
    NGRAM = "ngram"


class FilterOperator(Enum):
    """Boolean operator joining list-valued discovery filters."""

    AND = "and"
    OR = "or"


class CacheLevel(Enum):
    """Cache hint passed through to transports."""

    DEFAULT = "default"
    BYPASS_CACHE = "bypass_cache"
    CACHE_ONLY = "cache_only"
    CACHE_IF_AVAILABLE = "cache_if_available"
    REVALIDATE = "revalidate"
    RELOAD = "reload"
    NO_CACHE_NO_STORE = "no_cache_no_store"


class ImageType(Enum):
    """Kind of image, selects the size list of the image configuration."""

    POSTER = "poster"
    BACKDROP = "backdrop"
    PROFILE = "profile"
    LOGO = "logo"
