"""TMDb data models.

Response models validate TMDb JSON payloads; request models are serialized
as JSON request bodies by the API wrapper.
"""

from __future__ import annotations

from cinevault.shared.models.account import (
    TmdbAccount,
    TmdbFavoriteRequest,
    TmdbWatchListRequest,
)
from cinevault.shared.models.authentication import (
    TmdbAuthenticationToken,
    TmdbGuestSession,
    TmdbSession,
)
from cinevault.shared.models.base import TmdbModel, TmdbPagedModel
from cinevault.shared.models.changes import (
    TmdbChange,
    TmdbChangedEntriesList,
    TmdbChangedEntry,
    TmdbChangeItem,
    TmdbChanges,
)
from cinevault.shared.models.collection import (
    TmdbCollectionImages,
    TmdbMovieCollection,
    TmdbMovieCollectionPart,
    TmdbMovieCollectionPreview,
    TmdbMovieCollectionPreviewList,
)
from cinevault.shared.models.common import (
    TmdbCompanyBasic,
    TmdbGenre,
    TmdbImage,
    TmdbKeyword,
    TmdbMoviePreview,
    TmdbMoviePreviewList,
    TmdbPersonBase,
    TmdbProductionCountry,
    TmdbSpokenLanguage,
)
from cinevault.shared.models.company import (
    TmdbCompanyInformation,
    TmdbCompanyPreview,
    TmdbCompanyPreviewList,
)
from cinevault.shared.models.configuration import (
    TmdbConfiguration,
    TmdbImageConfiguration,
)
from cinevault.shared.models.discovery import DiscoveryFilter, GenreFilter
from cinevault.shared.models.enums import (
    CacheLevel,
    CollectionMethod,
    CompanyMethod,
    DiscoverySortBy,
    FilterOperator,
    ImageType,
    MovieMethod,
    PersonMethod,
    SearchType,
    SortBy,
    SortOrder,
)
from cinevault.shared.models.genre import TmdbGenreList, TmdbKeywords
from cinevault.shared.models.jobs import TmdbDepartment, TmdbDepartments
from cinevault.shared.models.lists import (
    TmdbCreateMovieListRequest,
    TmdbCreateMovieListResponse,
    TmdbListItemRequest,
    TmdbMovieList,
    TmdbMovieListPreview,
    TmdbMovieListPreviewList,
    TmdbMovieListStatus,
)
from cinevault.shared.models.movie import (
    NotRated,
    RatedWithValue,
    RatingState,
    TmdbAlternativeTitle,
    TmdbAlternativeTitles,
    TmdbCastMember,
    TmdbCrewMember,
    TmdbImages,
    TmdbMovie,
    TmdbMovieAccountStates,
    TmdbMovieKeywords,
    TmdbMovieLists,
    TmdbMovieRatingRequest,
    TmdbRelease,
    TmdbReleases,
    TmdbStaff,
    TmdbTrailer,
    TmdbTrailers,
    TmdbTranslation,
    TmdbTranslations,
)
from cinevault.shared.models.person import (
    TmdbCastCredit,
    TmdbCrewCredit,
    TmdbPersonCredits,
    TmdbPersonImages,
    TmdbPersonInformation,
    TmdbPersonPreview,
    TmdbPersonPreviewList,
)
from cinevault.shared.models.review import (
    TmdbMovieReviews,
    TmdbReview,
    TmdbReviewPreview,
)
from cinevault.shared.models.status import TmdbStatusResponse

__all__ = [
    "CacheLevel",
    "CollectionMethod",
    "CompanyMethod",
    "DiscoveryFilter",
    "DiscoverySortBy",
    "FilterOperator",
    "GenreFilter",
    "ImageType",
    "MovieMethod",
    "NotRated",
    "PersonMethod",
    "RatedWithValue",
    "RatingState",
    "SearchType",
    "SortBy",
    "SortOrder",
    "TmdbAccount",
    "TmdbAlternativeTitle",
    "TmdbAlternativeTitles",
    "TmdbAuthenticationToken",
    "TmdbCastCredit",
    "TmdbCastMember",
    "TmdbChange",
    "TmdbChangeItem",
    "TmdbChangedEntriesList",
    "TmdbChangedEntry",
    "TmdbChanges",
    "TmdbCollectionImages",
    "TmdbCompanyBasic",
    "TmdbCompanyInformation",
    "TmdbCompanyPreview",
    "TmdbCompanyPreviewList",
    "TmdbConfiguration",
    "TmdbCreateMovieListRequest",
    "TmdbCreateMovieListResponse",
    "TmdbCrewCredit",
    "TmdbCrewMember",
    "TmdbDepartment",
    "TmdbDepartments",
    "TmdbFavoriteRequest",
    "TmdbGenre",
    "TmdbGenreList",
    "TmdbGuestSession",
    "TmdbImage",
    "TmdbImageConfiguration",
    "TmdbImages",
    "TmdbKeyword",
    "TmdbKeywords",
    "TmdbListItemRequest",
    "TmdbModel",
    "TmdbMovie",
    "TmdbMovieAccountStates",
    "TmdbMovieCollection",
    "TmdbMovieCollectionPart",
    "TmdbMovieCollectionPreview",
    "TmdbMovieCollectionPreviewList",
    "TmdbMovieKeywords",
    "TmdbMovieList",
    "TmdbMovieListPreview",
    "TmdbMovieListPreviewList",
    "TmdbMovieListStatus",
    "TmdbMovieLists",
    "TmdbMoviePreview",
    "TmdbMoviePreviewList",
    "TmdbMovieRatingRequest",
    "TmdbMovieReviews",
    "TmdbPagedModel",
    "TmdbPersonBase",
    "TmdbPersonCredits",
    "TmdbPersonImages",
    "TmdbPersonInformation",
    "TmdbPersonPreview",
    "TmdbPersonPreviewList",
    "TmdbProductionCountry",
    "TmdbRelease",
    "TmdbReleases",
    "TmdbReview",
    "TmdbReviewPreview",
    "TmdbSession",
    "TmdbSpokenLanguage",
    "TmdbStaff",
    "TmdbStatusResponse",
    "TmdbTrailer",
    "TmdbTrailers",
    "TmdbTranslation",
    "TmdbTranslations",
    "TmdbWatchListRequest",
]
