"""Movie models.

``TmdbMovie`` carries the base movie record plus every block that can be
requested through ``append_to_response``; blocks that were not requested
stay ``None``.
"""

from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cinevault.shared.models.base import TmdbModel
from cinevault.shared.models.changes import TmdbChanges
from cinevault.shared.models.collection import TmdbMovieCollectionPreview
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
from cinevault.shared.models.lists import TmdbMovieListPreviewList
from cinevault.shared.models.review import TmdbMovieReviews


class TmdbAlternativeTitle(TmdbModel):
    iso_3166_1: str = ""
    title: str = ""


class TmdbAlternativeTitles(TmdbModel):
    id: int = 0
    titles: list[TmdbAlternativeTitle] = Field(default_factory=list)


class TmdbCastMember(TmdbPersonBase):
    character: str = ""
    order: int = 0


class TmdbCrewMember(TmdbPersonBase):
    department: str = ""
    job: str = ""


class TmdbStaff(TmdbModel):
    id: int = 0
    cast: list[TmdbCastMember] = Field(default_factory=list)
    crew: list[TmdbCrewMember] = Field(default_factory=list)


class TmdbImages(TmdbModel):
    id: int = 0
    backdrops: list[TmdbImage] = Field(default_factory=list)
    posters: list[TmdbImage] = Field(default_factory=list)


class TmdbMovieKeywords(TmdbModel):
    id: int = 0
    keywords: list[TmdbKeyword] = Field(default_factory=list)


class TmdbRelease(TmdbModel):
    iso_3166_1: str = ""
    certification: str = ""
    release_date: str | None = None


class TmdbReleases(TmdbModel):
    id: int = 0
    countries: list[TmdbRelease] = Field(default_factory=list)


class TmdbTrailer(TmdbModel):
    name: str = ""
    size: str = ""
    source: str = ""


class TmdbTrailers(TmdbModel):
    id: int = 0
    quicktime: list[Any] = Field(default_factory=list)
    youtube: list[TmdbTrailer] = Field(default_factory=list)


class TmdbTranslation(TmdbModel):
    iso_639_1: str = ""
    name: str = ""
    english_name: str = ""


class TmdbTranslations(TmdbModel):
    id: int = 0
    translations: list[TmdbTranslation] = Field(default_factory=list)


class TmdbMovieLists(TmdbMovieListPreviewList):
    """Lists that contain a given movie."""

    id: int = 0


class TmdbMovie(TmdbMoviePreview):
    """Full movie record."""

    adult: bool = False
    belongs_to_collection: TmdbMovieCollectionPreview | None = None
    budget: int = 0
    genres: list[TmdbGenre] = Field(default_factory=list)
    homepage: str | None = None
    imdb_id: str | None = None
    overview: str | None = None
    popularity: float = 0.0
    production_companies: list[TmdbCompanyBasic] = Field(default_factory=list)
    production_countries: list[TmdbProductionCountry] = Field(default_factory=list)
    revenue: int = 0
    runtime: int | None = None
    spoken_languages: list[TmdbSpokenLanguage] = Field(default_factory=list)
    status: str | None = None
    tagline: str | None = None

    # Appended blocks
    alternative_titles: TmdbAlternativeTitles | None = None
    staff: TmdbStaff | None = Field(default=None, alias="casts")
    images: TmdbImages | None = None
    keywords: TmdbMovieKeywords | None = None
    releases: TmdbReleases | None = None
    trailers: TmdbTrailers | None = None
    translations: TmdbTranslations | None = None
    similar_movies: TmdbMoviePreviewList | None = None
    reviews: TmdbMovieReviews | None = None
    lists: TmdbMovieLists | None = None
    changes: TmdbChanges | None = None

    @property
    def genre_names(self) -> str:
        """Genre names joined with " & "."""
        return " & ".join(genre.name for genre in self.genres)

    def leading_cast(self, count: int = 2) -> str:
        """Names of the first ``count`` cast members joined with " & "."""
        if self.staff is None:
            return ""
        return " & ".join(member.name for member in self.staff.cast[:count])


class NotRated(BaseModel):
    """The user has not rated the movie."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["not_rated"] = "not_rated"


class RatedWithValue(BaseModel):
    """The user rated the movie; ``value`` is None if TMDb sent a bare ``true``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["rated"] = "rated"
    value: float | None = None


RatingState = Union[NotRated, RatedWithValue]


class TmdbMovieAccountStates(TmdbModel):
    """Favorite, watchlist and rating state of a movie for the session user.

    TMDb sends ``"rated": false`` or ``"rated": {"value": 7.5}``; both are
    resolved into a ``RatingState`` when the payload is validated.
    """

    id: int = 0
    favorite: bool = False
    watchlist: bool = False
    rated: RatingState = Field(default_factory=NotRated)

    @field_validator("rated", mode="before")
    @classmethod
    def _resolve_rated(cls, value: Any) -> Any:
        if isinstance(value, (NotRated, RatedWithValue)):
            return value
        if value is None or value is False:
            return NotRated()
        if value is True:
            return RatedWithValue()
        if isinstance(value, dict):
            return RatedWithValue(value=value.get("value"))
        return RatedWithValue(value=value)

    @property
    def rated_by_user(self) -> bool:
        return isinstance(self.rated, RatedWithValue)

    @property
    def rating(self) -> float | None:
        if isinstance(self.rated, RatedWithValue):
            return self.rated.value
        return None


class TmdbMovieRatingRequest(TmdbModel):
    """Body of the rate movie call."""

    value: float
