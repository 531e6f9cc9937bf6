"""Person models."""

from __future__ import annotations

from pydantic import Field

from cinevault.shared.models.base import TmdbModel, TmdbPagedModel
from cinevault.shared.models.changes import TmdbChanges
from cinevault.shared.models.common import (
    TmdbImage,
    TmdbMoviePreviewBase,
    TmdbPersonBase,
)


class TmdbCreditMovie(TmdbMoviePreviewBase):
    adult: bool = False


class TmdbCastCredit(TmdbCreditMovie):
    character: str = ""


class TmdbCrewCredit(TmdbCreditMovie):
    department: str = ""
    job: str = ""


class TmdbPersonCredits(TmdbModel):
    id: int = 0
    cast: list[TmdbCastCredit] = Field(default_factory=list)
    crew: list[TmdbCrewCredit] = Field(default_factory=list)


class TmdbPersonImages(TmdbModel):
    id: int = 0
    profiles: list[TmdbImage] = Field(default_factory=list)


class TmdbPersonPreview(TmdbPersonBase):
    adult: bool = False


class TmdbPersonPreviewList(TmdbPagedModel):
    persons: list[TmdbPersonPreview] = Field(default_factory=list, alias="results")


class TmdbPersonInformation(TmdbPersonPreview):
    """Full person record plus the blocks requested with ``append_to_response``."""

    also_known_as: list[str] = Field(default_factory=list)
    biography: str | None = None
    birthday: str | None = None
    deathday: str | None = None
    homepage: str | None = None
    place_of_birth: str | None = None

    credits: TmdbPersonCredits | None = None
    images: TmdbPersonImages | None = None
    changes: TmdbChanges | None = None
