"""User movie lists and list mutation requests."""

from __future__ import annotations

from pydantic import Field

from cinevault.shared.models.base import TmdbModel, TmdbPagedModel
from cinevault.shared.models.common import TmdbMoviePreview
from cinevault.shared.models.status import TmdbStatusResponse


class TmdbMovieListPreview(TmdbModel):
    id: str
    name: str = ""
    description: str | None = None
    favorite_count: int = 0
    item_count: int = 0
    iso_639_1: str | None = None
    list_type: str | None = None
    poster_path: str | None = None


class TmdbMovieListPreviewList(TmdbPagedModel):
    lists: list[TmdbMovieListPreview] = Field(default_factory=list, alias="results")


class TmdbMovieList(TmdbMovieListPreview):
    created_by: str = ""
    movies: list[TmdbMoviePreview] = Field(default_factory=list, alias="items")


class TmdbMovieListStatus(TmdbModel):
    id: str = ""
    item_present: bool = False


class TmdbCreateMovieListRequest(TmdbModel):
    name: str
    description: str = ""
    language: str | None = None


class TmdbCreateMovieListResponse(TmdbStatusResponse):
    list_id: str = ""


class TmdbListItemRequest(TmdbModel):
    """Body of the add/remove list item calls."""

    media_id: int
