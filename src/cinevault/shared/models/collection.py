"""Movie collections."""

from __future__ import annotations

from pydantic import Field

from cinevault.shared.models.base import TmdbModel, TmdbPagedModel
from cinevault.shared.models.common import TmdbImage


class TmdbMovieCollectionPart(TmdbModel):
    id: int
    title: str = ""
    release_date: str | None = None
    poster_path: str | None = None
    backdrop_path: str | None = None


class TmdbMovieCollectionPreview(TmdbModel):
    id: int
    name: str = ""
    poster_path: str | None = None
    backdrop_path: str | None = None


class TmdbCollectionImages(TmdbModel):
    backdrops: list[TmdbImage] = Field(default_factory=list)
    posters: list[TmdbImage] = Field(default_factory=list)


class TmdbMovieCollection(TmdbMovieCollectionPreview):
    parts: list[TmdbMovieCollectionPart] = Field(default_factory=list)
    images: TmdbCollectionImages | None = None


class TmdbMovieCollectionPreviewList(TmdbPagedModel):
    collections: list[TmdbMovieCollectionPreview] = Field(
        default_factory=list, alias="results"
    )
