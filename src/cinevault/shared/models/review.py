"""Movie reviews."""

from __future__ import annotations

from pydantic import Field

from cinevault.shared.models.base import TmdbModel, TmdbPagedModel


class TmdbReviewPreview(TmdbModel):
    id: str
    author: str = ""
    content: str = ""
    url: str | None = None


class TmdbReview(TmdbReviewPreview):
    iso_639_1: str | None = None
    media_id: int = 0
    media_title: str = ""
    media_type: str = ""


class TmdbMovieReviews(TmdbPagedModel):
    id: int = 0
    reviews: list[TmdbReviewPreview] = Field(default_factory=list, alias="results")
