"""Production companies."""

from __future__ import annotations

from pydantic import Field

from cinevault.shared.models.base import TmdbPagedModel
from cinevault.shared.models.common import TmdbCompanyBasic, TmdbMoviePreviewList


class TmdbCompanyPreview(TmdbCompanyBasic):
    logo_path: str | None = None


class TmdbCompanyPreviewList(TmdbPagedModel):
    companies: list[TmdbCompanyPreview] = Field(default_factory=list, alias="results")


class TmdbCompanyInformation(TmdbCompanyPreview):
    description: str | None = None
    headquarters: str | None = None
    homepage: str | None = None
    parent_company: TmdbCompanyPreview | None = None
    movies: TmdbMoviePreviewList | None = None
