"""TMDb building blocks shared by several model families.

Movie previews, person and company stubs, images and genres appear inside
movie, person, company, collection and list payloads alike.
"""

from __future__ import annotations

from datetime import date, datetime

from pydantic import Field

from cinevault.shared.models.base import TmdbModel, TmdbPagedModel


def parse_date(value: str | None, pattern: str) -> datetime | None:
    """Parse a TMDb date string, returning None when it does not match."""
    if not value:
        return None
    try:
        return datetime.strptime(value, pattern)
    except ValueError:
        return None


class TmdbGenre(TmdbModel):
    """Genre id and localized name."""

    id: int
    name: str = ""


class TmdbKeyword(TmdbModel):
    id: int
    name: str = ""


class TmdbCompanyBasic(TmdbModel):
    id: int
    name: str = ""


class TmdbProductionCountry(TmdbModel):
    iso_3166_1: str = ""
    name: str = ""


class TmdbSpokenLanguage(TmdbModel):
    iso_639_1: str = ""
    name: str = ""


class TmdbImage(TmdbModel):
    """Image metadata; ``file_path`` is combined with the image configuration."""

    file_path: str = ""
    width: int = 0
    height: int = 0
    iso_639_1: str | None = None
    aspect_ratio: float = 0.0
    vote_average: float = 0.0
    vote_count: int = 0


class TmdbMoviePreviewBase(TmdbModel):
    id: int
    title: str = ""
    original_title: str = ""
    release_date: str | None = None
    poster_path: str | None = None

    def get_release_date(self, pattern: str = "%Y-%m-%d") -> date | None:
        """Release date parsed with ``pattern``, None if absent or malformed."""
        parsed = parse_date(self.release_date, pattern)
        return parsed.date() if parsed else None


class TmdbMoviePreview(TmdbMoviePreviewBase):
    backdrop_path: str | None = None
    vote_average: float = 0.0
    vote_count: int = 0


class TmdbMoviePreviewList(TmdbPagedModel):
    movies: list[TmdbMoviePreview] = Field(default_factory=list, alias="results")


class TmdbPersonBase(TmdbModel):
    id: int
    name: str = ""
    profile_path: str | None = None
