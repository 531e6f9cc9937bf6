"""Genre and keyword listings."""

from __future__ import annotations

from pydantic import Field

from cinevault.shared.models.base import TmdbModel, TmdbPagedModel
from cinevault.shared.models.common import TmdbGenre, TmdbKeyword


class TmdbGenreList(TmdbModel):
    genres: list[TmdbGenre] = Field(default_factory=list)

    def by_id(self, genre_id: int) -> TmdbGenre | None:
        return next((genre for genre in self.genres if genre.id == genre_id), None)


class TmdbKeywords(TmdbPagedModel):
    """Keyword search results."""

    keywords: list[TmdbKeyword] = Field(default_factory=list, alias="results")
