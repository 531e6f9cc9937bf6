"""Account profile and account mutation requests."""

from __future__ import annotations

from pydantic import Field

from cinevault.shared.models.base import TmdbModel


class TmdbAccount(TmdbModel):
    id: int
    username: str = ""
    name: str = ""
    include_adult: bool = Field(default=False, alias="includeAdult")
    iso_3166_1: str = ""
    iso_639_1: str = ""


class TmdbFavoriteRequest(TmdbModel):
    """Body of the "mark as favorite" call."""

    movie_id: int
    favorite: bool


class TmdbWatchListRequest(TmdbModel):
    """Body of the "add to watchlist" call."""

    movie_id: int
    movie_watchlist: bool
