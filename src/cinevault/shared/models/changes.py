"""Change history of movies and people."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from cinevault.shared.models.base import TmdbModel, TmdbPagedModel


class TmdbChangeItem(TmdbModel):
    """One edit; ``value`` and ``original_value`` have a key dependent shape."""

    id: str = ""
    action: str = ""
    time: str = ""
    iso_639_1: str | None = None
    value: Any = None
    original_value: Any = None


class TmdbChange(TmdbModel):
    key: str = ""
    items: list[TmdbChangeItem] = Field(default_factory=list)


class TmdbChanges(TmdbModel):
    changes: list[TmdbChange] = Field(default_factory=list)


class TmdbChangedEntry(TmdbModel):
    id: int
    adult: bool | None = None


class TmdbChangedEntriesList(TmdbPagedModel):
    changed_entries: list[TmdbChangedEntry] = Field(
        default_factory=list, alias="results"
    )
