"""Filters for the movie discovery endpoint.

These are request-side models only; they are turned into query parameters
by the API wrapper and never serialized as JSON.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from cinevault.shared.models.enums import DiscoverySortBy, FilterOperator


class GenreFilter(BaseModel):
    """Genre ids joined by a boolean operator (OR by default)."""

    genres: list[int] = Field(default_factory=list)
    operator: FilterOperator = FilterOperator.OR


class DiscoveryFilter(BaseModel):
    """Optional discovery criteria; unset fields add no query parameter."""

    certification_country: str | None = None
    include_adult: bool | None = None
    year: int | None = None
    min_vote_count: int | None = None
    min_vote_average: float | None = None
    primary_release_year: int | None = None
    min_release_date: date | None = None
    max_release_date: date | None = None
    max_certification: str | None = None
    companies: list[int] | None = None
    sort_by: DiscoverySortBy = DiscoverySortBy.NONE
    genre_filter: GenreFilter | None = None
