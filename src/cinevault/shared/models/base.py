"""Base model for TMDb payloads.

All response and request models inherit from TmdbModel which ignores
unknown fields so that additions to the TMDb API do not break validation.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TmdbModel(BaseModel):
    """Common base for every TMDb model.

    Attributes:
        etag: ETag header of the response the model was read from. Set by
            the API wrapper, never part of the JSON payload.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    etag: str | None = Field(default=None, exclude=True)

    def to_json(self) -> str:
        """Serialize the model as a request body (by alias, no null fields)."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


class TmdbPagedModel(TmdbModel):
    """Base for paged list responses."""

    page: int = 0
    total_pages: int = 0
    total_results: int = 0
