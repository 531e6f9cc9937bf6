"""TMDb status payload returned with errors and mutations."""

from __future__ import annotations

from cinevault.shared.models.base import TmdbModel


class TmdbStatusResponse(TmdbModel):
    """Status envelope, e.g. ``{"status_code": 34, "status_message": "..."}``."""

    status_code: int = 0
    status_message: str = ""
