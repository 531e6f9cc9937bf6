"""Authentication tokens and sessions.

Tokens and guest sessions carry an expiry string in TMDb's
``"%Y-%m-%d %H:%M:%S UTC"`` format; the parsing pattern is taken from the
endpoint configuration so callers pass it in.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import Field

from cinevault.shared.models.base import TmdbModel
from cinevault.shared.models.common import parse_date


class _ExpiringModel(TmdbModel):
    expires_at: str | None = None

    def get_expire_date(self, pattern: str) -> datetime | None:
        """Expiry as a UTC datetime, None when the string does not match."""
        parsed = parse_date(self.expires_at, pattern)
        return parsed.replace(tzinfo=timezone.utc) if parsed else None

    def is_expired(self, pattern: str) -> bool | None:
        """Whether the expiry lies in the past, None when it is unknown."""
        expire_date = self.get_expire_date(pattern)
        if expire_date is None:
            return None
        return datetime.now(timezone.utc) >= expire_date


class TmdbAuthenticationToken(_ExpiringModel):
    """Request token the user must approve on the TMDb website."""

    token: str = Field(default="", alias="request_token")
    success: bool = False


class TmdbSession(TmdbModel):
    success: bool = False
    session_id: str = ""


class TmdbGuestSession(_ExpiringModel):
    success: bool = False
    guest_session_id: str = ""
