"""TMDb system configuration (image base urls and sizes)."""

from __future__ import annotations

from pydantic import Field

from cinevault.shared.models.base import TmdbModel
from cinevault.shared.models.enums import ImageType


class TmdbImageConfiguration(TmdbModel):
    """Base urls and available sizes for every image type."""

    base_url: str = ""
    secure_base_url: str = ""
    poster_sizes: list[str] = Field(default_factory=list)
    backdrop_sizes: list[str] = Field(default_factory=list)
    profile_sizes: list[str] = Field(default_factory=list)
    logo_sizes: list[str] = Field(default_factory=list)

    def sizes_for(self, image_type: ImageType) -> list[str]:
        """Return the size names TMDb offers for ``image_type``."""
        return {
            ImageType.POSTER: self.poster_sizes,
            ImageType.BACKDROP: self.backdrop_sizes,
            ImageType.PROFILE: self.profile_sizes,
            ImageType.LOGO: self.logo_sizes,
        }[image_type]


class TmdbConfiguration(TmdbModel):
    images: TmdbImageConfiguration = Field(default_factory=TmdbImageConfiguration)
    change_keys: list[str] = Field(default_factory=list)
