"""CineVault runtime settings.

Settings are read from ``CINEVAULT_`` prefixed environment variables
(nested fields use ``__``, e.g. ``CINEVAULT_TMDB__API_KEY``) and can be
persisted to a TOML file. The endpoint configuration itself is a separate
document referenced by ``tmdb.endpoint_config_file``.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

import toml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from cinevault.config.endpoints import EndpointConfiguration
from cinevault.shared.constants import Logging, NetworkConfig
from cinevault.shared.logging import setup_structured_logger
from cinevault.shared.models.enums import SearchType, SortBy, SortOrder

logger = logging.getLogger(__name__)


class TMDBSettings(BaseModel):
    """TMDb client configuration.

    Security: api_key is masked in __repr__ so settings can be logged.
    """

    api_key: str = Field(
        default="",
        repr=False,
        description="TMDb API key (required for API access)",
    )
    timeout: float = Field(
        default=NetworkConfig.DEFAULT_TIMEOUT,
        gt=0,
        description="Request timeout in seconds",
    )
    concurrent_requests: int = Field(
        default=NetworkConfig.DEFAULT_CONCURRENT_REQUESTS,
        gt=0,
        description="Maximum number of concurrent requests",
    )
    throw_on_error: bool = Field(
        default=True,
        description="Raise TmdbError on failed calls instead of returning None",
    )
    use_secure_connection: bool = Field(default=True, description="Use https")
    language: str | None = Field(
        default=None,
        description="Default ISO 639-1 language code for localized results",
    )
    include_adult: bool = Field(
        default=True,
        description="Include adult movies in searches and genre listings",
    )
    search_type: SearchType = Field(default=SearchType.NONE)
    account_sort_by: SortBy = Field(default=SortBy.NONE)
    account_sort_order: SortOrder = Field(default=SortOrder.UNSET)
    endpoint_config_file: str | None = Field(
        default=None,
        description="TOML file holding a customized endpoint configuration",
    )

    def __repr__(self) -> str:
        masked_key = "****" if self.api_key else "[empty]"
        return (
            f"TMDBSettings("
            f"api_key={masked_key}, "
            f"timeout={self.timeout}, "
            f"concurrent_requests={self.concurrent_requests}, "
            f"throw_on_error={self.throw_on_error})"
        )

    def endpoint_configuration(self) -> EndpointConfiguration:
        """Build the endpoint configuration these settings describe.

        Values from ``endpoint_config_file`` win over the defaults; the API
        key, timeout and TLS flag of these settings always apply.
        """
        if self.endpoint_config_file:
            config = EndpointConfiguration.from_toml_file(self.endpoint_config_file)
        else:
            config = EndpointConfiguration.with_defaults()
        if self.api_key:
            config.api_key = self.api_key
        config.timeout = self.timeout
        config.use_secure_connection = self.use_secure_connection
        return config


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: str = Field(default=Logging.DEFAULT_LEVEL, description="Logging level")
    file: str | None = Field(default=None, description="JSON log file path")
    use_rich_console: bool = Field(
        default=True,
        description="Pretty console output via rich instead of JSON lines",
    )

    def configure(self, name: str = Logging.LOGGER_NAME) -> logging.Logger:
        """Install the console (and optional JSON file) handlers on ``name``."""
        return setup_structured_logger(
            name=name,
            level=self.level,
            log_file=self.file,
            use_rich_console=self.use_rich_console,
        )


class Settings(BaseSettings):
    """Top-level settings."""

    model_config = SettingsConfigDict(
        env_prefix="CINEVAULT_",
        env_nested_delimiter="__",
        env_ignore_empty=True,
        extra="ignore",
    )

    tmdb: TMDBSettings = Field(default_factory=TMDBSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_toml_file(cls, file_path: str | Path) -> Settings:
        """Load settings from TOML file with environment variable overrides."""
        file_path = Path(file_path)
        if not file_path.exists():
            msg = f"Configuration file not found: {file_path}"
            raise FileNotFoundError(msg)

        raw_config = toml.load(file_path)
        return cls(**raw_config)

    def to_toml_file(self, file_path: str | Path) -> None:
        """Save settings to TOML file.

        API keys are written to the file; only logs mask them.
        """
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        config_dict = self.model_dump(mode="json", exclude_none=True)

        with open(file_path, "w", encoding="utf-8") as f:
            toml.dump(config_dict, f)


_config: Settings | None = None
_config_lock = threading.Lock()


def get_config() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    global _config
    with _config_lock:
        if _config is None:
            _config = Settings()
            logger.debug("Settings loaded: %r", _config.tmdb)
        return _config


def reset_config() -> None:
    """Drop the cached settings so the next get_config() reloads them."""
    global _config
    with _config_lock:
        _config = None
