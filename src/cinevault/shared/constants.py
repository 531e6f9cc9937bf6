"""
Shared constants for CineVault.

Network defaults and HTTP method names used by the client facade,
the API wrapper and the default transport.
"""

from __future__ import annotations


class Application:
    """Application metadata."""

    NAME = "CineVault"
    VERSION = "0.1.0"


class HttpMethod:
    """HTTP method names passed to transports."""

    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


class NetworkConfig:
    """Network configuration constants."""

    DEFAULT_TIMEOUT = 10.0  # seconds
    DEFAULT_CONCURRENT_REQUESTS = 30
    DEFAULT_CHUNK_SIZE = 65536  # 64KB

    USER_AGENT = f"{Application.NAME}/{Application.VERSION}"
    CONTENT_TYPE_JSON = "application/json"
    ACCEPT_JSON = "application/json"


class TMDBConfig:
    """TMDb API constants."""

    API_URL = "http://api.themoviedb.org/3"
    SECURE_API_URL = "https://api.themoviedb.org/3"
    API_KEY_PARAMETER_NAME = "api_key"
    ORIGINAL_IMAGE_SIZE = "original"

    # Status code returned when a resource does not exist
    STATUS_RESOURCE_NOT_FOUND = 34


class Logging:
    """Logging defaults."""

    DEFAULT_LEVEL = "INFO"
    LOGGER_NAME = "cinevault"
