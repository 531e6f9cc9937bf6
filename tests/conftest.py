"""
Pytest configuration and shared fixtures for CineVault tests.

This module provides a recording fake transport and ready-made wrapper and
client fixtures built on top of it.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Generator
from dataclasses import dataclass, field
from typing import Any

import pytest

from cinevault.config.endpoints import EndpointConfiguration
from cinevault.config.settings import reset_config
from cinevault.services.api_wrapper import TmdbApiWrapper
from cinevault.services.tmdb_client import TmdbClient
from cinevault.services.transport import (
    ApiCallResult,
    FileDownloadResult,
    FileStreamResult,
)
from cinevault.shared.errors import ErrorCode, create_transport_error

TEST_API_KEY = "test_api_key_for_ci_testing_only"  # pragma: allowlist secret


@dataclass
class RecordedRequest:
    url: str
    method: str
    body: str | None
    timeout: float | None = None
    use_secure_connection: bool | None = None


@dataclass
class FakeTransport:
    """TransportPort double that records every request.

    Responses are served from ``responses`` in order; once it is empty,
    ``default`` is returned. ``delay`` keeps each call in flight for that
    many seconds so concurrent entries can be observed.
    """

    responses: list[tuple[str, BaseException | None]] = field(default_factory=list)
    default: tuple[str, BaseException | None] = ("{}", None)
    etag: str | None = None
    delay: float = 0.0
    requests: list[RecordedRequest] = field(default_factory=list)
    in_flight: int = 0
    max_in_flight: int = 0
    downloads: list[tuple[str, str]] = field(default_factory=list)
    image_bytes: bytes = b"\x89PNG"

    def queue(self, payload: Any, error: BaseException | None = None) -> None:
        body = payload if isinstance(payload, str) else json.dumps(payload)
        self.responses.append((body, error))

    @property
    def last_url(self) -> str:
        return self.requests[-1].url

    async def perform_request(
        self,
        url: str,
        method: str = "GET",
        body: str | None = None,
        cache_level: Any = None,
        timeout: float | None = None,
        use_secure_connection: bool | None = None,
    ) -> ApiCallResult:
        self.requests.append(
            RecordedRequest(url, method, body, timeout, use_secure_connection)
        )
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            text, error = self.responses.pop(0) if self.responses else self.default
            return ApiCallResult(url, text, self.etag, error)
        finally:
            self.in_flight -= 1

    async def download_to_file(
        self,
        url: str,
        file_name: str,
        cache_level: Any = None,
        timeout: float | None = None,
        use_secure_connection: bool | None = None,
    ) -> FileDownloadResult:
        self.downloads.append((url, file_name))
        return FileDownloadResult(url, file_name)

    async def read_to_bytes(
        self,
        url: str,
        cache_level: Any = None,
        timeout: float | None = None,
        use_secure_connection: bool | None = None,
    ) -> FileStreamResult:
        self.downloads.append((url, ""))
        return FileStreamResult(url, self.image_bytes)


def not_found_error() -> BaseException:
    return create_transport_error(
        "HTTP 404 Not Found",
        status_code=404,
        code=ErrorCode.API_REQUEST_FAILED,
    )


NOT_FOUND_BODY = {"status_code": 34, "status_message": "not found"}

CONFIGURATION_PAYLOAD = {
    "images": {
        "base_url": "http://image.tmdb.org/t/p",
        "secure_base_url": "https://image.tmdb.org/t/p",
        "poster_sizes": ["w92", "w500", "original"],
        "backdrop_sizes": ["w300", "original"],
        "profile_sizes": ["w45", "original"],
        "logo_sizes": ["w45", "original"],
    },
    "change_keys": ["title"],
}


@pytest.fixture(autouse=True)
def _reset_settings() -> Generator[None, None, None]:
    """Drop cached settings around every test."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def endpoint_config() -> EndpointConfiguration:
    return EndpointConfiguration.with_defaults(TEST_API_KEY)


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def wrapper(transport: FakeTransport, endpoint_config: EndpointConfiguration) -> TmdbApiWrapper:
    return TmdbApiWrapper(transport, endpoint_config)


@pytest.fixture
def client(wrapper: TmdbApiWrapper) -> TmdbClient:
    return TmdbClient(wrapper)
