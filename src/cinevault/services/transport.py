"""Transport port consumed by the API wrapper.

A transport performs the actual HTTP exchange. It never raises for a
failed exchange; failures are reported through the ``error`` field of the
returned record together with any body the server sent.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from cinevault.shared.models.enums import CacheLevel


@dataclass(frozen=True)
class ApiCallResult:
    """Raw outcome of a JSON call.

    Attributes:
        source_url: Requested url
        json: Response body, empty when the server sent none
        etag: ETag response header
        error: Failure of the exchange, None on success
    """

    source_url: str
    json: str = ""
    etag: str | None = None
    error: BaseException | None = None


@dataclass(frozen=True)
class FileDownloadResult:
    source_url: str
    file_path: str | None = None
    error: BaseException | None = None


@dataclass(frozen=True)
class FileStreamResult:
    source_url: str
    content: bytes | None = None
    error: BaseException | None = None


@runtime_checkable
class TransportPort(Protocol):
    """Protocol for HTTP transports.

    Example:
        >>> from cinevault.services.http_transport import AiohttpTransport
        >>> transport: TransportPort = AiohttpTransport()
        >>> result = await transport.perform_request(url, "GET")
    """

    async def perform_request(
        self,
        url: str,
        method: str = "GET",
        body: str | None = None,
        cache_level: CacheLevel | None = None,
        timeout: float | None = None,
        use_secure_connection: bool | None = None,
    ) -> ApiCallResult:
        """Perform a JSON call.

        Args:
            url: Fully built request url
            method: HTTP method
            body: JSON request body, None for body-less calls
            cache_level: Cache hint, interpreted by the transport only
            timeout: Timeout in seconds
            use_secure_connection: Prefer https when True

        Returns:
            ApiCallResult holding the body, the ETag or the error
        """
        ...

    async def download_to_file(
        self,
        url: str,
        file_name: str,
        cache_level: CacheLevel | None = None,
        timeout: float | None = None,
        use_secure_connection: bool | None = None,
    ) -> FileDownloadResult:
        """Stream the response body of ``url`` into ``file_name``."""
        ...

    async def read_to_bytes(
        self,
        url: str,
        cache_level: CacheLevel | None = None,
        timeout: float | None = None,
        use_secure_connection: bool | None = None,
    ) -> FileStreamResult:
        """Read the whole response body of ``url``."""
        ...
