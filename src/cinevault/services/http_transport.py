"""aiohttp based transport.

Default TransportPort implementation. Failed exchanges are never raised:
they are returned as TransportError values together with whatever body the
server sent, so TMDb status payloads reach the API wrapper.
"""

from __future__ import annotations

import asyncio
import logging
import types
from pathlib import Path

import aiohttp
from typing_extensions import Self

from cinevault.services.transport import (
    ApiCallResult,
    FileDownloadResult,
    FileStreamResult,
)
from cinevault.shared.constants import HttpMethod, NetworkConfig
from cinevault.shared.errors import (
    ErrorCode,
    TransportError,
    create_transport_error,
)
from cinevault.shared.logging import mask_api_key
from cinevault.shared.models.enums import CacheLevel

logger = logging.getLogger(__name__)


def _status_error_code(status: int) -> ErrorCode:
    if status == 401:
        return ErrorCode.API_AUTHENTICATION_FAILED
    if status == 429:
        return ErrorCode.API_RATE_LIMIT
    if status >= 500:
        return ErrorCode.API_SERVER_ERROR
    return ErrorCode.API_REQUEST_FAILED


def _secure(url: str, use_secure_connection: bool | None) -> str:
    if use_secure_connection and url.startswith("http://"):
        return "https://" + url[len("http://") :]
    return url


class AiohttpTransport:
    """TransportPort over a lazily created aiohttp.ClientSession.

    The cache hint is accepted for interface compatibility and ignored.

    Args:
        session: Existing session to use; it is then not closed by close()
        timeout: Default timeout in seconds when a call passes none
        chunk_size: Read size of file downloads
    """

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        timeout: float = NetworkConfig.DEFAULT_TIMEOUT,
        chunk_size: int = NetworkConfig.DEFAULT_CHUNK_SIZE,
    ) -> None:
        self._session = session
        self._owns_session = session is None
        self._session_lock = asyncio.Lock()
        self.timeout = timeout
        self.chunk_size = chunk_size

    async def _get_session(self) -> aiohttp.ClientSession:
        async with self._session_lock:
            if self._session is None or self._session.closed:
                self._session = aiohttp.ClientSession(
                    headers={
                        "User-Agent": NetworkConfig.USER_AGENT,
                        "Accept": NetworkConfig.ACCEPT_JSON,
                    },
                )
                self._owns_session = True
                logger.debug("aiohttp.ClientSession created")
            return self._session

    def _client_timeout(self, timeout: float | None) -> aiohttp.ClientTimeout:
        return aiohttp.ClientTimeout(total=timeout if timeout is not None else self.timeout)

    async def perform_request(
        self,
        url: str,
        method: str = HttpMethod.GET,
        body: str | None = None,
        cache_level: CacheLevel | None = None,
        timeout: float | None = None,
        use_secure_connection: bool | None = None,
    ) -> ApiCallResult:
        url = _secure(url, use_secure_connection)
        headers = {}
        if body is not None:
            headers["Content-Type"] = NetworkConfig.CONTENT_TYPE_JSON

        try:
            session = await self._get_session()
            async with session.request(
                method,
                url,
                data=body,
                headers=headers,
                timeout=self._client_timeout(timeout),
            ) as response:
                text = await response.text()
                etag = response.headers.get("ETag")
                if response.status >= 400:
                    error = self._status_error(response, url)
                    return ApiCallResult(url, text, etag, error)
                return ApiCallResult(url, text, etag)
        except Exception as e:
            return ApiCallResult(url, error=self._exchange_error(e, url))

    async def download_to_file(
        self,
        url: str,
        file_name: str,
        cache_level: CacheLevel | None = None,
        timeout: float | None = None,
        use_secure_connection: bool | None = None,
    ) -> FileDownloadResult:
        url = _secure(url, use_secure_connection)
        target = Path(file_name)
        opened = False
        try:
            session = await self._get_session()
            async with session.get(url, timeout=self._client_timeout(timeout)) as response:
                if response.status >= 400:
                    return FileDownloadResult(url, error=self._status_error(response, url))
                target.parent.mkdir(parents=True, exist_ok=True)
                with open(target, "wb") as f:
                    opened = True
                    async for chunk in response.content.iter_chunked(self.chunk_size):
                        f.write(chunk)
        except (asyncio.TimeoutError, aiohttp.ClientError) as e:
            # Timeouts and connector errors subclass OSError.
            error = self._exchange_error(e, url)
        except OSError as e:
            error = create_transport_error(
                f"Failed to write {target}: {e}",
                url=mask_api_key(url),
                code=ErrorCode.FILE_WRITE_ERROR,
                original_error=e,
            )
        except Exception as e:
            error = self._exchange_error(e, url)
        else:
            logger.debug("Downloaded %s to %s", mask_api_key(url), target)
            return FileDownloadResult(url, str(target))

        if opened:
            target.unlink(missing_ok=True)
        return FileDownloadResult(url, error=error)

    async def read_to_bytes(
        self,
        url: str,
        cache_level: CacheLevel | None = None,
        timeout: float | None = None,
        use_secure_connection: bool | None = None,
    ) -> FileStreamResult:
        url = _secure(url, use_secure_connection)
        try:
            session = await self._get_session()
            async with session.get(url, timeout=self._client_timeout(timeout)) as response:
                if response.status >= 400:
                    return FileStreamResult(url, error=self._status_error(response, url))
                return FileStreamResult(url, await response.read())
        except Exception as e:
            return FileStreamResult(url, error=self._exchange_error(e, url))

    @staticmethod
    def _status_error(response: aiohttp.ClientResponse, url: str) -> TransportError:
        return create_transport_error(
            f"HTTP {response.status} {response.reason or ''}".strip(),
            url=mask_api_key(url),
            status_code=response.status,
            code=_status_error_code(response.status),
        )

    @staticmethod
    def _exchange_error(error: Exception, url: str) -> TransportError:
        masked = mask_api_key(url)
        if isinstance(error, asyncio.TimeoutError):
            logger.warning("Request timed out: %s", masked)
            return create_transport_error(
                "Request timed out",
                url=masked,
                code=ErrorCode.API_TIMEOUT,
                original_error=error,
            )
        if isinstance(error, aiohttp.ClientError):
            logger.warning("Request failed: %s (%s)", masked, error)
            return create_transport_error(
                f"Network error: {error}",
                url=masked,
                code=ErrorCode.NETWORK_ERROR,
                original_error=error,
            )
        logger.exception("Unexpected transport failure: %s", masked)
        return create_transport_error(
            f"Unexpected transport failure: {error}",
            url=masked,
            code=ErrorCode.INFRASTRUCTURE_ERROR,
            original_error=error,
        )

    async def close(self) -> None:
        """Close the session if this transport created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
            logger.debug("aiohttp.ClientSession closed")
        self._session = None

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        await self.close()
