"""Services module for CineVault.

This module contains the TMDb API wrapper, the concurrency-limited client
facade, the transport port and its aiohttp implementation.
"""

from .api_wrapper import TmdbApiWrapper
from .http_transport import AiohttpTransport
from .result import TmdbResult, unwrap_async, unwrap_or_throw_async
from .semaphore_manager import AsyncSemaphoreManager
from .tmdb_client import TmdbClient
from .transport import (
    ApiCallResult,
    FileDownloadResult,
    FileStreamResult,
    TransportPort,
)

__all__ = [
    "AiohttpTransport",
    "ApiCallResult",
    "AsyncSemaphoreManager",
    "FileDownloadResult",
    "FileStreamResult",
    "TmdbApiWrapper",
    "TmdbClient",
    "TmdbResult",
    "TransportPort",
    "unwrap_async",
    "unwrap_or_throw_async",
]
