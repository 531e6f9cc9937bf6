"""
CineVault - TMDb Movie Metadata Client

An asynchronous, typed client for The Movie Database (TMDb) v3 API with
configurable endpoints, bounded concurrency and structured error handling.
"""

__version__ = "0.1.0"
__author__ = "CineVault Team"

from .config import EndpointConfiguration, Settings, get_config
from .services import AiohttpTransport, TmdbApiWrapper, TmdbClient, TmdbResult

__all__ = [
    "AiohttpTransport",
    "EndpointConfiguration",
    "Settings",
    "TmdbApiWrapper",
    "TmdbClient",
    "TmdbResult",
    "get_config",
]
