"""CineVault configuration.

- EndpointConfiguration: TMDb urls, method templates and wire values
- Settings: environment/TOML driven runtime settings
"""

from __future__ import annotations

from cinevault.config.endpoints import (
    EndpointConfiguration,
    MethodNames,
    ParameterNames,
    WireValues,
)
from cinevault.config.settings import (
    LoggingSettings,
    Settings,
    TMDBSettings,
    get_config,
    reset_config,
)

__all__ = [
    "EndpointConfiguration",
    "LoggingSettings",
    "MethodNames",
    "ParameterNames",
    "Settings",
    "TMDBSettings",
    "WireValues",
    "get_config",
    "reset_config",
]
