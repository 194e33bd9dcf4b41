"""bakkutteh configuration module."""

from .loader import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    load_config,
    resolve_config,
)
from .schema import DispatchConfig

__all__ = [
    "DispatchConfig",
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "load_config",
    "resolve_config",
]
