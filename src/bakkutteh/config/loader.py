"""Configuration loader for bakkutteh."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from bakkutteh._constants import DEFAULT_CONFIG

from .schema import DispatchConfig


class ConfigError(Exception):
    """Base exception for configuration errors."""

    pass


class ConfigFileNotFoundError(ConfigError):
    """Raised when configuration file is not found."""

    pass


class ConfigParseError(ConfigError):
    """Raised when configuration file cannot be parsed."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when configuration validation fails."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []


def _validation_error(header: str, e: ValidationError) -> ConfigValidationError:
    """Turn a pydantic ValidationError into a ConfigValidationError."""
    errors = e.errors()
    error_messages = []
    for err in errors:
        loc = ".".join(str(x) for x in err["loc"])
        error_messages.append(f"  - {loc}: {err['msg']}")

    return ConfigValidationError(
        header + "\n" + "\n".join(error_messages),
        errors=[dict(err) for err in errors],  # type: ignore[call-overload]
    )


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dictionary.

    Raises:
        ConfigFileNotFoundError: If file doesn't exist
        ConfigParseError: If YAML parsing fails or the document is not a mapping
    """
    if not path.exists():
        raise ConfigFileNotFoundError(f"Configuration file not found: {path}")

    try:
        with open(path) as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Failed to parse YAML: {e}")  # noqa: B904

    if not content:
        return {}
    if not isinstance(content, dict):
        raise ConfigParseError(f"Configuration must be a mapping: {path}")
    return content


def load_config(path: str | Path) -> DispatchConfig:
    """Load and validate configuration from file.

    Args:
        path: Path to configuration YAML file

    Returns:
        Validated DispatchConfig object

    Raises:
        ConfigFileNotFoundError: If file doesn't exist
        ConfigParseError: If YAML parsing fails
        ConfigValidationError: If validation fails
    """
    path = Path(path)
    data = load_yaml(path)

    try:
        return DispatchConfig.model_validate(data)
    except ValidationError as e:
        raise _validation_error("Configuration validation failed:", e)  # noqa: B904


def resolve_config(path: str | Path | None = None, **overrides: Any) -> DispatchConfig:
    """Resolve the effective configuration.

    An explicit ``path`` must exist. Without one, ``./bakkutteh.yaml`` is used
    when present, otherwise the defaults. Overrides that are not ``None``
    replace file values and are validated like them.
    """
    if path is not None:
        base = load_config(path)
    elif Path(DEFAULT_CONFIG).exists():
        base = load_config(DEFAULT_CONFIG)
    else:
        base = DispatchConfig()

    updates = {k: v for k, v in overrides.items() if v is not None}
    if not updates:
        return base

    data = base.model_dump()
    data.update(updates)
    try:
        return DispatchConfig.model_validate(data)
    except ValidationError as e:
        raise _validation_error("Invalid option:", e)  # noqa: B904
