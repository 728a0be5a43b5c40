"""Deployment configuration loading for BPM engine script tasks."""

from bpm_config.features.config import (
    CONFIG_VARIABLE_NAME,
    ConfigLoader,
    ConfigLoadError,
    ConfigParseError,
    ConfigValue,
    MissingKeyError,
    ResourceNotFoundError,
    load_config,
)


__all__ = [
    "CONFIG_VARIABLE_NAME",
    "ConfigLoadError",
    "ConfigLoader",
    "ConfigParseError",
    "ConfigValue",
    "MissingKeyError",
    "ResourceNotFoundError",
    "load_config",
]

__version__ = "0.1.0"
