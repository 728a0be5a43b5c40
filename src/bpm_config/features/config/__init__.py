"""Configuration loading from process deployment resources."""

from bpm_config.features.config.constants import CONFIG_VARIABLE_NAME
from bpm_config.features.config.errors import (
    ConfigLoadError,
    ConfigParseError,
    ConfigValueTypeError,
    DeploymentNotFoundError,
    MissingKeyError,
    ResourceNotFoundError,
)
from bpm_config.features.config.loader import ConfigLoader, load_config
from bpm_config.features.config.models import LoadResult
from bpm_config.features.config.state_machine import ConfigState, ConfigStateError
from bpm_config.features.config.value import ConfigValue, ValueKind


__all__ = [
    "CONFIG_VARIABLE_NAME",
    "ConfigLoadError",
    "ConfigLoader",
    "ConfigParseError",
    "ConfigState",
    "ConfigStateError",
    "ConfigValue",
    "ConfigValueTypeError",
    "DeploymentNotFoundError",
    "LoadResult",
    "MissingKeyError",
    "ResourceNotFoundError",
    "ValueKind",
    "load_config",
]
