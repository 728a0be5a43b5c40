"""Error hints for configuration loading errors.

Provides user-friendly hints with actionable remediation steps
for the errors a script task can hit while loading configuration.
"""

from typing import Final

from bpm_config.features.config.errors import (
    ConfigLoadError,
    ConfigParseError,
    DeploymentNotFoundError,
    MissingKeyError,
    ResourceNotFoundError,
)


ERROR_HINTS: Final[dict[str, str]] = {
    "deployment_not_found": (
        "The process definition is not linked to a deployment. "
        "Check that the process was deployed together with its resources."
    ),
    "resource_not_found": (
        "The file is not part of the deployment. "
        "Add it to the deployment and check the file name, including its path."
    ),
    "parse_error": (
        "The file is not valid JSON (or YAML for .yaml/.yml files). "
        "Check for trailing commas, unquoted keys and file encoding (UTF-8)."
    ),
    "missing_key": (
        "The key is not a top-level field of the configuration. "
        "Keys are case-sensitive; nested keys cannot be selected directly."
    ),
    "value_type_error": "Only object values can be indexed by key.",
}

DEFAULT_HINT: Final[str] = "Check the configuration resource and its deployment."


def get_error_hint(error_type: str) -> str:
    """Get a user-friendly hint for a loading error.

    Args:
        error_type: The error type (e.g. 'missing_key').

    Returns:
        A user-friendly hint string.
    """
    return ERROR_HINTS.get(error_type, DEFAULT_HINT)


def _error_location(error: ConfigLoadError) -> str:
    if isinstance(error, MissingKeyError):
        return f"key {error.key!r}"
    if isinstance(error, (ResourceNotFoundError, ConfigParseError)):
        return error.file_name
    if isinstance(error, DeploymentNotFoundError):
        return error.process_definition_id
    return "config"


def format_load_error(error: ConfigLoadError, *, include_hint: bool = True) -> str:
    """Format a loading error with optional hint.

    Args:
        error: The error raised by the loader.
        include_hint: Whether to include a hint.

    Returns:
        Formatted error string.
    """
    base = f"{_error_location(error)}: {error}"
    if include_hint:
        return f"{base}\n    Hint: {get_error_hint(error.error_type)}"
    return base
