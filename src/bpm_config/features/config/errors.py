"""Domain exceptions for configuration loading.

Every exception raised by the loader inherits from ConfigLoadError so that
a script task can catch the whole family in one place. Each error carries an
``error_type`` string used for hints and metrics.
"""

from typing import ClassVar


class ConfigLoadError(Exception):
    """Base exception for all configuration loading errors."""

    error_type: ClassVar[str] = "config_load_error"


class DeploymentNotFoundError(ConfigLoadError):
    """Raised when a process definition cannot be resolved to a deployment."""

    error_type: ClassVar[str] = "deployment_not_found"

    def __init__(self, process_definition_id: str) -> None:
        """Initialize the error with the unresolved process definition.

        Args:
            process_definition_id: The process definition that was not found.
        """
        self.process_definition_id = process_definition_id
        super().__init__(
            f"No deployment found for process definition: {process_definition_id}"
        )


class ResourceNotFoundError(ConfigLoadError):
    """Raised when a named resource does not exist in a deployment."""

    error_type: ClassVar[str] = "resource_not_found"

    def __init__(self, deployment_id: str, file_name: str) -> None:
        """Initialize the error with the missing resource coordinates.

        Args:
            deployment_id: Deployment that was searched.
            file_name: Resource name that was not found.
        """
        self.deployment_id = deployment_id
        self.file_name = file_name
        super().__init__(
            f"Resource not found: {file_name} (deployment {deployment_id})"
        )


class ConfigParseError(ConfigLoadError):
    """Raised when resource content is not parseable as structured data."""

    error_type: ClassVar[str] = "parse_error"

    def __init__(self, file_name: str, message: str) -> None:
        """Initialize the parse error.

        Args:
            file_name: Resource that failed to parse.
            message: Human-readable parser message.
        """
        self.file_name = file_name
        self.message = message
        super().__init__(f"Failed to parse {file_name}: {message}")


class MissingKeyError(ConfigLoadError):
    """Raised when a requested top-level key is absent."""

    error_type: ClassVar[str] = "missing_key"

    def __init__(self, key: str) -> None:
        """Initialize the error with the missing key.

        Args:
            key: The key that was requested.
        """
        self.key = key
        super().__init__(f"Missing key: {key!r}")


class ConfigValueTypeError(ConfigLoadError):
    """Raised when a value is accessed as a kind it does not have."""

    error_type: ClassVar[str] = "value_type_error"

    def __init__(self, expected: str, actual: str) -> None:
        """Initialize the type error.

        Args:
            expected: Kind the caller needed (e.g. 'object').
            actual: Kind the value actually has.
        """
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} value, got {actual}")
