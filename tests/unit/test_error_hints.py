"""Unit tests for error hints system."""

import pytest

from bpm_config.features.config.error_hints import (
    DEFAULT_HINT,
    ERROR_HINTS,
    format_load_error,
    get_error_hint,
)
from bpm_config.features.config.errors import (
    ConfigLoadError,
    ConfigParseError,
    ConfigValueTypeError,
    DeploymentNotFoundError,
    MissingKeyError,
    ResourceNotFoundError,
)


class TestGetErrorHint:
    """Tests for get_error_hint function."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "error_cls",
        [
            DeploymentNotFoundError,
            ResourceNotFoundError,
            ConfigParseError,
            MissingKeyError,
            ConfigValueTypeError,
        ],
    )
    def test_every_error_type_has_hint(self, error_cls: type[ConfigLoadError]) -> None:
        """Test that each loader error type has a dedicated hint."""
        assert error_cls.error_type in ERROR_HINTS
        assert get_error_hint(error_cls.error_type) == ERROR_HINTS[error_cls.error_type]

    @pytest.mark.unit
    def test_returns_default_for_unknown_error_type(self) -> None:
        """Test that unknown error types return default hint."""
        assert get_error_hint("something_else") == DEFAULT_HINT


class TestFormatLoadError:
    """Tests for format_load_error function."""

    @pytest.mark.unit
    def test_missing_key_with_hint(self) -> None:
        """Test formatting of a missing key error."""
        result = format_load_error(MissingKeyError("myProcess"))
        first_line, hint_line = result.split("\n")
        assert first_line == "key 'myProcess': Missing key: 'myProcess'"
        assert hint_line.startswith("    Hint: ")
        assert "case-sensitive" in hint_line

    @pytest.mark.unit
    def test_resource_error_located_by_file(self) -> None:
        """Test that resource errors are located by file name."""
        result = format_load_error(
            ResourceNotFoundError("dep-1", "config.json"), include_hint=False
        )
        assert result == "config.json: Resource not found: config.json (deployment dep-1)"

    @pytest.mark.unit
    def test_parse_error_located_by_file(self) -> None:
        """Test that parse errors are located by file name."""
        result = format_load_error(ConfigParseError("c.json", "bad"), include_hint=False)
        assert result.startswith("c.json: Failed to parse c.json: bad")

    @pytest.mark.unit
    def test_deployment_error_located_by_definition(self) -> None:
        """Test that deployment errors are located by definition id."""
        result = format_load_error(DeploymentNotFoundError("p:1:1"))
        assert result.startswith("p:1:1: ")
        assert "Hint:" in result
