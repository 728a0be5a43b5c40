"""Typed wrapper around parsed configuration values."""

import copy
import json
import math
from enum import Enum
from typing import Any

from bpm_config.features.config.errors import ConfigValueTypeError, MissingKeyError


class ValueKind(str, Enum):
    """Kind of a JSON-like value."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


def kind_of(raw: Any) -> ValueKind:
    """Classify a raw Python value.

    Args:
        raw: Value produced by a JSON or YAML parser.

    Returns:
        The matching ValueKind.

    Raises:
        TypeError: If the value is not JSON-like.
    """
    # bool is a subclass of int, so it must be checked first
    if isinstance(raw, bool):
        return ValueKind.BOOLEAN
    if raw is None:
        return ValueKind.NULL
    if isinstance(raw, dict):
        return ValueKind.OBJECT
    if isinstance(raw, list):
        return ValueKind.ARRAY
    if isinstance(raw, str):
        return ValueKind.STRING
    if isinstance(raw, (int, float)):
        return ValueKind.NUMBER
    msg = f"Unsupported value type: {type(raw).__name__}"
    raise TypeError(msg)


def _validate(raw: Any, path: str) -> None:
    kind = kind_of(raw)
    if kind == ValueKind.NUMBER and isinstance(raw, float) and not math.isfinite(raw):
        msg = f"Non-finite number at {path}"
        raise ValueError(msg)
    if kind == ValueKind.OBJECT:
        for key, child in raw.items():
            if not isinstance(key, str):
                msg = f"Object key at {path} must be a string, got {type(key).__name__}"
                raise TypeError(msg)
            _validate(child, f"{path}.{key}")
    elif kind == ValueKind.ARRAY:
        for index, child in enumerate(raw):
            _validate(child, f"{path}[{index}]")


class ConfigValue:
    """Immutable view over a JSON-like configuration value.

    Key access is explicit: ``has_key`` answers whether a top-level field
    exists and ``get_key`` either returns it or raises MissingKeyError. There
    is no implicit None for absent keys.
    """

    __slots__ = ("_kind", "_raw")

    def __init__(self, raw: Any) -> None:
        """Wrap a raw value without validating nested content.

        Use ``from_raw`` for values that come from outside the parser.

        Args:
            raw: JSON-like Python value.
        """
        object.__setattr__(self, "_raw", raw)
        object.__setattr__(self, "_kind", kind_of(raw))

    @classmethod
    def from_raw(cls, raw: Any) -> "ConfigValue":
        """Validate and wrap a raw value.

        Args:
            raw: Candidate JSON-like value.

        Returns:
            Wrapped value.

        Raises:
            TypeError: If any nested value or key has an unsupported type.
            ValueError: If a number is NaN or infinite.
            RecursionError: If the value is nested beyond the recursion limit.
        """
        _validate(raw, "$")
        return cls(raw)

    @property
    def kind(self) -> ValueKind:
        """Get the value kind."""
        return self._kind

    @property
    def value(self) -> Any:
        """Get the wrapped raw value.

        The returned object is shared with this wrapper; use ``to_python`` for
        a copy that may be mutated.
        """
        return self._raw

    @property
    def is_object(self) -> bool:
        """Check whether the value is an object."""
        return self._kind == ValueKind.OBJECT

    def has_key(self, key: str) -> bool:
        """Check whether an object value holds a top-level key.

        Args:
            key: Key to look up.

        Returns:
            True only when the value is an object containing ``key``.
        """
        return self.is_object and key in self._raw

    def get_key(self, key: str) -> "ConfigValue":
        """Get the value stored under a top-level key.

        Args:
            key: Key to look up.

        Returns:
            The child value.

        Raises:
            ConfigValueTypeError: If this value is not an object.
            MissingKeyError: If the key is absent.
        """
        if not self.is_object:
            raise ConfigValueTypeError(ValueKind.OBJECT.value, self._kind.value)
        if key not in self._raw:
            raise MissingKeyError(key)
        return ConfigValue(self._raw[key])

    def keys(self) -> tuple[str, ...]:
        """Get the top-level keys of an object value (empty otherwise)."""
        if not self.is_object:
            return ()
        return tuple(self._raw)

    def to_python(self) -> Any:
        """Return a deep copy of the wrapped value."""
        return copy.deepcopy(self._raw)

    def to_json(self) -> str:
        """Serialize to canonical JSON with sorted keys."""
        return json.dumps(self._raw, sort_keys=True, separators=(",", ":"))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigValue):
            return NotImplemented
        return self._kind == other._kind and self._raw == other._raw

    __hash__ = None  # type: ignore[assignment]

    def __setattr__(self, name: str, value: object) -> None:
        msg = f"ConfigValue is immutable; cannot set {name!r}"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"ConfigValue is immutable; cannot delete {name!r}"
        raise AttributeError(msg)

    def __repr__(self) -> str:
        return f"ConfigValue(kind={self._kind.value}, value={self._raw!r})"
