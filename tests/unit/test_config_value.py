"""Unit tests for ConfigValue."""

import pytest

from bpm_config.features.config.errors import ConfigValueTypeError, MissingKeyError
from bpm_config.features.config.value import ConfigValue, ValueKind, kind_of


class TestKindOf:
    """Tests for kind_of classification."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ({"a": 1}, ValueKind.OBJECT),
            ([1, 2], ValueKind.ARRAY),
            ("text", ValueKind.STRING),
            (3, ValueKind.NUMBER),
            (2.5, ValueKind.NUMBER),
            (True, ValueKind.BOOLEAN),
            (False, ValueKind.BOOLEAN),
            (None, ValueKind.NULL),
        ],
    )
    def test_classifies_json_values(self, raw: object, expected: ValueKind) -> None:
        """Test that every JSON-like type maps to its kind."""
        assert kind_of(raw) == expected

    @pytest.mark.unit
    def test_rejects_unsupported_type(self) -> None:
        """Test that non JSON-like values are rejected."""
        with pytest.raises(TypeError, match="set"):
            kind_of({1, 2})


class TestFromRaw:
    """Tests for ConfigValue.from_raw validation."""

    @pytest.mark.unit
    def test_accepts_nested_structure(self) -> None:
        """Test that nested JSON-like data is accepted."""
        value = ConfigValue.from_raw({"a": [1, {"b": None}], "c": "x"})
        assert value.kind == ValueKind.OBJECT

    @pytest.mark.unit
    def test_rejects_non_string_keys(self) -> None:
        """Test that object keys must be strings."""
        with pytest.raises(TypeError, match="must be a string"):
            ConfigValue.from_raw({"a": {1: "one"}})

    @pytest.mark.unit
    def test_rejects_non_finite_numbers(self) -> None:
        """Test that NaN and infinity are rejected."""
        with pytest.raises(ValueError, match="Non-finite"):
            ConfigValue.from_raw({"a": [float("inf")]})


class TestKeyAccess:
    """Tests for explicit key access."""

    @pytest.mark.unit
    def test_has_key(self) -> None:
        """Test has_key on objects."""
        value = ConfigValue({"myProcess": {"a": 1}, "other": 2})
        assert value.has_key("myProcess")
        assert not value.has_key("missing")

    @pytest.mark.unit
    def test_has_key_on_non_object_is_false(self) -> None:
        """Test that arrays and scalars hold no keys."""
        assert not ConfigValue([1, 2]).has_key("0")
        assert not ConfigValue("myProcess").has_key("myProcess")

    @pytest.mark.unit
    def test_get_key_returns_child(self) -> None:
        """Test that get_key returns only the selected value."""
        value = ConfigValue({"myProcess": {"a": 1}, "other": 2})
        child = value.get_key("myProcess")
        assert child == ConfigValue({"a": 1})
        assert child.keys() == ("a",)

    @pytest.mark.unit
    def test_get_key_null_value_is_present(self) -> None:
        """Test that a key holding null is present, not missing."""
        child = ConfigValue({"a": None}).get_key("a")
        assert child.kind == ValueKind.NULL

    @pytest.mark.unit
    def test_get_key_missing_raises(self) -> None:
        """Test that absent keys raise MissingKeyError naming the key."""
        with pytest.raises(MissingKeyError) as exc_info:
            ConfigValue({"a": 1}).get_key("b")
        assert exc_info.value.key == "b"
        assert "'b'" in str(exc_info.value)

    @pytest.mark.unit
    def test_get_key_on_array_raises_type_error(self) -> None:
        """Test that indexing a non-object raises ConfigValueTypeError."""
        with pytest.raises(ConfigValueTypeError) as exc_info:
            ConfigValue([1]).get_key("a")
        assert exc_info.value.expected == "object"
        assert exc_info.value.actual == "array"


class TestConversion:
    """Tests for conversion and equality."""

    @pytest.mark.unit
    def test_to_python_is_a_copy(self) -> None:
        """Test that mutating to_python output leaves the value intact."""
        value = ConfigValue({"a": [1]})
        copied = value.to_python()
        copied["a"].append(2)
        assert value.value == {"a": [1]}

    @pytest.mark.unit
    def test_to_json_is_canonical(self) -> None:
        """Test sorted, compact JSON output."""
        assert ConfigValue({"b": 1, "a": [True]}).to_json() == '{"a":[true],"b":1}'

    @pytest.mark.unit
    def test_equality_respects_kind(self) -> None:
        """Test that true and 1 are different values."""
        assert ConfigValue(1) != ConfigValue(True)
        assert ConfigValue({"a": 1}) == ConfigValue({"a": 1})

    @pytest.mark.unit
    def test_is_unhashable(self) -> None:
        """Test that values cannot be used as dict keys."""
        with pytest.raises(TypeError):
            hash(ConfigValue(1))

    @pytest.mark.unit
    def test_attributes_cannot_be_reassigned(self) -> None:
        """Test that the wrapped value and kind are read-only."""
        value = ConfigValue({"a": 1})
        with pytest.raises(AttributeError, match="immutable"):
            value._raw = {"b": 2}  # type: ignore[misc]
        with pytest.raises(AttributeError, match="immutable"):
            del value._kind
        assert value.value == {"a": 1}
        assert value.kind == ValueKind.OBJECT
