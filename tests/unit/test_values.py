"""Unit tests for the value parser."""

import pytest
from pydantic import ValidationError

from typedconf.config.errors import (
    ConfigErrorKind,
    InvalidTypeNameError,
    InvalidValueFormatError,
)
from typedconf.config.values import ConfigValue, ValueKind, canonical_kind, parse_value


class TestCanonicalKind:
    """Tests for type tag canonicalization."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("type_name", "expected"),
        [
            ("int", ValueKind.INT),
            ("hex", ValueKind.INT),
            ("octal", ValueKind.INT),
            ("float", ValueKind.FLOAT),
            ("bool", ValueKind.BOOL),
            ("boolean", ValueKind.BOOL),
            ("char", ValueKind.CHAR),
            ("string", ValueKind.STRING),
        ],
    )
    def test_known_tags(self, type_name: str, expected: ValueKind) -> None:
        """Aliases collapse to their stored kind."""
        assert canonical_kind(type_name) is expected

    @pytest.mark.unit
    def test_unknown_tag(self) -> None:
        """Unknown tags have no kind."""
        assert canonical_kind("integer") is None
        assert canonical_kind("Int") is None


class TestParseNumbers:
    """Tests for int, hex, octal, and float parsing."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("type_name", "text", "expected"),
        [
            ("int", "42", 42),
            ("int", "0", 0),
            ("int", "-7", -7),
            ("hex", "0x1F", 31),
            ("hex", "1f", 31),
            ("hex", "0X3AF4", 0x3AF4),
            ("octal", "017", 15),
            ("octal", "123", 83),
        ],
    )
    def test_valid_integers(self, type_name: str, text: str, expected: int) -> None:
        """Integer tags parse in their radix and are stored as int."""
        value = parse_value(type_name, text)
        assert value.kind is ValueKind.INT
        assert value.value == expected

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("type_name", "text"),
        [
            ("int", ""),
            ("int", "42abc"),
            ("int", "4.2"),
            ("int", "0x10"),
            ("hex", "0xZZ"),
            ("hex", "0x"),
            ("octal", "018"),
            ("octal", "9"),
        ],
    )
    def test_invalid_integers(self, type_name: str, text: str) -> None:
        """Partial or garbage numeric text is rejected."""
        with pytest.raises(InvalidValueFormatError) as exc_info:
            parse_value(type_name, text)
        assert exc_info.value.kind is ConfigErrorKind.INVALID_VALUE_FORMAT
        assert exc_info.value.canonical_kind == "int"
        assert exc_info.value.type_name == type_name

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("text", "expected"),
        [("3.14", 3.14), ("3", 3.0), ("0.5", 0.5), ("10.0", 10.0)],
    )
    def test_valid_floats(self, text: str, expected: float) -> None:
        """Floats are stored as float even without a fraction."""
        value = parse_value("float", text)
        assert value.kind is ValueKind.FLOAT
        assert isinstance(value.value, float)
        assert value.value == pytest.approx(expected)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "text", ["", "3.14.15", "pi", "1,5", "nan", "inf", "1e999", "-1e999"]
    )
    def test_invalid_floats(self, text: str) -> None:
        """Malformed and out-of-range floats are rejected."""
        with pytest.raises(InvalidValueFormatError):
            parse_value("float", text)


class TestParseBool:
    """Tests for bool parsing."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("type_name", "text", "expected"),
        [
            ("bool", "true", True),
            ("bool", "1", True),
            ("bool", "false", False),
            ("bool", "0", False),
            ("boolean", "true", True),
            ("boolean", "0", False),
        ],
    )
    def test_valid_bools(self, type_name: str, text: str, expected: bool) -> None:
        """Both tags store a bool."""
        value = parse_value(type_name, text)
        assert value.kind is ValueKind.BOOL
        assert value.value is expected

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["yes", "True", "2", ""])
    def test_invalid_bools(self, text: str) -> None:
        """Only the four literals are accepted."""
        with pytest.raises(InvalidValueFormatError) as exc_info:
            parse_value("boolean", text)
        assert exc_info.value.canonical_kind == "bool"


class TestParseChar:
    """Tests for char parsing."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("'a'", "a"),
            ("'4'", "4"),
            ("'\\n'", "\n"),
            ("'\\r'", "\r"),
            ("'\\t'", "\t"),
            ("x", "x"),
            ("'", "'"),
        ],
    )
    def test_valid_chars(self, text: str, expected: str) -> None:
        """Quoted, escaped, and bare single characters are accepted."""
        value = parse_value("char", text)
        assert value.kind is ValueKind.CHAR
        assert value.value == expected

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["", "ab", "'ab'", "''"])
    def test_invalid_chars(self, text: str) -> None:
        """Anything but one character is rejected."""
        with pytest.raises(InvalidValueFormatError):
            parse_value("char", text)


class TestParseString:
    """Tests for string parsing."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ('"Hello, World!  "', "Hello, World!  "),
            ('""', ""),
            ('"$OTHER"', "$OTHER"),
            ("bare", "bare"),
            ('bare"tail', "bare"),
            ('"first"second', "first"),
            ('"unterminated', "unterminated"),
        ],
    )
    def test_valid_strings(self, text: str, expected: str) -> None:
        """Quoted form is tried first, then raw text up to a quote."""
        value = parse_value("string", text)
        assert value.kind is ValueKind.STRING
        assert value.value == expected

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["", '"'])
    def test_invalid_strings(self, text: str) -> None:
        """Empty bare text and a lone quote are rejected."""
        with pytest.raises(InvalidValueFormatError):
            parse_value("string", text)


class TestInvalidTypeName:
    """Tests for unknown type tags."""

    @pytest.mark.unit
    def test_unknown_tag_raises(self) -> None:
        """Unknown tags raise InvalidTypeNameError before looking at the text."""
        with pytest.raises(InvalidTypeNameError) as exc_info:
            parse_value("integer", "42")

        error = exc_info.value
        assert error.kind is ConfigErrorKind.INVALID_TYPE_NAME
        assert error.type_name == "integer"
        assert error.canonical_kind is None
        assert "Invalid type name integer" in str(error)


class TestConfigValue:
    """Tests for the ConfigValue model."""

    @pytest.mark.unit
    def test_value_is_frozen(self) -> None:
        """Stored values cannot be modified."""
        value = parse_value("int", "1")
        with pytest.raises(ValidationError):
            value.value = 2  # type: ignore[misc]

    @pytest.mark.unit
    def test_payload_types_preserved(self) -> None:
        """Union payloads keep their Python type."""
        assert type(ConfigValue(kind=ValueKind.BOOL, value=True).value) is bool
        assert type(ConfigValue(kind=ValueKind.INT, value=1).value) is int
        assert type(ConfigValue(kind=ValueKind.FLOAT, value=1.5).value) is float
        assert type(ConfigValue(kind=ValueKind.STRING, value="1").value) is str
