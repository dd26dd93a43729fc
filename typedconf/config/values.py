"""Typed configuration values and the per-type value parser."""

import math
import re
from enum import Enum
from typing import Final

from pydantic import BaseModel, ConfigDict

from typedconf.config.errors import InvalidTypeNameError, InvalidValueFormatError


class ValueKind(str, Enum):
    """Kinds a stored configuration value can have."""

    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    CHAR = "char"
    STRING = "string"


# Type tags accepted in files and -D definitions, mapped to the stored kind.
TYPE_TAGS: Final[dict[str, ValueKind]] = {
    "int": ValueKind.INT,
    "hex": ValueKind.INT,
    "octal": ValueKind.INT,
    "float": ValueKind.FLOAT,
    "bool": ValueKind.BOOL,
    "boolean": ValueKind.BOOL,
    "char": ValueKind.CHAR,
    "string": ValueKind.STRING,
}

INT_PATTERN = re.compile(r"[+-]?[0-9]+")
HEX_PATTERN = re.compile(r"[+-]?(?:0[xX])?[0-9A-Fa-f]+")
OCTAL_PATTERN = re.compile(r"[+-]?[0-7]+")
FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
QUOTED_CHAR_PATTERN = re.compile(r"'(\\[nrt]|[^\n\r\t])'")
QUOTED_STRING_PATTERN = re.compile(r'"([^"]*)"')
UNTERMINATED_STRING_PATTERN = re.compile(r'"([^"]+)')
BARE_STRING_PATTERN = re.compile(r'[^"]+')

TRUE_LITERALS: Final = ("true", "1")
FALSE_LITERALS: Final = ("false", "0")
CHAR_ESCAPES: Final[dict[str, str]] = {"\\n": "\n", "\\r": "\r", "\\t": "\t"}

_INT_RADIX: Final[dict[str, tuple[re.Pattern[str], int]]] = {
    "int": (INT_PATTERN, 10),
    "hex": (HEX_PATTERN, 16),
    "octal": (OCTAL_PATTERN, 8),
}


class ConfigValue(BaseModel):
    """A parsed configuration value.

    Attributes:
        kind: Stored kind (one of the five real kinds).
        value: Payload; a char is a one-character string.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: ValueKind
    value: bool | int | float | str


def canonical_kind(type_name: str) -> ValueKind | None:
    """Map a type tag to its stored kind.

    ``hex`` and ``octal`` collapse to ``int`` and ``boolean`` to ``bool``.

    Args:
        type_name: Type tag as written.

    Returns:
        The stored kind, or None if the tag is not recognized.
    """
    return TYPE_TAGS.get(type_name)


def parse_value(type_name: str, text: str) -> ConfigValue:
    """Parse raw value text according to its type tag.

    Args:
        type_name: Type tag (int, hex, octal, float, bool, boolean, char, string).
        text: Raw value text with leading spaces already trimmed.

    Returns:
        The parsed value with its canonical kind.

    Raises:
        InvalidTypeNameError: If the type tag is not recognized.
        InvalidValueFormatError: If the text is not valid for the type.
    """
    kind = canonical_kind(type_name)
    if kind is None:
        raise InvalidTypeNameError(type_name=type_name, text=text)

    parsed = _parse_payload(type_name, kind, text)
    if parsed is None:
        raise InvalidValueFormatError(
            type_name=type_name, text=text, canonical_kind=kind.value
        )
    return ConfigValue(kind=kind, value=parsed)


def _parse_payload(  # noqa: PLR0911
    type_name: str, kind: ValueKind, text: str
) -> bool | int | float | str | None:
    """Return the payload for text, or None if it is malformed."""
    if kind is ValueKind.INT:
        pattern, radix = _INT_RADIX[type_name]
        if not pattern.fullmatch(text):
            return None
        return int(text, radix)

    if kind is ValueKind.FLOAT:
        if not FLOAT_PATTERN.fullmatch(text):
            return None
        number = float(text)
        return number if math.isfinite(number) else None

    if kind is ValueKind.BOOL:
        if text in TRUE_LITERALS:
            return True
        if text in FALSE_LITERALS:
            return False
        return None

    if kind is ValueKind.CHAR:
        return _parse_char(text)

    return _parse_string(text)


def _parse_char(text: str) -> str | None:
    match = QUOTED_CHAR_PATTERN.fullmatch(text)
    if match:
        body = match.group(1)
        return CHAR_ESCAPES.get(body, body)
    if len(text) == 1:
        return text
    return None


def _parse_string(text: str) -> str | None:
    # Anything after the closing quote is ignored.
    for pattern in (QUOTED_STRING_PATTERN, UNTERMINATED_STRING_PATTERN):
        match = pattern.match(text)
        if match:
            return match.group(1)
    match = BARE_STRING_PATTERN.match(text)
    if match:
        return match.group(0)
    return None
