"""Shared parsing helpers for typed property values and schema tokens.

Converters take stripped text and raise `ValueError` for text that does not
represent the target type; callers map that to `InvalidConfigValue`.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})
_INTEGER_BITS = {
    "byte": 8,
    "short": 16,
    "int": 32,
    "long": 64,
}


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def parse_integer(value: str) -> int:
    """Parse an optionally signed decimal integer without whitespace or digit separators."""

    if not value or value != value.strip() or "_" in value:
        raise ValueError(f"`{value}` is not a decimal integer.")
    return int(value, 10)


def parse_bounded_integer(value: str, type_name: str) -> int:
    """Parse a decimal integer constrained to the signed width of `type_name`.

    Args:
        value: Text to parse; surrounding whitespace is not allowed.
        type_name: One of `byte`, `short`, `int`, `long`.

    Raises:
        ValueError: If the text is not a decimal integer or is out of range.
    """

    bits = _INTEGER_BITS[type_name]
    parsed = parse_integer(value)
    lower = -(1 << (bits - 1))
    upper = (1 << (bits - 1)) - 1
    if not lower <= parsed <= upper:
        raise ValueError(f"`{value}` is out of range for {type_name} ({lower}..{upper}).")
    return parsed


def parse_float(value: str) -> float:
    """Parse a floating point token."""

    if not value or value != value.strip():
        raise ValueError(f"`{value}` is not a floating point number.")
    return float(value)


def parse_char(value: str) -> str:
    """Return the value when it holds exactly one character."""

    if len(value) != 1:
        raise ValueError(f"`{value}` is not a single character.")
    return value


def parse_lenient_boolean(value: str) -> bool:
    """Parse a boolean where only `true` (any case) is truthy.

    Raises:
        ValueError: If the value is empty.
    """

    if not value:
        raise ValueError("An empty value is not a boolean.")
    return value.strip().lower() == "true"


ELEMENT_CONVERTERS: dict[Any, Callable[[str], Any]] = {
    str: str,
    int: parse_integer,
    float: parse_float,
    bool: parse_lenient_boolean,
}


def element_converter(element_type: Any) -> Callable[[str], Any]:
    """Return the converter for a list element type.

    Built-in `str`, `int`, `float` and `bool` use the property conversion
    rules; any other callable is used as is.
    """

    converter = ELEMENT_CONVERTERS.get(element_type)
    if converter is not None:
        return converter
    if callable(element_type):
        return element_type
    raise TypeError(f"Unsupported list element type: {element_type!r}.")


def split_delimited(value: str, delimiter: str = ",") -> list[str]:
    """Split on a literal delimiter and drop fields that are blank after trimming."""

    if not delimiter:
        raise ValueError("`delimiter` must be a non-empty string.")
    fields = re.split(re.escape(delimiter), value)
    return [field.strip() for field in fields if field.strip()]
