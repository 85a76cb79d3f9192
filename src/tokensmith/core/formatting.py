"""
CSS value formatting for raw token values.

Formatting never fails: malformed input produces malformed but deterministic
output (``format_css_value("abc", "number")`` is ``"abcpx"``).
"""

from __future__ import annotations

from typing import Any

from .ir.tokens import TokenType

DEFAULT_UNIT = "px"

# Types whose values are lengths and get the unit appended
_LENGTH_TYPES = frozenset({TokenType.NUMBER, TokenType.DIMENSION})


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def value_to_text(value: Any) -> str:
    """Render a raw JSON value as CSS text.

    Integral floats drop their fractional part (``8.0`` -> ``"8"``) and
    booleans are lowercased, matching how the values read in the JSON source.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_css_value(value: Any, type_: str | None = None, unit: str = DEFAULT_UNIT) -> str:
    """Format one raw token value for a CSS declaration.

    Args:
        value: Raw value of the default mode (string or number).
        type_: Declared token type; case-insensitive.
        unit: Length unit appended to numbers and dimensions.

    Returns:
        CSS value text.
    """
    text = value_to_text(value)

    if not type_:
        return f"{text}{unit}" if _is_number(value) else text

    kind = type_.lower()
    if kind in _LENGTH_TYPES:
        return f"{text}{unit}"
    if kind == TokenType.COLOR:
        return text if text.startswith("#") else f"#{text}"
    return text
