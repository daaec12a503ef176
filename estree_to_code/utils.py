"""
Utility functions for rendering JavaScript literal tokens.
"""

import math
from decimal import Decimal

from .errors import UnsupportedNodeError
from .model.operators import Regex

# Characters with a dedicated single-character escape
_SIMPLE_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
    "\v": "\\v",
}


def _needs_hex_escape(code: int) -> bool:
    """Control characters and the 0x7F-0xFF range are written as \\xHH."""
    return code < 0x20 or 0x7F <= code <= 0xFF


def escape_string(value: str) -> str:
    """Render a string as a single-quoted JavaScript string literal.

    Examples:
        "O'Brien\\n" -> "'O\\'Brien\\n'"
        "\\x8f" -> "'\\x8F'"

    Args:
        value: The string to quote

    Returns:
        The quoted, escaped literal
    """
    parts = ["'"]
    for index, char in enumerate(value):
        code = ord(char)
        if char in _SIMPLE_ESCAPES:
            parts.append(_SIMPLE_ESCAPES[char])
        elif char == "\0":
            # \0 followed by a digit would read as a legacy octal escape
            following = value[index + 1 : index + 2]
            parts.append("\\x00" if following.isdigit() else "\\0")
        elif _needs_hex_escape(code):
            parts.append(f"\\x{code:02X}")
        elif code in (0x2028, 0x2029) or 0xD800 <= code <= 0xDFFF:
            # Line separators end an ES5 string; lone surrogates cannot be encoded
            parts.append(f"\\u{code:04X}")
        else:
            parts.append(char)
    parts.append("'")
    return "".join(parts)


def format_number(value: int | float | Decimal) -> str:
    """Render a number in its invariant, round-trippable textual form."""
    if isinstance(value, bool):
        raise UnsupportedNodeError("Booleans are not numbers")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return repr(value)
    if isinstance(value, Decimal):
        if value.is_nan():
            return "NaN"
        if value.is_infinite():
            return "Infinity" if value > 0 else "-Infinity"
        return str(value)
    raise UnsupportedNodeError(f"The numeric type {type(value).__name__} is not supported.")


def format_regex(regex: Regex) -> str:
    """Render a regex literal, escaping unescaped forward slashes in the pattern."""
    if not regex.pattern:
        # "//" would start a comment
        return f"/(?:)/{regex.flags.to_string()}"

    parts = ["/"]
    escaped = False
    for char in regex.pattern:
        if escaped:
            parts.append(char)
            escaped = False
        elif char == "\\":
            parts.append(char)
            escaped = True
        elif char == "/":
            parts.append("\\/")
        else:
            parts.append(char)
    parts.append("/")
    parts.append(regex.flags.to_string())
    return "".join(parts)
