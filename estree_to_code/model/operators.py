"""
Operator, property-kind and regex-flag enums of the node model.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag


class BinaryOperator(str, Enum):
    """Binary, assignment and logical operators.

    The value is the operator token as written in source and in ESTree JSON.
    """

    IDENTITY_EQUALITY = "==="
    IDENTITY_INEQUALITY = "!=="
    COERCED_EQUALITY = "=="
    COERCED_INEQUALITY = "!="
    LESS_THAN = "<"
    LESS_THAN_OR_EQUAL = "<="
    GREATER_THAN = ">"
    GREATER_THAN_OR_EQUAL = ">="
    LEFT_SHIFT = "<<"
    SIGNED_RIGHT_SHIFT = ">>"
    UNSIGNED_RIGHT_SHIFT = ">>>"
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    MODULUS = "%"
    BITWISE_OR = "|"
    BITWISE_XOR = "^"
    BITWISE_AND = "&"
    IN = "in"
    INSTANCE_OF = "instanceof"

    ASSIGN = "="
    ADD_ASSIGN = "+="
    SUBTRACT_ASSIGN = "-="
    MULTIPLY_ASSIGN = "*="
    DIVIDE_ASSIGN = "/="
    MODULUS_ASSIGN = "%="
    LEFT_SHIFT_ASSIGN = "<<="
    SIGNED_RIGHT_SHIFT_ASSIGN = ">>="
    UNSIGNED_RIGHT_SHIFT_ASSIGN = ">>>="
    BITWISE_OR_ASSIGN = "|="
    BITWISE_XOR_ASSIGN = "^="
    BITWISE_AND_ASSIGN = "&="

    LOGICAL_AND = "&&"
    LOGICAL_OR = "||"

    @property
    def token(self) -> str:
        return self.value

    @property
    def is_assignment(self) -> bool:
        return self in _ASSIGNMENT_OPERATORS

    @property
    def is_logical(self) -> bool:
        return self in (BinaryOperator.LOGICAL_AND, BinaryOperator.LOGICAL_OR)

    @property
    def is_keyword(self) -> bool:
        """Keyword operators need surrounding spaces even when minified."""
        return self in (BinaryOperator.IN, BinaryOperator.INSTANCE_OF)


_ASSIGNMENT_OPERATORS = frozenset(
    {
        BinaryOperator.ASSIGN,
        BinaryOperator.ADD_ASSIGN,
        BinaryOperator.SUBTRACT_ASSIGN,
        BinaryOperator.MULTIPLY_ASSIGN,
        BinaryOperator.DIVIDE_ASSIGN,
        BinaryOperator.MODULUS_ASSIGN,
        BinaryOperator.LEFT_SHIFT_ASSIGN,
        BinaryOperator.SIGNED_RIGHT_SHIFT_ASSIGN,
        BinaryOperator.UNSIGNED_RIGHT_SHIFT_ASSIGN,
        BinaryOperator.BITWISE_OR_ASSIGN,
        BinaryOperator.BITWISE_XOR_ASSIGN,
        BinaryOperator.BITWISE_AND_ASSIGN,
    }
)


class UnaryOperator(str, Enum):
    """Unary operators, including prefix and postfix increment/decrement."""

    NEGATIVE = "negative"
    POSITIVE = "positive"
    LOGICAL_NOT = "logical_not"
    BITWISE_NOT = "bitwise_not"
    TYPE_OF = "typeof"
    VOID = "void"
    DELETE = "delete"
    PRE_INCREMENT = "pre_increment"
    PRE_DECREMENT = "pre_decrement"
    POST_INCREMENT = "post_increment"
    POST_DECREMENT = "post_decrement"

    @property
    def token(self) -> str:
        return _UNARY_TOKENS[self]

    @property
    def prefix(self) -> bool:
        return self not in (UnaryOperator.POST_INCREMENT, UnaryOperator.POST_DECREMENT)

    @property
    def is_update(self) -> bool:
        return self.token in ("++", "--")

    @property
    def is_keyword(self) -> bool:
        return self.token.isalpha()


_UNARY_TOKENS = {
    UnaryOperator.NEGATIVE: "-",
    UnaryOperator.POSITIVE: "+",
    UnaryOperator.LOGICAL_NOT: "!",
    UnaryOperator.BITWISE_NOT: "~",
    UnaryOperator.TYPE_OF: "typeof",
    UnaryOperator.VOID: "void",
    UnaryOperator.DELETE: "delete",
    UnaryOperator.PRE_INCREMENT: "++",
    UnaryOperator.PRE_DECREMENT: "--",
    UnaryOperator.POST_INCREMENT: "++",
    UnaryOperator.POST_DECREMENT: "--",
}


class PropertyKind(str, Enum):
    """Kind of an object literal property."""

    INIT = "init"
    GET = "get"
    SET = "set"


class VariableKind(str, Enum):
    """Declaration keyword of a variable declaration. Only ``var`` exists in ES5."""

    VAR = "var"


class RegexFlags(Flag):
    """Regular expression flags."""

    NONE = 0
    GLOBAL = 1
    IGNORE_CASE = 2
    MULTILINE = 4
    UNICODE = 8
    STICKY = 16

    def to_string(self) -> str:
        """Flag characters in canonical g, i, m, u, y order."""
        return "".join(char for char, flag in REGEX_FLAG_CHARS if flag in self)


# Canonical emission order
REGEX_FLAG_CHARS: tuple[tuple[str, RegexFlags], ...] = (
    ("g", RegexFlags.GLOBAL),
    ("i", RegexFlags.IGNORE_CASE),
    ("m", RegexFlags.MULTILINE),
    ("u", RegexFlags.UNICODE),
    ("y", RegexFlags.STICKY),
)


@dataclass(frozen=True)
class Regex:
    """Regular expression literal payload."""

    pattern: str = ""
    flags: RegexFlags = RegexFlags.NONE
