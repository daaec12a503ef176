"""
Operator lookup tables shared by the ESTree reader and writer.

The write tables are the source of truth; the read tables are derived as their
exact inverses and both directions are verified once at import.
"""

from __future__ import annotations

from ..model.operators import BinaryOperator, PropertyKind, UnaryOperator

BINARY_EXPRESSION = "BinaryExpression"
ASSIGNMENT_EXPRESSION = "AssignmentExpression"
LOGICAL_EXPRESSION = "LogicalExpression"
UNARY_EXPRESSION = "UnaryExpression"
UPDATE_EXPRESSION = "UpdateExpression"


def _binary_type(operator: BinaryOperator) -> str:
    if operator.is_assignment:
        return ASSIGNMENT_EXPRESSION
    if operator.is_logical:
        return LOGICAL_EXPRESSION
    return BINARY_EXPRESSION


# operator -> (ESTree type, operator token)
BINARY_WRITE: dict[BinaryOperator, tuple[str, str]] = {op: (_binary_type(op), op.token) for op in BinaryOperator}

BINARY_READ: dict[tuple[str, str], BinaryOperator] = {key: op for op, key in BINARY_WRITE.items()}

# operator -> (ESTree type, operator token, prefix)
UNARY_WRITE: dict[UnaryOperator, tuple[str, str, bool]] = {
    op: (UPDATE_EXPRESSION if op.is_update else UNARY_EXPRESSION, op.token, op.prefix) for op in UnaryOperator
}

UNARY_READ: dict[tuple[str, str, bool], UnaryOperator] = {key: op for op, key in UNARY_WRITE.items()}

PROPERTY_KIND_READ: dict[str, PropertyKind] = {kind.value: kind for kind in PropertyKind}


def _verify_inverse(name: str, write: dict, read: dict) -> None:
    if len(write) != len(read):
        raise RuntimeError(f"{name} operator table is not one-to-one")
    for op, key in write.items():
        if read.get(key) is not op:
            raise RuntimeError(f"{name} operator table does not invert {op!r}")


_verify_inverse("binary", BINARY_WRITE, BINARY_READ)
_verify_inverse("unary", UNARY_WRITE, UNARY_READ)
