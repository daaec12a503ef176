"""
Exception hierarchy for the ESTree model, codec and printer.

Every failure is fatal to the single read, write or print call that raised it;
nothing is retried and no partial result is returned.
"""

from __future__ import annotations


class EstreeError(Exception):
    """Base class for all errors raised by estree_to_code."""

    pass


class ShapeViolationError(EstreeError, ValueError):
    """Raised when JSON input does not have the shape of an ESTree node.

    This can happen when:
    - A node is not a JSON object or has no string ``type``
    - A required field is missing
    - A field holds the wrong JSON kind (object, array, string, boolean, null)
    - A list holds a ``null`` where holes are not allowed
    - A field holds a node of the wrong category (statement instead of expression)
    """

    def __init__(self, message: str, node_type: str | None = None, field_name: str | None = None):
        super().__init__(message)
        self.node_type = node_type
        self.field_name = field_name


class UnknownDiscriminatorError(EstreeError, ValueError):
    """Raised for an unrecognized ``type``, operator, property kind or regex flag."""

    def __init__(self, message: str, value: str | None = None):
        super().__init__(message)
        self.value = value


class ContractViolationError(EstreeError, ValueError):
    """Raised when a tree handed to the writer or printer breaks a model contract.

    Examples:
    - A required node-valued field is None
    - A try statement has neither a handler nor a finalizer
    - A getter or setter property whose value is not a function expression
    """

    pass


class UnsupportedNodeError(EstreeError, NotImplementedError):
    """Raised for a node kind or literal value that has no reader, writer or printer case."""

    pass


class OutputError(EstreeError):
    """Raised when generated source cannot be validated or written."""

    pass
