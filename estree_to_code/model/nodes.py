"""
ECMAScript AST node definitions.

These nodes represent an ES5 program as a strict ownership tree: every node is
owned by exactly one parent field or list slot. Nodes mirror the ESTree
interchange format with two compressions:

- BinaryExpression stores a run of same-operator applications as ``left`` plus an
  ordered ``right`` list (``a + b + c`` is one node).
- MemberExpression stores a run of accesses as ``object`` plus an ordered
  ``indices`` list sharing a single ``computed`` flag.

A statement slot holding None is the empty statement.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import ClassVar, Protocol, Self, runtime_checkable

from ..errors import ContractViolationError
from .discriminated import Discriminated
from .operators import BinaryOperator, PropertyKind, Regex, UnaryOperator, VariableKind


class NodeKind(str, Enum):
    """Closed set of node kinds. Values are the ESTree ``type`` strings."""

    PROGRAM = "Program"

    IDENTIFIER = "Identifier"
    LITERAL = "Literal"
    THIS_EXPRESSION = "ThisExpression"
    ARRAY_EXPRESSION = "ArrayExpression"
    OBJECT_EXPRESSION = "ObjectExpression"
    FUNCTION_EXPRESSION = "FunctionExpression"
    UNARY_EXPRESSION = "UnaryExpression"
    BINARY_EXPRESSION = "BinaryExpression"
    MEMBER_EXPRESSION = "MemberExpression"
    CONDITIONAL_EXPRESSION = "ConditionalExpression"
    CALL_EXPRESSION = "CallExpression"
    NEW_EXPRESSION = "NewExpression"
    SEQUENCE_EXPRESSION = "SequenceExpression"

    BLOCK_STATEMENT = "BlockStatement"
    EXPRESSION_STATEMENT = "ExpressionStatement"
    DEBUGGER_STATEMENT = "DebuggerStatement"
    WITH_STATEMENT = "WithStatement"
    RETURN_STATEMENT = "ReturnStatement"
    LABELED_STATEMENT = "LabeledStatement"
    BREAK_STATEMENT = "BreakStatement"
    CONTINUE_STATEMENT = "ContinueStatement"
    IF_STATEMENT = "IfStatement"
    SWITCH_STATEMENT = "SwitchStatement"
    SWITCH_CASE = "SwitchCase"
    THROW_STATEMENT = "ThrowStatement"
    TRY_STATEMENT = "TryStatement"
    CATCH_CLAUSE = "CatchClause"
    WHILE_STATEMENT = "WhileStatement"
    DO_WHILE_STATEMENT = "DoWhileStatement"
    FOR_STATEMENT = "ForStatement"
    FOR_IN_STATEMENT = "ForInStatement"
    FUNCTION_DECLARATION = "FunctionDeclaration"
    VARIABLE_DECLARATION = "VariableDeclaration"
    VARIABLE_DECLARATOR = "VariableDeclarator"

    PROPERTY = "Property"


# Values a Literal may carry
LiteralValue = None | str | bool | int | float | Decimal | Regex


def _flatten(items: Iterable) -> Iterable:
    """Expand nested iterables of nodes so ``add`` accepts singles, lists and varargs."""
    for item in items:
        if isinstance(item, Iterable) and not isinstance(item, (str, Node)):
            yield from _flatten(item)
        else:
            yield item


@dataclass
class Node:
    """Base class for all ESTree nodes."""

    kind: ClassVar[NodeKind]


@dataclass
class Expression(Node):
    """Base class for expression nodes."""

    pass


@dataclass
class Statement(Node):
    """Base class for statement nodes."""

    pass


# ---------------------------------------------------------------------------
# Capabilities
# ---------------------------------------------------------------------------


@runtime_checkable
class HasBody(Protocol):
    """An ordered, mutable statement list with chained ``add``."""

    body: list[Statement | None]

    def add(self, *statements) -> Self: ...


@runtime_checkable
class HasParameters(HasBody, Protocol):
    """A function: a body plus ordered parameters and an optional name."""

    id: Identifier | None
    params: list[Identifier]

    def add_params(self, *params) -> Self: ...


@dataclass
class BodyMixin:
    """Implements HasBody."""

    body: list[Statement | None] = field(default_factory=list)

    def add(self, *statements) -> Self:
        """Append statements (singles, lists or varargs) and return self."""
        for statement in _flatten(statements):
            self.body.append(statement)
        return self


@dataclass
class FunctionMixin(BodyMixin):
    """Implements HasParameters.

    ``add`` routes identifiers to the parameter list and everything else to the body.
    """

    id: Identifier | None = None
    params: list[Identifier] = field(default_factory=list)

    def add(self, *items) -> Self:
        for item in _flatten(items):
            if isinstance(item, Identifier):
                self.params.append(item)
            else:
                self.body.append(item)
        return self

    def add_params(self, *params) -> Self:
        for param in _flatten(params):
            self.params.append(Identifier(param) if isinstance(param, str) else param)
        return self


def _as_statement(statements: Iterable) -> Statement:
    """A single statement as-is; several (or none) wrapped in a block."""
    items = list(_flatten(statements))
    if len(items) == 1:
        return items[0]
    return BlockStatement(items)


def is_pattern(node: object) -> bool:
    """Only identifiers are binding targets."""
    return isinstance(node, Identifier)


def is_property_key(node: object) -> bool:
    return isinstance(node, (Literal, Identifier))


def is_for_initializer(node: object) -> bool:
    return isinstance(node, (Expression, VariableDeclaration))


# ---------------------------------------------------------------------------
# Program
# ---------------------------------------------------------------------------


@dataclass
class Program(BodyMixin, Node):
    kind: ClassVar[NodeKind] = NodeKind.PROGRAM


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------


@dataclass
class Identifier(Expression):
    kind: ClassVar[NodeKind] = NodeKind.IDENTIFIER

    name: str = ""


@dataclass
class Literal(Expression):
    """A null, string, boolean, numeric or regex literal."""

    kind: ClassVar[NodeKind] = NodeKind.LITERAL

    value: LiteralValue = None


@dataclass
class ThisExpression(Expression):
    kind: ClassVar[NodeKind] = NodeKind.THIS_EXPRESSION


@dataclass
class ArrayExpression(Expression):
    """Array literal. None elements are holes."""

    kind: ClassVar[NodeKind] = NodeKind.ARRAY_EXPRESSION

    elements: list[Expression | None] = field(default_factory=list)

    def add(self, *elements) -> Self:
        for element in _flatten(elements):
            self.elements.append(element)
        return self


@dataclass
class Property(Node):
    """Object literal property. The key is a literal (first) or identifier (second)."""

    kind: ClassVar[NodeKind] = NodeKind.PROPERTY

    key: Discriminated[Literal, Identifier] = field(default_factory=Discriminated.empty)
    value: Expression | None = None
    property_kind: PropertyKind = PropertyKind.INIT

    def __post_init__(self):
        self.key = Discriminated.of(self.key, Literal, Identifier)


@dataclass
class ObjectExpression(Expression):
    kind: ClassVar[NodeKind] = NodeKind.OBJECT_EXPRESSION

    properties: list[Property] = field(default_factory=list)

    def add(self, *properties) -> Self:
        for prop in _flatten(properties):
            self.properties.append(prop)
        return self


@dataclass
class FunctionExpression(FunctionMixin, Expression):
    kind: ClassVar[NodeKind] = NodeKind.FUNCTION_EXPRESSION


@dataclass
class UnaryExpression(Expression):
    """Unary and update (``++``/``--``) expressions."""

    kind: ClassVar[NodeKind] = NodeKind.UNARY_EXPRESSION

    operator: UnaryOperator = UnaryOperator.LOGICAL_NOT
    argument: Expression | None = None


@dataclass
class BinaryExpression(Expression):
    """Binary, assignment and logical expressions as a same-operator chain.

    ``left`` followed by each element of ``right``, all joined by ``operator``.
    """

    kind: ClassVar[NodeKind] = NodeKind.BINARY_EXPRESSION

    left: Expression | None = None
    operator: BinaryOperator = BinaryOperator.ADD
    right: list[Expression] = field(default_factory=list)

    def add(self, *operands) -> Self:
        """Append trailing operands, merging same-operator chains into this one."""
        for operand in _flatten(operands):
            if isinstance(operand, BinaryExpression) and operand.operator == self.operator:
                self.right.append(operand.left)
                self.right.extend(operand.right)
            else:
                self.right.append(operand)
        return self


@dataclass
class MemberExpression(Expression):
    """Property access chain ``object.a.b`` or ``object[a][b]``.

    The single ``computed`` flag applies to every access in the chain, so mixed
    dot and bracket access needs nested MemberExpressions.
    """

    kind: ClassVar[NodeKind] = NodeKind.MEMBER_EXPRESSION

    object: Expression | None = None
    indices: list[Expression] = field(default_factory=list)
    computed: bool = False

    def add(self, *indices) -> Self:
        for index in _flatten(indices):
            self.indices.append(index)
        return self


@dataclass
class ConditionalExpression(Expression):
    kind: ClassVar[NodeKind] = NodeKind.CONDITIONAL_EXPRESSION

    test: Expression | None = None
    consequent: Expression | None = None
    alternate: Expression | None = None


@dataclass
class CallExpression(Expression):
    kind: ClassVar[NodeKind] = NodeKind.CALL_EXPRESSION

    callee: Expression | None = None
    arguments: list[Expression] = field(default_factory=list)

    def add(self, *arguments) -> Self:
        for argument in _flatten(arguments):
            self.arguments.append(argument)
        return self


@dataclass
class NewExpression(CallExpression):
    kind: ClassVar[NodeKind] = NodeKind.NEW_EXPRESSION


@dataclass
class SequenceExpression(Expression):
    kind: ClassVar[NodeKind] = NodeKind.SEQUENCE_EXPRESSION

    expressions: list[Expression] = field(default_factory=list)

    def add(self, *expressions) -> Self:
        for expression in _flatten(expressions):
            self.expressions.append(expression)
        return self


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------


@dataclass
class BlockStatement(BodyMixin, Statement):
    kind: ClassVar[NodeKind] = NodeKind.BLOCK_STATEMENT


@dataclass
class ExpressionStatement(Statement):
    """An expression in statement position. A string literal here is a directive."""

    kind: ClassVar[NodeKind] = NodeKind.EXPRESSION_STATEMENT

    expression: Expression | None = None

    @property
    def directive(self) -> str | None:
        if isinstance(self.expression, Literal) and isinstance(self.expression.value, str):
            return self.expression.value
        return None


@dataclass
class DebuggerStatement(Statement):
    kind: ClassVar[NodeKind] = NodeKind.DEBUGGER_STATEMENT


@dataclass
class WithStatement(Statement):
    kind: ClassVar[NodeKind] = NodeKind.WITH_STATEMENT

    object: Expression | None = None
    body: Statement | None = None


@dataclass
class ReturnStatement(Statement):
    kind: ClassVar[NodeKind] = NodeKind.RETURN_STATEMENT

    argument: Expression | None = None


@dataclass
class LabeledStatement(Statement):
    kind: ClassVar[NodeKind] = NodeKind.LABELED_STATEMENT

    label: Identifier | None = None
    body: Statement | None = None


@dataclass
class BreakStatement(Statement):
    kind: ClassVar[NodeKind] = NodeKind.BREAK_STATEMENT

    label: Identifier | None = None


@dataclass
class ContinueStatement(Statement):
    kind: ClassVar[NodeKind] = NodeKind.CONTINUE_STATEMENT

    label: Identifier | None = None


@dataclass
class IfStatement(Statement):
    kind: ClassVar[NodeKind] = NodeKind.IF_STATEMENT

    test: Expression | None = None
    consequent: Statement | None = None
    alternate: Statement | None = None

    def else_(self, *statements) -> Self:
        """Set the alternate branch and return self."""
        self.alternate = _as_statement(statements)
        return self


@dataclass
class SwitchCase(BodyMixin, Node):
    """A ``case test:`` clause, or ``default:`` when test is None."""

    kind: ClassVar[NodeKind] = NodeKind.SWITCH_CASE

    test: Expression | None = None


@dataclass
class SwitchStatement(Statement):
    kind: ClassVar[NodeKind] = NodeKind.SWITCH_STATEMENT

    discriminant: Expression | None = None
    cases: list[SwitchCase] = field(default_factory=list)

    def add(self, *cases) -> Self:
        for case in _flatten(cases):
            self.cases.append(case)
        return self


@dataclass
class ThrowStatement(Statement):
    kind: ClassVar[NodeKind] = NodeKind.THROW_STATEMENT

    argument: Expression | None = None


@dataclass
class CatchClause(BodyMixin, Node):
    kind: ClassVar[NodeKind] = NodeKind.CATCH_CLAUSE

    param: Identifier | None = None


@dataclass
class TryStatement(Statement):
    """try/catch/finally. Needs a handler, a non-empty finalizer, or both.

    An empty finalizer block means there is no ``finally`` clause.
    """

    kind: ClassVar[NodeKind] = NodeKind.TRY_STATEMENT

    block: BlockStatement = field(default_factory=BlockStatement)
    handler: CatchClause | None = None
    finalizer: BlockStatement = field(default_factory=BlockStatement)

    def add(self, *statements) -> Self:
        """Append statements to the protected block."""
        self.block.add(*statements)
        return self

    def catch(self, param: Identifier | str, *statements) -> Self:
        """Attach a catch clause and return self."""
        if isinstance(param, str):
            param = Identifier(param)
        self.handler = CatchClause(param=param).add(*statements)
        return self

    def finally_(self, *statements) -> Self:
        """Append statements to the finalizer and return self."""
        self.finalizer.add(*statements)
        return self

    @property
    def has_finalizer(self) -> bool:
        return bool(self.finalizer.body)

    def validate(self) -> None:
        """Raise ContractViolationError unless a handler or finalizer is present."""
        if self.handler is None and not self.has_finalizer:
            raise ContractViolationError("TryStatement requires a handler, a non-empty finalizer, or both")


@dataclass
class WhileStatement(Statement):
    kind: ClassVar[NodeKind] = NodeKind.WHILE_STATEMENT

    test: Expression | None = None
    body: Statement | None = None


@dataclass
class DoWhileStatement(Statement):
    kind: ClassVar[NodeKind] = NodeKind.DO_WHILE_STATEMENT

    body: Statement | None = None
    test: Expression | None = None


@dataclass
class VariableDeclarator(Node):
    kind: ClassVar[NodeKind] = NodeKind.VARIABLE_DECLARATOR

    id: Identifier | None = None
    init: Expression | None = None


@dataclass
class VariableDeclaration(Statement):
    kind: ClassVar[NodeKind] = NodeKind.VARIABLE_DECLARATION

    declarations: list[VariableDeclarator] = field(default_factory=list)
    declaration_kind: VariableKind = VariableKind.VAR

    def add(self, *declarators) -> Self:
        for declarator in _flatten(declarators):
            self.declarations.append(declarator)
        return self


@dataclass
class ForStatement(Statement):
    """``for (init; test; update) body``. The initializer is a declaration (first) or expression (second)."""

    kind: ClassVar[NodeKind] = NodeKind.FOR_STATEMENT

    init: Discriminated[VariableDeclaration, Expression] = field(default_factory=Discriminated.empty)
    test: Expression | None = None
    update: Expression | None = None
    body: Statement | None = None

    def __post_init__(self):
        self.init = Discriminated.of(self.init, VariableDeclaration, Expression)


@dataclass
class ForInStatement(Statement):
    """``for (left in right) body``. The left side is a declaration (first) or identifier (second)."""

    kind: ClassVar[NodeKind] = NodeKind.FOR_IN_STATEMENT

    left: Discriminated[VariableDeclaration, Identifier] = field(default_factory=Discriminated.empty)
    right: Expression | None = None
    body: Statement | None = None

    def __post_init__(self):
        self.left = Discriminated.of(self.left, VariableDeclaration, Identifier)


@dataclass
class FunctionDeclaration(FunctionMixin, Statement):
    kind: ClassVar[NodeKind] = NodeKind.FUNCTION_DECLARATION
