"""
Fluent construction helpers.

Free functions returning concrete node types, so trees read close to the source
they produce::

    js_program(
        js_var("x", js_literal(1)),
        js_expression_statement(js_add(js_identifier("x"), js_literal(2))),
    )

Names accept either an Identifier or a plain string. Statement bodies accept any
number of statements: one is used as-is, several are wrapped in a block.
"""

from __future__ import annotations

from collections.abc import Iterable

from .model.discriminated import Discriminated
from .model.nodes import (
    ArrayExpression,
    BinaryExpression,
    BlockStatement,
    BreakStatement,
    CallExpression,
    CatchClause,
    ConditionalExpression,
    ContinueStatement,
    DebuggerStatement,
    DoWhileStatement,
    Expression,
    ExpressionStatement,
    ForInStatement,
    ForStatement,
    FunctionDeclaration,
    FunctionExpression,
    Identifier,
    IfStatement,
    LabeledStatement,
    Literal,
    LiteralValue,
    MemberExpression,
    NewExpression,
    ObjectExpression,
    Program,
    Property,
    ReturnStatement,
    SequenceExpression,
    SwitchCase,
    SwitchStatement,
    ThisExpression,
    ThrowStatement,
    TryStatement,
    UnaryExpression,
    VariableDeclaration,
    VariableDeclarator,
    WhileStatement,
    WithStatement,
    _as_statement,
)
from .model.operators import BinaryOperator, PropertyKind, Regex, RegexFlags, UnaryOperator


def _identifier(name: Identifier | str | None) -> Identifier | None:
    if name is None or isinstance(name, Identifier):
        return name
    return Identifier(name)


# ---------------------------------------------------------------------------
# Program, blocks and primaries
# ---------------------------------------------------------------------------


def js_program(*statements) -> Program:
    return Program().add(*statements)


def js_block(*statements) -> BlockStatement:
    return BlockStatement().add(*statements)


def js_identifier(name: str) -> Identifier:
    return Identifier(name)


def js_literal(value: LiteralValue) -> Literal:
    return Literal(value)


def js_null() -> Literal:
    return Literal(None)


def js_regex(pattern: str, flags: RegexFlags = RegexFlags.NONE) -> Literal:
    return Literal(Regex(pattern, flags))


def js_this() -> ThisExpression:
    return ThisExpression()


def js_array(*elements) -> ArrayExpression:
    return ArrayExpression().add(*elements)


def js_property(
    key: Literal | Identifier | str,
    value: Expression,
    kind: PropertyKind = PropertyKind.INIT,
) -> Property:
    """Build an object property. A string key becomes an identifier."""
    return Property(key=_identifier(key) if isinstance(key, str) else key, value=value, property_kind=kind)


def js_object(*properties) -> ObjectExpression:
    return ObjectExpression().add(*properties)


# ---------------------------------------------------------------------------
# Functions
# ---------------------------------------------------------------------------


def js_function(*params) -> FunctionExpression:
    """An anonymous function expression; chain ``.add(...)`` for its body."""
    return FunctionExpression().add_params(*params)


def js_function_declaration(name: Identifier | str, *params) -> FunctionDeclaration:
    return FunctionDeclaration(id=_identifier(name)).add_params(*params)


# ---------------------------------------------------------------------------
# Calls, members and compound expressions
# ---------------------------------------------------------------------------


def js_call(callee: Expression, *arguments) -> CallExpression:
    return CallExpression(callee=callee).add(*arguments)


def js_new(callee: Expression, *arguments) -> NewExpression:
    return NewExpression(callee=callee).add(*arguments)


def js_member(obj: Expression, *properties) -> MemberExpression:
    """Dot access ``obj.a.b``."""
    return MemberExpression(object=obj).add(_identifier(prop) for prop in properties)


def js_indexer(obj: Expression, *indices) -> MemberExpression:
    """Bracket access ``obj[a][b]``."""
    return MemberExpression(object=obj, computed=True).add(*indices)


def js_conditional(test: Expression, consequent: Expression, alternate: Expression) -> ConditionalExpression:
    return ConditionalExpression(test, consequent, alternate)


def js_sequence(*expressions) -> SequenceExpression:
    return SequenceExpression().add(*expressions)


def js_binary(left: Expression, operator: BinaryOperator, *right) -> BinaryExpression:
    return BinaryExpression(left=left, operator=operator).add(*right)


def _binary_builder(operator: BinaryOperator):
    def build(left: Expression, *right) -> BinaryExpression:
        return js_binary(left, operator, *right)

    build.__name__ = f"js_{operator.name.lower()}"
    build.__doc__ = f"``left {operator.token} right...``"
    return build


js_identity_equality = _binary_builder(BinaryOperator.IDENTITY_EQUALITY)
js_identity_inequality = _binary_builder(BinaryOperator.IDENTITY_INEQUALITY)
js_coerced_equality = _binary_builder(BinaryOperator.COERCED_EQUALITY)
js_coerced_inequality = _binary_builder(BinaryOperator.COERCED_INEQUALITY)
js_less_than = _binary_builder(BinaryOperator.LESS_THAN)
js_less_than_or_equal = _binary_builder(BinaryOperator.LESS_THAN_OR_EQUAL)
js_greater_than = _binary_builder(BinaryOperator.GREATER_THAN)
js_greater_than_or_equal = _binary_builder(BinaryOperator.GREATER_THAN_OR_EQUAL)
js_left_shift = _binary_builder(BinaryOperator.LEFT_SHIFT)
js_signed_right_shift = _binary_builder(BinaryOperator.SIGNED_RIGHT_SHIFT)
js_unsigned_right_shift = _binary_builder(BinaryOperator.UNSIGNED_RIGHT_SHIFT)
js_add = _binary_builder(BinaryOperator.ADD)
js_subtract = _binary_builder(BinaryOperator.SUBTRACT)
js_multiply = _binary_builder(BinaryOperator.MULTIPLY)
js_divide = _binary_builder(BinaryOperator.DIVIDE)
js_modulus = _binary_builder(BinaryOperator.MODULUS)
js_bitwise_or = _binary_builder(BinaryOperator.BITWISE_OR)
js_bitwise_xor = _binary_builder(BinaryOperator.BITWISE_XOR)
js_bitwise_and = _binary_builder(BinaryOperator.BITWISE_AND)
js_in = _binary_builder(BinaryOperator.IN)
js_instance_of = _binary_builder(BinaryOperator.INSTANCE_OF)
js_assign = _binary_builder(BinaryOperator.ASSIGN)
js_add_assign = _binary_builder(BinaryOperator.ADD_ASSIGN)
js_subtract_assign = _binary_builder(BinaryOperator.SUBTRACT_ASSIGN)
js_multiply_assign = _binary_builder(BinaryOperator.MULTIPLY_ASSIGN)
js_divide_assign = _binary_builder(BinaryOperator.DIVIDE_ASSIGN)
js_modulus_assign = _binary_builder(BinaryOperator.MODULUS_ASSIGN)
js_left_shift_assign = _binary_builder(BinaryOperator.LEFT_SHIFT_ASSIGN)
js_signed_right_shift_assign = _binary_builder(BinaryOperator.SIGNED_RIGHT_SHIFT_ASSIGN)
js_unsigned_right_shift_assign = _binary_builder(BinaryOperator.UNSIGNED_RIGHT_SHIFT_ASSIGN)
js_bitwise_or_assign = _binary_builder(BinaryOperator.BITWISE_OR_ASSIGN)
js_bitwise_xor_assign = _binary_builder(BinaryOperator.BITWISE_XOR_ASSIGN)
js_bitwise_and_assign = _binary_builder(BinaryOperator.BITWISE_AND_ASSIGN)
js_logical_and = _binary_builder(BinaryOperator.LOGICAL_AND)
js_logical_or = _binary_builder(BinaryOperator.LOGICAL_OR)


def js_unary(argument: Expression, operator: UnaryOperator) -> UnaryExpression:
    return UnaryExpression(operator=operator, argument=argument)


def js_negative(argument: Expression) -> UnaryExpression:
    return js_unary(argument, UnaryOperator.NEGATIVE)


def js_positive(argument: Expression) -> UnaryExpression:
    return js_unary(argument, UnaryOperator.POSITIVE)


def js_logical_not(argument: Expression) -> UnaryExpression:
    return js_unary(argument, UnaryOperator.LOGICAL_NOT)


def js_bitwise_not(argument: Expression) -> UnaryExpression:
    return js_unary(argument, UnaryOperator.BITWISE_NOT)


def js_type_of(argument: Expression) -> UnaryExpression:
    return js_unary(argument, UnaryOperator.TYPE_OF)


def js_void(argument: Expression) -> UnaryExpression:
    return js_unary(argument, UnaryOperator.VOID)


def js_delete(argument: Expression) -> UnaryExpression:
    return js_unary(argument, UnaryOperator.DELETE)


def js_pre_increment(argument: Expression) -> UnaryExpression:
    return js_unary(argument, UnaryOperator.PRE_INCREMENT)


def js_pre_decrement(argument: Expression) -> UnaryExpression:
    return js_unary(argument, UnaryOperator.PRE_DECREMENT)


def js_post_increment(argument: Expression) -> UnaryExpression:
    return js_unary(argument, UnaryOperator.POST_INCREMENT)


def js_post_decrement(argument: Expression) -> UnaryExpression:
    return js_unary(argument, UnaryOperator.POST_DECREMENT)


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------


def js_expression_statement(expression: Expression) -> ExpressionStatement:
    return ExpressionStatement(expression)


def js_directive(directive: str) -> ExpressionStatement:
    """A prologue directive such as ``'use strict';``."""
    return ExpressionStatement(Literal(directive))


def js_debugger() -> DebuggerStatement:
    return DebuggerStatement()


def js_return(argument: Expression | None = None) -> ReturnStatement:
    return ReturnStatement(argument)


def js_throw(argument: Expression) -> ThrowStatement:
    return ThrowStatement(argument)


def js_break(label: Identifier | str | None = None) -> BreakStatement:
    return BreakStatement(_identifier(label))


def js_continue(label: Identifier | str | None = None) -> ContinueStatement:
    return ContinueStatement(_identifier(label))


def js_label(label: Identifier | str, *statements) -> LabeledStatement:
    return LabeledStatement(_identifier(label), _as_statement(statements))


def js_if(test: Expression, *consequent) -> IfStatement:
    """``if (test) consequent``; chain ``.else_(...)`` for the alternate."""
    return IfStatement(test, _as_statement(consequent))


def js_while(test: Expression, *statements) -> WhileStatement:
    return WhileStatement(test, _as_statement(statements))


def js_do_while(test: Expression, *statements) -> DoWhileStatement:
    return DoWhileStatement(_as_statement(statements), test)


def js_with(obj: Expression, *statements) -> WithStatement:
    return WithStatement(obj, _as_statement(statements))


def js_for(
    init: VariableDeclaration | Expression | None,
    test: Expression | None,
    update: Expression | None,
    *statements,
) -> ForStatement:
    return ForStatement(
        init=Discriminated.of(init, VariableDeclaration, Expression),
        test=test,
        update=update,
        body=_as_statement(statements),
    )


def js_for_in(left: VariableDeclaration | Identifier | str, right: Expression, *statements) -> ForInStatement:
    if isinstance(left, str):
        left = Identifier(left)
    return ForInStatement(
        left=Discriminated.of(left, VariableDeclaration, Identifier),
        right=right,
        body=_as_statement(statements),
    )


def js_var(name: Identifier | str, init: Expression | None = None) -> VariableDeclaration:
    return VariableDeclaration().add(VariableDeclarator(_identifier(name), init))


def js_var_list(*declarators: VariableDeclarator | Iterable[VariableDeclarator]) -> VariableDeclaration:
    return VariableDeclaration().add(*declarators)


def js_declarator(name: Identifier | str, init: Expression | None = None) -> VariableDeclarator:
    return VariableDeclarator(_identifier(name), init)


def js_try(*statements) -> TryStatement:
    """``try {...}``; chain ``.catch(param, ...)`` and/or ``.finally_(...)``."""
    return TryStatement().add(*statements)


def js_catch(param: Identifier | str, *statements) -> CatchClause:
    return CatchClause(param=_identifier(param)).add(*statements)


def js_switch(discriminant: Expression, *cases) -> SwitchStatement:
    return SwitchStatement(discriminant).add(*cases)


def js_case(test: Expression, *statements) -> SwitchCase:
    return SwitchCase(test=test).add(*statements)


def js_default_case(*statements) -> SwitchCase:
    return SwitchCase().add(*statements)
