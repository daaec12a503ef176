"""
Tests for the node model: capabilities, chained adds and field coercion.
"""

from __future__ import annotations

import pytest

from estree_to_code.errors import ContractViolationError
from estree_to_code.model import (
    BinaryExpression,
    BinaryOperator,
    BlockStatement,
    CatchClause,
    ExpressionStatement,
    ForInStatement,
    ForStatement,
    FunctionDeclaration,
    FunctionExpression,
    HasBody,
    HasParameters,
    Identifier,
    IfStatement,
    Literal,
    NodeKind,
    Program,
    Property,
    RegexFlags,
    ReturnStatement,
    SwitchCase,
    TryStatement,
    UnaryOperator,
    VariableDeclaration,
    is_for_initializer,
    is_pattern,
    is_property_key,
)


class TestCapabilities:
    """Tests for the HasBody and HasParameters protocols."""

    @pytest.mark.parametrize("cls", [Program, BlockStatement, SwitchCase, CatchClause, FunctionExpression, FunctionDeclaration])
    def test_body_holders(self, cls):
        assert isinstance(cls(), HasBody)

    @pytest.mark.parametrize("cls", [FunctionExpression, FunctionDeclaration])
    def test_parameter_holders(self, cls):
        assert isinstance(cls(), HasParameters)

    def test_non_holders(self):
        assert not isinstance(Identifier("a"), HasBody)
        assert not isinstance(Program(), HasParameters)

    def test_add_returns_self_and_flattens(self):
        first, second, third = ReturnStatement(), ReturnStatement(), ReturnStatement()
        block = BlockStatement()

        result = block.add(first, [second, [third]])

        assert result is block
        assert block.body == [first, second, third]
        assert block.body[0] is first

    def test_add_keeps_empty_statements(self):
        program = Program().add(None, ReturnStatement())
        assert program.body == [None, ReturnStatement()]

    def test_function_add_routes_identifiers_to_params(self):
        statement = ReturnStatement()
        function = FunctionExpression().add(Identifier("a"), statement, Identifier("b"))

        assert function.params == [Identifier("a"), Identifier("b")]
        assert function.body == [statement]

    def test_add_params_accepts_strings(self):
        function = FunctionDeclaration(id=Identifier("f")).add_params("a", Identifier("b"))
        assert function.params == [Identifier("a"), Identifier("b")]


class TestBinaryExpression:
    def test_add_merges_same_operator(self):
        inner = BinaryExpression(Identifier("b"), BinaryOperator.ADD, [Identifier("c")])
        outer = BinaryExpression(Identifier("a"), BinaryOperator.ADD).add(inner)

        assert outer.right == [Identifier("b"), Identifier("c")]

    def test_add_keeps_other_operators_nested(self):
        inner = BinaryExpression(Identifier("b"), BinaryOperator.MULTIPLY, [Identifier("c")])
        outer = BinaryExpression(Identifier("a"), BinaryOperator.ADD).add(inner)

        assert outer.right == [inner]


class TestCoercion:
    def test_property_key_from_node(self):
        assert Property(key=Literal("a")).key.is_first
        assert Property(key=Identifier("a")).key.is_second
        assert Property().key.is_empty

    def test_property_key_rejects_other_nodes(self):
        with pytest.raises(TypeError):
            Property(key=ReturnStatement())

    def test_for_init(self):
        assert ForStatement(init=VariableDeclaration()).init.is_first
        assert ForStatement(init=Identifier("i")).init.is_second
        assert ForStatement().init.is_empty

    def test_for_in_left(self):
        assert ForInStatement(left=VariableDeclaration()).left.is_first
        assert ForInStatement(left=Identifier("k")).left.is_second
        with pytest.raises(TypeError):
            ForInStatement(left=Literal(1))


class TestStatements:
    def test_if_else_chain(self):
        first, second = ReturnStatement(), ReturnStatement()
        statement = IfStatement(Literal(1), first).else_(second)
        assert statement.alternate is second

    def test_else_wraps_several_statements(self):
        statement = IfStatement(Literal(1)).else_(ReturnStatement(), ReturnStatement())
        assert isinstance(statement.alternate, BlockStatement)
        assert len(statement.alternate.body) == 2

    def test_try_requires_handler_or_finalizer(self):
        with pytest.raises(ContractViolationError):
            TryStatement().add(ReturnStatement()).validate()

        TryStatement().catch("e").validate()
        TryStatement().finally_(ReturnStatement()).validate()

    def test_try_empty_finalizer_means_absent(self):
        statement = TryStatement()
        assert not statement.has_finalizer
        statement.finally_(ReturnStatement())
        assert statement.has_finalizer

    def test_catch_accepts_string_param(self):
        statement = TryStatement().catch("e", ReturnStatement())
        assert statement.handler.param == Identifier("e")
        assert statement.handler.body == [ReturnStatement()]

    def test_directive(self):
        assert ExpressionStatement(Literal("use strict")).directive == "use strict"
        assert ExpressionStatement(Literal(1)).directive is None
        assert ExpressionStatement(Identifier("a")).directive is None


def test_kind_tags():
    assert Program.kind is NodeKind.PROGRAM
    assert Program().kind == "Program"
    assert FunctionDeclaration.kind is NodeKind.FUNCTION_DECLARATION


def test_category_predicates():
    assert is_pattern(Identifier("a"))
    assert not is_pattern(Literal(1))
    assert is_property_key(Literal("a")) and is_property_key(Identifier("a"))
    assert not is_property_key(ReturnStatement())
    assert is_for_initializer(VariableDeclaration()) and is_for_initializer(Identifier("i"))
    assert not is_for_initializer(ReturnStatement())


def test_operator_properties():
    assert BinaryOperator.ADD_ASSIGN.is_assignment
    assert BinaryOperator.LOGICAL_OR.is_logical
    assert BinaryOperator.INSTANCE_OF.is_keyword
    assert not BinaryOperator.ADD.is_keyword
    assert UnaryOperator.POST_INCREMENT.token == "++"
    assert not UnaryOperator.POST_INCREMENT.prefix
    assert UnaryOperator.PRE_DECREMENT.is_update
    assert UnaryOperator.TYPE_OF.is_keyword


def test_regex_flags_canonical_order():
    flags = RegexFlags.STICKY | RegexFlags.GLOBAL | RegexFlags.MULTILINE
    assert flags.to_string() == "gmy"
    assert RegexFlags.NONE.to_string() == ""
