"""
Read/write round trips over canonical ESTree JSON.
"""

import json
from pathlib import Path

import pytest

from estree_to_code.codec import BINARY_WRITE, UNARY_WRITE, read_json, read_node, write_json, write_node
from estree_to_code.model import BinaryOperator, UnaryOperator

TEST_DATA = Path(__file__).parent / "test_data"


def ident(name):
    return {"type": "Identifier", "name": name}


def lit(value):
    return {"type": "Literal", "value": value}


def block(*body):
    return {"type": "BlockStatement", "body": list(body)}


def statement(expression):
    return {"type": "ExpressionStatement", "expression": expression}


def function(name=None, params=(), body=()):
    return {
        "type": "FunctionExpression",
        "id": ident(name) if name else None,
        "params": [ident(p) for p in params],
        "body": block(*body),
    }


def var(*names):
    return {
        "type": "VariableDeclaration",
        "declarations": [{"type": "VariableDeclarator", "id": ident(n), "init": lit(1)} for n in names],
        "kind": "var",
    }


CANONICAL = {
    "identifier": ident("a"),
    "null": lit(None),
    "string": lit("text"),
    "boolean": lit(True),
    "integer": lit(42),
    "float": lit(2.5),
    "regex": {"type": "Literal", "value": None, "regex": {"pattern": "^a\\/b$", "flags": "gimuy"}},
    "this": {"type": "ThisExpression"},
    "array": {"type": "ArrayExpression", "elements": [lit(1), None, ident("b")]},
    "object": {
        "type": "ObjectExpression",
        "properties": [
            {"type": "Property", "key": lit("a"), "value": lit(1), "kind": "init"},
            {"type": "Property", "key": ident("b"), "value": function(), "kind": "get"},
            {"type": "Property", "key": ident("b"), "value": function(params=["v"]), "kind": "set"},
        ],
    },
    "function": function("f", ["a", "b"], [{"type": "ReturnStatement", "argument": ident("a")}]),
    "binary chain": {
        "type": "BinaryExpression",
        "operator": "+",
        "left": ident("a"),
        "right": {"type": "BinaryExpression", "operator": "+", "left": ident("b"), "right": ident("c")},
    },
    "member chain": {
        "type": "MemberExpression",
        "object": {"type": "MemberExpression", "object": ident("a"), "property": ident("b"), "computed": False},
        "property": ident("c"),
        "computed": False,
    },
    "computed member": {"type": "MemberExpression", "object": ident("a"), "property": lit(0), "computed": True},
    "conditional": {"type": "ConditionalExpression", "test": ident("a"), "consequent": lit(1), "alternate": lit(2)},
    "call": {"type": "CallExpression", "callee": ident("f"), "arguments": [lit(1), ident("x")]},
    "new": {"type": "NewExpression", "callee": ident("C"), "arguments": []},
    "sequence": {"type": "SequenceExpression", "expressions": [ident("a"), ident("b")]},
    "program": {"type": "Program", "body": [{"type": "EmptyStatement"}, statement(ident("a"))]},
    "block": block(statement(ident("a"))),
    "directive": {"type": "ExpressionStatement", "expression": lit("use strict"), "directive": "use strict"},
    "debugger": {"type": "DebuggerStatement"},
    "with": {"type": "WithStatement", "object": ident("o"), "body": block()},
    "return": {"type": "ReturnStatement", "argument": None},
    "labeled": {"type": "LabeledStatement", "label": ident("outer"), "body": {"type": "BreakStatement", "label": ident("outer")}},
    "continue": {"type": "ContinueStatement", "label": None},
    "if": {"type": "IfStatement", "test": ident("a"), "consequent": block(), "alternate": None},
    "switch": {
        "type": "SwitchStatement",
        "discriminant": ident("x"),
        "cases": [
            {"type": "SwitchCase", "test": lit(1), "consequent": [{"type": "BreakStatement", "label": None}]},
            {"type": "SwitchCase", "test": None, "consequent": []},
        ],
    },
    "throw": {"type": "ThrowStatement", "argument": ident("e")},
    "try": {
        "type": "TryStatement",
        "block": block(statement(ident("a"))),
        "handler": {"type": "CatchClause", "param": ident("e"), "body": block()},
        "finalizer": block(statement(ident("b"))),
    },
    "try without finalizer": {
        "type": "TryStatement",
        "block": block(),
        "handler": {"type": "CatchClause", "param": ident("e"), "body": block()},
        "finalizer": None,
    },
    "while": {"type": "WhileStatement", "test": ident("a"), "body": {"type": "EmptyStatement"}},
    "do while": {"type": "DoWhileStatement", "body": block(), "test": ident("a")},
    "for": {"type": "ForStatement", "init": var("i", "j"), "test": None, "update": None, "body": block()},
    "for expression init": {"type": "ForStatement", "init": ident("i"), "test": ident("t"), "update": ident("u"), "body": block()},
    "for in": {"type": "ForInStatement", "left": ident("k"), "right": ident("o"), "body": block()},
    "for in declaration": {"type": "ForInStatement", "left": var("k"), "right": ident("o"), "body": block()},
    "function declaration": {"type": "FunctionDeclaration", "id": ident("f"), "params": [], "body": block()},
    "variable declaration": var("a", "b"),
}


@pytest.mark.parametrize("value", CANONICAL.values(), ids=CANONICAL.keys())
def test_canonical_round_trip(value):
    assert write_node(read_node(value)) == value


@pytest.mark.parametrize("operator", list(BinaryOperator), ids=lambda op: op.name)
def test_every_binary_operator(operator):
    node_type, token = BINARY_WRITE[operator]
    value = {"type": node_type, "operator": token, "left": ident("a"), "right": ident("b")}
    node = read_node(value)
    assert node.operator is operator
    assert write_node(node) == value


@pytest.mark.parametrize("operator", list(UnaryOperator), ids=lambda op: op.name)
def test_every_unary_operator(operator):
    node_type, token, prefix = UNARY_WRITE[operator]
    value = {"type": node_type, "operator": token, "prefix": prefix, "argument": ident("a")}
    node = read_node(value)
    assert node.operator is operator
    assert write_node(node) == value


def test_prefix_flag_of_unary_expressions_is_normalized():
    # Only update expressions carry meaning in prefix
    value = {"type": "UnaryExpression", "operator": "!", "prefix": False, "argument": ident("a")}
    assert write_node(read_node(value))["prefix"] is True


def test_program_file_round_trip():
    text = (TEST_DATA / "program.json").read_text()
    assert json.loads(write_json(read_json(text))) == json.loads(text)
