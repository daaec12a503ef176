"""
End-to-end scenarios over building, JSON exchange and printing.
"""

from pathlib import Path

import pytest

from estree_to_code.builders import (
    js_add,
    js_block,
    js_call,
    js_expression_statement,
    js_identifier,
    js_if,
    js_literal,
    js_program,
    js_return,
    js_var,
)
from estree_to_code.codec import read_json, write_json
from estree_to_code.model import BinaryExpression, BinaryOperator, Identifier, Program
from estree_to_code.printer import to_source

TEST_DATA = Path(__file__).parent / "test_data"


def test_declaration_and_expression():
    node = js_program(
        js_var("x", js_literal(1)),
        js_expression_statement(js_add(js_identifier("x"), js_literal(2))),
    )
    assert to_source(node) == "var x = 1;\n(x + 2);\n"
    assert to_source(node, minify=True) == "var x=1;(x+2);"


def test_return_branches_keep_if_else():
    node = js_if(js_identifier("a"), js_block(js_return(js_literal(1)))).else_(js_block(js_return(js_literal(2))))
    assert to_source(node, minify=True) == "if(a)return 1;else return 2;"


def test_expression_branches_fold():
    node = js_if(
        js_identifier("a"),
        js_block(js_expression_statement(js_call(js_identifier("f")))),
    ).else_(js_block(js_expression_statement(js_call(js_identifier("g")))))
    assert to_source(node, minify=True) == "a?f():g();"


def test_quote_and_newline_escape():
    assert to_source(js_expression_statement(js_literal("O'Brien\n")), minify=True) == "'O\\'Brien\\n';"


@pytest.mark.parametrize("minify", [False, True])
def test_empty_program(minify):
    assert to_source(Program(), minify=minify) == ""


def test_empty_block():
    assert to_source(js_block()) == "{}\n"
    assert to_source(js_block(), minify=True) == "{}"


def test_single_trailing_operand():
    node = js_expression_statement(BinaryExpression(Identifier("a"), BinaryOperator.MULTIPLY, [Identifier("b")]))
    assert to_source(node, minify=True) == "(a*b);"


@pytest.mark.parametrize("minify", [False, True])
def test_print_is_stable_across_json_exchange(minify):
    node = read_json((TEST_DATA / "program.json").read_text())
    exchanged = read_json(write_json(node))
    assert exchanged == node
    assert to_source(exchanged, minify=minify) == to_source(node, minify=minify)


def test_chain_survives_json_exchange():
    node = js_program(js_expression_statement(js_add(js_identifier("a"), js_identifier("b"), js_identifier("c"))))
    assert to_source(read_json(write_json(node)), minify=True) == "(a+b+c);"
