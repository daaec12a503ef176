"""
Tests for the JavaScript source printer in pretty and minified modes.
"""

import io
from decimal import Decimal

import pytest

from estree_to_code.builders import (
    js_add,
    js_array,
    js_block,
    js_break,
    js_call,
    js_case,
    js_conditional,
    js_declarator,
    js_default_case,
    js_do_while,
    js_expression_statement,
    js_for,
    js_for_in,
    js_function,
    js_function_declaration,
    js_identifier,
    js_if,
    js_in,
    js_indexer,
    js_label,
    js_less_than,
    js_literal,
    js_logical_not,
    js_member,
    js_negative,
    js_new,
    js_object,
    js_post_increment,
    js_pre_increment,
    js_program,
    js_property,
    js_regex,
    js_return,
    js_sequence,
    js_subtract,
    js_switch,
    js_try,
    js_type_of,
    js_var,
    js_var_list,
    js_void,
    js_while,
)
from estree_to_code.config import PrinterConfig
from estree_to_code.errors import ContractViolationError, UnsupportedNodeError
from estree_to_code.model import (
    ExpressionStatement,
    ForInStatement,
    FunctionExpression,
    Identifier,
    Literal,
    MemberExpression,
    PropertyKind,
    RegexFlags,
    TryStatement,
    VariableDeclaration,
)
from estree_to_code.printer import JSPrinter, to_source

TAB = PrinterConfig(indent="\t")


def i(name):
    return js_identifier(name)


def es(expression):
    return js_expression_statement(expression)


def pretty(node):
    return to_source(node, config=TAB)


def mini(node):
    return to_source(node, minify=True)


class TestExpressions:
    @pytest.mark.parametrize(
        "expression, expected",
        [
            (js_add(i("a"), i("b"), i("c")), "(a+b+c)"),
            (js_add(i("a"), js_pre_increment(i("b"))), "(a+ ++b)"),
            (js_subtract(i("a"), js_negative(js_literal(1))), "(a- -1)"),
            (js_less_than(i("a"), js_logical_not(i("b"))), "(a< !b)"),
            (js_in(i("a"), i("b")), "(a in b)"),
            (js_negative(js_negative(i("x"))), "- -x"),
            (js_type_of(i("x")), "typeof x"),
            (js_type_of(js_sequence(i("a"), i("b"))), "typeof (a,b)"),
            (js_void(js_literal(0)), "void 0"),
            (js_post_increment(i("x")), "x++"),
            (js_call(i("f"), js_sequence(i("a"), i("b"))), "f((a,b))"),
            (js_member(js_conditional(i("a"), i("b"), i("c")), "d"), "(a?b:c).d"),
            (js_conditional(js_conditional(i("a"), i("b"), i("c")), i("d"), i("e")), "(a?b:c)?d:e"),
            (js_new(js_call(i("f"))), "new (f())()"),
            (js_new(js_member(i("a"), "B"), js_literal(1)), "new a.B(1)"),
            (js_member(js_literal(1), "a"), "(1).a"),
            (js_indexer(js_literal(1), js_literal(0)), "1[0]"),
            (js_member(js_indexer(i("a"), js_literal(0)), "b"), "a[0].b"),
            (js_member(i("a"), "b", "c"), "a.b.c"),
            (js_array(js_literal(1), None, js_literal(2)), "[1,,2]"),
            (js_array(js_literal(1), None), "[1,,]"),
            (js_array(), "[]"),
            (js_object(js_property(js_literal("a-b"), js_literal(1)), js_property("c", i("d"))), "{'a-b':1,c:d}"),
            (js_literal("it's\n"), "'it\\'s\\n'"),
            (js_literal(1.5), "1.5"),
            (js_literal(None), "null"),
            (js_literal(False), "false"),
            (js_regex("a/b\\*", RegexFlags.GLOBAL | RegexFlags.IGNORE_CASE | RegexFlags.MULTILINE | RegexFlags.UNICODE | RegexFlags.STICKY), "/a\\/b\\*/gimuy"),
            (js_regex(""), "/(?:)/"),
        ],
    )
    def test_minified(self, expression, expected):
        # Printed in statement position; strip the terminator
        source = mini(es(expression))
        assert source == f"{expected};" or source == f"({expected});"
        assert source.endswith(";")

    def test_object_statement_is_wrapped(self):
        assert mini(es(js_object())) == "({});"
        assert pretty(es(js_object())) == "({});\n"

    def test_function_statement_is_wrapped(self):
        assert mini(es(js_call(js_member(js_function(), "call")))) == "(function(){}.call());"
        assert pretty(es(js_call(js_member(js_function(), "call")))) == "(function() {}.call());\n"

    def test_function_callee_is_wrapped(self):
        assert mini(es(js_call(js_function()))) == "(function(){})();"

    @pytest.mark.parametrize(
        "value, text",
        [(-1, "-1"), (-1.5, "-1.5"), (Decimal("-1"), "-1"), (float("-inf"), "-Infinity")],
    )
    def test_negative_number_object_is_wrapped(self, value, text):
        assert mini(es(MemberExpression(Literal(value), [Literal(0)], computed=True))) == f"({text})[0];"
        assert mini(es(js_member(Literal(value), "a"))) == f"({text}).a;"
        assert mini(es(js_call(Literal(value)))) == f"({text})();"

    def test_getter(self):
        getter = js_object(js_property("x", js_function().add(js_return(js_literal(1))), PropertyKind.GET))
        assert mini(es(getter)) == "({get x(){return 1;}});"
        assert pretty(es(getter)) == "({\n\tget x() {\n\t\treturn 1;\n\t}\n});\n"

    def test_setter(self):
        setter = js_object(js_property("x", js_function("v"), PropertyKind.SET))
        assert mini(es(setter)) == "({set x(v){}});"

    def test_named_function_expression(self):
        assert mini(js_var("f", FunctionExpression(id=Identifier("g")))) == "var f=function g(){};"

    def test_pretty_callback(self):
        source = pretty(es(js_call(i("f"), js_function().add(js_return()))))
        assert source == "f(function() {\n\treturn;\n});\n"

    def test_pretty_array(self):
        assert pretty(es(js_array(js_literal(1), js_literal(2)))) == "[\n\t1,\n\t2\n];\n"

    def test_pretty_binary_spacing(self):
        assert pretty(es(js_add(i("a"), i("b")))) == "(a + b);\n"

    def test_return_object(self):
        assert mini(js_return(js_object())) == "return {};"

    def test_sequence_initializer(self):
        assert mini(js_var("x", js_sequence(i("a"), i("b")))) == "var x=(a,b);"


class TestStatements:
    def test_empty_statement(self):
        assert to_source(None) == ";\n"
        assert mini(None) == ";"
        assert mini(js_program(es(i("a")), None, es(i("b")))) == "a;;b;"
        assert pretty(js_program(es(i("a")), None, es(i("b")))) == "a;\n;\nb;\n"

    def test_if_without_else(self):
        node = js_if(i("a"), js_return())
        assert pretty(node) == "if (a)\n\treturn;\n"
        assert mini(node) == "if(a)return;"

    def test_if_block(self):
        node = js_if(i("a"), js_return(), js_return())
        assert pretty(node) == "if (a) {\n\treturn;\n\treturn;\n}\n"
        assert mini(node) == "if(a){return;return;}"

    def test_single_statement_block_collapses_when_minified(self):
        assert mini(js_if(i("a"), js_block(js_return()))) == "if(a)return;"

    def test_function_declaration_block_is_kept(self):
        assert mini(js_if(i("a"), js_block(js_function_declaration("f")))) == "if(a){function f(){}}"

    def test_conditional_fold(self):
        node = js_if(i("a"), es(i("b"))).else_(es(i("c")))
        assert mini(node) == "a?b:c;"
        assert pretty(node) == "if (a)\n\tb;\nelse\n\tc;\n"

    def test_conditional_fold_through_blocks(self):
        node = js_if(i("a"), js_block(es(i("b")))).else_(js_block(es(i("c"))))
        assert mini(node) == "a?b:c;"

    def test_else_if(self):
        node = js_if(i("a"), js_block(js_return())).else_(js_if(i("b"), js_block(js_return())))
        assert pretty(node) == "if (a) {\n\treturn;\n} else if (b) {\n\treturn;\n}\n"
        assert mini(node) == "if(a)return;else if(b)return;"

    def test_dangling_else(self):
        node = js_if(i("a"), js_if(i("b"), es(i("c")))).else_(es(i("d")))
        assert mini(node) == "if(a){if(b)c;}else d;"
        assert pretty(node) == "if (a) {\n\tif (b)\n\t\tc;\n} else\n\td;\n"

    def test_dangling_else_keeps_block(self):
        node = js_if(i("a"), js_block(js_if(i("b"), es(i("c"))))).else_(es(i("d")))
        assert mini(node) == "if(a){if(b)c;}else d;"

    def test_try_catch_finally(self):
        node = js_try(es(i("a"))).catch("e", es(i("b"))).finally_(es(i("c")))
        assert mini(node) == "try{a;}catch(e){b;}finally{c;}"
        assert pretty(node) == "try {\n\ta;\n} catch (e) {\n\tb;\n} finally {\n\tc;\n}\n"

    def test_try_catch(self):
        node = js_try(es(i("a"))).catch("e", es(i("b")))
        assert pretty(node) == "try {\n\ta;\n} catch (e) {\n\tb;\n}\n"

    def test_try_finally(self):
        assert mini(js_try(es(i("a"))).finally_(es(i("c")))) == "try{a;}finally{c;}"

    def test_try_requires_handler_or_finalizer(self):
        with pytest.raises(ContractViolationError):
            to_source(js_try(es(i("a"))))

    def test_switch(self):
        node = js_switch(
            i("x"),
            js_case(js_literal(1), es(i("a")), js_break()),
            js_default_case(es(i("b"))),
        )
        assert mini(node) == "switch(x){case 1:a;break;default:b;}"
        assert pretty(node) == "switch (x) {\n\tcase 1:\n\t\ta;\n\t\tbreak;\n\tdefault:\n\t\tb;\n}\n"

    def test_for(self):
        node = js_for(js_var("i", js_literal(0)), js_less_than(i("i"), js_literal(10)), js_post_increment(i("i")), es(js_call(i("f"))))
        assert mini(node) == "for(var i=0;(i<10);i++)f();"
        assert pretty(node) == "for (var i = 0; (i < 10); i++)\n\tf();\n"

    def test_for_without_clauses(self):
        assert mini(js_for(None, None, None, js_block())) == "for(;;){}"

    def test_for_with_several_declarators(self):
        declaration = js_var_list(js_declarator("i", js_literal(0)), js_declarator("j"))
        assert mini(js_for(declaration, None, None, js_block())) == "for(var i=0,j;;){}"

    def test_for_in(self):
        assert mini(js_for_in("k", i("o"), js_block())) == "for(k in o){}"
        assert mini(js_for_in(js_var("k"), i("o"), es(js_call(i("f"))))) == "for(var k in o)f();"

    def test_for_in_contracts(self):
        declaration = js_var_list(js_declarator("a"), js_declarator("b"))
        with pytest.raises(ContractViolationError):
            to_source(ForInStatement(left=declaration, right=i("o")))
        with pytest.raises(ContractViolationError):
            to_source(ForInStatement(right=i("o")))

    def test_variable_declaration(self):
        node = js_var_list(js_declarator("a", js_literal(1)), js_declarator("b"))
        assert mini(node) == "var a=1,b;"
        assert pretty(node) == "var a = 1,\n\tb;\n"

    def test_empty_variable_declaration(self):
        with pytest.raises(ContractViolationError):
            to_source(VariableDeclaration())

    def test_function_declaration(self):
        node = js_function_declaration("f", "a", "b").add(js_return(i("a")))
        assert mini(node) == "function f(a,b){return a;}"
        assert pretty(node) == "function f(a, b) {\n\treturn a;\n}\n"

    def test_do_while(self):
        node = js_do_while(i("x"), es(js_call(i("f"))))
        assert mini(node) == "do f();while(x);"
        assert pretty(node) == "do\n\tf();\nwhile (x);\n"

    def test_do_while_block(self):
        node = js_do_while(i("x"), es(js_call(i("f"))), es(js_call(i("g"))))
        assert pretty(node) == "do {\n\tf();\n\tg();\n} while (x);\n"

    def test_labeled_loop(self):
        node = js_label("outer", js_while(js_literal(True), js_break("outer")))
        assert mini(node) == "outer:while(true)break outer;"
        assert pretty(node) == "outer:\nwhile (true)\n\tbreak outer;\n"


class TestErrors:
    def test_unknown_node(self):
        with pytest.raises(UnsupportedNodeError):
            to_source(object())

    def test_unsupported_literal(self):
        with pytest.raises(UnsupportedNodeError):
            to_source(es(Literal(object())))

    def test_missing_expression(self):
        with pytest.raises(ContractViolationError, match="ExpressionStatement.expression is required."):
            to_source(ExpressionStatement())

    def test_accessor_needs_function(self):
        with pytest.raises(ContractViolationError):
            to_source(es(js_object(js_property("x", js_literal(1), PropertyKind.GET))))

    def test_dot_access_needs_identifiers(self):
        with pytest.raises(ContractViolationError):
            to_source(es(MemberExpression(i("a"), [js_literal(0)])))

    def test_try_statement_missing_both(self):
        with pytest.raises(ContractViolationError):
            to_source(TryStatement())


class TestPrinterStream:
    def test_consecutive_prints_continue_the_stream(self):
        sink = io.StringIO()
        printer = JSPrinter(sink, PrinterConfig(minify=True))
        printer.print(js_var("a"))
        printer.print(js_return())
        assert sink.getvalue() == "var a;return;"

    def test_word_tokens_stay_separated_across_prints(self):
        sink = io.StringIO()
        printer = JSPrinter(sink, PrinterConfig(minify=True))
        printer.print(js_return())
        printer.print(es(js_type_of(i("a"))))
        assert sink.getvalue() == "return;typeof a;"

    def test_newline_setting(self):
        assert to_source(es(i("a")), config=PrinterConfig(newline="\r\n")) == "a;\r\n"

    def test_minify_argument_overrides_config(self):
        assert to_source(es(js_add(i("a"), i("b"))), minify=True, config=TAB) == "(a+b);"

    def test_default_indent(self):
        assert to_source(js_if(i("a"), js_return())) == "if (a)\n    return;\n"
