"""
Shared printing walk for the synchronous and asynchronous printers.

The walk is a generator of text chunks. Both printers drive the same generator,
so they have identical control flow and ordering and differ only in how a chunk
reaches the sink.

Output rules:
- Binary, assignment and logical expressions are wholly parenthesized.
- Pretty mode puts each statement on its own line, indented by depth.
- Minify mode drops optional whitespace, collapses single-statement blocks where
  the grammar allows it and folds ``if (t) e1; else e2;`` into ``t?e1:e2;``.
"""

from __future__ import annotations

import logging
from collections.abc import Generator, Iterator
from decimal import Decimal

from ..config import PrinterConfig
from ..errors import ContractViolationError, UnsupportedNodeError
from ..model.nodes import (
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
    MemberExpression,
    NewExpression,
    Node,
    NodeKind,
    ObjectExpression,
    Program,
    Property,
    ReturnStatement,
    SequenceExpression,
    Statement,
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
)
from ..model.operators import PropertyKind, Regex
from ..utils import escape_string, format_number, format_regex

logger = logging.getLogger(__name__)

Chunks = Iterator[str]


def _is_word_char(char: str) -> bool:
    return char.isalnum() or char in "_$" or ord(char) > 0x7F


def _needs_space(last: str, first: str) -> bool:
    """Whether two adjacent characters would merge into a different token."""
    if _is_word_char(last) and _is_word_char(first):
        return True
    if last == first and last in "+-/":
        return True
    # "<!--" opens an HTML-like comment
    return last == "<" and first == "!"


def _is_number(node: Expression) -> bool:
    return isinstance(node, Literal) and isinstance(node.value, (int, float, Decimal)) and not isinstance(node.value, bool)


def _is_negative_number(node: Expression) -> bool:
    return _is_number(node) and format_number(node.value).startswith("-")


def _wrap_in_list(node: Expression) -> bool:
    """A comma-separated slot cannot hold a bare sequence."""
    return isinstance(node, SequenceExpression)


def _wrap_operand(node: Expression) -> bool:
    return isinstance(node, (SequenceExpression, ConditionalExpression))


def _wrap_callee(node: Expression) -> bool:
    if isinstance(node, (SequenceExpression, ConditionalExpression, UnaryExpression, FunctionExpression)):
        return True
    return _is_negative_number(node)


def _wrap_member_object(node: Expression, computed: bool) -> bool:
    if isinstance(node, (SequenceExpression, ConditionalExpression, UnaryExpression)):
        return True
    # 1.a would read as a malformed number, -1[0] as -(1[0])
    return _is_negative_number(node) or (not computed and _is_number(node))


def _wrap_new_callee(node: Expression) -> bool:
    """``new`` binds to the nearest argument list, so calls must be parenthesized."""
    if type(node) is CallExpression:
        return True
    if isinstance(node, MemberExpression):
        return _wrap_member_object(node.object, node.computed) or _wrap_new_callee(node.object)
    return _wrap_callee(node)


def _starts_ambiguously(node: Expression | None) -> bool:
    """Whether an expression statement would start with ``{`` or ``function``."""
    while node is not None:
        if isinstance(node, (ObjectExpression, FunctionExpression)):
            return True
        if isinstance(node, MemberExpression):
            if _wrap_member_object(node.object, node.computed):
                return False
            node = node.object
        elif type(node) is CallExpression:
            if _wrap_callee(node.callee):
                return False
            node = node.callee
        elif isinstance(node, ConditionalExpression):
            if _wrap_operand(node.test):
                return False
            node = node.test
        elif isinstance(node, SequenceExpression):
            node = node.expressions[0] if node.expressions else None
        elif isinstance(node, UnaryExpression) and not node.operator.prefix:
            if _wrap_operand(node.argument):
                return False
            node = node.argument
        else:
            return False
    return False


def _single_expression(statement: Statement | None) -> Expression | None:
    """The expression of a bare expression statement or of a block holding only one."""
    if isinstance(statement, BlockStatement) and len(statement.body) == 1:
        statement = statement.body[0]
    if isinstance(statement, ExpressionStatement):
        return statement.expression
    return None


class PrinterCore:
    """Stateful walk producing JavaScript source chunks.

    Holds the indentation depth, whether the output is at the start of a line and
    the last character emitted. One instance per output stream.
    """

    def __init__(self, config: PrinterConfig | None = None):
        self.config = config or PrinterConfig()
        self.minify = self.config.minify
        self.depth = 0
        self._line_start = True
        self._last = ""
        self._handlers = {
            NodeKind.PROGRAM: self._print_program,
            NodeKind.IDENTIFIER: self._print_identifier,
            NodeKind.LITERAL: self._print_literal,
            NodeKind.THIS_EXPRESSION: self._print_this_expression,
            NodeKind.ARRAY_EXPRESSION: self._print_array_expression,
            NodeKind.OBJECT_EXPRESSION: self._print_object_expression,
            NodeKind.FUNCTION_EXPRESSION: self._print_function_expression,
            NodeKind.UNARY_EXPRESSION: self._print_unary_expression,
            NodeKind.BINARY_EXPRESSION: self._print_binary_expression,
            NodeKind.MEMBER_EXPRESSION: self._print_member_expression,
            NodeKind.CONDITIONAL_EXPRESSION: self._print_conditional_expression,
            NodeKind.CALL_EXPRESSION: self._print_call_expression,
            NodeKind.NEW_EXPRESSION: self._print_new_expression,
            NodeKind.SEQUENCE_EXPRESSION: self._print_sequence_expression,
            NodeKind.BLOCK_STATEMENT: self._print_block_statement,
            NodeKind.EXPRESSION_STATEMENT: self._print_expression_statement,
            NodeKind.DEBUGGER_STATEMENT: self._print_debugger_statement,
            NodeKind.WITH_STATEMENT: self._print_with_statement,
            NodeKind.RETURN_STATEMENT: self._print_return_statement,
            NodeKind.LABELED_STATEMENT: self._print_labeled_statement,
            NodeKind.BREAK_STATEMENT: self._print_break_statement,
            NodeKind.CONTINUE_STATEMENT: self._print_continue_statement,
            NodeKind.IF_STATEMENT: self._print_if_statement,
            NodeKind.SWITCH_STATEMENT: self._print_switch_statement,
            NodeKind.SWITCH_CASE: self._print_switch_case,
            NodeKind.THROW_STATEMENT: self._print_throw_statement,
            NodeKind.TRY_STATEMENT: self._print_try_statement,
            NodeKind.CATCH_CLAUSE: self._print_catch_clause,
            NodeKind.WHILE_STATEMENT: self._print_while_statement,
            NodeKind.DO_WHILE_STATEMENT: self._print_do_while_statement,
            NodeKind.FOR_STATEMENT: self._print_for_statement,
            NodeKind.FOR_IN_STATEMENT: self._print_for_in_statement,
            NodeKind.FUNCTION_DECLARATION: self._print_function_declaration,
            NodeKind.VARIABLE_DECLARATION: self._print_variable_declaration,
            NodeKind.VARIABLE_DECLARATOR: self._print_variable_declarator,
            NodeKind.PROPERTY: self._print_property,
        }

    def chunks(self, node: Node | None) -> Chunks:
        """Yield the source text of ``node``. None prints as an empty statement."""
        logger.debug(
            "Printing %s (%s)",
            type(node).__name__ if node is not None else "empty statement",
            "minify" if self.minify else "pretty",
        )
        yield from self._statement(node)

    # ------------------------------------------------------------------
    # Emission primitives
    # ------------------------------------------------------------------

    def _write(self, text: str) -> Chunks:
        if not text:
            return
        if self._line_start:
            self._line_start = False
            if not self.minify and self.depth:
                yield self.config.indent * self.depth
                self._last = " "
        if self._last and _needs_space(self._last, text[0]):
            yield " "
        yield text
        self._last = text[-1]

    def _newline(self) -> Chunks:
        yield self.config.newline
        self._line_start = True
        self._last = "\n"

    def _line(self, text: str = "") -> Chunks:
        yield from self._write(text)
        yield from self._newline()

    def _end(self, text: str) -> Chunks:
        """Write a statement terminator: inline when minified, ending the line otherwise."""
        if self.minify:
            yield from self._write(text)
        else:
            yield from self._line(text)

    def _token(self, minified: str, pretty: str) -> Chunks:
        yield from self._write(minified if self.minify else pretty)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _node(self, node: Node) -> Chunks:
        handler = self._handlers.get(getattr(node, "kind", None))
        if handler is None:
            raise UnsupportedNodeError(f"The node type {type(node).__name__} is not supported.")
        yield from handler(node)

    def _statement(self, node: Node | None) -> Chunks:
        if node is None:
            yield from self._end(";")
        else:
            yield from self._node(node)

    def _expression(self, node: Expression | None, owner: str, name: str, wrap: bool = False) -> Chunks:
        if node is None:
            raise ContractViolationError(f"{owner}.{name} is required.")
        if wrap:
            yield from self._write("(")
            yield from self._node(node)
            yield from self._write(")")
        else:
            yield from self._node(node)

    def _list_item(self, node: Expression | None, owner: str, name: str) -> Chunks:
        yield from self._expression(node, owner, name, wrap=node is not None and _wrap_in_list(node))

    def _operand(self, node: Expression | None, owner: str, name: str) -> Chunks:
        yield from self._expression(node, owner, name, wrap=node is not None and _wrap_operand(node))

    def _comma_list(self, nodes: list, owner: str, name: str) -> Chunks:
        for index, node in enumerate(nodes):
            if index:
                yield from self._token(",", ", ")
            yield from self._list_item(node, owner, name)

    def _params(self, params: list, owner: str) -> Chunks:
        yield from self._write("(")
        for index, param in enumerate(params):
            if index:
                yield from self._token(",", ", ")
            if not isinstance(param, Identifier):
                raise ContractViolationError(f"{owner}.params must hold identifiers.")
            yield from self._print_identifier(param)
        yield from self._token(")", ") ")

    # ------------------------------------------------------------------
    # Blocks and bodies
    # ------------------------------------------------------------------

    def _block(self, statements: list, spacer: bool = False, newline: bool = True) -> Chunks:
        """Write ``{...}``. ``newline`` controls whether a line break follows ``}``."""
        if spacer and not self.minify:
            yield from self._write(" ")

        if not statements:
            if newline and not self.minify:
                yield from self._line("{}")
            else:
                yield from self._write("{}")
            return

        if self.minify:
            yield from self._write("{")
        else:
            yield from self._line("{")
            self.depth += 1

        for statement in statements:
            yield from self._statement(statement)

        if not self.minify:
            self.depth -= 1
        if newline and not self.minify:
            yield from self._line("}")
        else:
            yield from self._write("}")

    def _body(self, body: Statement | None, newline: bool, before_else: bool = False) -> Generator[str, None, bool]:
        """Write the body of a compound statement and report whether it was a block.

        Args:
            body: The statement to write
            newline: Whether a block body ends its line
            before_else: Whether an ``else`` follows, so an open ``if`` must be closed off
        """
        if isinstance(body, BlockStatement):
            if self.minify and len(body.body) == 1 and self._collapsible(body.body[0], before_else):
                yield from self._statement(body.body[0])
                return False
            yield from self._block(body.body, spacer=True, newline=newline)
            return True

        if before_else and self._ends_with_open_if(body):
            yield from self._block([body], spacer=True, newline=newline)
            return True

        if not self.minify:
            yield from self._newline()
            self.depth += 1
        yield from self._statement(body)
        if not self.minify:
            self.depth -= 1
        return False

    def _collapsible(self, statement: Statement | None, before_else: bool) -> bool:
        """Whether a single block statement can stand without its braces."""
        if isinstance(statement, FunctionDeclaration):
            return False
        return not (before_else and self._ends_with_open_if(statement))

    def _ends_with_open_if(self, statement: Statement | None) -> bool:
        """Whether a following ``else`` would attach to an ``if`` nested in ``statement``."""
        while statement is not None:
            if isinstance(statement, IfStatement):
                if statement.alternate is None:
                    return True
                if self._fold_conditional(statement) is not None:
                    return False
                statement = statement.alternate
            elif isinstance(statement, (WhileStatement, WithStatement, ForStatement, ForInStatement, LabeledStatement)):
                statement = statement.body
            elif isinstance(statement, BlockStatement) and self.minify and len(statement.body) == 1:
                statement = statement.body[0]
            else:
                return False
        return False

    def _fold_conditional(self, node: IfStatement) -> ExpressionStatement | None:
        """The ``t?e1:e2;`` form of an if/else whose branches are single expression statements."""
        if not self.minify or node.test is None or node.alternate is None:
            return None
        consequent = _single_expression(node.consequent)
        alternate = _single_expression(node.alternate)
        if consequent is None or alternate is None:
            return None
        return ExpressionStatement(ConditionalExpression(node.test, consequent, alternate))

    # ------------------------------------------------------------------
    # Program and statements
    # ------------------------------------------------------------------

    def _print_program(self, node: Program) -> Chunks:
        for statement in node.body:
            yield from self._statement(statement)

    def _print_block_statement(self, node: BlockStatement) -> Chunks:
        yield from self._block(node.body)

    def _print_expression_statement(self, node: ExpressionStatement) -> Chunks:
        expression = node.expression
        yield from self._expression(expression, "ExpressionStatement", "expression", wrap=_starts_ambiguously(expression))
        yield from self._end(";")

    def _print_debugger_statement(self, node: DebuggerStatement) -> Chunks:
        yield from self._end("debugger;")

    def _print_with_statement(self, node: WithStatement) -> Chunks:
        yield from self._token("with(", "with (")
        yield from self._expression(node.object, "WithStatement", "object")
        yield from self._write(")")
        yield from self._body(node.body, newline=True)

    def _print_return_statement(self, node: ReturnStatement) -> Chunks:
        yield from self._write("return")
        if node.argument is not None:
            yield from self._write(" ")
            yield from self._expression(node.argument, "ReturnStatement", "argument")
        yield from self._end(";")

    def _print_labeled_statement(self, node: LabeledStatement) -> Chunks:
        yield from self._expression(node.label, "LabeledStatement", "label")
        yield from self._end(":")
        yield from self._statement(node.body)

    def _print_break_statement(self, node: BreakStatement) -> Chunks:
        yield from self._jump("break", node.label)

    def _print_continue_statement(self, node: ContinueStatement) -> Chunks:
        yield from self._jump("continue", node.label)

    def _jump(self, keyword: str, label: Identifier | None) -> Chunks:
        yield from self._write(keyword)
        if label is not None:
            yield from self._write(" ")
            yield from self._print_identifier(label)
        yield from self._end(";")

    def _print_if_statement(self, node: IfStatement) -> Chunks:
        folded = self._fold_conditional(node)
        if folded is not None:
            yield from self._print_expression_statement(folded)
            return

        yield from self._token("if(", "if (")
        yield from self._expression(node.test, "IfStatement", "test")
        yield from self._write(")")

        alternate = node.alternate
        has_else = alternate is not None
        is_block = yield from self._body(node.consequent, newline=not has_else, before_else=has_else)
        if not has_else:
            return

        if is_block and not self.minify:
            yield from self._write(" ")
        yield from self._write("else")

        if isinstance(alternate, BlockStatement):
            if self.minify and len(alternate.body) == 1 and self._collapsible(alternate.body[0], False):
                yield from self._statement(alternate.body[0])
                return
            yield from self._block(alternate.body, spacer=True)
            return

        if isinstance(alternate, IfStatement):
            # else if stays on one line
            yield from self._write(" ")
            yield from self._print_if_statement(alternate)
            return

        if not self.minify:
            yield from self._newline()
            self.depth += 1
        yield from self._statement(alternate)
        if not self.minify:
            self.depth -= 1

    def _print_switch_statement(self, node: SwitchStatement) -> Chunks:
        yield from self._token("switch(", "switch (")
        yield from self._expression(node.discriminant, "SwitchStatement", "discriminant")
        yield from self._token("){", ") {")
        if not self.minify:
            yield from self._newline()
            self.depth += 1
        for case in node.cases:
            if case is None:
                raise ContractViolationError("SwitchStatement.cases cannot hold None.")
            yield from self._print_switch_case(case)
        if self.minify:
            yield from self._write("}")
        else:
            self.depth -= 1
            yield from self._line("}")

    def _print_switch_case(self, node: SwitchCase) -> Chunks:
        if node.test is not None:
            yield from self._write("case ")
            yield from self._expression(node.test, "SwitchCase", "test")
        else:
            yield from self._write("default")

        if self.minify:
            yield from self._write(":")
        else:
            yield from self._line(":")
            self.depth += 1

        for statement in node.body:
            yield from self._statement(statement)

        if not self.minify:
            self.depth -= 1

    def _print_throw_statement(self, node: ThrowStatement) -> Chunks:
        yield from self._write("throw ")
        yield from self._expression(node.argument, "ThrowStatement", "argument")
        yield from self._end(";")

    def _print_try_statement(self, node: TryStatement) -> Chunks:
        node.validate()
        has_finalizer = node.has_finalizer

        yield from self._write("try")
        yield from self._block(node.block.body, spacer=True, newline=False)

        if node.handler is not None:
            if not self.minify:
                yield from self._write(" ")
            yield from self._catch(node.handler, newline=not has_finalizer)

        if has_finalizer:
            yield from self._token("finally", " finally")
            yield from self._block(node.finalizer.body, spacer=True)

    def _print_catch_clause(self, node: CatchClause) -> Chunks:
        yield from self._catch(node, newline=True)

    def _catch(self, node: CatchClause, newline: bool) -> Chunks:
        yield from self._token("catch(", "catch (")
        yield from self._expression(node.param, "CatchClause", "param")
        yield from self._write(")")
        yield from self._block(node.body, spacer=True, newline=newline)

    def _print_while_statement(self, node: WhileStatement) -> Chunks:
        yield from self._token("while(", "while (")
        yield from self._expression(node.test, "WhileStatement", "test")
        yield from self._write(")")
        yield from self._body(node.body, newline=True)

    def _print_do_while_statement(self, node: DoWhileStatement) -> Chunks:
        yield from self._write("do")
        is_block = yield from self._body(node.body, newline=False)
        if self.minify:
            yield from self._write("while(")
        elif is_block:
            yield from self._write(" while (")
        else:
            yield from self._write("while (")
        yield from self._expression(node.test, "DoWhileStatement", "test")
        yield from self._end(");")

    def _print_for_statement(self, node: ForStatement) -> Chunks:
        yield from self._token("for(", "for (")

        init = node.init
        if init.is_first:
            yield from self._inline_declaration(init.first_value, "ForStatement")
        elif init.is_second:
            yield from self._expression(init.second_value, "ForStatement", "init")

        yield from self._token(";", "; ")
        if node.test is not None:
            yield from self._expression(node.test, "ForStatement", "test")
        yield from self._token(";", "; ")
        if node.update is not None:
            yield from self._expression(node.update, "ForStatement", "update")
        yield from self._write(")")
        yield from self._body(node.body, newline=True)

    def _print_for_in_statement(self, node: ForInStatement) -> Chunks:
        yield from self._token("for(", "for (")

        left = node.left
        if left.is_first:
            declaration = left.first_value
            if len(declaration.declarations) != 1:
                raise ContractViolationError("ForInStatement.left must declare exactly one variable.")
            yield from self._inline_declaration(declaration, "ForInStatement")
        elif left.is_second:
            yield from self._expression(left.second_value, "ForInStatement", "left")
        else:
            raise ContractViolationError("ForInStatement.left is required.")

        yield from self._write(" in ")
        yield from self._expression(node.right, "ForInStatement", "right")
        yield from self._write(")")
        yield from self._body(node.body, newline=True)

    def _inline_declaration(self, node: VariableDeclaration, owner: str) -> Chunks:
        """A declaration inside a for header: all declarators on one line."""
        if not node.declarations:
            raise ContractViolationError(f"{owner} declaration has no declarators.")
        yield from self._write(f"{node.declaration_kind.value} ")
        for index, declarator in enumerate(node.declarations):
            if index:
                yield from self._token(",", ", ")
            yield from self._print_variable_declarator(declarator)

    def _print_function_declaration(self, node: FunctionDeclaration) -> Chunks:
        yield from self._write("function ")
        yield from self._expression(node.id, "FunctionDeclaration", "id")
        yield from self._params(node.params, "FunctionDeclaration")
        yield from self._block(node.body)

    def _print_variable_declaration(self, node: VariableDeclaration) -> Chunks:
        if not node.declarations:
            raise ContractViolationError("VariableDeclaration has no declarators.")
        yield from self._write(f"{node.declaration_kind.value} ")
        if not self.minify:
            self.depth += 1
        for index, declarator in enumerate(node.declarations):
            if index:
                yield from self._end(",")
            yield from self._print_variable_declarator(declarator)
        if not self.minify:
            self.depth -= 1
        yield from self._end(";")

    def _print_variable_declarator(self, node: VariableDeclarator) -> Chunks:
        if node is None:
            raise ContractViolationError("VariableDeclaration.declarations cannot hold None.")
        yield from self._expression(node.id, "VariableDeclarator", "id")
        if node.init is not None:
            yield from self._token("=", " = ")
            yield from self._list_item(node.init, "VariableDeclarator", "init")

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def _print_identifier(self, node: Identifier) -> Chunks:
        yield from self._write(node.name)

    def _print_literal(self, node: Literal) -> Chunks:
        value = node.value
        if value is None:
            yield from self._write("null")
        elif isinstance(value, bool):
            yield from self._write("true" if value else "false")
        elif isinstance(value, str):
            yield from self._write(escape_string(value))
        elif isinstance(value, Regex):
            yield from self._write(format_regex(value))
        elif isinstance(value, (int, float, Decimal)):
            yield from self._write(format_number(value))
        else:
            raise UnsupportedNodeError(f"The literal value type {type(value).__name__} is not supported.")

    def _print_this_expression(self, node: ThisExpression) -> Chunks:
        yield from self._write("this")

    def _print_array_expression(self, node: ArrayExpression) -> Chunks:
        elements = node.elements
        if not elements:
            yield from self._write("[]")
            return

        if self.minify:
            yield from self._write("[")
        else:
            yield from self._line("[")
            self.depth += 1

        for index, element in enumerate(elements):
            if index:
                yield from self._end(",")
            if element is not None:
                yield from self._list_item(element, "ArrayExpression", "elements")

        if elements[-1] is None:
            # A trailing hole needs its own comma
            yield from self._write(",")

        if self.minify:
            yield from self._write("]")
        else:
            self.depth -= 1
            yield from self._newline()
            yield from self._write("]")

    def _print_object_expression(self, node: ObjectExpression) -> Chunks:
        if not node.properties:
            yield from self._write("{}")
            return

        if self.minify:
            yield from self._write("{")
        else:
            yield from self._line("{")
            self.depth += 1

        for index, prop in enumerate(node.properties):
            if index:
                yield from self._end(",")
            if prop is None:
                raise ContractViolationError("ObjectExpression.properties cannot hold None.")
            yield from self._print_property(prop)

        if self.minify:
            yield from self._write("}")
        else:
            self.depth -= 1
            yield from self._newline()
            yield from self._write("}")

    def _print_property(self, node: Property) -> Chunks:
        if node.key.is_empty:
            raise ContractViolationError("Property.key is required.")

        if node.property_kind is PropertyKind.INIT:
            yield from self._node(node.key.value)
            yield from self._token(":", ": ")
            yield from self._list_item(node.value, "Property", "value")
            return

        # Accessors print as get name() {...} / set name(v) {...}
        function = node.value
        if not isinstance(function, FunctionExpression):
            raise ContractViolationError(f"A {node.property_kind.value} Property needs a FunctionExpression value.")
        yield from self._write(f"{node.property_kind.value} ")
        yield from self._node(node.key.value)
        yield from self._params(function.params, "Property")
        yield from self._block(function.body, newline=False)

    def _print_function_expression(self, node: FunctionExpression) -> Chunks:
        yield from self._write("function")
        if node.id is not None:
            yield from self._write(" ")
            yield from self._print_identifier(node.id)
        yield from self._params(node.params, "FunctionExpression")
        yield from self._block(node.body, newline=False)

    def _print_unary_expression(self, node: UnaryExpression) -> Chunks:
        operator = node.operator
        if operator.prefix:
            yield from self._write(f"{operator.token} " if operator.is_keyword else operator.token)
            yield from self._operand(node.argument, "UnaryExpression", "argument")
        else:
            yield from self._operand(node.argument, "UnaryExpression", "argument")
            yield from self._write(operator.token)

    def _print_binary_expression(self, node: BinaryExpression) -> Chunks:
        operator = node.operator
        if operator.is_keyword or not self.minify:
            token = f" {operator.token} "
        else:
            token = operator.token

        yield from self._write("(")
        yield from self._operand(node.left, "BinaryExpression", "left")
        for operand in node.right:
            yield from self._write(token)
            yield from self._operand(operand, "BinaryExpression", "right")
        yield from self._write(")")

    def _print_member_expression(self, node: MemberExpression) -> Chunks:
        wrap = node.object is not None and _wrap_member_object(node.object, node.computed)
        yield from self._expression(node.object, "MemberExpression", "object", wrap=wrap)
        for index in node.indices:
            if node.computed:
                yield from self._write("[")
                yield from self._expression(index, "MemberExpression", "indices")
                yield from self._write("]")
            else:
                if not isinstance(index, Identifier):
                    raise ContractViolationError("A non-computed MemberExpression needs identifier indices.")
                yield from self._write(".")
                yield from self._print_identifier(index)

    def _print_conditional_expression(self, node: ConditionalExpression) -> Chunks:
        yield from self._operand(node.test, "ConditionalExpression", "test")
        yield from self._token("?", " ? ")
        yield from self._list_item(node.consequent, "ConditionalExpression", "consequent")
        yield from self._token(":", " : ")
        yield from self._list_item(node.alternate, "ConditionalExpression", "alternate")

    def _print_call_expression(self, node: CallExpression) -> Chunks:
        callee = node.callee
        yield from self._expression(callee, "CallExpression", "callee", wrap=callee is not None and _wrap_callee(callee))
        yield from self._arguments(node.arguments, "CallExpression")

    def _print_new_expression(self, node: NewExpression) -> Chunks:
        callee = node.callee
        yield from self._write("new ")
        yield from self._expression(callee, "NewExpression", "callee", wrap=callee is not None and _wrap_new_callee(callee))
        yield from self._arguments(node.arguments, "NewExpression")

    def _arguments(self, arguments: list, owner: str) -> Chunks:
        yield from self._write("(")
        yield from self._comma_list(arguments, owner, "arguments")
        yield from self._write(")")

    def _print_sequence_expression(self, node: SequenceExpression) -> Chunks:
        for index, expression in enumerate(node.expressions):
            if index:
                yield from self._token(",", ", ")
            yield from self._expression(expression, "SequenceExpression", "expressions")
