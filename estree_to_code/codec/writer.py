"""
ESTree JSON writer.

Converts nodes into plain JSON values ready for ``json.dumps``. The writer
expands the model's compressions back into canonical ESTree nesting:

- BinaryExpression ``a + [b, c]`` becomes ``a + (b + c)`` (right fold).
- MemberExpression ``a[b, c]`` becomes ``(a.b).c`` (left nesting), each level
  stamped with the chain's shared ``computed`` flag.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Callable
from decimal import Decimal
from typing import Any

from ..errors import ContractViolationError, UnsupportedNodeError
from ..model.discriminated import Discriminated
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
from ..model.operators import Regex
from .tables import BINARY_WRITE, UNARY_WRITE

logger = logging.getLogger(__name__)

JsonObject = dict[str, Any]

EMPTY_STATEMENT: JsonObject = {"type": "EmptyStatement"}


class NodeWriter:
    """Writes nodes as ESTree JSON values."""

    def __init__(self):
        self._writers: dict[NodeKind, Callable[[Any], JsonObject]] = {
            NodeKind.PROGRAM: self._write_program,
            NodeKind.IDENTIFIER: self._write_identifier,
            NodeKind.LITERAL: self._write_literal,
            NodeKind.THIS_EXPRESSION: self._write_this_expression,
            NodeKind.ARRAY_EXPRESSION: self._write_array_expression,
            NodeKind.OBJECT_EXPRESSION: self._write_object_expression,
            NodeKind.FUNCTION_EXPRESSION: self._write_function_expression,
            NodeKind.UNARY_EXPRESSION: self._write_unary_expression,
            NodeKind.BINARY_EXPRESSION: self._write_binary_expression,
            NodeKind.MEMBER_EXPRESSION: self._write_member_expression,
            NodeKind.CONDITIONAL_EXPRESSION: self._write_conditional_expression,
            NodeKind.CALL_EXPRESSION: self._write_call_expression,
            NodeKind.NEW_EXPRESSION: self._write_new_expression,
            NodeKind.SEQUENCE_EXPRESSION: self._write_sequence_expression,
            NodeKind.BLOCK_STATEMENT: self._write_block_statement,
            NodeKind.EXPRESSION_STATEMENT: self._write_expression_statement,
            NodeKind.DEBUGGER_STATEMENT: self._write_debugger_statement,
            NodeKind.WITH_STATEMENT: self._write_with_statement,
            NodeKind.RETURN_STATEMENT: self._write_return_statement,
            NodeKind.LABELED_STATEMENT: self._write_labeled_statement,
            NodeKind.BREAK_STATEMENT: self._write_break_statement,
            NodeKind.CONTINUE_STATEMENT: self._write_continue_statement,
            NodeKind.IF_STATEMENT: self._write_if_statement,
            NodeKind.SWITCH_STATEMENT: self._write_switch_statement,
            NodeKind.SWITCH_CASE: self._write_switch_case,
            NodeKind.THROW_STATEMENT: self._write_throw_statement,
            NodeKind.TRY_STATEMENT: self._write_try_statement,
            NodeKind.CATCH_CLAUSE: self._write_catch_clause,
            NodeKind.WHILE_STATEMENT: self._write_while_statement,
            NodeKind.DO_WHILE_STATEMENT: self._write_do_while_statement,
            NodeKind.FOR_STATEMENT: self._write_for_statement,
            NodeKind.FOR_IN_STATEMENT: self._write_for_in_statement,
            NodeKind.FUNCTION_DECLARATION: self._write_function_declaration,
            NodeKind.VARIABLE_DECLARATION: self._write_variable_declaration,
            NodeKind.VARIABLE_DECLARATOR: self._write_variable_declarator,
            NodeKind.PROPERTY: self._write_property,
        }

    def write(self, node: Node | None) -> JsonObject | None:
        """Write a node (or None) as a JSON value.

        Raises:
            ContractViolationError: If a required field is None
            UnsupportedNodeError: If the node kind or a literal value has no JSON form
        """
        if node is None:
            return None
        writer = self._writers.get(getattr(node, "kind", None))
        if writer is None:
            raise UnsupportedNodeError(f"The node type {type(node).__name__} is not supported.")
        return writer(node)

    # ------------------------------------------------------------------
    # Slot helpers
    # ------------------------------------------------------------------

    def _required(self, node: Node | None, owner: str, name: str) -> JsonObject:
        if node is None:
            raise ContractViolationError(f"{owner}.{name} is required.")
        return self.write(node)

    def _statement(self, node: Node | None) -> JsonObject:
        """An absent statement writes the EmptyStatement sentinel."""
        if node is None:
            return dict(EMPTY_STATEMENT)
        return self.write(node)

    def _statements(self, statements: list) -> list[JsonObject]:
        return [self._statement(statement) for statement in statements]

    def _list(self, nodes: list, owner: str, name: str) -> list[JsonObject]:
        return [self._required(node, owner, name) for node in nodes]

    def _block(self, statements: list) -> JsonObject:
        return {"type": "BlockStatement", "body": self._statements(statements)}

    def _discriminated(self, value: Discriminated) -> JsonObject | None:
        return self.write(value.value)

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def _write_identifier(self, node: Identifier) -> JsonObject:
        return {"type": "Identifier", "name": node.name}

    def _write_literal(self, node: Literal) -> JsonObject:
        value = node.value
        if isinstance(value, Regex):
            return {
                "type": "Literal",
                "value": None,
                "regex": {"pattern": value.pattern, "flags": value.flags.to_string()},
            }
        return {"type": "Literal", "value": _json_scalar(value)}

    def _write_this_expression(self, node: ThisExpression) -> JsonObject:
        return {"type": "ThisExpression"}

    def _write_array_expression(self, node: ArrayExpression) -> JsonObject:
        return {"type": "ArrayExpression", "elements": [self.write(element) for element in node.elements]}

    def _write_object_expression(self, node: ObjectExpression) -> JsonObject:
        return {"type": "ObjectExpression", "properties": self._list(node.properties, "ObjectExpression", "properties")}

    def _write_property(self, node: Property) -> JsonObject:
        if node.key.is_empty:
            raise ContractViolationError("Property.key is required.")
        return {
            "type": "Property",
            "key": self._discriminated(node.key),
            "value": self._required(node.value, "Property", "value"),
            "kind": node.property_kind.value,
        }

    def _write_function_expression(self, node: FunctionExpression) -> JsonObject:
        return {
            "type": "FunctionExpression",
            "id": self.write(node.id),
            "params": self._list(node.params, "FunctionExpression", "params"),
            "body": self._block(node.body),
        }

    def _write_unary_expression(self, node: UnaryExpression) -> JsonObject:
        node_type, token, prefix = UNARY_WRITE[node.operator]
        return {
            "type": node_type,
            "operator": token,
            "prefix": prefix,
            "argument": self._required(node.argument, "UnaryExpression", "argument"),
        }

    def _write_binary_expression(self, node: BinaryExpression) -> JsonObject:
        left = self._required(node.left, "BinaryExpression", "left")
        if not node.right:
            return left

        node_type, token = BINARY_WRITE[node.operator]
        operands = self._list(node.right, "BinaryExpression", "right")

        # Right fold: a op (b op (c op d))
        folded = operands[-1]
        for operand in reversed(operands[:-1]):
            folded = {"type": node_type, "operator": token, "left": operand, "right": folded}
        return {"type": node_type, "operator": token, "left": left, "right": folded}

    def _write_member_expression(self, node: MemberExpression) -> JsonObject:
        result = self._required(node.object, "MemberExpression", "object")
        for index in node.indices:
            result = {
                "type": "MemberExpression",
                "object": result,
                "property": self._required(index, "MemberExpression", "indices"),
                "computed": node.computed,
            }
        return result

    def _write_conditional_expression(self, node: ConditionalExpression) -> JsonObject:
        return {
            "type": "ConditionalExpression",
            "test": self._required(node.test, "ConditionalExpression", "test"),
            "consequent": self._required(node.consequent, "ConditionalExpression", "consequent"),
            "alternate": self._required(node.alternate, "ConditionalExpression", "alternate"),
        }

    def _write_call_expression(self, node: CallExpression) -> JsonObject:
        return {
            "type": "CallExpression",
            "callee": self._required(node.callee, "CallExpression", "callee"),
            "arguments": self._list(node.arguments, "CallExpression", "arguments"),
        }

    def _write_new_expression(self, node: NewExpression) -> JsonObject:
        return {
            "type": "NewExpression",
            "callee": self._required(node.callee, "NewExpression", "callee"),
            "arguments": self._list(node.arguments, "NewExpression", "arguments"),
        }

    def _write_sequence_expression(self, node: SequenceExpression) -> JsonObject:
        return {
            "type": "SequenceExpression",
            "expressions": self._list(node.expressions, "SequenceExpression", "expressions"),
        }

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def _write_program(self, node: Program) -> JsonObject:
        return {"type": "Program", "body": self._statements(node.body)}

    def _write_block_statement(self, node: BlockStatement) -> JsonObject:
        return self._block(node.body)

    def _write_expression_statement(self, node: ExpressionStatement) -> JsonObject:
        result = {
            "type": "ExpressionStatement",
            "expression": self._required(node.expression, "ExpressionStatement", "expression"),
        }
        if node.directive is not None:
            result["directive"] = node.directive
        return result

    def _write_debugger_statement(self, node: DebuggerStatement) -> JsonObject:
        return {"type": "DebuggerStatement"}

    def _write_with_statement(self, node: WithStatement) -> JsonObject:
        return {
            "type": "WithStatement",
            "object": self._required(node.object, "WithStatement", "object"),
            "body": self._statement(node.body),
        }

    def _write_return_statement(self, node: ReturnStatement) -> JsonObject:
        return {"type": "ReturnStatement", "argument": self.write(node.argument)}

    def _write_labeled_statement(self, node: LabeledStatement) -> JsonObject:
        return {
            "type": "LabeledStatement",
            "label": self._required(node.label, "LabeledStatement", "label"),
            "body": self._statement(node.body),
        }

    def _write_break_statement(self, node: BreakStatement) -> JsonObject:
        return {"type": "BreakStatement", "label": self.write(node.label)}

    def _write_continue_statement(self, node: ContinueStatement) -> JsonObject:
        return {"type": "ContinueStatement", "label": self.write(node.label)}

    def _write_if_statement(self, node: IfStatement) -> JsonObject:
        return {
            "type": "IfStatement",
            "test": self._required(node.test, "IfStatement", "test"),
            "consequent": self._statement(node.consequent),
            "alternate": self.write(node.alternate),
        }

    def _write_switch_statement(self, node: SwitchStatement) -> JsonObject:
        return {
            "type": "SwitchStatement",
            "discriminant": self._required(node.discriminant, "SwitchStatement", "discriminant"),
            "cases": self._list(node.cases, "SwitchStatement", "cases"),
        }

    def _write_switch_case(self, node: SwitchCase) -> JsonObject:
        return {"type": "SwitchCase", "test": self.write(node.test), "consequent": self._statements(node.body)}

    def _write_throw_statement(self, node: ThrowStatement) -> JsonObject:
        return {"type": "ThrowStatement", "argument": self._required(node.argument, "ThrowStatement", "argument")}

    def _write_try_statement(self, node: TryStatement) -> JsonObject:
        node.validate()
        return {
            "type": "TryStatement",
            "block": self._block(node.block.body),
            "handler": self.write(node.handler),
            "finalizer": self._block(node.finalizer.body) if node.has_finalizer else None,
        }

    def _write_catch_clause(self, node: CatchClause) -> JsonObject:
        return {
            "type": "CatchClause",
            "param": self._required(node.param, "CatchClause", "param"),
            "body": self._block(node.body),
        }

    def _write_while_statement(self, node: WhileStatement) -> JsonObject:
        return {
            "type": "WhileStatement",
            "test": self._required(node.test, "WhileStatement", "test"),
            "body": self._statement(node.body),
        }

    def _write_do_while_statement(self, node: DoWhileStatement) -> JsonObject:
        return {
            "type": "DoWhileStatement",
            "body": self._statement(node.body),
            "test": self._required(node.test, "DoWhileStatement", "test"),
        }

    def _write_for_statement(self, node: ForStatement) -> JsonObject:
        return {
            "type": "ForStatement",
            "init": self._discriminated(node.init),
            "test": self.write(node.test),
            "update": self.write(node.update),
            "body": self._statement(node.body),
        }

    def _write_for_in_statement(self, node: ForInStatement) -> JsonObject:
        if node.left.is_empty:
            raise ContractViolationError("ForInStatement.left is required.")
        return {
            "type": "ForInStatement",
            "left": self._discriminated(node.left),
            "right": self._required(node.right, "ForInStatement", "right"),
            "body": self._statement(node.body),
        }

    def _write_function_declaration(self, node: FunctionDeclaration) -> JsonObject:
        return {
            "type": "FunctionDeclaration",
            "id": self._required(node.id, "FunctionDeclaration", "id"),
            "params": self._list(node.params, "FunctionDeclaration", "params"),
            "body": self._block(node.body),
        }

    def _write_variable_declaration(self, node: VariableDeclaration) -> JsonObject:
        return {
            "type": "VariableDeclaration",
            "declarations": self._list(node.declarations, "VariableDeclaration", "declarations"),
            "kind": node.declaration_kind.value,
        }

    def _write_variable_declarator(self, node: VariableDeclarator) -> JsonObject:
        return {
            "type": "VariableDeclarator",
            "id": self._required(node.id, "VariableDeclarator", "id"),
            "init": self.write(node.init),
        }


def _json_scalar(value: Any) -> Any:
    """Map a literal value onto a JSON scalar."""
    if isinstance(value, float) and not math.isfinite(value):
        raise UnsupportedNodeError(f"The literal value {value!r} has no JSON form.")
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise UnsupportedNodeError(f"The literal value {value} has no JSON form.")
        # JSON has a single number kind
        return float(value)
    raise UnsupportedNodeError(f"The literal value type {type(value).__name__} is not supported.")


_writer = NodeWriter()


def write_node(node: Node | None) -> JsonObject | None:
    """Write a node as a JSON-compatible value."""
    result = _writer.write(node)
    logger.debug("Wrote %s", node.kind.value if node is not None else "null")
    return result


def write_json(node: Node | None, indent: int | None = None) -> str:
    """Write a node as ESTree JSON text."""
    return json.dumps(write_node(node), indent=indent, ensure_ascii=False, allow_nan=False)
