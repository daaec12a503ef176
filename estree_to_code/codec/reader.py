"""
ESTree JSON reader.

Converts JSON values (as produced by the standard ``json`` module) into the
node model. Reading is strict: every field a node kind needs is checked for
presence and JSON kind before it is used, and the first violation aborts the
whole read.

Readers support in-place update. Given an existing node of the matching class,
they repopulate it instead of allocating, and list fields are reconciled slot by
slot so node identity survives repeated reads of similar input. ``read_node``
validates the whole value before repopulating, so a failed read leaves the
existing tree unchanged; ``NodeReader.read`` mutates as it goes.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from ..errors import ShapeViolationError, UnknownDiscriminatorError
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
from ..model.operators import REGEX_FLAG_CHARS, Regex, RegexFlags, VariableKind
from .tables import BINARY_READ, PROPERTY_KIND_READ, UNARY_EXPRESSION, UNARY_READ

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Node)

_REGEX_FLAGS = dict(REGEX_FLAG_CHARS)


def _is_kind(value: Any, kind: str) -> bool:
    match kind:
        case "object":
            return isinstance(value, dict)
        case "array":
            return isinstance(value, list)
        case "string":
            return isinstance(value, str)
        case "boolean":
            return isinstance(value, bool)
        case "number":
            return isinstance(value, (int, float)) and not isinstance(value, bool)
        case "null":
            return value is None
    raise ValueError(f"Unknown JSON kind: {kind}")


def _reuse(existing: Node | None, cls: type[N]) -> N:
    """Return ``existing`` when it is exactly ``cls``, otherwise a fresh instance."""
    if type(existing) is cls:
        return existing
    return cls()


def parse_regex_flags(flags: str) -> RegexFlags:
    """Decode a regex flag string one character at a time.

    Raises:
        UnknownDiscriminatorError: On any character outside ``gimuy``
    """
    result = RegexFlags.NONE
    for char in flags:
        flag = _REGEX_FLAGS.get(char)
        if flag is None:
            raise UnknownDiscriminatorError(f"Regex flag {char} is not supported.", char)
        result |= flag
    return result


class NodeReader:
    """Reads ESTree JSON values into nodes."""

    def __init__(self):
        self._readers: dict[str, Callable[[dict, Any], Node | None]] = {
            "ArrayExpression": self._read_array_expression,
            "AssignmentExpression": self._read_binary_expression,
            "BinaryExpression": self._read_binary_expression,
            "LogicalExpression": self._read_binary_expression,
            "BlockStatement": self._read_block_statement,
            "BreakStatement": self._read_break_statement,
            "CallExpression": self._read_call_expression,
            "CatchClause": self._read_catch_clause,
            "ConditionalExpression": self._read_conditional_expression,
            "ContinueStatement": self._read_continue_statement,
            "DebuggerStatement": self._read_debugger_statement,
            "DoWhileStatement": self._read_do_while_statement,
            "EmptyStatement": self._read_empty_statement,
            "ExpressionStatement": self._read_expression_statement,
            "ForInStatement": self._read_for_in_statement,
            "ForStatement": self._read_for_statement,
            "FunctionDeclaration": self._read_function_declaration,
            "FunctionExpression": self._read_function_expression,
            "Identifier": self._read_identifier,
            "IfStatement": self._read_if_statement,
            "LabeledStatement": self._read_labeled_statement,
            "Literal": self._read_literal,
            "MemberExpression": self._read_member_expression,
            "NewExpression": self._read_new_expression,
            "ObjectExpression": self._read_object_expression,
            "Program": self._read_program,
            "Property": self._read_property,
            "ReturnStatement": self._read_return_statement,
            "SequenceExpression": self._read_sequence_expression,
            "SwitchCase": self._read_switch_case,
            "SwitchStatement": self._read_switch_statement,
            "ThisExpression": self._read_this_expression,
            "ThrowStatement": self._read_throw_statement,
            "TryStatement": self._read_try_statement,
            "UnaryExpression": self._read_unary_expression,
            "UpdateExpression": self._read_unary_expression,
            "VariableDeclaration": self._read_variable_declaration,
            "VariableDeclarator": self._read_variable_declarator,
            "WhileStatement": self._read_while_statement,
            "WithStatement": self._read_with_statement,
        }

    @property
    def supported_types(self) -> frozenset[str]:
        return frozenset(self._readers)

    def read(self, value: Any, existing: Node | None = None) -> Node | None:
        """Read a JSON value into a node.

        Args:
            value: A JSON object with a string ``type``, or None
            existing: Optional node to repopulate in place

        Returns:
            The node read, or None for ``null`` and ``EmptyStatement``

        Raises:
            ShapeViolationError: If the value is not a well-formed node
            UnknownDiscriminatorError: If the ``type`` or an operator is unknown
        """
        if value is None:
            return None
        if not isinstance(value, dict):
            raise ShapeViolationError("ESTree nodes must be null or JSON objects.")
        node_type = value.get("type")
        if not isinstance(node_type, str):
            raise ShapeViolationError("ESTree nodes must contain a type property of type string.")
        reader = self._readers.get(node_type)
        if reader is None:
            raise UnknownDiscriminatorError(f"The ESTree node type {node_type} is not supported.", node_type)
        return reader(value, existing)

    # ------------------------------------------------------------------
    # Field helpers
    # ------------------------------------------------------------------

    def _field(self, obj: dict, node_type: str, name: str, *kinds: str) -> Any:
        """Fetch a field after checking its presence and JSON kind."""
        if name not in obj or not any(_is_kind(obj[name], kind) for kind in kinds):
            raise ShapeViolationError(
                f"{node_type} must have property {name} of type {' or '.join(kinds)}.",
                node_type,
                name,
            )
        return obj[name]

    def _node(
        self,
        value: Any,
        existing: Node | None,
        node_type: str,
        name: str,
        category: type[N],
        optional: bool = False,
    ) -> N | None:
        """Read a child node and check that it belongs to ``category``."""
        node = self.read(value, existing)
        if node is None:
            if value is not None and category is not Statement:
                raise ShapeViolationError(f"{node_type} property {name} cannot be an EmptyStatement.", node_type, name)
            if value is None and not optional:
                raise ShapeViolationError(f"{node_type} property {name} cannot be null.", node_type, name)
            return None
        if not isinstance(node, category):
            raise ShapeViolationError(
                f"{node_type} must have property {name} of type {category.__name__}, not {node.kind.value}.",
                node_type,
                name,
            )
        return node

    def _nodes(
        self,
        items: list,
        target: list,
        node_type: str,
        name: str,
        category: type[Node],
        allow_null: bool = False,
    ) -> None:
        """Reconcile ``target`` with ``items``: overwrite, append, then truncate."""
        for index, item in enumerate(items):
            if item is None and not allow_null:
                raise ShapeViolationError(f"{node_type} property {name} elements cannot be null.", node_type, name)
            if index < len(target):
                target[index] = self._node(item, target[index], node_type, name, category, allow_null)
            else:
                target.append(self._node(item, None, node_type, name, category, allow_null))
        del target[len(items) :]

    def _block_statements(self, obj: dict, node_type: str, name: str) -> list:
        """Fetch the statement array of a field that must hold a BlockStatement."""
        block = obj.get(name)
        if not isinstance(block, dict) or block.get("type") != "BlockStatement" or not isinstance(block.get("body"), list):
            raise ShapeViolationError(
                f"{node_type} must have property {name} of type BlockStatement with a body array.",
                node_type,
                name,
            )
        return block["body"]

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def _read_array_expression(self, obj: dict, existing: Any) -> ArrayExpression:
        elements = self._field(obj, "ArrayExpression", "elements", "array")
        node = _reuse(existing, ArrayExpression)
        self._nodes(elements, node.elements, "ArrayExpression", "elements", Expression, allow_null=True)
        return node

    def _read_binary_expression(self, obj: dict, existing: Any) -> BinaryExpression:
        node_type = obj["type"]
        left = self._field(obj, node_type, "left", "object")
        token = self._field(obj, node_type, "operator", "string")
        right = self._field(obj, node_type, "right", "object")

        operator = BINARY_READ.get((node_type, token))
        if operator is None:
            raise UnknownDiscriminatorError(f"The {node_type} operator {token} is not supported.", token)

        node = _reuse(existing, BinaryExpression)
        left_node = self._node(left, node.left, node_type, "left", Expression)
        right_node = self._node(right, None, node_type, "right", Expression)

        node.operator = operator
        node.left = left_node
        node.right.clear()
        node.add(right_node)
        return node

    def _read_call_expression(self, obj: dict, existing: Any) -> CallExpression:
        return self._read_call_like(obj, existing, CallExpression, "CallExpression")

    def _read_new_expression(self, obj: dict, existing: Any) -> NewExpression:
        return self._read_call_like(obj, existing, NewExpression, "NewExpression")

    def _read_call_like(self, obj: dict, existing: Any, cls: type[N], node_type: str) -> N:
        callee = self._field(obj, node_type, "callee", "object")
        arguments = self._field(obj, node_type, "arguments", "array")
        node = _reuse(existing, cls)
        node.callee = self._node(callee, node.callee, node_type, "callee", Expression)
        self._nodes(arguments, node.arguments, node_type, "arguments", Expression)
        return node

    def _read_conditional_expression(self, obj: dict, existing: Any) -> ConditionalExpression:
        test = self._field(obj, "ConditionalExpression", "test", "object")
        consequent = self._field(obj, "ConditionalExpression", "consequent", "object")
        alternate = self._field(obj, "ConditionalExpression", "alternate", "object")
        node = _reuse(existing, ConditionalExpression)
        node.test = self._node(test, node.test, "ConditionalExpression", "test", Expression)
        node.consequent = self._node(consequent, node.consequent, "ConditionalExpression", "consequent", Expression)
        node.alternate = self._node(alternate, node.alternate, "ConditionalExpression", "alternate", Expression)
        return node

    def _read_function_expression(self, obj: dict, existing: Any) -> FunctionExpression:
        identifier = self._field(obj, "FunctionExpression", "id", "object", "null")
        params = self._field(obj, "FunctionExpression", "params", "array")
        body = self._block_statements(obj, "FunctionExpression", "body")
        node = _reuse(existing, FunctionExpression)
        node.id = self._node(identifier, node.id, "FunctionExpression", "id", Identifier, optional=True)
        self._nodes(params, node.params, "FunctionExpression", "params", Identifier)
        self._nodes(body, node.body, "FunctionExpression", "body", Statement)
        return node

    def _read_identifier(self, obj: dict, existing: Any) -> Identifier:
        name = self._field(obj, "Identifier", "name", "string")
        node = _reuse(existing, Identifier)
        node.name = name
        return node

    def _read_literal(self, obj: dict, existing: Any) -> Literal:
        if "regex" in obj:
            regex = self._field(obj, "Literal", "regex", "object")
            pattern = self._field(regex, "Literal.regex", "pattern", "string")
            flags = self._field(regex, "Literal.regex", "flags", "string")
            node = _reuse(existing, Literal)
            node.value = Regex(pattern, parse_regex_flags(flags))
            return node

        value = self._field(obj, "Literal", "value", "null", "string", "boolean", "number")
        node = _reuse(existing, Literal)
        node.value = value
        return node

    def _read_member_expression(self, obj: dict, existing: Any) -> MemberExpression:
        computed = self._field(obj, "MemberExpression", "computed", "boolean")
        target = self._field(obj, "MemberExpression", "object", "object")
        prop = self._field(obj, "MemberExpression", "property", "object")

        node = _reuse(existing, MemberExpression)
        object_node = self._node(target, node.object, "MemberExpression", "object", Expression)
        property_node = self._node(prop, None, "MemberExpression", "property", Expression)

        node.computed = computed
        if isinstance(object_node, MemberExpression) and object_node.computed == computed and object_node.indices:
            # Fold a nested chain with the same access style back into one node
            node.object = object_node.object
            node.indices[:] = [*object_node.indices, property_node]
        else:
            node.object = object_node
            node.indices[:] = [property_node]
        return node

    def _read_object_expression(self, obj: dict, existing: Any) -> ObjectExpression:
        properties = self._field(obj, "ObjectExpression", "properties", "array")
        node = _reuse(existing, ObjectExpression)
        self._nodes(properties, node.properties, "ObjectExpression", "properties", Property)
        return node

    def _read_property(self, obj: dict, existing: Any) -> Property:
        kind = self._field(obj, "Property", "kind", "string")
        key = self._field(obj, "Property", "key", "object")
        value = self._field(obj, "Property", "value", "object")

        property_kind = PROPERTY_KIND_READ.get(kind)
        if property_kind is None:
            raise UnknownDiscriminatorError(f"The Property kind {kind} is not supported.", kind)

        node = _reuse(existing, Property)
        key_node = self._node(key, node.key.value, "Property", "key", Expression)
        if not isinstance(key_node, (Literal, Identifier)):
            raise ShapeViolationError("Property must have property key of type Literal or Identifier.", "Property", "key")

        node.key = Discriminated.of(key_node, Literal, Identifier)
        node.value = self._node(value, node.value, "Property", "value", Expression)
        node.property_kind = property_kind
        return node

    def _read_sequence_expression(self, obj: dict, existing: Any) -> SequenceExpression:
        expressions = self._field(obj, "SequenceExpression", "expressions", "array")
        node = _reuse(existing, SequenceExpression)
        self._nodes(expressions, node.expressions, "SequenceExpression", "expressions", Expression)
        return node

    def _read_this_expression(self, obj: dict, existing: Any) -> ThisExpression:
        return _reuse(existing, ThisExpression)

    def _read_unary_expression(self, obj: dict, existing: Any) -> UnaryExpression:
        node_type = obj["type"]
        token = self._field(obj, node_type, "operator", "string")
        prefix = self._field(obj, node_type, "prefix", "boolean")
        argument = self._field(obj, node_type, "argument", "object")

        # Only update expressions distinguish prefix from postfix
        operator = UNARY_READ.get((node_type, token, True if node_type == UNARY_EXPRESSION else prefix))
        if operator is None:
            raise UnknownDiscriminatorError(f"The {node_type} operator {token} is not supported.", token)

        node = _reuse(existing, UnaryExpression)
        node.argument = self._node(argument, node.argument, node_type, "argument", Expression)
        node.operator = operator
        return node

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def _read_program(self, obj: dict, existing: Any) -> Program:
        body = self._field(obj, "Program", "body", "array")
        node = _reuse(existing, Program)
        self._nodes(body, node.body, "Program", "body", Statement)
        return node

    def _read_block_statement(self, obj: dict, existing: Any) -> BlockStatement:
        body = self._field(obj, "BlockStatement", "body", "array")
        node = _reuse(existing, BlockStatement)
        self._nodes(body, node.body, "BlockStatement", "body", Statement)
        return node

    def _read_break_statement(self, obj: dict, existing: Any) -> BreakStatement:
        label = self._field(obj, "BreakStatement", "label", "object", "null")
        node = _reuse(existing, BreakStatement)
        node.label = self._node(label, node.label, "BreakStatement", "label", Identifier, optional=True)
        return node

    def _read_continue_statement(self, obj: dict, existing: Any) -> ContinueStatement:
        label = self._field(obj, "ContinueStatement", "label", "object", "null")
        node = _reuse(existing, ContinueStatement)
        node.label = self._node(label, node.label, "ContinueStatement", "label", Identifier, optional=True)
        return node

    def _read_debugger_statement(self, obj: dict, existing: Any) -> DebuggerStatement:
        return _reuse(existing, DebuggerStatement)

    def _read_do_while_statement(self, obj: dict, existing: Any) -> DoWhileStatement:
        body = self._field(obj, "DoWhileStatement", "body", "object")
        test = self._field(obj, "DoWhileStatement", "test", "object")
        node = _reuse(existing, DoWhileStatement)
        node.body = self._node(body, node.body, "DoWhileStatement", "body", Statement)
        node.test = self._node(test, node.test, "DoWhileStatement", "test", Expression)
        return node

    def _read_empty_statement(self, obj: dict, existing: Any) -> None:
        return None

    def _read_expression_statement(self, obj: dict, existing: Any) -> ExpressionStatement:
        expression = self._field(obj, "ExpressionStatement", "expression", "object")
        node = _reuse(existing, ExpressionStatement)
        node.expression = self._node(expression, node.expression, "ExpressionStatement", "expression", Expression)
        return node

    def _read_for_in_statement(self, obj: dict, existing: Any) -> ForInStatement:
        left = self._field(obj, "ForInStatement", "left", "object")
        right = self._field(obj, "ForInStatement", "right", "object")
        body = self._field(obj, "ForInStatement", "body", "object")

        node = _reuse(existing, ForInStatement)
        left_node = self.read(left, node.left.value)
        if not isinstance(left_node, (VariableDeclaration, Identifier)):
            raise ShapeViolationError(
                "ForInStatement must have property left of type VariableDeclaration or Identifier.",
                "ForInStatement",
                "left",
            )
        node.left = Discriminated.of(left_node, VariableDeclaration, Identifier)
        node.right = self._node(right, node.right, "ForInStatement", "right", Expression)
        node.body = self._node(body, node.body, "ForInStatement", "body", Statement)
        return node

    def _read_for_statement(self, obj: dict, existing: Any) -> ForStatement:
        init = self._field(obj, "ForStatement", "init", "object", "null")
        test = self._field(obj, "ForStatement", "test", "object", "null")
        update = self._field(obj, "ForStatement", "update", "object", "null")
        body = self._field(obj, "ForStatement", "body", "object")

        node = _reuse(existing, ForStatement)
        init_node = self.read(init, node.init.value)
        if init_node is not None and not isinstance(init_node, (VariableDeclaration, Expression)):
            raise ShapeViolationError(
                "ForStatement must have property init of type VariableDeclaration, Expression or null.",
                "ForStatement",
                "init",
            )
        if init_node is None and init is not None:
            raise ShapeViolationError("ForStatement property init cannot be an EmptyStatement.", "ForStatement", "init")
        node.init = Discriminated.of(init_node, VariableDeclaration, Expression)
        node.test = self._node(test, node.test, "ForStatement", "test", Expression, optional=True)
        node.update = self._node(update, node.update, "ForStatement", "update", Expression, optional=True)
        node.body = self._node(body, node.body, "ForStatement", "body", Statement)
        return node

    def _read_function_declaration(self, obj: dict, existing: Any) -> FunctionDeclaration:
        identifier = self._field(obj, "FunctionDeclaration", "id", "object")
        params = self._field(obj, "FunctionDeclaration", "params", "array")
        body = self._block_statements(obj, "FunctionDeclaration", "body")
        node = _reuse(existing, FunctionDeclaration)
        node.id = self._node(identifier, node.id, "FunctionDeclaration", "id", Identifier)
        self._nodes(params, node.params, "FunctionDeclaration", "params", Identifier)
        self._nodes(body, node.body, "FunctionDeclaration", "body", Statement)
        return node

    def _read_if_statement(self, obj: dict, existing: Any) -> IfStatement:
        test = self._field(obj, "IfStatement", "test", "object")
        consequent = self._field(obj, "IfStatement", "consequent", "object")
        alternate = self._field(obj, "IfStatement", "alternate", "object", "null")
        node = _reuse(existing, IfStatement)
        node.test = self._node(test, node.test, "IfStatement", "test", Expression)
        node.consequent = self._node(consequent, node.consequent, "IfStatement", "consequent", Statement)
        node.alternate = self._node(alternate, node.alternate, "IfStatement", "alternate", Statement, optional=True)
        return node

    def _read_labeled_statement(self, obj: dict, existing: Any) -> LabeledStatement:
        label = self._field(obj, "LabeledStatement", "label", "object")
        body = self._field(obj, "LabeledStatement", "body", "object")
        node = _reuse(existing, LabeledStatement)
        node.label = self._node(label, node.label, "LabeledStatement", "label", Identifier)
        node.body = self._node(body, node.body, "LabeledStatement", "body", Statement)
        return node

    def _read_return_statement(self, obj: dict, existing: Any) -> ReturnStatement:
        argument = self._field(obj, "ReturnStatement", "argument", "object", "null")
        node = _reuse(existing, ReturnStatement)
        node.argument = self._node(argument, node.argument, "ReturnStatement", "argument", Expression, optional=True)
        return node

    def _read_switch_case(self, obj: dict, existing: Any) -> SwitchCase:
        test = self._field(obj, "SwitchCase", "test", "object", "null")
        consequent = self._field(obj, "SwitchCase", "consequent", "array")
        node = _reuse(existing, SwitchCase)
        node.test = self._node(test, node.test, "SwitchCase", "test", Expression, optional=True)
        self._nodes(consequent, node.body, "SwitchCase", "consequent", Statement)
        return node

    def _read_switch_statement(self, obj: dict, existing: Any) -> SwitchStatement:
        discriminant = self._field(obj, "SwitchStatement", "discriminant", "object")
        cases = self._field(obj, "SwitchStatement", "cases", "array")
        node = _reuse(existing, SwitchStatement)
        node.discriminant = self._node(discriminant, node.discriminant, "SwitchStatement", "discriminant", Expression)
        self._nodes(cases, node.cases, "SwitchStatement", "cases", SwitchCase)
        return node

    def _read_throw_statement(self, obj: dict, existing: Any) -> ThrowStatement:
        argument = self._field(obj, "ThrowStatement", "argument", "object")
        node = _reuse(existing, ThrowStatement)
        node.argument = self._node(argument, node.argument, "ThrowStatement", "argument", Expression)
        return node

    def _read_try_statement(self, obj: dict, existing: Any) -> TryStatement:
        block = self._block_statements(obj, "TryStatement", "block")
        handler = self._field(obj, "TryStatement", "handler", "object", "null")
        finalizer = self._field(obj, "TryStatement", "finalizer", "object", "null")
        if finalizer is not None:
            finalizer = self._block_statements(obj, "TryStatement", "finalizer")
        if handler is None and not finalizer:
            raise ShapeViolationError("TryStatement must have a handler, a non-empty finalizer, or both.", "TryStatement")

        node = _reuse(existing, TryStatement)
        self._nodes(block, node.block.body, "TryStatement", "block", Statement)
        node.handler = self._node(handler, node.handler, "TryStatement", "handler", CatchClause, optional=True)
        self._nodes(finalizer or [], node.finalizer.body, "TryStatement", "finalizer", Statement)
        return node

    def _read_catch_clause(self, obj: dict, existing: Any) -> CatchClause:
        param = self._field(obj, "CatchClause", "param", "object")
        body = self._block_statements(obj, "CatchClause", "body")
        node = _reuse(existing, CatchClause)
        node.param = self._node(param, node.param, "CatchClause", "param", Identifier)
        self._nodes(body, node.body, "CatchClause", "body", Statement)
        return node

    def _read_variable_declaration(self, obj: dict, existing: Any) -> VariableDeclaration:
        kind = self._field(obj, "VariableDeclaration", "kind", "string")
        declarations = self._field(obj, "VariableDeclaration", "declarations", "array")
        if kind != VariableKind.VAR.value:
            raise UnknownDiscriminatorError(f"The VariableDeclaration kind {kind} is not supported.", kind)
        node = _reuse(existing, VariableDeclaration)
        self._nodes(declarations, node.declarations, "VariableDeclaration", "declarations", VariableDeclarator)
        return node

    def _read_variable_declarator(self, obj: dict, existing: Any) -> VariableDeclarator:
        identifier = self._field(obj, "VariableDeclarator", "id", "object")
        init = self._field(obj, "VariableDeclarator", "init", "object", "null")
        node = _reuse(existing, VariableDeclarator)
        node.id = self._node(identifier, node.id, "VariableDeclarator", "id", Identifier)
        node.init = self._node(init, node.init, "VariableDeclarator", "init", Expression, optional=True)
        return node

    def _read_while_statement(self, obj: dict, existing: Any) -> WhileStatement:
        test = self._field(obj, "WhileStatement", "test", "object")
        body = self._field(obj, "WhileStatement", "body", "object")
        node = _reuse(existing, WhileStatement)
        node.test = self._node(test, node.test, "WhileStatement", "test", Expression)
        node.body = self._node(body, node.body, "WhileStatement", "body", Statement)
        return node

    def _read_with_statement(self, obj: dict, existing: Any) -> WithStatement:
        target = self._field(obj, "WithStatement", "object", "object")
        body = self._field(obj, "WithStatement", "body", "object")
        node = _reuse(existing, WithStatement)
        node.object = self._node(target, node.object, "WithStatement", "object", Expression)
        node.body = self._node(body, node.body, "WithStatement", "body", Statement)
        return node


_reader = NodeReader()


def read_node(value: Any, existing: Node | None = None) -> Node | None:
    """Read a parsed JSON value into a node, optionally repopulating ``existing``.

    An in-place read first reads ``value`` into fresh nodes, so malformed input
    raises before ``existing`` is touched.
    """
    if existing is not None:
        _reader.read(value)
    node = _reader.read(value, existing)
    logger.debug(
        "Read %s%s",
        node.kind.value if node is not None else "null",
        " in place" if node is not None and node is existing else "",
    )
    return node


def read_json(text: str | bytes, existing: Node | None = None) -> Node | None:
    """Parse JSON text and read it into a node.

    Raises:
        ShapeViolationError: If the text is not valid JSON or not a valid node
    """
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise ShapeViolationError(f"Input is not valid JSON: {e}") from e
    return read_node(value, existing)
