"""
Typed node model for ES5 programs.
"""

from .discriminated import Case, Discriminated
from .nodes import (
    ArrayExpression,
    BinaryExpression,
    BlockStatement,
    BodyMixin,
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
    FunctionMixin,
    HasBody,
    HasParameters,
    Identifier,
    IfStatement,
    LabeledStatement,
    Literal,
    LiteralValue,
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
    is_for_initializer,
    is_pattern,
    is_property_key,
)
from .operators import REGEX_FLAG_CHARS, BinaryOperator, PropertyKind, Regex, RegexFlags, UnaryOperator, VariableKind

__all__ = [
    "ArrayExpression",
    "BinaryExpression",
    "BinaryOperator",
    "BlockStatement",
    "BodyMixin",
    "BreakStatement",
    "CallExpression",
    "Case",
    "CatchClause",
    "ConditionalExpression",
    "ContinueStatement",
    "DebuggerStatement",
    "Discriminated",
    "DoWhileStatement",
    "Expression",
    "ExpressionStatement",
    "ForInStatement",
    "ForStatement",
    "FunctionDeclaration",
    "FunctionExpression",
    "FunctionMixin",
    "HasBody",
    "HasParameters",
    "Identifier",
    "IfStatement",
    "LabeledStatement",
    "Literal",
    "LiteralValue",
    "MemberExpression",
    "NewExpression",
    "Node",
    "NodeKind",
    "ObjectExpression",
    "Program",
    "Property",
    "PropertyKind",
    "REGEX_FLAG_CHARS",
    "Regex",
    "RegexFlags",
    "ReturnStatement",
    "SequenceExpression",
    "Statement",
    "SwitchCase",
    "SwitchStatement",
    "ThisExpression",
    "ThrowStatement",
    "TryStatement",
    "UnaryExpression",
    "UnaryOperator",
    "VariableDeclaration",
    "VariableDeclarator",
    "VariableKind",
    "WhileStatement",
    "WithStatement",
    "is_for_initializer",
    "is_pattern",
    "is_property_key",
]
