"""
JavaScript syntax validation.

Uses tree-sitter and tree-sitter-javascript to parse generated source and report
the first syntax error.
"""

from __future__ import annotations

from typing import Any

from ..errors import OutputError

# Try to import tree-sitter
try:
    import tree_sitter_javascript as ts_javascript
    from tree_sitter import Language, Parser

    TREE_SITTER_AVAILABLE = True
except ImportError:
    TREE_SITTER_AVAILABLE = False
    Language = None
    Parser = None


class JavaScriptValidator:
    """Checks that source text parses as JavaScript.

    Requires the tree-sitter and tree-sitter-javascript packages.
    """

    def __init__(self):
        """Initialize the parser.

        Raises:
            OutputError: If tree-sitter is not available
        """
        if not TREE_SITTER_AVAILABLE:
            raise OutputError(
                "tree-sitter and tree-sitter-javascript are required for validation. "
                "Install with: pip install tree-sitter tree-sitter-javascript"
            )

        self._parser = Parser(Language(ts_javascript.language()))

    def parse(self, code: str) -> Any:
        """Parse JavaScript source into a tree-sitter tree.

        Raises:
            OutputError: If the code contains a syntax error
        """
        tree = self._parser.parse(bytes(code, "utf8"))

        if tree.root_node.has_error:
            errors = self._find_errors(tree.root_node)
            if errors:
                first_error = errors[0]
                snippet = first_error.text.decode("utf8")[:50] if first_error.text else ""
                raise OutputError(f"Generated JavaScript is not valid at line {first_error.start_point[0] + 1}: syntax error near '{snippet}'")
            raise OutputError("Generated JavaScript is not valid")

        return tree

    def __call__(self, code: str) -> None:
        self.parse(code)

    def _find_errors(self, node: Any) -> list[Any]:
        """Find all ERROR and MISSING nodes in the tree."""
        errors = []
        if node.type == "ERROR" or node.is_missing:
            errors.append(node)
        for child in node.children:
            errors.extend(self._find_errors(child))
        return errors


def validate_javascript(code: str) -> None:
    """Raise OutputError unless ``code`` parses as JavaScript."""
    JavaScriptValidator().parse(code)
