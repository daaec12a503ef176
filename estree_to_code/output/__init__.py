"""
Writing generated source to disk.
"""

from .atomic_writer import AtomicWriter, write_output
from .validator import TREE_SITTER_AVAILABLE, JavaScriptValidator, validate_javascript

__all__ = [
    "TREE_SITTER_AVAILABLE",
    "AtomicWriter",
    "JavaScriptValidator",
    "validate_javascript",
    "write_output",
]
