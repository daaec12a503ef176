"""
ESTree JSON codec: strict reading into the node model and canonical writing back.
"""

from .reader import NodeReader, parse_regex_flags, read_json, read_node
from .tables import BINARY_READ, BINARY_WRITE, UNARY_READ, UNARY_WRITE
from .writer import NodeWriter, write_json, write_node

__all__ = [
    "BINARY_READ",
    "BINARY_WRITE",
    "NodeReader",
    "NodeWriter",
    "UNARY_READ",
    "UNARY_WRITE",
    "parse_regex_flags",
    "read_json",
    "read_node",
    "write_json",
    "write_node",
]
