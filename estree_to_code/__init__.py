"""ESTree to Code

A typed ES5 syntax tree with an ESTree JSON codec and a JavaScript source
printer (pretty or minified, synchronous or asynchronous).
"""

__version__ = "1.0.0"
__author__ = "François Lagunas"

from .codec import read_json, read_node, write_json, write_node
from .config import GeneratorConfig, OutputConfig, OutputMode, PrinterConfig
from .errors import (
    ContractViolationError,
    EstreeError,
    OutputError,
    ShapeViolationError,
    UnknownDiscriminatorError,
    UnsupportedNodeError,
)
from .generator import SourceGenerator
from .model import Discriminated, NodeKind
from .printer import AsyncJSPrinter, JSPrinter, to_source, to_source_async

__all__ = [
    "AsyncJSPrinter",
    "ContractViolationError",
    "Discriminated",
    "EstreeError",
    "GeneratorConfig",
    "JSPrinter",
    "NodeKind",
    "OutputConfig",
    "OutputError",
    "OutputMode",
    "PrinterConfig",
    "ShapeViolationError",
    "SourceGenerator",
    "UnknownDiscriminatorError",
    "UnsupportedNodeError",
    "read_json",
    "read_node",
    "to_source",
    "to_source_async",
    "write_json",
    "write_node",
]
