"""
JavaScript source printers.
"""

from .async_printer import AsyncJSPrinter, StreamWriterSink, to_source_async
from .base import PrinterCore
from .printer import JSPrinter, to_source

__all__ = [
    "AsyncJSPrinter",
    "JSPrinter",
    "PrinterCore",
    "StreamWriterSink",
    "to_source",
    "to_source_async",
]
