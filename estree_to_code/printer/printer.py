"""
Synchronous JavaScript printer.
"""

from __future__ import annotations

import io
from dataclasses import replace
from typing import TextIO

from ..config import PrinterConfig
from ..model.nodes import Node
from .base import PrinterCore


class JSPrinter:
    """Print nodes as JavaScript source to a text sink.

    Consecutive ``print`` calls continue the same output: indentation and token
    separation carry over from one node to the next.
    """

    def __init__(self, sink: TextIO, config: PrinterConfig | None = None):
        self.sink = sink
        self.config = config or PrinterConfig()
        self._core = PrinterCore(self.config)

    def print(self, node: Node | None) -> None:
        for chunk in self._core.chunks(node):
            self.sink.write(chunk)


def _resolve_config(minify: bool, config: PrinterConfig | None) -> PrinterConfig:
    if config is None:
        return PrinterConfig(minify=minify)
    if minify and not config.minify:
        return replace(config, minify=True)
    return config


def to_source(node: Node | None, minify: bool = False, config: PrinterConfig | None = None) -> str:
    """Render a node as JavaScript source text.

    Args:
        node: The node to print; None prints an empty statement
        minify: Use minified output
        config: Printer configuration; ``minify=True`` overrides its mode

    Returns:
        The complete source text. Nothing is returned if printing fails.
    """
    buffer = io.StringIO()
    JSPrinter(buffer, _resolve_config(minify, config)).print(node)
    return buffer.getvalue()
