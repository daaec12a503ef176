"""
Asynchronous JavaScript printer.

Drives the same walk as JSPrinter, so output is identical for the same node and
configuration. Suspension happens only at sink writes and the final flush.
"""

from __future__ import annotations

import asyncio
import inspect
import io
import logging
from typing import Any, Protocol

from ..config import PrinterConfig
from ..model.nodes import Node
from .base import PrinterCore
from .printer import _resolve_config

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE = 4096


class AsyncSink(Protocol):
    """A text sink whose ``write`` may return an awaitable."""

    def write(self, text: str) -> Any: ...


class StreamWriterSink:
    """Adapts an ``asyncio.StreamWriter`` to a text sink."""

    def __init__(self, writer: asyncio.StreamWriter, encoding: str = "utf-8"):
        self.writer = writer
        self.encoding = encoding

    async def write(self, text: str) -> None:
        self.writer.write(text.encode(self.encoding))
        await self.writer.drain()

    async def flush(self) -> None:
        await self.writer.drain()


async def _resolve(result: Any) -> None:
    if inspect.isawaitable(result):
        await result


class AsyncJSPrinter:
    """Print nodes to a sink with awaitable writes.

    Chunks are buffered and handed to the sink once ``buffer_size`` characters
    have accumulated, then once more at the end of each ``print``.
    """

    def __init__(self, sink: AsyncSink, config: PrinterConfig | None = None, buffer_size: int = DEFAULT_BUFFER_SIZE):
        if buffer_size < 1:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self.sink = sink
        self.config = config or PrinterConfig()
        self.buffer_size = buffer_size
        self._core = PrinterCore(self.config)

    async def print(self, node: Node | None) -> None:
        pending: list[str] = []
        size = 0
        for chunk in self._core.chunks(node):
            pending.append(chunk)
            size += len(chunk)
            if size >= self.buffer_size:
                await self._write("".join(pending))
                pending.clear()
                size = 0
        if pending:
            await self._write("".join(pending))
        await self._flush()

    async def _write(self, text: str) -> None:
        await _resolve(self.sink.write(text))

    async def _flush(self) -> None:
        flush = getattr(self.sink, "flush", None)
        if flush is not None:
            await _resolve(flush())


async def to_source_async(node: Node | None, minify: bool = False, config: PrinterConfig | None = None) -> str:
    """Asynchronous counterpart of ``to_source``."""
    buffer = io.StringIO()
    await AsyncJSPrinter(buffer, _resolve_config(minify, config)).print(node)
    logger.debug("Rendered %d characters asynchronously", buffer.tell())
    return buffer.getvalue()
