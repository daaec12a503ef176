"""
Source generation: node tree to a complete JavaScript file.
"""

from __future__ import annotations

import logging
from pathlib import Path

import jinja2

from . import __version__
from .codec import read_json
from .config import GeneratorConfig
from .model.nodes import Node
from .printer import to_source

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"


class SourceGenerator:
    """Prints a node tree and prepends the rendered file prefix."""

    def __init__(self, config: GeneratorConfig | None = None, command_line: str = "estree_to_code"):
        self.config = config or GeneratorConfig()
        self.command_line = command_line
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self.prefix_template = self.jinja_env.get_template("prefix.js.jinja2")

    def generation_comment(self) -> str | None:
        """The header comment, or None when this configuration omits it."""
        if not self.config.add_generation_comment:
            return None
        if self.config.printer.minify and not self.config.header_in_minify:
            return None
        return f"// Generated by estree_to_code v{__version__} : {self.command_line}"

    def generate(self, node: Node | None) -> str:
        source = to_source(node, config=self.config.printer)
        prefix = self.prefix_template.render(generation_comment=self.generation_comment())
        return prefix + source

    def generate_from_json(self, text: str) -> str:
        """Decode ESTree JSON and generate source from it."""
        node = read_json(text)
        logger.info("Decoded %s from JSON", node.kind.value if node is not None else "empty statement")
        return self.generate(node)
