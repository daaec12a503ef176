"""
Configuration for printing and writing generated JavaScript.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to parse the generated source before writing
        atomic_write: Whether to use atomic file writes
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    validate_before_write: bool = False
    atomic_write: bool = True


@dataclass
class PrinterConfig:
    """Configuration for the source printer."""

    # Remove all optional whitespace and apply minify rewrites
    minify: bool = False

    # Indentation unit used once per nesting level in pretty mode
    indent: str = "    "

    # Line terminator used in pretty mode
    newline: str = "\n"


@dataclass
class GeneratorConfig:
    """Configuration options for the estree_to_code command."""

    printer: PrinterConfig = field(default_factory=PrinterConfig)

    output: OutputConfig = field(default_factory=OutputConfig)

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Keep the generation comment even when minifying
    header_in_minify: bool = False

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        config = GeneratorConfig()
        for k, v in d.items():
            if k == "printer" and isinstance(v, dict):
                config.printer = PrinterConfig(**v)
            elif k == "output" and isinstance(v, dict):
                mode = v.get("mode", OutputMode.ERROR_IF_EXISTS)
                if isinstance(mode, str):
                    mode = OutputMode(mode)
                config.output = OutputConfig(
                    mode=mode,
                    validate_before_write=v.get("validate_before_write", False),
                    atomic_write=v.get("atomic_write", True),
                )
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "printer": {
                "minify": self.printer.minify,
                "indent": self.printer.indent,
                "newline": self.printer.newline,
            },
            "output": {
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
                "atomic_write": self.output.atomic_write,
            },
            "add_generation_comment": self.add_generation_comment,
            "header_in_minify": self.header_in_minify,
        }
