"""
Atomic file writer for generated JavaScript.

Ensures that file writes are atomic so an interrupted run never leaves a
half-written output file.
"""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..errors import OutputError

logger = logging.getLogger(__name__)


class AtomicWriter:
    """Writes files through a temporary sibling and an atomic replace.

    1. Write to a temporary file in the same directory
    2. Validate the content, if requested
    3. Replace the target file
    """

    def __init__(self, validate_javascript: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_javascript: Validation function called with the content;
                defaults to the tree-sitter validator, created on first use
        """
        self._validate_javascript = validate_javascript

    def write(self, path: Path, content: str, validate: bool = False) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            OutputError: If validation fails
            OSError: If file operations fail
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory keeps the rename on one filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)

            if validate:
                self.validate(content)

            temp_path.replace(path)
            logger.debug("Replaced %s with %d characters", path, len(content))
        except Exception:
            temp_path.unlink(missing_ok=True)
            raise

    def write_if_not_exists(self, path: Path, content: str, validate: bool = False) -> bool:
        """Write content only if the file doesn't exist.

        Returns:
            True once the file is written

        Raises:
            FileExistsError: If the file already exists
            OutputError: If validation fails
        """
        if path.exists():
            raise FileExistsError(f"Output file already exists: {path}. Use --force to overwrite.")

        self.write(path, content, validate)
        return True

    def validate(self, content: str) -> None:
        if self._validate_javascript is None:
            from .validator import JavaScriptValidator

            self._validate_javascript = JavaScriptValidator()
        self._validate_javascript(content)


def write_output(path: Path, content: str, force: bool = False, validate: bool = False, atomic: bool = True) -> None:
    """Write generated source, refusing to overwrite unless ``force`` is set.

    Raises:
        OutputError: If the file exists without ``force``, or validation fails
    """
    writer = AtomicWriter()
    try:
        if not atomic:
            if path.exists() and not force:
                raise FileExistsError(f"Output file already exists: {path}. Use --force to overwrite.")
            if validate:
                writer.validate(content)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        elif force:
            writer.write(path, content, validate)
        else:
            writer.write_if_not_exists(path, content, validate)
    except FileExistsError as e:
        raise OutputError(str(e)) from e
