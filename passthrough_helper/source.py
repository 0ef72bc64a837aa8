"""Load and parse Python source that declares the wrapped type."""

import ast
import logging
from pathlib import Path

from passthrough_helper.models import SourceFile

logger = logging.getLogger(__name__)


def read_source_file(path: str | Path) -> str:
    """Read the source text at a path."""
    return Path(path).read_text()


def parse_source(text: str, filename: str = "<unknown>") -> ast.Module:
    """Parse source text into a module tree.

    Raises:
        SyntaxError: If the text is not valid Python
    """
    return ast.parse(text, filename=filename)


def create_source_file_from_path(path: str | Path) -> SourceFile:
    """Read and parse a .py or .pyi file.

    Args:
        path: Path to the source file

    Returns:
        SourceFile holding the text and its parsed tree
    """
    logger.info(f"Parsing type declarations from {path}")
    text = read_source_file(path)
    return SourceFile(path=str(path), text=text, tree=parse_source(text, str(path)))
