"""Locate the class declaration to generate pass-through tests for."""

import ast
import logging
from collections.abc import Callable

from passthrough_helper.models import PassThroughHelperError, SourceFile, TypeFinder

logger = logging.getLogger(__name__)


class TypeNotFoundError(PassThroughHelperError):
    """No class in the source matched the finder."""

    def __init__(self, path: str):
        super().__init__(f"No matching class declaration found in {path}")
        self.path = path


def find_type(
    source_file: SourceFile,
    predicate: Callable[[ast.ClassDef], bool],
) -> ast.ClassDef | None:
    """Depth-first search in document order for the first matching class.

    A class is checked before anything nested inside it.
    """
    stack: list[ast.AST] = [source_file.tree]
    while stack:
        node = stack.pop()
        if isinstance(node, ast.ClassDef) and predicate(node):
            return node
        stack.extend(reversed(list(ast.iter_child_nodes(node))))
    return None


def conditional_type_finder(
    predicate: Callable[[ast.ClassDef], bool],
) -> TypeFinder:
    """Build a finder returning the first class satisfying a predicate.

    Raises:
        TypeNotFoundError: From the returned finder, when nothing matches
    """

    def finder(source_file: SourceFile) -> ast.ClassDef:
        declaration = find_type(source_file, predicate)
        if declaration is None:
            logger.error(f"No matching class declaration in {source_file.path}")
            raise TypeNotFoundError(source_file.path)
        logger.debug(f"Selected class {declaration.name} from {source_file.path}")
        return declaration

    return finder


first_type_finder: TypeFinder = conditional_type_finder(lambda declaration: True)


def type_by_name_finder(name: str) -> TypeFinder:
    """Build a finder matching the class name exactly."""
    return conditional_type_finder(lambda declaration: declaration.name == name)
