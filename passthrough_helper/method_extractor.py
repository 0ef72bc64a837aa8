"""Extract pass-through method signatures from a class declaration."""

import ast
import logging
from collections.abc import Callable, Iterator

from passthrough_helper.models import MethodInfo, SourceFile

logger = logging.getLogger(__name__)

PROPERTY_DECORATORS = frozenset(
    {"property", "cached_property", "abstractproperty", "getter", "setter", "deleter"}
)

CONSTRUCTORS = frozenset({"__init__", "__new__"})


def get_pass_through_method_infos(
    declaration: ast.ClassDef,
    source_file: SourceFile,
    is_valid_method: Callable[[str], bool],
) -> list[MethodInfo]:
    """Collect one MethodInfo per method name declared on a class.

    Overloads sharing a name collapse to the occurrence with the most
    positional parameters; the first occurrence wins ties.

    Args:
        declaration: The class to read members from
        source_file: The source the class was parsed from
        is_valid_method: Predicate deciding which method names to keep

    Returns:
        MethodInfo objects in the order each name was first seen
    """
    method_infos: dict[str, MethodInfo] = {}

    for member in _class_members(declaration.body):
        if not _is_method(member):
            continue

        name = member.name
        if not is_valid_method(name):
            logger.debug(f"Skipping filtered method {name}")
            continue

        num_parameters = _count_positional_parameters(member)
        existing = method_infos.get(name)
        if existing is not None and existing.num_parameters >= num_parameters:
            logger.debug(
                f"Ignoring overload {name} with {num_parameters} parameters "
                f"at {source_file.path}:{member.lineno}"
            )
            continue

        method_infos[name] = MethodInfo(
            name=name,
            num_parameters=num_parameters,
            is_void=_is_void(member.returns),
        )
        logger.debug(f"Found method: {name}/{num_parameters}")

    return list(method_infos.values())


def _class_members(body: list[ast.stmt]) -> Iterator[ast.stmt]:
    """Yield class body statements in order, looking inside if/try blocks.

    Guards such as ``if sys.version_info >= ...`` are common in stubs.
    Nested classes and functions are yielded as-is, never entered.
    """
    for statement in body:
        if isinstance(statement, ast.If):
            yield from _class_members(statement.body)
            yield from _class_members(statement.orelse)
        elif isinstance(statement, (ast.Try, ast.TryStar)):
            yield from _class_members(statement.body)
            for handler in statement.handlers:
                yield from _class_members(handler.body)
            yield from _class_members(statement.orelse)
            yield from _class_members(statement.finalbody)
        else:
            yield statement


def _is_method(member: ast.stmt) -> bool:
    """Public ``def`` members that are neither properties nor constructors."""
    if isinstance(member, ast.AsyncFunctionDef):
        logger.debug(f"Skipping async method {member.name}")
        return False
    if not isinstance(member, ast.FunctionDef):
        return False
    if member.name in CONSTRUCTORS:
        return False
    if _is_name_mangled(member.name):
        logger.debug(f"Skipping private method {member.name}")
        return False
    return not any(
        _decorator_name(d) in PROPERTY_DECORATORS for d in member.decorator_list
    )


def _is_name_mangled(name: str) -> bool:
    # __name is rewritten to _Class__name inside the class body
    return name.startswith("__") and not name.endswith("__")


def _decorator_name(decorator: ast.expr) -> str | None:
    # @name, @module.name and @name(...) all resolve to "name"
    if isinstance(decorator, ast.Call):
        decorator = decorator.func
    if isinstance(decorator, ast.Name):
        return decorator.id
    if isinstance(decorator, ast.Attribute):
        return decorator.attr
    return None


def _count_positional_parameters(method: ast.FunctionDef) -> int:
    """Count parameters a caller passes positionally, excluding self/cls."""
    arguments = method.args
    count = len(arguments.posonlyargs) + len(arguments.args)
    is_static = any(
        _decorator_name(d) == "staticmethod" for d in method.decorator_list
    )
    if not is_static and count:
        count -= 1
    return count


def _is_void(returns: ast.expr | None) -> bool:
    """Only an explicit ``-> None`` annotation marks a method as void."""
    if not isinstance(returns, ast.Constant):
        return False
    return returns.value is None or returns.value == "None"
