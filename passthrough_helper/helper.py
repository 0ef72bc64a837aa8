"""Generate pass-through tests for wrappers around a declared type."""

import logging
from collections.abc import Callable
from types import SimpleNamespace
from typing import Any

from passthrough_helper.frameworks import TestingFramework
from passthrough_helper.method_extractor import get_pass_through_method_infos
from passthrough_helper.mock_generator import generate_mock
from passthrough_helper.models import (
    MethodInfo,
    PassThroughHelperError,
    PassThroughTest,
    PositionalArgument,
    ReturnSentinel,
    TypeFinder,
    TypeInfo,
)
from passthrough_helper.source import create_source_file_from_path
from passthrough_helper.type_finder import first_type_finder

logger = logging.getLogger(__name__)


class DidNotReturnPassThroughValueError(PassThroughHelperError):
    """A non-void wrapper method did not return the delegate's value."""

    def __init__(self, method_name: str, returned: Any = None):
        super().__init__(
            f"{method_name} did not return passthrough return value "
            f"(got {returned!r})"
        )
        self.method_name = method_name
        self.returned = returned


def all_methods_valid(method_name: str) -> bool:
    return True


def default_is_valid_method_to_all(
    is_valid_method: Callable[[str], bool] | None,
) -> Callable[[str], bool]:
    return is_valid_method if is_valid_method is not None else all_methods_valid


def default_type_finder_to_first_type(type_finder: TypeFinder | None) -> TypeFinder:
    return type_finder if type_finder is not None else first_type_finder


def get_method_infos(type_info: TypeInfo) -> list[MethodInfo]:
    """Load the source named by ``type_info`` and extract its methods.

    Raises:
        TypeNotFoundError: If the type finder matches no class
    """
    is_valid_method = default_is_valid_method_to_all(type_info.is_valid_method)
    type_finder = default_type_finder_to_first_type(type_info.type_finder)

    source_file = create_source_file_from_path(type_info.file_path)
    declaration = type_finder(source_file)

    method_infos = get_pass_through_method_infos(
        declaration, source_file, is_valid_method
    )
    logger.info(f"Found {len(method_infos)} methods on {declaration.name}")
    return method_infos


def pass_through_helper(
    type_info: TypeInfo,
    pass_through: Callable[[SimpleNamespace], Any],
    testing_framework: TestingFramework,
) -> list[PassThroughTest]:
    """Build one pass-through test per method of the selected type.

    The mocks are created and ``pass_through`` is called once with them
    before any test is returned. Each test calls its method on the wrapper
    with positional sentinel arguments, checks a non-void result is the
    delegate's return value, then asks the framework to assert the mock was
    called once with the same arguments.

    Args:
        type_info: Which source file and class to read
        pass_through: Factory that wraps the mock delegate
        testing_framework: Creates mocks and asserts on them

    Returns:
        List of PassThroughTest objects, in method declaration order

    Raises:
        TypeNotFoundError: If no class matches
        MissingMockCreatorMethodError: If the framework cannot mock a method
    """
    method_infos = get_method_infos(type_info)
    generated = generate_mock(method_infos, testing_framework)

    wrapper = pass_through(generated.delegate())

    tests = [
        PassThroughTest(
            method_name=method_info.name,
            execute=_make_execute(
                method_info,
                wrapper,
                generated.mocks[method_info.name],
                generated.mock_return,
                testing_framework,
            ),
        )
        for method_info in method_infos
    ]
    logger.info(f"Generated {len(tests)} pass-through tests")
    return tests


def _make_execute(
    method_info: MethodInfo,
    wrapper: Any,
    mock: Any,
    mock_return: ReturnSentinel,
    testing_framework: TestingFramework,
) -> Callable[[], None]:
    def execute() -> None:
        args = [PositionalArgument(i) for i in range(method_info.num_parameters)]
        logger.debug(f"Calling {method_info.name} with {args}")

        return_value = getattr(wrapper, method_info.name)(*args)
        if not method_info.is_void and return_value is not mock_return:
            raise DidNotReturnPassThroughValueError(method_info.name, return_value)

        testing_framework.expect_called_once_with(mock, args)

    return execute
