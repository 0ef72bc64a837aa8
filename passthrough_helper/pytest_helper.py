"""pytest bindings for pass-through tests."""

from collections.abc import Callable
from types import SimpleNamespace
from typing import Any

import pytest

from passthrough_helper.frameworks import UnittestMockFramework
from passthrough_helper.helper import pass_through_helper
from passthrough_helper.models import PassThroughTest, TypeInfo


def mock_pass_through_helper(
    type_info: TypeInfo,
    pass_through: Callable[[SimpleNamespace], Any],
) -> list[PassThroughTest]:
    """Generate pass-through tests using ``unittest.mock`` mocks."""
    return pass_through_helper(type_info, pass_through, UnittestMockFramework())


def pass_through_test(
    type_info: TypeInfo,
    pass_through: Callable[[SimpleNamespace], Any],
) -> Callable[[PassThroughTest], None]:
    """Create a pytest test function with one parametrized case per method.

    Bind the result to a ``test_*`` name in a test module:

        test_cache_passes_through = pass_through_test(
            TypeInfo("store.py", type_by_name_finder("Store")), CachingStore
        )
    """
    tests = mock_pass_through_helper(type_info, pass_through)

    @pytest.mark.parametrize(
        "pass_through_case", tests, ids=[t.method_name for t in tests]
    )
    def test_passes_through(pass_through_case: PassThroughTest) -> None:
        pass_through_case.execute()

    return test_passes_through
