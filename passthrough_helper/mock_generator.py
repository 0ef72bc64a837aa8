"""Build mock delegates for the methods a wrapper passes through."""

import logging

from passthrough_helper.frameworks import (
    MissingMockCreatorMethodError,
    MockCapability,
    TestingFramework,
)
from passthrough_helper.models import GeneratedMock, MethodInfo, ReturnSentinel

logger = logging.getLogger(__name__)


def generate_mock(
    method_infos: list[MethodInfo],
    testing_framework: TestingFramework,
) -> GeneratedMock:
    """Create one mock per method.

    Every non-void mock returns the same ReturnSentinel, created once per
    call, so a wrapper that relays the delegate's result can be told apart
    from one that builds an equal-looking value.

    Args:
        method_infos: Methods to mock
        testing_framework: Framework that creates the mocks

    Returns:
        GeneratedMock with the mocks keyed by method name

    Raises:
        MissingMockCreatorMethodError: If the framework lacks the factory a
            method needs
    """
    mock_return = ReturnSentinel()
    mocks = {}

    for method_info in method_infos:
        kind = MockCapability.VOID if method_info.is_void else MockCapability.RETURNING
        if kind not in testing_framework.capabilities:
            logger.error(
                f"Cannot mock {method_info.name}: framework has no {kind.value} mocks"
            )
            raise MissingMockCreatorMethodError(kind)

        if method_info.is_void:
            mocks[method_info.name] = testing_framework.get()
        else:
            mocks[method_info.name] = testing_framework.get_with_return(mock_return)

    logger.debug(f"Generated {len(mocks)} mocks")
    return GeneratedMock(mocks=mocks, mock_return=mock_return)
