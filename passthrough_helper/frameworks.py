"""Adapters between pass-through tests and a mocking framework."""

import abc
import enum
from collections.abc import Callable
from typing import Any
from unittest.mock import Mock

from passthrough_helper.models import PassThroughHelperError


class MockCapability(enum.Enum):
    """Kinds of mock a testing framework can create."""

    VOID = "void"
    RETURNING = "returning"


FACTORY_NAMES = {
    MockCapability.VOID: "get",
    MockCapability.RETURNING: "get_with_return",
}


class MissingMockCreatorMethodError(PassThroughHelperError):
    """The testing framework cannot create a mock the method set needs."""

    def __init__(self, kind: MockCapability):
        super().__init__(
            f"You did not supply the {FACTORY_NAMES[kind]} method "
            f"needed to mock {kind.value} methods"
        )
        self.kind = kind


class TestingFramework(abc.ABC):
    """Bridge to a concrete mocking and assertion library.

    Subclasses declare the mock factories they provide in ``capabilities``;
    callers check membership before calling ``get`` or ``get_with_return``.
    """

    __test__ = False

    capabilities: frozenset[MockCapability] = frozenset()

    @abc.abstractmethod
    def expect_called_once_with(self, mock: Any, args: list[Any]) -> None:
        """Assert the mock was called exactly once with these positional args."""

    def get(self) -> Any:
        """Create a mock for a method without a return value."""
        raise MissingMockCreatorMethodError(MockCapability.VOID)

    def get_with_return(self, return_value: Any) -> Any:
        """Create a mock that returns ``return_value`` when called."""
        raise MissingMockCreatorMethodError(MockCapability.RETURNING)


class FunctionTestingFramework(TestingFramework):
    """Testing framework assembled from plain callables.

    Only the factories that are passed in become capabilities.
    """

    def __init__(
        self,
        expect_called_once_with: Callable[[Any, list[Any]], Any],
        get: Callable[[], Any] | None = None,
        get_with_return: Callable[[Any], Any] | None = None,
    ):
        self._expect_called_once_with = expect_called_once_with
        self._get = get
        self._get_with_return = get_with_return

        capabilities = set()
        if get is not None:
            capabilities.add(MockCapability.VOID)
        if get_with_return is not None:
            capabilities.add(MockCapability.RETURNING)
        self.capabilities = frozenset(capabilities)

    def expect_called_once_with(self, mock: Any, args: list[Any]) -> None:
        self._expect_called_once_with(mock, args)

    def get(self) -> Any:
        if self._get is None:
            return super().get()
        return self._get()

    def get_with_return(self, return_value: Any) -> Any:
        if self._get_with_return is None:
            return super().get_with_return(return_value)
        return self._get_with_return(return_value)


class UnittestMockFramework(TestingFramework):
    """Testing framework backed by ``unittest.mock``."""

    capabilities = frozenset({MockCapability.VOID, MockCapability.RETURNING})

    def get(self) -> Mock:
        return Mock()

    def get_with_return(self, return_value: Any) -> Mock:
        return Mock(return_value=return_value)

    def expect_called_once_with(self, mock: Mock, args: list[Any]) -> None:
        mock.assert_called_once_with(*args)
