import functools
import sys
import typing

from interface import SomeInterface


class Classs(SomeInterface):
    some_prop: str = ""

    def __init__(self, some_prop: str):
        self.some_prop = some_prop

    def method_no_parameters_void(self) -> None:
        raise NotImplementedError

    def method_with_one_parameter_returns(self, p1: str) -> int:
        raise NotImplementedError

    def method_with_two_parameter_returns(self, p1: str, p2: str) -> int:
        raise NotImplementedError

    @typing.overload
    def overload(self) -> None: ...

    @typing.overload
    def overload(self, p1: str) -> None: ...

    @typing.overload
    def overload(self, p1: str, p2: str) -> None: ...

    def overload(self, p1=None, p2=None):
        raise NotImplementedError

    @typing.overload
    def reverse_overload(self, p1: str, p2: str) -> None: ...

    @typing.overload
    def reverse_overload(self, p1: str) -> None: ...

    @typing.overload
    def reverse_overload(self) -> None: ...

    def reverse_overload(self, p1=None, p2=None):
        raise NotImplementedError

    def no_return(self):
        raise NotImplementedError

    def string_void(self) -> "None":
        raise NotImplementedError

    @property
    def read_only(self) -> str:
        return self.some_prop

    @read_only.setter
    def read_only(self, value: str) -> None:
        self.some_prop = value

    @functools.cached_property
    def cached(self) -> str:
        return self.some_prop

    @staticmethod
    def static_method(p1, p2, /, p3) -> None:
        raise NotImplementedError

    @classmethod
    def class_method(cls, p1) -> "Classs":
        raise NotImplementedError

    def keyword_only(self, p1, *args, p2, **kwargs) -> None:
        raise NotImplementedError

    def __secret(self, p1) -> int:
        raise NotImplementedError

    def __len__(self) -> int:
        raise NotImplementedError

    if sys.version_info >= (3, 8):

        def guarded(self, p1, p2) -> int:
            raise NotImplementedError

    else:

        def guarded(self, p1) -> int:
            raise NotImplementedError

    try:

        def in_try(self) -> None:
            raise NotImplementedError

    except ImportError:
        pass

    async def async_method(self) -> None:
        raise NotImplementedError

    class Nested:
        def nested_method(self) -> None:
            raise NotImplementedError


class Other:
    def other_method(self, p1) -> int:
        raise NotImplementedError
