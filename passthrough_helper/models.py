"""Data models for pass-through test generation."""

import ast
from collections.abc import Callable
from dataclasses import asdict, dataclass, field
from pathlib import Path
from types import SimpleNamespace
from typing import Any


class PassThroughHelperError(Exception):
    """Base class for errors raised while building or running pass-through tests."""


@dataclass(frozen=True)
class MethodInfo:
    """The collapsed shape of one method on a declared type."""

    name: str
    num_parameters: int
    is_void: bool

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


@dataclass
class SourceFile:
    """Parsed source text and where it came from."""

    path: str
    text: str
    tree: ast.Module


TypeFinder = Callable[[SourceFile], ast.ClassDef]


@dataclass
class TypeInfo:
    """Selects the declared type whose methods should pass through.

    Both selectors are optional: without a type finder the first class in
    the file is used, and without a method filter every method is accepted.
    """

    file_path: str | Path
    type_finder: TypeFinder | None = None
    is_valid_method: Callable[[str], bool] | None = None


class ReturnSentinel:
    """Value returned by every non-void mock of a single generation run."""

    def __repr__(self) -> str:
        return f"<ReturnSentinel {id(self):#x}>"


@dataclass(frozen=True)
class PositionalArgument:
    """Synthetic argument identified by its position in the call."""

    index: int

    def __repr__(self) -> str:
        return f"<arg {self.index}>"


@dataclass
class GeneratedMock:
    """Mocks keyed by method name plus the shared return sentinel."""

    mocks: dict[str, Any]
    mock_return: ReturnSentinel

    def delegate(self) -> SimpleNamespace:
        """Attribute-style view over the mocks, handed to the wrapper factory."""
        return SimpleNamespace(**self.mocks)


@dataclass
class PassThroughTest:
    """One runnable pass-through check for a single method."""

    method_name: str
    execute: Callable[[], None] = field(repr=False)
