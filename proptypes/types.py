"""
Type definitions for proptypes.

Provides a minimal Result type (Ok/Err), the MISSING sentinel and the
ValidationError record produced by a validation pass.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

if TYPE_CHECKING:
    from .descriptor import TypeDescriptor
    from .engine import Engine
    from .paths import PropertyPath

T = TypeVar("T")
E = TypeVar("E")


class _Missing(Enum):
    """Marks a property that is absent (as opposed to present and None)."""

    MISSING = 0

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing.MISSING


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error result containing an error value."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class ValidationError:
    """One mismatch between a value and its descriptor."""

    path: str
    message: str

    def __str__(self) -> str:
        return self.message


# Type aliases
ValidationErrors = list[ValidationError]
ValidatorFn = Callable[
    ["Engine", Any, "TypeDescriptor", "PropertyPath"], ValidationErrors
]
