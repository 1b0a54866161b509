"""Two-variant outcome type returned by every fallible operation.

An outcome is either ``Ok(value)`` or ``Err(error)``. The variants are
separate classes, so "both set" and "neither set" cannot be built.

Examples:
    >>> from promptsdk.runtime.template import pick_variables
    >>> match pick_variables(["name"], {"name": "Ada"}):
    ...     case Ok(value):
    ...         print(value)
    ...     case Err(error):
    ...         print(error.message)
    {'name': 'Ada'}

Callers that prefer attribute checks can use ``outcome.error`` /
``outcome.value``; the side that does not exist reads ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

from promptsdk.core.errors import ErrorInfo, OutcomeError

T = TypeVar('T')
E = TypeVar('E', bound=ErrorInfo)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def error(self) -> None:
        return None

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    @property
    def value(self) -> None:
        return None

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise OutcomeError(self.error)

    def unwrap_or(self, default: T) -> T:
        return default


Outcome = Union[Ok[T], Err[ErrorInfo]]


def ok(value: T) -> Ok[T]:
    return Ok(value)


def err(error: E) -> Err[E]:
    return Err(error)
