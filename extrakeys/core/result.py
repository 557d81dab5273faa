"""Tagged result type for parse operations with expected failures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful parse."""

    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed parse; ``error`` keeps the original exception."""

    error: E

    @property
    def message(self) -> str:
        return str(self.error)


Result = Union[Ok[T], Err[E]]
