"""Two-branch success/failure value used instead of raising at boundaries."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Failure(Generic[E]):
    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True


Result = Success[T] | Failure[E]


def success(value: T = None) -> Success[T]:  # type: ignore[assignment]
    return Success(value)


def failure(error: E) -> Failure[E]:
    return Failure(error)


def try_result(
    fn: Callable[[], T], on_error: Callable[[Exception], E]
) -> Result[T, E]:
    """Call *fn* and return its value, or the mapped error if it raises."""
    try:
        return Success(fn())
    except Exception as exc:
        return Failure(on_error(exc))
