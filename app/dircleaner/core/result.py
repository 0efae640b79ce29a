"""Railway-oriented result type for composing pipeline stages.

A pipeline stage returns either a ``Success`` carrying its value (plus any
non-fatal messages collected so far) or a ``Failure`` carrying a single
reason. Stages are chained with ``bind`` so the first failure short-circuits
everything after it. Side effects such as logging and deletion are attached
with ``success_tee``/``failure_tee`` and never change the outcome.

Example:
    >>> outcome = succeed(" /media ").map(str.strip).bind(validate)
    >>> outcome.success_tee(lambda value, _: print(value))
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Successful outcome of a pipeline stage.

    Attributes:
        value: Value produced by the stage.
        messages: Non-fatal messages accumulated along the success track.
    """

    value: T
    messages: tuple[str, ...] = ()

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def bind(self, func: Callable[[T], Result[U, Any]]) -> Result[U, Any]:
        """Run the next stage on the value, keeping accumulated messages."""
        outcome = func(self.value)
        if isinstance(outcome, Success) and self.messages:
            return Success(outcome.value, self.messages + outcome.messages)
        return outcome

    def map(self, func: Callable[[T], U]) -> Success[U]:
        """Transform the value without leaving the success track."""
        return Success(func(self.value), self.messages)

    def success_tee(self, func: Callable[[T, tuple[str, ...]], object]) -> Success[T]:
        """Call ``func`` with the value and messages for its side effect."""
        func(self.value, self.messages)
        return self

    def failure_tee(self, func: Callable[[Any], object]) -> Success[T]:
        return self

    def map_messages(self, func: Callable[[Any], Any]) -> Success[T]:
        # Messages are already display text
        return self


@dataclass(frozen=True, slots=True)
class Failure(Generic[E]):
    """Failed outcome of a pipeline stage.

    Attributes:
        reason: Structured reason the stage failed.
    """

    reason: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def bind(self, func: Callable[[Any], Result[Any, E]]) -> Failure[E]:
        return self

    def map(self, func: Callable[[Any], Any]) -> Failure[E]:
        return self

    def success_tee(self, func: Callable[[Any, tuple[str, ...]], object]) -> Failure[E]:
        return self

    def failure_tee(self, func: Callable[[E], object]) -> Failure[E]:
        """Call ``func`` with the failure reason for its side effect."""
        func(self.reason)
        return self

    def map_messages(self, func: Callable[[E], F]) -> Failure[F]:
        """Convert the failure reason into another representation."""
        return Failure(func(self.reason))


Result = Success[T] | Failure[E]


def succeed(value: T, *messages: str) -> Success[T]:
    """Wrap a value on the success track."""
    return Success(value, tuple(messages))


def fail(reason: E) -> Failure[E]:
    """Wrap a reason on the failure track."""
    return Failure(reason)
