"""
Explicit outcome type for guarded calls.

A guarded call either settles with a value (``Success``) or raises
(``Failure``). The guards build one of these and unwrap it to "value or
default" at their boundary, so exceptions never escape.
"""

from __future__ import annotations

import asyncio
import inspect
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, TypeVar, Union

T = TypeVar("T")
D = TypeVar("D")


@dataclass(frozen=True)
class Success(Generic[T]):
    """The thunk settled with ``value`` (which may be ``None``)."""

    value: T

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """The thunk, or the awaitable it returned, raised ``error``."""

    error: BaseException

    @property
    def is_success(self) -> bool:
        return False


Outcome = Union[Success[T], Failure]


def capture(thunk: Callable[[], T]) -> Outcome[T]:
    """Invoke ``thunk`` once and wrap its result or the raised exception."""
    try:
        result = thunk()
    except Exception as exc:  # policy_guard: allow-silent-handler
        return Failure(exc)
    return Success(result)


async def capture_async(thunk: Callable[[], Union[T, Awaitable[T]]]) -> Outcome[T]:
    """
    Invoke ``thunk`` once, awaiting its result when it is awaitable.

    Exceptions raised by the call itself and by the awaited result are both
    wrapped in ``Failure``, as is a wrapped future that was cancelled by other
    code. Cancelling the awaiting task still raises ``CancelledError``, and
    other non-``Exception`` errors propagate.
    """
    result: Any = None
    try:
        result = thunk()
        if inspect.isawaitable(result):
            result = await result
    except asyncio.CancelledError as exc:
        if _cancelled_elsewhere(result):
            return Failure(exc)
        raise
    except Exception as exc:  # policy_guard: allow-silent-handler
        return Failure(exc)
    return Success(result)


def _cancelled_elsewhere(result: Any) -> bool:
    """True when ``result`` is a cancelled future and the current task is not being cancelled."""
    if not (isinstance(result, asyncio.Future) and result.cancelled()):
        return False
    task = asyncio.current_task()
    return task is None or task.cancelling() == 0


def value_or_default(outcome: Outcome[T], default: D) -> Union[T, D]:
    """Return the settled value, or ``default`` for failures and ``None`` values."""
    if isinstance(outcome, Success) and outcome.value is not None:
        return outcome.value
    return default


__all__ = ["Failure", "Outcome", "Success", "capture", "capture_async", "value_or_default"]
