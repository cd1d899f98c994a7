"""Awaitable-safe counterpart of ``safe``."""

from __future__ import annotations

from typing import Awaitable, Callable, Optional, TypeVar, Union

from .outcome import Failure, capture_async, value_or_default
from .suppression_log import log_suppressed_failure

T = TypeVar("T")
D = TypeVar("D")

AsyncThunk = Callable[[], Union[T, Awaitable[T]]]


async def safe_then(thunk: AsyncThunk[T], default: Optional[D] = None) -> Union[T, D, None]:
    """
    Resolve ``thunk`` and return its settled result, or ``default`` on failure.

    ``thunk`` may fail synchronously (raise when called) or asynchronously
    (return an awaitable that raises). Either way, as well as a settled
    ``None``, the coroutine completes with ``default``; it never raises for a
    failure of the wrapped operation. ``thunk`` is not invoked until the
    returned coroutine is awaited.
    """
    outcome = await capture_async(thunk)
    if isinstance(outcome, Failure):
        log_suppressed_failure("safe_then", outcome.error)
    return value_or_default(outcome, default)


__all__ = ["AsyncThunk", "safe_then"]
