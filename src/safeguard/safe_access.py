"""
Synchronous guard for reaching into loosely-structured data.

Handy for nested documents where any level may be missing::

    city = safe(lambda: user["address"]["city"])
    city = safe(lambda: user["address"]["city"], "unknown")
"""

from __future__ import annotations

from typing import Callable, Optional, TypeVar, Union

from .outcome import Failure, capture, value_or_default
from .suppression_log import log_suppressed_failure

T = TypeVar("T")
D = TypeVar("D")


def safe(thunk: Callable[[], T], default: Optional[D] = None) -> Union[T, D, None]:
    """
    Call ``thunk`` and return its result, or ``default`` when it fails.

    Args:
        thunk: Zero-argument callable, invoked exactly once
        default: Value returned when ``thunk`` raises or returns ``None``

    Returns:
        The result of ``thunk()`` unchanged, or ``default``
    """
    outcome = capture(thunk)
    if isinstance(outcome, Failure):
        log_suppressed_failure("safe", outcome.error)
    return value_or_default(outcome, default)


__all__ = ["safe"]
