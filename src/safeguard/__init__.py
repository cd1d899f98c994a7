"""Guards that turn failing or missing values into defaults."""

from .async_helpers import safe_then
from .logging_config import setup_logging
from .outcome import Failure, Outcome, Success, capture, capture_async, value_or_default
from .safe_access import safe
from .settings import GuardSettings, get_guard_settings, reset_guard_settings

__all__ = [
    "Failure",
    "GuardSettings",
    "Outcome",
    "Success",
    "capture",
    "capture_async",
    "get_guard_settings",
    "reset_guard_settings",
    "safe",
    "safe_then",
    "setup_logging",
    "value_or_default",
]
