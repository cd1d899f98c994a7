"""Opt-in diagnostics for failures absorbed by the guards."""

from __future__ import annotations

import logging

from .settings import get_guard_settings

logger = logging.getLogger(__name__)


def log_suppressed_failure(guard_name: str, error: BaseException) -> None:
    """Record an absorbed failure when ``SAFEGUARD_LOG_SUPPRESSED`` is enabled."""
    if not get_guard_settings().log_suppressed:
        return
    logger.debug("%s suppressed %s: %s; returning default", guard_name, type(error).__name__, error)


__all__ = ["log_suppressed_failure"]
