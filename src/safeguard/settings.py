"""Guard settings resolved from the environment."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .config import ConfigurationError, env_bool, reset_default_values

logger = logging.getLogger(__name__)

LOG_SUPPRESSED_ENV = "SAFEGUARD_LOG_SUPPRESSED"


@dataclass(frozen=True)
class GuardSettings:
    """Runtime knobs shared by ``safe`` and ``safe_then``."""

    log_suppressed: bool = False

    @classmethod
    def from_env(cls) -> "GuardSettings":
        """Build settings from environment variables and .env files.

        Raises:
            ConfigurationError: If a variable is set to an unparseable value
        """
        return cls(log_suppressed=bool(env_bool(LOG_SUPPRESSED_ENV, or_value=False)))


_SETTINGS: Optional[GuardSettings] = None


def get_guard_settings() -> GuardSettings:
    """Return cached settings, resolving them on first use.

    Malformed configuration is reported once and replaced by defaults so the
    guards keep their never-raise contract.
    """
    global _SETTINGS
    if _SETTINGS is not None:
        return _SETTINGS

    try:
        settings = GuardSettings.from_env()
    except ConfigurationError as exc:  # policy_guard: allow-silent-handler
        logger.warning("Ignoring invalid guard configuration, using defaults: %s", exc)
        settings = GuardSettings()

    _SETTINGS = settings
    return settings


def reset_guard_settings() -> None:
    """Drop cached settings and .env values; the next lookup re-reads them."""
    global _SETTINGS
    _SETTINGS = None
    reset_default_values()


__all__ = ["GuardSettings", "LOG_SUPPRESSED_ENV", "get_guard_settings", "reset_guard_settings"]
