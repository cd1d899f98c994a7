"""Runtime helpers for working with environment-backed configuration."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from .errors import ConfigurationError

_TRUE_VALUES = {"1", "true", "t", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "f", "no", "n", "off"}

_DOTENV_CANDIDATES = (Path(".env"), Path.home() / ".env")

_DEFAULT_VALUES: dict[str, str] | None = None


def _load_default_values() -> dict[str, str]:
    """Load configuration values declared in .env-style files."""
    from .runtime_helpers import DotenvLoader

    global _DEFAULT_VALUES
    if _DEFAULT_VALUES is not None:
        return _DEFAULT_VALUES

    defaults: dict[str, str] = {}
    for path in _DOTENV_CANDIDATES:
        for key, value in DotenvLoader.load_from_file(path).items():
            # First file to declare a key wins
            defaults.setdefault(key, value)

    _DEFAULT_VALUES = defaults
    return defaults


def reset_default_values() -> None:
    """Forget cached .env values so the next lookup re-reads the files."""
    global _DEFAULT_VALUES
    _DEFAULT_VALUES = None


def env_str(name: str, or_value: str | None = None) -> str | None:
    """Fetch a stripped, non-blank variable from the environment or .env files."""

    value = (os.getenv(name) or "").strip()
    if not value:
        value = (_load_default_values().get(name) or "").strip()
    return value or or_value


def env_bool(name: str, or_value: Optional[bool] = None) -> Optional[bool]:
    """Fetch an environment variable and coerce it to ``bool``."""

    raw = env_str(name)
    if raw is None:
        return or_value

    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError.invalid_value(
        name,
        raw,
        f"Expected one of {sorted(_TRUE_VALUES | _FALSE_VALUES)}",
    )


__all__ = ["env_bool", "env_str", "reset_default_values"]
