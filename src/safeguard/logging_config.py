"""
Console logging configuration for applications using safeguard.

The library never configures logging on import; applications (and the
suppression diagnostics) call ``setup_logging`` explicitly.
"""

import logging
import sys
import threading

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)

_TECHNICAL_FORMAT = "%(asctime)s%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _close_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        try:
            handler.close()
        except OSError as exc:  # Best-effort cleanup operation  # policy_guard: allow-silent-handler
            _MODULE_LOGGER.debug("Handler close failed for logger '%s': %s", logger.name, exc)
        logger.removeHandler(handler)


def _build_console_handler(user_friendly: bool, level: int) -> logging.Handler:
    if user_friendly:
        formatter = logging.Formatter("%(message)s")
    else:
        formatter = logging.Formatter(_TECHNICAL_FORMAT, _DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.WARNING if user_friendly else level)
    return console_handler


def _suppress_noisy_third_parties() -> None:
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def setup_logging(user_friendly: bool = False, level: int = logging.INFO) -> logging.Handler:
    """Replace root handlers with a single stdout console handler."""

    with _config_lock:
        root_logger = logging.getLogger()
        _close_handlers(root_logger)

        console_handler = _build_console_handler(user_friendly, level)
        root_logger.addHandler(console_handler)
        root_logger.setLevel(level)
        _suppress_noisy_third_parties()
        return console_handler


__all__ = ["setup_logging"]
