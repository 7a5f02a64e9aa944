"""
transgizmo.log - package logger.

Usage:
    from transgizmo import log

    log.debug("picked")

    try:
        do_something()
    except Exception as e:
        log.error(e, "Failed to do something")  # includes traceback
"""

import logging
import traceback

_logger = logging.getLogger("transgizmo")
_logger.addHandler(logging.NullHandler())


def debug(msg_or_exc, context: str = ""):
    if isinstance(msg_or_exc, BaseException):
        _log_exception(_logger.debug, msg_or_exc, context)
    else:
        _logger.debug(str(msg_or_exc))


def error(msg_or_exc, context: str = ""):
    """Log error message, or exception with its traceback."""
    if isinstance(msg_or_exc, BaseException):
        _log_exception(_logger.error, msg_or_exc, context)
    else:
        _logger.error(str(msg_or_exc))


def set_level(level) -> None:
    """Set minimal level of the package logger (int or level name)."""
    _logger.setLevel(level)


def _log_exception(log_func, exc: BaseException, context: str):
    prefix = f"{context}: " if context else ""
    tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    log_func(f"{prefix}{type(exc).__name__}: {exc}\n{tb}")
