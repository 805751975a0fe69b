"""
wgsl_preprocessor.log - package logger.

Module loading and include resolution report at debug level; a failed
ShaderBuilder build is reported at error level with its traceback before
the exception propagates:

    from wgsl_preprocessor import log

    log.set_level("DEBUG")
"""

import logging
import traceback

_logger = logging.getLogger("wgsl_preprocessor")
_logger.addHandler(logging.NullHandler())


def debug(msg: str):
    _logger.debug(msg)


def error(msg_or_exc, context: str = ""):
    """Log error message or exception (with traceback) under a context."""
    if isinstance(msg_or_exc, BaseException):
        _log_exception(_logger.error, msg_or_exc, context)
    else:
        _logger.error(str(msg_or_exc))


def _log_exception(log_func, exc: BaseException, context: str):
    exc_type = type(exc).__name__
    tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))

    if context:
        log_func(f"{context}: {exc_type}: {exc}\n{tb}")
    else:
        log_func(f"{exc_type}: {exc}\n{tb}")


def set_level(level) -> None:
    """Set the minimum level for the package logger (int or name like "DEBUG")."""
    _logger.setLevel(level)
