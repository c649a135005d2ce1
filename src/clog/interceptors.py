"""
Interceptors for routing standard library logging through clog.
"""

from __future__ import annotations

import logging

from .fields import Fields
from .levels import Level
from .logger import Logger, relative_path
from .render import Caller

# CRITICAL maps to ERROR: a stdlib record must never terminate the process.
_LEVEL_MAP = (
    (logging.CRITICAL, Level.ERROR),
    (logging.ERROR, Level.ERROR),
    (logging.WARNING, Level.WARN),
    (logging.INFO, Level.INFO),
    (logging.DEBUG, Level.DEBUG),
)


def map_stdlib_level(levelno: int) -> Level:
    for threshold, level in _LEVEL_MAP:
        if levelno >= threshold:
            return level
    return Level.TRACE


class ClogHandler(logging.Handler):
    """
    Redirect standard library logging records to a clog Logger.

    The record's logger name becomes a `logger` field, exception info becomes
    the `err` field, and the call site comes from the record itself.
    """

    def __init__(self, logger: Logger | None = None, level: int = logging.NOTSET):
        super().__init__(level)
        self._logger = logger

    @property
    def logger(self) -> Logger:
        if self._logger is None:
            from .core import get_logger

            return get_logger()
        return self._logger

    def emit(self, record: logging.LogRecord) -> None:
        try:
            target = self.logger
            level = map_stdlib_level(record.levelno)
            if not target.enabled(level):
                return

            fields = Fields()
            if record.name and record.name != "root":
                fields.set("logger", record.name)

            error = None
            if record.exc_info and record.exc_info[1] is not None:
                error = record.exc_info[1]

            caller = None
            if target.config.show_caller:
                caller = Caller(relative_path(record.pathname, target.root), record.lineno)
            target._emit(level, record.getMessage(), fields, error=error, caller=caller)
        except Exception:
            self.handleError(record)


def intercept_stdlib_logging(logger: Logger | None = None, level: int = logging.DEBUG) -> ClogHandler:
    """Replace the root logger's handlers with a single `ClogHandler`."""
    handler = ClogHandler(logger)
    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(level)
    return handler
