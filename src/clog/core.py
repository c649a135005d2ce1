"""
Process-wide default logger and the free functions delegating to it.

The default instance is built once, on first use, from `ClogSettings` (stderr,
NOTICE, no timestamp/caller/label). Code that needs isolated configuration or
a different sink should construct its own `Logger` rather than reconfigure
this shared one.
"""

from __future__ import annotations

import os
import threading
from typing import Any

from .config import ClogSettings
from .entry import Entry
from .levels import Level
from .logger import ExitFunc, Logger

# =============================================================================
# Global State
# =============================================================================

_default: Logger | None = None
_default_lock = threading.Lock()


def get_logger() -> Logger:
    """Return the process-wide logger, creating it on first use."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = Logger.from_settings(ClogSettings())
    return _default


def set_default(logger: Logger) -> Logger:
    """Install `logger` as the process-wide instance."""
    global _default
    with _default_lock:
        _default = logger
    return logger


def configure_logging(settings: ClogSettings | None = None, **overrides: Any) -> Logger:
    """Rebuild the default logger from settings.

    Args:
        settings: Explicit settings; loaded from the environment when omitted.
        overrides: Individual `ClogSettings` fields taking precedence.
    """
    settings = settings or ClogSettings()
    if overrides:
        settings = ClogSettings(**{**settings.model_dump(), **overrides})
    return set_default(Logger.from_settings(settings))


# =============================================================================
# Configuration Shortcuts
# =============================================================================


def set_level(level: Level | int | str) -> Logger:
    return get_logger().set_level(level)


def with_timestamp(enabled: bool = True) -> Logger:
    return get_logger().with_timestamp(enabled)


def with_caller(enabled: bool = True) -> Logger:
    return get_logger().with_caller(enabled)


def with_level_text(enabled: bool = True) -> Logger:
    return get_logger().with_level_text(enabled)


def with_color(enabled: bool | None = True) -> Logger:
    return get_logger().with_color(enabled)


def set_time_format(time_format: str) -> Logger:
    return get_logger().set_time_format(time_format)


def set_writer(writer: Any) -> Logger:
    return get_logger().set_writer(writer)


def set_caller_skip(skip: int) -> Logger:
    return get_logger().set_caller_skip(skip)


def set_root(root: str | os.PathLike[str] | None) -> Logger:
    return get_logger().set_root(root)


def set_exit_func(exit_func: ExitFunc) -> Logger:
    return get_logger().set_exit_func(exit_func)


def enabled(level: Level) -> bool:
    return get_logger().enabled(level)


# =============================================================================
# Level Functions
# =============================================================================


def log(level: Level | int | str, message: str, *args: Any) -> None:
    get_logger().log(level, message, *args)


def at(level: Level | int | str) -> Entry:
    return get_logger().at(level)


def trace(message: str | None = None, *args: Any) -> Entry | None:
    return get_logger().trace(message, *args)


def debug(message: str | None = None, *args: Any) -> Entry | None:
    return get_logger().debug(message, *args)


def notice(message: str | None = None, *args: Any) -> Entry | None:
    return get_logger().notice(message, *args)


def info(message: str | None = None, *args: Any) -> Entry | None:
    return get_logger().info(message, *args)


def warn(message: str | None = None, *args: Any) -> Entry | None:
    return get_logger().warn(message, *args)


def ok(message: str | None = None, *args: Any) -> Entry | None:
    return get_logger().ok(message, *args)


def success(message: str | None = None, *args: Any) -> Entry | None:
    return get_logger().success(message, *args)


def error(message: str | None = None, *args: Any) -> Entry | None:
    return get_logger().error(message, *args)


def fatal(message: str | None = None, *args: Any) -> Entry | None:
    return get_logger().fatal(message, *args)


def print(message: str | None = None, *args: Any) -> Entry | None:  # noqa: A001
    return get_logger().print(message, *args)
