"""
clog: leveled, colorized console logging with tree-formatted fields.

    import clog

    clog.info("deploy complete", "service", "api", "duration_ms", 120)
    clog.error().field("service", "api").with_error(exc).emit("deploy failed")

Output goes to stderr through a process-wide default logger; build a separate
`Logger` for isolated configuration or a different sink.
"""

from .config import ClogSettings
from .core import (
    at,
    configure_logging,
    debug,
    enabled,
    error,
    fatal,
    get_logger,
    info,
    log,
    notice,
    ok,
    print,
    set_caller_skip,
    set_default,
    set_exit_func,
    set_root,
    set_level,
    set_time_format,
    set_writer,
    success,
    trace,
    warn,
    with_caller,
    with_color,
    with_level_text,
    with_timestamp,
)
from .entry import Entry
from .exceptions import ClogError, EntryClosedError
from .fields import Fields, display_text, fields_from_args
from .levels import STYLES, Level, LevelStyle, parse_level, style_for
from .logger import Logger

# `print` is reachable as `clog.print` but left out of star-imports so it
# never shadows the builtin.
__all__ = [
    "ClogError",
    "ClogSettings",
    "Entry",
    "EntryClosedError",
    "Fields",
    "Level",
    "LevelStyle",
    "Logger",
    "STYLES",
    "at",
    "configure_logging",
    "debug",
    "display_text",
    "enabled",
    "error",
    "fatal",
    "fields_from_args",
    "get_logger",
    "info",
    "log",
    "notice",
    "ok",
    "parse_level",
    "set_caller_skip",
    "set_default",
    "set_exit_func",
    "set_root",
    "set_level",
    "set_time_format",
    "set_writer",
    "style_for",
    "success",
    "trace",
    "warn",
    "with_caller",
    "with_color",
    "with_level_text",
    "with_timestamp",
]
