"""
structlog integration: render event dicts with the clog tree layout.

    structlog.configure(processors=[structlog.processors.add_log_level, TreeRenderer()])
"""

from __future__ import annotations

import sys
from typing import Any

from structlog.typing import EventDict, WrappedLogger

from .fields import Fields
from .levels import Level, parse_level
from .render import DEFAULT_TIME_FORMAT, RenderConfig, TreeFormatter
from .sinks import supports_color

_METHOD_LEVELS = {
    "exception": Level.ERROR,
    "msg": Level.INFO,
    "log": Level.INFO,
}

EXCLUDED_KEYS = {"level", "event", "_name", "_record", "_from_structlog"}


def _resolve_level(method_name: str, event_dict: EventDict) -> Level:
    name = event_dict.get("level", method_name)
    if name in _METHOD_LEVELS:
        return _METHOD_LEVELS[name]
    try:
        level = parse_level(name)
    except ValueError:
        return Level.INFO
    return Level.INFO if level == Level.NONE else level


def _resolve_error(event_dict: EventDict) -> Any:
    exc_info = event_dict.pop("exc_info", None)
    if isinstance(exc_info, BaseException):
        return exc_info
    if isinstance(exc_info, tuple) and len(exc_info) == 3:
        return exc_info[1]
    if exc_info:
        return sys.exc_info()[1]
    # Already formatted by `structlog.processors.format_exc_info`
    return event_dict.pop("exception", None)


class TreeRenderer:
    """Final structlog processor producing a tree-formatted record.

    Args:
        show_time: Prefix the header with the current time
        show_level_text: Prefix the header with the level label
        time_format: strftime format for the timestamp
        colors: Force ANSI styling on/off; None detects it from stdout
    """

    def __init__(
        self,
        *,
        show_time: bool = False,
        show_level_text: bool = True,
        time_format: str = DEFAULT_TIME_FORMAT,
        colors: bool | None = None,
    ):
        self._show_time = show_time
        self._show_level_text = show_level_text
        self._time_format = time_format
        self._colors = colors

    def __call__(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
        event_dict = dict(event_dict)
        level = _resolve_level(method_name, event_dict)
        message = str(event_dict.pop("event", ""))
        error = _resolve_error(event_dict)
        if self._show_time:
            event_dict.pop("timestamp", None)

        fields = Fields()
        for key, value in event_dict.items():
            if key not in EXCLUDED_KEYS:
                fields.set(key, value)

        # A pre-formatted traceback string renders as a regular trailing field
        if error is not None and not isinstance(error, BaseException):
            fields.set("err", error)
            error = None

        config = RenderConfig(
            show_time=self._show_time,
            show_level_text=self._show_level_text,
            time_format=self._time_format,
            use_color=supports_color(sys.stdout) if self._colors is None else self._colors,
        )
        return TreeFormatter.render(level, message, fields, config, error=error).rstrip("\n")
