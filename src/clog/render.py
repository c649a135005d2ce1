"""
Tree-layout rendering of a single log event.

    2024-05-01 10:00:00 ∣ INFO    ∣ • deploy complete
      ├─ service: api
      └─ duration_ms: 120
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, NamedTuple

from .fields import Fields, display_text
from .formatters import DIVIDER, DIVIDER_STYLE, GRAY, MUTED, Style
from .levels import Level, style_for

DEFAULT_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
LABEL_WIDTH = 8
INDENT = "  "
BRANCH = "├─"
LAST_BRANCH = "└─"

ERROR_KEY = "err"
CALLER_KEY = "caller"


class Caller(NamedTuple):
    path: str
    line: int

    def __str__(self) -> str:
        return f"{self.path}:{self.line}"


@dataclass(frozen=True)
class RenderConfig:
    """Frozen snapshot of the display settings used for one render."""

    show_time: bool = False
    show_level_text: bool = False
    show_caller: bool = False
    time_format: str = DEFAULT_TIME_FORMAT
    use_color: bool = False


class TreeFormatter:
    """Renders `(level, message, fields)` into styled, newline-terminated text."""

    @staticmethod
    def _timestamp(config: RenderConfig, now: datetime | None) -> str:
        moment = now or datetime.now()
        return "{} {} ".format(
            MUTED.render(moment.strftime(config.time_format), use_color=config.use_color),
            DIVIDER_STYLE.render(DIVIDER, use_color=config.use_color),
        )

    @staticmethod
    def _level_text(level: Level, config: RenderConfig) -> str:
        style = style_for(level)
        label = replace(style.label_style, foreground=style.color, width=LABEL_WIDTH)
        return "{}{} ".format(
            label.render(style.label, use_color=config.use_color),
            DIVIDER_STYLE.render(DIVIDER, use_color=config.use_color),
        )

    @classmethod
    def header(cls, level: Level, message: str, config: RenderConfig, now: datetime | None = None) -> str:
        style = style_for(level)
        parts = []
        if level != Level.PRINT:
            if config.show_time:
                parts.append(cls._timestamp(config, now))
            if config.show_level_text:
                parts.append(cls._level_text(level, config))
        if style.icon:
            icon = style.icon_style.with_color(style.color)
            parts.append(icon.render(style.icon, use_color=config.use_color) + " ")
        parts.append(style.message_style.render(message, use_color=config.use_color))
        return "".join(parts)

    @staticmethod
    def row(key: str, value: Any, key_style: Style, *, last: bool, use_color: bool) -> str:
        text = display_text(value)
        if key and text:
            key += ": "
        connector = MUTED.render(LAST_BRANCH if last else BRANCH, use_color=use_color)
        return f"\n{INDENT}{connector} {key_style.render(key, use_color=use_color)}{text}"

    @classmethod
    def render(
        cls,
        level: Level,
        message: str,
        fields: Fields | None,
        config: RenderConfig,
        *,
        error: BaseException | None = None,
        caller: Caller | None = None,
        now: datetime | None = None,
    ) -> str:
        """Render one event. `fields` is read, never modified.

        `error` is set on a copy of the fields under `err`, so a user `err`
        field is replaced in place. An active caller replaces any user
        `caller` field and always renders last.
        """
        style = style_for(level)
        key_style = style.key_style.with_color(style.color)
        muted_key = style.key_style.with_color(GRAY)
        show_caller = caller is not None and config.show_caller

        merged = fields.copy() if fields else Fields()
        if error is not None:
            merged.set(ERROR_KEY, error)

        rows: list[tuple[str, Any, Style]] = [
            (key, value, key_style)
            for key, value in merged.items()
            if not (show_caller and key == CALLER_KEY)
        ]
        if show_caller:
            rows.append((CALLER_KEY, MUTED.render(str(caller), use_color=config.use_color), muted_key))

        out = [cls.header(level, message, config, now)]
        last = len(rows) - 1
        for index, (key, value, row_style) in enumerate(rows):
            out.append(cls.row(key, value, row_style, last=index == last, use_color=config.use_color))
        out.append("\n")
        return "".join(out)
