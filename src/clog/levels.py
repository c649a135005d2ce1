"""
Severity levels and their per-level visual styles.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .formatters import Style


class Level(IntEnum):
    """Ordered severities. `level >= minimum` is the only gating predicate."""

    NONE = -1
    TRACE = 0
    DEBUG = 1
    NOTICE = 2
    INFO = 3
    WARN = 4
    OK = 5
    SUCCESS = 6
    ERROR = 7
    FATAL = 8
    PRINT = 9


_ALIASES = {
    "WARNING": Level.WARN,
    "ERR": Level.ERROR,
    "CRITICAL": Level.FATAL,
}


def parse_level(value: Level | int | str) -> Level:
    """Coerce a level name (case-insensitive) or number into a `Level`."""
    if isinstance(value, Level):
        return value
    if isinstance(value, int):
        return Level(value)
    name = str(value).strip().upper()
    if name.lstrip("-").isdigit():
        return Level(int(name))
    if name in _ALIASES:
        return _ALIASES[name]
    try:
        return Level[name]
    except KeyError:
        raise ValueError(f"unknown log level: {value!r}") from None


def parse_threshold(value: Level | int | str) -> Level | int:
    """Like `parse_level`, but any integer is kept as a minimum threshold.

    Out-of-range numbers only shift gating; they are not rejected.
    """
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        value = int(value)
    if isinstance(value, int) and not isinstance(value, Level):
        try:
            return Level(value)
        except ValueError:
            return value
    return parse_level(value)


@dataclass(frozen=True)
class LevelStyle:
    """Cosmetic descriptor for one level. Shared and never mutated."""

    color: int | None
    icon: str
    label: str
    icon_style: Style = field(default_factory=lambda: Style(bold=True))
    label_style: Style = field(default_factory=lambda: Style(bold=True))
    message_style: Style = field(default_factory=Style)
    key_style: Style = field(default_factory=lambda: Style(bold=True, faint=True))


STYLES: dict[Level, LevelStyle] = {
    Level.TRACE: LevelStyle(color=63, icon="•", label="TRACE"),
    Level.DEBUG: LevelStyle(color=145, icon="•", label="DEBUG"),
    Level.NOTICE: LevelStyle(color=192, icon="•", label="NOTICE", key_style=Style(bold=True)),
    Level.INFO: LevelStyle(color=86, icon="•", label="INFO"),
    Level.WARN: LevelStyle(color=3, icon="⚠", label="WARN"),
    Level.OK: LevelStyle(color=33, icon="✔", label="OK"),
    Level.SUCCESS: LevelStyle(color=34, icon="✔", label="SUCCESS"),
    Level.ERROR: LevelStyle(color=204, icon="✖", label="ERROR"),
    Level.FATAL: LevelStyle(color=134, icon="✖", label="FATAL"),
    Level.PRINT: LevelStyle(color=None, icon="", label="", icon_style=Style(), label_style=Style()),
}


def style_for(level: Level) -> LevelStyle:
    """Look up the style of a level. Unknown levels raise `KeyError`."""
    return STYLES[level]
