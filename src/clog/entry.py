"""
Chained, single-use log events.

    log.info().field("service", "api").with_error(exc).emit("deploy failed after %ds", 3)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .exceptions import EntryClosedError
from .fields import Fields
from .levels import Level

if TYPE_CHECKING:
    from .logger import Logger


class Entry:
    """An in-progress log event. Not thread-safe; emit exactly once."""

    __slots__ = ("logger", "level", "error", "fields", "_closed")

    def __init__(self, logger: Logger, level: Level = Level.INFO):
        self.logger = logger
        self.level = level
        self.error: BaseException | None = None
        self.fields = Fields()
        self._closed = False

    def __repr__(self) -> str:
        return f"<Entry level={self.level.name} fields={len(self.fields)}>"

    def _check_open(self) -> None:
        if self._closed:
            raise EntryClosedError(self.level.name)

    def field(self, key: str, value: Any = None) -> Entry:
        self._check_open()
        self.fields.set(key, value)
        return self

    def with_fields(self, mapping: Mapping[str, Any] | None = None, **kwargs: Any) -> Entry:
        self._check_open()
        for key, value in {**(mapping or {}), **kwargs}.items():
            self.fields.set(key, value)
        return self

    def with_error(self, error: BaseException | None) -> Entry:
        """Attach an error, rendered as the `err` field after all user fields."""
        self._check_open()
        self.error = error
        return self

    err = with_error

    def emit(self, message: str, *args: Any) -> None:
        """Render and write the entry. `%`-style args are interpolated first;
        a format mismatch appends the raw args instead of raising.
        """
        self._check_open()
        self._closed = True
        if args:
            try:
                message = message % args
            except (TypeError, ValueError):
                message = f"{message} {args!r}"
        self.logger._emit(self.level, message, self.fields, error=self.error)

    msg = emit
