"""
Ordered key/value fields attached to a single log event.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

import orjson


def _json_default(value: Any) -> Any:
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=str)
    if isinstance(value, BaseException):
        return display_text(value)
    return str(value)


def display_text(value: Any) -> str:
    """Convert a field value to the text shown after its key."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, BaseException):
        return str(value) or type(value).__name__
    if isinstance(value, (Mapping, list, tuple)):
        try:
            return orjson.dumps(
                value,
                default=_json_default,
                option=orjson.OPT_NON_STR_KEYS,
            ).decode()
        except TypeError:
            return str(value)
    return str(value)


class Fields:
    """Insertion-ordered mapping of field keys to values.

    Setting an existing key replaces its value and keeps its position.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Mapping[str, Any] | None = None) -> None:
        self._items: dict[str, Any] = {}
        if items:
            for key, value in items.items():
                self.set(key, value)

    def set(self, key: str, value: Any = None) -> Fields:
        self._items[key] = value
        return self

    append = set

    def __getitem__(self, key: str) -> Any:
        return self._items[key]

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fields):
            return NotImplemented
        return list(self._items.items()) == list(other._items.items())

    def __repr__(self) -> str:
        return f"Fields({self._items!r})"

    def copy(self) -> Fields:
        fields = Fields()
        fields._items = dict(self._items)
        return fields

    def items(self) -> list[tuple[str, Any]]:
        return list(self._items.items())

    def rows(self) -> Iterator[tuple[str, Any, bool]]:
        """Yield `(key, value, is_last)` in insertion order."""
        last = len(self._items) - 1
        for index, (key, value) in enumerate(self._items.items()):
            yield key, value, index == last


def fields_from_args(*args: Any) -> Fields:
    """Pair interleaved `key, value, key, value...` arguments.

    Keys are converted with `str()`; an unpaired trailing key gets no value.
    """
    fields = Fields()
    for index in range(0, len(args), 2):
        value = args[index + 1] if index + 1 < len(args) else None
        fields.set(str(args[index]), value)
    return fields
