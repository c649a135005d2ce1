"""
Exceptions raised by clog.

Logging calls themselves never raise; these signal misuse of the API.
"""

from __future__ import annotations


class ClogError(Exception):
    """Root of all clog exceptions."""


class EntryClosedError(ClogError):
    """An Entry was used again after it was emitted."""

    def __init__(self, level: object) -> None:
        super().__init__(f"entry at level {level} was already emitted")
        self.level = level
