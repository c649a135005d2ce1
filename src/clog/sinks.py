"""
Sink adapter: wraps any writable destination the logger is pointed at.
"""

from __future__ import annotations

import io
import os
import sys
from typing import Any


def supports_color(stream: Any) -> bool:
    """Whether ANSI styling should be written to `stream`.

    Honors the NO_COLOR / FORCE_COLOR conventions, then falls back to `isatty`.
    """
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    try:
        return bool(getattr(stream, "isatty", lambda: False)())
    except ValueError:  # closed stream
        return False


class StreamSink:
    """Write rendered records to a text or binary stream.

    Write failures are swallowed: logging is best-effort and must never raise
    into the instrumented program.
    """

    def __init__(self, stream: Any = None):
        self._stream = stream if stream is not None else sys.stderr

    @property
    def stream(self) -> Any:
        return self._stream

    def _is_binary(self) -> bool:
        if isinstance(self._stream, (io.RawIOBase, io.BufferedIOBase)):
            return True
        mode = getattr(self._stream, "mode", "")
        return isinstance(mode, str) and "b" in mode

    def write(self, text: str) -> None:
        try:
            if self._is_binary():
                self._stream.write(text.encode("utf-8"))
            else:
                self._stream.write(text)
            flush = getattr(self._stream, "flush", None)
            if flush is not None:
                flush()
        except Exception:
            pass  # Fail silently to avoid breaking the application

    def use_color(self) -> bool:
        return supports_color(self._stream)
