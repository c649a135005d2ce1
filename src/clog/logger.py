"""
Leveled console logger with a one-shot API and a chained Entry builder.
"""

from __future__ import annotations

import os
import sys
import threading
from collections.abc import Callable
from dataclasses import dataclass, replace
from pathlib import Path
from types import FrameType
from typing import TYPE_CHECKING, Any

from .entry import Entry
from .fields import Fields, fields_from_args
from .levels import Level, parse_level, parse_threshold
from .render import DEFAULT_TIME_FORMAT, Caller, RenderConfig, TreeFormatter
from .sinks import StreamSink

if TYPE_CHECKING:
    from .config import ClogSettings


_PACKAGE = __name__.rpartition(".")[0]

ExitFunc = Callable[[int], Any]


def _terminate(code: int) -> None:
    """Flush stdio and end the whole process, not just the calling thread."""
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.flush()
        except Exception:
            pass
    os._exit(code)


# =============================================================================
# Caller Resolution
# =============================================================================


def _is_internal(frame: FrameType) -> bool:
    module = frame.f_globals.get("__name__", "")
    return module == _PACKAGE or module.startswith(_PACKAGE + ".")


def relative_path(filename: str, root: str | None) -> str:
    path = Path(filename)
    if root:
        try:
            return path.relative_to(root).as_posix()
        except ValueError:
            pass
    return path.as_posix()


def resolve_caller(skip: int = 0, root: str | None = None) -> Caller | None:
    """Locate the call site that entered the logger.

    Frames belonging to this package are skipped first, whatever the depth of
    the internal call chain. `skip` then drops that many additional frames, so
    a helper that wraps the logger passes 1 per wrapping layer to report its own
    caller instead of itself. The path is relative to `root` when the file lies
    under it, absolute otherwise.
    """
    frame: FrameType | None = sys._getframe(1)
    while frame is not None and _is_internal(frame):
        frame = frame.f_back
    for _ in range(skip):
        if frame is None:
            break
        frame = frame.f_back
    if frame is None:
        return None
    return Caller(relative_path(frame.f_code.co_filename, root), frame.f_lineno)


# =============================================================================
# Logger
# =============================================================================


@dataclass(frozen=True)
class LoggerConfig:
    """Immutable configuration. Setters swap in a new snapshot."""

    sink: StreamSink
    level: Level | int = Level.NOTICE
    show_time: bool = False
    show_level_text: bool = False
    show_caller: bool = False
    time_format: str = DEFAULT_TIME_FORMAT
    color: bool | None = None
    caller_skip: int = 0
    root: str | None = None

    def render_config(self) -> RenderConfig:
        return RenderConfig(
            show_time=self.show_time,
            show_level_text=self.show_level_text,
            show_caller=self.show_caller,
            time_format=self.time_format,
            use_color=self.sink.use_color() if self.color is None else self.color,
        )


class Logger:
    """A leveled logger writing tree-formatted records to one sink.

    Render and write happen under a per-instance lock so records from
    concurrent threads never interleave. Setters are not serialized against
    in-flight log calls; a racing change is seen by either the old or the new
    snapshot, never a mix of both.
    """

    def __init__(
        self,
        writer: Any = None,
        level: Level | int | str = Level.NOTICE,
        *,
        show_time: bool = False,
        show_level_text: bool = False,
        show_caller: bool = False,
        time_format: str = DEFAULT_TIME_FORMAT,
        color: bool | None = None,
        exit_func: ExitFunc = _terminate,
    ):
        self._lock = threading.Lock()
        self._config = LoggerConfig(
            sink=StreamSink(writer),
            level=parse_threshold(level),
            show_time=show_time,
            show_level_text=show_level_text,
            show_caller=show_caller,
            time_format=time_format,
            color=color,
            root=os.getcwd(),
        )
        self._exit = exit_func

    @classmethod
    def from_settings(cls, settings: ClogSettings) -> Logger:
        return cls(
            writer=settings.writer(),
            level=settings.level,
            show_time=settings.show_time,
            show_level_text=settings.show_level_text,
            show_caller=settings.show_caller,
            time_format=settings.time_format,
            color=settings.use_color(),
        )

    def __repr__(self) -> str:
        level = self._config.level
        return f"<Logger level={getattr(level, 'name', level)}>"

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    @property
    def config(self) -> LoggerConfig:
        return self._config

    @property
    def level(self) -> Level | int:
        return self._config.level

    @property
    def writer(self) -> Any:
        return self._config.sink.stream

    @property
    def root(self) -> str | None:
        return self._config.root

    def _update(self, **changes: Any) -> Logger:
        self._config = replace(self._config, **changes)
        return self

    def set_level(self, level: Level | int | str) -> Logger:
        return self._update(level=parse_threshold(level))

    def with_timestamp(self, enabled: bool = True) -> Logger:
        return self._update(show_time=enabled)

    def with_caller(self, enabled: bool = True) -> Logger:
        return self._update(show_caller=enabled)

    def with_level_text(self, enabled: bool = True) -> Logger:
        return self._update(show_level_text=enabled)

    def with_color(self, enabled: bool | None = True) -> Logger:
        """Force color on/off; None detects it from the sink."""
        return self._update(color=enabled)

    def set_time_format(self, time_format: str) -> Logger:
        return self._update(time_format=time_format)

    def set_writer(self, writer: Any) -> Logger:
        return self._update(sink=StreamSink(writer))

    def set_caller_skip(self, skip: int) -> Logger:
        """Extra frames to skip when this logger is wrapped by helper functions."""
        return self._update(caller_skip=skip)

    def set_root(self, root: str | os.PathLike[str] | None) -> Logger:
        """Directory caller paths are shown relative to; None keeps them absolute."""
        return self._update(root=os.fspath(root) if root is not None else None)

    def set_exit_func(self, exit_func: ExitFunc) -> Logger:
        """Replace the hook called after a FATAL record is written."""
        self._exit = exit_func
        return self

    # -------------------------------------------------------------------------
    # Emission
    # -------------------------------------------------------------------------

    def enabled(self, level: Level) -> bool:
        """PRINT is never gated; every other level must reach the threshold."""
        return level == Level.PRINT or level >= self._config.level

    def _emit(
        self,
        level: Level,
        message: str,
        fields: Fields | None,
        *,
        error: BaseException | None = None,
        caller: Caller | None = None,
    ) -> None:
        config = self._config
        if level == Level.PRINT or level >= config.level:
            if config.show_caller and caller is None:
                caller = resolve_caller(config.caller_skip, config.root)
            with self._lock:
                text = TreeFormatter.render(
                    level, message, fields, config.render_config(), error=error, caller=caller
                )
                config.sink.write(text)
        if level == Level.FATAL:
            self._exit(1)

    def log(self, level: Level | int | str, message: str, *args: Any) -> None:
        """Log `message` at `level` with interleaved key/value arguments."""
        level = parse_level(level)
        if level != Level.FATAL and not self.enabled(level):
            return
        self._emit(level, message, fields_from_args(*args))

    def at(self, level: Level | int | str) -> Entry:
        """Start a chained Entry at `level`."""
        return Entry(self, parse_level(level))

    def _dispatch(self, level: Level, message: str | None, args: tuple[Any, ...]) -> Entry | None:
        if message is None:
            return self.at(level)
        self.log(level, message, *args)
        return None

    # Each level method logs immediately when given a message and returns an
    # Entry builder when called without one.

    def trace(self, message: str | None = None, *args: Any) -> Entry | None:
        return self._dispatch(Level.TRACE, message, args)

    def debug(self, message: str | None = None, *args: Any) -> Entry | None:
        return self._dispatch(Level.DEBUG, message, args)

    def notice(self, message: str | None = None, *args: Any) -> Entry | None:
        return self._dispatch(Level.NOTICE, message, args)

    def info(self, message: str | None = None, *args: Any) -> Entry | None:
        return self._dispatch(Level.INFO, message, args)

    def warn(self, message: str | None = None, *args: Any) -> Entry | None:
        return self._dispatch(Level.WARN, message, args)

    def ok(self, message: str | None = None, *args: Any) -> Entry | None:
        return self._dispatch(Level.OK, message, args)

    def success(self, message: str | None = None, *args: Any) -> Entry | None:
        return self._dispatch(Level.SUCCESS, message, args)

    def error(self, message: str | None = None, *args: Any) -> Entry | None:
        return self._dispatch(Level.ERROR, message, args)

    def fatal(self, message: str | None = None, *args: Any) -> Entry | None:
        """Log and terminate the process. Treat as diverging control flow."""
        return self._dispatch(Level.FATAL, message, args)

    def print(self, message: str | None = None, *args: Any) -> Entry | None:
        """Ungated output without timestamp, label or icon."""
        return self._dispatch(Level.PRINT, message, args)
