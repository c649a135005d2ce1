"""
Logging Configuration.

Environment-driven defaults for the process-wide logger:

    CLOG_LEVEL=debug CLOG_SHOW_TIME=true CLOG_COLOR=never python app.py
"""

import sys
from enum import Enum
from typing import Any, TextIO

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .levels import Level, parse_threshold
from .render import DEFAULT_TIME_FORMAT


class ColorMode(str, Enum):
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


class OutputStream(str, Enum):
    STDERR = "stderr"
    STDOUT = "stdout"


class ClogSettings(BaseSettings):
    """Console logger configuration."""

    model_config = SettingsConfigDict(
        env_prefix="CLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    level: Level | int = Field(
        default=Level.NOTICE,
        union_mode="left_to_right",
        description="Minimum level (name or number); out-of-range numbers are kept",
    )
    show_time: bool = Field(default=False, description="Prefix records with a timestamp")
    show_level_text: bool = Field(default=False, description="Prefix records with the level label")
    show_caller: bool = Field(default=False, description="Append the call site as a caller field")
    time_format: str = Field(default=DEFAULT_TIME_FORMAT, description="strftime format for timestamps")
    color: ColorMode = Field(default=ColorMode.AUTO, description="auto, always or never")
    stream: OutputStream = Field(default=OutputStream.STDERR, description="stderr or stdout")

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, value: Any) -> Level | int:
        return parse_threshold(value)

    @field_validator("color", "stream", mode="before")
    @classmethod
    def _lowercase(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value

    def use_color(self) -> bool | None:
        """None means detect from the stream."""
        if self.color == ColorMode.AUTO:
            return None
        return self.color == ColorMode.ALWAYS

    def writer(self) -> TextIO:
        return sys.stdout if self.stream == OutputStream.STDOUT else sys.stderr
