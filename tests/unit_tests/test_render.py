"""
Render pipeline tests: header segments, tree connectors and styling.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime

import pytest

from clog.fields import Fields, fields_from_args
from clog.formatters import RESET, Style, colorize
from clog.levels import Level
from clog.render import Caller, RenderConfig, TreeFormatter

NOW = datetime(2024, 5, 1, 10, 0, 0)
PLAIN = RenderConfig()
EVERYTHING = RenderConfig(show_time=True, show_level_text=True, show_caller=True)


def render(level=Level.INFO, message="msg", fields=None, config=PLAIN, **kwargs) -> str:
    return TreeFormatter.render(level, message, fields, config, now=NOW, **kwargs)


class TestStyle:
    """ANSI styling primitives"""

    def test_plain_text_when_color_is_off(self) -> None:
        assert Style(foreground=86, bold=True).render("x", use_color=False) == "x"

    def test_codes_are_combined(self) -> None:
        assert Style(foreground=86, bold=True, faint=True).render("x") == f"\x1b[1;2;38;5;86mx{RESET}"

    def test_width_pads_even_without_color(self) -> None:
        assert Style(width=8).render("INFO", use_color=False) == "INFO    "

    def test_empty_text_is_not_decorated(self) -> None:
        assert Style(bold=True).render("") == ""

    def test_unstyled_text_is_unchanged(self) -> None:
        assert colorize("x", None) == "x"


class TestTreeLayout:
    """Field rows and connectors"""

    def test_example_record(self) -> None:
        fields = fields_from_args("service", "api", "duration_ms", 120)
        output = render(message="deploy complete", fields=fields)
        assert output == "• deploy complete\n  ├─ service: api\n  └─ duration_ms: 120\n"

    def test_no_fields_means_no_rows(self) -> None:
        assert render(fields=Fields()) == "• msg\n"

    @pytest.mark.parametrize("count", [1, 2, 5])
    def test_only_the_last_row_uses_the_terminal_connector(self, count) -> None:
        fields = Fields({f"k{i}": i for i in range(count)})
        rows = render(fields=fields).splitlines()[1:]
        assert len(rows) == count
        assert all(row.startswith("  ├─ ") for row in rows[:-1])
        assert rows[-1].startswith("  └─ ")

    def test_key_without_value_has_no_separator(self) -> None:
        output = render(level=Level.PRINT, message="hello world!", fields=fields_from_args("a", "1", "b"))
        assert output == "hello world!\n  ├─ a: 1\n  └─ b\n"

    def test_fields_are_not_modified(self) -> None:
        fields = Fields({"a": 1})
        render(fields=fields, error=ValueError("boom"), caller=Caller("app.py", 3), config=EVERYTHING)
        assert fields.items() == [("a", 1)]


class TestReservedFields:
    """err and caller rows"""

    def test_error_follows_user_fields(self) -> None:
        output = render(level=Level.ERROR, fields=Fields({"a": 1}), error=ValueError("boom"))
        assert output == "✖ msg\n  ├─ a: 1\n  └─ err: boom\n"

    def test_caller_is_always_last(self) -> None:
        config = RenderConfig(show_caller=True)
        output = render(fields=Fields({"a": 1, "b": 2}), error=ValueError("boom"), caller=Caller("app.py", 12), config=config)
        assert output.splitlines()[1:] == ["  ├─ a: 1", "  ├─ b: 2", "  ├─ err: boom", "  └─ caller: app.py:12"]

    def test_error_replaces_user_err_field_in_place(self) -> None:
        fields = Fields({"err": "user", "a": 1})
        output = render(fields=fields, error=ValueError("boom"))
        assert output.splitlines()[1:] == ["  ├─ err: boom", "  └─ a: 1"]
        assert fields.items() == [("err", "user"), ("a", 1)]

    def test_user_caller_field_yields_to_resolved_caller(self) -> None:
        config = RenderConfig(show_caller=True)
        output = render(fields=Fields({"caller": "me", "a": 1}), caller=Caller("app.py", 7), config=config)
        assert output.splitlines()[1:] == ["  ├─ a: 1", "  └─ caller: app.py:7"]

    def test_user_caller_field_kept_when_caller_is_off(self) -> None:
        output = render(fields=Fields({"caller": "me"}), caller=Caller("app.py", 7))
        assert output.splitlines()[1:] == ["  └─ caller: me"]

    def test_caller_ignored_when_disabled(self) -> None:
        assert render(caller=Caller("app.py", 12)) == "• msg\n"

    def test_caller_is_gray_when_colored(self) -> None:
        config = RenderConfig(show_caller=True, use_color=True)
        output = render(caller=Caller("app.py", 12), config=config)
        assert "\x1b[1;2;38;5;240mcaller: " in output
        assert "\x1b[38;5;240mapp.py:12" in output


class TestHeader:
    """Timestamp, label, icon and message"""

    def test_all_segments_in_order(self) -> None:
        output = render(config=RenderConfig(show_time=True, show_level_text=True))
        assert output == "2024-05-01 10:00:00 ∣ INFO    ∣ • msg\n"

    def test_custom_time_format(self) -> None:
        output = render(config=RenderConfig(show_time=True, time_format="%H:%M"))
        assert output == "10:00 ∣ • msg\n"

    def test_print_suppresses_timestamp_and_label(self) -> None:
        assert render(level=Level.PRINT, config=EVERYTHING) == "msg\n"

    @pytest.mark.parametrize(
        ("toggle", "segment"),
        [
            ("show_time", "2024-05-01 10:00:00 ∣ "),
            ("show_level_text", "WARN    ∣ "),
        ],
    )
    def test_disabling_a_segment_removes_only_that_segment(self, toggle, segment) -> None:
        full = RenderConfig(show_time=True, show_level_text=True, show_caller=True)
        reduced = replace(full, **{toggle: False})
        fields = Fields({"a": 1})
        caller = Caller("app.py", 1)
        with_segment = render(level=Level.WARN, fields=fields, caller=caller, config=full)
        without_segment = render(level=Level.WARN, fields=fields, caller=caller, config=reduced)
        assert with_segment.replace(segment, "", 1) == without_segment

    def test_disabling_caller_drops_its_row(self) -> None:
        fields = Fields({"a": 1, "b": 2})
        caller = Caller("app.py", 1)
        with_caller = render(fields=fields, caller=caller, config=RenderConfig(show_caller=True))
        without_caller = render(fields=fields, caller=caller, config=RenderConfig())
        assert with_caller == "• msg\n  ├─ a: 1\n  ├─ b: 2\n  └─ caller: app.py:1\n"
        assert without_caller == "• msg\n  ├─ a: 1\n  └─ b: 2\n"

    def test_colored_header_uses_level_color(self) -> None:
        output = render(level=Level.ERROR, config=RenderConfig(use_color=True))
        assert output == f"\x1b[1;38;5;204m✖{RESET} msg\n"

    def test_rendering_is_deterministic(self) -> None:
        fields = Fields({"a": [1, 2], "b": {"c": None}})
        assert render(fields=fields, config=EVERYTHING) == render(fields=fields, config=EVERYTHING)
