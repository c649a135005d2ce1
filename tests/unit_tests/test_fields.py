"""
Field sequence tests: ordering, duplicate keys and display text.
"""

from __future__ import annotations

from clog.fields import Fields, display_text, fields_from_args


class TestFieldOrder:
    """Insertion order"""

    def test_iteration_follows_insertion_order(self) -> None:
        fields = Fields().set("b", 1).set("a", 2).set("c", 3)
        assert list(fields) == ["b", "a", "c"]
        assert fields.items() == [("b", 1), ("a", 2), ("c", 3)]

    def test_duplicate_key_keeps_first_position(self) -> None:
        fields = Fields().set("a", 1).set("b", 2).set("a", 3)
        assert fields.items() == [("a", 3), ("b", 2)]
        assert len(fields) == 2

    def test_iteration_is_restartable(self) -> None:
        fields = Fields({"x": 1, "y": 2})
        assert list(fields.rows()) == list(fields.rows())

    def test_rows_flag_only_the_last_field(self) -> None:
        fields = Fields({"x": 1, "y": 2, "z": 3})
        assert [last for _, _, last in fields.rows()] == [False, False, True]

    def test_copy_is_independent(self) -> None:
        fields = Fields({"a": 1})
        copied = fields.copy().set("a", 2).set("b", 3)
        assert fields.items() == [("a", 1)]
        assert copied.items() == [("a", 2), ("b", 3)]

    def test_empty_sequence(self) -> None:
        fields = Fields()
        assert len(fields) == 0
        assert list(fields.rows()) == []
        assert not fields


class TestFieldsFromArgs:
    """Interleaved key/value arguments"""

    def test_pairs_arguments(self) -> None:
        fields = fields_from_args("service", "api", "duration_ms", 120)
        assert fields.items() == [("service", "api"), ("duration_ms", 120)]

    def test_unpaired_trailing_key_has_no_value(self) -> None:
        fields = fields_from_args("a", "1", "b")
        assert fields.items() == [("a", "1"), ("b", None)]

    def test_keys_are_stringified(self) -> None:
        assert list(fields_from_args(1, "one")) == ["1"]

    def test_no_arguments(self) -> None:
        assert len(fields_from_args()) == 0


class TestDisplayText:
    """Value conversion"""

    def test_scalars(self) -> None:
        assert display_text(None) == ""
        assert display_text("str") == "str"
        assert display_text(120) == "120"
        assert display_text(1.5) == "1.5"
        assert display_text(True) == "true"
        assert display_text(False) == "false"
        assert display_text(b"raw") == "raw"

    def test_collections_render_as_compact_json(self) -> None:
        assert display_text(["a", "b", "c"]) == '["a","b","c"]'
        assert display_text({"a": "1", "b": "2"}) == '{"a":"1","b":"2"}'
        assert display_text({1: "one"}) == '{"1":"one"}'

    def test_unserializable_members_are_stringified(self) -> None:
        class Token:
            def __str__(self) -> str:
                return "tok"

        assert display_text([Token()]) == '["tok"]'

    def test_errors_render_their_message(self) -> None:
        assert display_text(ValueError("err message")) == "err message"
        assert display_text(KeyError()) == "KeyError"
