import re

from gathering.parsers.segmenter import COARSE_BOUNDARY, FINE_BOUNDARY, LogEntry, segment


class TestSegment:
    def test_empty_input_yields_nothing(self) -> None:
        assert list(segment("")) == []

    def test_text_without_marker_is_one_entry(self) -> None:
        entries = list(segment("just some text\nmore"))

        assert len(entries) == 1
        assert entries[0].text == "just some text\nmore"
        assert entries[0].index == 0

    def test_splits_on_marker_and_drops_it(self) -> None:
        raw = "[UnityCrossThreadLogger]first\n[UnityCrossThreadLogger]second\n"
        entries = list(segment(raw, COARSE_BOUNDARY))

        assert [e.text for e in entries] == ["first\n", "second\n"]
        assert all("[UnityCrossThreadLogger]" not in e.text for e in entries)

    def test_preserves_order_and_indexes(self) -> None:
        raw = "preamble\n[UnityCrossThreadLogger]a\n[UnityCrossThreadLogger]b\n"
        entries = list(segment(raw))

        assert [e.index for e in entries] == [0, 1, 2]
        assert [e.text.strip() for e in entries] == ["preamble", "a", "b"]

    def test_records_start_offset(self) -> None:
        raw = "[UnityCrossThreadLogger]a\n[UnityCrossThreadLogger]b\n"
        entries = list(segment(raw))

        assert raw[entries[1].start :].startswith("b")

    def test_coarse_boundary_ignores_client_gre(self) -> None:
        raw = "[UnityCrossThreadLogger]a\n[Client GRE]b\n"

        assert len(list(segment(raw, COARSE_BOUNDARY))) == 1
        assert len(list(segment(raw, FINE_BOUNDARY))) == 2

    def test_accepts_pattern_string(self) -> None:
        entries = list(segment("a|b|c", r"\|"))

        assert [e.text for e in entries] == ["a", "b", "c"]

    def test_accepts_compiled_pattern(self) -> None:
        entries = list(segment("a--b", re.compile("--")))

        assert [e.text for e in entries] == ["a", "b"]

    def test_is_lazy(self) -> None:
        entries = segment("[UnityCrossThreadLogger]a\n[UnityCrossThreadLogger]b\n")

        assert next(entries).text == "a\n"
        assert next(entries).text == "b\n"


class TestLogEntry:
    def test_tail_of_last_line(self) -> None:
        entry = LogEntry(index=0, text="ts\n<== Marker(1)\n{}")

        assert entry.tail(0) == entry.text
        assert entry.tail(2) == "{}"

    def test_tail_keeps_rest_of_entry(self) -> None:
        entry = LogEntry(index=0, text="ts\n<== Marker(1)\n{\n}\nnoise")

        assert entry.tail(2) == "{\n}\nnoise"

    def test_tail_missing_returns_none(self) -> None:
        entry = LogEntry(index=0, text="ts")

        assert entry.tail(1) is None
