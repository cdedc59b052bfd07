"""
Unit tests for annotate_text (segment layout).
"""
import pytest

from abstract_annotator.annotation.annotator import annotate_text, segments_to_text
from abstract_annotator.annotation.overlap_resolver import resolve_overlaps
from abstract_annotator.models.entity import Entity


class TestAnnotateText:
    def test_overlapping_pair_scenario(self):
        """'Hello' and 'lo wor' overlap; the longer one is highlighted."""
        text = "Hello world"
        resolved = resolve_overlaps([
            Entity("Hello", 0, ("U1",), ("",)),
            Entity("lo wor", 3, ("U2",), ("L2",)),
        ])
        segments = annotate_text(text, resolved)

        assert [(s.kind, s.text) for s in segments] == [
            ("plain", "Hel"),
            ("entity", "lo wor"),
            ("plain", "ld"),
        ]
        assert segments[1].uri == "U2"
        assert segments[1].label == "L2"
        assert segments_to_text(segments) == text

    def test_no_entities_single_plain_segment(self):
        segments = annotate_text("Hello world", [])
        assert len(segments) == 1
        assert segments[0].kind == "plain"
        assert segments[0].text == "Hello world"

    def test_empty_text(self):
        segments = annotate_text("", [])
        assert [(s.kind, s.text) for s in segments] == [("plain", "")]

    def test_entity_at_start_and_end(self):
        text = "virus in humans"
        entities = [
            Entity("virus", 0, ("U1",), ("",)),
            Entity("humans", 9, ("U2",), ("",)),
        ]
        segments = annotate_text(text, entities)
        assert [(s.kind, s.text) for s in segments] == [
            ("plain", ""),
            ("entity", "virus"),
            ("plain", " in "),
            ("entity", "humans"),
            ("plain", ""),
        ]

    def test_adjacent_entities(self):
        text = "abcdef"
        entities = [Entity("abc", 0, ("U1",), ("",)), Entity("def", 3, ("U2",), ("",))]
        segments = annotate_text(text, entities)
        assert [s.text for s in segments] == ["", "abc", "", "def", ""]

    def test_literal_text_used_for_highlight(self, abstract_text):
        e = Entity("sars-cov", 4, ("U",), ("L",))
        entity_segment = annotate_text(abstract_text, [e])[1]
        assert entity_segment.text == "SARS-CoV"
        assert entity_segment.entity_text == "sars-cov"

    def test_segment_offsets(self, abstract_text):
        e = Entity("virus", 13, ("U",), ("virus",))
        segments = annotate_text(abstract_text, [e])
        assert (segments[1].start, segments[1].end) == (13, 18)
        assert (segments[2].start, segments[2].end) == (18, len(abstract_text))

    def test_full_identifier_lists_carried(self):
        e = Entity("virus", 0, ("U2", "U1"), ("", "L1"))
        s = annotate_text("virus", [e])[1]
        assert s.uris == ("U2", "U1")
        assert s.labels == ("", "L1")
        assert s.uri == "U2"

    def test_entity_past_end_skipped(self):
        text = "short"
        segments = annotate_text(text, [Entity("shorter", 0, ("U",), ("",))])
        assert segments_to_text(segments) == text
        assert not any(s.is_entity for s in segments)

    def test_entity_before_cursor_skipped(self):
        text = "Hello world"
        entities = [Entity("Hello", 0, ("U1",), ("",)), Entity("lo", 3, ("U2",), ("",))]
        segments = annotate_text(text, entities)
        assert segments_to_text(segments) == text
        assert [s.text for s in segments if s.is_entity] == ["Hello"]

    @pytest.mark.parametrize(
        "spans",
        [
            [],
            [(0, 3)],
            [(4, 8), (13, 5)],
            [(4, 8), (26, 33), (63, 6)],
            [(0, 3), (3, 1), (60, 10)],
        ],
    )
    def test_round_trip(self, abstract_text, spans):
        entities = [
            Entity(abstract_text[start:start + length], start, ("U",), ("",))
            for start, length in spans
        ]
        assert segments_to_text(annotate_text(abstract_text, entities)) == abstract_text
