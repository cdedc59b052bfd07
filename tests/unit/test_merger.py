"""
Unit tests for merge_duplicate_entities.
"""
from abstract_annotator.annotation.merger import merge_duplicate_entities, sort_by_start_pos
from abstract_annotator.annotation.normalizer import normalize_hit
from abstract_annotator.models.backend_io import RawEntityHit
from abstract_annotator.models.entity import Entity


class TestMerger:
    def test_duplicate_hits_grouped(self):
        """Same text ignoring case, same start: one entity, latest identifier first."""
        hits = [
            RawEntityHit(text="SARS-CoV", start_pos=10, uri="U1", label="L1"),
            RawEntityHit(text="sars-cov", start_pos=10, uri="U2"),
        ]
        merged = merge_duplicate_entities([normalize_hit(h) for h in hits])

        assert len(merged) == 1
        e = merged[0]
        assert e.text == "SARS-CoV"
        assert e.start_pos == 10
        assert e.end_pos == 17
        assert e.uris == ("U2", "U1")
        assert e.labels == ("", "L1")

    def test_three_duplicates_reverse_discovery_order(self):
        entities = [
            Entity("virus", 13, ("U1",), ("L1",)),
            Entity("virus", 13, ("U2",), ("L2",)),
            Entity("VIRUS", 13, ("U3",), ("L3",)),
        ]
        merged = merge_duplicate_entities(entities)
        assert merged[0].uris == ("U3", "U2", "U1")
        assert merged[0].labels == ("L3", "L2", "L1")

    def test_same_text_different_start_not_merged(self):
        entities = [
            Entity("virus", 13, ("U1",), ("",)),
            Entity("virus", 40, ("U2",), ("",)),
        ]
        assert len(merge_duplicate_entities(entities)) == 2

    def test_same_start_different_text_not_merged(self):
        entities = [
            Entity("severe", 26, ("U1",), ("",)),
            Entity("severe acute", 26, ("U2",), ("",)),
        ]
        assert len(merge_duplicate_entities(entities)) == 2

    def test_first_seen_order_preserved(self):
        entities = [
            Entity("b", 10, ("U1",), ("",)),
            Entity("a", 0, ("U2",), ("",)),
            Entity("B", 10, ("U3",), ("",)),
        ]
        merged = merge_duplicate_entities(entities)
        assert [e.start_pos for e in merged] == [10, 0]

    def test_inputs_not_mutated(self):
        first = Entity("virus", 13, ("U1",), ("L1",))
        second = Entity("virus", 13, ("U2",), ("L2",))
        merge_duplicate_entities([first, second])
        assert first.uris == ("U1",)
        assert second.uris == ("U2",)

    def test_empty_input(self):
        assert merge_duplicate_entities([]) == []


class TestSortByStartPos:
    def test_stable(self):
        a = Entity("ab", 5, ("U1",), ("",))
        b = Entity("abc", 5, ("U2",), ("",))
        c = Entity("x", 0, ("U3",), ("",))
        assert sort_by_start_pos([a, b, c]) == [c, a, b]
