"""
Unit tests for clean_abstract_text.
"""
import pytest

from abstract_annotator.service.abstract_text import clean_abstract_text


class TestCleanAbstractText:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("Abstract The virus.", "The virus."),
            ("ABSTRACT The virus.", "The virus."),
            ("abstract The virus.", "The virus."),
            ("The virus.", "The virus."),
            ("Abstracts of the conference", "Abstracts of the conference"),
            ("Abstract", "Abstract"),
            ("", ""),
        ],
    )
    def test_prefix_handling(self, raw, expected):
        assert clean_abstract_text(raw) == expected

    def test_none_becomes_empty(self):
        assert clean_abstract_text(None) == ""

    def test_only_first_prefix_removed(self):
        assert clean_abstract_text("Abstract abstract text") == "abstract text"
