"""Removal of parenthesized asides from answer text."""

import pytest

from wolfram_answers.extraction import normalize


@pytest.mark.unit
class TestNormalize:
    """Parenthesized asides are removed unless explicitly kept"""

    def test_removes_single_parenthetical(self):
        """Should drop the aside together with its parentheses"""
        assert normalize("foo (bar)") == "foo "

    def test_removal_is_greedy_across_groups(self):
        """Known sharp edge: text between two groups is dropped too"""
        assert normalize("a (b) c (d)") == "a "

    def test_greedy_match_stays_on_one_line(self):
        """Should not match from a '(' on one line to a ')' on another"""
        assert normalize("a (b\nc) d") == "a (b\nc) d"

    def test_keep_parens_passes_text_through(self):
        """Should return the input unchanged when parens are kept"""
        text = "299792458 m/s (meters per second)"
        assert normalize(text, keep_parens=True) == text

    def test_text_without_parens_is_unchanged(self):
        assert normalize("the cat sat on the mat") == "the cat sat on the mat"

    def test_unbalanced_parens_are_left_alone(self):
        assert normalize("a ) b ( c") == "a ) b ( c"

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "foo (bar)",
            "a (b) c (d) e",
            "((nested) parens) tail",
            "x) (y",
            "first (line)\nsecond (line) end",
        ],
    )
    def test_normalization_is_idempotent(self, text):
        """Normalizing twice should equal normalizing once"""
        once = normalize(text)
        assert normalize(once) == once
