"""Token and answer classifiers: number grammar and long-form dates."""

import pytest

from wolfram_answers.extraction import is_long_date_answer, is_number


@pytest.mark.unit
class TestIsNumber:
    """Whole-token numeric grammar"""

    @pytest.mark.parametrize(
        "token",
        ["0", "42", "-7", "3.14", ".5", "-.25", "6.022×10^23", "1.6×10^-19"],
    )
    def test_accepts_numbers(self, token):
        assert is_number(token) is True

    @pytest.mark.parametrize(
        "token",
        ["", "5kg", "kg5", "1,000", "3.", "1e10", "6.022×10^", "--1", "×10^3", "abc"],
    )
    def test_rejects_non_numbers(self, token):
        """Should only match whole tokens, never substrings"""
        assert is_number(token) is False

    def test_normalizes_before_matching(self):
        """Parenthesized suffixes are stripped by default"""
        assert is_number("12(approx)") is True
        assert is_number("12(approx)", keep_parens=True) is False

    def test_non_ascii_digits_are_not_numbers(self):
        assert is_number("٣") is False


@pytest.mark.unit
class TestIsLongDateAnswer:
    """Share of weekday and month names above 30%"""

    def test_all_date_words(self):
        assert is_long_date_answer("Monday Tuesday Wednesday April") is True

    def test_prose_is_not_a_date(self):
        assert is_long_date_answer("The cat sat on the mat") is False

    def test_punctuation_is_ignored(self):
        """'Monday,' counts as 'Monday' once punctuation is removed"""
        assert is_long_date_answer("Monday, 19 January 2038") is True

    def test_empty_text(self):
        """Should not divide by zero"""
        assert is_long_date_answer("") is False
        assert is_long_date_answer("   ") is False

    def test_match_is_case_sensitive(self):
        assert is_long_date_answer("monday january") is False

    def test_abbreviations_do_not_count(self):
        assert is_long_date_answer("Mon Jan 19") is False

    def test_threshold_is_strict(self):
        """Exactly 30% date words is not enough"""
        text = "May " + " ".join(["x"] * 2) + " " + "June July " + " ".join(["y"] * 5)
        # 3 date words out of 10
        assert len(text.split()) == 10
        assert is_long_date_answer(text) is False

    def test_just_above_threshold(self):
        assert is_long_date_answer("Friday the 13th") is True  # 1 of 3
