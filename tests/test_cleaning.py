"""Tests for question and option text cleanup."""

import pytest

from quizextract.extract.cleaning import (
    clean_option_text,
    clean_question_text,
    strip_correct_markers,
    strip_trailing_markers,
)


class TestCleanQuestionText:

    @pytest.mark.parametrize("raw,expected", [
        ("12. What is 2+2?", "What is 2+2?"),
        ("Q3. Which planet is red?", "Which planet is red?"),
        ("Q.3 Which planet is red?", "Which planet is red?"),
        ("Question 4. Who wrote   Hamlet?", "Who wrote Hamlet?"),
        ("question 7 Who wrote Hamlet?", "Who wrote Hamlet?"),
        ("  What is\n  this?  ", "What is this?"),
    ])
    def test_strips_labels_and_whitespace(self, raw, expected):
        assert clean_question_text(raw) == expected

    def test_only_leading_label_removed(self):
        assert clean_question_text("What happened in 1969?") == "What happened in 1969?"

    def test_empty(self):
        assert clean_question_text("") == ""


class TestCleanOptionText:

    def test_asterisk_marked_option(self):
        assert clean_option_text("C. Madrid *") == "Madrid"

    @pytest.mark.parametrize("raw,expected", [
        ("a) Paris", "Paris"),
        ("(b) Lyon", "Lyon"),
        ("• Paris", "Paris"),
        ("- Berlin", "Berlin"),
        ("3) Rome", "Rome"),
        ("12. Vienna", "Vienna"),
    ])
    def test_strips_prefixes(self, raw, expected):
        assert clean_option_text(raw) == expected

    @pytest.mark.parametrize("raw,expected", [
        ("A) Oslo ✓", "Oslo"),
        ("d. √ Bern", "Bern"),
        ("Paris (correct)", "Paris"),
        ("Paris [CORRECT] city", "Paris city"),
        ("B) Lisbon ✔  ", "Lisbon"),
    ])
    def test_strips_correctness_markers(self, raw, expected):
        assert clean_option_text(raw) == expected

    def test_collapses_whitespace(self):
        assert clean_option_text("A.   New    York") == "New York"


class TestStripCorrectMarkers:

    def test_keeps_leading_label(self):
        assert strip_correct_markers("1) Madrid *") == "1) Madrid"

    def test_only_marker(self):
        assert strip_correct_markers("*") == ""


class TestStripTrailingMarkers:

    @pytest.mark.parametrize("raw,expected", [
        ("Madrid *", "Madrid"),
        ("Whale (correct)", "Whale"),
        ("Whale [CORRECT] ✓", "Whale"),
        ("2*3", "2*3"),
        ("√4 = 2", "√4 = 2"),
        ("x * y ✔", "x * y"),
    ])
    def test_only_line_end_markers_removed(self, raw, expected):
        assert strip_trailing_markers(raw) == expected

    def test_only_marker(self):
        assert strip_trailing_markers(" * ") == ""
