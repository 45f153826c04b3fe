"""Tests for answer resolution."""

from quizextract.extract.answers import answer_text, resolve_answer


class TestResolveAnswer:

    def test_explicit_statement(self):
        options = {"A": "3", "B": "4"}
        assert resolve_answer(options, "The answer is B") == "B"

    def test_colon_statement(self):
        options = {"A": "3", "B": "4", "C": "5"}
        assert resolve_answer(options, "A. 3\nB. 4\nC. 5\ncorrect: c") == "C"

    def test_fallback_is_first_inserted_key(self):
        assert resolve_answer({"A": "x", "B": "y"}, "no hint") == "A"
        assert resolve_answer({"C": "x", "A": "y"}, "no hint") == "C"

    def test_fallback_is_reproducible(self):
        options = {"B": "x", "D": "y", "A": "z"}
        results = {resolve_answer(options, "") for _ in range(10)}
        assert results == {"B"}

    def test_statement_letter_outside_options(self):
        assert resolve_answer({"A": "x", "B": "y"}, "answer: D") == "D"

    def test_empty_options(self):
        assert resolve_answer({}, "nothing") is None


class TestAnswerText:

    def test_known_letter(self):
        assert answer_text({"A": "x", "B": "y"}, "B") == "y"

    def test_unknown_letter_falls_back_to_first(self):
        assert answer_text({"A": "x", "B": "y"}, "D") == "x"
        assert answer_text({"A": "x", "B": "y"}, None) == "x"

    def test_empty(self):
        assert answer_text({}, None) is None
