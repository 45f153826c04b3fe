"""Tests for stem-fingerprint deduplication."""

from quizextract.extract.dedup import deduplicate, fingerprint


class TestFingerprint:

    def test_lowercase_and_whitespace(self, make_question):
        assert fingerprint(make_question("  What IS\n 2+2? ")) == "what is 2+2?"


class TestDeduplicate:

    def test_first_seen_wins(self, make_question):
        structured = make_question("What is 2+2?", options=("3", "4"), correct="4")
        heuristic = make_question("What is 2+2?", options=("4", "5"), source="PDF Heuristic")
        assert deduplicate([structured, heuristic]) == [structured]

    def test_keyed_on_stem_only(self, make_question):
        a = make_question("what  is 2+2?", options=("1", "2"))
        b = make_question("What is 2+2?", options=("3", "4", "5"))
        assert deduplicate([a, b]) == [a]

    def test_short_fingerprints_dropped(self, make_question):
        assert deduplicate([make_question("Why?")]) == []
        assert deduplicate([make_question("abcdefghij")]) == []
        kept = make_question("abcdefghijk")
        assert deduplicate([kept]) == [kept]

    def test_short_threshold_configurable(self, make_question):
        q = make_question("Why?")
        assert deduplicate([q], min_fingerprint_length=0) == [q]

    def test_preserves_order(self, make_question):
        qs = [make_question(f"Question number {i}?") for i in range(5)]
        assert deduplicate(list(reversed(qs))) == list(reversed(qs))

    def test_idempotent(self, make_question):
        qs = [
            make_question("What is the capital of France?"),
            make_question("Short?"),
            make_question("what is the capital of  france?"),
            make_question("Which planet is red?"),
        ]
        once = deduplicate(qs)
        assert deduplicate(once) == once
        assert [q.text for q in once] == ["What is the capital of France?", "Which planet is red?"]

    def test_empty(self):
        assert deduplicate([]) == []
