"""Tests for document text sources."""

import pytest

from quizextract.data.sources import (
    PdfTextExtractor,
    PlainTextExtractor,
    SuffixDispatchExtractor,
)
from quizextract.errors import DocumentUnreadableError, QuizExtractError


class TestPlainTextExtractor:

    def test_reads_file(self, tmp_path):
        path = tmp_path / "quiz.txt"
        path.write_text("1. What?\nA. x", encoding="utf-8")
        assert PlainTextExtractor().extract_text(path) == "1. What?\nA. x"

    def test_missing_file(self, tmp_path):
        with pytest.raises(DocumentUnreadableError) as exc_info:
            PlainTextExtractor().extract_text(tmp_path / "missing.txt")
        assert exc_info.value.path.name == "missing.txt"
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "latin.txt"
        path.write_bytes(b"caf\xe9")
        with pytest.raises(DocumentUnreadableError):
            PlainTextExtractor().extract_text(path)
        assert PlainTextExtractor(encoding="latin-1").extract_text(path) == "café"


class TestPdfTextExtractor:

    def test_blank_pdf_has_no_text(self, blank_pdf):
        assert PdfTextExtractor().extract_text(blank_pdf).strip() == ""

    def test_corrupt_pdf(self, corrupt_pdf):
        with pytest.raises(DocumentUnreadableError) as exc_info:
            PdfTextExtractor().extract_text(corrupt_pdf)
        assert exc_info.value.__cause__ is not None
        assert isinstance(exc_info.value, QuizExtractError)


class TestSuffixDispatchExtractor:

    def test_dispatches_by_suffix(self, tmp_path):
        path = tmp_path / "QUIZ.TXT"
        path.write_text("hello", encoding="utf-8")
        assert SuffixDispatchExtractor().extract_text(path) == "hello"

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "notes.docx"
        path.write_bytes(b"PK")
        with pytest.raises(DocumentUnreadableError, match="Unsupported file type"):
            SuffixDispatchExtractor().extract_text(path)

    def test_custom_extractors(self, tmp_path):
        class Upper:
            def extract_text(self, path):
                return path.read_text().upper()

        path = tmp_path / "a.md"
        path.write_text("abc")
        extractor = SuffixDispatchExtractor({".MD": Upper()})
        assert extractor.extract_text(path) == "ABC"
