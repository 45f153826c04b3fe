from __future__ import annotations

from pathlib import Path

import pytest
from pypdf import PdfWriter

from quizextract.data.schemas import Question


# ====================
# Text Fixtures
# ====================

STRUCTURED_TEXT = "1. What is 2+2?\nA. 3\nB. 4\nC. 5\nAnswer: B\n\n2. ..."

HEURISTIC_TEXT = (
    "Some intro text.\n"
    "\n"
    "What is the capital of France?\n"
    "A) Paris\n"
    "B) Lyon\n"
    "\n"
    "The end."
)

MIXED_TEXT = (
    "1. What is 2+2?\n"
    "A. 3\n"
    "B. 4\n"
    "Answer: B\n"
    "\n"
    "Which planet is known as the Red Planet?\n"
    "• Mars *\n"
    "• Venus\n"
)


@pytest.fixture
def structured_text() -> str:
    return STRUCTURED_TEXT


@pytest.fixture
def heuristic_text() -> str:
    return HEURISTIC_TEXT


@pytest.fixture
def mixed_text() -> str:
    return MIXED_TEXT


@pytest.fixture
def make_question():
    """Factory for Question values with sensible defaults."""
    def _make(text: str, options=("yes", "no"), correct=None, source="PDF Extract") -> Question:
        options = tuple(options)
        return Question(
            text=text,
            options=options,
            correct_answer=correct if correct is not None else options[0],
            difficulty="medium",
            source=source,
        )
    return _make


# ====================
# Document Fixtures
# ====================

@pytest.fixture
def blank_pdf(tmp_path) -> Path:
    """A valid one-page PDF with no text."""
    path = tmp_path / "blank.pdf"
    writer = PdfWriter()
    writer.add_blank_page(width=200, height=200)
    with open(path, "wb") as f:
        writer.write(f)
    return path


@pytest.fixture
def corrupt_pdf(tmp_path) -> Path:
    path = tmp_path / "corrupt.pdf"
    path.write_bytes(b"this is not a pdf document")
    return path


@pytest.fixture
def documents_dir(tmp_path) -> Path:
    """Folder with a readable text document, an unsupported file and a corrupt PDF."""
    folder = tmp_path / "docs"
    folder.mkdir()
    (folder / "a_notes.docx").write_bytes(b"PK\x03\x04")
    (folder / "b_corrupt.pdf").write_bytes(b"garbage")
    (folder / "c_quiz.txt").write_text(STRUCTURED_TEXT, encoding="utf-8")
    return folder
