"""Data handling modules for quizextract."""

from .schemas import Question
from .sources import (
    DocumentTextExtractor,
    PdfTextExtractor,
    PlainTextExtractor,
    SuffixDispatchExtractor,
)
from .loader import (
    BatchResult,
    DocumentResult,
    extract_from_document,
    extract_questions_from_documents,
    extract_questions_from_folder,
)

__all__ = [
    "Question",
    "DocumentTextExtractor",
    "PdfTextExtractor",
    "PlainTextExtractor",
    "SuffixDispatchExtractor",
    "BatchResult",
    "DocumentResult",
    "extract_from_document",
    "extract_questions_from_documents",
    "extract_questions_from_folder",
]
