"""Question extraction engine."""

from .answers import resolve_answer
from .cleaning import clean_option_text, clean_question_text
from .dedup import deduplicate, fingerprint
from .heuristic import extract_heuristic
from .normalize import normalize_text
from .pipeline import ExtractionStats, extract_questions, extract_with_stats
from .structured import extract_structured

__all__ = [
    "normalize_text",
    "clean_question_text",
    "clean_option_text",
    "resolve_answer",
    "extract_structured",
    "extract_heuristic",
    "deduplicate",
    "fingerprint",
    "extract_questions",
    "extract_with_stats",
    "ExtractionStats",
]
