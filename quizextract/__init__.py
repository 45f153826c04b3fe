"""quizextract.

Turns unstructured document text into multiple-choice quiz items using
structured pattern extraction plus a paragraph-level heuristic fallback.
"""

from .config import DEFAULT_CONFIG, AppConfig, ExtractionConfig, default_app_config
from .data import (
    BatchResult,
    Question,
    extract_questions_from_documents,
    extract_questions_from_folder,
)
from .errors import ConfigError, DocumentUnreadableError, QuizExtractError
from .extract import deduplicate, extract_heuristic, extract_questions, extract_structured, normalize_text
from .utils import configure_logging

__all__ = [
    "__version__",
    "AppConfig",
    "ExtractionConfig",
    "DEFAULT_CONFIG",
    "default_app_config",
    "Question",
    "BatchResult",
    "extract_questions",
    "extract_structured",
    "extract_heuristic",
    "normalize_text",
    "deduplicate",
    "extract_questions_from_documents",
    "extract_questions_from_folder",
    "QuizExtractError",
    "DocumentUnreadableError",
    "ConfigError",
    "configure_logging",
]

__version__ = "0.1.0"
