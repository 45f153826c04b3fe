"""Exception hierarchy for quizextract.

The extraction engine itself never raises on string input; these errors
belong to the edges (document text sources and configuration).
"""

from __future__ import annotations

from pathlib import Path


class QuizExtractError(Exception):
    """Base exception for quizextract errors."""
    pass


class DocumentUnreadableError(QuizExtractError):
    """Raised when a document's text cannot be extracted."""

    def __init__(self, path: str | Path, reason: str):
        super().__init__(f"Cannot read document '{path}': {reason}")
        self.path = Path(path)
        self.reason = reason


class ConfigError(QuizExtractError, ValueError):
    """Raised when configuration values are invalid."""
    pass
