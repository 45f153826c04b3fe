"""Data schemas for quizextract."""

from typing import Any, Dict, NamedTuple, Tuple

from ..constants import DIFFICULTIES, SOURCE_HEURISTIC, SOURCE_STRUCTURED  # noqa: F401


class Question(NamedTuple):
    """A multiple-choice quiz item.

    ``correct_answer`` is one of ``options``; extractors fall back to
    ``options[0]`` when no correct option can be resolved.
    """
    text: str
    options: Tuple[str, ...]
    correct_answer: str
    difficulty: str = "medium"
    source: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "options": list(self.options),
            "correct_answer": self.correct_answer,
            "difficulty": self.difficulty,
            "source": self.source,
        }
