"""End-to-end extraction for a single document's text."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from ..config import ExtractionConfig, resolve_extraction_config
from ..data.schemas import Question
from ..utils.logging_config import log_performance
from .dedup import deduplicate
from .heuristic import extract_heuristic
from .normalize import normalize_text
from .structured import extract_structured

logger = logging.getLogger(__name__)


@dataclass
class ExtractionStats:
    """Question counts for one extraction run."""
    structured: int = 0
    heuristic: int = 0
    kept: int = 0

    @property
    def dropped(self) -> int:
        return self.structured + self.heuristic - self.kept

    def to_dict(self) -> dict:
        return {
            "structured": self.structured,
            "heuristic": self.heuristic,
            "kept": self.kept,
            "dropped": self.dropped,
        }


@log_performance(logger)
def extract_with_stats(
    text: str, config: ExtractionConfig | None = None
) -> Tuple[List[Question], ExtractionStats]:
    """Run both extractors over normalized text and deduplicate.

    Both extractors always run; structured results precede heuristic ones so
    they win when stems collide.
    """
    config = resolve_extraction_config(config)
    normalized = normalize_text(text)
    structured = extract_structured(normalized, config)
    heuristic = extract_heuristic(normalized, config)
    questions = deduplicate(structured + heuristic, config.min_fingerprint_length)
    stats = ExtractionStats(
        structured=len(structured),
        heuristic=len(heuristic),
        kept=len(questions),
    )
    logger.debug("Extraction complete", extra={"metrics": stats.to_dict()})
    return questions, stats


def extract_questions(text: str, config: ExtractionConfig | None = None) -> List[Question]:
    """Extract the deduplicated question set from raw document text."""
    questions, _ = extract_with_stats(text, config)
    return questions
