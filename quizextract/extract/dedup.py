"""Stem-keyed deduplication of extracted questions."""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Set

from ..data.schemas import Question

logger = logging.getLogger(__name__)

_WS = re.compile(r"\s+")

MIN_FINGERPRINT_LENGTH = 10


def fingerprint(question: Question) -> str:
    """Lowercased stem with whitespace runs collapsed."""
    return _WS.sub(" ", question.text.lower()).strip()


def deduplicate(
    questions: Iterable[Question],
    min_fingerprint_length: int = MIN_FINGERPRINT_LENGTH,
) -> List[Question]:
    """Keep the first question per fingerprint, in input order.

    Questions whose fingerprint is not longer than ``min_fingerprint_length``
    are dropped as noise. Options play no part in the comparison.
    """
    seen: Set[str] = set()
    unique: List[Question] = []
    dropped = 0
    for question in questions:
        key = fingerprint(question)
        if key in seen or len(key) <= min_fingerprint_length:
            dropped += 1
            continue
        seen.add(key)
        unique.append(question)
    if dropped:
        logger.debug("Deduplication dropped %d question(s), kept %d", dropped, len(unique))
    return unique
