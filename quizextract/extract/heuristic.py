"""Heuristic extraction for text without explicit numbering conventions.

Paragraphs that look like questions are paired with option-like lines found
in the same paragraph and the next few paragraphs. Every paragraph is
considered as a question start, even one already used as an option source
for an earlier question, so neighbouring questions may share options; only
duplicate stems are removed later.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence, Tuple

from ..config import ExtractionConfig, resolve_extraction_config
from ..data.schemas import Question
from .cleaning import clean_option_text, clean_question_text
from .conventions import is_likely_option, is_likely_question, is_marked_correct

logger = logging.getLogger(__name__)

_PARAGRAPH_BREAK = re.compile(r"\n{2,}")


def split_paragraphs(text: str) -> List[str]:
    """Split on blank-line boundaries (two or more consecutive line feeds)."""
    if not text:
        return []
    return _PARAGRAPH_BREAK.split(text)


def split_stem(paragraph: str) -> Tuple[str, List[str]]:
    """Separate a question paragraph into its stem and the lines after it.

    The first non-blank line always belongs to the stem; following lines are
    added until the first option-like line.
    """
    lines = paragraph.strip().split("\n")
    idx = 1
    while idx < len(lines) and not is_likely_option(lines[idx]):
        idx += 1
    return "\n".join(lines[:idx]), lines[idx:]


def collect_options(lines: Sequence[str]) -> Tuple[List[str], Optional[str]]:
    """Clean option-like lines into unique options.

    Returns ``(options, correct)`` where ``correct`` is the first option whose
    raw line carries a correctness marker.
    """
    options: List[str] = []
    correct: Optional[str] = None
    for line in lines:
        if not is_likely_option(line):
            continue
        option = clean_option_text(line)
        if not option or option in options:
            continue
        options.append(option)
        if correct is None and is_marked_correct(line):
            correct = option
    return options, correct


def extract_heuristic(text: str, config: ExtractionConfig | None = None) -> List[Question]:
    """Extract questions by classifying paragraphs."""
    config = resolve_extraction_config(config)
    paragraphs = split_paragraphs(text)
    questions: List[Question] = []

    for i, paragraph in enumerate(paragraphs):
        if not paragraph.strip() or not is_likely_question(paragraph):
            continue

        stem_raw, option_lines = split_stem(paragraph)
        candidates = list(option_lines)
        for following in paragraphs[i + 1:i + config.heuristic_window]:
            candidates.extend(following.split("\n"))

        options, correct = collect_options(candidates)
        if len(options) < config.min_options:
            continue

        stem = clean_question_text(stem_raw)
        if not stem:
            continue

        questions.append(Question(
            text=stem,
            options=tuple(options),
            correct_answer=correct or options[0],
            difficulty=config.default_difficulty,
            source=config.heuristic_source,
        ))

    logger.debug(
        "Heuristic extractor found %d question(s) in %d paragraph(s)", len(questions), len(paragraphs),
        extra={"extractor": "heuristic"},
    )
    return questions
