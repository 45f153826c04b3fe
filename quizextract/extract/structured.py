"""Structured extraction: numbered stems followed by lettered options."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from ..config import ExtractionConfig, resolve_extraction_config
from ..data.schemas import Question
from .answers import answer_text, resolve_answer
from .cleaning import clean_question_text, strip_trailing_markers
from .conventions import is_stem_line, iter_stems, match_answer_marker, match_option_line

logger = logging.getLogger(__name__)


def _window_lines(text: str, stem_end: int, max_lines: int) -> List[str]:
    """Lines following a stem, at most ``max_lines``.

    The rest of the stem's own line is skipped when it is blank, so a stem
    ending in ``?`` at end of line does not read as a terminating blank line.
    """
    remaining = text[stem_end:]
    head, _, rest = remaining.partition("\n")
    if not head.strip():
        remaining = rest
    return remaining.split("\n")[:max_lines]


def _scan_options(lines: List[str]) -> Tuple[Dict[str, str], Optional[str], str]:
    """Collect lettered options and an explicit answer letter.

    Returns ``(options, marker_letter, scanned_text)``. Options keep the
    order in which their letters first appeared; a repeated letter replaces
    the earlier text, and text already held by another letter is skipped.
    Scanning stops at a blank line or a new stem.
    """
    options: Dict[str, str] = {}
    marker: Optional[str] = None
    scanned: List[str] = []
    for line in lines:
        if not line.strip() or is_stem_line(line):
            break
        scanned.append(line)
        opt = match_option_line(line)
        if opt:
            letter, body = opt
            body = strip_trailing_markers(body)
            if body and body not in (v for k, v in options.items() if k != letter):
                options[letter] = body
        found = match_answer_marker(line)
        if found:
            marker = found
    return options, marker, "\n".join(scanned)


def extract_structured(text: str, config: ExtractionConfig | None = None) -> List[Question]:
    """Extract questions that follow explicit numbering/lettering conventions."""
    config = resolve_extraction_config(config)
    questions: List[Question] = []
    if not text:
        return questions

    for raw_stem, stem_end in iter_stems(text):
        lines = _window_lines(text, stem_end, config.scan_window_lines)
        options, marker, window = _scan_options(lines)
        if len(options) < config.min_options:
            logger.debug("Skipping stem with %d option(s): %s", len(options), raw_stem[:50])
            continue

        stem = clean_question_text(raw_stem)
        if not stem:
            continue

        letter = marker if marker in options else resolve_answer(options, window)
        questions.append(Question(
            text=stem,
            options=tuple(options.values()),
            correct_answer=answer_text(options, letter),
            difficulty=config.default_difficulty,
            source=config.structured_source,
        ))

    logger.debug(
        "Structured extractor found %d question(s)", len(questions),
        extra={"extractor": "structured"},
    )
    return questions
