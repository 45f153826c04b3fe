"""Answer resolution for structured questions."""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from .conventions import find_answer_statement

logger = logging.getLogger(__name__)


def resolve_answer(options: Mapping[str, str], context: str) -> Optional[str]:
    """Find the letter of the correct option from surrounding text.

    Looks for a statement such as "the answer is B" or "correct: c" anywhere
    in ``context`` and returns its upper-case letter, even when that letter
    is not among ``options`` (callers fall back to their first option then).

    Without such a statement any option may legitimately be chosen; this
    returns the first-inserted key so results are reproducible. Returns
    ``None`` only when ``options`` is empty.
    """
    letter = find_answer_statement(context)
    if letter:
        return letter
    fallback = next(iter(options), None)
    logger.debug("No answer statement found, falling back to option %s", fallback)
    return fallback


def answer_text(options: Mapping[str, str], letter: Optional[str]) -> Optional[str]:
    """Text of ``letter`` in ``options``, or the first option's text."""
    if letter and letter in options:
        return options[letter]
    return next(iter(options.values()), None)
