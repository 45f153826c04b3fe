"""Strip numbering, bullets and correctness markers from candidate text."""

from __future__ import annotations

import re

from .conventions import BULLET_GLYPHS

_WS = re.compile(r"\s+")

# Applied in order, each at most once, anchored at the start
_QUESTION_PREFIXES = [
    re.compile(r"^\s*\d+\.?\s*"),
    re.compile(r"^\s*Q\.?\s*\d+\.?\s*", re.IGNORECASE),
    re.compile(r"^\s*Question\s+\d+\.?\s*", re.IGNORECASE),
]

_OPTION_PREFIXES = [
    re.compile(r"^\s*[A-D][.)]\s*", re.IGNORECASE),
    re.compile(r"^\s*\([A-D]\)\s*", re.IGNORECASE),
    re.compile(rf"^\s*[{BULLET_GLYPHS}\-]\s*"),
    re.compile(r"^\s*\d+[.)]\s*"),
]

_CORRECT_GLYPHS = re.compile(r"[*✓✔√]")
_CORRECT_ANNOTATION = re.compile(r"\s*(?:\(correct\)|\[correct\])\s*", re.IGNORECASE)
_TRAILING_MARKERS = re.compile(r"(?:\s*(?:[*✓✔√]|\(correct\)|\[correct\]))+\s*$", re.IGNORECASE)


def collapse_whitespace(text: str) -> str:
    return _WS.sub(" ", text or "").strip()


def clean_question_text(text: str) -> str:
    """Remove a leading ``12.``/``Q3.``/``Question 4.`` label and normalize spaces."""
    text = text or ""
    for pattern in _QUESTION_PREFIXES:
        text = pattern.sub("", text, count=1)
    return collapse_whitespace(text)


def strip_correct_markers(text: str) -> str:
    """Drop ``*``/check glyphs and ``(correct)``/``[correct]`` annotations."""
    text = _CORRECT_GLYPHS.sub("", text or "")
    text = _CORRECT_ANNOTATION.sub(" ", text)
    return collapse_whitespace(text)


def strip_trailing_markers(text: str) -> str:
    """Drop correctness glyphs and annotations only where they end the line.

    >>> strip_trailing_markers("2*3 (correct)")
    '2*3'
    """
    return collapse_whitespace(_TRAILING_MARKERS.sub("", text or ""))


def clean_option_text(text: str) -> str:
    """Remove a leading option label or bullet, then correctness markers.

    >>> clean_option_text("C. Madrid *")
    'Madrid'
    """
    text = text or ""
    for pattern in _OPTION_PREFIXES:
        text = pattern.sub("", text, count=1)
    return strip_correct_markers(text)
