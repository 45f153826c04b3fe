"""Text conventions recognised by the extractors.

Each convention is a named, compiled pattern with a small predicate or
extraction function around it, so every convention can be exercised on its
own:

- stem conventions: ``12. ...``, ``Q3 ...`` / ``Q.3 ...``, ``Question 4. ...``
- structured option lines: ``A. text``, ``b) text``, ``C text``
- answer markers: ``Answer: B``, ``Correct - C``, ``solution D``
- heuristic cues: interrogative/imperative words, bullet and list prefixes,
  correctness glyphs
"""

from __future__ import annotations

import re
from typing import Dict, Iterator, Optional, Pattern, Tuple

# Stem markers, in priority order
STEM_CONVENTIONS: Dict[str, str] = {
    "numbered": r"\d+\.?",
    "q_label": r"Q\.?\s*\d+\.?",
    "question_label": r"Question\s+\d+\.?",
}

_STEM_MARKER = "|".join(f"(?:{p})" for p in STEM_CONVENTIONS.values())

# Marker at a line start, then the stem up to the first "?" (may span lines)
STEM_RE = re.compile(
    rf"^[ \t]*(?:{_STEM_MARKER})\s*(.+?\?)",
    re.IGNORECASE | re.MULTILINE | re.DOTALL,
)
# Same convention confined to a single line
STEM_LINE_RE = re.compile(
    rf"^\s*(?:{_STEM_MARKER})\s*[^\n]+?\?",
    re.IGNORECASE,
)
_STEM_PREFIX_RES: Dict[str, Pattern[str]] = {
    name: re.compile(rf"^\s*{pattern}\s*\S", re.IGNORECASE)
    for name, pattern in STEM_CONVENTIONS.items()
}

# Letter A-D followed by ".", ")", ".)" or whitespace, then the option text
OPTION_LINE_RE = re.compile(r"^\s*([A-D])(?:\.?\)|\.|\s)\s*(.+?)\s*$", re.IGNORECASE)

# "Answer: B", "correct - c", "Solution (D)"
ANSWER_MARKER_RE = re.compile(
    r"\b(?:answer|correct|solution)\b\s*[:.\-=]?\s*\(?([A-D])(?![A-Za-z])",
    re.IGNORECASE,
)
# "the answer is B", "correct: c"
ANSWER_STATEMENT_RE = re.compile(
    r"\b(?:answer|correct|solution)\b\s*(?:is\b|:)?\s*\(?([A-D])(?![A-Za-z])",
    re.IGNORECASE,
)

INTERROGATIVE_RE = re.compile(r"\b(?:what|which|who|when|where|why|how)\b")
IMPERATIVE_RE = re.compile(r"\b(?:identify|choose|select|determine)\b")
NUMBERED_START_RE = re.compile(r"^\s*\d+\.")
Q_START_RE = re.compile(r"^\s*q\s*\d")

BULLET_GLYPHS = "•·▪▫"

# Heuristic option prefixes, matched against trimmed lowercase lines
OPTION_CONVENTIONS: Dict[str, Pattern[str]] = {
    "letter": re.compile(r"^[a-d][.)]"),
    "paren_letter": re.compile(r"^\([a-d]\)"),
    "bullet": re.compile(rf"^[{BULLET_GLYPHS}]\s"),
    "hyphen": re.compile(r"^-\s"),
    "numbered": re.compile(r"^\d+[.)]\s"),
}

CORRECT_GLYPHS = ("*", "✓", "✔", "√")
CORRECT_WORDS = ("correct", "answer")


def iter_stems(text: str) -> Iterator[Tuple[str, int]]:
    """Yield ``(raw_stem, end_offset)`` for every stem-convention match."""
    for m in STEM_RE.finditer(text):
        yield m.group(1), m.end()


def stem_convention(line: str) -> Optional[str]:
    """Name of the stem convention a line starts with, if any."""
    for name, pattern in _STEM_PREFIX_RES.items():
        if pattern.match(line):
            return name
    return None


def is_stem_line(line: str) -> bool:
    """True if a single line is a complete stem (marker through ``?``)."""
    return STEM_LINE_RE.match(line) is not None


def match_option_line(line: str) -> Optional[Tuple[str, str]]:
    """Return ``(LETTER, text)`` for a lettered option line."""
    m = OPTION_LINE_RE.match(line)
    if not m:
        return None
    return m.group(1).upper(), m.group(2)


def match_answer_marker(line: str) -> Optional[str]:
    """Return the upper-case letter named by an answer marker in ``line``."""
    m = ANSWER_MARKER_RE.search(line)
    return m.group(1).upper() if m else None


def find_answer_statement(context: str) -> Optional[str]:
    """Return the letter of the first "answer is X" style statement."""
    m = ANSWER_STATEMENT_RE.search(context or "")
    return m.group(1).upper() if m else None


def is_likely_question(paragraph: str) -> bool:
    text = paragraph.lower()
    return (
        "?" in text
        or INTERROGATIVE_RE.search(text) is not None
        or IMPERATIVE_RE.search(text) is not None
        or NUMBERED_START_RE.match(text) is not None
        or Q_START_RE.match(text) is not None
    )


def option_convention(line: str) -> Optional[str]:
    """Name of the list/option convention a line uses, if any."""
    s = line.strip().lower()
    for name, pattern in OPTION_CONVENTIONS.items():
        if pattern.match(s):
            return name
    return None


def is_likely_option(line: str) -> bool:
    return option_convention(line) is not None


def is_marked_correct(line: str) -> bool:
    s = line.lower()
    return any(g in s for g in CORRECT_GLYPHS) or any(w in s for w in CORRECT_WORDS)
