"""Line-ending and blank-line normalization for extracted document text."""

from __future__ import annotations

import re

_CRLF = re.compile(r"\r\n?")
_BLANK_RUN = re.compile(r"\n{3,}")


def normalize_text(text: str) -> str:
    """Convert ``\\r\\n``/``\\r`` to ``\\n`` and collapse 3+ line feeds to two."""
    if not text:
        return ""
    text = _CRLF.sub("\n", text)
    return _BLANK_RUN.sub("\n\n", text)
