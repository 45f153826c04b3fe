"""Document text sources.

The extraction engine only sees decoded text. These adapters turn a document
on disk into that text and report unreadable documents with
``DocumentUnreadableError`` so batch callers can skip them.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional, Protocol, Union

from pypdf import PdfReader

from ..errors import DocumentUnreadableError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class DocumentTextExtractor(Protocol):
    def extract_text(self, path: PathLike) -> str:
        ...


class PdfTextExtractor:
    """Extract text from every page of a PDF with pypdf."""

    def extract_text(self, path: PathLike) -> str:
        try:
            reader = PdfReader(str(path))
            pages = [page.extract_text() or "" for page in reader.pages]
        except Exception as e:
            raise DocumentUnreadableError(path, f"{type(e).__name__}: {e}") from e
        logger.debug("Read %d page(s) from %s", len(pages), path)
        return "\n".join(pages)


class PlainTextExtractor:
    """Read an already-extracted UTF-8 text file."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def extract_text(self, path: PathLike) -> str:
        try:
            return Path(path).read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentUnreadableError(path, f"{type(e).__name__}: {e}") from e


class SuffixDispatchExtractor:
    """Pick a text extractor by file suffix (``.pdf``, ``.txt``)."""

    def __init__(self, extractors: Optional[Dict[str, DocumentTextExtractor]] = None):
        if extractors is None:
            extractors = {
                ".pdf": PdfTextExtractor(),
                ".txt": PlainTextExtractor(),
            }
        self.extractors = {k.lower(): v for k, v in extractors.items()}

    def extract_text(self, path: PathLike) -> str:
        suffix = Path(path).suffix.lower()
        extractor = self.extractors.get(suffix)
        if extractor is None:
            supported = ", ".join(sorted(self.extractors))
            raise DocumentUnreadableError(path, f"Unsupported file type '{suffix}' (expected one of: {supported})")
        return extractor.extract_text(path)


def default_extractor() -> SuffixDispatchExtractor:
    return SuffixDispatchExtractor()
