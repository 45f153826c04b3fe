"""Batch extraction over documents on disk."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Union

from tqdm import tqdm

from ..config import ExtractionConfig, get_batch_config
from ..errors import DocumentUnreadableError
from ..extract.pipeline import ExtractionStats, extract_with_stats
from ..utils.logging_config import ExtractionMetricsLogger, LogContext
from .schemas import Question
from .sources import DocumentTextExtractor, default_extractor

logger = logging.getLogger(__name__)


@dataclass
class DocumentResult:
    """Outcome of extracting one document."""
    path: Path
    questions: List[Question] = field(default_factory=list)
    stats: ExtractionStats = field(default_factory=ExtractionStats)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BatchResult:
    """Outcome of extracting a batch of documents, in input order."""
    documents: List[DocumentResult] = field(default_factory=list)

    @property
    def questions(self) -> List[Question]:
        return [q for doc in self.documents for q in doc.questions]

    @property
    def failures(self) -> List[DocumentResult]:
        return [doc for doc in self.documents if not doc.ok]

    @property
    def total_questions(self) -> int:
        return sum(len(doc.questions) for doc in self.documents)


def extract_from_document(
    path: Union[str, Path],
    extractor: Optional[DocumentTextExtractor] = None,
    config: Optional[ExtractionConfig] = None,
) -> DocumentResult:
    """Extract questions from a single document.

    Raises:
        DocumentUnreadableError: If the document's text cannot be read
    """
    extractor = extractor or default_extractor()
    path = Path(path)
    text = extractor.extract_text(path)
    with LogContext(document=path.name):
        questions, stats = extract_with_stats(text, config)
    return DocumentResult(path=path, questions=questions, stats=stats)


def extract_questions_from_documents(
    paths: Iterable[Union[str, Path]],
    extractor: Optional[DocumentTextExtractor] = None,
    config: Optional[ExtractionConfig] = None,
    progress: bool = False,
) -> BatchResult:
    """Extract questions from each document, skipping unreadable ones.

    A document that cannot be read is recorded as a failed ``DocumentResult``
    and the remaining documents are still processed.
    """
    extractor = extractor or default_extractor()
    metrics = ExtractionMetricsLogger()
    batch = BatchResult()
    paths = [Path(p) for p in paths]
    start = time.perf_counter()

    for path in tqdm(paths, total=len(paths), desc="Extracting", ncols=80, disable=not progress):
        metrics.log_document_start(str(path))
        doc_start = time.perf_counter()
        try:
            result = extract_from_document(path, extractor, config)
        except DocumentUnreadableError as e:
            metrics.log_document_failed(str(path), e)
            batch.documents.append(DocumentResult(path=path, error=str(e)))
            continue
        metrics.log_document_complete(
            str(path),
            duration_ms=(time.perf_counter() - doc_start) * 1000,
            structured=result.stats.structured,
            heuristic=result.stats.heuristic,
            kept=result.stats.kept,
        )
        batch.documents.append(result)

    metrics.log_batch_complete(
        total_documents=len(paths),
        failed_documents=len(batch.failures),
        total_questions=batch.total_questions,
        duration_ms=(time.perf_counter() - start) * 1000,
    )
    if not batch.total_questions:
        logger.warning("No questions extracted from %d document(s). Check document format.", len(paths))
    return batch


def extract_questions_from_folder(
    folder: Union[str, Path],
    pattern: Optional[str] = None,
    extractor: Optional[DocumentTextExtractor] = None,
    config: Optional[ExtractionConfig] = None,
    progress: Optional[bool] = None,
) -> BatchResult:
    """Extract questions from every matching document in ``folder``.

    Args:
        folder: Directory containing the documents
        pattern: Glob pattern (defaults to the batch config, ``*.pdf``)
        extractor: Text extractor (defaults to suffix dispatch)
        config: Extraction configuration
        progress: Show a progress bar (defaults to the batch config)

    Raises:
        FileNotFoundError: If the folder doesn't exist
        NotADirectoryError: If the path is not a directory
    """
    folder = Path(folder)
    if not folder.exists():
        raise FileNotFoundError(f"Folder not found: {folder}")
    if not folder.is_dir():
        raise NotADirectoryError(f"Path is not a directory: {folder}")

    batch_config = get_batch_config()
    pattern = pattern or batch_config.pattern
    if progress is None:
        progress = batch_config.progress

    paths = sorted(p for p in folder.glob(pattern) if p.is_file())
    logger.info("Found %d document(s) matching '%s' in %s", len(paths), pattern, folder)
    return extract_questions_from_documents(paths, extractor, config, progress)
