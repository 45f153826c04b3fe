"""Tabular summaries of batch extraction results."""

from __future__ import annotations

from typing import Any, Dict, Iterable

import pandas as pd

from ..constants import SOURCE_HEURISTIC, SOURCE_STRUCTURED
from ..data.loader import BatchResult
from ..data.schemas import Question

DOCUMENT_COLUMNS = ["document", "status", "structured", "heuristic", "kept", "error"]


def documents_frame(batch: BatchResult) -> pd.DataFrame:
    """One row per document with extractor counts and any read error."""
    rows = []
    for doc in batch.documents:
        rows.append({
            "document": doc.path.name,
            "status": "ok" if doc.ok else "failed",
            "structured": doc.stats.structured,
            "heuristic": doc.stats.heuristic,
            "kept": doc.stats.kept,
            "error": doc.error,
        })
    return pd.DataFrame(rows, columns=DOCUMENT_COLUMNS)


def source_counts(questions: Iterable[Question]) -> pd.Series:
    """Number of questions per provenance tag, both tags always present."""
    counts = pd.Series([q.source for q in questions], dtype="object").value_counts()
    known = [SOURCE_STRUCTURED, SOURCE_HEURISTIC]
    extra = [s for s in counts.index if s not in known]
    counts = counts.reindex(known + extra, fill_value=0)
    return counts.astype(int)


def summarize_batch(batch: BatchResult) -> Dict[str, Any]:
    df = documents_frame(batch)
    by_source = source_counts(batch.questions)
    return {
        "documents": int(len(df)),
        "failed": int((df["status"] == "failed").sum()) if len(df) else 0,
        "questions": batch.total_questions,
        "by_source": {str(k): int(v) for k, v in by_source.items()},
    }
