"""Reporting helpers for extraction results."""

from .summary import documents_frame, source_counts, summarize_batch

__all__ = [
    "documents_frame",
    "source_counts",
    "summarize_batch",
]
