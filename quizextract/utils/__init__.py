"""Utilities for quizextract."""

from .logging_config import (
    ExtractionMetricsLogger,
    LogContext,
    configure_from_config,
    configure_logging,
    log_performance,
)

__all__ = [
    "configure_logging",
    "configure_from_config",
    "ExtractionMetricsLogger",
    "LogContext",
    "log_performance",
]
