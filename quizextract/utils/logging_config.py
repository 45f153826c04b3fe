"""Structured logging configuration for quizextract."""

import json
import logging
import sys
import threading
import time
import traceback
from contextvars import ContextVar
from datetime import datetime, timezone
from functools import wraps
from pathlib import Path
from typing import Any, Dict

_EXTRA_FIELDS = ("document", "extractor", "metrics", "error_type", "duration_ms")


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log string
        """
        log_obj = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        for key in _EXTRA_FIELDS:
            if hasattr(record, key):
                log_obj[key] = getattr(record, key)

        if record.exc_info:
            log_obj["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": traceback.format_exception(*record.exc_info)
            }

        return json.dumps(log_obj, default=str)


class DocumentContextFilter(logging.Filter):
    """Filter to add the current document to log records."""

    def __init__(self, document: str | None = None):
        super().__init__()
        self.document = document

    def filter(self, record: logging.LogRecord) -> bool:
        if self.document:
            record.document = self.document
        return True


class ExtractionMetricsLogger:
    """Logger for per-document and per-batch extraction metrics."""

    def __init__(self, logger_name: str = "quizextract.metrics"):
        self.logger = logging.getLogger(logger_name)

    def log_document_start(self, document: str, **kwargs):
        self.logger.info(
            "Processing document",
            extra={"document": document, **kwargs}
        )

    def log_document_complete(
        self,
        document: str,
        duration_ms: float,
        structured: int,
        heuristic: int,
        kept: int,
    ):
        """Log completion of one document.

        Args:
            document: Document path or name
            duration_ms: Duration in milliseconds
            structured: Questions found by the structured extractor
            heuristic: Questions found by the heuristic extractor
            kept: Questions kept after deduplication
        """
        self.logger.info(
            "Found %d question(s)", kept,
            extra={
                "document": document,
                "duration_ms": duration_ms,
                "metrics": {
                    "structured": structured,
                    "heuristic": heuristic,
                    "kept": kept,
                },
            }
        )

    def log_document_failed(self, document: str, error: BaseException):
        self.logger.warning(
            "Error reading document: %s", error,
            extra={"document": document, "error_type": type(error).__name__}
        )

    def log_batch_complete(
        self,
        total_documents: int,
        failed_documents: int,
        total_questions: int,
        duration_ms: float
    ):
        """Log batch totals.

        Args:
            total_documents: Documents attempted
            failed_documents: Documents that could not be read
            total_questions: Questions extracted across the batch
            duration_ms: Batch duration
        """
        self.logger.info(
            "Total extracted: %d question(s) from %d document(s)",
            total_questions, total_documents - failed_documents,
            extra={
                "duration_ms": duration_ms,
                "metrics": {
                    "total_documents": total_documents,
                    "failed_documents": failed_documents,
                    "total_questions": total_questions,
                },
            }
        )


def configure_logging(
    level: str = "INFO",
    log_file: str | None = None,
    structured: bool = True,
    document: str | None = None
) -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file path for logs
        structured: Whether to use structured JSON logging
        document: Optional document name for context
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if structured:
        formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    if document:
        document_filter = DocumentContextFilter(document)
        for handler in root_logger.handlers:
            handler.addFilter(document_filter)

    logging.getLogger("quizextract").setLevel(log_level)
    # pypdf warns on every malformed object; keep it quiet
    logging.getLogger("pypdf").setLevel(logging.ERROR)


def configure_from_config(config: Any) -> None:
    """Configure logging from a ``LoggingConfig``."""
    configure_logging(
        level=config.level,
        log_file=config.log_file,
        structured=config.structured,
    )


_log_context: ContextVar[Dict[str, Any]] = ContextVar("quizextract_log_context", default={})
_factory_lock = threading.Lock()
_factory_installed = False


def _install_context_factory() -> None:
    """Wrap the record factory once so records pick up the active context."""
    global _factory_installed
    with _factory_lock:
        if _factory_installed:
            return
        base_factory = logging.getLogRecordFactory()

        def record_factory(*args, **kwargs):
            record = base_factory(*args, **kwargs)
            for key, value in _log_context.get().items():
                setattr(record, key, value)
            return record

        logging.setLogRecordFactory(record_factory)
        _factory_installed = True


class LogContext:
    """Context manager attaching document context to every log record.

    The context lives in a ``ContextVar``, so threads and asyncio tasks
    extracting different documents each see only their own values.
    """

    def __init__(self, document: str | None = None, **kwargs):
        self.context = {k: v for k, v in {"document": document, **kwargs}.items() if v is not None}
        self._token = None

    def __enter__(self):
        _install_context_factory()
        self._token = _log_context.set({**_log_context.get(), **self.context})
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._token is not None:
            _log_context.reset(self._token)
            self._token = None


def log_performance(logger: logging.Logger | None = None):
    """Decorator to log function performance.

    Args:
        logger: Logger to use (defaults to the function's module logger)

    Returns:
        Decorated function
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            log = logger or logging.getLogger(func.__module__)
            start_time = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                duration_ms = (time.perf_counter() - start_time) * 1000
                log.error(
                    f"Function {func.__name__} failed",
                    extra={
                        "duration_ms": duration_ms,
                        "error_type": type(e).__name__
                    },
                    exc_info=True
                )
                raise
            duration_ms = (time.perf_counter() - start_time) * 1000
            log.debug(
                f"Function {func.__name__} completed",
                extra={"duration_ms": duration_ms}
            )
            return result

        return wrapper
    return decorator
