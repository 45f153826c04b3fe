from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .constants import DIFFICULTIES, SOURCE_HEURISTIC, SOURCE_STRUCTURED
from .errors import ConfigError


def _env_int(name: str, default: int) -> int:
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    try:
        return int(val)
    except ValueError:
        raise ConfigError(f"Environment variable {name} must be an integer, got {val!r}")


def _env_bool(name: str, default: bool) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class ExtractionConfig:
    """Tunables for the extraction engine.

    Defaults reproduce the engine's documented behaviour; the window sizes
    can be overridden from the environment.
    """

    # Lines scanned after a structured stem for options and answer markers
    scan_window_lines: int = field(default_factory=lambda: _env_int("QUIZ_SCAN_WINDOW_LINES", 20))
    # Paragraphs (question paragraph included) examined for heuristic options
    heuristic_window: int = field(default_factory=lambda: _env_int("QUIZ_HEURISTIC_WINDOW", 5))
    min_options: int = field(default_factory=lambda: _env_int("QUIZ_MIN_OPTIONS", 2))
    # Fingerprints must be strictly longer than this to survive deduplication
    min_fingerprint_length: int = field(default_factory=lambda: _env_int("QUIZ_MIN_FINGERPRINT_LENGTH", 10))
    default_difficulty: str = "medium"
    structured_source: str = SOURCE_STRUCTURED
    heuristic_source: str = SOURCE_HEURISTIC

    def validate(self) -> "ExtractionConfig":
        if self.scan_window_lines < 1:
            raise ConfigError(f"scan_window_lines must be >= 1, got {self.scan_window_lines}")
        if self.heuristic_window < 1:
            raise ConfigError(f"heuristic_window must be >= 1, got {self.heuristic_window}")
        if self.min_options < 2:
            raise ConfigError(f"min_options must be >= 2, got {self.min_options}")
        if self.min_fingerprint_length < 0:
            raise ConfigError(f"min_fingerprint_length must be >= 0, got {self.min_fingerprint_length}")
        if self.default_difficulty not in DIFFICULTIES + ("",):
            raise ConfigError(f"Unknown difficulty: {self.default_difficulty!r}")
        return self

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "ExtractionConfig":
        """Create config from dictionary."""
        try:
            cfg = cls(**config_dict)
        except TypeError as e:
            raise ConfigError(f"Invalid extraction config: {e}")
        return cfg.validate()

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)


@dataclass
class LoggingConfig:
    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)
    structured: bool = field(default_factory=lambda: _env_bool("LOG_STRUCTURED", False))


@dataclass
class BatchConfig:
    pattern: str = field(default_factory=lambda: os.getenv("QUIZ_DOCUMENT_PATTERN", "*.pdf"))
    progress: bool = False


@dataclass
class AppConfig:
    extraction: ExtractionConfig = None  # type: ignore[assignment]
    logging: LoggingConfig = None  # type: ignore[assignment]
    batch: BatchConfig = None  # type: ignore[assignment]

    def __post_init__(self):
        if self.extraction is None:
            self.extraction = ExtractionConfig()
        if self.logging is None:
            self.logging = LoggingConfig()
        if self.batch is None:
            self.batch = BatchConfig()

    @staticmethod
    def from_dict(payload: Dict[str, Any]) -> "AppConfig":
        if not isinstance(payload, dict):
            raise ConfigError(f"Config payload must be a mapping, got {type(payload).__name__}")
        try:
            return AppConfig(
                extraction=ExtractionConfig.from_dict(payload.get("extraction") or {}),
                logging=LoggingConfig(**(payload.get("logging") or {})),
                batch=BatchConfig(**(payload.get("batch") or {})),
            )
        except TypeError as e:
            raise ConfigError(f"Invalid config: {e}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "extraction": self.extraction.to_dict(),
            "logging": asdict(self.logging),
            "batch": asdict(self.batch),
        }

    @staticmethod
    def from_json(path: str | Path) -> "AppConfig":
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
        return AppConfig.from_dict(payload)

    @staticmethod
    def from_yaml(path: str | Path) -> "AppConfig":
        with open(path, "r", encoding="utf-8") as f:
            payload = yaml.safe_load(f) or {}
        return AppConfig.from_dict(payload)

    def to_json(self, path: str | Path) -> None:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        with open(p, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)


# Provide safe defaults via a factory function for top-level config
def default_app_config() -> AppConfig:
    return AppConfig(
        extraction=ExtractionConfig(),
        logging=LoggingConfig(),
        batch=BatchConfig(),
    )


# Default configuration instance
DEFAULT_CONFIG = ExtractionConfig().validate()


def get_extraction_config() -> ExtractionConfig:
    return ExtractionConfig().validate()


def resolve_extraction_config(config: Optional[ExtractionConfig] = None) -> ExtractionConfig:
    """Validated ``config``, or a fresh environment-backed one when omitted.

    Raises:
        ConfigError: If any value is out of range
    """
    if config is None:
        return get_extraction_config()
    return config.validate()


def get_logging_config() -> LoggingConfig:
    return LoggingConfig()


def get_batch_config() -> BatchConfig:
    return BatchConfig()
