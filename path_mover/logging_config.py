"""Structured logging configuration.

Provides JSON-formatted logs with:
- Category detection (parser, geometry, motion, editing, cli, system)
- Extra fields passed through ``logger.info(..., extra={...})``
- Optional rotating log files, with a separate error-only file
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from typing import TextIO

    from path_mover.config import Settings

MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5
PLAIN_FORMAT = "%(asctime)s %(levelname)5s [%(name)s] %(message)s"

# Attributes every LogRecord carries; anything else came in through ``extra``
_RECORD_FIELDS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
}


class StructuredFormatter(logging.Formatter):
    """One JSON object per line."""

    # Logger name prefix -> category
    CATEGORY_MAP = {
        "path_mover.tokenizer": "parser",
        "path_mover.parser": "parser",
        "path_mover.serialize": "parser",
        "path_mover.paths": "geometry",
        "path_mover.builder": "geometry",
        "path_mover.easing": "motion",
        "path_mover.mover": "motion",
        "path_mover.editing": "editing",
        "path_mover.program": "editing",
        "path_mover.cli": "cli",
    }

    def category_for(self, logger_name: str) -> str:
        for prefix, category in self.CATEGORY_MAP.items():
            if logger_name.startswith(prefix):
                return category
        return "system"

    @staticmethod
    def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
        extra: dict[str, Any] = {}
        for key, value in vars(record).items():
            if key in _RECORD_FIELDS or key.startswith("_"):
                continue
            try:
                json.dumps(value)
            except (TypeError, ValueError):
                value = str(value)
            extra[key] = value
        return extra

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "category": self.category_for(record.name),
            "logger": record.name,
            "message": record.getMessage(),
        }
        extra = self._extra_fields(record)
        if extra:
            payload["extra"] = extra
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


class ErrorFilter(logging.Filter):
    """Pass only ERROR and CRITICAL records."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno >= logging.ERROR


def _rotating_handler(path: str, formatter: logging.Formatter) -> RotatingFileHandler:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
    )
    handler.setFormatter(formatter)
    return handler


def configure_logging(
    *,
    json_format: bool = True,
    log_level: int = logging.INFO,
    log_file: str | None = None,
    error_log_file: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Replace the root logger's handlers.

    Args:
        json_format: JSON lines (False for human-readable lines)
        log_level: Minimum log level
        log_file: Also write everything to this rotating file
        error_log_file: Also write errors only to this rotating file
        stream: Console stream (default: sys.stderr)
    """
    root = logging.getLogger()
    root.setLevel(log_level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    formatter: logging.Formatter
    if json_format:
        formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(PLAIN_FORMAT, datefmt="%H:%M:%S")

    console = logging.StreamHandler(stream or sys.stderr)
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_file:
        root.addHandler(_rotating_handler(log_file, formatter))
    if error_log_file:
        errors_only = _rotating_handler(error_log_file, formatter)
        errors_only.addFilter(ErrorFilter())
        root.addHandler(errors_only)


def setup_logging(settings: Settings, *, stream: TextIO | None = None) -> None:
    """Configure logging from application settings; unknown levels mean INFO."""
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    configure_logging(
        json_format=settings.log_json,
        log_level=level,
        log_file=settings.log_file,
        stream=stream,
    )
