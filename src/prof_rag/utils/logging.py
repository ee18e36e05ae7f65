"""Logging setup for prof-rag.

Modules log through children of the ``prof_rag`` logger and attach
structured fields with ``log_with_context`` (or ``extra=``). The console
shows them as trailing ``key=value`` pairs; JSON output and log files carry
them as top-level keys.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

logger = logging.getLogger("prof_rag")

# Attributes every LogRecord has; anything else came from ``extra=``
_RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


def _context_fields(record: logging.LogRecord) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    context = getattr(record, "context", None)
    if isinstance(context, dict):
        fields.update(context)
    fields.update(
        (key, value)
        for key, value in vars(record).items()
        if key not in _RECORD_ATTRS and key != "context"
    )
    return fields


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_context_fields(record),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class ConsoleFormatter(logging.Formatter):
    """``LEVEL    logger: message key=value`` lines, optionally colored."""

    LEVEL_COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool = True) -> None:
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        level = f"{record.levelname:8}"
        if self.use_color:
            level = f"{self.LEVEL_COLORS.get(record.levelname, '')}{level}{self.RESET}"

        parts = [f"{level} {record.name}: {record.getMessage()}"]
        parts.extend(f"{key}={value}" for key, value in _context_fields(record).items())
        line = " ".join(parts)

        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def _handler(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    json_format: bool = False,
    use_color: bool = True,
) -> logging.Logger:
    """Install handlers on the ``prof_rag`` logger, replacing earlier ones.

    Console output goes to stderr so command output on stdout stays
    parseable. A log file, when given, is always written as JSON.

    Args:
        level: Level name; unknown names fall back to INFO.
        log_file: Optional JSON log file; parent directories are created.
        json_format: Emit JSON on the console as well.
        use_color: Color the level name on the console.

    Returns:
        The package logger.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    console_formatter = JSONFormatter() if json_format else ConsoleFormatter(use_color)

    logger.handlers.clear()
    logger.setLevel(numeric_level)
    logger.addHandler(
        _handler(logging.StreamHandler(sys.stderr), numeric_level, console_formatter)
    )
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_handler(logging.FileHandler(log_file), numeric_level, JSONFormatter()))

    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, e.g. ``get_logger(__name__)``."""
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    exc_info: bool = False,
    **context: Any,
) -> None:
    """Log ``message`` with ``context`` as structured fields.

    ``exc_info=True`` attaches the exception currently being handled.
    """
    logger.log(level, message, exc_info=exc_info, extra={"context": context}, stacklevel=2)
