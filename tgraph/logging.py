# tgraph/logging.py
"""
Structured logging for the temporal graph engine.

Every log line is a JSON object with:
- timestamp: ISO 8601 (UTC)
- level: DEBUG/INFO/WARNING/ERROR/CRITICAL
- logger: Module name
- event: Short snake_case event name
- **kwargs: Structured fields (node ids, query times, counts)

Usage:
    from tgraph.logging import get_logger
    logger = get_logger(__name__)
    logger.debug("edge_rejected", src="A", dst="B", reason="unknown_endpoint")
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .settings import settings


class StructuredLogFormatter(logging.Formatter):
    """Render each record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "event": record.getMessage(),
        }

        if hasattr(record, "structured_data"):
            log_data.update(record.structured_data)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if record.levelno >= logging.ERROR:
            log_data["source"] = {
                "file": record.filename,
                "line": record.lineno,
                "function": record.funcName,
            }

        # Node ids may be ints or strings, sets of them show up in snapshots
        return json.dumps(log_data, default=_json_default)


def _json_default(value: Any) -> Any:
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    return str(value)


class StructuredLogger:
    """
    Thin wrapper around a stdlib logger that takes keyword fields.

    Example:
        logger = get_logger(__name__)
        logger.info("graph_reset", node_count=10)
    """

    def __init__(self, name: str):
        self._logger = logging.getLogger(name)

    def _log(self, level: int, event: str, **kwargs):
        self._logger.log(level, event, extra={"structured_data": kwargs})

    def debug(self, event: str, **kwargs):
        self._log(logging.DEBUG, event, **kwargs)

    def info(self, event: str, **kwargs):
        self._log(logging.INFO, event, **kwargs)

    def warning(self, event: str, **kwargs):
        self._log(logging.WARNING, event, **kwargs)


_configured = False


def configure_logging(
    level: Optional[str] = None,
    json_output: Optional[bool] = None,
    log_file: Optional[str] = None,
):
    """
    Configure root logging once per process.

    Args:
        level: Log level name, defaults to settings.log_level
        json_output: JSON lines (True) or plain text (False), defaults to settings.log_json
        log_file: Optional file path to also write JSON lines to
    """
    global _configured
    if _configured:
        return
    _configured = True

    level = level or settings.log_level
    if json_output is None:
        json_output = settings.log_json

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    if json_output:
        console_handler.setFormatter(StructuredLogFormatter())
    else:
        console_handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(StructuredLogFormatter())
        root_logger.addHandler(file_handler)

    logging.getLogger("uvicorn").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str) -> StructuredLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        StructuredLogger instance
    """
    if not _configured:
        configure_logging()
    return StructuredLogger(name)


def get_api_logger() -> StructuredLogger:
    """Get logger for API routes."""
    return get_logger("tgraph.api")
