"""
Logging configuration for the calculator engine and CLI.

Provides JSON or text logs with a trace_id for correlating all records of
one calculator session.

Usage:
    from calc_engine.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, trace_id="session-1")
    logger.debug("Dispatching action", extra={"action": "RUN_CALC"})
"""

import logging
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

from .config import Settings

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class TraceIDFilter(logging.Filter):
    """Ensures every record has a trace_id field, even outside a LoggerAdapter."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "trace_id"):
            record.trace_id = "N/A"  # type: ignore
        return True


def setup_logging(settings: Optional[Settings] = None, stream=None) -> None:
    """
    Configure the root logger.

    Args:
        settings: Level and format (read from environment if None)
        stream: Output stream (stderr if None, keeping stdout for results)
    """
    settings = settings or Settings.from_env()
    level = LEVELS.get(settings.log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.addFilter(TraceIDFilter())

    if settings.log_format == "json":
        formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(trace_id)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [trace_id=%(trace_id)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str, trace_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger with a trace_id for correlation.

    Args:
        name: Logger name (typically __name__)
        trace_id: Session identifier
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"trace_id": trace_id or "N/A"})
