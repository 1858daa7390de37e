"""
Centralized logging configuration.

setup_logging() is called once by create_app(). Records go to stdout at
LOG_LEVEL and to logs/dayrhythm_YYYYMMDD.log at DEBUG. Modules log
through get_logger(__name__); classes can mix in LoggerMixin.
"""
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_DIR = Path(__file__).resolve().parents[2] / "logs"

# Supabase, Groq and Gemini all sit on HTTP clients that are chatty at DEBUG
QUIET_LOGGERS = ("httpx", "httpcore", "hpack", "urllib3", "grpc")

_logging_configured = False


def _resolve_level(log_level: str) -> int:
    level = logging.getLevelName(log_level.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(log_level: str = "INFO", log_dir: Optional[Path] = None) -> logging.Logger:
    """
    Configure the root logger. Later calls are no-ops.

    Args:
        log_level: Console level name; unknown names fall back to INFO
        log_dir: Directory for the daily log file (default: <repo>/logs)

    Returns:
        The root logger
    """
    global _logging_configured

    root_logger = logging.getLogger()
    if _logging_configured:
        return root_logger

    log_dir = log_dir or DEFAULT_LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"dayrhythm_{datetime.now():%Y%m%d}.log"

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(_resolve_level(log_level))

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)

    for handler in (console_handler, file_handler):
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    root_logger.setLevel(logging.DEBUG)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _logging_configured = True
    root_logger.debug(f"Logging configured: level={log_level}, file={log_file}")
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Logger for a module; pass __name__.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Fetching events")
        2025-10-25 10:30:45 | INFO     | dayrhythm.database.store:42 | Fetching events
    """
    return logging.getLogger(name)


class LoggerMixin:
    """Gives a class a `logger` named <module>.<ClassName>."""

    @property
    def logger(self) -> logging.Logger:
        cls = type(self)
        return get_logger(f"{cls.__module__}.{cls.__name__}")
