"""
Logging setup for the recognition entry points.

Library modules only call ``logging.getLogger(__name__)``. The demo and the
scripts call :func:`setup_logging` once; the pipeline's per-frame timing is
emitted at DEBUG through :func:`log_execution_time`.
"""

from __future__ import annotations

import functools
import logging
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from ..config import LOGGING_CONFIG


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level name."""

    COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Copy so the session file handler does not receive escape codes
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelno, self.RESET)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def parse_log_level(level: Union[str, int]) -> int:
    """Translate ``'debug'``/``'INFO'``/... into the numeric level."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def setup_logging(level: Union[str, int] = LOGGING_CONFIG["level"],
                  log_dir: Optional[Path] = None) -> Optional[Path]:
    """
    Replace the root handlers with a colored console handler.

    Args:
        level: Level name or number
        log_dir: When given, recognitions are also written to a
            ``fingerspelling_<timestamp>.log`` file in this directory

    Returns:
        Path of the session log file, or None
    """
    level = parse_log_level(level)
    log_format = LOGGING_CONFIG["format"]

    root = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(ColoredFormatter(log_format))
    root.addHandler(console)

    if log_dir is None:
        return None

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"fingerspelling_{datetime.now():%Y%m%d_%H%M%S}.log"

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(log_format))
    root.addHandler(file_handler)
    return log_file


def log_execution_time(logger: Optional[logging.Logger] = None):
    """
    Log the wrapped call's duration at DEBUG; on failure log at ERROR and
    re-raise.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            log = logger or logging.getLogger(func.__module__)
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                log.error(f"{func.__name__} failed after {time.perf_counter() - start:.4f}s: {e}")
                raise
            log.debug(f"{func.__name__} completed in {time.perf_counter() - start:.4f}s")
            return result

        return wrapper
    return decorator
