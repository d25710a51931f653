#!/usr/bin/env python3
# exword/ui/static/logging.py
from __future__ import annotations

"""
Logger setup for the shell.

Console records go to stderr as ``[LEVEL] message``, coloured by level on a
terminal. An optional log file receives every record down to DEBUG, without
colour codes, and rotates at about 2 MB.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from ..utils import PRINT_MUTEX, colorize, strip_ansi, supports_ansi

LOG_FILE_MAX_BYTES = 2_000_000
LOG_FILE_BACKUPS = 3


class ColorizingStreamHandler(logging.StreamHandler):
    """Console handler sharing the print mutex with `print_line`."""

    LEVEL_STYLES = {
        logging.DEBUG: ("grey",),
        logging.WARNING: ("yellow",),
        logging.ERROR: ("red",),
        logging.CRITICAL: ("bold", "magenta"),
    }

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        if not supports_ansi(self.stream):
            return strip_ansi(text)
        return colorize(text, *self.LEVEL_STYLES.get(record.levelno, ()))

    def emit(self, record: logging.LogRecord) -> None:
        with PRINT_MUTEX:
            super().emit(record)


class PlainFormatter(logging.Formatter):
    """Formatter for log files: escape sequences are removed from the output."""

    def format(self, record: logging.LogRecord) -> str:
        return strip_ansi(super().format(record))


def init_logger(
    name: str = "exword",
    level: int | str = logging.WARNING,
    logfile: Optional[str | Path] = None,
) -> logging.Logger:
    """Configure and return the `name` logger; repeated calls add no handlers."""
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG if logfile else level)
    logger.propagate = False

    if not any(isinstance(h, ColorizingStreamHandler) for h in logger.handlers):
        console = ColorizingStreamHandler(sys.stderr)
        console.setLevel(level)
        console.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(console)

    if logfile and not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        path = Path(logfile)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(path, maxBytes=LOG_FILE_MAX_BYTES,
                                      backupCount=LOG_FILE_BACKUPS, encoding="utf-8")
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(PlainFormatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        logger.addHandler(handler)

    return logger
