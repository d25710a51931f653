#!/usr/bin/env python3
# exword/ui/__init__.py
from __future__ import annotations
# Re-export convenient top-level API
from .utils import (
    STYLES,
    colorize,
    strip_ansi,
    supports_ansi,
    PRINT_MUTEX,
    print_line,
)
from .static import (
    format_table,
    print_table,
    init_logger,
    ColorizingStreamHandler,
    PlainFormatter,
)

__all__ = [
    "STYLES",
    "colorize",
    "strip_ansi",
    "supports_ansi",
    "PRINT_MUTEX",
    "print_line",
    "format_table",
    "print_table",
    "init_logger",
    "ColorizingStreamHandler",
    "PlainFormatter",
]
