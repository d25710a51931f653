#!/usr/bin/env python3
# exword/ui/utils/__init__.py
from __future__ import annotations
from .ansi import STYLES, colorize, strip_ansi, supports_ansi
from .console import PRINT_MUTEX, print_line

__all__ = [
    "STYLES",
    "colorize",
    "strip_ansi",
    "supports_ansi",
    "PRINT_MUTEX",
    "print_line",
]
