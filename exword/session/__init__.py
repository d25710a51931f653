#!/usr/bin/env python3
# exword/session/__init__.py
from __future__ import annotations

"""Session state and device path handling."""

from .state import MAX_DEBUG_LEVEL, Session
from .paths import (
    DEVICE_ROOT,
    INTERNAL_MEM,
    SD_CARD,
    SD_MARKER,
    SCHEMES,
    canonicalize,
    change_path,
    normalize_path,
    parse_location,
)

__all__ = [
    "MAX_DEBUG_LEVEL",
    "Session",
    "DEVICE_ROOT",
    "INTERNAL_MEM",
    "SD_CARD",
    "SD_MARKER",
    "SCHEMES",
    "canonicalize",
    "change_path",
    "normalize_path",
    "parse_location",
]
