#!/usr/bin/env python3
# exword/session/paths.py
from __future__ import annotations

"""
Device path normalization.

Device paths are absolute, backslash separated and rooted at a storage
prefix (internal memory or SD card). `change_path` is the one place that
moves the session to a new path.
"""

import logging
import re
from typing import Optional

from exword.device import RSP_SUCCESS

from .state import Session

logger = logging.getLogger(__name__)

DEVICE_ROOT = "\\"
INTERNAL_MEM = "\\_INTERNAL_00"
SD_CARD = "\\_SD_00"
SD_MARKER = "_SD_00"

SCHEMES: dict[str, str] = {
    "sd": SD_CARD,
    "mem": INTERNAL_MEM,
}
MAX_PATH_LENGTH = 255

_SEPARATOR_RUN = re.compile(r"[/\\]{2,}")
_LOCATION = re.compile(r"^(sd|mem)://(\S+)")


def canonicalize(path: str) -> str:
    """Collapse separator runs and turn every '/' into '\\'."""
    return _SEPARATOR_RUN.sub("\\\\", path).replace("/", "\\")


def normalize_path(prefix: str, path: str) -> str:
    """Join `path` under `prefix` and canonicalize the result."""
    return canonicalize(f"{prefix}\\{path}")


def parse_location(location: str) -> Optional[tuple[str, str]]:
    """
    Split ``sd://<path>`` / ``mem://<path>`` into (scheme, path).

    Returns None for anything else. Paths longer than MAX_PATH_LENGTH are cut.
    """
    match = _LOCATION.match(location)
    if match is None:
        return None
    return match.group(1), match.group(2)[:MAX_PATH_LENGTH]


def change_path(session: Session, prefix: str, path: str, mkdir: bool) -> int:
    """
    Move the device to ``prefix\\path``.

    On success the session's current path becomes the canonical string;
    on any other response code the session is left untouched.
    """
    target = normalize_path(prefix, path)
    rsp = session.require_device().setpath(target, mkdir)
    logger.debug("setpath %s (mkdir=%s) -> 0x%02x", target, mkdir, rsp)
    if rsp == RSP_SUCCESS:
        session.current_path = target
    return rsp
