#!/usr/bin/env python3
# exword/ui/utils/ansi.py
from __future__ import annotations

"""SGR colour codes for console output and log records."""

import os
import re
from typing import TextIO

STYLES: dict[str, str] = {
    "reset": "\x1b[0m",
    "bold": "\x1b[1m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "magenta": "\x1b[35m",
    "grey": "\x1b[90m",
}

_ESCAPE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def strip_ansi(text: str) -> str:
    return _ESCAPE.sub("", text)


def supports_ansi(stream: TextIO) -> bool:
    """
    True when `stream` is a terminal that understands escape sequences.

    Legacy Windows consoles only do when running under Windows Terminal,
    ANSICON or an xterm-like TERM.
    """
    isatty = getattr(stream, "isatty", None)
    if isatty is None or not isatty():
        return False
    if os.name != "nt":
        return True
    env = os.environ
    return bool(env.get("WT_SESSION") or env.get("ANSICON")
                or env.get("TERM", "").startswith(("xterm", "vt100")))


def colorize(text: str, *styles: str) -> str:
    """Wrap `text` in the named styles; unknown names are ignored."""
    prefix = "".join(STYLES[name] for name in styles if name in STYLES)
    if not prefix:
        return text
    return f"{prefix}{text}{STYLES['reset']}"
