#!/usr/bin/env python3
# exword/ui/utils/console.py
from __future__ import annotations

import sys
import threading
from typing import TextIO

# Single shared print mutex for all UI output (logging included).
PRINT_MUTEX = threading.Lock()


def print_line(text: str = "", *, file: TextIO | None = None, end: str = "\n", flush: bool = False) -> None:
    """Serialized print; the target stream is resolved at call time."""
    stream = file if file is not None else sys.stdout
    with PRINT_MUTEX:
        stream.write(f"{text}{end}")
        if flush or not end:
            stream.flush()
