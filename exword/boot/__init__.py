#!/usr/bin/env python3
# exword/boot/__init__.py
from __future__ import annotations
"""
Boot sequence package.

Exports:
- boot_sequence: startup pipeline with optional [  OK  ] / [FAILED] lines.
- BootState: config, logger, session, line editor and command count.
"""

from .boot import BootState, boot_sequence

__all__ = ["boot_sequence", "BootState"]
