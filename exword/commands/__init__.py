#!/usr/bin/env python3
# exword/commands/__init__.py
from __future__ import annotations

"""
Package for command management and registration.

Provides:
- Data structures and protocols (`Command`, `CommandCallback`, `words`).
- Ordered registry and decorator (`REGISTRY`, `CommandRegistry`, `command`).

This package re-exports public APIs from:
- command_types.py
- commands.py
"""

from .command_types import Command, CommandCallback, Completer, words
from .commands import REGISTRY, CommandRegistry, command

__all__ = [
    "Command",
    "CommandCallback",
    "Completer",
    "words",
    "REGISTRY",
    "CommandRegistry",
    "command",
]
