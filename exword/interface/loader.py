#!/usr/bin/env python3
# exword/interface/loader.py
from __future__ import annotations

"""
Command loader.

Imports the built-in command modules in a fixed order, so the registry (and
therefore the help listing) keeps a stable command order. Each module
registers its commands with the `command` decorator at import time.
"""

import importlib

from exword.commands import REGISTRY

COMMANDS_PACKAGE = "exword.plugins"
BUILTIN_MODULES: tuple[str, ...] = (
    "device",      # connect, disconnect, model, capacity, format
    "files",       # list, delete, send, get, setpath
    "dictionary",  # dict
    "options",     # set
    "shell",       # exit, help
)


def load_commands(commands_package: str = COMMANDS_PACKAGE) -> int:
    """Import the built-in command modules; returns the number of commands registered."""
    for module_name in BUILTIN_MODULES:
        importlib.import_module(f"{commands_package}.{module_name}")
    return len(REGISTRY)
