#!/usr/bin/env python3
# exword/device/__init__.py
from __future__ import annotations

"""
Device boundary package.

Provides:
- The `Device` protocol and its value types (`types.py`).
- Response codes and their text rendering (`responses.py`).
- Backend resolution from configuration (`backend.py`).
- An in-memory emulator implementing the whole contract (`emulator.py`).
"""

from .types import (
    AddOnDictionary,
    Capability,
    Capacity,
    Device,
    DeviceModel,
    DeviceOpener,
    DirEntry,
    Locale,
    Mode,
    OpenOptions,
)
from .responses import RSP_SUCCESS, response_to_string
from .backend import DEFAULT_BACKEND, load_opener

__all__ = [
    "AddOnDictionary",
    "Capability",
    "Capacity",
    "Device",
    "DeviceModel",
    "DeviceOpener",
    "DirEntry",
    "Locale",
    "Mode",
    "OpenOptions",
    "RSP_SUCCESS",
    "response_to_string",
    "DEFAULT_BACKEND",
    "load_opener",
]
