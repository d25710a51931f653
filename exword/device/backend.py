#!/usr/bin/env python3
# exword/device/backend.py
from __future__ import annotations

"""
Resolve the configured device backend.

A backend is named by ``package.module:attribute`` where the attribute is a
`DeviceOpener`. The default points at the in-memory emulator.
"""

import importlib

from .types import DeviceOpener

DEFAULT_BACKEND = "exword.device.emulator:open_device"


def load_opener(spec: str = DEFAULT_BACKEND) -> DeviceOpener:
    """Import and return the opener named by `spec`."""
    module_name, sep, attribute = spec.partition(":")
    if not sep or not module_name or not attribute:
        raise ValueError(
            f"DEVICE_BACKEND must look like 'package.module:opener', got {spec!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ValueError(f"Cannot import device backend module {module_name!r}: {exc}") from exc

    opener = getattr(module, attribute, None)
    if not callable(opener):
        raise ValueError(f"Device backend {spec!r} is not callable.")
    return opener
