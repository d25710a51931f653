#!/usr/bin/env python3
# exword/session/state.py
from __future__ import annotations

"""
Shell session context.

A single `Session` is created at startup and handed to every command
handler; it is the only mutable state the shell keeps.
"""

from dataclasses import dataclass, field
from typing import Optional

from exword.device import Device, DeviceOpener, Locale, Mode
from exword.device.emulator import open_device

MAX_DEBUG_LEVEL = 5


@dataclass(slots=True)
class Session:
    """
    Connection and option state.

    Invariants:
        device is not None  <=>  connected
        current_path only changes through `exword.session.paths.change_path`
        (or is cleared on disconnect)
    """
    opener: DeviceOpener = field(default=open_device, repr=False)
    connected: bool = False
    device: Optional[Device] = field(default=None, repr=False)
    mode: Optional[Mode] = None
    locale: Optional[Locale] = None
    current_path: Optional[str] = None
    authenticated: bool = False
    sd_present: bool = False
    debug_level: int = 0
    auto_mkdir: bool = False
    running: bool = False

    def require_device(self) -> Device:
        """Return the open device; callers check `connected` first."""
        if self.device is None:
            raise RuntimeError("No device connected.")
        return self.device

    def reset_connection(self) -> None:
        """Forget everything tied to the current connection."""
        self.connected = False
        self.device = None
        self.mode = None
        self.locale = None
        self.current_path = None
        self.authenticated = False
        self.sd_present = False
