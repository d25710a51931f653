#!/usr/bin/env python3
# exword/device/types.py
from __future__ import annotations

"""
Device boundary contract.

The shell never talks to the transport directly. Everything it needs from an
attached dictionary is expressed by the `Device` protocol below; a backend
supplies an opener (`DeviceOpener`) returning a `Device` or None when no
device is present. Every operation answers with an integer response code
(see `exword.device.responses`).
"""

from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import Callable, Optional, Protocol


class Mode(Enum):
    """Operating personality chosen at connect time."""
    LIBRARY = "library"
    TEXT = "text"
    CD = "cd"


class Locale(Enum):
    """Regional variant flag sent at connect time."""
    JA = "ja"
    KR = "kr"
    CN = "cn"
    DE = "de"
    ES = "es"
    FR = "fr"
    RU = "ru"


class Capability(IntFlag):
    SW = 0x01
    P = 0x02
    F = 0x04
    C = 0x08
    EXT = 0x10


@dataclass(frozen=True, slots=True)
class OpenOptions:
    mode: Mode = Mode.LIBRARY
    locale: Locale = Locale.JA


@dataclass(frozen=True, slots=True)
class DirEntry:
    """
    One listing entry.

    Attributes:
        name: Display name (already transcoded by the backend).
        is_directory: Entry is a directory.
        is_unicode: Name was stored as unicode on the device.
        raw_size: Size of the raw entry record as reported by the device.
    """
    name: str
    is_directory: bool = False
    is_unicode: bool = False
    raw_size: int = 0


@dataclass(frozen=True, slots=True)
class DeviceModel:
    model: str
    sub_model: str
    ext_model: str = ""
    capabilities: Capability = Capability(0)


@dataclass(frozen=True, slots=True)
class Capacity:
    total: int
    free: int


@dataclass(frozen=True, slots=True)
class AddOnDictionary:
    id: str
    name: str


class Device(Protocol):
    """Handle for an opened dictionary device."""

    def connect(self) -> int: ...
    def disconnect(self) -> int: ...
    def close(self) -> None: ...
    def set_debug(self, level: int) -> None: ...

    def get_model(self) -> tuple[int, Optional[DeviceModel]]: ...
    def get_capacity(self) -> tuple[int, Optional[Capacity]]: ...
    def sd_format(self) -> int: ...

    def list(self) -> tuple[int, list[DirEntry]]: ...
    def setpath(self, path: str, mkdir: bool) -> int: ...
    def send_file(self, name: str, data: bytes) -> int: ...
    def get_file(self, name: str) -> tuple[int, bytes]: ...
    def remove_file(self, name: str, is_unicode: bool) -> int: ...

    # add-on dictionary sub-protocol
    def dict_list(self, root: str) -> tuple[int, list[AddOnDictionary]]: ...
    def dict_reset(self, user: str) -> tuple[int, Optional[bytes]]: ...
    def dict_auth(self, user: str, key: Optional[bytes]) -> int: ...
    def dict_decrypt(self, root: str, dict_id: str) -> int: ...
    def dict_remove(self, root: str, dict_id: str) -> int: ...
    def dict_install(self, root: str, dict_id: str) -> int: ...


DeviceOpener = Callable[[OpenOptions], Optional[Device]]
