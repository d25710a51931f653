#!/usr/bin/env python3
# exword/device/emulator.py
from __future__ import annotations

"""
In-memory dictionary emulator.

Implements the full `Device` contract against a small virtual flash:
internal memory (``_INTERNAL_00``) and an optional SD card (``_SD_00``)
under the device root, capacity accounting, model information, and the
add-on dictionary registry with per-user 20-byte authentication keys.

Contents live in an `EmulatedMedia` that outlives individual connections,
so files survive a disconnect/connect cycle within one process.
"""

import hmac
import logging
import secrets
from dataclasses import dataclass, field
from typing import Optional

from .responses import (
    RSP_ALREADY_EXISTS,
    RSP_FORBIDDEN,
    RSP_INVALID_PARAMETER,
    RSP_NO_MEDIUM,
    RSP_NOT_FOUND,
    RSP_NOT_READY,
    RSP_STORAGE_FULL,
    RSP_SUCCESS,
)
from .types import (
    AddOnDictionary,
    Capability,
    Capacity,
    DeviceModel,
    DirEntry,
    OpenOptions,
)

logger = logging.getLogger(__name__)

INTERNAL_STORAGE = "_INTERNAL_00"
SD_STORAGE = "_SD_00"
USER_DIR = "_USER"
AUTH_KEY_SIZE = 20


@dataclass
class _Folder:
    folders: dict[str, "_Folder"] = field(default_factory=dict)
    files: dict[str, bytes] = field(default_factory=dict)

    def used_bytes(self) -> int:
        return sum(len(data) for data in self.files.values()) + sum(
            sub.used_bytes() for sub in self.folders.values())


@dataclass
class EmulatedMedia:
    """Persistent contents of the emulated dictionary."""
    sd_card: bool = True
    internal_size: int = 64 * 1024 * 1024
    sd_size: int = 256 * 1024 * 1024
    model: DeviceModel = DeviceModel(
        model="XD-EMU", sub_model="EMU-00", ext_model="EMU-EXT",
        capabilities=Capability.SW | Capability.F | Capability.EXT)
    root: _Folder = field(default_factory=_Folder)
    users: dict[str, bytes] = field(default_factory=dict)
    installed: dict[str, dict[str, AddOnDictionary]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.root.folders.setdefault(INTERNAL_STORAGE, _Folder())
        if self.sd_card:
            self.root.folders.setdefault(SD_STORAGE, _Folder())

    def storage_size(self, storage: str) -> int:
        return self.sd_size if storage == SD_STORAGE else self.internal_size


def _split(path: str) -> list[str]:
    return [part for part in path.replace("/", "\\").split("\\") if part]


def _storage_of(root: str) -> str:
    parts = _split(root)
    return parts[0] if parts else ""


class EmulatedDevice:
    """A connection handle onto an `EmulatedMedia`."""

    def __init__(self, options: OpenOptions, media: Optional[EmulatedMedia] = None) -> None:
        self.options = options
        self.media = media if media is not None else EmulatedMedia()
        self.debug_level = 0
        self.connected = False
        self.closed = False
        self.cwd: list[str] = []
        self.auth_user: Optional[str] = None

    # ---------------- helpers ----------------

    def _trace(self, message: str, *args) -> None:
        if self.debug_level > 0:
            logger.debug("emulator: " + message, *args)

    def _folder(self, parts: list[str], *, create: bool = False) -> tuple[int, Optional[_Folder]]:
        folder = self.media.root
        for depth, name in enumerate(parts):
            child = folder.folders.get(name)
            if child is None:
                if depth == 0:
                    return (RSP_NO_MEDIUM if name == SD_STORAGE else RSP_NOT_FOUND), None
                if not create:
                    return RSP_NOT_FOUND, None
                child = folder.folders[name] = _Folder()
            folder = child
        return RSP_SUCCESS, folder

    def _current(self) -> _Folder:
        rsp, folder = self._folder(self.cwd)
        # the medium can vanish under us (format); fall back to the root
        if rsp != RSP_SUCCESS or folder is None:
            self.cwd = []
            return self.media.root
        return folder

    def _park_in_user_area(self, root: str) -> None:
        storage = _storage_of(root)
        if storage in self.media.root.folders:
            self._folder([storage, USER_DIR], create=True)
            self.cwd = [storage, USER_DIR]

    # ---------------- session ----------------

    def connect(self) -> int:
        if self.closed:
            return RSP_NOT_READY
        self.connected = True
        self.cwd = []
        self._trace("connected (%s, %s)", self.options.mode.value, self.options.locale.value)
        return RSP_SUCCESS

    def disconnect(self) -> int:
        self.connected = False
        self.auth_user = None
        return RSP_SUCCESS

    def close(self) -> None:
        self.connected = False
        self.closed = True

    def set_debug(self, level: int) -> None:
        self.debug_level = level

    # ---------------- information ----------------

    def get_model(self) -> tuple[int, Optional[DeviceModel]]:
        if not self.connected:
            return RSP_NOT_READY, None
        return RSP_SUCCESS, self.media.model

    def get_capacity(self) -> tuple[int, Optional[Capacity]]:
        if not self.connected:
            return RSP_NOT_READY, None
        if not self.cwd:
            return RSP_INVALID_PARAMETER, None
        storage = self.cwd[0]
        total = self.media.storage_size(storage)
        used = self.media.root.folders[storage].used_bytes()
        return RSP_SUCCESS, Capacity(total=total, free=total - used)

    def sd_format(self) -> int:
        if not self.connected:
            return RSP_NOT_READY
        if SD_STORAGE not in self.media.root.folders:
            return RSP_NO_MEDIUM
        self.media.root.folders[SD_STORAGE] = _Folder()
        self.media.installed.pop(SD_STORAGE, None)
        if self.cwd[:1] == [SD_STORAGE]:
            self.cwd = [SD_STORAGE]
        self._trace("formatted SD card")
        return RSP_SUCCESS

    # ---------------- files ----------------

    def list(self) -> tuple[int, list[DirEntry]]:
        if not self.connected:
            return RSP_NOT_READY, []
        folder = self._current()
        entries: list[DirEntry] = []
        for name in sorted(folder.folders):
            entries.append(_entry(name, is_directory=True))
        for name in sorted(folder.files):
            entries.append(_entry(name, is_directory=False))
        return RSP_SUCCESS, entries

    def setpath(self, path: str, mkdir: bool) -> int:
        if not self.connected:
            return RSP_NOT_READY
        parts = _split(path)
        rsp, _ = self._folder(parts, create=mkdir)
        self._trace("setpath %s (mkdir=%s) -> 0x%02x", path, mkdir, rsp)
        if rsp == RSP_SUCCESS:
            self.cwd = parts
        return rsp

    def send_file(self, name: str, data: bytes) -> int:
        if not self.connected:
            return RSP_NOT_READY
        if not self.cwd:
            return RSP_FORBIDDEN
        storage = self.cwd[0]
        folder = self._current()
        used = self.media.root.folders[storage].used_bytes() - len(folder.files.get(name, b""))
        if used + len(data) > self.media.storage_size(storage):
            return RSP_STORAGE_FULL
        folder.files[name] = bytes(data)
        self._trace("stored %s (%d bytes)", name, len(data))
        return RSP_SUCCESS

    def get_file(self, name: str) -> tuple[int, bytes]:
        if not self.connected:
            return RSP_NOT_READY, b""
        data = self._current().files.get(name)
        if data is None:
            return RSP_NOT_FOUND, b""
        return RSP_SUCCESS, data

    def remove_file(self, name: str, is_unicode: bool) -> int:
        if not self.connected:
            return RSP_NOT_READY
        folder = self._current()
        if folder.files.pop(name, None) is None:
            return RSP_NOT_FOUND
        return RSP_SUCCESS

    # ---------------- add-on dictionaries ----------------

    def dict_list(self, root: str) -> tuple[int, list[AddOnDictionary]]:
        storage = _storage_of(root)
        if storage not in self.media.root.folders:
            return RSP_NO_MEDIUM, []
        self._park_in_user_area(root)
        installed = self.media.installed.get(storage, {})
        return RSP_SUCCESS, [installed[key] for key in sorted(installed)]

    def dict_reset(self, user: str) -> tuple[int, Optional[bytes]]:
        key = secrets.token_bytes(AUTH_KEY_SIZE)
        self.media.users = {user: key}
        self.media.installed.clear()
        for storage in self.media.root.folders.values():
            storage.folders.pop(USER_DIR, None)
        self.auth_user = user
        self._park_in_user_area(INTERNAL_STORAGE)
        self._trace("reset authentication for %s", user)
        return RSP_SUCCESS, key

    def dict_auth(self, user: str, key: Optional[bytes]) -> int:
        stored = self.media.users.get(user)
        self._park_in_user_area(INTERNAL_STORAGE)
        if stored is None:
            return RSP_FORBIDDEN
        if key is not None and not hmac.compare_digest(stored, key):
            return RSP_FORBIDDEN
        self.auth_user = user
        return RSP_SUCCESS

    def _installed_in(self, root: str) -> tuple[int, dict[str, AddOnDictionary]]:
        if self.auth_user is None:
            return RSP_FORBIDDEN, {}
        storage = _storage_of(root)
        if storage not in self.media.root.folders:
            return RSP_NO_MEDIUM, {}
        return RSP_SUCCESS, self.media.installed.setdefault(storage, {})

    def dict_decrypt(self, root: str, dict_id: str) -> int:
        rsp, installed = self._installed_in(root)
        if rsp != RSP_SUCCESS:
            return rsp
        self._park_in_user_area(root)
        return RSP_SUCCESS if dict_id in installed else RSP_NOT_FOUND

    def dict_remove(self, root: str, dict_id: str) -> int:
        rsp, installed = self._installed_in(root)
        if rsp != RSP_SUCCESS:
            return rsp
        self._park_in_user_area(root)
        if installed.pop(dict_id, None) is None:
            return RSP_NOT_FOUND
        self._current().folders.pop(dict_id, None)
        return RSP_SUCCESS

    def dict_install(self, root: str, dict_id: str) -> int:
        """Install a dictionary previously uploaded to ``<root>\\<id>``."""
        rsp, installed = self._installed_in(root)
        if rsp != RSP_SUCCESS:
            return rsp
        if dict_id in installed:
            return RSP_ALREADY_EXISTS
        storage = self.media.root.folders[_storage_of(root)]
        staged = storage.folders.pop(dict_id, None)
        if staged is None:
            return RSP_NOT_FOUND
        self._park_in_user_area(root)
        self._current().folders[dict_id] = staged
        installed[dict_id] = AddOnDictionary(id=dict_id, name=f"Add-on {dict_id}")
        return RSP_SUCCESS


def _entry(name: str, *, is_directory: bool) -> DirEntry:
    is_unicode = not name.isascii()
    raw = name.encode("utf-16-le") if is_unicode else name.encode("ascii")
    return DirEntry(name=name, is_directory=is_directory,
                    is_unicode=is_unicode, raw_size=len(raw) + 3)


_ATTACHED_MEDIA: Optional[EmulatedMedia] = None


def open_device(options: OpenOptions) -> EmulatedDevice:
    """Default opener: every connection talks to the same attached media."""
    global _ATTACHED_MEDIA
    if _ATTACHED_MEDIA is None:
        _ATTACHED_MEDIA = EmulatedMedia()
    return EmulatedDevice(options, _ATTACHED_MEDIA)
