#!/usr/bin/env python3
# exword/dictionary/workflow.py
from __future__ import annotations

"""
Add-on dictionary workflow.

Sub-functions (list, reset, auth, decrypt, remove, install) run against the
storage medium of the session's current path. Dictionary operations can leave
the device inside its internal dictionary area, so every sub-function that
reached the device is followed by a path restore.
"""

import logging
from typing import Callable, Optional

from exword.device import Mode, RSP_SUCCESS, response_to_string
from exword.interface.parser import ArgumentQueue
from exword.session import Session, change_path
from exword.ui import print_line, print_table

from .authkey import (
    AuthKeyLengthError,
    InvalidAuthKeyCharacter,
    format_auth_key,
    parse_auth_key,
)

logger = logging.getLogger(__name__)

SD_ROOT = "\\_SD_00\\"
INTERNAL_ROOT = "\\_INTERNAL_00\\"
_SD_PREFIX = SD_ROOT[:7]
DICT_ID_LENGTH = 5

SUBFUNCTIONS: tuple[str, ...] = ("list", "reset", "auth", "decrypt", "remove", "install")


def resolve_root(current_path: Optional[str]) -> str:
    """Pick the storage root from the first seven characters of the current path."""
    if current_path is not None and current_path[:7] == _SD_PREFIX:
        return SD_ROOT
    return INTERNAL_ROOT


class DictionaryWorkflow:
    """Runs one ``dict`` sub-function for a connected session."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.device = session.require_device()
        self.root = resolve_root(session.current_path)

    # ---------------- entry ----------------

    def run(self, args: ArgumentQueue) -> None:
        subfunc = args.peek()
        if subfunc is None:
            print_line("No sub-function specified.")
            return
        args.dequeue()

        handlers: dict[str, Callable[[ArgumentQueue], bool]] = {
            "list": self.list,
            "reset": self.reset,
            "auth": self.auth,
            "decrypt": self._secured("decrypt"),
            "remove": self._secured("remove"),
            "install": self._secured("install"),
        }
        handler = handlers.get(subfunc)
        if handler is None:
            print_line("Unknown subfunction")
            return

        if handler(args):
            self.restore_path()

    def restore_path(self) -> None:
        """Return the device to the session path, or to the storage root."""
        current = self.session.current_path or self.root
        if self.device.setpath(current, False) != RSP_SUCCESS:
            logger.debug("restore to %s failed; falling back to %s", current, self.root)
            change_path(self.session, self.root, "/", False)

    # ---------------- sub-functions ----------------
    # Each returns True when the device was contacted.

    def list(self, args: ArgumentQueue) -> bool:
        rsp, dictionaries = self.device.dict_list(self.root)
        if rsp != RSP_SUCCESS:
            print_line(response_to_string(rsp))
        elif not dictionaries:
            print_line("No add-on dictionaries installed.")
        else:
            print_table([[d.id, d.name] for d in dictionaries], headers=["Id", "Name"])
        return True

    def reset(self, args: ArgumentQueue) -> bool:
        user = args.peek()
        if user is None:
            print_line("No username specified.")
            return False
        rsp, key = self.device.dict_reset(user)
        self.session.authenticated = rsp == RSP_SUCCESS
        if rsp == RSP_SUCCESS:
            print_line(f"User: {user}")
            if key is not None:
                print_line(f"AuthKey: {format_auth_key(key)}")
        else:
            print_line(response_to_string(rsp))
        return True

    def auth(self, args: ArgumentQueue) -> bool:
        user = args.peek()
        if user is None:
            print_line("No username specified.")
            return False
        args.dequeue()

        key: Optional[bytes] = None
        key_text = args.peek()
        if key_text is not None:
            try:
                key = parse_auth_key(key_text)
            except InvalidAuthKeyCharacter:
                print_line("Invalid character in authkey.")
                return False
            except AuthKeyLengthError:
                print_line("Authkey wrong length. Must be 20 bytes.")
                return False

        rsp = self.device.dict_auth(user, key)
        logger.debug("dict auth %s (key=%s) -> 0x%02x", user, key is not None, rsp)
        self.session.authenticated = rsp == RSP_SUCCESS
        if rsp == RSP_SUCCESS:
            print_line("Authentication successful.")
        else:
            print_line("Authentication failed.")
        return True

    def _secured(self, name: str) -> Callable[[ArgumentQueue], bool]:
        """Build the decrypt/remove/install runner: id and authentication checks first."""
        operation: Callable[[str, str], int] = getattr(self.device, f"dict_{name}")

        def run(args: ArgumentQueue) -> bool:
            dict_id = args.peek()
            if dict_id is None:
                print_line("No id specified.")
                return False
            if len(dict_id) != DICT_ID_LENGTH:
                print_line(f"Id must be {DICT_ID_LENGTH} characters long.")
                return False
            if not self.session.authenticated:
                print_line("Not authenticated.")
                return False
            rsp = operation(self.root, dict_id)
            logger.debug("dict %s %s -> 0x%02x", name, dict_id, rsp)
            print_line(response_to_string(rsp))
            return True

        return run


def run_dict(session: Session, args: ArgumentQueue) -> None:
    """Entry point used by the ``dict`` command."""
    if session.mode is not Mode.LIBRARY:
        print_line("Only available in library mode.")
        return
    DictionaryWorkflow(session).run(args)
