#!/usr/bin/env python3
# exword/plugins/dictionary.py
from __future__ import annotations

"""Add-on dictionary command."""

from exword.commands import command, words
from exword.dictionary import SUBFUNCTIONS, run_dict
from exword.interface.parser import ArgumentQueue
from exword.session import Session

from .device import require_connection


@command(
    name="dict",
    usage="dict <sub-function>",
    help_short="add-on dictionary commands",
    help_long=(
        "This command allows manipulation of add-on dictionaries. It uses\n"
        "the storage medium of your current path as the storage device to\n"
        "operate on. The reset sub-function WILL delete all installed\n"
        "dictionaries.\n\n"
        "Sub functions:\n"
        "reset <user>      - resets authentication info\n"
        "auth <user> [key] - authenticate to dictionary (key: 0x + 40 hex digits)\n"
        "list              - list installed add-on dictionaries\n"
        "decrypt <id>      - decrypts specified add-on dictionary\n"
        "remove <id>       - removes specified add-on dictionary\n"
        "install <id>      - installs specified add-on dictionary\n"
    ),
    completers={"pos0": words(*SUBFUNCTIONS)},
)
def dict_command(session: Session, args: ArgumentQueue) -> None:
    if not require_connection(session):
        return
    run_dict(session, args)
