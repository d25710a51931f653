#!/usr/bin/env python3
# exword/plugins/options.py
from __future__ import annotations

"""Program options (``set``)."""

from typing import Sequence

from exword.commands import command
from exword.interface.parser import ArgumentQueue
from exword.session import MAX_DEBUG_LEVEL, Session
from exword.ui import print_line

OPTIONS: tuple[str, ...] = ("debug", "mkdir")
_TRUE_WORDS = ("on", "yes", "true")
_FALSE_WORDS = ("off", "no", "false")


def _option_values(text: str, argv: Sequence[str]) -> list[str]:
    option = argv[0] if argv else ""
    if option == "debug":
        candidates = [str(level) for level in range(MAX_DEBUG_LEVEL + 1)]
    elif option == "mkdir":
        candidates = ["on", "off"]
    else:
        candidates = []
    return [word for word in candidates if word.startswith(text)]


def _set_debug(session: Session, value: str | None) -> None:
    if value is None:
        print_line(f"Debug Level: {session.debug_level}")
        return
    if not value.isdecimal():
        print_line("Invalid value")
        return
    level = int(value)
    if level > MAX_DEBUG_LEVEL:
        print_line(f"Value should be between 0 and {MAX_DEBUG_LEVEL}")
        return
    session.debug_level = level
    if session.connected:
        session.require_device().set_debug(level)


def _set_mkdir(session: Session, value: str | None) -> None:
    if value is None:
        print_line(f"Mkdir: {'on' if session.auto_mkdir else 'off'}")
    elif value in _TRUE_WORDS:
        session.auto_mkdir = True
    elif value in _FALSE_WORDS:
        session.auto_mkdir = False
    else:
        print_line("Invalid value")


@command(
    name="set",
    usage="set <option> [value]",
    help_short="sets program options",
    help_long=(
        "Sets <option> to [value], if no value is specified will display current value.\n\n"
        "Available options:\n"
        f"debug <level>  - sets debug level (0-{MAX_DEBUG_LEVEL})\n"
        "mkdir <on|off> - specifies whether setpath should create directories\n"
    ),
    completers={"pos0": lambda text, argv: [o for o in OPTIONS if o.startswith(text)],
                "pos1": _option_values},
)
def set_option(session: Session, args: ArgumentQueue) -> None:
    option = args.peek()
    if option is None:
        print_line("No option specified")
        return
    args.dequeue()
    if option == "debug":
        _set_debug(session, args.peek())
    elif option == "mkdir":
        _set_mkdir(session, args.peek())
    else:
        print_line(f"Unknown option {option}")
