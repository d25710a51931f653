#!/usr/bin/env python3
# exword/plugins/shell.py
from __future__ import annotations

"""Shell control commands."""

from exword.commands import REGISTRY, command
from exword.interface.handler import format_command_help, format_command_list
from exword.interface.parser import ArgumentQueue
from exword.session import Session
from exword.ui import print_line

from .device import disconnect


@command(
    name="exit",
    usage="exit",
    help_short="exits program",
    help_long="Exits program and disconnects from device.\n",
)
def exit_shell(session: Session, args: ArgumentQueue) -> None:
    session.running = False
    disconnect(session, args)


@command(name="help", usage="help [command]")
def show_help(session: Session, args: ArgumentQueue) -> None:
    name = args.peek()
    if name is None:
        print_line(format_command_list(REGISTRY))
    else:
        print_line(format_command_help(name, REGISTRY))
