#!/usr/bin/env python3
# exword/interface/handler.py
from __future__ import annotations

"""
Command dispatch and help formatting.

One input line becomes one `ArgumentQueue`; the first token names the
command, the rest is left in the queue for the handler.
"""

import difflib
import logging
from typing import Optional

from exword.commands import REGISTRY, CommandRegistry
from exword.session import Session
from exword.ui import format_table, print_line

from .parser import ArgumentQueue

logger = logging.getLogger(__name__)

# Short hint shown at startup
HELP_TEXT = "Type 'help' for a list of commands."


def _suggest_similar_names(name: str, registry: CommandRegistry) -> str:
    """Return a short suggestion string for misspelled commands."""
    matches = difflib.get_close_matches(name, registry.names(), n=3, cutoff=0.6)
    return f" Did you mean: {', '.join(matches)}?" if matches else ""


def format_command_list(registry: CommandRegistry = REGISTRY) -> str:
    """Short help of every command that has one, in registration order."""
    rows = [
        [command_obj.usage, f"- {command_obj.help_short}"]
        for command_obj in registry.all()
        if command_obj.help_short is not None
    ]
    return format_table(rows, border=False, padding=0, separator="  ")


def format_command_help(name: str, registry: CommandRegistry = REGISTRY) -> str:
    """Long help for `name`, or the reason there is none."""
    command_obj = registry.get(name)
    if command_obj is None:
        return f"{name} is not a command"
    if not command_obj.help_long:
        return f"No help available for {name}"
    return command_obj.help_long.rstrip("\n")


def dispatch(session: Session, args: ArgumentQueue, registry: Optional[CommandRegistry] = None) -> bool:
    """
    Run the command named by the first queued token.

    Returns True when a command was found and executed. Handler failures are
    logged and reported; they never stop the shell.
    """
    registry = registry if registry is not None else REGISTRY
    command_name = args.peek()
    if command_name is None:
        return False

    command_obj = registry.get(command_name)
    if command_obj is None:
        print_line(f"Unknown command: {command_name}.{_suggest_similar_names(command_name, registry)}")
        return False

    args.dequeue()
    logger.debug("dispatch %s %s", command_name, list(args))
    try:
        command_obj.invoke(session, args)
    except MemoryError:
        raise
    except Exception as exc:
        logger.error("command %s failed", command_name, exc_info=True)
        print_line(f"[error] {type(exc).__name__}: {exc}")
    return True


def handle_line(session: Session, input_line: str, registry: Optional[CommandRegistry] = None) -> bool:
    """Tokenize one line, dispatch it once, and discard the queue."""
    args = ArgumentQueue.from_line(input_line)
    try:
        return dispatch(session, args, registry)
    finally:
        args.clear()
