#!/usr/bin/env python3
# exword/commands/commands.py
from __future__ import annotations

"""
Command registry and decorator utilities.

This module provides:
- CommandRegistry: ordered, exact-match registry of commands.
- command: decorator to register functions as commands with help texts.
"""

import inspect
from typing import Callable, Mapping, Optional

from .command_types import Command, CommandCallback, Completer


class CommandRegistry:
    """Holds all command definitions in registration order."""

    def __init__(self) -> None:
        self._commands_by_name: dict[str, Command] = {}

    def register(self, command_obj: Command) -> None:
        """Register a command, rejecting duplicate names."""
        if command_obj.name in self._commands_by_name:
            raise ValueError(
                f"Command '{command_obj.name}' already registered.")
        self._commands_by_name[command_obj.name] = command_obj

    def get(self, name: str) -> Optional[Command]:
        """Exact, case-sensitive lookup."""
        return self._commands_by_name.get(name)

    def all(self) -> list[Command]:
        """Commands in registration order."""
        return list(self._commands_by_name.values())

    def names(self) -> list[str]:
        return list(self._commands_by_name)

    def __len__(self) -> int:
        return len(self._commands_by_name)


# Global registry used across the app
REGISTRY = CommandRegistry()


def command(
    *,
    name: str | None = None,
    usage: str | None = None,
    help_short: str | None = None,
    help_long: str | None = None,
    completers: Mapping[str, Completer] | None = None,
    registry: CommandRegistry | None = None,
) -> Callable[[CommandCallback], CommandCallback]:
    """
    Decorator to register a function as a shell command.

    - `name` defaults to the function name.
    - `help_long` defaults to the function docstring.
    """

    def wrapper(func: CommandCallback) -> CommandCallback:
        command_name = name or func.__name__  # type: ignore[attr-defined]
        command_obj = Command(
            name=command_name,
            callback=func,
            usage=usage or command_name,
            help_short=help_short,
            help_long=help_long if help_long is not None else (inspect.getdoc(func) or None),
            completers=completers or {},
            module=func.__module__,
        )
        (registry if registry is not None else REGISTRY).register(command_obj)
        return func

    return wrapper
