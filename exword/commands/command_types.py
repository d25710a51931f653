#!/usr/bin/env python3
# exword/commands/command_types.py
from __future__ import annotations

"""
Command data structures and protocols.

This module defines:
- CommandCallback: the callable protocol for any command implementation.
- Command: a registered command with its help texts and completers.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Mapping, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from exword.interface.parser import ArgumentQueue
    from exword.session import Session


class CommandCallback(Protocol):
    """A handler receives the session and the remaining argument tokens."""

    def __call__(self, session: "Session", args: "ArgumentQueue") -> None:  # pragma: no cover - signature only
        ...


# Completion provider: (text, argv) -> candidate words
Completer = Callable[[str, Sequence[str]], Sequence[str]]


@dataclass(frozen=True, slots=True)
class Command:
    """
    A registered command.

    Important fields:
        name: Exact (case-sensitive) dispatch name.
        callback: Function implementing the command.
        usage: Argument synopsis shown in the help listing.
        help_short: One-line summary for ``help`` (None hides the command).
        help_long: Detailed text for ``help <name>``.
        completers: Positional completion providers keyed 'pos0', 'pos1', ...
        module: Python module path where the command is defined.
    """

    name: str
    callback: CommandCallback
    usage: str = ""
    help_short: Optional[str] = None
    help_long: Optional[str] = None
    completers: Mapping[str, Completer] = field(default_factory=dict)
    module: str = field(default="", repr=False)

    def invoke(self, session: "Session", args: "ArgumentQueue") -> None:
        """Execute the underlying command callback."""
        self.callback(session, args)


def words(*candidates: str) -> Completer:
    """Completer offering a fixed word list filtered by prefix."""

    def provider(text: str, argv: Sequence[str]) -> list[str]:
        return [word for word in candidates if word.startswith(text)]

    return provider
