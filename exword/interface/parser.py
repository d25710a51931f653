#!/usr/bin/env python3
# exword/interface/parser.py
from __future__ import annotations

"""
Input tokenizing.

Responsibilities:
- Split a command line into whitespace-separated tokens (space/tab, no quoting).
- Hold the tokens of one line in an `ArgumentQueue` that handlers consume
  left to right.
"""

import re
from collections import deque
from typing import Iterable, Iterator, Optional

_WHITESPACE = re.compile(r"[ \t]+")


def tokenize(command_line: str) -> list[str]:
    """Split a raw command line on runs of spaces and tabs."""
    return [token for token in _WHITESPACE.split(command_line.strip(" \t\r\n")) if token]


class ArgumentQueue:
    """
    FIFO of the tokens of one input line.

    Handlers read with `peek()` and consume with `dequeue()`; tokens left over
    when a command finishes are ignored.
    """

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Iterable[str] = ()) -> None:
        self._tokens: deque[str] = deque(tokens)

    @classmethod
    def from_line(cls, command_line: str) -> "ArgumentQueue":
        return cls(tokenize(command_line))

    def peek(self) -> Optional[str]:
        """Return the first token, or None when the queue is empty."""
        return self._tokens[0] if self._tokens else None

    def dequeue(self) -> None:
        """Drop the first token (no-op on an empty queue)."""
        if self._tokens:
            self._tokens.popleft()

    def clear(self) -> None:
        self._tokens.clear()

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._tokens))

    def __repr__(self) -> str:
        return f"ArgumentQueue({list(self._tokens)!r})"
