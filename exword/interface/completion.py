#!/usr/bin/env python3
# exword/interface/completion.py
from __future__ import annotations

"""
Command line completion utilities.

Token-aware suggestions for:
- First token: every registered command name.
- 'help <partial>': command names.
- Subsequent tokens: per-command positional providers ('pos0', 'pos1', ...).
"""

from exword.commands import REGISTRY, CommandRegistry

from .parser import tokenize


def split_current_token(raw_input: str) -> tuple[list[str], str]:
    """
    Return (parts, current_prefix).

    Trailing whitespace starts a new, empty token.
    """
    if not raw_input:
        return [], ""
    parts = tokenize(raw_input)
    if raw_input[-1] in " \t":
        parts.append("")
    current_prefix = parts[-1] if parts else ""
    return parts, current_prefix


def suggest(text_before_cursor: str, registry: CommandRegistry | None = None) -> list[str]:
    """Produce suggestions for the current buffer content."""
    registry = registry if registry is not None else REGISTRY
    parts, current_prefix = split_current_token(text_before_cursor.lstrip(" \t"))

    if len(parts) <= 1:
        return [name for name in registry.names() if name.startswith(current_prefix)]

    command_name, *argument_tokens = parts
    if command_name == "help":
        if len(argument_tokens) > 1:
            return []
        return [name for name in registry.names() if name.startswith(current_prefix)]

    command_obj = registry.get(command_name)
    if command_obj is None:
        return []

    position_index = len(argument_tokens) - 1
    provider = command_obj.completers.get(f"pos{position_index}")
    if provider is None:
        return []
    return list(provider(current_prefix, argument_tokens))
