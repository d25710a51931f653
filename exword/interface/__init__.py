#!/usr/bin/env python3
# exword/interface/__init__.py
from __future__ import annotations

"""
Package for the interactive console interface and command dispatch.

Provides:
- Tokenizer and per-line argument queue.
- Command dispatcher and help formatting.
- Token-aware completion helpers.
- CLI frontends with persistent history (prompt_toolkit / plain stream).
- The shell loop.
- Loader for the built-in command modules.
"""

from .parser import ArgumentQueue, tokenize
from .handler import HELP_TEXT, dispatch, format_command_help, format_command_list, handle_line
from .completion import split_current_token, suggest
from .cli import BaseCLI, PromptToolkitCLI, StreamCLI, make_cli
from .shell import Shell, make_prompt
from .loader import load_commands

__all__ = [
    # parser
    "ArgumentQueue",
    "tokenize",
    # handler
    "HELP_TEXT",
    "dispatch",
    "format_command_help",
    "format_command_list",
    "handle_line",
    # completion
    "split_current_token",
    "suggest",
    # cli
    "BaseCLI",
    "PromptToolkitCLI",
    "StreamCLI",
    "make_cli",
    # shell
    "Shell",
    "make_prompt",
    # loader
    "load_commands",
]
