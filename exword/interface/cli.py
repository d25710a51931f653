#!/usr/bin/env python3
# exword/interface/cli.py
from __future__ import annotations

"""
Interactive input frontends.

Selection order:
    1) prompt_toolkit (completion + persistent history) on a terminal
    2) plain line reader for pipes and scripts (same persistent history file)
"""

import sys
from pathlib import Path
from typing import Optional, TextIO

from prompt_toolkit.history import FileHistory, InMemoryHistory

from exword.commands import REGISTRY, CommandRegistry

from .completion import split_current_token, suggest


class BaseCLI:
    """
    Base interface for CLI frontends.

    Subclasses implement get_line(); remember() records a line in history
    when the frontend does not do so by itself. Context manager support
    guarantees setup/teardown around the shell loop.
    """

    def __init__(self, history_path: Path) -> None:
        self.history_path = Path(history_path)
        self._history: Optional[FileHistory] = None

    @property
    def history(self) -> FileHistory:
        if self._history is None:
            self._history = FileHistory(str(self.history_path))
        return self._history

    def setup(self) -> None:
        self.history_path.parent.mkdir(parents=True, exist_ok=True)
        self.history_path.touch(exist_ok=True)

    def get_line(self, prompt_text: str) -> Optional[str]:  # pragma: no cover - interface
        """Return the next line, or None at end of input."""
        raise NotImplementedError

    def remember(self, line: str) -> None:
        self.history.append_string(line)

    def teardown(self) -> None:
        # FileHistory writes each entry as it is appended
        pass

    # Context manager helpers
    def __enter__(self) -> "BaseCLI":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.teardown()


# ===== Preferred: prompt_toolkit =====
class PromptToolkitCLI(BaseCLI):
    """Line editor with history recall and live completion."""

    def __init__(self, history_path: Path, *, registry: CommandRegistry | None = None,
                 enable_completion: bool = True) -> None:
        super().__init__(history_path)
        from prompt_toolkit import prompt
        from prompt_toolkit.completion import Completer, Completion

        self._prompt = prompt
        self._registry = registry if registry is not None else REGISTRY
        registry_ref = self._registry

        class _Completer(Completer):
            def get_completions(self, document, complete_event):
                text_before_cursor = document.text_before_cursor
                _, current_prefix = split_current_token(text_before_cursor)
                replace_len = len(current_prefix)
                for word in suggest(text_before_cursor, registry_ref):
                    yield Completion(word, start_position=-replace_len)

        self._completer = _Completer() if enable_completion else None
        self.session_history = InMemoryHistory()

    def setup(self) -> None:
        super().setup()
        # recall starts from the persisted lines; only remember() writes the file
        self.session_history = InMemoryHistory()
        for line in reversed(list(self.history.load_history_strings())):
            self.session_history.append_string(line)

    def get_line(self, prompt_text: str) -> Optional[str]:
        try:
            return self._prompt(
                prompt_text,
                history=self.session_history,
                completer=self._completer,
                complete_while_typing=False,
            )
        except (EOFError, KeyboardInterrupt):
            return None


# ===== Fallback: plain stream =====
class StreamCLI(BaseCLI):
    """Reads lines from a stream (stdin by default), echoing nothing."""

    def __init__(self, history_path: Path, stream: TextIO | None = None,
                 output: TextIO | None = None) -> None:
        super().__init__(history_path)
        self._stream = stream
        self._output = output

    def get_line(self, prompt_text: str) -> Optional[str]:
        stream = self._stream if self._stream is not None else sys.stdin
        output = self._output if self._output is not None else sys.stdout
        output.write(prompt_text)
        output.flush()
        try:
            line = stream.readline()
        except KeyboardInterrupt:
            return None
        if not line:
            return None
        return line.rstrip("\r\n")


def make_cli(history_path: Path, *, registry: CommandRegistry | None = None,
             enable_completion: bool = True) -> BaseCLI:
    """
    Factory to select the best CLI frontend for the current stdin.
    """
    if sys.stdin.isatty() and sys.stdout.isatty():
        return PromptToolkitCLI(history_path, registry=registry,
                                enable_completion=enable_completion)
    return StreamCLI(history_path)
