#!/usr/bin/env python3
# exword/interface/shell.py
from __future__ import annotations

"""Read-tokenize-dispatch loop."""

import logging
from typing import Optional

from exword.commands import CommandRegistry
from exword.session import Session
from exword.ui import print_line

from .cli import BaseCLI
from .handler import HELP_TEXT, handle_line

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"
BANNER = "Exword dictionary tool."


def make_prompt(session: Session) -> str:
    if session.current_path is None:
        return ">> "
    return f"{session.current_path} >> "


class Shell:
    """Drives one interactive session until ``exit``."""

    def __init__(self, session: Session, cli: BaseCLI, *,
                 registry: Optional[CommandRegistry] = None, show_banner: bool = True) -> None:
        self.session = session
        self.cli = cli
        self.registry = registry
        self.show_banner = show_banner

    def step(self) -> None:
        """
        Read and run one line.

        End of input is recorded and run as a literal ``exit``. An interrupt
        while a command runs also ends the session through ``exit``, so the
        device is disconnected and closed.
        """
        line = self.cli.get_line(make_prompt(self.session))
        if line is None:
            logger.debug("end of input")
            line = EXIT_COMMAND
        if not line.strip(" \t"):
            return
        self.cli.remember(line)
        try:
            handle_line(self.session, line, self.registry)
        except KeyboardInterrupt:
            logger.debug("interrupted: %s", line)
            print_line()
            handle_line(self.session, EXIT_COMMAND, self.registry)

    def run(self) -> int:
        if self.show_banner:
            print_line(BANNER)
            print_line(HELP_TEXT)
        self.session.running = True
        with self.cli:
            while self.session.running:
                self.step()
        return 0
