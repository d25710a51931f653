#!/usr/bin/env python3
# exword/boot/boot.py
from __future__ import annotations
"""
Startup sequence for the exword shell.

Steps: configuration, logging, data directory and history file, command
modules, device backend, session. With VERBOSE_BOOT each step prints a
``[  OK  ]`` / ``[FAILED]`` status line.
"""

import logging
import sys
from dataclasses import dataclass
from typing import Any, Callable

from exword.commands import REGISTRY
from exword.config import AppConfig, load_config
from exword.device import load_opener
from exword.interface import BaseCLI, load_commands, make_cli
from exword.session import Session
from exword.ui import colorize, init_logger, print_line, supports_ansi


@dataclass(slots=True)
class BootState:
    config: AppConfig
    logger: logging.Logger
    session: Session
    cli: BaseCLI
    loaded_count: int


def _status(text: str, style: str) -> None:
    print_line(colorize(text, style) if supports_ansi(sys.stdout) else text)


def _step(label: str, fn: Callable[[], Any], *, verbose: bool) -> Any:
    """Run a boot step; failures are always reported, successes only when verbose."""
    try:
        out = fn()
    except Exception as exc:
        _status(f"[FAILED] {label} ({type(exc).__name__}: {exc})", "red")
        raise
    if verbose:
        _status(f"[  OK  ] {label}", "green")
    return out


def boot_sequence(config: AppConfig | None = None) -> BootState:
    # ---------- config ----------
    if config is None:
        config = _step("Load configuration", load_config, verbose=False)
    verbose = config.verbose_boot
    if verbose:
        _status("[  OK  ] Load configuration", "green")

    # ---------- logging ----------
    logger = _step(
        "Initialize logger",
        lambda: init_logger("exword", level=config.log_level,
                            logfile=config.log_file_path),
        verbose=verbose,
    )

    # ---------- data directory ----------
    def _prepare_history():
        config.history_file_path.parent.mkdir(parents=True, exist_ok=True)
        config.history_file_path.touch(exist_ok=True)
        return config.history_file_path

    _step("Prepare history file", _prepare_history, verbose=verbose)

    # ---------- commands ----------
    loaded_count = _step("Load command definitions", load_commands, verbose=verbose)
    logger.debug("%d commands registered", loaded_count)
    for command_obj in REGISTRY.all():
        logger.debug("  %s (%s)", command_obj.name, command_obj.module)

    # ---------- device ----------
    opener = _step(
        f"Resolve device backend '{config.device_backend}'",
        lambda: load_opener(config.device_backend),
        verbose=verbose,
    )
    session = Session(
        opener=opener,
        debug_level=config.debug_level,
        auto_mkdir=config.auto_mkdir,
    )

    cli = _step(
        "Select line editor",
        lambda: make_cli(config.history_file_path,
                         enable_completion=config.enable_completion),
        verbose=verbose,
    )
    if verbose:
        _step("Boot complete", lambda: None, verbose=verbose)

    return BootState(
        config=config,
        logger=logger,
        session=session,
        cli=cli,
        loaded_count=loaded_count,
    )
