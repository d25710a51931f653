#!/usr/bin/env python3
# exword/plugins/device.py
from __future__ import annotations

"""Connection lifecycle and device information commands."""

import logging
from typing import Optional

from exword.commands import command, words
from exword.device import Capability, Locale, Mode, OpenOptions, RSP_SUCCESS, response_to_string
from exword.interface.parser import ArgumentQueue
from exword.session import DEVICE_ROOT, INTERNAL_MEM, SD_MARKER, Session, change_path
from exword.ui import print_line

logger = logging.getLogger(__name__)

_MODES = {mode.value: mode for mode in Mode}
_LOCALES = {locale.value: locale for locale in Locale}


def require_connection(session: Session) -> bool:
    """Report and return False when no device is connected."""
    if not session.connected:
        print_line("Not connected.")
        return False
    return True


def _parse_open_options(args: ArgumentQueue) -> Optional[OpenOptions]:
    mode_name = args.peek()
    if mode_name is None:
        return OpenOptions()
    mode = _MODES.get(mode_name)
    if mode is None:
        print_line(f"Unknown 'type': {mode_name}")
        return None
    args.dequeue()

    locale_name = args.peek()
    if locale_name is None:
        return OpenOptions(mode=mode)
    locale = _LOCALES.get(locale_name)
    if locale is None:
        print_line(f"Unknown 'locale': {locale_name}")
        return None
    return OpenOptions(mode=mode, locale=locale)


def _probe_sd_card(session: Session) -> bool:
    device = session.require_device()
    if device.setpath(DEVICE_ROOT, False) != RSP_SUCCESS:
        return False
    rsp, entries = device.list()
    if rsp != RSP_SUCCESS:
        return False
    return any(entry.name == SD_MARKER for entry in entries)


@command(
    usage="connect [mode] [locale]",
    help_short="connect to attached dictionary",
    help_long=(
        "Connects to device.\n\n"
        "Locale specifies the region of the device (default: ja).\n"
        "One of: ja, kr, cn, de, es, fr, ru.\n"
        "Mode can be one of the following values:\n"
        "library - connect as CASIO Library (default)\n"
        "text    - connect as Textloader\n"
        "cd      - connect as CDLoader\n"
    ),
    completers={"pos0": words(*_MODES), "pos1": words(*_LOCALES)},
)
def connect(session: Session, args: ArgumentQueue) -> None:
    if session.connected:
        return
    options = _parse_open_options(args)
    if options is None:
        return

    print_line("connecting to device...", end="")
    device = session.opener(options)
    if device is None:
        print_line("device not found")
        return

    device.set_debug(session.debug_level)
    rsp = device.connect()
    if rsp != RSP_SUCCESS:
        logger.debug("connect handshake -> 0x%02x", rsp)
        print_line("connect failed")
        device.close()
        return

    session.device = device
    session.authenticated = False
    session.sd_present = _probe_sd_card(session)
    change_path(session, INTERNAL_MEM, "/", True)
    session.connected = True
    session.mode = options.mode
    session.locale = options.locale
    logger.info("connected (%s, %s, sd=%s)", options.mode.value,
                options.locale.value, session.sd_present)
    print_line("done")


@command(
    usage="disconnect",
    help_short="disconnect from dictionary",
    help_long="Disconnects from device.\n",
)
def disconnect(session: Session, args: ArgumentQueue) -> None:
    if not session.connected:
        return
    print_line("disconnecting...", end="")
    device = session.require_device()
    device.disconnect()
    device.close()
    session.reset_connection()
    print_line("done")


@command(
    usage="model",
    help_short="display model information",
    help_long="Displays model information of device.\n",
)
def model(session: Session, args: ArgumentQueue) -> None:
    if not require_connection(session):
        return
    rsp, info = session.require_device().get_model()
    if rsp != RSP_SUCCESS or info is None:
        print_line(response_to_string(rsp))
        return
    print_line(f"Model: {info.model}")
    print_line(f"Sub: {info.sub_model}")
    if info.capabilities & Capability.EXT:
        print_line(f"Extended: {info.ext_model}")
    flags = [flag.name for flag in (Capability.SW, Capability.P, Capability.F, Capability.C)
             if info.capabilities & flag]
    if flags:
        print_line(f"Capabilities: {' '.join(flags)}")


@command(
    usage="capacity",
    help_short="display medium capacity",
    help_long="Displays capacity of current storage medium.\n",
)
def capacity(session: Session, args: ArgumentQueue) -> None:
    if not require_connection(session):
        return
    rsp, cap = session.require_device().get_capacity()
    if rsp != RSP_SUCCESS or cap is None:
        print_line(response_to_string(rsp))
        return
    print_line(f"Capacity: {cap.total} / {cap.free}")


@command(
    name="format",
    usage="format",
    help_short="format SD card",
    help_long="Formats currently inserted SD Card.\n",
)
def format_sd(session: Session, args: ArgumentQueue) -> None:
    if not require_connection(session):
        return
    print_line("Formatting SD Card...", end="")
    rsp = session.require_device().sd_format()
    print_line(response_to_string(rsp))
