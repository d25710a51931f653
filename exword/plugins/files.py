#!/usr/bin/env python3
# exword/plugins/files.py
from __future__ import annotations

"""File transfer and navigation commands for the current device path."""

import logging
from pathlib import Path

from exword.commands import command, words
from exword.device import RSP_SUCCESS, response_to_string
from exword.interface.parser import ArgumentQueue
from exword.session import SCHEMES, Session, change_path, parse_location
from exword.ui import print_line

from .device import require_connection

logger = logging.getLogger(__name__)


@command(
    name="list",
    usage="list",
    help_short="list files",
    help_long=(
        "Lists files and directories under current path.\n\n"
        "Directories are enclosed in <>.\n"
        "Files or directories beginning with * were returned as unicode.\n"
    ),
)
def list_files(session: Session, args: ArgumentQueue) -> None:
    if not require_connection(session):
        return
    rsp, entries = session.require_device().list()
    if rsp == RSP_SUCCESS:
        for entry in entries:
            name = f"*{entry.name}" if entry.is_unicode else entry.name
            print_line(f"<{name}>" if entry.is_directory else name)
    print_line(response_to_string(rsp))


@command(
    usage="delete <filename>",
    help_short="delete a file",
    help_long=(
        "Deletes a file from dictionary.\n\n"
        "A leading * marks a name stored as unicode (as shown by list).\n"
    ),
)
def delete(session: Session, args: ArgumentQueue) -> None:
    if not require_connection(session):
        return
    filename = args.peek()
    if filename is None:
        print_line("No file specified")
        return
    print_line("deleting file...", end="")
    is_unicode = filename.startswith("*")
    name = filename[1:] if is_unicode else filename
    rsp = session.require_device().remove_file(name, is_unicode)
    print_line(response_to_string(rsp))


@command(
    usage="send <filename>",
    help_short="upload a file",
    help_long="Uploads a file to dictionary.\n",
)
def send(session: Session, args: ArgumentQueue) -> None:
    if not require_connection(session):
        return
    filename = args.peek()
    if filename is None:
        print_line("No file specified")
        return
    local_path = Path(filename)
    print_line("uploading...", end="")
    try:
        data = local_path.read_bytes()
    except OSError as exc:
        logger.debug("cannot read %s", local_path, exc_info=True)
        print_line(f"cannot read {filename}: {exc.strerror or exc}")
        return
    rsp = session.require_device().send_file(local_path.name, data)
    print_line(response_to_string(rsp))


@command(
    usage="get <filename>",
    help_short="download a file",
    help_long="Downloads a file from dictionary.\n",
)
def get(session: Session, args: ArgumentQueue) -> None:
    if not require_connection(session):
        return
    filename = args.peek()
    if filename is None:
        print_line("No file specified")
        return
    local_path = Path(filename)
    print_line("downloading...", end="")
    rsp, data = session.require_device().get_file(local_path.name)
    if rsp == RSP_SUCCESS:
        try:
            local_path.write_bytes(data)
        except OSError as exc:
            logger.debug("cannot write %s", local_path, exc_info=True)
            print_line(f"cannot write {filename}: {exc.strerror or exc}")
            return
    print_line(response_to_string(rsp))


@command(
    usage="setpath <path>",
    help_short="changes directory on dictionary",
    help_long=(
        "Changes to the specified path.\n\n"
        "<path> is in the form of (sd|mem)://<path>\n"
        "Example: mem:/// - sets path to root of internal memory\n"
    ),
    completers={"pos0": words("sd://", "mem://")},
)
def setpath(session: Session, args: ArgumentQueue) -> None:
    if not require_connection(session):
        return
    location = args.peek()
    if location is None:
        print_line("No path specified")
        return
    parsed = parse_location(location)
    if parsed is None:
        print_line("Invalid argument. Format (sd|mem)://<path>")
        return
    scheme, path = parsed
    if scheme == "sd" and not session.sd_present:
        print_line("SD card not inserted.")
        return

    rsp = change_path(session, SCHEMES[scheme], path, session.auto_mkdir)
    if rsp != RSP_SUCCESS:
        print_line(response_to_string(rsp))
        # keep the device where the session believes it is
        if session.current_path is not None:
            session.require_device().setpath(session.current_path, False)
