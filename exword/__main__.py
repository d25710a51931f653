#!/usr/bin/env python3
# exword/__main__.py
from __future__ import annotations

"""Console entry point: ``exword`` / ``python -m exword``."""

import sys

from exword.boot import boot_sequence
from exword.interface import Shell


def main() -> int:
    state = boot_sequence()
    shell = Shell(state.session, state.cli, show_banner=state.config.show_banner)
    return shell.run()


if __name__ == "__main__":
    sys.exit(main())
