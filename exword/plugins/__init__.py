#!/usr/bin/env python3
# exword/plugins/__init__.py
"""Built-in shell commands, loaded in order by `exword.interface.loader`."""
