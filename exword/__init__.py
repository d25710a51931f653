#!/usr/bin/env python3
# exword/__init__.py
from __future__ import annotations
"""
exword: interactive shell for CASIO EX-word style dictionaries.

Avoid eager imports here; subpackages expose their APIs through their own
__init__.py files.
"""

__version__ = "0.3.0"
