#!/usr/bin/env python3
# exword/config/__init__.py
from __future__ import annotations

"""Configuration loader with file and environment overrides."""

from .config import CONFIG_FILES, ENV_PREFIX, FIELDS, AppConfig, load_config

__all__ = ["CONFIG_FILES", "ENV_PREFIX", "FIELDS", "AppConfig", "load_config"]
