#!/usr/bin/env python3
# exword/dictionary/__init__.py
from __future__ import annotations

"""Add-on dictionary sub-protocol and authentication key codec."""

from .authkey import (
    AUTH_KEY_BYTES,
    AuthKeyError,
    AuthKeyLengthError,
    InvalidAuthKeyCharacter,
    format_auth_key,
    parse_auth_key,
    validate_auth_key,
)
from .workflow import (
    DICT_ID_LENGTH,
    INTERNAL_ROOT,
    SD_ROOT,
    SUBFUNCTIONS,
    DictionaryWorkflow,
    resolve_root,
    run_dict,
)

__all__ = [
    "AUTH_KEY_BYTES",
    "AuthKeyError",
    "AuthKeyLengthError",
    "InvalidAuthKeyCharacter",
    "format_auth_key",
    "parse_auth_key",
    "validate_auth_key",
    "DICT_ID_LENGTH",
    "INTERNAL_ROOT",
    "SD_ROOT",
    "SUBFUNCTIONS",
    "DictionaryWorkflow",
    "resolve_root",
    "run_dict",
]
