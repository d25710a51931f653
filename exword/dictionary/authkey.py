#!/usr/bin/env python3
# exword/dictionary/authkey.py
from __future__ import annotations

"""Add-on dictionary authentication keys: ``0x`` + 40 hex digits <-> 20 bytes."""

import string

AUTH_KEY_BYTES = 20
AUTH_KEY_DIGITS = AUTH_KEY_BYTES * 2
_PREFIX = "0x"
_HEX_DIGITS = frozenset(string.hexdigits)


class AuthKeyError(ValueError):
    """Raised for an auth key that cannot be decoded."""


class InvalidAuthKeyCharacter(AuthKeyError):
    pass


class AuthKeyLengthError(AuthKeyError):
    pass


def validate_auth_key(text: str) -> str:
    """Return the hex digits of `text` after checking prefix, alphabet and length."""
    if not text.startswith(_PREFIX):
        raise InvalidAuthKeyCharacter(f"auth key must start with {_PREFIX!r}")
    digits = text[len(_PREFIX):]
    bad = [ch for ch in digits if ch not in _HEX_DIGITS]
    if bad:
        raise InvalidAuthKeyCharacter(f"invalid character {bad[0]!r} in auth key")
    if len(digits) != AUTH_KEY_DIGITS:
        raise AuthKeyLengthError(
            f"auth key has {len(digits)} digits, expected {AUTH_KEY_DIGITS}")
    return digits


def parse_auth_key(text: str) -> bytes:
    """Decode ``0x`` + 40 hex digits into 20 bytes, high nibble first."""
    return bytes.fromhex(validate_auth_key(text))


def format_auth_key(key: bytes) -> str:
    return _PREFIX + key.hex()
