#!/usr/bin/env python3
# exword/device/responses.py
from __future__ import annotations

"""Response codes returned by every device boundary call."""

RSP_SUCCESS = 0x20
RSP_UNKNOWN_COMMAND = 0x40
RSP_UNKNOWN_ERROR = 0x41
RSP_FORBIDDEN = 0x42
RSP_INVALID_PARAMETER = 0x43
RSP_NOT_FOUND = 0x44
RSP_ALREADY_EXISTS = 0x45
RSP_NO_MEDIUM = 0x46
RSP_STORAGE_FULL = 0x47
RSP_NOT_READY = 0x48

_RESPONSE_TEXT: dict[int, str] = {
    RSP_SUCCESS: "OK",
    RSP_UNKNOWN_COMMAND: "Unknown command",
    RSP_UNKNOWN_ERROR: "Unknown error",
    RSP_FORBIDDEN: "Forbidden",
    RSP_INVALID_PARAMETER: "Invalid parameter",
    RSP_NOT_FOUND: "Not found",
    RSP_ALREADY_EXISTS: "Already exists",
    RSP_NO_MEDIUM: "No storage medium",
    RSP_STORAGE_FULL: "Storage full",
    RSP_NOT_READY: "Device not ready",
}


def response_to_string(code: int) -> str:
    """Human-readable text for a response code."""
    return _RESPONSE_TEXT.get(code, f"Unknown response (0x{code:02x})")
