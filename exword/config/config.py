#!/usr/bin/env python3
# exword/config/config.py
from __future__ import annotations

"""
Layered configuration.

Sources, lowest priority first:
  1) built-in defaults
  2) files in the working directory, in order: .env, config.ini,
     config.json, config.toml (nested tables flatten to UPPER_SNAKE keys)
  3) environment variables prefixed with EXWORD_ (prefix stripped)

Loading has no filesystem side effects; boot creates the data directory.
"""

import configparser
import json
import os
import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Mapping

from exword.device.backend import DEFAULT_BACKEND
from exword.session import MAX_DEBUG_LEVEL

ENV_PREFIX = "EXWORD_"
HISTORY_FILE_NAME = ".exword_history"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class AppConfig:
    data_path: Path
    history_file_path: Path
    log_file_path: Path | None

    log_level: str
    debug_level: int
    auto_mkdir: bool
    device_backend: str

    show_banner: bool
    enable_completion: bool
    verbose_boot: bool

    # keys no field claims, kept for diagnostics
    extra: dict[str, Any] = field(default_factory=dict)


def default_data_path() -> Path:
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or Path.home() / "AppData" / "Local"
    else:
        base = os.environ.get("XDG_DATA_HOME") or Path.home() / ".local" / "share"
    return Path(base) / "exword"


# ---------- readers ----------

_DOTENV_LINE = re.compile(r"^(?:export\s+)?([A-Za-z_][A-Za-z0-9_]*)\s*=\s*(.*)$")


def _read_dotenv(path: Path) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        match = _DOTENV_LINE.match(line)
        if match is None:
            continue
        key, value = match.group(1), match.group(2).strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
            value = value[1:-1]
        values[key] = value
    return values


def _read_ini(path: Path) -> dict[str, Any]:
    parser = configparser.ConfigParser()
    parser.read(path, encoding="utf-8")
    # sections only group keys; they do not prefix them
    return {key: value for section in parser.sections()
            for key, value in parser.items(section)}


def _read_json(path: Path) -> dict[str, Any]:
    data = json.loads(path.read_text(encoding="utf-8"))
    return _flatten(data) if isinstance(data, dict) else {}


def _read_toml(path: Path) -> dict[str, Any]:
    with path.open("rb") as fh:
        return _flatten(tomllib.load(fh))


def _flatten(table: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    """{'log': {'level': 'DEBUG'}} -> {'LOG_LEVEL': 'DEBUG'}"""
    flat: dict[str, Any] = {}
    for key, value in table.items():
        name = f"{prefix}_{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            flat.update(_flatten(value, name))
        else:
            flat[name] = value
    return flat


CONFIG_FILES: dict[str, Callable[[Path], dict[str, Any]]] = {
    ".env": _read_dotenv,
    "config.ini": _read_ini,
    "config.json": _read_json,
    "config.toml": _read_toml,
}


def _read_file(path: Path, reader: Callable[[Path], dict[str, Any]]) -> dict[str, Any]:
    if not path.is_file():
        return {}
    try:
        values = reader(path)
    except (OSError, UnicodeDecodeError, configparser.Error,
            json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ValueError(f"Cannot read {path.name}: {exc}") from exc
    return {str(key).upper(): value for key, value in values.items()}


# ---------- coercion ----------

def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ("1", "true", "yes", "y", "on"):
        return True
    if text in ("0", "false", "no", "n", "off"):
        return False
    raise ValueError(f"Expected a boolean, got {value!r}")


def _to_debug_level(value: Any) -> int:
    try:
        level = value if isinstance(value, int) and not isinstance(value, bool) else int(str(value).strip())
    except ValueError as exc:
        raise ValueError(f"DEBUG_LEVEL must be an integer, got {value!r}") from exc
    if not 0 <= level <= MAX_DEBUG_LEVEL:
        raise ValueError(f"DEBUG_LEVEL must be between 0 and {MAX_DEBUG_LEVEL}, got {level}")
    return level


def _to_log_level(value: Any) -> str:
    level = str(value).strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
    return level


def _to_backend(value: Any) -> str:
    spec = str(value).strip()
    module_name, sep, attribute = spec.partition(":")
    if not (module_name and sep and attribute):
        raise ValueError(f"DEVICE_BACKEND must look like 'package.module:opener', got {value!r}")
    return spec


def _blank(value: Any) -> bool:
    return value is None or str(value).strip().lower() in ("", "none")


def _to_path(value: Any) -> Path:
    return Path(os.path.expandvars(os.path.expanduser(str(value)))).resolve()


def _to_optional_path(value: Any) -> Path | None:
    return None if _blank(value) else _to_path(value)


# key -> (AppConfig field, default, coercer)
FIELDS: dict[str, tuple[str, Any, Callable[[Any], Any]]] = {
    "DATA_PATH": ("data_path", None, _to_path),
    "HISTORY_FILE_PATH": ("history_file_path", None, _to_optional_path),
    "LOG_FILE_PATH": ("log_file_path", None, _to_optional_path),
    "LOG_LEVEL": ("log_level", "WARNING", _to_log_level),
    "DEBUG_LEVEL": ("debug_level", 0, _to_debug_level),
    "AUTO_MKDIR": ("auto_mkdir", False, _to_bool),
    "DEVICE_BACKEND": ("device_backend", DEFAULT_BACKEND, _to_backend),
    "SHOW_BANNER": ("show_banner", True, _to_bool),
    "ENABLE_COMPLETION": ("enable_completion", True, _to_bool),
    "VERBOSE_BOOT": ("verbose_boot", False, _to_bool),
}


def collect_sources(base: Path | None = None,
                    environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Raw key/value pairs after layering files and environment."""
    directory = base or Path.cwd()
    merged: dict[str, Any] = {}
    for name, reader in CONFIG_FILES.items():
        merged.update(_read_file(directory / name, reader))

    env = os.environ if environ is None else environ
    for key, value in env.items():
        if key.startswith(ENV_PREFIX) and len(key) > len(ENV_PREFIX):
            merged[key[len(ENV_PREFIX):].upper()] = value
    return merged


def build_config(raw: Mapping[str, Any]) -> AppConfig:
    values: dict[str, Any] = {}
    for key, (attr, default, coerce) in FIELDS.items():
        value = raw.get(key)
        if _blank(value):
            values[attr] = None if default is None else coerce(default)
        else:
            values[attr] = coerce(value)

    if values["data_path"] is None:
        values["data_path"] = default_data_path()
    if values["history_file_path"] is None:
        values["history_file_path"] = values["data_path"] / HISTORY_FILE_NAME

    extra = {key: value for key, value in raw.items() if key not in FIELDS}
    return AppConfig(**values, extra=extra)


def load_config(base: Path | None = None,
                environ: Mapping[str, str] | None = None) -> AppConfig:
    """Load and validate configuration; raises ValueError on bad values."""
    return build_config(collect_sources(base, environ))
