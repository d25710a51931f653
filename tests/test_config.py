"""Configuration layering and validation."""

import json

import pytest

from exword.config import load_config
from exword.device.backend import DEFAULT_BACKEND


def test_defaults(tmp_path):
    config = load_config(base=tmp_path, environ={"EXWORD_DATA_PATH": str(tmp_path / "data")})
    assert config.data_path == (tmp_path / "data").resolve()
    assert config.history_file_path == config.data_path / ".exword_history"
    assert config.log_file_path is None
    assert config.log_level == "WARNING"
    assert config.debug_level == 0
    assert config.auto_mkdir is False
    assert config.device_backend == DEFAULT_BACKEND
    assert config.show_banner is True


def test_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text(
        "# shell options\nDEBUG_LEVEL=2\nAUTO_MKDIR='yes'\n", encoding="utf-8")
    config = load_config(base=tmp_path, environ={})
    assert config.debug_level == 2
    assert config.auto_mkdir is True


def test_ini_file(tmp_path):
    (tmp_path / "config.ini").write_text(
        "[shell]\nshow_banner = off\nlog_level = info\n", encoding="utf-8")
    config = load_config(base=tmp_path, environ={})
    assert config.show_banner is False
    assert config.log_level == "INFO"


def test_nested_json_is_flattened(tmp_path):
    (tmp_path / "config.json").write_text(
        json.dumps({"log": {"level": "debug"}, "debug_level": 1}), encoding="utf-8")
    config = load_config(base=tmp_path, environ={})
    assert config.log_level == "DEBUG"
    assert config.debug_level == 1


def test_toml_overrides_json(tmp_path):
    (tmp_path / "config.json").write_text(json.dumps({"debug_level": 1}), encoding="utf-8")
    (tmp_path / "config.toml").write_text("debug_level = 3\n", encoding="utf-8")
    assert load_config(base=tmp_path, environ={}).debug_level == 3


def test_environment_wins(tmp_path):
    (tmp_path / "config.toml").write_text("debug_level = 3\n", encoding="utf-8")
    config = load_config(base=tmp_path, environ={"EXWORD_DEBUG_LEVEL": "4", "DEBUG_LEVEL": "1"})
    assert config.debug_level == 4


def test_unknown_keys_kept_as_extra(tmp_path):
    config = load_config(base=tmp_path, environ={"EXWORD_COLOUR": "blue"})
    assert config.extra == {"COLOUR": "blue"}


def test_history_path_override(tmp_path):
    config = load_config(base=tmp_path, environ={"EXWORD_HISTORY_FILE_PATH": str(tmp_path / "h")})
    assert config.history_file_path == (tmp_path / "h").resolve()


@pytest.mark.parametrize("environ", [
    {"EXWORD_DEBUG_LEVEL": "6"},
    {"EXWORD_DEBUG_LEVEL": "lots"},
    {"EXWORD_LOG_LEVEL": "LOUD"},
    {"EXWORD_AUTO_MKDIR": "sometimes"},
    {"EXWORD_DEVICE_BACKEND": "exword.device.emulator"},
])
def test_rejects_bad_values(tmp_path, environ):
    with pytest.raises(ValueError):
        load_config(base=tmp_path, environ=environ)


def test_broken_file_is_reported(tmp_path):
    (tmp_path / "config.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError, match="config.json"):
        load_config(base=tmp_path, environ={})
