"""Startup wiring and logging setup."""

import logging

import pytest

from exword.boot import boot_sequence
from exword.config import load_config
from exword.device import load_opener
from exword.device.emulator import open_device
from exword.interface import BaseCLI
from exword.ui import init_logger


@pytest.fixture
def restore_logger():
    names = ["exword", "exword-test"]
    saved = {name: (list(logging.getLogger(name).handlers), logging.getLogger(name).propagate)
             for name in names}
    yield
    for name, (handlers, propagate) in saved.items():
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            if handler not in handlers:
                handler.close()
        logger.handlers[:] = handlers
        logger.propagate = propagate


def test_boot_builds_session_from_config(tmp_path, restore_logger):
    config = load_config(base=tmp_path, environ={
        "EXWORD_DATA_PATH": str(tmp_path / "data"),
        "EXWORD_DEBUG_LEVEL": "2",
        "EXWORD_AUTO_MKDIR": "on",
    })
    state = boot_sequence(config)
    assert state.session.opener is open_device
    assert state.session.debug_level == 2
    assert state.session.auto_mkdir is True
    assert not state.session.connected
    assert isinstance(state.cli, BaseCLI)
    assert state.config.history_file_path.exists()
    assert state.loaded_count >= 14


def test_verbose_boot_reports_steps(tmp_path, restore_logger, capsys):
    config = load_config(base=tmp_path, environ={
        "EXWORD_DATA_PATH": str(tmp_path / "data"),
        "EXWORD_VERBOSE_BOOT": "true",
    })
    boot_sequence(config)
    out = capsys.readouterr().out
    assert "Load configuration" in out
    assert "Resolve device backend" in out
    assert "[FAILED]" not in out


def test_bad_backend_fails_boot(tmp_path, restore_logger, capsys):
    config = load_config(base=tmp_path, environ={
        "EXWORD_DATA_PATH": str(tmp_path / "data"),
        "EXWORD_DEVICE_BACKEND": "exword.no_such_module:open_device",
    })
    with pytest.raises(ValueError):
        boot_sequence(config)
    assert "[FAILED] Resolve device backend" in capsys.readouterr().out


@pytest.mark.parametrize("spec", ["nocolon", "exword.device.emulator:missing", ":open_device"])
def test_load_opener_rejects(spec):
    with pytest.raises(ValueError):
        load_opener(spec)


def test_file_logging(tmp_path, restore_logger):
    logfile = tmp_path / "logs" / "exword.log"
    logger = init_logger("exword-test", level="WARNING", logfile=logfile)
    logger.debug("setpath \x1b[31mred\x1b[0m")
    for handler in logger.handlers:
        handler.flush()
    text = logfile.read_text(encoding="utf-8")
    assert "[DEBUG] exword-test: setpath red" in text
