# tests/conftest.py
#
# Shared fixtures: a recording fake device standing in for the device
# boundary, sessions wired to it, and the built-in command registry.

from typing import Optional

import pytest

from exword.device import (
    AddOnDictionary,
    Capability,
    Capacity,
    DeviceModel,
    DirEntry,
    OpenOptions,
    RSP_SUCCESS,
)
from exword.interface import handle_line, load_commands
from exword.session import Session


class FakeDevice:
    """Device double: records every call and answers from configurable fields."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self.connect_rsp = RSP_SUCCESS
        self.setpath_rsp = RSP_SUCCESS
        self.setpath_overrides: dict[str, int] = {}
        self.list_rsp = RSP_SUCCESS
        self.entries: list[DirEntry] = [
            DirEntry("_INTERNAL_00", is_directory=True),
            DirEntry("_SD_00", is_directory=True),
        ]
        self.model = DeviceModel("XD-TEST", "SUB-1", "EXT-1",
                                 Capability.SW | Capability.C | Capability.EXT)
        self.model_rsp = RSP_SUCCESS
        self.capacity = Capacity(total=1000, free=250)
        self.capacity_rsp = RSP_SUCCESS
        self.format_rsp = RSP_SUCCESS
        self.send_rsp = RSP_SUCCESS
        self.get_rsp = RSP_SUCCESS
        self.file_data = b"remote bytes"
        self.remove_rsp = RSP_SUCCESS
        self.dict_list_rsp = RSP_SUCCESS
        self.dictionaries: list[AddOnDictionary] = []
        self.reset_rsp = RSP_SUCCESS
        self.reset_key: Optional[bytes] = bytes(range(20))
        self.auth_rsp = RSP_SUCCESS
        self.dict_op_rsp = RSP_SUCCESS

    def names(self) -> list[str]:
        return [call[0] for call in self.calls]

    # session
    def connect(self):
        self.calls.append(("connect",))
        return self.connect_rsp

    def disconnect(self):
        self.calls.append(("disconnect",))
        return RSP_SUCCESS

    def close(self):
        self.calls.append(("close",))

    def set_debug(self, level):
        self.calls.append(("set_debug", level))

    # information
    def get_model(self):
        self.calls.append(("get_model",))
        return self.model_rsp, self.model

    def get_capacity(self):
        self.calls.append(("get_capacity",))
        return self.capacity_rsp, self.capacity

    def sd_format(self):
        self.calls.append(("sd_format",))
        return self.format_rsp

    # files
    def list(self):
        self.calls.append(("list",))
        return self.list_rsp, list(self.entries)

    def setpath(self, path, mkdir):
        self.calls.append(("setpath", path, mkdir))
        return self.setpath_overrides.get(path, self.setpath_rsp)

    def send_file(self, name, data):
        self.calls.append(("send_file", name, data))
        return self.send_rsp

    def get_file(self, name):
        self.calls.append(("get_file", name))
        return self.get_rsp, self.file_data

    def remove_file(self, name, is_unicode):
        self.calls.append(("remove_file", name, is_unicode))
        return self.remove_rsp

    # dictionaries
    def dict_list(self, root):
        self.calls.append(("dict_list", root))
        return self.dict_list_rsp, list(self.dictionaries)

    def dict_reset(self, user):
        self.calls.append(("dict_reset", user))
        return self.reset_rsp, self.reset_key

    def dict_auth(self, user, key):
        self.calls.append(("dict_auth", user, key))
        return self.auth_rsp

    def dict_decrypt(self, root, dict_id):
        self.calls.append(("dict_decrypt", root, dict_id))
        return self.dict_op_rsp

    def dict_remove(self, root, dict_id):
        self.calls.append(("dict_remove", root, dict_id))
        return self.dict_op_rsp

    def dict_install(self, root, dict_id):
        self.calls.append(("dict_install", root, dict_id))
        return self.dict_op_rsp


class RecordingOpener:
    def __init__(self, device: Optional[FakeDevice]) -> None:
        self.device = device
        self.options: list[OpenOptions] = []

    def __call__(self, options: OpenOptions):
        self.options.append(options)
        return self.device


@pytest.fixture(scope="session", autouse=True)
def _builtin_commands():
    load_commands()


@pytest.fixture
def fake_device():
    return FakeDevice()


@pytest.fixture
def opener(fake_device):
    return RecordingOpener(fake_device)


@pytest.fixture
def session(opener):
    return Session(opener=opener)


@pytest.fixture
def run(session):
    """Run one shell line against the session."""

    def _run(line: str) -> None:
        handle_line(session, line)

    return _run


@pytest.fixture
def connected(session, fake_device, run, capsys):
    """A session connected in library mode, with call log and output cleared."""
    run("connect")
    assert session.connected
    fake_device.calls.clear()
    capsys.readouterr()
    return session
