"""End-to-end shell sessions against the in-memory emulator."""

import pytest

from exword.device.emulator import EmulatedDevice, EmulatedMedia
from exword.interface import handle_line
from exword.session import Session


@pytest.fixture
def media():
    return EmulatedMedia()


@pytest.fixture
def shell(media, capsys):
    """Run lines on an emulator-backed session; returns the printed output."""
    session = Session(opener=lambda options: EmulatedDevice(options, media))

    def _run(*lines):
        capsys.readouterr()
        for line in lines:
            handle_line(session, line)
        return capsys.readouterr().out

    _run.session = session
    _run("connect")
    return _run


def auth_key_from(output):
    return next(line.split(": ", 1)[1] for line in output.splitlines()
                if line.startswith("AuthKey: "))


class TestFiles:
    def test_connect_lands_in_internal_memory(self, shell):
        assert shell.session.current_path == "\\_INTERNAL_00\\"
        assert shell.session.sd_present is True

    def test_setpath_without_mkdir(self, shell):
        assert shell("setpath mem://books") == "Not found\n"
        assert shell.session.current_path == "\\_INTERNAL_00\\"

    def test_upload_list_download_delete(self, shell, tmp_path):
        local = tmp_path / "notes.txt"
        local.write_bytes(b"hello device")
        (tmp_path / "copy").mkdir()

        shell("set mkdir on")
        assert shell("setpath mem://books") == ""
        assert shell.session.current_path == "\\_INTERNAL_00\\books"
        assert shell(f"send {local}") == "uploading...OK\n"
        assert shell("list") == "notes.txt\nOK\n"
        assert shell(f"get {tmp_path / 'copy' / 'notes.txt'}") == "downloading...OK\n"
        assert (tmp_path / "copy" / "notes.txt").read_bytes() == b"hello device"
        assert shell("delete notes.txt") == "deleting file...OK\n"
        assert shell("list") == "OK\n"
        assert shell("delete notes.txt") == "deleting file...Not found\n"

    def test_unicode_names(self, shell, tmp_path):
        local = tmp_path / "ことば.txt"
        local.write_bytes(b"x")
        shell(f"send {local}")
        assert shell("list") == "*ことば.txt\nOK\n"
        assert shell("delete *ことば.txt") == "deleting file...OK\n"

    def test_capacity_tracks_usage(self, shell, tmp_path, media):
        local = tmp_path / "blob.bin"
        local.write_bytes(b"\0" * 1000)
        shell(f"send {local}")
        total = media.internal_size
        assert shell("capacity") == f"Capacity: {total} / {total - 1000}\n"

    def test_model(self, shell):
        out = shell("model")
        assert "Model: XD-EMU" in out
        assert "Capabilities: SW F" in out

    def test_format_sd(self, shell, tmp_path, media):
        local = tmp_path / "song.mp3"
        local.write_bytes(b"la")
        shell("set mkdir on", "setpath sd://music", f"send {local}")
        assert shell("format") == "Formatting SD Card...OK\n"
        assert media.root.folders["_SD_00"].folders == {}

    def test_files_survive_reconnect(self, shell, tmp_path):
        local = tmp_path / "keep.txt"
        local.write_bytes(b"k")
        shell(f"send {local}", "disconnect", "connect")
        assert "keep.txt" in shell("list")


class TestWithoutSdCard:
    @pytest.fixture
    def media(self):
        return EmulatedMedia(sd_card=False)

    def test_sd_paths_refused(self, shell):
        assert shell.session.sd_present is False
        assert shell("setpath sd://music") == "SD card not inserted.\n"

    def test_format(self, shell):
        assert shell("format") == "Formatting SD Card...No storage medium\n"


class TestDictionaries:
    def stage(self, shell, tmp_path, dict_id):
        local = tmp_path / "book.dat"
        local.write_bytes(b"dictionary body")
        shell("set mkdir on", f"setpath mem://{dict_id}", f"send {local}", "setpath mem:///")

    def test_install_lifecycle(self, shell, tmp_path):
        self.stage(shell, tmp_path, "GJ01A")
        out = shell("dict reset alice")
        assert out.startswith("User: alice\n")
        key = auth_key_from(out)
        assert len(key) == 42

        assert shell("dict install GJ01A") == "OK\n"
        assert shell.session.current_path == "\\_INTERNAL_00\\"
        listing = shell("dict list")
        assert "GJ01A" in listing and "Add-on GJ01A" in listing
        assert shell("dict install GJ01A") == "Already exists\n"
        assert shell("dict decrypt GJ01A") == "OK\n"
        assert shell("dict remove GJ01A") == "OK\n"
        assert shell("dict list") == "No add-on dictionaries installed.\n"

    def test_install_requires_staged_upload(self, shell):
        shell("dict reset alice")
        assert shell("dict install ZZ99Z") == "Not found\n"

    def test_authentication_across_connections(self, shell, tmp_path):
        self.stage(shell, tmp_path, "GJ01A")
        key = auth_key_from(shell("dict reset alice"))
        shell("dict install GJ01A", "disconnect", "connect")

        assert shell("dict decrypt GJ01A") == "Not authenticated.\n"
        assert shell("dict auth alice 0x" + "0" * 40) == "Authentication failed.\n"
        assert shell.session.authenticated is False
        assert shell(f"dict auth bob {key}") == "Authentication failed.\n"
        assert shell(f"dict auth alice {key}") == "Authentication successful.\n"
        assert shell("dict decrypt GJ01A") == "OK\n"

    def test_sd_storage_is_separate(self, shell, tmp_path):
        self.stage(shell, tmp_path, "GJ01A")
        shell("dict reset alice", "dict install GJ01A", "setpath sd:///")
        assert shell("dict list") == "No add-on dictionaries installed.\n"
        assert shell.session.current_path == "\\_SD_00\\"
