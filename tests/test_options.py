import pytest


class TestDebug:
    def test_show_default(self, session, run, capsys):
        run("set debug")
        assert capsys.readouterr().out == "Debug Level: 0\n"

    def test_set_offline(self, session, run, capsys):
        run("set debug 3")
        assert session.debug_level == 3
        assert capsys.readouterr().out == ""

    def test_set_pushes_to_device(self, connected, fake_device, run):
        run("set debug 5")
        assert connected.debug_level == 5
        assert fake_device.calls == [("set_debug", 5)]

    def test_out_of_range(self, session, run, capsys):
        run("set debug 6")
        assert capsys.readouterr().out == "Value should be between 0 and 5\n"
        assert session.debug_level == 0

    @pytest.mark.parametrize("value", ["high", "-1", "2.5"])
    def test_not_a_number(self, session, run, capsys, value):
        run(f"set debug {value}")
        assert capsys.readouterr().out == "Invalid value\n"
        assert session.debug_level == 0

    def test_next_connect_uses_level(self, session, fake_device, run):
        run("set debug 2")
        run("connect")
        assert fake_device.calls[0] == ("set_debug", 2)


class TestMkdir:
    def test_show(self, session, run, capsys):
        run("set mkdir")
        assert capsys.readouterr().out == "Mkdir: off\n"
        session.auto_mkdir = True
        run("set mkdir")
        assert capsys.readouterr().out == "Mkdir: on\n"

    @pytest.mark.parametrize("word, expected", [
        ("on", True), ("yes", True), ("true", True),
        ("off", False), ("no", False), ("false", False),
    ])
    def test_words(self, session, run, word, expected):
        session.auto_mkdir = not expected
        run(f"set mkdir {word}")
        assert session.auto_mkdir is expected

    def test_invalid(self, session, run, capsys):
        run("set mkdir maybe")
        assert capsys.readouterr().out == "Invalid value\n"
        assert session.auto_mkdir is False

    def test_setpath_creates_directories(self, connected, fake_device, run):
        run("set mkdir on")
        run("setpath mem://new")
        assert fake_device.calls == [("setpath", "\\_INTERNAL_00\\new", True)]


def test_no_option(session, run, capsys):
    run("set")
    assert capsys.readouterr().out == "No option specified\n"


def test_unknown_option(session, run, capsys):
    run("set colour blue")
    assert capsys.readouterr().out == "Unknown option colour\n"
