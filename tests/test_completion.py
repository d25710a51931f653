import pytest

from exword.interface import split_current_token, suggest


@pytest.mark.parametrize("text, expected", [
    ("", ([], "")),
    ("con", (["con"], "con")),
    ("connect ", (["connect", ""], "")),
    ("connect li", (["connect", "li"], "li")),
])
def test_split_current_token(text, expected):
    assert split_current_token(text) == expected


def test_command_names():
    assert suggest("d") == ["disconnect", "delete", "dict"]
    assert suggest("")[0] == "connect"


def test_help_argument_completes_commands():
    assert suggest("help se") == ["send", "setpath", "set"]
    assert suggest("help set x") == []


def test_positional_words():
    assert suggest("connect ") == ["library", "text", "cd"]
    assert suggest("connect text f") == ["fr"]
    assert suggest("dict i") == ["install"]
    assert suggest("setpath s") == ["sd://"]


def test_option_values_depend_on_option():
    assert suggest("set m") == ["mkdir"]
    assert suggest("set mkdir o") == ["on", "off"]
    assert suggest("set debug ") == ["0", "1", "2", "3", "4", "5"]


def test_no_provider():
    assert suggest("list ") == []
    assert suggest("connect text ja extra") == []
    assert suggest("bogus a") == []
