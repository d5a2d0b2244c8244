import pytest

from rpsarena.ansi import ansi_emphasis, ansi_print
from rpsarena.model import Color

RESET = "\x1b[0m"


@pytest.mark.parametrize("text", ["", None])
def test_empty_text_gives_empty_string(text):
    assert ansi_print(text, Color.RED) == ""
    assert ansi_emphasis(text, True, True) == ""


def test_foreground_and_background():
    assert ansi_print("hi", Color.RED, Color.BLUE) == "\x1b[31;44mhi" + RESET


def test_all_options_order():
    assert (
        ansi_print("ID", Color.YELLOW, Color.RED, True, True)
        == "\x1b[1;5;33;41mID" + RESET
    )


def test_no_options_still_emits_empty_format():
    assert ansi_print("x") == "\x1b[m" + "x" + RESET


def test_background_only_starts_with_bg_code():
    result = ansi_print(" ", Color.NOCHANGE, Color.GREEN)
    assert result.startswith("\x1b[4")
    assert result.endswith(" " + RESET)
    assert "3" not in result.split("m", 1)[0].replace("\x1b[4", "")


@pytest.mark.parametrize("color", [c for c in Color if c != Color.NOCHANGE])
def test_every_foreground_colour_contains_its_digit(color):
    result = ansi_print("t", color)
    head = result[: result.index("t")]
    assert head == "\x1b[3" + str(int(color)) + "m"


def test_emphasis_without_options_only_resets():
    assert ansi_emphasis("plain") == "plain" + RESET


def test_emphasis_bold_and_blink():
    result = ansi_emphasis("x", hi=True, blinking=True)
    assert result.startswith("\x1b[1;5m")
    assert result.endswith("x" + RESET)


def test_emphasis_blink_only():
    result = ansi_emphasis("y", blinking=True)
    assert result.startswith("\x1b[5m")
    assert result.count(";") == 0