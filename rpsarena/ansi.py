"""Wrapping text in ANSI colour and emphasis escape sequences."""

from __future__ import annotations

from .model import Color

_INIT = "\x1b["
_END = "m"
_HILIT = "1"
_BLINK = "5"
_RECOVER = "\x1b[0m"


def _format(options: list[str]) -> str:
    return _INIT + ";".join(options) + _END


def ansi_print(
    text: str | None,
    fg: Color = Color.NOCHANGE,
    bg: Color = Color.NOCHANGE,
    hi: bool = False,
    blinking: bool = False,
) -> str:
    """Return ``text`` wrapped in escape codes for the given colours and emphasis."""
    if not text:
        return ""
    options = []
    if hi:
        options.append(_HILIT)
    if blinking:
        options.append(_BLINK)
    if fg != Color.NOCHANGE:
        options.append(f"3{int(fg)}")
    if bg != Color.NOCHANGE:
        options.append(f"4{int(bg)}")
    return _format(options) + text + _RECOVER


def ansi_emphasis(text: str | None, hi: bool = False, blinking: bool = False) -> str:
    """Return ``text`` with optional bold and blinking, followed by a reset code."""
    if not text:
        return ""
    options = []
    if hi:
        options.append(_HILIT)
    if blinking:
        options.append(_BLINK)
    prefix = _format(options) if options else ""
    return prefix + text + _RECOVER