"""Terminal rendering of the game board."""

from __future__ import annotations

import os
import sys
from typing import TextIO

from wcwidth import wcwidth

from .ansi import ansi_print
from .model import (
    GAME_WINDOW_CELL_WIDTH,
    GAME_WINDOW_HEIGHT,
    GAME_WINDOW_WIDTH,
    Color,
)

_CLEAR_SCREEN = "\033[2J\033[H"
_CURSOR_HOME = "\033[H"


def display_width(text: str) -> int:
    """Number of terminal columns ``text`` occupies, at least one."""
    width = sum(max(0, wcwidth(ch)) for ch in text)
    return max(1, width)


def terminal_size() -> tuple[int, int]:
    """Return (rows, columns) of the terminal on stdout, or (-1, -1) if unknown."""
    try:
        size = os.get_terminal_size(sys.stdout.fileno())
    except (OSError, ValueError, AttributeError):
        return -1, -1
    return size.lines, size.columns


def _grid(value):
    return [[value] * GAME_WINDOW_WIDTH for _ in range(GAME_WINDOW_HEIGHT)]


def _copy(grid):
    return [list(row) for row in grid]


def _border() -> str:
    return "+" + "-" * (GAME_WINDOW_WIDTH * GAME_WINDOW_CELL_WIDTH) + "+\n"


class View:
    """Double-buffered board that redraws only when its contents change."""

    def __init__(self, out: TextIO | None = None) -> None:
        self.out = out if out is not None else sys.stdout
        self._term_size: tuple[int, int] | None = None
        self.last_map = _grid("")
        self.last_fg_color = _grid(Color.NOCHANGE)
        self.last_bg_color = _grid(Color.NOCHANGE)
        self.latest_map = _grid("")
        self.latest_fg_color = _grid(Color.NOCHANGE)
        self.latest_bg_color = _grid(Color.NOCHANGE)
        self.reset_latest()

    def update_game_object(self, obj) -> None:
        """Draw an object's icon into the pending frame, clipped to the board."""
        pos = obj.position
        for dy, icon_row in enumerate(obj.icon):
            row = pos.y + dy
            if not 0 <= row < GAME_WINDOW_HEIGHT:
                continue
            for dx, cell in enumerate(icon_row):
                col = pos.x + dx
                if not 0 <= col < GAME_WINDOW_WIDTH:
                    continue
                self.latest_map[row][col] = cell.ascii
                self.latest_bg_color[row][col] = cell.color

    def reset_latest(self) -> None:
        """Blank the pending frame."""
        self.latest_map = _grid(" ")
        self.latest_fg_color = _grid(Color.NOCHANGE)
        self.latest_bg_color = _grid(Color.NOCHANGE)

    def is_dirty(self) -> bool:
        """True if the pending frame differs from the last one drawn."""
        return (
            self.last_map != self.latest_map
            or self.last_fg_color != self.latest_fg_color
            or self.last_bg_color != self.latest_bg_color
        )

    def _render_cell(self, text: str, fg: Color, bg: Color) -> str:
        pad_total = GAME_WINDOW_CELL_WIDTH - display_width(text)
        pad_left = pad_total // 2 if pad_total > 0 else 0
        pad_right = pad_total - pad_left if pad_total > 0 else 0
        blank = ansi_print(" ", Color.NOCHANGE, bg)
        return blank * pad_left + ansi_print(text, fg, bg) + blank * pad_right

    def frame(self) -> str:
        """Build the text of the pending frame, border included."""
        parts = [_border()]
        for texts, fgs, bgs in zip(
            self.latest_map, self.latest_fg_color, self.latest_bg_color
        ):
            cells = "".join(
                self._render_cell(text, fg, bg) for text, fg, bg in zip(texts, fgs, bgs)
            )
            parts.append("|" + cells + "|\n")
        parts.append(_border())
        return "".join(parts)

    def render(self) -> None:
        """Write the pending frame to the output if it changed."""
        size = terminal_size()
        if size != self._term_size:
            self.out.write(_CLEAR_SCREEN)
        self._term_size = size

        if not self.is_dirty():
            return

        self.out.write(_CURSOR_HOME + self.frame())
        self.out.flush()

        self.last_map = _copy(self.latest_map)
        self.last_fg_color = _copy(self.latest_fg_color)
        self.last_bg_color = _copy(self.latest_bg_color)