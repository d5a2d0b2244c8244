# rpsarena

Pieces for drawing a small rock-paper-scissors arena in an ANSI terminal.

The arena is a 20 × 20 grid (`GAME_WINDOW_WIDTH` and `GAME_WINDOW_HEIGHT` in
`rpsarena.model`). Every cell is two terminal columns wide
(`GAME_WINDOW_CELL_WIDTH`), so the board is framed in a 40-column box. Objects
on the grid carry an *icon* made of coloured cells and move one step per update
in their current direction, stopping at the edges.

## Modules

- `rpsarena.model`
  - `Color`: terminal colours `BLACK` … `WHITE`, plus `NOCHANGE`, which leaves
    the colour as it is.
  - `Direction`: `UP`, `DOWN`, `LEFT`, `RIGHT` and `NONE`.
  - `Vec2`: a frozen `(x, y)` pair. `width` and `height` are read-only aliases
    for `x` and `y`. `Position` is another name for it.
  - `Collider`: an abstract interface with `intersect(other)` and
    `on_collision(other)`.
  - `Cell`: one icon cell, a `color` and an `ascii` string. An icon is a list
    of rows of cells. `icon_width(icon)` is the length of its first row (0 for
    an empty icon). `icon_height(icon)` is the number of rows.
  - `GameObject(position, icon)`: has `position`, `icon` and `direction`
    attributes, with `direction` starting as `Direction.NONE`. `update()` moves
    it one cell in its direction. It stops at row 0 and row 19. It stops at
    column 0 on the left. On the right it stops at column 18, so a two-cell
    icon stays on the board.
- `rpsarena.ansi`
  - `ansi_print(text, fg=NOCHANGE, bg=NOCHANGE, hi=False, blinking=False)`
    wraps `text` in an escape sequence. The sequence sets bold, blink, the
    foreground colour and the background colour, in that order, and the text
    ends with a reset code. Empty or `None` text gives `""`.
  - `ansi_emphasis(text, hi=False, blinking=False)` applies only bold and
    blink. With neither option set there is no opening sequence, but the reset
    code is still appended.
- `rpsarena.view`
  - `display_width(text)` gives the number of terminal columns a string takes,
    and is never less than 1.
  - `terminal_size()` returns `(rows, columns)` of the terminal on stdout, or
    `(-1, -1)` when that is not known.
  - `View(out=None)` writes to `out`, or to `sys.stdout` when `out` is not
    given. It keeps the frame drawn last and the frame being built.
    `reset_latest()` blanks the frame being built.
    `update_game_object(obj)` draws an object's icon into it, clipped to the
    board. Each cell's colour is used as the cell's background.
    `is_dirty()` tells whether the two frames differ. `frame()` returns the
    bordered board as a string. `render()` writes the frame, after moving the
    cursor home, only when it is dirty. It first clears the screen whenever the
    terminal size differs from the size at the previous call, and always on
    the first call.

## Example

```python
import sys

from rpsarena.ansi import ansi_print
from rpsarena.model import Cell, Color, Direction, GameObject, Vec2
from rpsarena.view import View

rock = GameObject(Vec2(3, 4), [[Cell(Color.RED, "R"), Cell(Color.RED, "R")]])
rock.direction = Direction.RIGHT

view = View(sys.stdout)
view.reset_latest()
rock.update()                 # moves one cell to the right
view.update_game_object(rock)
view.render()                 # draws the framed board, because it changed

print(ansi_print("ID: demo", Color.YELLOW, Color.RED, True, True))
```

If nothing has changed, a second call to `render()` does not redraw the board.

## What this package does not do

The package provides the model, the colouring and the renderer only. It has
no rock, paper or scissors pieces, no rules for who beats whom, and no
collision handling beyond the abstract `Collider` interface. It also has no
keyboard handling, no game loop and no command to start a game. A program that
uses the package has to supply these itself.