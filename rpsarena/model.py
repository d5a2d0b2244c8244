"""Core game model: units, icons, colliders and movable game objects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from enum import IntEnum

GAME_WINDOW_WIDTH = 20
GAME_WINDOW_HEIGHT = 20

GAME_WINDOW_CELL_WIDTH = 2
WINDOW_PIXEL_WIDTH = GAME_WINDOW_WIDTH * GAME_WINDOW_CELL_WIDTH
WINDOW_PIXEL_HEIGHT = GAME_WINDOW_HEIGHT

SPF = 1.0  # seconds per frame


class Color(IntEnum):
    """Terminal colours; NOCHANGE leaves the current colour as it is."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    PINK = 5
    CYAN = 6
    WHITE = 7
    NOCHANGE = 8


class Direction(IntEnum):
    """Movement direction of a game object."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    NONE = 4


@dataclass(frozen=True)
class Vec2:
    """A pair of integers used as a position or a size."""

    x: int = 0
    y: int = 0

    @property
    def width(self) -> int:
        return self.x

    @property
    def height(self) -> int:
        return self.y


Position = Vec2


class Collider(ABC):
    """Something that can detect and react to collisions with another collider."""

    @abstractmethod
    def intersect(self, other: "Collider") -> bool:
        """Return True if this collider overlaps ``other``."""

    @abstractmethod
    def on_collision(self, other: "Collider") -> None:
        """React to a collision with ``other``."""


@dataclass(frozen=True)
class Cell:
    """One character cell of an icon."""

    color: Color
    ascii: str


Icon = list[list[Cell]]


def icon_width(icon: Icon) -> int:
    """Width of an icon, taken from its first row."""
    return len(icon[0]) if icon else 0


def icon_height(icon: Icon) -> int:
    """Number of rows in an icon."""
    return len(icon)


_STEPS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


class GameObject:
    """An object on the game board that moves one step per update."""

    def __init__(self, position: Position, icon: Icon) -> None:
        self.position = position
        self.icon = icon
        self.direction = Direction.NONE

    def _can_move(self) -> bool:
        pos = self.position
        if self.direction is Direction.UP:
            return pos.y > 0
        if self.direction is Direction.DOWN:
            return pos.y < GAME_WINDOW_HEIGHT - 1
        if self.direction is Direction.LEFT:
            return pos.x > 0
        if self.direction is Direction.RIGHT:
            return pos.x < GAME_WINDOW_WIDTH - 2
        return False

    def update(self) -> None:
        """Move one step in the current direction, staying on the board."""
        if not self._can_move():
            return
        dx, dy = _STEPS[self.direction]
        self.position = replace(
            self.position, x=self.position.x + dx, y=self.position.y + dy
        )