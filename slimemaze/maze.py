"""Maze grid, its special cells and collision checks."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 660
CELL_SIZE = 40
MAX_LIVES = 3
REVEAL_DISTANCE = 48.0
LEVEL_TIME_LIMIT = 120.0
HITBOX_HALF = 8.0


class CellType(enum.IntEnum):
    """Values a maze cell can hold."""

    EMPTY = 0
    WALL = 1
    TRAP = 2
    PLATE = 3
    DOOR = 4


@dataclass
class Plate:
    """A pressure plate; plates must be pressed in order to open the door."""

    x: int
    y: int
    pressed: bool = False
    visible: bool = False


@dataclass
class Trap:
    """A hidden trap that costs a life once revealed and stepped on."""

    x: int
    y: int
    triggered: bool = False
    revealed: bool = False


class MazeError(Exception):
    """Raised when a maze cannot be read or used."""


def _parse_int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError as exc:
        raise MazeError(f"cannot read {what}: {token!r}") from exc


class Maze:
    """A maze with its loaded layout and its current, mutable state."""

    def __init__(self, grid: Iterable[Iterable[int]]):
        rows = [list(row) for row in grid]
        if not rows or not rows[0]:
            raise MazeError("maze must have a positive width and height")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise MazeError("all maze rows must have the same width")
        self.width = width
        self.height = len(rows)
        self.original = rows
        self.current = [row[:] for row in rows]
        self.door: tuple[int, int] | None = None
        for y, row in enumerate(rows):
            for x, value in enumerate(row):
                if value == CellType.DOOR:
                    self.door = (x, y)
        self.plates: list[Plate] = []
        self.traps: list[Trap] = []
        self.place_plates_and_traps()

    @classmethod
    def from_text(cls, text: str) -> Maze:
        """Build a maze from "width height" followed by width*height cell values."""
        tokens = text.split()
        if len(tokens) < 2:
            raise MazeError("cannot read width and height")
        width = _parse_int(tokens[0], "width")
        height = _parse_int(tokens[1], "height")
        if width <= 0 or height <= 0:
            raise MazeError("maze must have a positive width and height")
        cells = tokens[2:2 + width * height]
        if len(cells) < width * height:
            raise MazeError("maze file ends before all cells were read")
        values = [_parse_int(token, "cell value") for token in cells]
        return cls(values[y * width:(y + 1) * width] for y in range(height))

    @classmethod
    def load(cls, path: str | Path) -> Maze:
        """Read a maze from a text file."""
        try:
            text = Path(path).read_text()
        except OSError as exc:
            raise MazeError(f"cannot open maze file: {path}") from exc
        return cls.from_text(text)

    def _count_original(self, cell: CellType) -> int:
        return sum(value == cell for row in self.original for value in row)

    def scan_plates(self) -> int:
        """Number of pressure plates in the loaded layout."""
        return self._count_original(CellType.PLATE)

    def scan_traps(self) -> int:
        """Number of traps in the loaded layout."""
        return self._count_original(CellType.TRAP)

    def place_plates_and_traps(self) -> None:
        """Hide all plates and traps, then show the first plate."""
        self.plates = []
        self.traps = []
        for y, row in enumerate(self.original):
            for x, value in enumerate(row):
                if value == CellType.PLATE:
                    self.plates.append(Plate(x, y))
                    self.current[y][x] = CellType.EMPTY
                elif value == CellType.TRAP:
                    self.traps.append(Trap(x, y))
                    self.current[y][x] = CellType.EMPTY
        if self.plates:
            first = self.plates[0]
            first.visible = True
            self.current[first.y][first.x] = CellType.PLATE

    def reset(self) -> None:
        """Restore the maze to the state it had right after loading."""
        self.current = [row[:] for row in self.original]
        self.place_plates_and_traps()

    def is_wall_collision(self, x: float, y: float) -> bool:
        """Whether a player hitbox centred at (x, y) hits a wall, door or the border."""
        left = int((x - HITBOX_HALF) / CELL_SIZE)
        right = int((x + HITBOX_HALF) / CELL_SIZE)
        top = int((y - HITBOX_HALF) / CELL_SIZE)
        bottom = int((y + HITBOX_HALF) / CELL_SIZE)
        if left < 0 or right >= self.width or top < 0 or bottom >= self.height:
            return True
        corners = (
            self.current[top][left],
            self.current[top][right],
            self.current[bottom][left],
            self.current[bottom][right],
        )
        return any(cell in (CellType.WALL, CellType.DOOR) for cell in corners)