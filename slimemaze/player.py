"""The player: position, facing, lives and movement."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .maze import CELL_SIZE, MAX_LIVES, CellType, Maze, MazeError

SPRITE_SIZE = 24


class Direction(enum.IntEnum):
    """Directions the player can face."""

    UP = 0
    LEFT = 1
    DOWN = 2
    RIGHT = 3


_SPRITE_ROWS = {
    Direction.UP: 0,
    Direction.LEFT: 24,
    Direction.DOWN: 48,
    Direction.RIGHT: 24,
}


def sprite_offset(facing: Direction) -> tuple[int, int]:
    """Top-left corner of the sprite for a direction in the sprite sheet."""
    return 0, _SPRITE_ROWS.get(Direction(facing), 24)


@dataclass
class Player:
    """Player state in world coordinates."""

    x: float = 0.0
    y: float = 0.0
    facing: Direction = Direction.DOWN
    lives: int = MAX_LIVES
    plate_visited: bool = False

    def spawn(self, maze: Maze) -> None:
        """Reset the player and place it in the first empty cell, row by row."""
        self.facing = Direction.DOWN
        self.lives = MAX_LIVES
        for y, row in enumerate(maze.current):
            for x, value in enumerate(row):
                if value == CellType.EMPTY:
                    self.x = CELL_SIZE * x + CELL_SIZE / 2
                    self.y = CELL_SIZE * y + CELL_SIZE / 2
                    return
        raise MazeError("no empty cell to spawn the player")

    def move(self, maze: Maze, dx: float, dy: float) -> bool:
        """Move by (dx, dy) unless that hits a wall; report whether it moved."""
        new_x = self.x + dx
        new_y = self.y + dy
        if maze.is_wall_collision(new_x, new_y):
            return False
        self.x = new_x
        self.y = new_y
        return True

    def cell(self) -> tuple[int, int]:
        """The (column, row) of the cell the player stands in."""
        return int(self.x / CELL_SIZE), int(self.y / CELL_SIZE)