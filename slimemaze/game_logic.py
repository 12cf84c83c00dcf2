"""Game state and the per-frame rules: traps, plates and level changes."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .maze import CELL_SIZE, LEVEL_TIME_LIMIT, CellType, Maze
from .player import Player


class GameFinished(Exception):
    """Raised when the player walks through the door of the last level."""


@dataclass
class GameState:
    """Everything that changes while the game runs."""

    maze: Maze
    player: Player
    level_paths: list[str | Path] = field(default_factory=list)
    current_level: int = 0
    elapsed_time: float = 0.0
    paused: bool = False
    pressed_keys: set = field(default_factory=set)

    @property
    def num_levels(self) -> int:
        return len(self.level_paths)

    def remaining_time(self) -> float:
        """Seconds left in the current level, never below zero."""
        return max(0.0, LEVEL_TIME_LIMIT - self.elapsed_time)

    def restart_level(self) -> None:
        """Reset the maze, respawn the player, restart the clock and release keys."""
        self.maze.reset()
        self.player.spawn(self.maze)
        self.elapsed_time = 0.0
        self.pressed_keys.clear()


def reveal_traps_near_player(state: GameState, reveal_distance: float) -> None:
    """Reveal every hidden trap whose centre lies within reveal_distance of the player."""
    px, py = state.player.x, state.player.y
    limit = reveal_distance * reveal_distance
    for trap in state.maze.traps:
        if trap.revealed:
            continue
        trap_x = trap.x * CELL_SIZE + CELL_SIZE // 2
        trap_y = trap.y * CELL_SIZE + CELL_SIZE // 2
        if (px - trap_x) ** 2 + (py - trap_y) ** 2 <= limit:
            trap.revealed = True
            state.maze.current[trap.y][trap.x] = CellType.TRAP


def handle_traps(state: GameState) -> bool:
    """Take a life for a revealed, untriggered trap under the player."""
    cell_x, cell_y = state.player.cell()
    for trap in state.maze.traps:
        if trap.revealed and not trap.triggered and (trap.x, trap.y) == (cell_x, cell_y):
            state.player.lives -= 1
            trap.triggered = True
            state.maze.current[cell_y][cell_x] = CellType.EMPTY
            return True
    return False


def handle_plates(state: GameState) -> bool:
    """Press a visible plate under the player, showing the next one or opening the door."""
    maze = state.maze
    cell_x, cell_y = state.player.cell()
    pressed = False
    for index, plate in enumerate(maze.plates):
        if plate.visible and not plate.pressed and (plate.x, plate.y) == (cell_x, cell_y):
            plate.pressed = True
            maze.current[cell_y][cell_x] = CellType.EMPTY
            if index + 1 < len(maze.plates):
                following = maze.plates[index + 1]
                following.visible = True
                maze.current[following.y][following.x] = CellType.PLATE
            elif maze.door is not None:
                door_x, door_y = maze.door
                maze.current[door_y][door_x] = CellType.EMPTY
            pressed = True
            break
    if maze.current[cell_y][cell_x] != CellType.PLATE:
        state.player.plate_visited = False
    return pressed


def check_level_transition(state: GameState) -> bool:
    """Load the next level when the player stands in the open door."""
    maze = state.maze
    if maze.door is None:
        return False
    cell_x, cell_y = state.player.cell()
    if (cell_x, cell_y) != maze.door or maze.current[cell_y][cell_x] != CellType.EMPTY:
        return False
    if state.current_level >= state.num_levels - 1:
        raise GameFinished("last level completed")
    state.current_level += 1
    state.maze = Maze.load(state.level_paths[state.current_level])
    state.player.spawn(state.maze)
    state.elapsed_time = 0.0
    return True