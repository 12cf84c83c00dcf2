"""Keyboard handling and the per-frame game update."""

from __future__ import annotations

import enum

from .game_logic import (
    GameState,
    check_level_transition,
    handle_plates,
    handle_traps,
    reveal_traps_near_player,
)
from .maze import REVEAL_DISTANCE
from .player import Direction

KEY_RETURN = 13
KEY_ESCAPE = 27

PLAYER_SPEED = 600.0

_MOVES = (
    ("wW", 0.0, -1.0, Direction.UP),
    ("sS", 0.0, 1.0, Direction.DOWN),
    ("aA", -1.0, 0.0, Direction.LEFT),
    ("dD", 1.0, 0.0, Direction.RIGHT),
)


class PauseChoice(enum.Enum):
    """What the player picked in the pause menu."""

    CONTINUE = "continue"
    RESTART = "restart"
    QUIT = "quit"
    CLOSED = "closed"


class QuitGame(Exception):
    """Raised when the player chooses to quit from the pause menu."""


def key_press(state: GameState, key: int) -> bool:
    """Handle a key press; return True when the pause menu should be shown."""
    if state.player.lives <= 0 and key == KEY_RETURN:
        state.restart_level()
        return False
    if key == KEY_ESCAPE and state.player.lives > 0:
        state.paused = True
        return True
    state.pressed_keys.add(key)
    return False


def key_release(state: GameState, key: int) -> None:
    """Mark a key as released unless the game is over or paused."""
    if state.player.lives <= 0 or state.paused:
        return
    state.pressed_keys.discard(key)


def apply_pause_choice(state: GameState, choice: PauseChoice) -> None:
    """Carry out the pause-menu choice; quitting raises QuitGame."""
    if choice is PauseChoice.QUIT:
        raise QuitGame("quit from the pause menu")
    if choice is PauseChoice.RESTART:
        state.restart_level()
    state.paused = False
    state.pressed_keys.clear()


def process_input(state: GameState, dt: float) -> tuple[float, float]:
    """Movement for this frame from the pressed keys; also turns the player."""
    speed = PLAYER_SPEED * dt
    dx = dy = 0.0
    for letters, sx, sy, facing in _MOVES:
        if any(ord(letter) in state.pressed_keys for letter in letters):
            dx += sx * speed
            dy += sy * speed
            state.player.facing = facing
    return dx, dy


def update(state: GameState, dt: float) -> bool:
    """Advance the game by dt seconds; return False when it is held."""
    if state.player.lives <= 0 or state.paused:
        return False
    state.elapsed_time += dt
    dx, dy = process_input(state, dt)
    state.player.move(state.maze, dx, dy)
    reveal_traps_near_player(state, REVEAL_DISTANCE)
    handle_traps(state)
    handle_plates(state)
    check_level_transition(state)
    return True