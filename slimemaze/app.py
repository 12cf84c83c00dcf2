"""Window setup and main loop of the game."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

from .cmdline import GameOptions, parse_args
from .controls import (
    PauseChoice,
    QuitGame,
    apply_pause_choice,
    key_press,
    key_release,
    update,
)
from .draw import draw_frame
from .game_logic import GameFinished, GameState
from .maze import Maze, MazeError
from .player import Player

LEVEL_PATHS = [
    "../maps/level0",
    "../maps/level1",
    "../maps/level2",
    "../maps/level3",
    "../maps/level4",
    "../maps/level5",
]
SPRITE_PATH = "../assets/slime.png"
SCARE_PATH = "../assets/scare.png"
FRAME_RATE = 60


def starting_level(level_paths: Sequence[str | Path], maze_file: str) -> int:
    """Index of the level whose path equals maze_file, or 0."""
    return next(
        (index for index, path in enumerate(level_paths) if str(path) == maze_file), 0
    )


def create_state(options: GameOptions, level_paths: Sequence[str | Path] = LEVEL_PATHS) -> GameState:
    """Load the starting level and spawn the player in it."""
    paths = list(level_paths)
    level = starting_level(paths, options.maze_file)
    maze = Maze.load(paths[level])
    player = Player()
    player.spawn(maze)
    return GameState(maze=maze, player=player, level_paths=paths, current_level=level)


def _load_image(pygame, path, failure_message=None):
    try:
        return pygame.image.load(path).convert_alpha()
    except (pygame.error, OSError):
        if failure_message:
            print(failure_message, file=sys.stderr)
        return None


def _pause_menu(pygame, screen, clock) -> PauseChoice:
    """Show a modal pause menu and wait for a choice."""
    keys = {
        pygame.K_c: PauseChoice.CONTINUE,
        pygame.K_RETURN: PauseChoice.CONTINUE,
        pygame.K_r: PauseChoice.RESTART,
        pygame.K_q: PauseChoice.QUIT,
        pygame.K_ESCAPE: PauseChoice.CLOSED,
    }
    lines = ["Pause", "C - Continue", "R - Restart Level", "Q - Quit Game"]
    font = pygame.font.SysFont("Arial", 28, bold=True)
    overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 160))
    screen.blit(overlay, (0, 0))
    width, height = screen.get_size()
    y = height / 2 - len(lines) * font.get_linesize() / 2
    for line in lines:
        rendered = font.render(line, True, (255, 255, 255))
        screen.blit(rendered, ((width - rendered.get_width()) // 2, int(y)))
        y += font.get_linesize()
    pygame.display.flip()
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return PauseChoice.QUIT
            if event.type == pygame.KEYDOWN and event.key in keys:
                return keys[event.key]
        clock.tick(FRAME_RATE)


def run(options: GameOptions) -> int:
    """Open the window and play until the player quits or finishes the last level."""
    print(f"Starting with level: {options.maze_file}")
    print(f"window_width  = {options.window_width}")
    print(f"window_height = {options.window_height}")
    print(f"default_start = {LEVEL_PATHS[0]}")
    state = create_state(options)

    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (options.window_width, options.window_height), pygame.RESIZABLE
        )
        pygame.display.set_caption("Maze Game")
        sprite_sheet = _load_image(pygame, SPRITE_PATH, "Sprite could not be loaded.")
        scare_image = _load_image(pygame, SCARE_PATH)
        clock = pygame.time.Clock()
        clock.tick()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN:
                    if key_press(state, event.key):
                        apply_pause_choice(state, _pause_menu(pygame, screen, clock))
                elif event.type == pygame.KEYUP:
                    key_release(state, event.key)
            dt = clock.tick(FRAME_RATE) / 1000.0
            update(state, dt)
            draw_frame(screen, state, sprite_sheet, scare_image)
            pygame.display.flip()
    except (QuitGame, GameFinished):
        return 0
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point."""
    options = parse_args(argv)
    try:
        return run(options)
    except MazeError as exc:
        print(exc, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())