"""Rendering of the maze, the player and the status display."""

from __future__ import annotations

import functools

import pygame

from .game_logic import GameState
from .maze import CELL_SIZE, CellType, Maze
from .player import SPRITE_SIZE, Direction, Player, sprite_offset

BACKGROUND_COLOR = (230, 230, 230)
EMPTY_COLOR = (230, 230, 230)
WALL_COLOR = (77, 77, 77)
OUTLINE_COLOR = (0, 0, 0)
TRAP_COLOR = (255, 0, 0)
PLATE_COLOR = (0, 0, 255)
DOOR_COLOR = (0, 0, 255)
LIVES_COLOR = (255, 0, 0)
TIME_COLOR = (0, 0, 0)
GAME_OVER_COLOR = (255, 0, 0)

TOP_MARGIN = 0.08


@functools.lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.SysFont("Arial", max(1, size), bold=True)


def _text(surface, text, size, color, baseline, x=None) -> None:
    """Draw text with its baseline at the given height; centred when x is None."""
    font = _font(int(round(size)))
    rendered = font.render(text, True, color)
    if x is None:
        x = (surface.get_width() - rendered.get_width()) / 2
    surface.blit(rendered, (round(x), round(baseline - font.get_ascent())))


def _cell_rect(x, y, cell_width, cell_height, top) -> pygame.Rect:
    left = round(x * cell_width)
    right = round((x + 1) * cell_width)
    upper = round(top + y * cell_height)
    lower = round(top + (y + 1) * cell_height)
    return pygame.Rect(left, upper, right - left, lower - upper)


def _bezier(p0, p1, p2, p3, steps=12):
    for step in range(steps + 1):
        t = step / steps
        u = 1 - t
        yield (
            u ** 3 * p0[0] + 3 * u * u * t * p1[0] + 3 * u * t * t * p2[0] + t ** 3 * p3[0],
            u ** 3 * p0[1] + 3 * u * u * t * p1[1] + 3 * u * t * t * p2[1] + t ** 3 * p3[1],
        )


def _draw_heart(surface, x, y, size, color) -> None:
    s = size / 2
    left = list(_bezier((x, y), (x - s, y - s), (x - 2 * s, y + s / 2), (x, y + 2 * s)))
    right = list(_bezier((x, y + 2 * s), (x + 2 * s, y + s / 2), (x + s, y - s), (x, y)))
    pygame.draw.polygon(surface, color, left + right[1:])


def format_time(seconds: float) -> str:
    """Seconds as MM:SS, truncated to whole seconds."""
    whole = int(seconds)
    return f"{whole // 60:02d}:{whole % 60:02d}"


def cell_layout(width: float, height: float, maze: Maze) -> tuple[float, float, float]:
    """Cell width, cell height and the top margin kept free for the status line."""
    top = height * TOP_MARGIN
    return width / maze.width, (height - top) / maze.height, top


def draw_maze(surface, maze: Maze, cell_width: float, cell_height: float, top: float = 0.0) -> None:
    """Draw every cell of the maze."""
    revealed = {(trap.x, trap.y) for trap in maze.traps if trap.revealed}
    radius = min(cell_width, cell_height) / 3
    for y, row in enumerate(maze.current):
        for x, value in enumerate(row):
            rect = _cell_rect(x, y, cell_width, cell_height, top)
            centre = (x * cell_width + cell_width / 2, top + y * cell_height + cell_height / 2)
            if value == CellType.WALL:
                pygame.draw.rect(surface, WALL_COLOR, rect)
                pygame.draw.rect(surface, OUTLINE_COLOR, rect, 1)
            elif value == CellType.TRAP or (x, y) in revealed:
                pygame.draw.circle(surface, TRAP_COLOR, centre, radius)
            elif value == CellType.PLATE:
                pygame.draw.circle(surface, PLATE_COLOR, centre, radius)
            elif value == CellType.DOOR:
                pygame.draw.rect(surface, DOOR_COLOR, rect)
                pygame.draw.rect(surface, OUTLINE_COLOR, rect, 1)
            else:
                pygame.draw.rect(surface, EMPTY_COLOR, rect)


def draw_player(surface, player: Player, sprite_sheet, cell_width: float,
                cell_height: float, top: float = 0.0) -> None:
    """Draw the player's sprite for its facing; nothing without a sprite sheet."""
    if sprite_sheet is None:
        return
    centre_x = player.x / CELL_SIZE * cell_width
    centre_y = top + player.y / CELL_SIZE * cell_height
    size = max(1, int(round(min(cell_width, cell_height) * 0.8)))
    sx, sy = sprite_offset(player.facing)
    sprite = sprite_sheet.subsurface(pygame.Rect(sx, sy, SPRITE_SIZE, SPRITE_SIZE))
    if player.facing == Direction.LEFT:
        sprite = pygame.transform.flip(sprite, True, False)
    sprite = pygame.transform.scale(sprite, (size, size))
    surface.blit(sprite, (round(centre_x - size / 2), round(centre_y - size / 2)))


def draw_lives(surface, lives: int, width: float, height: float) -> None:
    """Draw the "Lives:" label and one heart per remaining life."""
    life_width = width * 0.015
    life_height = height * 0.02
    padding = width * 0.01
    start_x = width * 0.02
    start_y = height * 0.05
    _text(surface, "Lives:", height * 0.03, LIVES_COLOR, start_y, start_x)
    for index in range(lives):
        cx = start_x + (life_width + padding) * (index + 3) + life_width / 2
        cy = start_y - life_height / 2
        _draw_heart(surface, cx, cy, life_width, LIVES_COLOR)


def draw_time(surface, seconds: float, width: float, height: float) -> None:
    """Draw the remaining level time centred at the top."""
    _text(surface, format_time(seconds), height * 0.03, TIME_COLOR, height * 0.05)


def draw_game_over(surface, scare_image, width: int, height: int) -> None:
    """Draw the game-over picture and text across the whole window."""
    if scare_image is not None:
        surface.blit(pygame.transform.scale(scare_image, (int(width), int(height))), (0, 0))
    _text(surface, "GAME OVER", 40, GAME_OVER_COLOR, height / 2)
    _text(surface, "Press ENTER to Restart", 24, GAME_OVER_COLOR, height / 2 + 40)


def draw_frame(surface, state: GameState, sprite_sheet, scare_image) -> bool:
    """Draw a whole frame; return True when the game-over screen was shown."""
    width, height = surface.get_size()
    surface.fill(BACKGROUND_COLOR)
    cell_width, cell_height, top = cell_layout(width, height, state.maze)
    draw_maze(surface, state.maze, cell_width, cell_height, top)
    draw_player(surface, state.player, sprite_sheet, cell_width, cell_height, top)
    draw_lives(surface, state.player.lives, width, height)
    remaining = state.remaining_time()
    draw_time(surface, remaining, width, height)
    if state.player.lives <= 0 or remaining == 0:
        draw_game_over(surface, scare_image, width, height)
        return True
    return False