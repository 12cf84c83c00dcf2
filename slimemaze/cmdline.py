"""Command-line options for the game."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from typing import Sequence

from .maze import WINDOW_HEIGHT, WINDOW_WIDTH

DEFAULT_MAZE_FILE = "../maps/level0"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class GameOptions:
    """Window size and the maze file to start with."""

    window_width: int = WINDOW_WIDTH
    window_height: int = WINDOW_HEIGHT
    maze_file: str = DEFAULT_MAZE_FILE


def _atoi(text: str) -> int:
    """Leading integer of text, or 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def build_parser() -> argparse.ArgumentParser:
    """Argument parser; -h is the window height, help is -? or --help."""
    parser = argparse.ArgumentParser(
        prog="slimemaze",
        usage="%(prog)s [-w WIDTH] [-h HEIGHT] [-m FILE]",
        add_help=False,
    )
    parser.add_argument(
        "-w", "--width", dest="window_width", type=_atoi, default=WINDOW_WIDTH,
        metavar="WIDTH", help="window width (default: %(default)s)",
    )
    parser.add_argument(
        "-h", "--height", dest="window_height", type=_atoi, default=WINDOW_HEIGHT,
        metavar="HEIGHT", help="window height (default: %(default)s)",
    )
    parser.add_argument(
        "-m", "--maze", dest="maze_file", default=DEFAULT_MAZE_FILE,
        metavar="FILE", help="path to the maze file (default: %(default)s)",
    )
    parser.add_argument("-?", "--help", action="help", help="show this help and exit")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> GameOptions:
    """Parse arguments (sys.argv when None) into GameOptions."""
    namespace = build_parser().parse_args(argv)
    return GameOptions(
        window_width=namespace.window_width,
        window_height=namespace.window_height,
        maze_file=namespace.maze_file,
    )