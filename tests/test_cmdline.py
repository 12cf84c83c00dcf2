import pytest

from slimemaze.cmdline import GameOptions, build_parser, parse_args
from slimemaze.maze import WINDOW_HEIGHT, WINDOW_WIDTH


def test_defaults():
    options = parse_args([])
    assert options == GameOptions(WINDOW_WIDTH, WINDOW_HEIGHT, "../maps/level0")


def test_short_options():
    options = parse_args(["-w", "800", "-h", "600", "-m", "maps/custom"])
    assert options.window_width == 800
    assert options.window_height == 600
    assert options.maze_file == "maps/custom"


def test_long_options():
    options = parse_args(["--width=640", "--height", "480", "--maze", "other"])
    assert (options.window_width, options.window_height, options.maze_file) == (640, 480, "other")


def test_non_numeric_width_is_zero():
    assert parse_args(["-w", "abc"]).window_width == 0


def test_leading_digits_are_used():
    assert parse_args(["-h", "12px"]).window_height == 12


def test_unknown_option_exits():
    with pytest.raises(SystemExit):
        parse_args(["--speed", "3"])


def test_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["--help"])
    assert excinfo.value.code == 0
    assert "--maze" in capsys.readouterr().out