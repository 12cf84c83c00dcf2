from slimemaze.app import LEVEL_PATHS, create_state, main, starting_level
from slimemaze.cmdline import GameOptions
from slimemaze.maze import MAX_LIVES

FIRST = "3 3\n1 1 1\n1 0 1\n1 1 1\n"
SECOND = "4 3\n1 1 1 1\n1 1 0 1\n1 1 1 1\n"


def write_levels(tmp_path):
    first = tmp_path / "level0"
    second = tmp_path / "level1"
    first.write_text(FIRST)
    second.write_text(SECOND)
    return [str(first), str(second)]


def test_starting_level_finds_path():
    paths = ["a", "b", "c"]
    assert starting_level(paths, "b") == 1
    assert starting_level(paths, "c") == 2


def test_starting_level_defaults_to_first():
    assert starting_level(["a", "b"], "elsewhere") == 0
    assert starting_level([], "a") == 0


def test_starting_level_of_default_maze_file():
    assert starting_level(LEVEL_PATHS, GameOptions().maze_file) == 0


def test_create_state_starts_at_named_level(tmp_path):
    paths = write_levels(tmp_path)
    state = create_state(GameOptions(maze_file=paths[1]), paths)
    assert state.current_level == 1
    assert state.maze.width == 4
    assert state.player.cell() == (2, 1)
    assert state.player.lives == MAX_LIVES
    assert state.elapsed_time == 0.0
    assert state.num_levels == 2


def test_create_state_unknown_file_uses_first_level(tmp_path):
    paths = write_levels(tmp_path)
    state = create_state(GameOptions(maze_file=str(tmp_path / "nope")), paths)
    assert state.current_level == 0
    assert state.player.cell() == (1, 1)


def test_main_reports_missing_maze(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    status = main(["-m", "missing", "-w", "800"])
    captured = capsys.readouterr()
    assert status == 1
    assert "Starting with level: missing" in captured.out
    assert "window_width  = 800" in captured.out
    assert "cannot open maze file" in captured.err