import pytest

from slimemaze.maze import CELL_SIZE, CellType, Maze, MazeError

LEVEL = """5 5
1 1 1 1 1
1 0 3 0 1
1 2 0 3 1
1 0 0 0 4
1 1 1 1 1
"""


def center(cx, cy):
    return cx * CELL_SIZE + CELL_SIZE / 2, cy * CELL_SIZE + CELL_SIZE / 2


def test_dimensions_and_door():
    maze = Maze.from_text(LEVEL)
    assert (maze.width, maze.height) == (5, 5)
    assert maze.door == (4, 3)
    assert maze.current[3][4] == CellType.DOOR


def test_scan_counts():
    maze = Maze.from_text(LEVEL)
    assert maze.scan_plates() == 2
    assert maze.scan_traps() == 1
    assert len(maze.plates) == maze.scan_plates()
    assert len(maze.traps) == maze.scan_traps()


def test_plates_hidden_except_first():
    maze = Maze.from_text(LEVEL)
    assert [(p.x, p.y) for p in maze.plates] == [(2, 1), (3, 2)]
    assert maze.plates[0].visible and not maze.plates[1].visible
    assert maze.current[1][2] == CellType.PLATE
    assert maze.current[2][3] == CellType.EMPTY
    assert maze.original[2][3] == CellType.PLATE


def test_traps_hidden():
    maze = Maze.from_text(LEVEL)
    assert [(t.x, t.y) for t in maze.traps] == [(1, 2)]
    assert maze.current[2][1] == CellType.EMPTY
    assert not maze.traps[0].revealed and not maze.traps[0].triggered


def test_no_door():
    maze = Maze.from_text("2 1\n0 1")
    assert maze.door is None


def test_reset_restores_state():
    fresh = Maze.from_text(LEVEL)
    maze = Maze.from_text(LEVEL)
    maze.current[1][1] = CellType.WALL
    maze.current[3][4] = CellType.EMPTY
    maze.plates[0].pressed = True
    maze.traps[0].revealed = True
    maze.reset()
    assert maze.current == fresh.current
    assert maze.plates == fresh.plates
    assert maze.traps == fresh.traps


@pytest.mark.parametrize(
    "text",
    ["", "3", "a b", "2 2\n0 0 0", "2 2\n0 x 0 0", "0 3", "3 -1"],
)
def test_bad_text_raises(text):
    with pytest.raises(MazeError):
        Maze.from_text(text)


def test_load_missing_file(tmp_path):
    with pytest.raises(MazeError):
        Maze.load(tmp_path / "missing")


def test_load_matches_text(tmp_path):
    path = tmp_path / "level0"
    path.write_text(LEVEL)
    loaded = Maze.load(path)
    parsed = Maze.from_text(LEVEL)
    assert loaded.original == parsed.original
    assert loaded.current == parsed.current


def test_no_collision_in_open_cell():
    maze = Maze.from_text(LEVEL)
    assert maze.is_wall_collision(*center(1, 1)) is False


def test_collision_with_wall():
    maze = Maze.from_text(LEVEL)
    _, y = center(1, 1)
    assert maze.is_wall_collision(CELL_SIZE + 4, y) is True


def test_collision_outside_maze():
    maze = Maze.from_text(LEVEL)
    assert maze.is_wall_collision(-CELL_SIZE, -CELL_SIZE) is True
    assert maze.is_wall_collision(CELL_SIZE * 10, CELL_SIZE * 10) is True


def test_door_blocks_until_opened():
    maze = Maze.from_text(LEVEL)
    _, y = center(3, 3)
    x = 4 * CELL_SIZE - 4
    assert maze.is_wall_collision(x, y) is True
    maze.current[3][4] = CellType.EMPTY
    assert maze.is_wall_collision(x, y) is False