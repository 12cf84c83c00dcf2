# slimemaze

A small maze game built on pygame. You steer a slime through a grid of walls
towards a locked door. Pressure plates appear one at a time; stepping on each
one shows the next, and pressing the last one opens the door. Traps stay
hidden until you come within 48 world units of them, and each revealed trap
you walk into costs one of your three lives. Every level has a two-minute
time limit, shown at the top of the window next to your remaining lives.

## Installing

```
pip install .
```

## Playing

```
slimemaze
slimemaze --width 1200 --height 660 --maze ../maps/level0
```

Options:

- `-w`, `--width WIDTH`: window width (default 1200)
- `-h`, `--height HEIGHT`: window height (default 660)
- `-m`, `--maze FILE`: level file to start from (default `../maps/level0`)
- `-?`, `--help`: show the option summary (`-h` is the window height)

Levels are read from `../maps/level0` to `../maps/level5`, relative to the
working directory. If `--maze` names one of those paths, play starts at that
level; otherwise it starts at `../maps/level0`. Walking through the open door
loads the next level; doing so on the last level ends the game.

Controls:

- `W` `A` `S` `D`: move
- `Esc`: pause menu: `C` or `Enter` continues, `R` restarts the level,
  `Q` quits, `Esc` closes the menu and continues
- `Enter`: restart the level after losing all lives

When the time runs out the game-over screen is shown, but the player keeps
moving; restart the level from the pause menu.

The sprite sheet is loaded from `../assets/slime.png` and the game-over
picture from `../assets/scare.png`. Without the sprite sheet the player is
not drawn; without the picture the game-over text is drawn on its own.

## What is not included

The package ships no level files and no images. The game needs level files
at the paths above to start, and it exits with an error message when the
starting level cannot be read.

## Level files

A level is a text file of whitespace-separated integers: first the width and
height, then `width * height` cell codes, row by row.

| Code | Cell           |
|------|----------------|
| 0    | empty floor    |
| 1    | wall           |
| 2    | trap           |
| 3    | pressure plate |
| 4    | door           |

Plates are activated in reading order (left to right, top to bottom). The
player starts in the first empty cell in that order.

## Using the game logic

The rules can be driven without a window:

```python
from slimemaze.maze import Maze
from slimemaze.player import Player
from slimemaze.game_logic import GameState
from slimemaze import controls

maze = Maze.from_text("3 3\n1 1 1\n1 0 1\n1 1 1")  # or Maze.load(path)
player = Player()
player.spawn(maze)
state = GameState(maze=maze, player=player, level_paths=["level0"])

controls.key_press(state, ord("d"))
controls.update(state, 1 / 60)
```

`slimemaze.controls.update(state, dt)` advances a `GameState` by one frame:
movement, trap reveal and triggering, plates and level transitions. It
raises `slimemaze.game_logic.GameFinished` when the door of the last level
is reached. A badly formed level raises `slimemaze.maze.MazeError`.

## Running the tests

```
pip install .[test]
pytest
```