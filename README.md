# solong

A small top-down puzzle game. You walk a player across a grid map,
pick up every coin, stay away from enemies, and step onto the exit once
all coins are gone.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window. For the tests:

```
pip install .[test]
pytest
```

## Playing

```
solong path/to/level.ber
```

Keys:

| Key    | Action      |
|--------|-------------|
| W      | move up     |
| A      | move left   |
| S      | move down   |
| D      | move right  |
| Escape | quit        |

Closing the window also quits. The number of steps taken is drawn in the
top-left corner. Walking into an enemy ends the game and prints
"Game over" to standard error. Walking onto the exit once every coin has
been collected ends it and prints "Victory". While coins remain, the
player may step onto the exit but cannot move off it again.

The command exits with status 0 when the game ends, and 1 when:

- no argument is given (it prints `DATARKA` to standard error);
- the file name does not end in `.ber` or is only `.ber`;
- the file cannot be opened;
- the map is rejected (the reason goes to standard error);
- a required sprite is missing.

### Sprites

Sprites are loaded from an `image/` directory in the current working
directory. For each sprite, the files `<name>.xpm`, `<name>.png` and
`<name>.bmp` are tried in that order. Required: `grass`, `wall`, `plaer`
(player), `mario` (coin), `exit` and `opponent` (enemy). Optional:
`Manimation` and `Fanimation`, the second animation frame for coins and
enemies; without them the still frame is used. Tiles are 60 by 60 pixels.

The package does not ship any sprite images; supply your own `image/`
directory.

## Map files

A map is a plain-text file whose name ends in `.ber`. Each line is one
row of tiles:

| Char | Tile                    |
|------|-------------------------|
| `1`  | wall                    |
| `0`  | floor                   |
| `P`  | player start            |
| `E`  | exit                    |
| `C`  | coin (collectible)      |
| `F`  | enemy                   |

A map is accepted only if:

- the file is not empty;
- it has no blank lines inside it, no line inside it starts with
  whitespace, and no space or tab stands in front of the first wall;
- every row has the same length;
- the map is closed in by walls on all four sides;
- it uses no characters other than the ones above;
- it has one or two players, one or two exits, and at least one coin;
- every player, coin and exit can be reached from the first player
  without passing through walls or enemies.

Example:

```
1111111
1P0C0E1
1111111
```

## Using it as a library

```python
from solong.validation import load_map, parse_map, MapError
from solong.game import Game, Direction, Outcome

grid = parse_map("1111111\n1P0C0E1\n1111111\n")
game = Game(grid)
outcome = game.move(Direction.RIGHT)   # Outcome.MOVED
print(game.remaining_coins())          # 1
print(game.steps)                      # 1
```

- `solong.validation`: `parse_map(text)` and `load_map(path)` return the
  map as a list of row strings and raise `MapError` (a `ValueError`) when
  it is invalid. The individual checks (`check_spacing`,
  `check_blank_lines`, `check_row_lengths`, `check_walls`,
  `check_symbols`, `check_player_exit`, `check_collectibles`,
  `check_contents`, `check_reachable`) and `find_player` are available on
  their own.
- `solong.game`: `Game(grid)` holds the state. `Game.move(direction)`
  returns an `Outcome`: `MOVED`, `BLOCKED`, `WON` or `LOST`; moving after
  the game has finished raises `RuntimeError`. `Game.quit()` returns
  `Outcome.QUIT`. `Game.rows` gives the current map, `Game.player` the
  player's (row, column), `Game.steps` the step count. `map_size(grid)`
  returns (width, height) in cells.
- `solong.render`: `run(grid, image_dir)` opens the window and plays
  until the game finishes, returning the final `Outcome`.
  `load_sprites(directory)`, `sprite_name(cell, tick)`,
  `direction_for_key(key)` and `draw_frame(surface, game, sprites, tick)`
  are the pieces it is built from.
- `solong.cli`: `main(argv=None)` is the `solong` command.