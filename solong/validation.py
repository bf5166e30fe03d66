"""Reading and validating map files.

A map is a rectangle of cells drawn from ``1`` (wall), ``0`` (floor),
``P`` (player), ``E`` (exit), ``C`` (collectible) and ``F`` (enemy).
The map must be closed by walls. It needs at least one collectible and
one to two players and exits. Every player, exit and collectible must
be reachable from the first player without walking through walls or
enemies.
"""

from __future__ import annotations

import os
from collections.abc import Sequence

WHITESPACE = "\t\n\v\f\r "
SYMBOLS = frozenset("10PECF")
PASSABLE = frozenset("P0CE")
MUST_REACH = frozenset("PCE")


class MapError(ValueError):
    """Raised when a map file or grid is not a playable map."""


def check_spacing(text: str) -> None:
    """Reject a wall preceded by a space or tab before the first line break that precedes a wall."""
    for current, following in zip(text, text[1:]):
        if current in " \t\n" and following == "1":
            if current != "\n":
                raise MapError("Whitespace in front of a wall")
            return


def check_blank_lines(text: str) -> None:
    """Reject empty lines and lines starting with whitespace inside the map."""
    body = text.strip(WHITESPACE)
    for current, following in zip(body, body[1:]):
        if current == "\n" and following in " \t\n":
            raise MapError("Empty line or leading whitespace inside the map")


def check_row_lengths(grid: Sequence[str]) -> None:
    """Require every row to be as long as the first one."""
    if not grid:
        return
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise MapError("The lines don't match")


def check_walls(grid: Sequence[str]) -> None:
    """Require the map to be enclosed by walls."""
    last = len(grid) - 1
    for index, row in enumerate(grid):
        if not row or row[0] != "1":
            raise MapError("A row does not begin with a wall")
        if row[-1] != "1":
            raise MapError("A row does not end with a wall")
        if index in (0, last) and any(cell != "1" for cell in row):
            raise MapError("The boundary row is not all walls")


def check_symbols(grid: Sequence[str]) -> None:
    """Reject cells that are not one of the known symbols."""
    for row in grid:
        for cell in row:
            if cell not in SYMBOLS:
                raise MapError(f"The symbols are wrong: {cell!r}")


def check_player_exit(grid: Sequence[str]) -> None:
    """Require one or two players and one or two exits."""
    cells = "".join(grid)
    players = cells.count("P")
    exits = cells.count("E")
    if players > 2 or exits > 2:
        raise MapError("Too many players or exits")
    if players == 0 or exits == 0:
        raise MapError("The map needs a player and an exit")


def check_collectibles(grid: Sequence[str]) -> None:
    """Require at least one collectible."""
    if not any("C" in row for row in grid):
        raise MapError("The map has no collectibles")


def check_contents(grid: Sequence[str]) -> None:
    """Check symbols, players and exits, and collectibles, in that order."""
    check_symbols(grid)
    check_player_exit(grid)
    check_collectibles(grid)


def find_player(grid: Sequence[str]) -> tuple[int, int]:
    """Return (row, column) of the first player in reading order."""
    for row_index, row in enumerate(grid):
        column = row.find("P")
        if column >= 0:
            return row_index, column
    raise MapError("The map has no player")


def check_reachable(grid: Sequence[str]) -> None:
    """Require every player, exit and collectible to be reachable from the first player."""
    height = len(grid)
    width = len(grid[0]) if grid else 0
    start = find_player(grid)
    seen: set[tuple[int, int]] = set()
    stack = [start]
    while stack:
        row, column = stack.pop()
        if (row, column) in seen:
            continue
        if not (0 <= row < height and 0 <= column < width):
            continue
        if column >= len(grid[row]) or grid[row][column] not in PASSABLE:
            continue
        seen.add((row, column))
        stack.extend(
            [
                (row - 1, column),
                (row + 1, column),
                (row, column - 1),
                (row, column + 1),
            ]
        )
    for row_index, row in enumerate(grid):
        for column, cell in enumerate(row):
            if cell in MUST_REACH and (row_index, column) not in seen:
                raise MapError("CANT WIN! Not everything can be reached")


def parse_map(text: str) -> list[str]:
    """Validate the text of a map and return its rows."""
    if not text:
        raise MapError("There is nothing in the file")
    check_spacing(text)
    check_blank_lines(text)
    body = text.strip(WHITESPACE)
    grid = [line.strip(WHITESPACE) for line in body.split("\n") if line]
    check_row_lengths(grid)
    check_walls(grid)
    check_contents(grid)
    check_reachable(grid)
    return grid


def load_map(path: str | os.PathLike[str]) -> list[str]:
    """Read a map file and return its validated rows."""
    with open(path, encoding="utf-8", newline="") as handle:
        text = handle.read()
    return parse_map(text)