"""Game state and movement rules for a validated map."""

from __future__ import annotations

import enum
from collections.abc import Sequence

from solong.validation import find_player


class Direction(enum.Enum):
    """A step on the grid as (row offset, column offset)."""

    UP = (-1, 0)
    LEFT = (0, -1)
    DOWN = (1, 0)
    RIGHT = (0, 1)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value


class Outcome(enum.Enum):
    """The result of an action; finishing outcomes carry their message."""

    MOVED = "moved"
    BLOCKED = "blocked"
    WON = "Victory"
    LOST = "Game over"
    QUIT = "quit"

    @property
    def finishes(self) -> bool:
        return self in (Outcome.WON, Outcome.LOST, Outcome.QUIT)


def map_size(grid: Sequence[str]) -> tuple[int, int]:
    """Return (width, height) of a grid in cells."""
    if not grid or not grid[0]:
        raise ValueError("The map is empty")
    width = 0
    for row in grid:
        width = max(width, len(row))
    return width, len(grid)


def _last_exit(cells: list[list[str]]) -> tuple[int, int] | None:
    found = None
    for row_index, row in enumerate(cells):
        for column, cell in enumerate(row):
            if cell == "E":
                found = (row_index, column)
    return found


class Game:
    """A running game on a mutable copy of a map."""

    def __init__(self, grid: Sequence[str]) -> None:
        self._cells = [list(row) for row in grid]
        self.player = find_player(grid)
        self.exit = _last_exit(self._cells)
        self.steps = 0
        self.outcome: Outcome | None = None

    @property
    def rows(self) -> list[str]:
        """The current map as strings."""
        return ["".join(row) for row in self._cells]

    @property
    def finished(self) -> bool:
        return self.outcome is not None

    def _cell(self, row: int, column: int) -> str | None:
        if 0 <= row < len(self._cells) and 0 <= column < len(self._cells[row]):
            return self._cells[row][column]
        return None

    def remaining_coins(self) -> int:
        """Count the collectibles still on the map."""
        return sum(row.count("C") for row in self._cells)

    def _finish(self, outcome: Outcome) -> Outcome:
        self.outcome = outcome
        return outcome

    def move(self, direction: Direction) -> Outcome:
        """Try to move the player one cell and report what happened."""
        if self.finished:
            raise RuntimeError("The game is over")
        row, column = self.player
        d_row, d_column = direction.delta
        new_row, new_column = row + d_row, column + d_column
        target = self._cell(new_row, new_column)
        if target is None or target == "1":
            return Outcome.BLOCKED
        if target == "F":
            return self._finish(Outcome.LOST)
        if self.remaining_coins() == 0:
            if target == "E":
                return self._finish(Outcome.WON)
        elif self._cells[row][column] == "E":
            return Outcome.BLOCKED
        self.steps += 1
        self._cells[row][column] = "0"
        if self.exit is not None:
            exit_row, exit_column = self.exit
            self._cells[exit_row][exit_column] = "E"
        self._cells[new_row][new_column] = "P"
        self.player = (new_row, new_column)
        visible_exit = _last_exit(self._cells)
        if visible_exit is not None:
            self.exit = visible_exit
        return Outcome.MOVED

    def quit(self) -> Outcome:
        """End the game at the player's request."""
        return self._finish(Outcome.QUIT)