"""Conway's Game of Life on a bounded board."""

from __future__ import annotations

import random
from enum import Enum
from typing import Iterable, Protocol


class CellState(Enum):
    ALIVE = "alive"
    DEAD = "dead"


class _RandRange(Protocol):
    def randrange(self, stop: int) -> int: ...


def next_state(cell: CellState, neighbors: int) -> CellState:
    """State of a cell in the next generation given its live neighbour count."""
    if cell is CellState.ALIVE:
        return CellState.ALIVE if neighbors in (2, 3) else CellState.DEAD
    return CellState.ALIVE if neighbors == 3 else cell


class LifeBoard:
    """A width x height grid of cells stored row by row; edges do not wrap."""

    def __init__(self, width: int, height: int, cells: Iterable[CellState] | None = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("board dimensions must be positive")
        self.width = width
        self.height = height
        if cells is None:
            self.cells = [CellState.DEAD] * (width * height)
        else:
            self.cells = list(cells)
            if len(self.cells) != width * height:
                raise ValueError("cell count does not match board size")

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) is outside the board")
        return y * self.width + x

    def __getitem__(self, pos: tuple[int, int]) -> CellState:
        return self.cells[self._index(*pos)]

    def __setitem__(self, pos: tuple[int, int], state: CellState) -> None:
        self.cells[self._index(*pos)] = state

    def randomize(self, rng: _RandRange | None = None) -> None:
        """Bring about one cell in five to life; others keep their state."""
        source = rng if rng is not None else random
        self.cells = [
            CellState.ALIVE if source.randrange(5) == 0 else cell for cell in self.cells
        ]

    def neighbors(self, x: int, y: int) -> int:
        """Number of live cells around (x, y), not counting the cell itself."""
        self._index(x, y)
        return sum(
            1
            for j in (-1, 0, 1)
            for i in (-1, 0, 1)
            if (i, j) != (0, 0)
            and 0 <= x + i < self.width
            and 0 <= y + j < self.height
            and self.cells[(y + j) * self.width + x + i] is CellState.ALIVE
        )

    def step(self) -> None:
        """Advance the board by one generation."""
        self.cells = [
            next_state(self.cells[y * self.width + x], self.neighbors(x, y))
            for y in range(self.height)
            for x in range(self.width)
        ]