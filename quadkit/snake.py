"""Grid snake game logic."""

from __future__ import annotations

import random
from collections import deque
from typing import Protocol

SQUARES = 16

Point = tuple[int, int]

UP: Point = (0, -1)
DOWN: Point = (0, 1)
RIGHT: Point = (1, 0)
LEFT: Point = (-1, 0)

_INITIAL_SPEED = 0.3
_FRUIT_SCORE = 100
_SPEEDUP = 0.9


class _RandRange(Protocol):
    def randrange(self, stop: int) -> int: ...


class SnakeGame:
    """State of a snake on a square grid; advance it with step()."""

    def __init__(self, rng: _RandRange | None = None, squares: int = SQUARES) -> None:
        if squares <= 0:
            raise ValueError("grid size must be positive")
        self._rng = rng if rng is not None else random.Random()
        self.squares = squares
        self.reset()

    def _random_fruit(self) -> Point:
        return (self._rng.randrange(self.squares), self._rng.randrange(self.squares))

    def reset(self) -> None:
        """Start a new game."""
        self.head: Point = (0, 0)
        self.direction: Point = RIGHT
        self.body: deque[Point] = deque()
        self.fruit: Point = self._random_fruit()
        self.score = 0
        self.speed = _INITIAL_SPEED
        self.navigation_lock = False
        self.game_over = False

    def turn(self, direction: Point) -> bool:
        """Change direction unless it reverses the snake or a turn is pending."""
        if direction not in (UP, DOWN, LEFT, RIGHT):
            raise ValueError(f"not a direction: {direction!r}")
        opposite = (-direction[0], -direction[1])
        if self.game_over or self.navigation_lock or self.direction == opposite:
            return False
        self.direction = direction
        self.navigation_lock = True
        return True

    def step(self) -> None:
        """Move the snake one square, eating fruit and checking for collisions."""
        if self.game_over:
            return
        self.body.appendleft(self.head)
        self.head = (self.head[0] + self.direction[0], self.head[1] + self.direction[1])
        if self.head == self.fruit:
            self.fruit = self._random_fruit()
            self.score += _FRUIT_SCORE
            self.speed *= _SPEEDUP
        else:
            self.body.pop()

        x, y = self.head
        if not (0 <= x < self.squares and 0 <= y < self.squares):
            self.game_over = True
        if self.head in self.body:
            self.game_over = True
        self.navigation_lock = False