"""Brick-breaker game logic in a 20 x 20 world."""

from __future__ import annotations

from quadkit.geometry import Rect

BLOCKS_W = 10
BLOCKS_H = 10
SCR_W = 20.0
SCR_H = 20.0

_PLATFORM_SPEED = 3.0
_BLOCKS_AREA_HEIGHT = 7.0
_BLOCK_GAP = 0.05


class Arkanoid:
    """Ball, paddle and a grid of blocks; advance it with update()."""

    def __init__(self) -> None:
        self.blocks = [[True] * BLOCKS_W for _ in range(BLOCKS_H)]
        self.ball_x = 12.0
        self.ball_y = 7.0
        self.dx = 3.5
        self.dy = -3.5
        self.platform_x = 10.0
        self.stick = True
        self.platform_width = 5.0
        self.platform_height = 0.2

    @staticmethod
    def _block_rect(i: int, j: int) -> Rect:
        block_w = SCR_W / BLOCKS_W
        block_h = _BLOCKS_AREA_HEIGHT / BLOCKS_H
        return Rect(i * block_w + _BLOCK_GAP, j * block_h + _BLOCK_GAP, block_w, block_h)

    def remaining_blocks(self) -> int:
        """Number of blocks not yet destroyed."""
        return sum(row.count(True) for row in self.blocks)

    def update(self, dt: float, left: bool = False, right: bool = False, launch: bool = False) -> None:
        """Advance by dt seconds with the given controls held."""
        half_platform = self.platform_width / 2.0
        if right and self.platform_x < SCR_W - half_platform:
            self.platform_x += _PLATFORM_SPEED * dt
        if left and self.platform_x > half_platform:
            self.platform_x -= _PLATFORM_SPEED * dt

        if not self.stick:
            self.ball_x += self.dx * dt
            self.ball_y += self.dy * dt
        else:
            self.ball_x = self.platform_x
            self.ball_y = SCR_H - 0.5
            self.stick = not launch

        if self.ball_x <= 0.0 or self.ball_x > SCR_W:
            self.dx = -self.dx

        on_platform = (
            self.ball_y > SCR_H - self.platform_height - 0.15 / 2.0
            and self.platform_x - half_platform <= self.ball_x <= self.platform_x + half_platform
        )
        if self.ball_y <= 0.0 or on_platform:
            self.dy = -self.dy

        if self.ball_y >= SCR_H:
            self.ball_y = 10.0
            self.dy = -abs(self.dy)
            self.stick = True

        for j, row in enumerate(self.blocks):
            for i, alive in enumerate(row):
                if not alive:
                    continue
                block = self._block_rect(i, j)
                if (
                    block.left <= self.ball_x < block.right
                    and block.top <= self.ball_y < block.bottom
                ):
                    self.dy = -self.dy
                    row[i] = False