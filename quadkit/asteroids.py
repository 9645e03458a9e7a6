"""Asteroids game logic on a wrapping playfield."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Protocol

from quadkit.geometry import Vec2

SHIP_HEIGHT = 25.0
SHIP_BASE = 22.0

_ASTEROID_COUNT = 10
_FRICTION = 100.0
_THRUST = 3.0
_MAX_SPEED = 5.0
_TURN_STEP = 5.0
_BULLET_SPEED = 7.0
_FIRE_INTERVAL = 0.5
_BULLET_LIFETIME = 1.5
_SPLIT_SCALE = 0.8


class _Random(Protocol):
    def uniform(self, a: float, b: float) -> float: ...

    def randrange(self, start: int, stop: int) -> int: ...


def wrap_around(pos: Vec2, width: float, height: float) -> Vec2:
    """Move a point that left the playfield to the opposite edge."""
    x, y = pos.x, pos.y
    if x > width:
        x = 0.0
    if x < 0.0:
        x = width
    if y > height:
        y = 0.0
    if y < 0.0:
        y = height
    return Vec2(x, y)


@dataclass
class Ship:
    pos: Vec2
    rot: float = 0.0
    vel: Vec2 = Vec2(0.0, 0.0)


@dataclass
class Bullet:
    pos: Vec2
    vel: Vec2
    shot_at: float
    collided: bool = False


@dataclass
class Asteroid:
    pos: Vec2
    vel: Vec2
    rot: float
    rot_speed: float
    size: float
    sides: int
    collided: bool = False


class AsteroidsGame:
    """Ship, bullets and asteroids; advance it with update()."""

    def __init__(
        self, width: float, height: float, rng: _Random | None = None, now: float = 0.0
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("playfield dimensions must be positive")
        self.width = width
        self.height = height
        self._rng = rng if rng is not None else random.Random()
        self.last_shot = now
        self.reset()

    @property
    def center(self) -> Vec2:
        return Vec2(self.width / 2.0, self.height / 2.0)

    @property
    def won(self) -> bool:
        """True once every asteroid has been destroyed."""
        return self.gameover and not self.asteroids

    def reset(self) -> None:
        """Start a new round with a fresh ship and ring of asteroids."""
        self.ship = Ship(pos=self.center)
        self.bullets: list[Bullet] = []
        self.gameover = False
        smaller_side = min(self.width, self.height)
        self.asteroids: list[Asteroid] = [
            Asteroid(
                pos=self.center
                + Vec2(self._rng.uniform(-1.0, 1.0), self._rng.uniform(-1.0, 1.0)).normalize()
                * smaller_side
                / 2.0,
                vel=Vec2(self._rng.uniform(-1.0, 1.0), self._rng.uniform(-1.0, 1.0)),
                rot=0.0,
                rot_speed=self._rng.uniform(-2.0, 2.0),
                size=smaller_side / 10.0,
                sides=self._rng.randrange(3, 8),
            )
            for _ in range(_ASTEROID_COUNT)
        ]

    def _fragment(self, parent: Asteroid, direction: Vec2) -> Asteroid:
        return Asteroid(
            pos=parent.pos,
            vel=direction.normalize() * self._rng.uniform(1.0, 3.0),
            rot=self._rng.uniform(0.0, 360.0),
            rot_speed=self._rng.uniform(-2.0, 2.0),
            size=parent.size * _SPLIT_SCALE,
            sides=parent.sides - 1,
        )

    def update(
        self,
        now: float,
        thrust: bool = False,
        left: bool = False,
        right: bool = False,
        fire: bool = False,
    ) -> None:
        """Advance one frame at time now with the given controls held."""
        if self.gameover:
            return

        ship = self.ship
        rotation = math.radians(ship.rot)
        heading = Vec2(math.sin(rotation), -math.cos(rotation))

        acc = -ship.vel / _FRICTION
        if thrust:
            acc = heading / _THRUST

        if fire and now - self.last_shot > _FIRE_INTERVAL:
            self.bullets.append(
                Bullet(
                    pos=ship.pos + heading * SHIP_HEIGHT / 2.0,
                    vel=heading * _BULLET_SPEED,
                    shot_at=now,
                )
            )
            self.last_shot = now

        if right:
            ship.rot += _TURN_STEP
        elif left:
            ship.rot -= _TURN_STEP

        ship.vel = ship.vel + acc
        if ship.vel.length() > _MAX_SPEED:
            ship.vel = ship.vel.normalize() * _MAX_SPEED
        ship.pos = wrap_around(ship.pos + ship.vel, self.width, self.height)

        for bullet in self.bullets:
            bullet.pos = bullet.pos + bullet.vel

        for asteroid in self.asteroids:
            asteroid.pos = wrap_around(asteroid.pos + asteroid.vel, self.width, self.height)
            asteroid.rot += asteroid.rot_speed

        self.bullets = [b for b in self.bullets if b.shot_at + _BULLET_LIFETIME > now]

        fragments: list[Asteroid] = []
        for asteroid in self.asteroids:
            if (asteroid.pos - ship.pos).length() < asteroid.size + SHIP_HEIGHT / 3.0:
                self.gameover = True
                break

            for bullet in self.bullets:
                if (asteroid.pos - bullet.pos).length() < asteroid.size:
                    asteroid.collided = True
                    bullet.collided = True
                    if asteroid.sides > 3:
                        fragments.append(
                            self._fragment(asteroid, Vec2(bullet.vel.y, -bullet.vel.x))
                        )
                        fragments.append(
                            self._fragment(asteroid, Vec2(-bullet.vel.y, bullet.vel.x))
                        )
                    break

        self.bullets = [
            b for b in self.bullets if b.shot_at + _BULLET_LIFETIME > now and not b.collided
        ]
        self.asteroids = [a for a in self.asteroids if not a.collided]
        self.asteroids.extend(fragments)

        if not self.asteroids:
            self.gameover = True