"""Particle emitters: spawning, integrating and retiring particles over time."""

from __future__ import annotations

import copy
import math
import random
from dataclasses import dataclass, field
from typing import Protocol

from quadkit.curve import BatchedCurve
from quadkit.emitter_config import EmitterConfig
from quadkit.geometry import Vec2

MAX_PARTICLES = 10000
CACHE_DEFAULT_SIZE = 10

# Below this gap between emissions the whole cycle is emitted at once.
_MIN_GAP = 0.001


class _Uniform(Protocol):
    def uniform(self, a: float, b: float) -> float: ...


@dataclass
class Particle:
    """One live particle: its drawable state and its motion."""

    x: float
    y: float
    rotation: float
    size: float
    index: float
    color: tuple[float, float, float, float]
    velocity: Vec2
    angular_velocity: float
    lifetime: float
    initial_size: float
    uv: tuple[float, float, float, float] = (1.0, 1.0, 0.0, 0.0)
    age: float = 0.0
    lived: float = 0.0
    frame: int = 0


def _life_fraction(lived: float, lifetime: float) -> float:
    if lifetime != 0.0:
        return lived / lifetime
    return math.nan if lived == 0.0 else math.copysign(math.inf, lived)


def _rotate(direction: Vec2, angle: float) -> Vec2:
    cos, sin = math.cos(angle), math.sin(angle)
    return Vec2(direction.x * cos - direction.y * sin, direction.x * sin + direction.y * cos)


class Emitter:
    """Emits and simulates particles according to an EmitterConfig."""

    def __init__(self, config: EmitterConfig | None = None, rng: _Uniform | None = None) -> None:
        self.config = config if config is not None else EmitterConfig()
        self._rng = rng if rng is not None else random.Random()
        self.particles: list[Particle] = []
        self.position = Vec2(0.0, 0.0)
        self.particles_spawned = 0
        self._last_emit_time = 0.0
        self._time_passed = 0.0
        self._particles_current_cycle = 0
        self._size_curve: BatchedCurve | None = None
        self.rebuild_size_curve()

    def reset(self) -> None:
        """Drop all particles and restart the emission cycle."""
        self.particles.clear()
        self._last_emit_time = 0.0
        self._time_passed = 0.0
        self.particles_spawned = 0
        self._particles_current_cycle = 0

    def rebuild_size_curve(self) -> None:
        """Resample the size curve after the config's size_curve changed."""
        curve = self.config.size_curve
        self._size_curve = curve.batch() if curve is not None else None

    def _random_fraction(self, randomness: float) -> float:
        return self._rng.uniform(0.0, randomness)

    def _emit_particle(self, offset: Vec2) -> None:
        cfg = self.config
        offset = offset + cfg.emission_shape.random_point(self._rng)

        size = cfg.size - cfg.size * self._random_fraction(cfg.size_randomness)
        rotation = cfg.initial_rotation - cfg.initial_rotation * self._random_fraction(
            cfg.initial_rotation_randomness
        )
        origin = offset if cfg.local_coords else self.position + offset

        spread = cfg.initial_direction_spread
        angle = self._rng.uniform(-spread / 2.0, spread / 2.0)
        speed = cfg.initial_velocity - cfg.initial_velocity * self._random_fraction(
            cfg.initial_velocity_randomness
        )
        velocity = _rotate(cfg.initial_direction, angle) * speed
        angular_velocity = cfg.initial_angular_velocity - (
            cfg.initial_angular_velocity
            * self._random_fraction(cfg.initial_angular_velocity_randomness)
        )
        lifetime = cfg.lifetime - cfg.lifetime * self._random_fraction(cfg.lifetime_randomness)

        self.particles.append(
            Particle(
                x=origin.x,
                y=origin.y,
                rotation=rotation,
                size=size,
                index=float(self.particles_spawned),
                color=cfg.colors_curve.start.to_vec(),
                velocity=velocity,
                angular_velocity=angular_velocity,
                lifetime=lifetime,
                initial_size=size,
            )
        )
        self.particles_spawned += 1
        self._particles_current_cycle += 1

    def emit(self, pos: Vec2, n: int) -> None:
        """Emit n particles at once, ignoring the emitting flag and amount."""
        for _ in range(n):
            self._emit_particle(pos)
            self.particles_spawned += 1

    def _spawn(self, dt: float) -> None:
        cfg = self.config
        self._time_passed += dt
        if cfg.amount <= 0:
            return

        gap = (cfg.lifetime / cfg.amount) * (1.0 - cfg.explosiveness)
        if gap < _MIN_GAP:
            spawn_amount = cfg.amount
        else:
            spawn_amount = max(0, int((self._time_passed - self._last_emit_time) / gap))

        for _ in range(spawn_amount):
            self._last_emit_time = self._time_passed
            if self.particles_spawned < cfg.amount:
                self._emit_particle(Vec2(0.0, 0.0))
            if len(self.particles) >= cfg.amount:
                break

    def _advance_particle(self, particle: Particle, dt: float) -> None:
        cfg = self.config
        particle.velocity = particle.velocity + particle.velocity * (cfg.linear_accel * dt)
        particle.angular_velocity += particle.angular_velocity * cfg.angular_accel * dt
        particle.angular_velocity *= 1.0 - cfg.angular_damping

        fraction = _life_fraction(particle.lived, particle.lifetime)
        particle.color = cfg.colors_curve.at(fraction)
        particle.x += particle.velocity.x * dt
        particle.y += particle.velocity.y * dt
        particle.rotation += particle.angular_velocity * dt

        scale = self._size_curve.get(fraction) if self._size_curve is not None else 1.0
        particle.size = particle.initial_size * scale

        if particle.lifetime != 0.0:
            particle.age = particle.lived / particle.lifetime

        particle.lived += dt
        particle.velocity = particle.velocity + cfg.gravity * dt

        atlas = cfg.atlas
        if atlas is not None:
            if particle.lifetime != 0.0:
                span = atlas.end_index - atlas.start_index
                frame = int(particle.lived / particle.lifetime * span) + atlas.start_index
                particle.frame = max(0, frame)
            particle.uv = atlas.frame_uv(particle.frame)
        else:
            particle.uv = (0.0, 0.0, 1.0, 1.0)

    def update(self, pos: Vec2, dt: float) -> None:
        """Place the emitter at pos and advance the simulation by dt seconds."""
        self.position = pos
        cfg = self.config

        if cfg.emitting:
            self._spawn(dt)

        if cfg.one_shot and self._particles_current_cycle >= cfg.amount:
            self._time_passed = 0.0
            self._last_emit_time = 0.0
            self._particles_current_cycle = 0
            cfg.emitting = False

        for particle in self.particles:
            self._advance_particle(particle, dt)

        survivors: list[Particle] = []
        for particle in self.particles:
            if particle.lived >= particle.lifetime or particle.lived > cfg.lifetime:
                if particle.lived != particle.lifetime:
                    self.particles_spawned = max(0, self.particles_spawned - 1)
            else:
                survivors.append(particle)
        self.particles = survivors


class EmittersCache:
    """A pool of emitters sharing one config, reused as their bursts end."""

    def __init__(self, config: EmitterConfig, rng: _Uniform | None = None) -> None:
        self.config = config
        self._rng = rng if rng is not None else random.Random()
        self._cache: list[Emitter] = []
        for _ in range(CACHE_DEFAULT_SIZE):
            idle = copy.deepcopy(config)
            idle.emitting = False
            self._cache.append(Emitter(idle, self._rng))
        self._active: list[tuple[Emitter, Vec2]] = []

    @property
    def active_count(self) -> int:
        return len(self._active)

    @property
    def cached_count(self) -> int:
        return len(self._cache)

    @property
    def active(self) -> list[tuple[Emitter, Vec2]]:
        """Running emitters with their positions."""
        return list(self._active)

    def spawn(self, pos: Vec2) -> Emitter:
        """Start an emitter at pos, reusing a cached one when available."""
        if self._cache:
            emitter = self._cache.pop()
        else:
            emitter = Emitter(copy.deepcopy(self.config), self._rng)
        emitter.config.emitting = True
        emitter.reset()
        self._active.append((emitter, pos))
        return emitter

    def update(self, dt: float) -> None:
        """Advance every active emitter; those done emitting return to the cache."""
        still_active: list[tuple[Emitter, Vec2]] = []
        for emitter, pos in self._active:
            emitter.update(pos, dt)
            if emitter.config.emitting:
                still_active.append((emitter, pos))
            else:
                self._cache.append(emitter)
        self._active = still_active