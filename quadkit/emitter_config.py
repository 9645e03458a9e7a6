"""Configuration of particle emitters: shapes, blending, atlases and defaults."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from quadkit.curve import ColorCurve, Curve
from quadkit.geometry import Vec2

_EMISSION_KINDS = frozenset({"point", "rect", "sphere"})
_PARTICLE_KINDS = frozenset({"rectangle", "circle", "custom_mesh"})

# Nine floats per vertex: position (3), uv (2), colour (4).
_VERTEX_STRIDE = 9


class _Uniform(Protocol):
    def uniform(self, a: float, b: float) -> float: ...


@dataclass(frozen=True)
class EmissionShape:
    """Region particles are spawned in: a point, a rectangle or a disc."""

    kind: str = "point"
    width: float = 0.0
    height: float = 0.0
    radius: float = 0.0

    def __post_init__(self) -> None:
        if self.kind not in _EMISSION_KINDS:
            raise ValueError(f"unknown emission shape: {self.kind!r}")

    def random_point(self, rng: _Uniform | None = None) -> Vec2:
        """A random offset inside the shape, relative to the emitter."""
        source = rng if rng is not None else random
        if self.kind == "point":
            return Vec2(0.0, 0.0)
        if self.kind == "rect":
            return Vec2(
                source.uniform(-self.width / 2.0, self.width / 2.0),
                source.uniform(-self.height / 2.0, self.height / 2.0),
            )
        ro = math.sqrt(source.uniform(0.0, self.radius * self.radius))
        phi = source.uniform(0.0, math.pi * 2.0)
        return Vec2(ro * math.cos(phi), ro * math.sin(phi))


class BlendMode(Enum):
    """How overlapping particles are combined."""

    ALPHA = "alpha"
    ADDITIVE = "additive"


@dataclass(frozen=True)
class ParticleShape:
    """Mesh of a single particle: a rectangle, a circle fan or a custom mesh."""

    kind: str = "rectangle"
    aspect_ratio: float = 1.0
    subdivisions: int = 0
    vertices: tuple[float, ...] = ()
    indices: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        if self.kind not in _PARTICLE_KINDS:
            raise ValueError(f"unknown particle shape: {self.kind!r}")

    def geometry(self) -> tuple[list[float], list[int]]:
        """Vertex data (position, uv, colour per vertex) and triangle indices."""
        if self.kind == "rectangle":
            a = self.aspect_ratio
            vertices = [
                -a, -1.0, 0.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0,
                a, -1.0, 0.0, 1.0, 0.0, 1.0, 1.0, 1.0, 1.0,
                a, 1.0, 0.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
                -a, 1.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0, 1.0,
            ]
            return vertices, [0, 1, 2, 0, 2, 3]

        if self.kind == "circle":
            if self.subdivisions <= 0:
                raise ValueError("a circle needs at least one subdivision")
            vertices = [0.0, 0.0, 0.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0]
            indices: list[int] = []
            for i in range(self.subdivisions + 1):
                angle = i / self.subdivisions * math.pi * 2.0
                rx, ry = math.cos(angle), math.sin(angle)
                vertices.extend((rx, ry, 0.0, rx, ry, 1.0, 1.0, 1.0, 1.0))
                if i != self.subdivisions:
                    indices.extend((0, i + 1, i + 2))
            return vertices, indices

        return list(self.vertices), list(self.indices)


@dataclass(frozen=True)
class AtlasConfig:
    """Sprite-sheet layout of n columns by m rows, animated over a frame range."""

    n: int
    m: int
    start_index: int
    end_index: int

    def __post_init__(self) -> None:
        if self.n <= 0 or self.m <= 0:
            raise ValueError("atlas dimensions must be positive")

    @classmethod
    def from_range(
        cls,
        n: int,
        m: int,
        start: int | None = None,
        stop: int | None = None,
        inclusive: bool = False,
    ) -> AtlasConfig:
        """Build from a frame range; an open stop runs to the last frame.

        An inclusive stop is stored as stop - 1.
        """
        start_index = 0 if start is None else start
        if stop is None:
            end_index = n * m
        elif inclusive:
            end_index = stop - 1
        else:
            end_index = stop
        return cls(n, m, start_index, end_index)

    def frame_uv(self, frame: int) -> tuple[float, float, float, float]:
        """Texture rectangle (u, v, width, height) of a frame."""
        x = frame % self.n
        y = frame // self.n
        return (x / self.n, y / self.m, 1.0 / self.n, 1.0 / self.m)


@dataclass(frozen=True)
class ParticleMaterial:
    """Custom vertex and fragment shader sources for particles."""

    vertex: str
    fragment: str


@dataclass(frozen=True)
class PostProcessing:
    """Marker requesting particles be rendered to an offscreen target first."""


@dataclass
class EmitterConfig:
    """All the parameters that shape an emitter's particles."""

    local_coords: bool = False
    emission_shape: EmissionShape = field(default_factory=EmissionShape)
    one_shot: bool = False
    lifetime: float = 1.0
    lifetime_randomness: float = 0.0
    explosiveness: float = 0.0
    amount: int = 8
    shape: ParticleShape = field(default_factory=ParticleShape)
    emitting: bool = True
    initial_direction: Vec2 = Vec2(0.0, -1.0)
    initial_direction_spread: float = 0.0
    initial_velocity: float = 50.0
    initial_velocity_randomness: float = 0.0
    linear_accel: float = 0.0
    initial_rotation: float = 0.0
    initial_rotation_randomness: float = 0.0
    initial_angular_velocity: float = 0.0
    initial_angular_velocity_randomness: float = 0.0
    angular_accel: float = 0.0
    angular_damping: float = 0.0
    size: float = 10.0
    size_randomness: float = 0.0
    size_curve: Curve | None = None
    blend_mode: BlendMode = BlendMode.ALPHA
    colors_curve: ColorCurve = field(default_factory=ColorCurve)
    gravity: Vec2 = Vec2(0.0, 0.0)
    atlas: AtlasConfig | None = None
    material: ParticleMaterial | None = None
    post_processing: PostProcessing | None = None