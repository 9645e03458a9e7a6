"""Key-point curves sampled into lookup tables, and colour gradients."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Interpolation(Enum):
    """How a curve is filled in between its key points."""

    LINEAR = "linear"
    BEZIER = "bezier"


@dataclass(frozen=True)
class Color:
    """An RGBA colour with channels in the 0..1 range."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def to_vec(self) -> tuple[float, float, float, float]:
        """The channels as an (r, g, b, a) tuple."""
        return (self.r, self.g, self.b, self.a)


WHITE = Color(1.0, 1.0, 1.0, 1.0)


@dataclass
class BatchedCurve:
    """A curve pre-sampled at even steps, looked up by a 0..1 parameter."""

    points: list[float]

    def get(self, t: float) -> float:
        """Value of the curve at t, interpolated between neighbouring samples."""
        if not self.points:
            raise ValueError("cannot sample an empty curve")
        count = len(self.points)
        t_scaled = t * count
        truncated = int(t_scaled) if t_scaled > 0 else 0
        previous_ix = min(truncated, count - 1)
        next_ix = min(previous_ix + 1, count - 1)
        previous = self.points[previous_ix]
        following = self.points[next_ix]
        return previous + (following - previous) * (t_scaled - previous_ix)


@dataclass
class Curve:
    """A curve through key points (x, y), with x running from 0 to 1."""

    points: list[tuple[float, float]] = field(default_factory=list)
    interpolation: Interpolation = Interpolation.LINEAR
    resolution: int = 20

    def batch(self) -> BatchedCurve:
        """Sample the curve at steps of 1 / resolution."""
        if self.interpolation is Interpolation.BEZIER:
            raise ValueError("Bezier interpolation is not supported")
        if self.resolution <= 0:
            raise ValueError("curve resolution must be positive")

        step = 1.0 / self.resolution
        x = 0.0
        samples: list[float] = []
        for start, end in zip(self.points, self.points[1:]):
            while x <= end[0]:
                t = (x - start[0]) / (end[0] - start[0])
                samples.append(start[1] + (end[1] - start[1]) * t)
                x += step
        return BatchedCurve(samples)


def _lerp(
    a: tuple[float, float, float, float], b: tuple[float, float, float, float], t: float
) -> tuple[float, float, float, float]:
    return tuple(x * (1.0 - t) + y * t for x, y in zip(a, b))  # type: ignore[return-value]


@dataclass(frozen=True)
class ColorCurve:
    """A three-stop colour gradient over a particle's lifetime."""

    start: Color = WHITE
    mid: Color = WHITE
    end: Color = WHITE

    def at(self, t: float) -> tuple[float, float, float, float]:
        """Colour at lifetime fraction t as an (r, g, b, a) tuple."""
        if t < 0.5:
            return _lerp(self.start.to_vec(), self.mid.to_vec(), t * 2.0)
        return _lerp(self.mid.to_vec(), self.end.to_vec(), (t - 0.5) * 2.0)