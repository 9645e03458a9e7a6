"""Angle helpers, in degrees, for smooth camera rotation."""

from __future__ import annotations

import math

_FULL_TURN = 360.0


def short_angle_dist(a0: float, a1: float) -> float:
    """Signed shortest rotation from a0 to a1, in the range [-180, 180]."""
    da = math.fmod(a1 - a0, _FULL_TURN)
    return math.fmod(2.0 * da, _FULL_TURN) - da


def angle_lerp(a0: float, a1: float, t: float) -> float:
    """Interpolate from a0 towards a1 along the shortest way round."""
    return a0 + short_angle_dist(a0, a1) * t


def wrap_rotation(rotation: float) -> float:
    """Bring a rotation that overshot by less than a full turn back into [0, 360)."""
    if rotation >= _FULL_TURN:
        return rotation - _FULL_TURN
    if rotation < 0.0:
        return rotation + _FULL_TURN
    return rotation