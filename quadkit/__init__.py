"""Rendering-free 2D game simulation: platformer physics, particles and small game models."""

__version__ = "0.1.0"

__all__ = [
    "angles",
    "arkanoid",
    "asteroids",
    "curve",
    "emitter",
    "emitter_config",
    "geometry",
    "life",
    "physics",
    "snake",
]