import math
import random

import pytest

from quadkit.curve import ColorCurve
from quadkit.emitter_config import (
    AtlasConfig,
    BlendMode,
    EmissionShape,
    EmitterConfig,
    ParticleShape,
)
from quadkit.geometry import Vec2


def test_default_config_matches_documented_defaults():
    config = EmitterConfig()
    assert config.amount == 8
    assert config.lifetime == 1.0
    assert config.initial_velocity == 50.0
    assert config.size == 10.0
    assert config.initial_direction == Vec2(0.0, -1.0)
    assert config.emitting is True
    assert config.one_shot is False
    assert config.blend_mode is BlendMode.ALPHA
    assert config.shape == ParticleShape("rectangle", aspect_ratio=1.0)
    assert config.emission_shape.kind == "point"
    assert config.colors_curve == ColorCurve()
    assert config.size_curve is None


def test_configs_do_not_share_mutable_state():
    first = EmitterConfig()
    second = EmitterConfig()
    first.emitting = False
    assert second.emitting is True


def test_point_emission_is_origin():
    assert EmissionShape().random_point(random.Random(3)) == Vec2(0.0, 0.0)


def test_rect_emission_stays_inside():
    shape = EmissionShape("rect", width=4.0, height=2.0)
    rng = random.Random(7)
    for _ in range(200):
        point = shape.random_point(rng)
        assert -2.0 <= point.x <= 2.0
        assert -1.0 <= point.y <= 1.0


def test_sphere_emission_stays_inside_radius():
    shape = EmissionShape("sphere", radius=3.0)
    rng = random.Random(11)
    for _ in range(200):
        assert shape.random_point(rng).length() <= 3.0 + 1e-9


def test_emission_is_deterministic_for_seeded_rng():
    shape = EmissionShape("sphere", radius=5.0)
    rng_a = random.Random(42)
    rng_b = random.Random(42)
    first = [shape.random_point(rng_a) for _ in range(5)]
    second = [shape.random_point(rng_b) for _ in range(5)]
    assert [(p.x, p.y) for p in first] == [(p.x, p.y) for p in second]
    assert len({(p.x, p.y) for p in first}) == 5
    assert all(p.length() <= 5.0 + 1e-9 for p in first)


def test_unknown_emission_kind_rejected():
    with pytest.raises(ValueError):
        EmissionShape("cone")


def test_rectangle_geometry():
    vertices, indices = ParticleShape("rectangle", aspect_ratio=2.0).geometry()
    assert len(vertices) == 4 * 9
    assert indices == [0, 1, 2, 0, 2, 3]
    assert vertices[0] == -2.0
    assert vertices[9] == 2.0


def test_circle_geometry_is_consistent():
    subdivisions = 6
    vertices, indices = ParticleShape("circle", subdivisions=subdivisions).geometry()
    vertex_count = len(vertices) // 9
    assert vertex_count == subdivisions + 2
    assert len(indices) == subdivisions * 3
    assert all(0 <= index < vertex_count for index in indices)
    assert vertices[:2] == [0.0, 0.0]
    for v in range(1, vertex_count):
        x, y = vertices[v * 9], vertices[v * 9 + 1]
        assert math.isclose(math.hypot(x, y), 1.0)


def test_circle_without_subdivisions_rejected():
    with pytest.raises(ValueError):
        ParticleShape("circle", subdivisions=0).geometry()


def test_custom_mesh_geometry_passes_through():
    shape = ParticleShape("custom_mesh", vertices=(1.0, 2.0, 3.0), indices=(0, 0, 0))
    assert shape.geometry() == ([1.0, 2.0, 3.0], [0, 0, 0])


def test_unknown_particle_kind_rejected():
    with pytest.raises(ValueError):
        ParticleShape("triangle")


def test_atlas_open_range_runs_to_last_frame():
    atlas = AtlasConfig.from_range(4, 4, 8, None)
    assert (atlas.start_index, atlas.end_index) == (8, 16)


def test_atlas_half_open_range():
    atlas = AtlasConfig.from_range(4, 4, 0, 8)
    assert (atlas.start_index, atlas.end_index) == (0, 8)


def test_atlas_inclusive_range_stores_stop_minus_one():
    atlas = AtlasConfig.from_range(4, 4, 0, 8, inclusive=True)
    assert atlas.end_index == 7


def test_atlas_frame_uv_layout():
    atlas = AtlasConfig.from_range(4, 2)
    first = atlas.frame_uv(0)
    assert first[:2] == (0.0, 0.0)
    assert first[2] == 1.0 / 4
    assert first[3] == 1.0 / 2
    next_row = atlas.frame_uv(4)
    assert next_row[0] == 0.0
    assert next_row[1] == first[3]
    assert atlas.frame_uv(1)[0] == first[2]


def test_atlas_rejects_empty_grid():
    with pytest.raises(ValueError):
        AtlasConfig.from_range(0, 4)