import pytest

from quadkit.geometry import Vec2
from quadkit.physics import Actor, Solid, Tile, World

E, S, J = Tile.EMPTY, Tile.SOLID, Tile.JUMP_THROUGH


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (E, E, E),
        (J, J, J),
        (J, E, J),
        (E, J, J),
        (S, E, S),
        (Tile.COLLIDER, J, S),
    ],
)
def test_tile_combine(a, b, expected):
    assert a.combine(b) is expected


def _wall_world():
    world = World()
    world.add_static_tiled_layer([E, E, E, S], 8.0, 8.0, 4, 1)
    return world


def test_move_h_free_space_moves_exactly():
    world = World()
    actor = world.add_actor(Vec2(10.0, 10.0), 8, 8)
    assert world.move_h(actor, 5.0)
    assert world.actor_pos(actor) == Vec2(15.0, 10.0)
    assert world.move_v(actor, -5.0)
    assert world.actor_pos(actor) == Vec2(15.0, 5.0)


def test_remainder_accumulates_between_moves():
    world = World()
    start = Vec2(0.0, 0.0)
    actor = world.add_actor(start, 8, 8)
    world.move_h(actor, 0.3)
    assert world.actor_pos(actor) == start
    world.move_h(actor, 0.3)
    assert world.actor_pos(actor).x > start.x


def test_set_actor_position_resets_remainder():
    world = World()
    actor = world.add_actor(Vec2(0.0, 0.0), 8, 8)
    world.move_h(actor, 0.4)
    target = Vec2(4.0, 4.0)
    world.set_actor_position(actor, target)
    world.move_h(actor, 0.4)
    assert world.actor_pos(actor) == target


def test_wall_blocks_horizontal_move():
    world = _wall_world()
    actor = world.add_actor(Vec2(0.0, 0.0), 8, 8)
    assert world.move_h(actor, 100.0) is False
    pos = world.actor_pos(actor)
    assert not world.collide_check(actor, pos)
    assert world.collide_check(actor, pos + Vec2(1.0, 0.0))


def test_solid_collider_detection():
    world = World()
    world.add_solid(Vec2(0.0, 0.0), 16, 16)
    assert world.collide_solids(Vec2(4.0, 4.0), 4, 4) is Tile.COLLIDER
    assert world.collide_solids(Vec2(40.0, 40.0), 4, 4) is Tile.EMPTY
    assert world.solid_at(Vec2(1.0, 1.0))
    assert not world.solid_at(Vec2(20.0, 1.0))


def test_tag_at_respects_layer_tag():
    world = World()
    world.add_static_tiled_layer([S, E], 8.0, 8.0, 2, 1)
    assert world.solid_at(Vec2(1.0, 1.0))
    assert not world.tag_at(Vec2(1.0, 1.0), 2)
    assert not world.solid_at(Vec2(9.0, 1.0))


def test_collide_tag_other_tag_sees_nothing():
    world = World()
    world.add_static_tiled_layer([S, S], 8.0, 8.0, 2, 3)
    assert world.collide_tag(1, Vec2(0.0, 0.0), 8, 8) is Tile.EMPTY
    assert world.collide_tag(3, Vec2(0.0, 0.0), 8, 8) is Tile.SOLID


def test_jump_through_and_descent():
    world = World()
    world.add_static_tiled_layer([E, J], 8.0, 8.0, 2, 1)
    actor = world.add_actor(Vec2(0.0, 0.0), 8, 8)
    on_wood = Vec2(8.0, 0.0)
    assert world.collide_check(actor, on_wood)
    world.descent(actor)
    assert not world.collide_check(actor, on_wood)


def test_actor_created_inside_jump_through_descends():
    world = World()
    world.add_static_tiled_layer([J], 8.0, 8.0, 1, 1)
    actor = world.add_actor(Vec2(0.0, 0.0), 8, 8)
    assert not world.collide_check(actor, world.actor_pos(actor))


def test_moving_solid_carries_rider():
    world = World()
    solid = world.add_solid(Vec2(0.0, 10.0), 16, 8)
    actor = world.add_actor(Vec2(0.0, 2.0), 8, 8)
    world.solid_move(solid, 5.0, 0.0)
    assert world.actor_pos(actor).x == world.solid_pos(solid).x
    assert world.actor_pos(actor).y == 2.0


def test_solid_pushing_actor_into_wall_squishes():
    world = _wall_world()
    solid = world.add_solid(Vec2(8.0, 0.0), 8, 8)
    actor = world.add_actor(Vec2(16.0, 0.0), 8, 8)
    assert not world.squished(actor)
    world.solid_move(solid, 1.0, 0.0)
    assert world.squished(actor)
    assert world.actor_pos(actor).x == 16.0


def test_unknown_handles_raise():
    world = World()
    with pytest.raises(IndexError):
        world.actor_pos(Actor(0))
    with pytest.raises(IndexError):
        world.solid_pos(Solid(-1))