import pytest

from stagecraft.components import Collision, SceneComponent
from stagecraft.errors import EngineError
from stagecraft.transform import CollisionType
from stagecraft.vectors import Float4


class FakeWorld:
    def __init__(self):
        self.collisions = {}
        self.renderers = {}
        self.camera_pos = Float4()


class FakeActor:
    def __init__(self, world, location=None):
        self.world = world
        self.location = location if location is not None else Float4()

    def actor_location(self):
        return self.location.copy()


def make_collision(world, location, scale, order=0):
    col = Collision()
    col.owner = FakeActor(world, location)
    col.set_order(order)
    col.set_scale(scale)
    return col


def test_actor_base_transform_adds_owner_location():
    comp = SceneComponent()
    comp.owner = FakeActor(FakeWorld(), Float4(10, 20))
    comp.set_position(Float4(0, 0))
    base = comp.actor_base_transform()
    assert (base.position.x, base.position.y) == (10.0, 20.0)
    assert (comp.position.x, comp.position.y) == (0.0, 0.0)


def test_actor_base_transform_without_owner_raises():
    comp = SceneComponent()
    with pytest.raises(EngineError):
        comp.actor_base_transform()


def test_scale_set_and_add():
    comp = SceneComponent()
    comp.set_scale(Float4(4, 6))
    comp.add_scale(Float4(4, 6))
    assert comp.transform.scale.x == 8.0
    assert comp.transform.scale.y == 12.0


def test_set_order_moves_between_groups():
    world = FakeWorld()
    col = make_collision(world, Float4(), Float4(10, 10), order=0)
    assert world.collisions[0] == [col]
    col.set_order(3)
    assert world.collisions[0] == []
    assert world.collisions[3] == [col]
    assert col.order == 3


def test_collision_check_finds_overlap_and_skips_self():
    world = FakeWorld()
    a = make_collision(world, Float4(0, 0), Float4(10, 10), order=1)
    b = make_collision(world, Float4(5, 0), Float4(10, 10), order=1)
    assert a.collision_check(1) == [b]
    assert b.collision_check(1) == [a]


def test_collision_check_unknown_group_is_empty():
    world = FakeWorld()
    a = make_collision(world, Float4(0, 0), Float4(10, 10), order=1)
    assert a.collision_check(99) == []


def test_collision_check_skips_inactive():
    world = FakeWorld()
    a = make_collision(world, Float4(0, 0), Float4(10, 10), order=1)
    b = make_collision(world, Float4(5, 0), Float4(10, 10), order=1)
    b.active_off()
    assert a.collision_check(1) == []
    b.active_on()
    a.destroy()
    assert a.collision_check(1) == []


def test_collision_check_next_pos_moves_away():
    world = FakeWorld()
    a = make_collision(world, Float4(0, 0), Float4(10, 10), order=1)
    make_collision(world, Float4(5, 0), Float4(10, 10), order=1)
    assert a.collision_check(1, Float4(100, 0)) == []


def test_circle_against_rect():
    world = FakeWorld()
    circle = make_collision(world, Float4(0, 0), Float4(10, 10), order=2)
    circle.col_type = CollisionType.CIRCLE
    rect = make_collision(world, Float4(8, 0), Float4(10, 10), order=2)
    assert circle.collision_check(2) == [rect]


def test_unsupported_pair_raises():
    world = FakeWorld()
    a = make_collision(world, Float4(0, 0), Float4(10, 10), order=1)
    a.col_type = CollisionType.POINT
    make_collision(world, Float4(0, 0), Float4(10, 10), order=1)
    with pytest.raises(EngineError):
        a.collision_check(1)