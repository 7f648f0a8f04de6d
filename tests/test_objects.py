import math
import random
from types import SimpleNamespace

import pytest

from yaav.circle import Circle
from yaav.objects import Ball, Block, CylObject, Dirt, DynamicDirt, Room
from yaav.point import Point
from yaav.polygon import Polygon
from yaav.xyzrz import XYZrZ


def _vehicle_at(x, y, radius=0.15):
    return SimpleNamespace(pose=XYZrZ(Point(x, y)), radius=radius)


def test_room_corners_are_the_fixed_layout():
    corners = Room().corners()
    assert len(corners) == 6
    assert corners[0] == Point(-3, -2, 0)
    assert corners[-1] == Point(2, -2, 0)


def test_room_collision_shape_is_polygon_of_corners():
    room = Room()
    shape = room.collision_shape()
    assert isinstance(shape, Polygon)
    assert shape.vertices() == room.corners()


def test_room_inside_and_outside():
    room = Room()
    assert room.is_inside(Point(0.0, 0.0))
    assert room.is_inside(Point(1.0, 1.5))
    assert not room.is_inside(Point(-1.0, 1.5))
    assert not room.is_inside(Point(5.0, 0.0))


def test_room_bounds():
    bounds = Room().min_max_xyz()
    assert (bounds.min_x, bounds.max_x) == (-3, 2)
    assert (bounds.min_y, bounds.max_y) == (-2, 2)


def test_room_closest_point_wall():
    room = Room()
    assert room.closest_point_wall(0, Point(-4.0, 0.0)) == Point(-3.0, 0.0)
    assert room.closest_point_wall(0, Point(-4.0, 5.0)) == room.corners()[1]


def test_block_footprint_centered_on_pose():
    pose = XYZrZ(Point(-0.8, -1.5, 0.25), 30)
    block = Block(0.5, 0.4, 0.6, pose)
    bounds = block.collision_shape().min_max_xyz()
    assert bounds.max_x - bounds.min_x == pytest.approx(0.5)
    assert bounds.max_y - bounds.min_y == pytest.approx(0.4)
    assert (bounds.max_x + bounds.min_x) / 2 == pytest.approx(-0.8)
    assert (bounds.max_y + bounds.min_y) / 2 == pytest.approx(-1.5)
    assert len(block.collision_shape()) == 4


def test_cylobject_parse():
    cyl = CylObject.parse("0.1 0.5 1 2 0 30")
    assert cyl.radius == pytest.approx(0.1)
    assert cyl.height == pytest.approx(0.5)
    assert cyl.pose.position == Point(1, 2, 0)
    assert cyl.pose.rz == pytest.approx(30)


def test_cylobject_collision_shape():
    cyl = CylObject.parse("  0.1   0.5 1 2 0 30 extra")
    assert cyl.collision_shape() == Circle(Point(1, 2), 0.1)


@pytest.mark.parametrize("text", ["", "0.1 0.5 1 2 0", "0.1 0.5 a 2 0 30"])
def test_cylobject_parse_rejects_malformed(text):
    with pytest.raises(ValueError):
        CylObject.parse(text)


def test_dirt_and_ball_keep_their_data():
    pose = XYZrZ(Point(1.0, 1.5, 0.15))
    assert Ball(0.15, pose).pose is pose
    assert Dirt(0.01, pose).radius == 0.01


def test_empty_dirt_level_is_nan():
    dirt = DynamicDirt(random.Random(0))
    assert len(dirt) == 0
    assert math.isnan(dirt.dirt_level())


def test_generate_dirt_places_particles_inside_room():
    room = Room()
    dirt = DynamicDirt(random.Random(1))
    dirt.generate_dirt(room, 50)
    assert len(dirt) == 50
    assert dirt.dirt_level() == 100
    for particle in dirt:
        assert room.is_inside(particle.pose.position)
        assert 0.005 <= particle.radius <= 0.01
        assert particle.pose.position.z == 0.0


def test_generate_dirt_replaces_previous():
    room = Room()
    dirt = DynamicDirt(random.Random(2))
    dirt.generate_dirt(room, 30)
    dirt.generate_dirt(room, 10)
    assert len(dirt) == 10
    assert dirt.dirt_level() == 100


def test_generate_dirt_is_reproducible_with_seed():
    room = Room()
    first = DynamicDirt(random.Random(7))
    second = DynamicDirt(random.Random(7))
    first.generate_dirt(room, 20)
    second.generate_dirt(room, 20)
    assert [d.pose.position for d in first] == [d.pose.position for d in second]


def test_remove_dirt_under_vehicle():
    room = Room()
    dirt = DynamicDirt(random.Random(3))
    dirt.generate_dirt(room, 40)
    target = next(iter(dirt)).pose.position
    dirt.remove_dirt(_vehicle_at(target.x, target.y))
    assert len(dirt) < 40
    assert all((p.pose.position - target).length() >= 0.9 * 0.15 for p in dirt)
    assert dirt.dirt_level() == pytest.approx(100 * len(dirt) / 40)


def test_remove_dirt_far_away_keeps_everything():
    dirt = DynamicDirt(random.Random(4))
    dirt.generate_dirt(Room(), 25)
    dirt.remove_dirt(_vehicle_at(50.0, 50.0))
    assert len(dirt) == 25
    assert dirt.dirt_level() == 100