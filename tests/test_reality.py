import random
import time

import pytest

from yaav.inireader import IniError, IniReader
from yaav.objects import Block, CylObject
from yaav.physics import DoPhysics, PhysicsStates
from yaav.point import Point
from yaav.reality import VirtualReality
from yaav.xyzrz import XYZrZ


@pytest.fixture(autouse=True)
def clean_state(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    DoPhysics.physics_state.reset()
    DoPhysics.vehicle_collisions.clear()
    yield
    DoPhysics.physics_state.reset()
    DoPhysics.vehicle_collisions.clear()


@pytest.fixture
def vr():
    world = VirtualReality(random.Random(1))
    yield world
    world.close()


def make_reader(particles=20):
    reader = IniReader()
    reader.feed(
        [
            "[VR]",
            "cylobjects = 0.1, 0.5, 1, 1, 0, 0",
            "= 0.2, 0.5, -2, 0, 0, 0",
            f"maxDirtParticles = {particles}",
        ]
    )
    return reader


def test_default_world(vr):
    assert vr.vehicle.pose.position == Point(-1.0, -1.0, 0.0)
    assert vr.vehicle.pose.rz == pytest.approx(35.0)
    assert vr.vehicle.radius == pytest.approx(0.15)
    assert vr.cyl_objs == []
    assert vr.physics_is_running is False


def test_init_reads_configuration(vr):
    vr.init(make_reader())
    assert len(vr.cyl_objs) == 2
    assert vr.cyl_objs[0].radius == pytest.approx(0.1)
    assert vr.cyl_objs[1].pose.position == Point(-2.0, 0.0, 0.0)
    assert vr.vehicle.pose.rz == pytest.approx(-35.0)
    assert len(vr.dirt) == 20
    assert vr.dirt_level() == pytest.approx(100.0)
    assert all(vr.room.is_inside(d.pose.position) for d in vr.dirt)


def test_init_with_missing_key_raises(vr):
    reader = IniReader()
    reader.add("VR.maxDirtParticles", "5")
    with pytest.raises(IniError):
        vr.init(reader)


def test_process_free_vehicle_moves(vr):
    expected = vr.vehicle.expected_next_pose()
    vr.process()
    assert DoPhysics.physics_state[PhysicsStates.CYLOBJ_COLLISION] == 0
    assert DoPhysics.physics_state[PhysicsStates.WALL_COLLISION] == 0
    assert vr.vehicle.pose.position == expected.position


def test_process_detects_cylinder(vr):
    cylinder = CylObject(0.1, 0.5, XYZrZ(Point(-1.0, -1.0)))
    assert vr.vehicle.collides_with_cylinder(cylinder) is True
    vr.cyl_objs.append(cylinder)
    vr.process()
    assert vr.physics_state[PhysicsStates.CYLOBJ_COLLISION] == 1


def test_process_detects_chair(vr):
    vr.vehicle.pose = XYZrZ(Point(-0.5, -1.5), 0.0)
    chair = Block(0.5, 0.5, 0.6, XYZrZ(Point(-0.8, -1.5, 0.25), 30.0))
    assert vr.vehicle.collides_with_block(chair) is True
    vr.process()
    assert vr.physics_state[PhysicsStates.WALL_COLLISION] == 1


def test_process_removes_dirt_under_vehicle(vr):
    vr.init(make_reader(50))
    target = next(iter(vr.dirt))
    vr.vehicle.pose = XYZrZ(target.pose.position, 0.0)
    before = len(vr.dirt)
    vr.process()
    assert len(vr.dirt) < before
    assert vr.dirt_level() < 100.0


def test_start_stop_physics_runs_process(vr):
    start = vr.vehicle.pose.position
    vr.start_physics()
    assert vr.physics_is_running is True
    deadline = time.monotonic() + 2.0
    while vr.vehicle.pose.position == start and time.monotonic() < deadline:
        time.sleep(0.01)
    vr.stop_physics()
    assert vr.physics_is_running is False
    assert vr.vehicle.pose.position != start or vr.vehicle.pose.position.x != start.x


def test_start_stop_toggle(vr):
    vr.start_stop_physics()
    assert vr._task.is_running() is True
    vr.start_stop_physics()
    assert vr._task.is_running() is False


def test_context_manager_stops_vehicle_control():
    with VirtualReality(random.Random(2)) as world:
        assert world.vehicle.control_running is True
    assert world.vehicle.control_running is False
    assert world.physics_is_running is False