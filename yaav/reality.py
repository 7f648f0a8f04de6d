"""The simulated world: a room with objects, dirt and the vehicle, and its physics loop."""

from __future__ import annotations

import random
from types import TracebackType

from .inireader import IniReader, ini_reader
from .logger import log_debug, log_info
from .objects import Ball, Block, CylObject, DynamicDirt, Room
from .physics import SIMTIME_MSEC, DoPhysics, PhysicsStates
from .point import Point
from .tasks import PeriodicTask
from .vehicle import Vehicle
from .xyzrz import XYZrZ

APP_NAME = "YAAVsimulator"
VERSION = "1.2.3"
APP_NAME_VERSION = f"{APP_NAME} v{VERSION}"


class VirtualReality(DoPhysics):
    """Holds every object in the world and advances the physics on a periodic task.

    The task is created stopped; ``start_physics`` sets it running.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.room = Room()
        self.cyl_objs: list[CylObject] = []
        self.vehicle = Vehicle(0.15, 0.10, XYZrZ(Point(-1.0, -1.0, 0.0), 35))
        self.ball = Ball(0.15, XYZrZ(Point(1.0, 1.5, 0.15)))
        self.chair = Block(0.5, 0.5, 0.6, XYZrZ(Point(-0.8, -1.5, 0.25), 30))
        self.dirt = DynamicDirt(rng)
        self.physics_processes: list[DoPhysics] = [self.vehicle]
        self._physics_running = False
        self._task = PeriodicTask(self.process, SIMTIME_MSEC)
        self.vehicle.start_control_execute()
        log_info("VirtualReality", "initialized")

    def process(self) -> None:
        """Detect collisions, remove dirt under the vehicle and advance the vehicle."""
        vehicle = self.vehicle
        expected = vehicle.expected_next_pose()
        log_debug(
            "VirtualReality.process",
            f"Current state vehicle: {vehicle.pose} Expected: {expected}",
        )
        state = DoPhysics.physics_state
        state[PhysicsStates.CYLOBJ_COLLISION] = 0
        state[PhysicsStates.WALL_COLLISION] = 0
        DoPhysics.vehicle_collisions.clear()

        for cylinder in self.cyl_objs:
            if vehicle.collides_with_cylinder(cylinder):
                state[PhysicsStates.CYLOBJ_COLLISION] = 1
                break
        if vehicle.collides_with_room(self.room):
            state[PhysicsStates.WALL_COLLISION] = 1
        if vehicle.collides_with_block(self.chair):
            state[PhysicsStates.WALL_COLLISION] = 1

        self.dirt.remove_dirt(vehicle)
        for component in self.physics_processes:
            component.process()

    def init(self, reader: IniReader | None = None) -> None:
        """Place the vehicle, add the configured cylinders and spread fresh dirt."""
        reader = reader if reader is not None else ini_reader()
        self.vehicle.pose = XYZrZ(Point(-1.0, -1.0, 0.0), -35)
        for text in reader.get_strings("VR.cylobjects"):
            try:
                cylinder = CylObject.parse(text)
            except ValueError:
                cylinder = CylObject(0.0, 0.0, XYZrZ(Point(0.0, 0.0, 0.0)))
            self.cyl_objs.append(cylinder)
        max_particles = reader.get_values("VR.maxDirtParticles", int, 1)[0]
        self.dirt.generate_dirt(self.room, max_particles)
        log_debug("VirtualReality.init", "")

    @property
    def physics_is_running(self) -> bool:
        return self._physics_running

    def start_physics(self) -> None:
        self._task.start()
        self._physics_running = True
        log_info("VirtualReality.start_physics", "++++++ START")

    def stop_physics(self) -> None:
        self._task.stop()
        self._physics_running = False
        log_info("VirtualReality.stop_physics", " ------ STOP")

    def start_stop_physics(self) -> None:
        """Toggle the physics task between running and stopped."""
        self._task.start_stop()

    def dirt_level(self) -> float:
        """Remaining dirt in percent."""
        return self.dirt.dirt_level()

    def close(self) -> None:
        """Stop the physics task and the vehicle's control program."""
        self._task.close()
        self._physics_running = False
        self.vehicle.close()
        log_info("VirtualReality.close", "")

    def __enter__(self) -> VirtualReality:
        return self

    def __exit__(
        self,
        *args: type[BaseException] | BaseException | TracebackType | None,
    ) -> None:
        self.close()