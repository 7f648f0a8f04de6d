"""The autonomous vehicle: body, hardware, control program and collision handling."""

from __future__ import annotations

import math
import threading
import time

from .bumper import Bumper
from .cartvec import CartVec
from .circle import Circle
from .collision import CollisionDetector
from .hardware import (
    Battery,
    BoolIn,
    BoolOut,
    IntOut,
    IOBus,
    IOExtern,
    IOIntern,
    IRQBus,
    Memory,
    MemoryIndex,
    Motor,
    Timer,
    TimerMode,
)
from .logger import log_debug, log_error, log_info
from .mathdef import normalize_degrees, to_degrees, to_radians
from .objects import Block, CylObject, Room
from .physics import SIMTIME_MSEC, SIMTIME_SEC, DoPhysics, PhysicsStates
from .point import Point
from .tasks import EventQueue
from .xyzrz import XYZrZ

_SPEED_LEFT = 1.2
_SPEED_RIGHT = 1.14
_BACKOFF_TURN = 27
_MAX_TURN_INCREMENT = 15
_HEARTBEAT_MS = 10000
_CONTROL_PERIOD_MS = SIMTIME_MSEC * 4
_EVENT_EVERY_TICKS = 10
_BUMPER_START = -110
_BUMPER_END = 110
_BUMPER_SEGMENTS = 6


class Vehicle(DoPhysics):
    """A round vehicle of the given radius and height, placed at ``pose``.

    It carries its own simulated hardware: memory, an IO bus, interrupt lines,
    a heartbeat timer, a bumper, two motors and a battery.
    """

    def __init__(self, radius: float, height: float, pose: XYZrZ) -> None:
        self.radius = radius
        self.height = height
        self.pose = pose
        self._next_pose = XYZrZ(pose.position, pose.rz)
        self._turn_increment = 0
        self.collision_detector = CollisionDetector()
        self.io = IOBus()
        self.io_intern = IOIntern(self.io)
        self.io_extern = IOExtern(self.io)
        self.irqs = IRQBus()
        self.timer = Timer()
        self.memory = Memory()
        self.bumper = Bumper(
            self, _BUMPER_START, _BUMPER_END, _BUMPER_SEGMENTS, self.memory, MemoryIndex.BUMPER0
        )
        self.motor_left = Motor(
            self.io_extern, IntOut.MOTORLEFT_PWM_INT, BoolOut.MOTORLEFT_FORWARD_BOOL
        )
        self.motor_right = Motor(
            self.io_extern, IntOut.MOTORRIGHT_PWM_INT, BoolOut.MOTORRIGHT_FORWARD_BOOL
        )
        self.battery = Battery()
        self.physics_processes: list[DoPhysics] = [
            self.timer,
            self.bumper,
            self.motor_left,
            self.motor_right,
        ]
        self.shared1 = 0
        self.shared2 = 0
        self.heartbeats = 0
        self._control_running = True
        self._wake = threading.Event()
        self._control_thread: threading.Thread | None = None
        self.control_init()
        log_info("Vehicle", "initialized")

    def __str__(self) -> str:
        return f"{self.radius:g} {self.height:g} {self._next_pose}"

    def collision_shape(self) -> Circle:
        return Circle(self.pose.position, self.radius)

    def _step(self) -> tuple[float, float]:
        """Translation (m) and rotation (degrees) over one simulation step."""
        translation = (_SPEED_LEFT + _SPEED_RIGHT) / 2 * SIMTIME_SEC
        rotation = (_SPEED_RIGHT - _SPEED_LEFT) / (2 * self.radius) * SIMTIME_SEC
        return translation, to_degrees(rotation)

    def expected_next_pose(self) -> XYZrZ:
        """Pose after one step of free driving."""
        translation, rotation = self._step()
        rz = to_radians(self.pose.rz)
        p = self.pose.position
        return XYZrZ(
            Point(p.x + math.cos(rz) * translation, p.y + math.sin(rz) * translation, p.z),
            self.pose.rz + rotation,
        )

    def process(self) -> None:
        """Run the hardware for one step, then drive on or back off after a collision."""
        self.check_irqs()
        for component in self.physics_processes:
            component.process()

        translation, rotation = self._step()
        rz = to_radians(self.pose.rz)
        p = self.pose.position
        state = DoPhysics.physics_state
        if (
            state[PhysicsStates.CYLOBJ_COLLISION] != 1
            and state[PhysicsStates.WALL_COLLISION] != 1
        ):
            next_pose = XYZrZ(
                Point(
                    p.x + math.cos(rz) * translation,
                    p.y + math.sin(rz) * translation,
                    self._next_pose.position.z,
                ),
                self.pose.rz + rotation,
            )
        else:
            next_pose = self.pose - CartVec(
                math.cos(rz) * translation, math.sin(rz) * translation, 0.0
            )
            next_pose.rz = self.pose.rz - _BACKOFF_TURN + self._turn_increment
            self._turn_increment += 1
            if self._turn_increment > _MAX_TURN_INCREMENT:
                self._turn_increment = 0
        next_pose.rz = normalize_degrees(next_pose.rz)
        self._next_pose = next_pose
        self.pose = XYZrZ(next_pose.position, next_pose.rz)

    def control_init(self) -> None:
        """Install the interrupt service routines and start the heartbeat timer."""
        self.irqs[BoolIn.IRQ0].set_isr(self.isr0)
        self.irqs[BoolIn.IRQ1].set_isr(self.isr1)
        self.irqs[BoolIn.IRQ2].set_isr(self.isr2)
        self.timer.set_isr(self.isr0)
        self.timer.set_time(_HEARTBEAT_MS, TimerMode.PERIODIC)
        self.timer.start()
        self.shared1 = self.shared2 = 1
        log_info("Vehicle.control_init", "ready")

    def control_execute(self) -> None:
        """The control program: runs until stopped, posting an event every tenth tick."""
        where = "Vehicle.control_execute"
        log_info(where, "started")
        try:
            tick = 0
            with EventQueue() as events:
                while self._control_running:
                    tick += 1
                    deadline = time.monotonic() + _CONTROL_PERIOD_MS / 1000.0
                    if tick % _EVENT_EVERY_TICKS == 0:
                        events.post(1)
                    remaining = deadline - time.monotonic()
                    if remaining > 0:
                        self._wake.wait(remaining)
        except Exception as exc:  # the control program must not kill its thread noisily
            log_error(where, str(exc) or type(exc).__name__)
        log_info(where, "stopped")

    @property
    def control_running(self) -> bool:
        """True while the control program thread is alive."""
        return self._control_thread is not None and self._control_thread.is_alive()

    def start_control_execute(self) -> None:
        """Run the control program on a background thread."""
        if self.control_running:
            return
        self._control_running = True
        self._wake.clear()
        self._control_thread = threading.Thread(target=self.control_execute, daemon=True)
        self._control_thread.start()

    def stop_control_execute(self) -> None:
        """Ask the control program to stop."""
        self._control_running = False
        self._wake.set()

    def check_irqs(self) -> None:
        for index in range(len(self.irqs)):
            self.irqs[index].react()

    def isr0(self) -> None:
        self.heartbeats += 1
        log_info("Vehicle.isr0", "Heartbeat ------------------------->")

    def isr1(self) -> None:
        """Service routine for IRQ1; does nothing."""

    def isr2(self) -> None:
        """Service routine for IRQ2; does nothing."""

    def collides_with_room(self, room: Room) -> bool:
        """Record a collision for every wall closer than the radius."""
        self.collision_detector.is_colliding(self.collision_shape(), room.collision_shape())
        position = self.pose.position
        collisions = 0
        for wall_id in range(len(room.corners())):
            closest = room.closest_point_wall(wall_id, position)
            delta = closest - position
            if delta.length() <= self.radius:
                overshoot = (self.radius - delta.length()) / self.radius
                collisions += 1
                DoPhysics.vehicle_collisions.append(delta)
                self._next_pose = self.pose + delta
                log_debug(
                    "Vehicle.collides_with_room",
                    f"WCS: {closest} {delta} {int(overshoot * 100):2d}% "
                    f"nextXYZrZ: {self._next_pose}",
                )
        return collisions > 0

    def collides_with_cylinder(self, cylinder: CylObject) -> bool:
        """Replace the recorded collisions by the one with ``cylinder``, if any."""
        DoPhysics.vehicle_collisions.clear()
        if self.collision_detector.is_colliding(
            self.collision_shape(), cylinder.collision_shape()
        ):
            point = self.collision_detector.collision_points()[0]
            DoPhysics.vehicle_collisions.append(point - self.pose.position)
            return True
        return False

    def collides_with_block(self, block: Block) -> bool:
        """Replace the recorded collisions by those with ``block``, if any."""
        DoPhysics.vehicle_collisions.clear()
        if self.collision_detector.is_colliding(self.collision_shape(), block.collision_shape()):
            log_debug("Vehicle.collides_with_block", "############# Is colliding with block")
            for point in self.collision_detector.collision_points():
                DoPhysics.vehicle_collisions.append(point - self.pose.position)
            return True
        return False

    def close(self) -> None:
        """Stop the control program and wait for it to end."""
        self.stop_control_execute()
        if self._control_thread is not None:
            self._control_thread.join()
        log_info("Vehicle.close", "")