"""Bumper sensor reporting where the vehicle touches something."""

from __future__ import annotations

import math
from typing import Protocol

from .hardware import MAX_BUMPERS, Memory, Sensor
from .logger import log_debug
from .mathdef import normalize_degrees, to_degrees
from .physics import DoPhysics
from .xyzrz import XYZrZ


class _Posed(Protocol):
    pose: XYZrZ


def _atan_ratio(y: float, x: float) -> float:
    """atan(y / x) with IEEE semantics for a zero divisor."""
    if x != 0.0:
        return math.atan(y / x)
    if y == 0.0 or math.isnan(y):
        return math.nan
    sign = math.copysign(1.0, y) * math.copysign(1.0, x)
    return math.copysign(math.pi / 2, sign)


class Bumper(Sensor, DoPhysics):
    """A ring of bumper segments between two angles in vehicle coordinates.

    Each segment sets one byte in memory, starting at ``index``, when a
    collision falls into its angle range.
    """

    def __init__(
        self,
        vehicle: _Posed,
        start_angle: float,
        end_angle: float,
        n: int,
        memory: Memory,
        index: int,
    ) -> None:
        Sensor.__init__(self, memory, index)
        self.vehicle = vehicle
        n = max(1, min(MAX_BUMPERS, n))
        step = (end_angle - start_angle) / n
        self._angles = tuple(start_angle + i * step for i in range(n + 1))
        log_debug("Bumper", "initialized")

    def angles(self) -> tuple[float, ...]:
        """Boundaries of the segments, in degrees."""
        return self._angles

    def process(self) -> None:
        """Clear all segments, then mark those hit by the current vehicle collisions."""
        for i in range(MAX_BUMPERS):
            self.memory.write_byte(0, self.index1 + i)
        for collision in DoPhysics.vehicle_collisions:
            phi = to_degrees(_atan_ratio(collision.y, collision.x))
            phi = normalize_degrees(phi - self.vehicle.pose.rz)
            # An offset of -1 marks the location just before the first segment.
            self.memory.write_byte(1, self.index1 + self.sensor_offset(phi))

    def sensor_offset(self, collision_angle: float) -> int:
        """Segment index hit at ``collision_angle`` degrees, or -1 if none."""
        if collision_angle > 180:
            collision_angle -= 360
        angles = self._angles
        if collision_angle < angles[0] or collision_angle > angles[-1]:
            offset = -1
        else:
            i = 0
            while i < len(angles) and collision_angle > angles[i]:
                i += 1
            offset = i - 1
        shown = int(collision_angle) if math.isfinite(collision_angle) else collision_angle
        log_debug("Bumper.sensor_offset", f"collision in VCS: {shown} {offset}")
        return offset