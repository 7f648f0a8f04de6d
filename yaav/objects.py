"""Objects in the simulated world: the room, furniture, a ball and dirt."""

from __future__ import annotations

import math
import random
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Protocol

from .circle import Circle
from .logger import log_debug
from .point import Point
from .polygon import MinMaxXYZ, Polygon
from .xyzrz import XYZrZ

_ROOM_CORNERS = (
    Point(-3, -2, 0),
    Point(-3, 1, 0),
    Point(0, 1, 0),
    Point(0, 2, 0),
    Point(2, 2, 0),
    Point(2, -2, 0),
)

_DIRT_MARGIN = 0.1
_DIRT_MIN_RADIUS = 0.005
_DIRT_MAX_RADIUS = 0.01
_PICKUP_FRACTION = 0.9


class _Cleaner(Protocol):
    """Anything with a pose and a radius that can pick up dirt."""

    pose: XYZrZ
    radius: float


class Room:
    """A room whose walls join consecutive corners; corners lie at z = 0."""

    def __init__(self) -> None:
        self._corners = Polygon(_ROOM_CORNERS)
        log_debug("Room", str(self._corners))

    def collision_shape(self) -> Polygon:
        return self._corners

    def corners(self) -> tuple[Point, ...]:
        return self._corners.vertices()

    def is_inside(self, point: Point) -> bool:
        """True if ``point`` lies inside the room; z is ignored."""
        return self._corners.is_inside(point)

    def min_max_xyz(self) -> MinMaxXYZ:
        return self._corners.min_max_xyz()

    def closest_point_wall(self, wall_id: int, point: Point) -> Point:
        """Point on wall ``wall_id`` closest to ``point``."""
        return self._corners.closest_point_to_edge(wall_id, point)


class Block:
    """A box with length, width and height, e.g. a chair.

    Its collision shape is the axis-aligned footprint around the pose position.
    """

    def __init__(self, length: float, width: float, height: float, pose: XYZrZ) -> None:
        self.length = length
        self.width = width
        self.height = height
        self.pose = pose
        x, y = pose.position.x, pose.position.y
        half_l, half_w = 0.5 * length, 0.5 * width
        self._corners = Polygon(
            [
                Point(x - half_l, y - half_w),
                Point(x + half_l, y - half_w),
                Point(x + half_l, y + half_w),
                Point(x - half_l, y + half_w),
            ]
        )

    def collision_shape(self) -> Polygon:
        return self._corners


@dataclass
class CylObject:
    """A cylindrical object such as a chair or table leg."""

    radius: float
    height: float
    pose: XYZrZ = field(default_factory=XYZrZ)

    @classmethod
    def parse(cls, text: str) -> CylObject:
        """Read ``R H x y z Rz`` separated by whitespace."""
        fields = text.split()
        if len(fields) < 6:
            raise ValueError(f"invalid cylinder description: {text!r}")
        try:
            radius, height, x, y, z, rz = (float(value) for value in fields[:6])
        except ValueError as exc:
            raise ValueError(f"invalid cylinder description: {text!r}") from exc
        return cls(radius, height, XYZrZ(Point(x, y, z), rz))

    def collision_shape(self) -> Circle:
        return Circle(self.pose.position, self.radius)


@dataclass
class Dirt:
    """A small dirt particle lying on the floor."""

    radius: float
    pose: XYZrZ = field(default_factory=XYZrZ)


@dataclass
class Ball:
    """A ball resting in the room."""

    radius: float
    pose: XYZrZ = field(default_factory=XYZrZ)


class DynamicDirt:
    """Creates dirt particles at random places and removes those a vehicle passes over."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._dirt: list[Dirt] = []
        self._initial_level = 0

    def __len__(self) -> int:
        return len(self._dirt)

    def __iter__(self) -> Iterator[Dirt]:
        return iter(self._dirt)

    def generate_dirt(self, room: Room, max_particles: int) -> None:
        """Replace all dirt by ``max_particles`` particles placed inside ``room``."""
        self._dirt = []
        bounds = room.min_max_xyz()
        while len(self._dirt) < max_particles:
            dirt = self._generate(
                bounds.min_x + _DIRT_MARGIN,
                bounds.max_x - _DIRT_MARGIN,
                bounds.min_y + _DIRT_MARGIN,
                bounds.max_y - _DIRT_MARGIN,
            )
            if room.is_inside(dirt.pose.position):
                self._dirt.append(dirt)
        self._initial_level = len(self._dirt)

    def dirt_level(self) -> float:
        """Remaining dirt as a percentage of the generated amount; NaN if none was generated."""
        if self._initial_level == 0:
            return math.nan
        return 100 * len(self._dirt) / self._initial_level

    def remove_dirt(self, vehicle: _Cleaner) -> None:
        """Remove every particle closer to the vehicle's center than 0.9 of its radius."""
        reach = _PICKUP_FRACTION * vehicle.radius
        center = vehicle.pose.position
        kept = [d for d in self._dirt if (center - d.pose.position).length() >= reach]
        removed = len(self._dirt) - len(kept)
        before = len(self._dirt)
        self._dirt = kept
        for size in range(before - 1, before - removed - 1, -1):
            level = 100 * size / self._initial_level if self._initial_level else math.nan
            log_debug(
                "DynamicDirt.remove_dirt",
                f"#dirt particles: {size} dirt level: {level}%",
            )

    def _generate(self, min_x: float, max_x: float, min_y: float, max_y: float) -> Dirt:
        x = self._rng.uniform(min_x, max_x)
        y = self._rng.uniform(min_y, max_y)
        radius = self._rng.uniform(_DIRT_MIN_RADIUS, _DIRT_MAX_RADIUS)
        return Dirt(radius, XYZrZ(Point(x, y, 0.0)))