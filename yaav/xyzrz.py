"""Pose: a position plus a rotation around the Z axis."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .cartvec import CartVec
from .mathdef import normalize_degrees, to_radians
from .point import Point


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(eq=False)
class XYZrZ:
    """Position [x, y, z] and rotation ``rz`` around Z, in degrees."""

    position: Point = field(default_factory=Point)
    rz: float = 0.0

    @classmethod
    def from_coordinates(cls, x: float, y: float, z: float = 0.0, rz: float = 0.0) -> XYZrZ:
        return cls(Point(x, y, z), rz)

    def position_rz(self) -> tuple[Point, float]:
        return self.position, self.rz

    def __add__(self, other: CartVec | float) -> XYZrZ:
        """Translate by a CartVec, or rotate by a number of degrees (normalized)."""
        if isinstance(other, CartVec):
            return XYZrZ(self.position + other, self.rz)
        if _is_scalar(other):
            return XYZrZ(self.position, normalize_degrees(self.rz + other))
        return NotImplemented

    def __sub__(self, other: CartVec | float) -> XYZrZ:
        if isinstance(other, CartVec):
            return XYZrZ(self.position - other, self.rz)
        if _is_scalar(other):
            return XYZrZ(self.position, normalize_degrees(self.rz - other))
        return NotImplemented

    def __mul__(self, scalar: float) -> XYZrZ:
        """Scale the position; the rotation is reset to 0."""
        if not _is_scalar(scalar):
            return NotImplemented
        p = self.position
        return XYZrZ(Point(p.x * scalar, p.y * scalar, p.z * scalar))

    def __iadd__(self, other: CartVec | float) -> XYZrZ:
        """Translate in place, or add degrees to ``rz`` without normalizing."""
        if isinstance(other, CartVec):
            self.position = self.position + other
        elif _is_scalar(other):
            self.rz += other
        else:
            return NotImplemented
        return self

    def __isub__(self, other: CartVec | float) -> XYZrZ:
        if isinstance(other, CartVec):
            self.position = self.position - other
        elif _is_scalar(other):
            self.rz -= other
        else:
            return NotImplemented
        return self

    def __str__(self) -> str:
        return f"XYZrZ[{self.position}, {self.rz:.3f}]"

    def heading(self) -> CartVec:
        """Unit vector in the XY plane pointing along ``rz``."""
        angle = to_radians(self.rz)
        return CartVec(math.cos(angle), math.sin(angle))

    def at_distance(self, distance: float) -> Point:
        """Point at ``distance`` ahead along the heading, at the same height."""
        angle = to_radians(self.rz)
        return Point(
            self.position.x + distance * math.cos(angle),
            self.position.y + distance * math.sin(angle),
            self.position.z,
        )