"""Points in 3D Cartesian space."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from .cartvec import CartVec, _parse_triple


@dataclass(frozen=True, eq=False)
class Point:
    """A position without dimensions; can be translated by a CartVec."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    eps: ClassVar[float] = CartVec.eps
    ORIGIN: ClassVar[Point]

    @classmethod
    def parse(cls, text: str) -> Point:
        """Read a point written as ``[x,y,z]``."""
        return cls(*_parse_triple(text, "point"))

    def xyz(self) -> tuple[float, float, float]:
        return self.x, self.y, self.z

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        eps = Point.eps
        return (
            abs(self.x - other.x) < eps
            and abs(self.y - other.y) < eps
            and abs(self.z - other.z) < eps
        )

    def __add__(self, other: CartVec) -> Point:
        if not isinstance(other, CartVec):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Point | CartVec) -> Point | CartVec:
        """Point - Point gives a CartVec; Point - CartVec gives a Point."""
        if isinstance(other, Point):
            return CartVec(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, CartVec):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __str__(self) -> str:
        return f"P[{self.x:5.3f},{self.y:5.3f},{self.z:5.3f}]"

    def rotated_around_z(self, cos_phi: float, sin_phi: float) -> Point:
        return Point(
            cos_phi * self.x - sin_phi * self.y,
            sin_phi * self.x + cos_phi * self.y,
            self.z,
        )

    def rotated_around_y(self, cos_phi: float, sin_phi: float) -> Point:
        return Point(
            cos_phi * self.x + sin_phi * self.z,
            self.y,
            -sin_phi * self.x + cos_phi * self.z,
        )

    def rotated_around_x(self, cos_phi: float, sin_phi: float) -> Point:
        return Point(
            self.x,
            cos_phi * self.y - sin_phi * self.z,
            sin_phi * self.y + cos_phi * self.z,
        )

    def distance(self, other: Point) -> float:
        return math.sqrt(
            (self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2
        )


Point.ORIGIN = Point(0.0, 0.0, 0.0)