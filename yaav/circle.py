"""Circles in the XY plane, optionally carrying a heading."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import ClassVar

from .cartvec import CartVec
from .mathdef import normalize_degrees, to_radians
from .point import Point


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True, eq=False)
class Circle:
    """A circle given by its center point and radius; a negative radius is invalid."""

    center: Point = field(default_factory=lambda: Point.ORIGIN)
    radius: float = 1.0

    eps_compare: ClassVar[float] = 1e-8
    eps_multiply: ClassVar[float] = 1 + 1e-8
    INVALID: ClassVar[Circle]

    @classmethod
    def through(cls, a: Point, b: Point) -> Circle:
        """Circle with ``a`` and ``b`` on opposite ends of a diameter, at z = 0."""
        center = Point((a.x + b.x) / 2, (a.y + b.y) / 2)
        return cls(center, a.distance(b) / 2)

    @classmethod
    def circumcircle(cls, a: Point, b: Point, c: Point) -> Circle:
        """Circle through three points at z = 0; INVALID if they are collinear."""
        ox = (min(a.x, b.x, c.x) + max(min(a.x, b.x), c.x)) / 2
        oy = (min(a.y, b.y, c.y) + max(min(a.y, b.y), c.y)) / 2
        ax, ay = a.x - ox, a.y - oy
        bx, by = b.x - ox, b.y - oy
        cx, cy = c.x - ox, c.y - oy
        d = (ax * (by - cy) + bx * (cy - ay) + cx * (ay - by)) * 2
        if d == 0:
            return Circle.INVALID
        sa = ax * ax + ay * ay
        sb = bx * bx + by * by
        sc = cx * cx + cy * cy
        x = (sa * (by - cy) + sb * (cy - ay) + sc * (ay - by)) / d
        y = (sa * (cx - bx) + sb * (ax - cx) + sc * (bx - ax)) / d
        p = Point(ox + x, oy + y)
        r = max(p.distance(a), p.distance(b), p.distance(c))
        return cls(p, r)

    def center_radius(self) -> tuple[Point, float]:
        return self.center, self.radius

    def is_not_valid(self) -> bool:
        return self.radius < 0.0

    def is_inside(self, point: Point) -> bool:
        """True if ``point`` lies inside or on the circle, with a small tolerance."""
        return point.distance(self.center) <= self.radius * Circle.eps_multiply

    def area(self) -> float:
        """Returns 2 * pi * radius."""
        return 2 * math.pi * self.radius

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Circle):
            return NotImplemented
        return self.center == other.center and abs(self.radius - other.radius) < 1e-8

    def __add__(self, vector: CartVec) -> Circle:
        """Translate the circle by a vector."""
        if not isinstance(vector, CartVec):
            return NotImplemented
        return replace(self, center=self.center + vector)

    def __sub__(self, vector: CartVec) -> Circle:
        if not isinstance(vector, CartVec):
            return NotImplemented
        return replace(self, center=self.center - vector)

    def __str__(self) -> str:
        return f"C[{self.center},{self.radius:5.3f}]"


Circle.INVALID = Circle(Point.ORIGIN, -1.0)


@dataclass(frozen=True, eq=False)
class CircleRz(Circle):
    """A circle with a rotation ``rz`` around Z, in degrees."""

    rz: float = 0.0

    def center_radius_rz(self) -> tuple[Point, float, float]:
        return self.center, self.radius, self.rz

    def heading(self) -> CartVec:
        """Unit vector in the XY plane pointing along ``rz``."""
        angle = to_radians(self.rz)
        return CartVec(math.cos(angle), math.sin(angle))

    def __add__(self, other: CartVec | float) -> CircleRz:
        """Translate by a vector, or rotate by degrees (normalized)."""
        if _is_scalar(other):
            return replace(self, rz=normalize_degrees(self.rz + other))
        return super().__add__(other)

    def __sub__(self, other: CartVec | float) -> CircleRz:
        if _is_scalar(other):
            return replace(self, rz=normalize_degrees(self.rz - other))
        return super().__sub__(other)

    def __str__(self) -> str:
        return f"CrZ[{Circle.__str__(self)}, {self.rz:.3f}]"