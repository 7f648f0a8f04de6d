"""Cartesian vectors in 3D space."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import ClassVar

_NUMBER = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
_TRIPLE = re.compile(
    rf"\s*\[\s*({_NUMBER})\s*,\s*({_NUMBER})\s*,\s*({_NUMBER})\s*\]\s*"
)


def _parse_triple(text: str, kind: str) -> tuple[float, float, float]:
    """Parse text of the form ``[x,y,z]``; whitespace between tokens is allowed."""
    match = _TRIPLE.fullmatch(text)
    if match is None:
        raise ValueError(f"invalid {kind} syntax: {text!r}")
    x, y, z = (float(group) for group in match.groups())
    return x, y, z


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _close(a: float, b: float) -> bool:
    return abs(a - b) < CartVec.eps


@dataclass(frozen=True, eq=False)
class CartVec:
    """A Cartesian vector [x, y, z]; equality uses the tolerance ``eps``."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    eps: ClassVar[float] = 1e-8
    ZERO: ClassVar[CartVec]
    UNIT_X: ClassVar[CartVec]
    UNIT_Y: ClassVar[CartVec]
    UNIT_Z: ClassVar[CartVec]

    @classmethod
    def parse(cls, text: str) -> CartVec:
        """Read a vector written as ``[x,y,z]``."""
        return cls(*_parse_triple(text, "vector"))

    def xyz(self) -> tuple[float, float, float]:
        return self.x, self.y, self.z

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CartVec):
            return NotImplemented
        return _close(self.x, other.x) and _close(self.y, other.y) and _close(self.z, other.z)

    def __add__(self, other: CartVec) -> CartVec:
        if not isinstance(other, CartVec):
            return NotImplemented
        return CartVec(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: CartVec) -> CartVec:
        if not isinstance(other, CartVec):
            return NotImplemented
        return CartVec(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> CartVec:
        if not _is_scalar(scalar):
            return NotImplemented
        return CartVec(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> CartVec:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> CartVec:
        if not _is_scalar(scalar):
            return NotImplemented
        return CartVec(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> CartVec:
        return CartVec(-self.x, -self.y, -self.z)

    def __pos__(self) -> CartVec:
        return self

    def __str__(self) -> str:
        return f"[{self.x:5.3f},{self.y:5.3f},{self.z:5.3f}]"

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def distance(self, other: CartVec) -> float:
        """Distance between the end points of two vectors."""
        return (self - other).length()

    def normalized(self) -> CartVec:
        """Return the vector scaled to unit length."""
        return self / self.length()

    def dot(self, other: CartVec) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: CartVec) -> CartVec:
        return CartVec(
            self.y * other.z - self.z * other.y,
            -self.x * other.z + self.z * other.x,
            self.x * other.y - self.y * other.x,
        )

    def angle(self, other: CartVec) -> float:
        """Angle in radians between this vector and ``other``."""
        xx_length = self.length()
        if _close(xx_length, 0.0):
            return 0.0
        zz = self.cross(other)
        zz_length = zz.length()
        if _close(zz_length, 0.0):
            # Parallel or anti-parallel.
            return math.pi if -other == self else 0.0
        xx = self / xx_length
        zz = zz / zz_length
        yy = zz.cross(xx)
        return math.atan2(yy.dot(other), xx.dot(other))

    def rotated_around_z(self, cos_phi: float, sin_phi: float) -> CartVec:
        return CartVec(
            cos_phi * self.x - sin_phi * self.y,
            sin_phi * self.x + cos_phi * self.y,
            self.z,
        )

    def rotated_around_y(self, cos_phi: float, sin_phi: float) -> CartVec:
        return CartVec(
            cos_phi * self.x + sin_phi * self.z,
            self.y,
            -sin_phi * self.x + cos_phi * self.z,
        )

    def rotated_around_x(self, cos_phi: float, sin_phi: float) -> CartVec:
        return CartVec(
            self.x,
            cos_phi * self.y - sin_phi * self.z,
            sin_phi * self.y + cos_phi * self.z,
        )

    def rotated_around(self, axis: CartVec, cos_phi: float, sin_phi: float) -> CartVec:
        """Rotate around an arbitrary axis; a zero axis leaves the vector unchanged."""
        if _close(axis.length(), 0.0):
            return self
        zz = axis.normalized()
        yy = zz.cross(self)
        yy_length = yy.length()
        if _close(yy_length, 0.0):
            # Vector lies along the axis or is zero.
            return self
        yy = yy / yy_length
        xx = yy.cross(zz)
        local = CartVec(self.dot(xx), self.dot(yy), self.dot(zz))
        local = local.rotated_around_z(cos_phi, sin_phi)
        return xx * local.x + yy * local.y + zz * local.z


CartVec.ZERO = CartVec(0.0, 0.0, 0.0)
CartVec.UNIT_X = CartVec(1.0, 0.0, 0.0)
CartVec.UNIT_Y = CartVec(0.0, 1.0, 0.0)
CartVec.UNIT_Z = CartVec(0.0, 0.0, 1.0)