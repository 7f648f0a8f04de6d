"""Planar polygons in 3D space."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from .cartvec import CartVec
from .circle import Circle
from .edge import Edge
from .mathdef import to_radians
from .point import Point


@dataclass(frozen=True)
class MinMaxXYZ:
    """Bounding-box extremes of a set of vertices."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float
    min_z: float
    max_z: float


def _cross_2d(p1: CartVec, p2: CartVec) -> float:
    return p1.x * p2.y - p1.y * p2.x


class Polygon:
    """A closed shape of coplanar edges joining consecutive vertices."""

    def __init__(self, vertices: Iterable[Point]) -> None:
        self._vertices: list[Point] = list(vertices)
        if len(self._vertices) < 3:
            raise ValueError("a polygon needs at least 3 vertices")
        self.normal = CartVec()
        self.calc_normal()
        self._circle = self._make_smallest_enclosing_circle()

    def __getitem__(self, index: int) -> Point:
        return self._vertices[index]

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._vertices)

    def __str__(self) -> str:
        points = "".join(f" {p}" for p in self._vertices)
        return f"Poly[{points} Normal{self.normal}]"

    def add_vertex(self, vertex: Point) -> None:
        self._vertices.append(vertex)
        self._circle = self._make_smallest_enclosing_circle()

    def vertices(self) -> tuple[Point, ...]:
        return tuple(self._vertices)

    def calc_normal(self) -> None:
        """Compute the unit normal from the first three vertices."""
        v = self._vertices
        normal = (v[2] - v[1]).cross(v[0] - v[1])
        if normal.length() == 0.0:
            raise ValueError("the first three vertices are collinear")
        self.normal = normal.normalized()

    def is_facing(self, point: Point) -> bool:
        """True if ``point`` lies on the side the normal points to."""
        return self.normal.dot(point - self._vertices[0]) >= 0.0

    def edge(self, index: int) -> Edge:
        """Edge from vertex ``index`` to the next one, wrapping around."""
        n = len(self._vertices)
        return Edge(self._vertices[index % n], self._vertices[(index + 1) % n])

    def closest_point_to_edge(self, index: int, point: Point) -> Point:
        return self.edge(index).closest_point(point)

    def min_max_xyz(self) -> MinMaxXYZ:
        xs = [v.x for v in self._vertices]
        ys = [v.y for v in self._vertices]
        zs = [v.z for v in self._vertices]
        return MinMaxXYZ(min(xs), max(xs), min(ys), max(ys), min(zs), max(zs))

    def smallest_enclosing_circle(self) -> Circle:
        return self._circle

    def __iadd__(self, vector: CartVec) -> Polygon:
        if not isinstance(vector, CartVec):
            return NotImplemented
        self._vertices = [v + vector for v in self._vertices]
        self._circle = self._make_smallest_enclosing_circle()
        return self

    def __isub__(self, vector: CartVec) -> Polygon:
        if not isinstance(vector, CartVec):
            return NotImplemented
        self._vertices = [v - vector for v in self._vertices]
        self._circle = self._make_smallest_enclosing_circle()
        return self

    def _rotate(self, angle: float, axis: str) -> None:
        radians = to_radians(angle)
        cos_phi, sin_phi = math.cos(radians), math.sin(radians)
        self._vertices = [
            getattr(v, f"rotated_around_{axis}")(cos_phi, sin_phi) for v in self._vertices
        ]
        self.calc_normal()
        self._circle = self._make_smallest_enclosing_circle()

    def rotate_around_x(self, angle: float) -> None:
        """Rotate around the X axis by ``angle`` degrees."""
        self._rotate(angle, "x")

    def rotate_around_y(self, angle: float) -> None:
        """Rotate around the Y axis by ``angle`` degrees."""
        self._rotate(angle, "y")

    def rotate_around_z(self, angle: float) -> None:
        """Rotate around the Z axis by ``angle`` degrees."""
        self._rotate(angle, "z")

    def is_inside(self, point: Point) -> bool:
        """Even-odd test in the XY plane; z is ignored."""
        inside = False
        previous = self._vertices[-1]
        for current in self._vertices:
            if (current.y > point.y) != (previous.y > point.y) and point.x < (
                previous.x - current.x
            ) * (point.y - current.y) / (previous.y - current.y) + current.x:
                inside = not inside
            previous = current
        return inside

    def are_inside(self, points: Iterable[Point]) -> bool:
        return all(self.is_inside(p) for p in points)

    def _make_smallest_enclosing_circle(self) -> Circle:
        shuffled = list(self._vertices)
        random.shuffle(shuffled)
        circle = Circle.INVALID
        for i, p in enumerate(shuffled):
            if circle.is_not_valid() or not circle.is_inside(p):
                circle = self._circle_one_point(shuffled[: i + 1], p)
        return circle

    def _circle_one_point(self, points: Sequence[Point], p: Point) -> Circle:
        circle = Circle(p, 0.0)
        for i, q in enumerate(points):
            if not circle.is_inside(q):
                if circle.radius == 0:
                    circle = Circle.through(p, q)
                else:
                    circle = self._circle_two_points(points[: i + 1], p, q)
        return circle

    @staticmethod
    def _circle_two_points(points: Sequence[Point], p: Point, q: Point) -> Circle:
        circ = Circle.through(p, q)
        left = Circle.INVALID
        right = Circle.INVALID
        pq = q - p
        for r in points:
            if circ.is_inside(r):
                continue
            cross = _cross_2d(pq, r - p)
            c = Circle.circumcircle(p, q, r)
            if c.is_not_valid():
                continue
            side = _cross_2d(pq, c.center - p)
            if cross > 0 and (
                left.is_not_valid() or side > _cross_2d(pq, left.center - p)
            ):
                left = c
            elif cross < 0 and (
                right.is_not_valid() or side < _cross_2d(pq, right.center - p)
            ):
                right = c
        if left.is_not_valid() and right.is_not_valid():
            return circ
        if left.is_not_valid():
            return right
        if right.is_not_valid():
            return left
        return left if left.radius <= right.radius else right