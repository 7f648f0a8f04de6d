"""Collision detection between circles and between a circle and a polygon."""

from __future__ import annotations

from .circle import Circle
from .logger import log_debug
from .point import Point
from .polygon import Polygon

_WHERE_POLYGON = "CollisionDetector.is_colliding(circle, polygon)"
_WHERE_CIRCLE = "CollisionDetector.is_colliding(circle, circle)"


class CollisionDetector:
    """Detects collisions and remembers the collision points of the last test."""

    def __init__(self) -> None:
        self._points: list[Point] = []

    def collision_points(self) -> tuple[Point, ...]:
        """Collision points, in world coordinates, found by the last test."""
        return tuple(self._points)

    def is_colliding(self, circle: Circle, other: Circle | Polygon) -> bool:
        """Test ``circle`` against another circle or against a polygon."""
        if isinstance(other, Polygon):
            return self._circle_polygon(circle, other)
        if isinstance(other, Circle):
            return self._circle_circle(circle, other)
        raise TypeError(f"cannot test collision with {type(other).__name__}")

    def _circle_polygon(self, circle: Circle, polygon: Polygon) -> bool:
        if not self._circle_circle(circle, polygon.smallest_enclosing_circle()):
            log_debug(_WHERE_POLYGON, "Not colliding with smallest enclosing circle")
            return False
        self._points = []
        for index in range(len(polygon)):
            closest = polygon.closest_point_to_edge(index, circle.center)
            log_debug(_WHERE_POLYGON, f"closestPoint = {closest}")
            if closest.distance(circle.center) <= circle.radius:
                self._points.append(closest)
                log_debug(
                    _WHERE_POLYGON,
                    f"#{len(self._points)} vertexID = {index} WCS: {closest}",
                )
        return bool(self._points)

    def _circle_circle(self, first: Circle, second: Circle) -> bool:
        self._points = []
        delta = second.center - first.center
        total = first.radius + second.radius
        if delta.length() > total:
            return False
        point = first.center + delta * (total / first.radius)
        self._points.append(point)
        log_debug(_WHERE_CIRCLE, f"WCS collision point: {point}")
        return True