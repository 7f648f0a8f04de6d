"""Line segments between two points."""

from __future__ import annotations

from dataclasses import dataclass

from .point import Point


@dataclass(frozen=True, eq=False)
class Edge:
    """A straight edge from ``start`` to ``end``."""

    start: Point
    end: Point

    def length(self) -> float:
        return self.start.distance(self.end)

    def closest_point(self, point: Point) -> Point:
        """Return the point on the edge closest to ``point``."""
        v = self.end - self.start
        w = point - self.start
        t = w.dot(v) / v.dot(v)
        t = min(max(t, 0.0), 1.0)
        return self.start + v * t