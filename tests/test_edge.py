import pytest

from yaav.edge import Edge
from yaav.point import Point

P1 = Point(0.0, 0.0)
P2 = Point(1.0, 0.0)


@pytest.fixture
def edge():
    return Edge(P1, P2)


def test_closest_point_at_start(edge):
    assert edge.closest_point(Point(0.0, 0.0)) == P1


def test_closest_point_clamped_to_end(edge):
    assert edge.closest_point(Point(1.0, 1.0)) == P2


def test_closest_point_projection(edge):
    assert edge.closest_point(Point(0.5, 1.0)) == Point(0.5, 0.0)


def test_closest_point_clamped_to_start(edge):
    assert edge.closest_point(Point(-0.5, 1.0)) == P1


def test_length(edge):
    assert edge.length() == pytest.approx(1.0)