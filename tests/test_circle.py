import math

import pytest

from yaav.cartvec import CartVec
from yaav.circle import Circle, CircleRz
from yaav.point import Point


def test_default_circle():
    center, r = Circle().center_radius()
    assert center == Point.ORIGIN
    assert r == pytest.approx(1.0)


def test_invalid_constant():
    assert Circle.INVALID == Circle(Point(0.0, 0.0, 0.0), -1.0)
    assert Circle.INVALID.is_not_valid()


def test_circle_through_two_points():
    assert Circle.through(Point(-1.0, 0, 0), Point(1.0, 0.0)) == Circle(Point(0.0, 0.0), 1.0)
    assert Circle.through(Point(-1.0, 1, 0), Point(1.0, 1.0)) == Circle(Point(0.0, 1.0), 1.0)


def test_circumcircle():
    c = Circle.circumcircle(Point(2.0, 1, 0), Point(0.0, 5.0), Point(-1.0, 2.0))
    assert c == Circle(Point(1.0, 3.0), math.sqrt(5.0))


def test_circumcircle_of_collinear_points_is_invalid():
    c = Circle.circumcircle(Point(0.0, 0.0), Point(1.0, 1.0), Point(2.0, 2.0))
    assert c.is_not_valid()


def test_translation_operators():
    c1 = Circle()
    c2 = Circle(Point(1.0, 1.0))
    c1 += CartVec(1.0, 1.0)
    assert c1 == c2

    c3 = Circle(Point.ORIGIN, 10)
    c4 = c3 + CartVec(2.0, 3.0)
    assert c4 == Circle(Point(2.0, 3.0), 10)
    c4 -= 2 * CartVec(2.0, 3.0)
    assert c4 == Circle(Point(-2.0, -3.0), 10)


def test_inequality_on_radius():
    assert Circle(Point.ORIGIN, 1.0) != Circle(Point.ORIGIN, 1.5)


def test_is_inside():
    c = Circle(Point.ORIGIN, 1.0)
    assert c.is_inside(Point(0.5, 0.5))
    assert c.is_inside(Point(1.0, 0.0))
    assert not c.is_inside(Point(1.1, 0.0))


def test_area_value():
    assert Circle(Point.ORIGIN, 2.0).area() == pytest.approx(4 * math.pi)


def test_circle_str():
    assert str(Circle(Point(1.0, 2.0), 3.0)) == "C[P[1.000,2.000,0.000],3.000]"


def test_circle_rz_default():
    c1 = CircleRz()
    center, r, rz = c1.center_radius_rz()
    assert center == Point.ORIGIN
    assert r == pytest.approx(1.0)
    assert rz == pytest.approx(0.0)
    assert c1.heading() == CartVec(1.0, 0.0)


def test_circle_rz_translation():
    c1 = CircleRz()
    c2 = CircleRz(Point(1.0, 1.0))
    c1 += CartVec(1.0, 1.0)
    assert c1 == c2


def test_circle_rz_translation_keeps_rotation():
    c = CircleRz(Point.ORIGIN, 10, 20) + CartVec(2.0, 3.0)
    assert c.center == Point(2.0, 3.0)
    assert c.radius == pytest.approx(10)
    assert c.rz == pytest.approx(20)
    assert isinstance(c, CircleRz)


def test_circle_rz_rotation_normalizes():
    assert (CircleRz(Point.ORIGIN, 1.0, 20) + 350.0).rz == pytest.approx(10.0)
    assert (CircleRz(Point.ORIGIN, 1.0, 20) - 30.0).rz == pytest.approx(350.0)


def test_circle_rz_heading_ninety_degrees():
    assert CircleRz(Point.ORIGIN, 1.0, 90.0).heading() == CartVec(0.0, 1.0)


def test_circle_rz_str():
    c = CircleRz(Point(1.0, 2.0), 3.0, 45.0)
    assert str(c) == "CrZ[C[P[1.000,2.000,0.000],3.000], 45.000]"