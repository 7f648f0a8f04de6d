"""Angle conversion helpers used throughout the simulator."""

_DEGREES_TO_RADIANS = 0.0174532925
_RADIANS_TO_DEGREES = 57.2957795130


def to_radians(x: float) -> float:
    """Convert an angle in degrees to radians."""
    return _DEGREES_TO_RADIANS * x


def to_degrees(x: float) -> float:
    """Convert an angle in radians to degrees."""
    return _RADIANS_TO_DEGREES * x


def normalize_degrees(angle: float) -> float:
    """Return the angle brought into the range 0 <= angle <= 360 degrees."""
    while angle > 360:
        angle -= 360
    while angle < 0:
        angle += 360
    return angle