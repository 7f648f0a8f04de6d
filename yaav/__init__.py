"""Autonomous vehicle simulator: geometry, collision detection, simulated hardware, world objects and physics."""

__version__ = "1.2.3"

__all__ = [
    "bumper",
    "cartvec",
    "circle",
    "collision",
    "edge",
    "hardware",
    "inireader",
    "logger",
    "mathdef",
    "objects",
    "physics",
    "point",
    "polygon",
    "reality",
    "strings",
    "tasks",
    "vehicle",
    "xyzrz",
]