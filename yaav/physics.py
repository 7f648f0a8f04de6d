"""Simulation timing, shared physics state and the physics process interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import ClassVar

from .cartvec import CartVec

SIMTIME_MSEC = 5
SIMTIME_SEC = 0.005


class PhysicsStates(IntEnum):
    """Indices into a PhysicsState."""

    CYLOBJ_COLLISION = 0
    WALL_COLLISION = 1


class PhysicsState:
    """A fixed number of integer flags, one per PhysicsStates member, all zero at first."""

    def __init__(self, size: int = len(PhysicsStates)) -> None:
        self._values = [0] * size

    def __getitem__(self, index: int) -> int:
        return self._values[self._check(index)]

    def __setitem__(self, index: int, value: int) -> None:
        self._values[self._check(index)] = value

    def __len__(self) -> int:
        return len(self._values)

    def reset(self) -> None:
        """Set every flag back to zero."""
        self._values = [0] * len(self._values)

    def _check(self, index: int) -> int:
        if not 0 <= index < len(self._values):
            raise IndexError(f"physics state index {index} out of range")
        return index


class DoPhysics(ABC):
    """A component advanced by one simulation step on each call to ``process``.

    ``physics_state`` and ``vehicle_collisions`` are shared by all components.
    """

    physics_state: ClassVar[PhysicsState] = PhysicsState()
    vehicle_collisions: ClassVar[list[CartVec]] = []

    @abstractmethod
    def process(self) -> None:
        """Advance the component by one simulation step."""