"""Simulated vehicle hardware: memory, IO bus, interrupts, motors and timers."""

from __future__ import annotations

import struct
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, IntEnum

from .physics import SIMTIME_MSEC, DoPhysics

MAX_BUMPERS = 10

Isr = Callable[[], None]


class MemoryIndex(IntEnum):
    """Memory locations used by the sensors, and the memory size."""

    NOTUSED = 0
    BUMPER0 = 1
    BUMPER1 = 2
    BUMPER2 = 3
    BUMPER3 = 4
    BUMPER4 = 5
    BUMPER5 = 6
    BUMPER6 = 7
    BUMPER7 = 8
    BUMPER8 = 9
    BUMPER9 = 10
    MEM_SIZE = 128


class BoolIn(IntEnum):
    """Boolean inputs of the processor: the interrupt lines."""

    IRQ0 = 0
    IRQ1 = 1
    IRQ2 = 2
    IRQ3 = 3
    IRQ4 = 4
    IRQ5 = 5
    IRQ6 = 6
    IRQ7 = 7
    IRQ8 = 8
    IRQ9 = 9


class BoolOut(IntEnum):
    """Boolean outputs of the processor."""

    MOTORLEFT_FORWARD_BOOL = 0
    MOTORRIGHT_FORWARD_BOOL = 1


class IntOut(IntEnum):
    """Integer outputs of the processor."""

    MOTORLEFT_PWM_INT = 0
    MOTORRIGHT_PWM_INT = 1


N_IRQ_IN = len(BoolIn)
N_BOOL_IN = N_IRQ_IN
N_BOOL_OUT = len(BoolOut)
N_INT_IN = 0
N_INT_OUT = len(IntOut)

_INT = struct.Struct("<i")


class Memory:
    """Byte-addressed memory that can hold bytes, 32-bit ints and booleans."""

    def __init__(self, size: int = MemoryIndex.MEM_SIZE) -> None:
        self._data = bytearray(size)

    def __len__(self) -> int:
        return len(self._data)

    def _check(self, offset: int, width: int) -> int:
        if offset < 0 or offset + width > len(self._data):
            raise IndexError(f"memory offset {offset} out of range")
        return offset

    def write_byte(self, value: int, offset: int) -> None:
        self._data[self._check(offset, 1)] = value

    def write_int(self, value: int, offset: int) -> None:
        _INT.pack_into(self._data, self._check(offset, _INT.size), value)

    def write_bool(self, value: bool, offset: int) -> None:
        self._data[self._check(offset, 1)] = 1 if value else 0

    def read_byte(self, offset: int) -> int:
        return self._data[self._check(offset, 1)]

    def read_int(self, offset: int) -> int:
        return _INT.unpack_from(self._data, self._check(offset, _INT.size))[0]

    def read_bool(self, offset: int) -> bool:
        return self._data[self._check(offset, 1)] != 0


@dataclass
class IOBus:
    """The signals between the processor and the outside world."""

    bool_in: list[bool] = field(default_factory=lambda: [False] * N_BOOL_IN)
    bool_out: list[bool] = field(default_factory=lambda: [False] * N_BOOL_OUT)
    int_in: list[int] = field(default_factory=lambda: [0] * N_INT_IN)
    int_out: list[int] = field(default_factory=lambda: [0] * N_INT_OUT)


def _checked(values: list, index: int) -> int:
    if not 0 <= index < len(values):
        raise IndexError(f"IO index {index} out of range")
    return index


class IOExtern:
    """The outside world's view of the bus: writes inputs, reads outputs."""

    def __init__(self, bus: IOBus) -> None:
        self.bus = bus

    def set_bool_in(self, index: int, value: bool) -> None:
        self.bus.bool_in[_checked(self.bus.bool_in, index)] = value

    def get_bool_out(self, index: int) -> bool:
        return self.bus.bool_out[_checked(self.bus.bool_out, index)]

    def set_int_in(self, index: int, value: int) -> None:
        self.bus.int_in[_checked(self.bus.int_in, index)] = value

    def get_int_out(self, index: int) -> int:
        return self.bus.int_out[_checked(self.bus.int_out, index)]


class IOIntern:
    """The processor's view of the bus: writes outputs, reads inputs."""

    def __init__(self, bus: IOBus) -> None:
        self.bus = bus

    def set_bool_out(self, index: int, value: bool) -> None:
        self.bus.bool_out[_checked(self.bus.bool_out, index)] = value

    def get_bool_in(self, index: int) -> bool:
        return self.bus.bool_in[_checked(self.bus.bool_in, index)]

    def set_int_out(self, index: int, value: int) -> None:
        self.bus.int_out[_checked(self.bus.int_out, index)] = value

    def get_int_in(self, index: int) -> int:
        return self.bus.int_in[_checked(self.bus.int_in, index)]


class IRQStatus:
    """One interrupt line with edge detection and an optional service routine."""

    def __init__(self) -> None:
        self._current = False
        self._previous = False
        self._isr: Isr | None = None

    def trigger(self, value: bool) -> None:
        self._previous = self._current
        self._current = value

    def get(self) -> bool:
        return self._current

    def rising_edge(self) -> bool:
        return self._current and not self._previous

    def set_isr(self, isr: Isr | None) -> None:
        self._isr = isr

    def react(self) -> None:
        """Run the service routine if one is set and the line has a rising edge."""
        if self._isr is not None and self.rising_edge():
            self._isr()


class IRQBus:
    """A fixed number of interrupt lines."""

    def __init__(self, size: int = N_IRQ_IN) -> None:
        self._lines = [IRQStatus() for _ in range(size)]

    def __getitem__(self, index: int) -> IRQStatus:
        return self._lines[index]

    def __len__(self) -> int:
        return len(self._lines)


@dataclass
class Battery:
    """Battery charge level in percent."""

    level: int = 100


@dataclass
class Sensor:
    """A sensor that stores its readings in memory at up to three locations."""

    memory: Memory
    index1: int
    index2: int = 0
    index3: int = 0


@dataclass
class Actuator:
    """An actuator that takes its settings from memory at up to three locations."""

    memory: Memory
    index1: int
    index2: int = 0
    index3: int = 0


class Motor(DoPhysics):
    """A motor driven by a PWM output and a direction output of the processor."""

    # Held as a whole number, so the nominal 0.25 truncates to 0.
    MAX_SPEED = int(0.25)

    def __init__(self, io_extern: IOExtern, index_pwm: int, index_forward: int) -> None:
        self.io_extern = io_extern
        self.index_pwm = index_pwm
        self.index_forward = index_forward
        self.max_speed = self.MAX_SPEED
        self.current_speed = 0.0

    def process(self) -> None:
        pwm = self.io_extern.get_int_out(self.index_pwm)
        speed = float(int(pwm * self.max_speed / 100))
        forward = self.io_extern.get_bool_out(self.index_forward)
        self.current_speed = speed if forward else -speed

    def speed(self) -> float:
        """Speed used by the vehicle physics: the maximum speed."""
        return float(self.max_speed)


class TimerMode(Enum):
    ONE_SHOT = "one_shot"
    PERIODIC = "periodic"


class Timer(DoPhysics):
    """Counts simulated milliseconds and runs a service routine when time is up."""

    def __init__(self) -> None:
        self._elapsed_ms = 0
        self._running = False
        self._mode = TimerMode.ONE_SHOT
        self._time_ms = 0
        self._isr: Isr | None = None

    def process(self) -> None:
        if not self._running:
            return
        self._elapsed_ms += SIMTIME_MSEC
        if self._elapsed_ms >= self._time_ms:
            if self._isr is not None:
                self._isr()
            self._elapsed_ms = 0
            self._running = self._mode is TimerMode.PERIODIC

    def set_time(self, time_ms: int, mode: TimerMode) -> None:
        self._time_ms = time_ms
        self._mode = mode

    def set_isr(self, isr: Isr | None) -> None:
        self._isr = isr

    def start(self) -> None:
        self._running = True

    @property
    def is_running(self) -> bool:
        return self._running

    def elapsed_time(self) -> int:
        return self._elapsed_ms