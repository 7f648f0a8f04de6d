# yaav

Yet Another Autonomous Vehicle simulator.

`yaav` models a round autonomous vacuum cleaner that drives around a
room. The room holds obstacles and dirt. The package is a library and
uses only the standard library. It contains:

- **Geometry**: `CartVec` (3D vectors), `Point`, `Edge`, `Circle`,
  `CircleRz`, `Polygon` and `XYZrZ`. `Polygon` offers a point-in-polygon
  test, the closest point to an edge and the smallest enclosing circle.
  `XYZrZ` is a position plus a rotation around the Z axis, in degrees.
  Angle helpers live in `yaav.mathdef`.
- **Collision detection**: `yaav.collision.CollisionDetector` tests a
  circle against another circle or against a polygon. It keeps the
  collision points of the last test.
- **Simulated hardware** (`yaav.hardware`): byte memory, an IO bus with
  internal and external views, interrupt lines with rising-edge
  detection, motors, a battery and a millisecond timer. `yaav.bumper.Bumper`
  writes bumper hits into memory.
- **World objects** (`yaav.objects`): `Room`, `Block`, `CylObject`,
  `Ball`, `Dirt` and `DynamicDirt`. `DynamicDirt` scatters dirt particles
  at random inside the room. A particle disappears when the vehicle's
  centre comes within 0.9 of its radius.
- **Simulation**: `yaav.vehicle.Vehicle` and
  `yaav.reality.VirtualReality`. The physics advances in fixed 5 ms
  steps. You can run one step at a time, or let a periodic background
  task run them.
- **Utilities**: an `.ini` reader (`yaav.inireader.IniReader`), a file
  logger (`yaav.logger`), string helpers (`yaav.strings`) and background
  tasks (`yaav.tasks.PeriodicTask`, `yaav.tasks.EventQueue`).

## Geometry

```python
from yaav.cartvec import CartVec
from yaav.point import Point

a = Point(1.0, 1.0, 1.0)
b = Point(2.0, 2.0, 2.0)
v = a - b                      # Point - Point gives a CartVec
assert v == CartVec(-1.0, -1.0, -1.0)
assert b + v == a

print(CartVec(1.1, -2.2, 3.3))  # [1.100,-2.200,3.300]
assert CartVec.parse("[10.11, 20.22, 30.33]") == CartVec(10.11, 20.22, 30.33)
```

Vectors and points compare equal when each coordinate differs by less
than `1e-8`. `CartVec.parse` and `Point.parse` raise `ValueError` on
malformed text.

```python
from yaav.point import Point
from yaav.polygon import Polygon

square = Polygon([Point(0, 0, 0), Point(0, 2, 0), Point(2, 2, 0), Point(2, 0, 0)])
assert square.is_inside(Point(1.0, 1.0, 0.0))
print(square.smallest_enclosing_circle())              # centre (1, 1), radius sqrt(2)
print(square.closest_point_to_edge(0, Point(-1.0, 1.0, 0.0)))  # P[0.000,1.000,0.000]
```

A polygon needs at least three vertices, and the first three must not be
collinear. Otherwise the constructor raises `ValueError`.

## Collision detection

```python
from yaav.circle import Circle
from yaav.collision import CollisionDetector
from yaav.point import Point
from yaav.polygon import Polygon

detector = CollisionDetector()
triangle = Polygon([Point(0, 0, 0), Point(1, 0, 0), Point(1, 1, 0)])

assert detector.is_colliding(Circle(Point(0, 0.5, 0), 1.0), triangle)
assert not detector.is_colliding(Circle(Point(0, -0.6, 0), 0.5), triangle)
```

After a test, `detector.collision_points()` returns the points found.

## Configuration files

`IniReader` reads `.ini` files. The format works like this:

- `//` starts a comment.
- Keys are stored as `section.key`.
- Lines before the first `[section]` are ignored.
- Commas in values are turned into spaces.
- A line of the form `= value` adds another value to the previous key.
- A quoted value has its quotes removed and its backslash escapes
  resolved when it is read.

```ini
[VR]
maxDirtParticles = 200
cylobjects = 0.05, 0.4, 1.0, 1.0, 0.0, 0
           = 0.05, 0.4, 1.5, 1.0, 0.0, 0
```

```python
from yaav.inireader import IniReader

reader = IniReader()
reader.load("YAAV.ini")
print(reader.get_strings("VR.cylobjects"))   # ['0.05  0.4  1.0  1.0  0.0  0', ...]
print(reader.get_values("VR.maxDirtParticles", int, 1))  # [200]
```

`IniError` is raised in three cases: a file that cannot be opened, a
line without `=` inside a section, and an unknown key. `get_values` also
raises it when a value has too few fields or a field cannot be
converted. `feed()` reads items from any iterable of lines, and
`ini_reader()` returns one reader shared by the whole application.

## Running a simulation

`VirtualReality.init` needs the keys `VR.cylobjects` and
`VR.maxDirtParticles`. Each cylinder is written as `R H x y z Rz`.

```python
import random

from yaav.inireader import IniReader
from yaav.reality import VirtualReality

reader = IniReader()
reader.load("YAAV.ini")

with VirtualReality(random.Random(1)) as world:
    world.init(reader)     # place the vehicle, add cylinders, scatter dirt
    for _ in range(1000):  # 1000 physics steps of 5 ms each
        world.process()
    print(f"dirt left: {world.dirt_level():.1f}%")
```

The background task works like this:

- `world.start_physics()` runs the physics every 5 ms on a background task.
- `world.stop_physics()` halts it.
- `world.start_stop_physics()` toggles between running and halted.
- Leaving the `with` block, or calling `close()`, stops the task and the
  vehicle's control thread.

The vehicle drives with fixed wheel speeds. It does not read its motor
outputs. After hitting a cylinder, a wall or the chair, it backs off and
turns. Every 10 simulated seconds its timer fires a heartbeat interrupt,
which the vehicle counts in `vehicle.heartbeats`.

## Logging

`yaav.logger.get_logger()` returns the shared `Logger`. The first time
you call it, the logger opens `YAAVsimulator.log` in the current
directory for writing. `set_filename()` switches to another file.

The helpers `log_error`, `log_warning`, `log_info` and `log_debug` put
the severity and the place of origin in front of each message. The
logger starts in debug mode:

- In debug mode, debug messages are written and info messages are not.
- After `set_debug_mode(False)`, it is the other way round.
- Errors and warnings are always written.

## What it does not do

The package has no graphical view of the world, no window or controls,
and no command-line program. You drive the simulation from Python, as
shown above. Objects such as `Ball` and `Dirt` hold only their size and
pose, and nothing draws them.