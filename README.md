# nodemobility

This package tracks the positions and velocities of moving network nodes.
It contains mobility models, position allocators and conversions between
geographic and Earth-centred (ECEF) Cartesian coordinates. It uses only the
standard library.

## Modules

- `nodemobility.geometry` provides three types:
  - `Vector` is a frozen `x, y, z` dataclass. It supports `+` and `-` and
    has a `length()` method.
  - `Rectangle` has `is_inside`, `closest_side` (which returns a `Side`)
    and `intersection`. `intersection` gives the point where a ray leaves
    the rectangle.
  - `Side` is an enum.

  The module also has `calculate_distance(a, b)`. Both types round-trip
  through text with `str()` and `parse()`: `"x:y:z"` for vectors and
  `"xmin|xmax|ymin|ymax"` for rectangles.
- `nodemobility.waypoint` provides `Waypoint`, a frozen pair of a time in
  seconds and a `Vector`. Its text form is `"time$x:y:z"`. `Waypoint.parse`
  also accepts a trailing `s` on the time.
- `nodemobility.mobility_model` provides `MobilityModel`, the abstract base
  class:
  - `position` is a read/write property and `velocity` is a read-only
    property.
  - `distance_from(other)` and `relative_speed(other)` compare two models.
  - `assign_streams(stream)` returns the number of random streams the model
    uses.
  - Course-change listeners are added with `connect_course_change` and
    removed with `disconnect_course_change`. They are called with the model
    on `notify_course_change()`.
- `nodemobility.position_allocator` provides the `PositionAllocator` base
  class and two allocators:
  - `ListPositionAllocator` cycles through the positions it is given.
    `add_file(path, default_z=0.0, delimiter=",")` reads positions from a
    delimited text file. It skips blank lines, `#` comments and
    single-column lines.
  - `GridPositionAllocator` lays positions out on a grid, row first or
    column first (`LayoutType`).
- `nodemobility.random_allocators` provides `RandomRectanglePositionAllocator`,
  `RandomBoxPositionAllocator`, `RandomDiscPositionAllocator` and
  `UniformDiscPositionAllocator`, which places points with constant density.
  They are driven by `UniformVariable` and `ConstantVariable`.
  `UniformVariable` is reproducible when it is given a non-negative stream
  number.
- `nodemobility.geographic` provides three functions:
  - `geographic_to_cartesian(latitude, longitude, altitude, sph_type)`
  - `cartesian_to_geographic(pos, sph_type)`. It iterates to about 1 m and
    returns latitude, longitude and altitude as a `Vector`.
  - `rand_cartesian_points_around_geographic_point(...)`. It scatters
    points over a spherical Earth. Its random source must have a
    `uniform(low, high)` method, such as `UniformVariable`.

  `EarthSpheroidType` selects `SPHERE`, `GRS80` or `WGS84`.
- `nodemobility.hierarchical` provides `HierarchicalMobilityModel`. It
  reports the sum of a parent model's and a child model's positions and
  velocities. Setting its position moves only the child.
- `nodemobility.waypoint_mobility` provides `WaypointMobilityModel`, which
  moves at constant velocity between timed waypoints:
  - The current time comes from a clock callable that you supply.
  - If that clock also has a `schedule(delay, callback)` method and
    `lazy_notify` is false, an update is scheduled at each waypoint time.
  - It has `add_waypoint`, `next_waypoint`, `waypoints_left`,
    `end_mobility` and `update`.

## What it does not do

The package has no simulator, event loop or clock of its own.
`WaypointMobilityModel` reads time from the clock you pass in. It can only
schedule updates through that clock's `schedule` method, if the clock has
one. There are no models that move on their own over time, such as random
walk or random waypoint. There is no command-line tool.

## Install

    pip install .

## Example

```python
from nodemobility.geometry import Vector
from nodemobility.geographic import (
    EarthSpheroidType,
    cartesian_to_geographic,
    geographic_to_cartesian,
)
from nodemobility.waypoint import Waypoint
from nodemobility.waypoint_mobility import WaypointMobilityModel

ecef = geographic_to_cartesian(47.6, -122.3, 100.0, EarthSpheroidType.WGS84)
lla = cartesian_to_geographic(ecef, EarthSpheroidType.WGS84)
print(lla)  # latitude:longitude:altitude

now = 0.0
model = WaypointMobilityModel(clock=lambda: now)
model.add_waypoint(Waypoint(0.0, Vector(0, 0, 0)))
model.add_waypoint(Waypoint(10.0, Vector(100, 0, 0)))
now = 5.0
print(model.position)  # halfway: 50:0:0
print(model.velocity)  # 10:0:0
```

## Tests

    pip install ".[test]"
    pytest