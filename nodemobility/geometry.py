"""Basic 3D vectors and axis-aligned 2D rectangles."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass


def _format_number(value: float) -> str:
    """Format a float compactly, without a trailing '.0' for whole numbers."""
    if math.isfinite(value) and float(value).is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(float(value))


def _ieee_div(numerator: float, denominator: float) -> float:
    """Divide following IEEE 754 rules instead of raising on zero."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


@dataclass(frozen=True)
class Vector:
    """A point or displacement in 3D space, in meters (or meters/s)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def length(self) -> float:
        """Euclidean norm of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def __add__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __str__(self) -> str:
        return ":".join(_format_number(v) for v in (self.x, self.y, self.z))

    @classmethod
    def parse(cls, text: str) -> Vector:
        """Parse the 'x:y:z' form produced by str()."""
        parts = text.strip().split(":")
        if len(parts) != 3:
            raise ValueError(f"invalid vector: {text!r}")
        x, y, z = (float(part.strip()) for part in parts)
        return cls(x, y, z)


def calculate_distance(a: Vector, b: Vector) -> float:
    """Euclidean distance between two positions."""
    return (a - b).length()


class Side(enum.Enum):
    """The sides of a rectangle."""

    RIGHT = "right"
    LEFT = "left"
    TOP = "top"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned 2D rectangle; z coordinates are ignored."""

    x_min: float = 0.0
    x_max: float = 0.0
    y_min: float = 0.0
    y_max: float = 0.0

    def is_inside(self, position: Vector) -> bool:
        """Whether the x/y of position lie within the rectangle, edges included."""
        return (
            self.x_min <= position.x <= self.x_max
            and self.y_min <= position.y <= self.y_max
        )

    def closest_side(self, position: Vector) -> Side:
        """The side of the rectangle that position is closest to."""
        x, y = position.x, position.y
        if self.is_inside(position):
            x_min_dist = abs(x - self.x_min)
            x_max_dist = abs(self.x_max - x)
            y_min_dist = abs(y - self.y_min)
            y_max_dist = abs(self.y_max - y)
            if min(x_min_dist, x_max_dist) < min(y_min_dist, y_max_dist):
                return Side.LEFT if x_min_dist < x_max_dist else Side.RIGHT
            return Side.BOTTOM if y_min_dist < y_max_dist else Side.TOP

        if x < self.x_min:
            if y < self.y_min:
                return Side.BOTTOM if self.y_min - y > self.x_min - x else Side.LEFT
            if y < self.y_max:
                return Side.LEFT
            return Side.TOP if y - self.y_max > self.x_min - x else Side.LEFT
        if x < self.x_max:
            if y < self.y_min:
                return Side.BOTTOM
            if y < self.y_max:
                raise ValueError(f"cannot classify position {position}")
            return Side.TOP
        if y < self.y_min:
            return Side.BOTTOM if self.y_min - y > x - self.x_min else Side.RIGHT
        if y < self.y_max:
            return Side.RIGHT
        return Side.TOP if y - self.y_max > x - self.x_min else Side.RIGHT

    def intersection(self, current: Vector, speed: Vector) -> Vector:
        """Point where the ray from current along speed leaves the rectangle.

        The current position must lie inside the rectangle.
        """
        if not self.is_inside(current):
            raise ValueError(f"position {current} is outside {self}")
        x_max_y = current.y + _ieee_div(self.x_max - current.x, speed.x) * speed.y
        x_min_y = current.y + _ieee_div(self.x_min - current.x, speed.x) * speed.y
        y_max_x = current.x + _ieee_div(self.y_max - current.y, speed.y) * speed.x
        y_min_x = current.x + _ieee_div(self.y_min - current.y, speed.y) * speed.x
        if self.y_min <= x_max_y <= self.y_max and speed.x >= 0:
            return Vector(self.x_max, x_max_y, 0.0)
        if self.y_min <= x_min_y <= self.y_max and speed.x <= 0:
            return Vector(self.x_min, x_min_y, 0.0)
        if self.x_min <= y_max_x <= self.x_max and speed.y >= 0:
            return Vector(y_max_x, self.y_max, 0.0)
        if self.x_min <= y_min_x <= self.x_max and speed.y <= 0:
            return Vector(y_min_x, self.y_min, 0.0)
        raise ValueError(f"no intersection from {current} along {speed}")

    def __str__(self) -> str:
        return "|".join(
            _format_number(v) for v in (self.x_min, self.x_max, self.y_min, self.y_max)
        )

    @classmethod
    def parse(cls, text: str) -> Rectangle:
        """Parse the 'xMin|xMax|yMin|yMax' form produced by str()."""
        parts = text.strip().split("|")
        if len(parts) != 4:
            raise ValueError(f"invalid rectangle: {text!r}")
        x_min, x_max, y_min, y_max = (float(part.strip()) for part in parts)
        return cls(x_min, x_max, y_min, y_max)