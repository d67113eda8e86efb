"""Position allocators that draw coordinates from random variables."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Protocol

from nodemobility.geometry import Vector
from nodemobility.position_allocator import PositionAllocator


class _RandomVariable(Protocol):
    def value(self) -> float: ...

    def set_stream(self, stream: int) -> None: ...


@dataclass
class UniformVariable:
    """Uniformly distributed values in [minimum, maximum).

    A non-negative stream number makes the sequence reproducible; a
    negative one draws its seed from the operating system.
    """

    minimum: float = 0.0
    maximum: float = 1.0
    stream: int = -1
    _rng: random.Random = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.set_stream(self.stream)

    def value(self) -> float:
        """Draw a value between minimum and maximum."""
        return self.uniform(self.minimum, self.maximum)

    def uniform(self, low: float, high: float) -> float:
        """Draw a value between low and high."""
        return low + (high - low) * self._rng.random()

    def set_stream(self, stream: int) -> None:
        """Restart the sequence on the given stream."""
        self.stream = stream
        self._rng = random.Random(stream) if stream >= 0 else random.Random()


@dataclass
class ConstantVariable:
    """A random variable that always yields the same value."""

    constant: float = 0.0
    stream: int = field(default=-1, compare=False)

    def value(self) -> float:
        """Return the constant."""
        return self.constant

    def set_stream(self, stream: int) -> None:
        """Record the stream number; the value it yields does not change."""
        self.stream = stream


@dataclass
class RandomRectanglePositionAllocator(PositionAllocator):
    """Random positions within a rectangle, from a pair of random variables."""

    x: _RandomVariable = field(default_factory=UniformVariable)
    y: _RandomVariable = field(default_factory=UniformVariable)
    z: float = 0.0

    def next_position(self) -> Vector:
        x = self.x.value()
        y = self.y.value()
        return Vector(x, y, self.z)

    def assign_streams(self, stream: int) -> int:
        self.x.set_stream(stream)
        self.y.set_stream(stream + 1)
        return 2


@dataclass
class RandomBoxPositionAllocator(PositionAllocator):
    """Random positions within a 3D box, from three random variables."""

    x: _RandomVariable = field(default_factory=UniformVariable)
    y: _RandomVariable = field(default_factory=UniformVariable)
    z: _RandomVariable = field(default_factory=UniformVariable)

    def next_position(self) -> Vector:
        x = self.x.value()
        y = self.y.value()
        z = self.z.value()
        return Vector(x, y, z)

    def assign_streams(self, stream: int) -> int:
        self.x.set_stream(stream)
        self.y.set_stream(stream + 1)
        self.z.set_stream(stream + 2)
        return 3


@dataclass
class RandomDiscPositionAllocator(PositionAllocator):
    """Random positions in a disc, from random polar coordinates about a center.

    With uniform theta and rho the points are denser towards the center;
    use UniformDiscPositionAllocator for a constant density.
    """

    theta: _RandomVariable = field(
        default_factory=lambda: UniformVariable(0.0, 6.2830)
    )
    rho: _RandomVariable = field(default_factory=lambda: UniformVariable(0.0, 200.0))
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def next_position(self) -> Vector:
        theta = self.theta.value()
        rho = self.rho.value()
        return Vector(
            self.x + math.cos(theta) * rho,
            self.y + math.sin(theta) * rho,
            self.z,
        )

    def assign_streams(self, stream: int) -> int:
        self.theta.set_stream(stream)
        self.rho.set_stream(stream + 1)
        return 2


@dataclass
class UniformDiscPositionAllocator(PositionAllocator):
    """Random positions spread with constant density over a disc of radius rho."""

    rho: float = 0.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    _rv: UniformVariable = field(
        default_factory=UniformVariable, init=False, repr=False, compare=False
    )

    def next_position(self) -> Vector:
        while True:
            dx = self._rv.uniform(-self.rho, self.rho)
            dy = self._rv.uniform(-self.rho, self.rho)
            if math.sqrt(dx * dx + dy * dy) <= self.rho:
                break
        return Vector(dx + self.x, dy + self.y, self.z)

    def assign_streams(self, stream: int) -> int:
        self._rv.set_stream(stream)
        return 1