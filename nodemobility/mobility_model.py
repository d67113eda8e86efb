"""Base class for models tracking an object's position and velocity.

All coordinates are in meters and velocities in meters per second.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from nodemobility.geometry import Vector, calculate_distance

CourseChangeCallback = Callable[["MobilityModel"], None]


class MobilityModel(ABC):
    """Keeps track of the current position and velocity of an object.

    Listeners registered with connect_course_change are called with the
    model whenever a subclass reports a change of position or velocity.
    """

    def __init__(self) -> None:
        self._course_change_listeners: list[CourseChangeCallback] = []

    @property
    def position(self) -> Vector:
        """The current position."""
        return self._get_position()

    @position.setter
    def position(self, value: Vector) -> None:
        self._set_position(value)

    @property
    def velocity(self) -> Vector:
        """The current velocity."""
        return self._get_velocity()

    def distance_from(self, other: MobilityModel) -> float:
        """Distance in meters between this object and another."""
        return calculate_distance(self._get_position(), other._get_position())

    def relative_speed(self, other: MobilityModel) -> float:
        """Magnitude of the velocity difference, in meters per second."""
        return (self.velocity - other.velocity).length()

    def assign_streams(self, stream: int) -> int:
        """Fix the random streams used by this model; return how many were used."""
        return self._assign_streams(stream)

    def connect_course_change(self, callback: CourseChangeCallback) -> None:
        """Register a listener for course changes."""
        self._course_change_listeners.append(callback)

    def disconnect_course_change(self, callback: CourseChangeCallback) -> None:
        """Remove every registration of a listener; unknown listeners are ignored."""
        self._course_change_listeners = [
            listener
            for listener in self._course_change_listeners
            if listener != callback
        ]

    def notify_course_change(self) -> None:
        """Tell listeners that the position or velocity changed."""
        for listener in list(self._course_change_listeners):
            listener(self)

    @abstractmethod
    def _get_position(self) -> Vector:
        """Return the current position."""

    @abstractmethod
    def _set_position(self, position: Vector) -> None:
        """Move the object to position."""

    @abstractmethod
    def _get_velocity(self) -> Vector:
        """Return the current velocity."""

    def _assign_streams(self, stream: int) -> int:
        return 0