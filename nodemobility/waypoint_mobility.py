"""A mobility model moving between timed waypoints at constant velocity."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import replace
from typing import Callable

from nodemobility.geometry import Vector
from nodemobility.mobility_model import MobilityModel
from nodemobility.waypoint import Waypoint

Clock = Callable[[], float]


class WaypointMobilityModel(MobilityModel):
    """Position and velocity derived from a sequence of waypoints.

    The first waypoint gives the initial position, with zero velocity until
    its time. Between waypoints the object moves in a straight line at
    constant velocity; after the last one it stays still.

    ``clock`` returns the current time in seconds. If it also has a
    ``schedule(delay, callback)`` method and ``lazy_notify`` is false, an
    update is scheduled at each waypoint time so that course-change
    listeners hear about every waypoint as it is reached. Otherwise
    listeners are only told when the state is next queried.

    With ``initial_position_is_waypoint``, setting the position before any
    waypoint exists adds a waypoint at the current time.
    """

    def __init__(
        self,
        clock: Clock,
        lazy_notify: bool = False,
        initial_position_is_waypoint: bool = False,
    ) -> None:
        super().__init__()
        self._clock = clock
        self.lazy_notify = lazy_notify
        self.initial_position_is_waypoint = initial_position_is_waypoint
        self._first = True
        self._waypoints: deque[Waypoint] = deque()
        self._current = Waypoint()
        self._next = Waypoint()
        self._velocity = Vector()

    def add_waypoint(self, waypoint: Waypoint) -> None:
        """Append a waypoint; times must be strictly increasing."""
        if self._first:
            self._first = False
            self._current = waypoint
            self._next = waypoint
        else:
            if self._waypoints and self._waypoints[-1].time >= waypoint.time:
                raise ValueError("waypoints must be added in ascending time order")
            self._waypoints.append(waypoint)

        if not self.lazy_notify:
            schedule = getattr(self._clock, "schedule", None)
            if schedule is not None:
                schedule(waypoint.time - self._clock(), self.update)

    def next_waypoint(self) -> Waypoint:
        """The waypoint the object is travelling towards."""
        self.update()
        return self._next

    def waypoints_left(self) -> int:
        """Number of waypoints remaining after the next one."""
        self.update()
        return len(self._waypoints)

    def end_mobility(self) -> None:
        """Drop all waypoints and freeze the object where it is.

        Waypoints added afterwards behave as they would for a new object.
        """
        self._waypoints.clear()
        self._current = replace(self._current, time=math.inf)
        self._next = replace(self._next, time=math.inf)
        self._first = True

    def update(self) -> None:
        """Bring position and velocity up to the current time."""
        now = self._clock()
        new_waypoint = False

        if now < self._current.time:
            return

        while now >= self._next.time:
            if not self._waypoints:
                if self._current.time <= self._next.time:
                    # A negative time makes sure this happens only once.
                    self._next = replace(self._next, time=-1.0)
                    self._current = Waypoint(now, self._next.position)
                    self._velocity = Vector()
                    self.notify_course_change()
                else:
                    self._current = replace(self._current, time=now)
                return

            self._current = self._next
            self._next = self._waypoints.popleft()
            new_waypoint = True

            span = self._next.time - self._current.time
            if span <= 0:
                raise ValueError("consecutive waypoints share the same time")
            delta = self._next.position - self._current.position
            self._velocity = Vector(delta.x / span, delta.y / span, delta.z / span)

        if now > self._current.time:
            elapsed = now - self._current.time
            position = self._current.position
            self._current = Waypoint(
                now,
                Vector(
                    position.x + self._velocity.x * elapsed,
                    position.y + self._velocity.y * elapsed,
                    position.z + self._velocity.z * elapsed,
                ),
            )

        if new_waypoint:
            self.notify_course_change()

    def _get_position(self) -> Vector:
        self.update()
        return self._current.position

    def _set_position(self, position: Vector) -> None:
        now = self._clock()
        if self._first and self.initial_position_is_waypoint:
            self.add_waypoint(Waypoint(now, position))
            return

        self.update()
        self._current = Waypoint(max(now, self._next.time), position)
        self._velocity = Vector()

        # Only a course change if the object is actually moving.
        if not self._first and now >= self._current.time:
            self.notify_course_change()

    def _get_velocity(self) -> Vector:
        return self._velocity