"""A (time, position) pair used by waypoint-driven mobility."""

from __future__ import annotations

from dataclasses import dataclass, field

from nodemobility.geometry import Vector, _format_number


@dataclass(frozen=True)
class Waypoint:
    """A position to be reached at a given time, in seconds."""

    time: float = 0.0
    position: Vector = field(default_factory=Vector)

    def __str__(self) -> str:
        return f"{_format_number(self.time)}${self.position}"

    @classmethod
    def parse(cls, text: str) -> Waypoint:
        """Parse the 'time$x:y:z' form produced by str().

        The time may carry a trailing 's' unit.
        """
        time_text, separator, position_text = text.strip().partition("$")
        if not separator:
            raise ValueError(f"invalid waypoint: {text!r}")
        time_text = time_text.strip()
        if time_text.endswith("s"):
            time_text = time_text[:-1]
        return cls(float(time_text), Vector.parse(position_text))