"""Strategies that hand out positions one after another."""

from __future__ import annotations

import csv
import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from os import PathLike
from typing import Iterable

from nodemobility.geometry import Vector


class PositionAllocator(ABC):
    """Allocates a sequence of positions; subclasses choose the strategy."""

    @abstractmethod
    def next_position(self) -> Vector:
        """Return the next chosen position."""

    @abstractmethod
    def assign_streams(self, stream: int) -> int:
        """Fix the random streams used; return how many were used."""


class ListPositionAllocator(PositionAllocator):
    """Hands out positions from a user-supplied list, cycling back to the start."""

    def __init__(self, positions: Iterable[Vector] = ()) -> None:
        self._positions: list[Vector] = []
        self._current = 0
        for position in positions:
            self.add(position)

    def add(self, position: Vector) -> None:
        """Append a position; the next position handed out is the first one again."""
        self._positions.append(position)
        self._current = 0

    def add_file(
        self,
        path: str | PathLike[str],
        default_z: float = 0.0,
        delimiter: str = ",",
    ) -> None:
        """Append the positions listed in a delimited text file.

        Each line holds x and y, or x, y and z, in meters. Blank lines,
        lines starting with '#' and lines with a single column are skipped.
        A value that is not a number raises ValueError.
        """
        with open(path, newline="", encoding="utf-8") as handle:
            lines = [
                line
                for line in handle
                if line.strip() and not line.lstrip().startswith("#")
            ]
        for row_number, row in enumerate(
            csv.reader(lines, delimiter=delimiter, skipinitialspace=True), start=1
        ):
            cells = [cell.strip() for cell in row]
            if len(cells) <= 1:
                continue
            try:
                x = float(cells[0])
                y = float(cells[1])
                z = float(cells[2]) if len(cells) > 2 else default_z
            except ValueError as exc:
                raise ValueError(
                    f"{path}: row {row_number}: invalid coordinate in {row!r}"
                ) from exc
            self.add(Vector(x, y, z))

    def __len__(self) -> int:
        return len(self._positions)

    def next_position(self) -> Vector:
        if not self._positions:
            raise IndexError("no positions have been added")
        position = self._positions[self._current]
        self._current = (self._current + 1) % len(self._positions)
        return position

    def assign_streams(self, stream: int) -> int:
        return 0


class LayoutType(enum.Enum):
    """Whether a grid is filled row by row or column by column."""

    ROW_FIRST = "RowFirst"
    COLUMN_FIRST = "ColumnFirst"


@dataclass
class GridPositionAllocator(PositionAllocator):
    """Allocates positions on a rectangular 2D grid.

    n positions are placed along a row (or column) before moving to the next.
    """

    min_x: float = 1.0
    min_y: float = 0.0
    z: float = 0.0
    delta_x: float = 1.0
    delta_y: float = 1.0
    n: int = 10
    layout_type: LayoutType = LayoutType.ROW_FIRST
    _current: int = field(default=0, init=False, repr=False, compare=False)

    def next_position(self) -> Vector:
        if self.n <= 0:
            raise ValueError("grid width n must be positive")
        major, minor = divmod(self._current, self.n)
        if self.layout_type is LayoutType.ROW_FIRST:
            x = self.min_x + self.delta_x * minor
            y = self.min_y + self.delta_y * major
        else:
            x = self.min_x + self.delta_x * major
            y = self.min_y + self.delta_y * minor
        self._current += 1
        return Vector(x, y, self.z)

    def assign_streams(self, stream: int) -> int:
        return 0