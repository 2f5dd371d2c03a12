"""Flat-top hex cells addressed by continuous-space centers.

A cell is identified by the integer unit-block bucket its center falls in,
where a unit block is ``(width * 0.75, height * 0.5)``. Every hex center sits
on that lattice, so neighbors differ by whole unit steps:

- ``TOP``/``BOT`` move two unit rows (one full hex height);
- the four diagonals move one unit column and one unit row.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Iterator

Point = tuple[float, float]
Bucket = tuple[int, int]


class Direction(Enum):
    """Six neighbor directions, valued by their step in unit blocks."""

    TOP = (0, 2)
    RIGHT_TOP = (1, 1)
    RIGHT_BOT = (1, -1)
    BOT = (0, -2)
    LEFT_BOT = (-1, -1)
    LEFT_TOP = (-1, 1)

    @property
    def opposite(self) -> Direction:
        dq, dr = self.value
        return Direction((-dq, -dr))


# Relative slack for centers that land on a unit-block boundary.
_LATTICE_TOLERANCE = 1e-9


def unit_size_of(size: Point) -> Point:
    return (size[0] * 0.75, size[1] * 0.5)


def _lattice_floor(value: float) -> int:
    nearest = round(value)
    if math.isclose(value, nearest, rel_tol=_LATTICE_TOLERANCE, abs_tol=_LATTICE_TOLERANCE):
        return int(nearest)
    return math.floor(value)


def bucket_of(center: Point, size: Point) -> Bucket:
    """Floor a center into its unit-block bucket.

    Centers on an unshifted lattice sit exactly on block boundaries, where the
    division can land a rounding error below the integer. Those snap to the
    boundary so a rebuilt hex matches the one reached by neighbor steps.
    """

    unit_width, unit_height = unit_size_of(size)
    return (_lattice_floor(center[0] / unit_width), _lattice_floor(center[1] / unit_height))


class Hex:
    """Immutable hex cell.

    The float center is derived from the construction anchor plus whole unit
    steps, so walking neighbor to neighbor never drifts away from the lattice.
    """

    __slots__ = ("_anchor", "_size", "_steps", "_bucket")

    def __init__(self, center: Point, size: Point):
        width, height = float(size[0]), float(size[1])
        if not (width > 0 and height > 0):
            raise ValueError(f"hex size must be positive, got ({width}, {height})")
        self._anchor = (float(center[0]), float(center[1]))
        self._size = (width, height)
        self._steps = (0, 0)
        self._bucket = bucket_of(self._anchor, self._size)

    @classmethod
    def _stepped(cls, source: Hex, dq: int, dr: int) -> Hex:
        hex_ = cls.__new__(cls)
        hex_._anchor = source._anchor
        hex_._size = source._size
        hex_._steps = (source._steps[0] + dq, source._steps[1] + dr)
        hex_._bucket = (source._bucket[0] + dq, source._bucket[1] + dr)
        return hex_

    @property
    def center(self) -> Point:
        unit_width, unit_height = self.unit_size
        return (
            self._anchor[0] + self._steps[0] * unit_width,
            self._anchor[1] + self._steps[1] * unit_height,
        )

    @property
    def size(self) -> Point:
        return self._size

    @property
    def width(self) -> float:
        return self._size[0]

    @property
    def height(self) -> float:
        return self._size[1]

    @property
    def unit_size(self) -> Point:
        return unit_size_of(self._size)

    @property
    def bucket(self) -> Bucket:
        """Canonical integer identity used for equality and hashing."""

        return self._bucket

    def neighbor(self, direction: Direction) -> Hex:
        dq, dr = direction.value
        return Hex._stepped(self, dq, dr)

    def neighbors(self) -> Iterator[Hex]:
        """Yield the six neighbors in ``Direction`` order."""

        for direction in Direction:
            yield self.neighbor(direction)

    def is_adjacent(self, other: Hex) -> bool:
        if not isinstance(other, Hex) or other._size != self._size:
            return False
        delta = (other._bucket[0] - self._bucket[0], other._bucket[1] - self._bucket[1])
        return delta in _DIRECTION_STEPS

    # Vertices

    def top_left(self) -> Point:
        x, y = self.center
        return (x - self.width / 4, y + self.height / 2)

    def top_right(self) -> Point:
        x, y = self.center
        return (x + self.width / 4, y + self.height / 2)

    def right(self) -> Point:
        x, y = self.center
        return (x + self.width / 2, y)

    def bot_right(self) -> Point:
        x, y = self.center
        return (x + self.width / 4, y - self.height / 2)

    def bot_left(self) -> Point:
        x, y = self.center
        return (x - self.width / 4, y - self.height / 2)

    def left(self) -> Point:
        x, y = self.center
        return (x - self.width / 2, y)

    def vertices(self) -> list[Point]:
        """Six corners, counter-clockwise starting at the rightmost one."""

        return [
            self.right(),
            self.top_right(),
            self.top_left(),
            self.left(),
            self.bot_left(),
            self.bot_right(),
        ]

    def edge(self, direction: Direction) -> tuple[Point, Point]:
        """Return the two corners shared with the neighbor in ``direction``."""

        first, second = _EDGE_VERTICES[direction]
        return getattr(self, first)(), getattr(self, second)()

    def __eq__(self, other):
        if not isinstance(other, Hex):
            return NotImplemented
        return self._size == other._size and self._bucket == other._bucket

    def __hash__(self):
        return hash(self._bucket)

    def __repr__(self):
        x, y = self.center
        return f"Hex(center=({x:g}, {y:g}), size=({self.width:g}, {self.height:g}))"


_DIRECTION_STEPS = frozenset(direction.value for direction in Direction)

_EDGE_VERTICES = {
    Direction.TOP: ("top_left", "top_right"),
    Direction.RIGHT_TOP: ("top_right", "right"),
    Direction.RIGHT_BOT: ("right", "bot_right"),
    Direction.BOT: ("bot_right", "bot_left"),
    Direction.LEFT_BOT: ("bot_left", "left"),
    Direction.LEFT_TOP: ("left", "top_left"),
}

__all__ = [
    "Bucket",
    "Direction",
    "Hex",
    "Point",
    "bucket_of",
    "unit_size_of",
]
