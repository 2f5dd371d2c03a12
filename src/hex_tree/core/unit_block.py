"""Unit blocks: the rectangular scaffolding used to classify points into hexes."""

from __future__ import annotations

import math
from dataclasses import dataclass

# Diagonal split of a block in block-local coordinates.
_SPLIT_SLOPE = 3.0
_CENTRAL_INTERCEPT = 2.0
_SIDE_INTERCEPT = -1.0


@dataclass(frozen=True)
class UnitBlock:
    """Integer-indexed block of the unit grid, in unit coordinates."""

    x: int
    y: int

    @classmethod
    def at(cls, x: float, y: float) -> UnitBlock:
        return cls(math.floor(x), math.floor(y))

    def origin(self) -> tuple[float, float]:
        return (float(self.x), float(self.y))

    def right_block(self) -> UnitBlock:
        return UnitBlock(self.x + 1, self.y)

    def top_block(self) -> UnitBlock:
        return UnitBlock(self.x, self.y + 1)

    @property
    def central(self) -> bool:
        """Central blocks hold the left half of a hex at their origin."""

        return (self.x + self.y) % 2 == 0

    def point_in_left_part(self, x: float, y: float) -> bool:
        local_x, local_y = self._to_unit_local(x, y)
        if self.central:
            return local_y < -_SPLIT_SLOPE * local_x + _CENTRAL_INTERCEPT
        return local_y > _SPLIT_SLOPE * local_x + _SIDE_INTERCEPT

    def _to_unit_local(self, x: float, y: float) -> tuple[float, float]:
        return (x - self.x, y - self.y)


__all__ = ["UnitBlock"]
