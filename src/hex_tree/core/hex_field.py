"""Point-to-hex classification over an offset hex lattice."""

from __future__ import annotations

from dataclasses import dataclass

from hex_tree.core.hex import Hex, Point
from hex_tree.core.unit_block import UnitBlock


@dataclass(frozen=True)
class HexFieldConfig:
    """Hex size and lattice offset of a field."""

    width: float = 1.0
    height: float = 1.0
    offset_x: float = 0.0
    offset_y: float = 0.0

    def __post_init__(self):
        if not (self.width > 0 and self.height > 0):
            raise ValueError(f"hex size must be positive, got ({self.width}, {self.height})")

    @classmethod
    def centered(cls, width: float, height: float) -> HexFieldConfig:
        """Field whose lattice is shifted by half a cell."""

        return cls(width=width, height=height, offset_x=width / 2, offset_y=height / 2)


class HexField:
    def __init__(self, config: HexFieldConfig | None = None):
        self.config = config or HexFieldConfig()

    def hex_size(self) -> Point:
        return (self.config.width, self.config.height)

    def unit_size(self) -> Point:
        return (self.config.width * 3 / 4, self.config.height / 2)

    def hex_center_by_containing_point(self, x: float, y: float) -> Point:
        """Return the center of the hex whose interior contains ``(x, y)``.

        A hex covers parts of four unit blocks. Block parity and the side of
        the block's diagonal the point falls on select which block origin is
        the hex center.
        """

        x, y = self.to_local_coords(x, y)
        block = UnitBlock.at(x, y)
        in_left = block.point_in_left_part(x, y)
        if block.central:
            chosen = block if in_left else block.right_block().top_block()
        else:
            chosen = block.top_block() if in_left else block.right_block()
        return self.to_global_coords(chosen.origin())

    def hex_at(self, x: float, y: float) -> Hex:
        return Hex(self.hex_center_by_containing_point(x, y), self.hex_size())

    def to_local_coords(self, x: float, y: float) -> Point:
        unit_width, unit_height = self.unit_size()
        return ((x - self.config.offset_x) / unit_width, (y - self.config.offset_y) / unit_height)

    def to_global_coords(self, coords: Point) -> Point:
        unit_width, unit_height = self.unit_size()
        return (coords[0] * unit_width + self.config.offset_x, coords[1] * unit_height + self.config.offset_y)


def hex_center_by_containing_point(point: Point, config: HexFieldConfig) -> Point:
    return HexField(config).hex_center_by_containing_point(point[0], point[1])


__all__ = ["HexField", "HexFieldConfig", "hex_center_by_containing_point"]
