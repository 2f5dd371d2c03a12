"""Hex tree board presets and rendering tuning."""

from dataclasses import dataclass
from typing import Final

from hex_tree.config import DEFAULT_FORBID_PROB, DEFAULT_HEX_HEIGHT, DEFAULT_HEX_WIDTH
from hex_tree.core.hex_field import HexFieldConfig


@dataclass(frozen=True)
class TreeBoardSpec:
    """Configuration for a region grown as a tree of hexagonal cells."""

    hex_width: float
    hex_height: float
    cell_count: int
    forbid_prob: float
    seed: int | None
    start_x: float = 0.0
    start_y: float = 0.0

    def field_config(self) -> HexFieldConfig:
        return HexFieldConfig.centered(self.hex_width, self.hex_height)

    @property
    def start_point(self) -> tuple[float, float]:
        return (self.start_x, self.start_y)


@dataclass(frozen=True)
class HexRenderSpec:
    """Line and marker tuning for drawing a grown tree."""

    cell_fill_scale: float
    grid_line_width_px: int
    border_line_width_px: int
    link_line_width_px: int
    root_marker_radius_scale: float
    latest_marker_radius_scale: float


TREE_BOARD_STANDARD: Final[TreeBoardSpec] = TreeBoardSpec(
    hex_width=DEFAULT_HEX_WIDTH,
    hex_height=DEFAULT_HEX_HEIGHT,
    cell_count=400,
    forbid_prob=DEFAULT_FORBID_PROB,
    seed=55,
)

TREE_BOARD_SPARSE: Final[TreeBoardSpec] = TreeBoardSpec(
    hex_width=DEFAULT_HEX_WIDTH,
    hex_height=DEFAULT_HEX_HEIGHT,
    cell_count=1000,
    forbid_prob=0.85,
    seed=None,
)

HEX_RENDER_STANDARD: Final[HexRenderSpec] = HexRenderSpec(
    cell_fill_scale=0.92,
    grid_line_width_px=1,
    border_line_width_px=3,
    link_line_width_px=2,
    root_marker_radius_scale=0.30,
    latest_marker_radius_scale=0.22,
)

__all__ = [
    "TreeBoardSpec",
    "HexRenderSpec",
    "TREE_BOARD_STANDARD",
    "TREE_BOARD_SPARSE",
    "HEX_RENDER_STANDARD",
]
