"""Hex tree board helpers."""

from .hex_generation import (
    collect_adjacency_edges,
    collect_border_segments,
    collect_boundary_hexes,
    generate,
    normalize_cell_count,
)
from .hex_specs import HEX_RENDER_STANDARD, TREE_BOARD_SPARSE, TREE_BOARD_STANDARD

__all__ = [
    "HEX_RENDER_STANDARD",
    "TREE_BOARD_SPARSE",
    "TREE_BOARD_STANDARD",
    "normalize_cell_count",
    "generate",
    "collect_adjacency_edges",
    "collect_boundary_hexes",
    "collect_border_segments",
]
