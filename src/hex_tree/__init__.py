"""Grow connected, size-bounded trees of hexagonal cells."""

from .boards import generate
from .core import (
    Direction,
    Hex,
    HexField,
    HexFieldConfig,
    HexTree,
    HexTreeView,
    RandHexTree,
    UnitBlock,
    hex_center_by_containing_point,
)

__version__ = "0.1.0"

__all__ = [
    "Direction",
    "Hex",
    "HexField",
    "HexFieldConfig",
    "HexTree",
    "HexTreeView",
    "RandHexTree",
    "UnitBlock",
    "generate",
    "hex_center_by_containing_point",
    "__version__",
]
