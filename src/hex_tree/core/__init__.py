"""Hex geometry, point classification and tree growth."""

from .hex import Direction, Hex
from .hex_field import HexField, HexFieldConfig, hex_center_by_containing_point
from .rand_tree import FrontierEntry, RandHexTree, validate_forbid_prob
from .tree import HexTree, HexTreeView
from .unit_block import UnitBlock

__all__ = [
    "Direction",
    "FrontierEntry",
    "Hex",
    "HexField",
    "HexFieldConfig",
    "HexTree",
    "HexTreeView",
    "RandHexTree",
    "UnitBlock",
    "hex_center_by_containing_point",
    "validate_forbid_prob",
]
