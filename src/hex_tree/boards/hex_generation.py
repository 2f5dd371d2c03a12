"""One-shot tree generation and region analysis helpers."""

from __future__ import annotations

import logging
import random
from typing import Iterable

from hex_tree.core.hex import Direction, Hex, Point
from hex_tree.core.hex_field import HexField
from hex_tree.core.rand_tree import RandHexTree
from hex_tree.core.tree import HexTreeView

logger = logging.getLogger(__name__)

Edge = tuple[Hex, Hex]
Segment = tuple[Point, Point]


def normalize_cell_count(count, label="cell count"):
    """Validate a requested number of cells."""

    count = int(count)
    if count < 1:
        raise ValueError(f"{label} must be at least 1, got {count}")
    return count


def generate(
    hex_field: HexField,
    count: int,
    start_point: Point,
    forbid_prob: float,
    seed: int | None = None,
    rng: random.Random | None = None,
) -> HexTreeView:
    """Grow a tree of exactly ``count`` hexes from the hex containing ``start_point``."""

    count = normalize_cell_count(count)
    rng = rng or random.Random(seed)
    start_hex = hex_field.hex_at(start_point[0], start_point[1])
    engine = RandHexTree.with_capacity(start_hex, forbid_prob, rng, count)
    engine.add_hexes(count - len(engine))
    logger.info(
        "Generated hex tree: %d hexes from %r, %d forbidden",
        len(engine.tree),
        start_hex,
        len(engine.forbidden),
    )
    return engine.tree


def collect_adjacency_edges(hexes: Iterable[Hex]) -> set[Edge]:
    """Collect unique undirected adjacency edges for a hex set."""

    hex_set = set(hexes)
    edges = set()
    for hex_ in hex_set:
        for neighbor in hex_.neighbors():
            if neighbor in hex_set and hex_.bucket < neighbor.bucket:
                edges.add((hex_, neighbor))
    return edges


def collect_boundary_hexes(hexes: Iterable[Hex]) -> list[Hex]:
    """Return hexes with at least one neighbor outside the set."""

    hex_set = set(hexes)
    return [
        hex_
        for hex_ in hex_set
        if any(neighbor not in hex_set for neighbor in hex_.neighbors())
    ]


def collect_border_segments(hexes: Iterable[Hex]) -> list[Segment]:
    """Return the vertex segments outlining the region covered by ``hexes``."""

    hex_set = set(hexes)
    segments = []
    for hex_ in hex_set:
        for direction in Direction:
            if hex_.neighbor(direction) not in hex_set:
                segments.append(hex_.edge(direction))
    return segments


__all__ = [
    "normalize_cell_count",
    "generate",
    "collect_adjacency_edges",
    "collect_boundary_hexes",
    "collect_border_segments",
]
