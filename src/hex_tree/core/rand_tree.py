"""Randomized incremental growth of a connected hex tree.

The engine keeps a frontier of discovered cells, each paired with the tree
member that discovered it. Every growth step commits one random frontier cell
and discovers its unseen neighbors. Each discovered neighbor is forbidden with
probability ``forbid_prob`` instead of being queued, which thins the grown
region into a branching shape. Two rules keep growth from stalling:

- a new cell that forbade all of its unseen neighbors un-forbids one of them;
- when the frontier runs dry, the oldest forbidden cell is reclaimed and
  attached to the member that discovered it.
"""

from __future__ import annotations

import logging
import random
from typing import NamedTuple

from hex_tree.config import MAX_FORBID_PROB, MIN_FORBID_PROB
from hex_tree.core.hex import Hex
from hex_tree.core.tree import HexTree, HexTreeView

logger = logging.getLogger(__name__)


class FrontierEntry(NamedTuple):
    hex: Hex
    parent: Hex | None


def validate_forbid_prob(forbid_prob) -> float:
    value = float(forbid_prob)
    if not MIN_FORBID_PROB <= value < MAX_FORBID_PROB:
        raise ValueError(
            f"forbid probability must be in [{MIN_FORBID_PROB}, {MAX_FORBID_PROB}), got {value}"
        )
    return value


class RandHexTree:
    def __init__(
        self,
        seed_hex: Hex,
        forbid_prob: float,
        rng: random.Random,
        capacity_hint: int | None = None,
    ):
        self._forbid_prob = validate_forbid_prob(forbid_prob)
        self._rng = rng
        self._capacity_hint = capacity_hint
        self._tree = HexTree(seed_hex)
        self._to_process: list[FrontierEntry] = [FrontierEntry(seed_hex, None)]
        self._queued: set[Hex] = {seed_hex}
        # Forbidden hex -> tree member that discovered it, oldest first.
        self._forbidden: dict[Hex, Hex] = {}

        self._grow_from(self._pop_frontier(0))
        logger.debug(
            "Seeded hex tree at %r (forbid_prob=%s, frontier=%d, forbidden=%d)",
            seed_hex,
            self._forbid_prob,
            len(self._to_process),
            len(self._forbidden),
        )

    @classmethod
    def with_capacity(
        cls,
        seed_hex: Hex,
        forbid_prob: float,
        rng: random.Random,
        capacity: int,
    ) -> RandHexTree:
        return cls(seed_hex, forbid_prob, rng, capacity_hint=int(capacity))

    @property
    def tree(self) -> HexTreeView:
        return HexTreeView(self._tree)

    @property
    def forbid_prob(self) -> float:
        return self._forbid_prob

    @property
    def forbidden(self) -> frozenset[Hex]:
        return frozenset(self._forbidden)

    @property
    def frontier_size(self) -> int:
        return len(self._to_process)

    @property
    def capacity_hint(self) -> int | None:
        return self._capacity_hint

    def __len__(self):
        return len(self._tree)

    def add_hex(self) -> Hex:
        """Grow the tree by exactly one hex and return it."""

        entry = self._next_candidate()
        self._grow_from(entry)
        return entry.hex

    def add_hexes(self, count: int) -> list[Hex]:
        count = int(count)
        if count < 0:
            raise ValueError(f"hex count cannot be negative, got {count}")
        return [self.add_hex() for _ in range(count)]

    def _next_candidate(self) -> FrontierEntry:
        while True:
            if self._to_process:
                entry = self._pop_frontier(self._rng.randrange(len(self._to_process)))
            else:
                entry = self._reclaim_forbidden()
            if self._is_free(entry.hex):
                return entry

    def _pop_frontier(self, index: int) -> FrontierEntry:
        entry = self._to_process.pop(index)
        self._queued.discard(entry.hex)
        return entry

    def _reclaim_forbidden(self) -> FrontierEntry:
        if not self._forbidden:
            raise RuntimeError("hex tree cannot grow: frontier and forbidden set are both empty")

        hex_ = next(iter(self._forbidden))
        discoverer = self._forbidden.pop(hex_)
        if discoverer not in self._tree:
            raise RuntimeError(f"forbidden hex {hex_!r} has no neighbor in the tree")
        logger.debug(
            "Frontier exhausted at %d hexes; reclaimed %r (%d forbidden left)",
            len(self._tree),
            hex_,
            len(self._forbidden),
        )
        return FrontierEntry(hex_, discoverer)

    def _is_free(self, hex_: Hex) -> bool:
        return hex_ not in self._tree and hex_ not in self._forbidden

    def _is_unseen(self, hex_: Hex) -> bool:
        return self._is_free(hex_) and hex_ not in self._queued

    def _grow_from(self, entry: FrontierEntry):
        hex_, parent = entry
        if parent is None:
            self._tree.reset_root(hex_)
        else:
            self._tree.insert(hex_, parent)

        keep = []
        forbid = []
        for neighbor in hex_.neighbors():
            if not self._is_unseen(neighbor):
                continue
            if self._rng.random() < self._forbid_prob:
                forbid.append(neighbor)
            else:
                keep.append(neighbor)

        # A new leaf must leave at least one way forward.
        if not keep and forbid:
            keep.append(forbid.pop(self._rng.randrange(len(forbid))))

        for neighbor in forbid:
            self._forbidden[neighbor] = hex_
        for neighbor in keep:
            self._to_process.append(FrontierEntry(neighbor, hex_))
            self._queued.add(neighbor)


__all__ = ["FrontierEntry", "RandHexTree", "validate_forbid_prob"]
