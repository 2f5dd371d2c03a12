"""Rooted parent/children store over hex cells."""

from __future__ import annotations

from typing import Iterator

from hex_tree.core.hex import Hex


class HexTree:
    """Tree of hexes with hashed membership.

    Nodes iterate in insertion order, which for a grown tree is growth order.
    """

    def __init__(self, root: Hex):
        self._root = root
        self._parents: dict[Hex, Hex | None] = {root: None}
        self._children: dict[Hex, list[Hex]] = {root: []}

    @property
    def root(self) -> Hex:
        return self._root

    def reset_root(self, node: Hex):
        if len(self._parents) > 1:
            raise ValueError("cannot replace the root of a tree that already has children")
        self._root = node
        self._parents = {node: None}
        self._children = {node: []}

    def insert(self, node: Hex, parent: Hex):
        if parent not in self._parents:
            raise ValueError(f"parent {parent!r} is not in the tree")
        if node in self._parents:
            raise ValueError(f"{node!r} is already in the tree")
        self._parents[node] = parent
        self._children[node] = []
        self._children[parent].append(node)

    def __contains__(self, node):
        return node in self._parents

    def __len__(self):
        return len(self._parents)

    def __iter__(self) -> Iterator[Hex]:
        return iter(self._parents)

    def parent_of(self, node: Hex) -> Hex | None:
        if node not in self._parents:
            raise ValueError(f"{node!r} is not in the tree")
        return self._parents[node]

    def children_of(self, node: Hex) -> tuple[Hex, ...]:
        if node not in self._children:
            raise ValueError(f"{node!r} is not in the tree")
        return tuple(self._children[node])

    def depth_of(self, node: Hex) -> int:
        depth = 0
        parent = self.parent_of(node)
        while parent is not None:
            depth += 1
            parent = self._parents[parent]
        return depth

    def edges(self) -> Iterator[tuple[Hex, Hex]]:
        """Yield ``(parent, child)`` pairs in growth order of the child."""

        for node, parent in self._parents.items():
            if parent is not None:
                yield parent, node

    def leaves(self) -> list[Hex]:
        return [node for node, children in self._children.items() if not children]

    def validate_integrity(self):
        if self._root not in self._parents or self._parents[self._root] is not None:
            raise ValueError("Root is missing or has a parent")
        if self._parents.keys() != self._children.keys():
            raise ValueError("Parent and child indexes out of sync")

        child_count = 0
        for parent, child in self.edges():
            if parent not in self._parents:
                raise ValueError(f"Parent of {child!r} is not in the tree")
            if not parent.is_adjacent(child):
                raise ValueError(f"{child!r} is not adjacent to its parent {parent!r}")
            if child not in self._children[parent]:
                raise ValueError(f"{child!r} missing from children of {parent!r}")
            child_count += 1
        if sum(len(children) for children in self._children.values()) != child_count:
            raise ValueError("Child lists reference nodes with another parent")

        # Every node must reach the root without revisiting a node.
        reached = {self._root}
        for node in self._parents:
            path = []
            current = node
            while current not in reached:
                path.append(current)
                current = self._parents[current]
                if current is None or current in path:
                    raise ValueError("Tree is disconnected or contains a cycle")
            reached.update(path)


class HexTreeView:
    """Read-only facade over a ``HexTree``."""

    __slots__ = ("_tree",)

    def __init__(self, tree: HexTree):
        self._tree = tree

    @property
    def root(self) -> Hex:
        return self._tree.root

    def __contains__(self, node):
        return node in self._tree

    def __len__(self):
        return len(self._tree)

    def __iter__(self) -> Iterator[Hex]:
        return iter(self._tree)

    def parent_of(self, node: Hex) -> Hex | None:
        return self._tree.parent_of(node)

    def children_of(self, node: Hex) -> tuple[Hex, ...]:
        return self._tree.children_of(node)

    def depth_of(self, node: Hex) -> int:
        return self._tree.depth_of(node)

    def edges(self) -> Iterator[tuple[Hex, Hex]]:
        return self._tree.edges()

    def leaves(self) -> list[Hex]:
        return self._tree.leaves()

    def validate_integrity(self):
        self._tree.validate_integrity()


__all__ = ["HexTree", "HexTreeView"]
