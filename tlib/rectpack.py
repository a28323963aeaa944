"""Online rectangle packing into a fixed bin using a binary split tree."""

from dataclasses import dataclass
from typing import Optional

__all__ = ["PackNode", "RectPackerOnline"]


@dataclass(eq=False)
class PackNode:
    """A tree node: leaves hold free space, internal nodes hold used space."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    left: Optional["PackNode"] = None
    right: Optional["PackNode"] = None
    path: str = ""

    @property
    def is_leaf(self):
        return self.left is None and self.right is None


class RectPackerOnline:
    """Packs rectangles one at a time into a ``width`` x ``height`` bin."""

    def __init__(self, width, height):
        self.bin_width = width
        self.bin_height = height
        self._nodes = [PackNode(0, 0, width, height)]

    @property
    def root(self):
        return self._nodes[0]

    def insert(self, width, height):
        """Place a rectangle; return its node, or None when it does not fit."""
        return self._insert(self.root, width, height)

    def occupancy(self):
        """Fraction of the bin area in use, from 0.0 (empty) to 1.0 (full)."""
        total = self.bin_width * self.bin_height
        if total == 0:
            return 0.0
        return self._used_area(self.root) / total

    def nodes(self):
        """All nodes of the tree in creation order, root first."""
        return list(self._nodes)

    def _used_area(self, node):
        if node.is_leaf:
            return 0
        area = node.width * node.height
        if node.left is not None:
            area += self._used_area(node.left)
        if node.right is not None:
            area += self._used_area(node.right)
        return area

    def _insert(self, node, width, height):
        if not node.is_leaf:
            for child in (node.left, node.right):
                if child is not None:
                    placed = self._insert(child, width, height)
                    if placed is not None:
                        return placed
            return None

        if width > node.width or height > node.height:
            return None

        w = node.width - width
        h = node.height - height
        if w <= h:
            left = PackNode(node.x + width, node.y, w, height)
            right = PackNode(node.x, node.y + height, node.width, h)
        else:
            left = PackNode(node.x, node.y + height, width, h)
            right = PackNode(node.x + width, node.y, w, node.height)
        self._nodes.extend((left, right))
        node.left = left
        node.right = right
        node.width = width
        node.height = height
        return node