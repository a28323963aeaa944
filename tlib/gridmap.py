"""A resizable two-dimensional grid addressed by (x, y)."""

import math

__all__ = ["GridMap2D"]

_UNSET = object()


class GridMap2D:
    """Grid of ``width`` x ``height`` cells; new cells are made by ``factory``."""

    def __init__(self, width=0, height=0, factory=None):
        self._factory = factory
        self._cells = []
        self._width = 0
        self._height = 0
        self.resize(width, height)

    def _new(self):
        return self._factory() if self._factory is not None else None

    def width(self):
        return self._width

    def height(self):
        return self._height

    def size(self):
        return (self._width, self._height)

    def in_bounds(self, x, y):
        return 0 <= x < self._width and 0 <= y < self._height

    def resize(self, width, height):
        """Change the shape, keeping the cells that lie inside both shapes."""
        if width < 0 or height < 0:
            raise ValueError("grid dimensions must not be negative")
        old = self._cells
        self._cells = [
            [
                old[x][y] if x < self._width and y < self._height else self._new()
                for y in range(height)
            ]
            for x in range(width)
        ]
        self._width = width
        self._height = height

    def clear(self, value=_UNSET):
        """Reset every cell to ``value``, or to a fresh default when omitted."""
        for column in self._cells:
            for y in range(len(column)):
                column[y] = self._new() if value is _UNSET else value

    def _check(self, x, y):
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) outside grid of size {self.size()}")

    def at(self, x, y):
        self._check(x, y)
        return self._cells[x][y]

    def set(self, x, y, value):
        self._check(x, y)
        self._cells[x][y] = value

    def circle(self, center, radius):
        """In-bounds cells whose squared distance from ``center`` is at most ``radius``."""
        cx, cy = center
        top = math.ceil(cy - radius)
        bottom = math.floor(cy + radius)
        left = math.ceil(cx - radius)
        right = math.floor(cx + radius)
        return [
            (x, y)
            for y in range(top, bottom + 1)
            for x in range(left, right + 1)
            if self.in_bounds(x, y) and (x - cx) ** 2 + (y - cy) ** 2 <= radius
        ]