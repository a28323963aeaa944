"""Numeric range objects: bounded, stepped and unbounded."""

import math

__all__ = [
    "StepRange",
    "Range",
    "InfiniteStepRange",
    "InfiniteRange",
    "span",
    "indices",
]


class StepRange:
    """Values from ``begin`` towards ``end`` advancing by ``step``.

    With a positive step iteration stops once the value reaches ``end``;
    with a negative step it stops once the value drops below ``end``.
    """

    def __init__(self, begin, end, step):
        if step == 0:
            raise ValueError("step must not be zero")
        self.begin = begin
        self.end = end
        self.step_size = step

    def _finished(self, current):
        if self.step_size > 0:
            return current >= self.end
        return current < self.end

    def __iter__(self):
        current = self.begin
        while not self._finished(current):
            yield current
            current += self.step_size

    def __len__(self):
        if self.end >= self.begin:
            if self.step_size < 0:
                return 0
        elif self.step_size > 0:
            return 0
        return math.ceil(abs((self.end - self.begin) / self.step_size))

    def __repr__(self):
        return f"StepRange({self.begin!r}, {self.end!r}, {self.step_size!r})"


class Range:
    """Values from ``begin`` up to, not including, ``end`` in steps of one."""

    def __init__(self, begin, end):
        self.begin = begin
        self.end = end

    def step(self, step):
        """Return a stepped range over the same bounds."""
        return StepRange(self.begin, self.end, step)

    def __iter__(self):
        current = self.begin
        while current < self.end:
            yield current
            current += 1

    def __len__(self):
        return max(0, int(self.end - self.begin))

    def __repr__(self):
        return f"Range({self.begin!r}, {self.end!r})"


class InfiniteStepRange:
    """Endless sequence starting at ``begin`` advancing by ``step``."""

    def __init__(self, begin, step):
        self.begin = begin
        self.step_size = step

    def __iter__(self):
        current = self.begin
        while True:
            yield current
            current += self.step_size


class InfiniteRange:
    """Endless sequence starting at ``begin`` advancing by one."""

    def __init__(self, begin):
        self.begin = begin

    def step(self, step):
        """Return an endless range with the given step."""
        return InfiniteStepRange(self.begin, step)

    def __iter__(self):
        current = self.begin
        while True:
            yield current
            current += 1


def span(begin, end=None):
    """Return a bounded range, or an endless one when ``end`` is omitted."""
    if end is None:
        return InfiniteRange(begin)
    return Range(begin, end)


def indices(container):
    """Return the range of valid indices of a sized container."""
    return Range(0, len(container))