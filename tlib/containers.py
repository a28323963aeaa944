"""General-purpose containers: bounded stack, bitset, owning vector and identity references."""

from collections import deque

__all__ = [
    "LimitedStack",
    "Bitset",
    "valid_index",
    "PointerVector",
    "Ref",
]


class LimitedStack:
    """A stack that never holds more than ``max_size`` items.

    Pushing onto a full stack drops the top element, which is the one just pushed.
    """

    def __init__(self, max_size):
        self.max_size = max_size
        self._items = deque()

    def push(self, value):
        self._items.append(value)
        if len(self._items) > self.max_size:
            self.pop()

    def pop(self):
        """Remove and return the top of the stack."""
        if not self._items:
            raise IndexError("pop from empty LimitedStack")
        return self._items.pop()

    def top(self):
        if not self._items:
            raise IndexError("top of empty LimitedStack")
        return self._items[-1]

    def bottom(self):
        if not self._items:
            raise IndexError("bottom of empty LimitedStack")
        return self._items[0]

    def set_max_size(self, value):
        """Change the limit, popping from the top until the stack fits."""
        self.max_size = value
        while len(self._items) > self.max_size:
            self.pop()

    def clear(self):
        self._items.clear()

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)


class Bitset:
    """Fixed-size set of bits, optionally initialised from (index, value) pairs."""

    def __init__(self, size, flags=()):
        if size < 0:
            raise ValueError("bitset size must not be negative")
        self._size = size
        self._bits = 0
        for index, value in flags:
            self.set(index, value)

    def _check(self, index):
        if not 0 <= index < self._size:
            raise IndexError(f"bit index {index} out of range for size {self._size}")

    def set(self, index, value=True):
        self._check(index)
        if value:
            self._bits |= 1 << index
        else:
            self._bits &= ~(1 << index)

    def test(self, index):
        self._check(index)
        return bool(self._bits >> index & 1)

    def reset(self):
        """Clear every bit."""
        self._bits = 0

    def count(self):
        """Number of bits that are set."""
        return bin(self._bits).count("1")

    def __len__(self):
        return self._size

    def __repr__(self):
        return f"Bitset({self._size}, bits={self._bits:0{self._size}b})"


def valid_index(sequence, index):
    """Whether ``index`` addresses an element of ``sequence`` (no negative indexing)."""
    return 0 <= index < len(sequence)


class PointerVector:
    """A list that owns the objects it creates and cannot be copied."""

    def __init__(self, factory=None):
        self._factory = factory
        self._items = []

    def emplace_back(self, factory=None):
        """Create a new item with ``factory`` (or the default one), append and return it."""
        make = factory if factory is not None else self._factory
        if make is None:
            raise TypeError("no factory given to create an item")
        item = make()
        self._items.append(item)
        return item

    def push_back(self, item):
        self._items.append(item)

    def at(self, index):
        """Bounds-checked access; negative indices are rejected."""
        if not valid_index(self._items, index):
            raise IndexError(f"index {index} out of range")
        return self._items[index]

    def erase(self, index):
        del self._items[index]

    def clear(self):
        self._items.clear()

    @property
    def container(self):
        return self._items

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __iter__(self):
        return iter(self._items)

    def __reversed__(self):
        return reversed(self._items)

    def __copy__(self):
        raise TypeError("PointerVector cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("PointerVector cannot be copied")


class Ref:
    """A reference that compares equal only to references to the same object."""

    __slots__ = ("_obj",)

    def __init__(self, obj):
        self._obj = obj

    def get(self):
        return self._obj

    def __eq__(self, other):
        if not isinstance(other, Ref):
            return NotImplemented
        return self._obj is other._obj

    def __hash__(self):
        return id(self._obj)

    def __repr__(self):
        return f"Ref({self._obj!r})"