# colgen/pattern.py

from collections import Counter


class Pattern:
    """
    A cutting pattern: how many items of each size are cut from one unit of
    stock. Patterns are immutable and compare by their cuts only, so two
    patterns built from the same multiset of sizes are interchangeable as
    keys of master problem columns.

    Sizes with a count of zero are dropped; {3: 2, 4: 0} equals {3: 2}.
    """

    __slots__ = ("_cuts", "_size", "_key")

    def __init__(self, cuts):
        """
        cuts: mapping size -> count (count >= 0)
        """
        items = []
        for size, count in dict(cuts).items():
            if count < 0:
                raise ValueError(f"negative count {count} for size {size}")
            if count > 0:
                items.append((size, count))
        self._cuts = dict(sorted(items))
        self._size = sum(size * count for size, count in self._cuts.items())
        self._key = frozenset(self._cuts.items())

    @classmethod
    def from_sizes(cls, sizes):
        """Build a pattern from a list of cut sizes, repeated sizes are cut multiple times."""
        return cls(Counter(sizes))

    def contains_size(self, size):
        return size in self._cuts

    def get_sizes(self):
        return list(self._cuts)

    def get_amount(self, size):
        return self._cuts.get(size, 0)

    def get_size(self):
        """Total length used by this pattern; must not exceed the stock capacity."""
        return self._size

    def get_cuts(self):
        return dict(self._cuts)

    def as_list(self):
        """The pattern as a list of sizes, with sizes repeated by their count."""
        return [size for size, count in self._cuts.items() for _ in range(count)]

    def __eq__(self, other):
        if not isinstance(other, Pattern):
            return NotImplemented
        return self._key == other._key

    def __hash__(self):
        return hash(self._key)

    def __repr__(self):
        return f"Pattern({self.as_list()})"
