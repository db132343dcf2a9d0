# colgen/solution.py


class Solution:
    """
    A solution to a cutting stock instance: a set of patterns and how many
    units of stock are cut according to each of them.
    """

    def __init__(self, instance, patterns):
        """
        instance: the Instance this solution belongs to
        patterns: mapping Pattern -> copies. Entries with zero copies are left out.
        """
        self._instance = instance
        self._patterns = {p: copies for p, copies in dict(patterns).items() if copies > 0}
        self._stock_needed = sum(self._patterns.values())

    def get_patterns(self):
        return list(self._patterns)

    def get_copies(self, pattern):
        return self._patterns.get(pattern, 0)

    def get_stock_needed(self):
        return self._stock_needed

    def get_instance(self):
        return self._instance

    def get_produced(self, size):
        """Number of items of this size produced by all patterns together."""
        return sum(copies * p.get_amount(size) for p, copies in self._patterns.items())

    def is_feasible(self):
        """True if every order is covered and every pattern fits the stock."""
        capacity = self._instance.get_capacity()
        if any(p.get_size() > capacity for p in self._patterns):
            return False
        return all(self.get_produced(size) >= self._instance.get_amount(size)
                   for size in self._instance.get_sizes())

    def get_waste(self):
        """Total stock length that is cut but not used by any item."""
        capacity = self._instance.get_capacity()
        return sum(copies * (capacity - p.get_size()) for p, copies in self._patterns.items())

    def __repr__(self):
        body = ", ".join(f"{p.as_list()}: {copies}" for p, copies in self._patterns.items())
        return f"Solution(stock_needed={self._stock_needed}, patterns={{{body}}})"
