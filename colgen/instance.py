# colgen/instance.py

from .errors import InvalidInstance


class Instance:
    """
    An instance of the cutting stock problem: a number of orders, each asking
    for a quantity of items of a given size, and the capacity (length) of one
    unit of stock those items are cut from.

    Example:
      instance = Instance({3: 2, 4: 1}, capacity=10)
      instance.get_sizes()   # [3, 4]
      instance.get_amount(3) # 2
    """

    def __init__(self, orders, capacity):
        """
        orders: mapping size -> demand. Iteration order of the mapping is kept
                and fixes the order of constraints in the master problem.
        capacity: length of a unit of stock
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidInstance(f"capacity must be a positive integer, got {capacity!r}")
        self._capacity = capacity
        self._sizes = []
        self._orders = {}
        for size, amount in dict(orders).items():
            if isinstance(size, bool) or not isinstance(size, int):
                raise InvalidInstance(f"size must be an integer, got {size!r}")
            if size < 1 or size > capacity:
                raise InvalidInstance(f"size {size} outside [1, {capacity}]")
            if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
                raise InvalidInstance(f"demand for size {size} must be a non-negative integer, got {amount!r}")
            self._sizes.append(size)
            self._orders[size] = amount

    def get_sizes(self):
        """Sizes that occur in the orders, in insertion order."""
        return list(self._sizes)

    def get_amount(self, size):
        """How many items of this size must be produced (0 if not ordered)."""
        return self._orders.get(size, 0)

    def get_capacity(self):
        return self._capacity

    def get_orders(self):
        return dict(self._orders)

    @staticmethod
    def random_instance(seed, orders, max_step, max_amount):
        """Shortcut for data.generator.random_instance."""
        from data.generator import random_instance
        return random_instance(seed, orders, max_step, max_amount)

    def __eq__(self, other):
        if not isinstance(other, Instance):
            return NotImplemented
        return self._capacity == other._capacity and self._orders == other._orders

    def __hash__(self):
        return hash((self._capacity, frozenset(self._orders.items())))

    def __repr__(self):
        return f"Instance(capacity={self._capacity}, orders={self._orders})"
