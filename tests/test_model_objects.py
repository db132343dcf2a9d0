# tests/test_model_objects.py

import pytest

from colgen.errors import InvalidInstance
from colgen.instance import Instance
from colgen.pattern import Pattern
from colgen.solution import Solution


class TestInstance:

    def test_accessors(self, instance_a):
        assert instance_a.get_capacity() == 10
        assert instance_a.get_sizes() == [3, 4]
        assert instance_a.get_amount(3) == 2
        assert instance_a.get_amount(4) == 1
        assert instance_a.get_amount(7) == 0

    def test_sizes_keep_insertion_order(self):
        inst = Instance({7: 1, 2: 3, 5: 0}, capacity=20)
        assert inst.get_sizes() == [7, 2, 5]

    def test_orders_are_copied(self):
        orders = {3: 2}
        inst = Instance(orders, capacity=10)
        orders[4] = 1
        assert inst.get_sizes() == [3]

    @pytest.mark.parametrize("capacity", [0, -3, 2.5, "10", True])
    def test_invalid_capacity(self, capacity):
        with pytest.raises(InvalidInstance):
            Instance({1: 1}, capacity=capacity)

    @pytest.mark.parametrize("orders", [{0: 1}, {11: 1}, {3: -1}, {3: 1.5}, {2.0: 1}])
    def test_invalid_orders(self, orders):
        with pytest.raises(InvalidInstance):
            Instance(orders, capacity=10)

    def test_invalid_instance_is_value_error(self):
        with pytest.raises(ValueError):
            Instance({20: 1}, capacity=10)

    def test_size_equal_to_capacity_is_allowed(self):
        inst = Instance({10: 1}, capacity=10)
        assert inst.get_sizes() == [10]


class TestPattern:

    def test_equality_ignores_construction_order(self):
        p1 = Pattern({3: 2, 4: 1})
        p2 = Pattern({4: 1, 3: 2})
        p3 = Pattern.from_sizes([3, 4, 3])
        assert p1 == p2 == p3
        assert hash(p1) == hash(p2) == hash(p3)
        assert len({p1, p2, p3}) == 1

    def test_zero_counts_are_dropped(self):
        assert Pattern({3: 3, 4: 0}) == Pattern({3: 3})
        assert not Pattern({3: 3, 4: 0}).contains_size(4)

    def test_different_cuts_differ(self):
        assert Pattern({3: 2}) != Pattern({3: 3})
        assert Pattern({3: 2}) != Pattern({6: 1})

    def test_accessors(self):
        p = Pattern({4: 1, 3: 2})
        assert p.get_size() == 10
        assert p.get_amount(3) == 2
        assert p.get_amount(5) == 0
        assert p.contains_size(4)
        assert sorted(p.get_sizes()) == [3, 4]
        assert p.as_list() == [3, 3, 4]

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            Pattern({3: -1})

    def test_empty_pattern(self):
        p = Pattern({})
        assert p.get_size() == 0
        assert p.as_list() == []


class TestSolution:

    def test_stock_needed_and_copies(self, instance_a):
        big = Pattern({3: 2, 4: 1})
        unused = Pattern({3: 3})
        sol = Solution(instance_a, {big: 1, unused: 0})
        assert sol.get_stock_needed() == 1
        assert sol.get_patterns() == [big]
        assert sol.get_copies(big) == 1
        assert sol.get_copies(unused) == 0
        assert sol.get_instance() is instance_a

    def test_feasibility_and_waste(self, instance_c):
        sol = Solution(instance_c, {Pattern({3: 1}): 1, Pattern({4: 1}): 1})
        assert sol.is_feasible()
        assert sol.get_stock_needed() == 2
        assert sol.get_waste() == (5 - 3) + (5 - 4)

    def test_infeasible_when_demand_missing(self, instance_c):
        sol = Solution(instance_c, {Pattern({3: 1}): 1})
        assert not sol.is_feasible()
        assert sol.get_produced(4) == 0

    def test_infeasible_when_pattern_too_long(self, instance_c):
        sol = Solution(instance_c, {Pattern({3: 1, 4: 1}): 1})
        assert not sol.is_feasible()

    def test_empty_solution(self, instance_b):
        sol = Solution(instance_b, {})
        assert sol.get_stock_needed() == 0
        assert sol.is_feasible()
