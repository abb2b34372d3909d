"""
Unit tests for the ordered frontier container.

Covers sorted insertion from both ends, tie placement, empty-container
access, indexed removal and membership.
"""

import random

import pytest

from gridroute.algorithms.base import OrderedFrontier, SortOrder, WeightedNode
from gridroute.domain.models import Position


def _keys(frontier, key=lambda v: v):
    return [key(v) for v in frontier]


class TestOrdering:
    """Sorted insertion keeps the configured order"""

    @pytest.mark.parametrize("insert", ["insert_sorted_from_front", "insert_sorted_from_back"])
    def test_ascending_is_non_decreasing(self, insert):
        rng = random.Random(7)
        values = [rng.randint(0, 20) for _ in range(60)]
        frontier = OrderedFrontier()
        for value in values:
            getattr(frontier, insert)(value)

        assert list(frontier) == sorted(values)

    @pytest.mark.parametrize("insert", ["insert_sorted_from_front", "insert_sorted_from_back"])
    def test_descending_is_non_increasing(self, insert):
        rng = random.Random(11)
        values = [rng.randint(0, 20) for _ in range(60)]
        frontier = OrderedFrontier(order=SortOrder.DESCENDING)
        for value in values:
            getattr(frontier, insert)(value)

        assert list(frontier) == sorted(values, reverse=True)

    def test_mixed_insertion_ends_agree_on_order(self):
        frontier = OrderedFrontier()
        for i, value in enumerate([5, 1, 9, 3, 3, 7, 0]):
            if i % 2:
                frontier.insert_sorted_from_back(value)
            else:
                frontier.insert_sorted_from_front(value)

        assert list(frontier) == [0, 1, 3, 3, 5, 7, 9]

    def test_key_function_orders_values(self):
        frontier = OrderedFrontier(key=lambda item: item[0])
        frontier.insert_sorted_from_front((3, "c"))
        frontier.insert_sorted_from_front((1, "a"))
        frontier.insert_sorted_from_front((2, "b"))

        assert [name for _, name in frontier] == ["a", "b", "c"]

    def test_order_is_fixed_per_instance(self):
        frontier = OrderedFrontier(order=SortOrder.DESCENDING)
        assert frontier.order == SortOrder.DESCENDING
        with pytest.raises(AttributeError):
            frontier.order = SortOrder.ASCENDING


class TestTiePlacement:
    """Equal keys land ahead of or behind existing ones depending on scan end"""

    def test_front_insertion_places_ties_first(self):
        frontier = OrderedFrontier(key=lambda item: item[0])
        frontier.insert_sorted_from_front((1, "old"))
        frontier.insert_sorted_from_front((1, "new"))
        frontier.insert_sorted_from_front((0, "low"))

        assert [name for _, name in frontier] == ["low", "new", "old"]

    def test_back_insertion_places_ties_last(self):
        frontier = OrderedFrontier(key=lambda item: item[0])
        frontier.insert_sorted_from_back((1, "old"))
        frontier.insert_sorted_from_back((1, "new"))
        frontier.insert_sorted_from_back((2, "high"))

        assert [name for _, name in frontier] == ["old", "new", "high"]

    def test_descending_front_insertion_places_ties_first(self):
        frontier = OrderedFrontier(key=lambda item: item[0], order=SortOrder.DESCENDING)
        frontier.insert_sorted_from_front((4, "old"))
        frontier.insert_sorted_from_front((4, "new"))

        assert [name for _, name in frontier] == ["new", "old"]


class TestAccess:
    """Extreme access and empty-container contract"""

    def test_empty_pop_and_peek_return_none(self):
        frontier = OrderedFrontier()
        assert frontier.pop_front() is None
        assert frontier.pop_back() is None
        assert frontier.peek_front() is None
        assert frontier.peek_back() is None
        assert frontier.count == 0
        assert not frontier

    def test_peek_does_not_remove(self):
        frontier = OrderedFrontier()
        for value in (4, 2, 8):
            frontier.insert_sorted_from_front(value)

        assert frontier.peek_front() == 2
        assert frontier.peek_back() == 8
        assert len(frontier) == 3

    def test_pop_from_both_ends(self):
        frontier = OrderedFrontier()
        for value in (4, 2, 8, 6):
            frontier.insert_sorted_from_back(value)

        assert frontier.pop_front() == 2
        assert frontier.pop_back() == 8
        assert list(frontier) == [4, 6]

    def test_pop_last_value_empties_both_ends(self):
        frontier = OrderedFrontier()
        frontier.insert_sorted_from_front(1)
        assert frontier.pop_back() == 1
        assert frontier.peek_front() is None
        assert frontier.peek_back() is None

        frontier.insert_sorted_from_back(2)
        assert list(frontier) == [2]


class TestRemoveAt:
    """Indexed removal"""

    def test_remove_middle(self):
        frontier = OrderedFrontier()
        for value in (1, 2, 3, 4):
            frontier.insert_sorted_from_front(value)

        assert frontier.remove_at(2) == 3
        assert list(frontier) == [1, 2, 4]

    def test_remove_ends(self):
        frontier = OrderedFrontier()
        for value in (1, 2, 3):
            frontier.insert_sorted_from_front(value)

        assert frontier.remove_at(0) == 1
        assert frontier.remove_at(1) == 3
        assert list(frontier) == [2]
        assert frontier.peek_front() == frontier.peek_back() == 2

    @pytest.mark.parametrize("index", [-1, 3, 10])
    def test_out_of_range_raises(self, index):
        frontier = OrderedFrontier()
        for value in (1, 2, 3):
            frontier.insert_sorted_from_front(value)

        with pytest.raises(IndexError):
            frontier.remove_at(index)
        assert frontier.count == 3

    def test_remove_from_empty_raises(self):
        with pytest.raises(IndexError):
            OrderedFrontier().remove_at(0)


class TestCountAndMembership:
    """Size bookkeeping and contains"""

    def test_count_tracks_inserts_and_removals(self):
        rng = random.Random(3)
        frontier = OrderedFrontier()
        inserted = removed = 0
        for _ in range(200):
            if frontier and rng.random() < 0.4:
                choice = rng.choice(["front", "back", "index"])
                if choice == "front":
                    frontier.pop_front()
                elif choice == "back":
                    frontier.pop_back()
                else:
                    frontier.remove_at(rng.randrange(frontier.count))
                removed += 1
            else:
                frontier.insert_sorted_from_front(rng.random())
                inserted += 1
            assert frontier.count == inserted - removed
            assert len(list(frontier)) == frontier.count

    def test_contains_after_removal(self):
        goal = Position(9, 9)
        a = WeightedNode(Position(1, 1), goal, step_weight=1)
        b = WeightedNode(Position(2, 2), goal, step_weight=2)
        c = WeightedNode(Position(3, 3), goal, step_weight=3)
        frontier = OrderedFrontier(key=lambda node: node.total_weight)
        for node in (a, b, c):
            frontier.insert_sorted_from_front(node)

        index = list(frontier).index(b)
        frontier.remove_at(index)

        assert not frontier.contains(b)
        assert frontier.contains(a)
        assert c in frontier

    def test_contains_matches_nodes_by_position(self):
        goal = Position(5, 5)
        frontier = OrderedFrontier(key=lambda node: node.total_weight)
        frontier.insert_sorted_from_front(WeightedNode(Position(2, 3), goal, step_weight=4))

        assert frontier.contains(WeightedNode(Position(2, 3), goal, step_weight=99))
        assert not frontier.contains(WeightedNode(Position(3, 2), goal, step_weight=4))


class TestIteration:
    """Forward iteration"""

    def test_iteration_is_repeatable(self):
        frontier = OrderedFrontier()
        for value in (3, 1, 2):
            frontier.insert_sorted_from_front(value)

        assert list(frontier) == list(frontier) == [1, 2, 3]

    def test_mutation_during_iteration_raises(self):
        frontier = OrderedFrontier()
        for value in (3, 1, 2):
            frontier.insert_sorted_from_front(value)

        with pytest.raises(RuntimeError):
            for value in frontier:
                frontier.insert_sorted_from_front(value + 10)

    def test_repr_lists_contents(self):
        frontier = OrderedFrontier()
        frontier.insert_sorted_from_front(2)
        assert "2" in repr(frontier)
        assert "ascending" in repr(frontier)
