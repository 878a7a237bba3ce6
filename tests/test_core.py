"""Tests for cost types, search nodes, collaborator contracts and the manager."""

import math

import pytest

from informed_search.core import (
    BasicSearchNode, DoubleCost, Generator, Heuristic, InformedSearchNode, IntegerCost,
    Manager, SearchNode, infinity_like, is_infinite, zero_like
)
from informed_search.search import BasicManager, Solution, ZeroHeuristic


class TestDoubleCost:
    """Test the floating point cost type."""

    def test_arithmetic_and_ordering(self):
        assert DoubleCost(1.5) + DoubleCost(2.0) == DoubleCost(3.5)
        assert DoubleCost(1.0) < DoubleCost(2.0)
        assert DoubleCost(2.0) >= DoubleCost(2.0)
        assert max(DoubleCost(1.0), DoubleCost(3.0)) == DoubleCost(3.0)

    def test_zero_is_identity(self):
        cost = DoubleCost.value_of(4)
        assert cost + DoubleCost.zero() == cost
        assert cost.value == 4.0

    def test_infinity(self):
        infinity = DoubleCost.infinity()
        assert infinity.is_infinite
        assert DoubleCost(1e300) < infinity
        assert infinity + DoubleCost(1.0) == infinity
        assert not DoubleCost(0.0).is_infinite

    def test_rejects_nan(self):
        with pytest.raises(ValueError):
            DoubleCost(math.nan)

    def test_hashable(self):
        assert {DoubleCost(1.0), DoubleCost(1.0), DoubleCost(2.0)} == {DoubleCost(1.0), DoubleCost(2.0)}


class TestIntegerCost:
    """Test the integer cost type."""

    def test_arithmetic_and_ordering(self):
        assert IntegerCost.value_of(2) + IntegerCost.value_of(3) == IntegerCost.value_of(5)
        assert IntegerCost.value_of(2) < IntegerCost.value_of(3)
        assert IntegerCost.value_of(3) <= IntegerCost.value_of(3)
        assert sorted([IntegerCost(4), IntegerCost(1), IntegerCost.infinity()]) == [
            IntegerCost(1), IntegerCost(4), IntegerCost.infinity()
        ]

    def test_infinity_absorbs_addition(self):
        infinity = IntegerCost.infinity()
        assert infinity + IntegerCost(5) == infinity
        assert IntegerCost(5) + infinity == infinity
        assert IntegerCost(10 ** 100) < infinity
        assert not infinity < infinity
        assert str(infinity) == "inf"

    def test_value_of_rejects_non_integers(self):
        with pytest.raises(TypeError):
            IntegerCost.value_of(1.5)
        with pytest.raises(TypeError):
            IntegerCost.value_of(True)


class TestCostHelpers:
    """Test sentinel helpers for arbitrary cost kinds."""

    @pytest.mark.parametrize("cost, zero, infinity", [
        (DoubleCost(3.0), DoubleCost(0.0), DoubleCost(math.inf)),
        (IntegerCost(3), IntegerCost(0), IntegerCost(None)),
        (3, 0, math.inf),
        (2.5, 0.0, math.inf),
    ])
    def test_sentinels(self, cost, zero, infinity):
        assert zero_like(cost) == zero
        assert infinity_like(cost) == infinity
        assert is_infinite(infinity_like(cost))
        assert not is_infinite(cost)

    def test_unknown_cost_type(self):
        with pytest.raises(TypeError):
            infinity_like("three")


class TestNodes:
    """Test node types."""

    def test_informed_node_f_score(self):
        node = BasicSearchNode("state", 2.5)
        informed = InformedSearchNode(node, 1.5)

        assert informed.cost == 2.5
        assert informed.f_score == 4.0
        assert not informed.is_goal

    def test_informed_node_with_cost_objects(self):
        node = BasicSearchNode("state", IntegerCost(3), True)
        informed = InformedSearchNode(node, IntegerCost(4))

        assert informed.f_score == IntegerCost(7)
        assert informed.is_goal

    def test_nodes_are_immutable(self):
        node = BasicSearchNode("state", 1)
        with pytest.raises(AttributeError):
            node.cost = 0

    def test_contracts_are_structural(self):
        assert isinstance(BasicSearchNode("state", 1), SearchNode)
        assert isinstance(ZeroHeuristic(), Heuristic)
        assert isinstance(BasicManager(), Manager)
        assert not isinstance(ZeroHeuristic(), Generator)


class TestZeroHeuristic:
    """Test the zero heuristic."""

    def test_heuristic_value(self):
        heuristic = ZeroHeuristic(DoubleCost.value_of(0.))
        node = BasicSearchNode("", 1, False)

        assert heuristic.estimate_remaining_cost(node, None) == DoubleCost.value_of(0)

    def test_default_zero(self):
        assert ZeroHeuristic().estimate_remaining_cost(BasicSearchNode("", 5), None) == 0

    def test_default_zero_follows_node_cost_type(self):
        heuristic = ZeroHeuristic()

        assert heuristic.estimate_remaining_cost(BasicSearchNode("", IntegerCost(3)), None) == IntegerCost.zero()
        assert heuristic.estimate_remaining_cost(BasicSearchNode("", DoubleCost(1.5)), None) == DoubleCost.zero()
        assert heuristic.estimate_remaining_cost(BasicSearchNode("", 2.5), None) == 0.0


class TestBasicManager:
    """Test solution replacement rules."""

    def test_first_solution_is_accepted(self):
        manager = BasicManager()
        assert manager.get_solution() is None

        node = BasicSearchNode("goal", 5, True)
        assert manager.accept_solution(node)
        assert manager.get_solution() == Solution(node, False)
        assert manager.get_solution().cost == 5

    def test_only_strictly_cheaper_replaces(self):
        manager = BasicManager()
        first = BasicSearchNode("first", 5, True)
        same = BasicSearchNode("same", 5, True)
        cheaper = BasicSearchNode("cheaper", 3, True)
        worse = BasicSearchNode("worse", 9, True)

        manager.accept_solution(first)
        assert not manager.accept_solution(same)
        assert not manager.accept_solution(worse)
        assert manager.get_solution().node is first

        assert manager.accept_solution(cheaper, optimal=True)
        assert manager.get_solution().node is cheaper
        assert manager.get_solution().optimal

    def test_equal_optimal_candidate_proves_stored_solution(self):
        manager = BasicManager()
        stored = BasicSearchNode("stored", 4, True)
        manager.accept_solution(stored)

        assert not manager.accept_solution(BasicSearchNode("proof", 4, True), optimal=True)
        assert manager.get_solution().node is stored
        assert manager.get_solution().optimal
