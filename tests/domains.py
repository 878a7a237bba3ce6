"""Small problem domains used by the solver tests."""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from informed_search.core.cost import IntegerCost
from informed_search.core.nodes import BasicSearchNode


@dataclass(frozen=True)
class DummySearchNode:
    """Node of a hand-written search tree with a fixed heuristic value."""
    name: str
    cost: float
    estimate: float
    is_goal: bool = False

    @property
    def state(self) -> str:
        return self.name


class DummyHeuristic:
    """Returns the estimate stored in a DummySearchNode."""

    def estimate_remaining_cost(self, node, domain_context):
        return node.estimate


class RecordingGenerator:
    """Generator over an explicit successor mapping that records expansions."""

    def __init__(self, successors: Dict[DummySearchNode, List[DummySearchNode]]):
        self.successors = successors
        self.expanded: List[DummySearchNode] = []

    def expand(self, node, domain_context):
        self.expanded.append(node)
        return list(self.successors.get(node, []))


class GraphGenerator:
    """Generator over a weighted directed graph with named vertices."""

    def __init__(self, edges: Dict[str, List[Tuple[str, float]]], goals: Sequence[str]):
        self.edges = edges
        self.goals = set(goals)
        self.expanded: List[str] = []

    def start(self, name: str) -> BasicSearchNode:
        return BasicSearchNode(name, 0, name in self.goals)

    def expand(self, node, domain_context):
        self.expanded.append(node.state)
        for target, step_cost in self.edges.get(node.state, []):
            yield BasicSearchNode(target, node.cost + step_cost, target in self.goals)


class TableHeuristic:
    """Heuristic reading estimates from a dictionary (missing states estimate 0)."""

    def __init__(self, estimates: Dict[str, float]):
        self.estimates = estimates

    def estimate_remaining_cost(self, node, domain_context):
        return self.estimates.get(node.state, 0)


@dataclass(frozen=True)
class PuzzleNode:
    """Sliding puzzle position; ``fields`` is row-major with 0 as the empty field."""
    fields: Tuple[int, ...]
    moves: Tuple[str, ...]
    cost: IntegerCost
    is_goal: bool

    @property
    def state(self) -> Tuple[int, ...]:
        return self.fields


class PuzzleEnvironment:
    """Dimension and target layout of a sliding puzzle."""

    DIRECTIONS = {'up': (-1, 0), 'down': (1, 0), 'left': (0, -1), 'right': (0, 1)}

    def __init__(self, dimension: int, target: Optional[Sequence[int]] = None):
        self.dimension = dimension
        if target is None:
            target = list(range(1, dimension * dimension)) + [0]
        self.target = tuple(int(v) for v in target)
        grid = np.asarray(self.target).reshape(dimension, dimension)
        self.target_positions = np.zeros((dimension * dimension, 2), dtype=np.int64)
        for row in range(dimension):
            for column in range(dimension):
                self.target_positions[grid[row, column]] = (row, column)

    def node(self, fields: Sequence[int], moves: Tuple[str, ...] = ()) -> PuzzleNode:
        fields = tuple(int(v) for v in fields)
        return PuzzleNode(fields, moves, IntegerCost.value_of(len(moves)), fields == self.target)

    def legal_moves(self, fields: Tuple[int, ...]) -> List[Tuple[str, int]]:
        """Moves of the empty field as (name, index the empty field moves to)."""
        empty = fields.index(0)
        row, column = divmod(empty, self.dimension)
        result = []
        for name, (dr, dc) in self.DIRECTIONS.items():
            r, c = row + dr, column + dc
            if 0 <= r < self.dimension and 0 <= c < self.dimension:
                result.append((name, r * self.dimension + c))
        return result

    def apply(self, fields: Tuple[int, ...], target_index: int) -> Tuple[int, ...]:
        empty = fields.index(0)
        swapped = list(fields)
        swapped[empty], swapped[target_index] = swapped[target_index], swapped[empty]
        return tuple(swapped)

    def scramble(self, steps: int, seed: int = 0) -> Tuple[int, ...]:
        """Walk randomly away from the target without undoing the previous move."""
        rng = np.random.default_rng(seed)
        fields = self.target
        previous = None
        for _ in range(steps):
            options = [(name, index) for name, index in self.legal_moves(fields) if index != previous]
            name, index = options[int(rng.integers(len(options)))]
            previous = fields.index(0)
            fields = self.apply(fields, index)
        return fields


class PuzzleGenerator:
    """Generates the positions reachable with one move."""

    def expand(self, node: PuzzleNode, environment: PuzzleEnvironment):
        for name, index in environment.legal_moves(node.fields):
            yield environment.node(environment.apply(node.fields, index), node.moves + (name,))


class ManhattanDistance:
    """Total distance of every tile to its target position, ignoring the empty field."""

    def estimate_remaining_cost(self, node: PuzzleNode, environment: PuzzleEnvironment) -> IntegerCost:
        n = environment.dimension
        grid = np.asarray(node.fields).reshape(n, n)
        rows, columns = np.nonzero(grid)
        targets = environment.target_positions[grid[rows, columns]]
        distance = np.abs(rows - targets[:, 0]).sum() + np.abs(columns - targets[:, 1]).sum()
        return IntegerCost.value_of(int(distance))
