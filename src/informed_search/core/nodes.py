"""Search node types shared by all solvers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SearchNode(Protocol):
    """Immutable snapshot of a position in the search space.

    Attributes:
        state: Opaque domain payload. Solvers that detect duplicate states
            (A*) require it to be hashable.
        cost: Accumulated path cost ``g`` from the start node.
        is_goal: Whether this node is an acceptable solution.
    """

    @property
    def state(self) -> Any:
        ...

    @property
    def cost(self) -> Any:
        ...

    @property
    def is_goal(self) -> bool:
        ...


@dataclass(frozen=True)
class BasicSearchNode:
    """Plain search node for domains that need nothing beyond the basics."""
    state: Any
    cost: Any
    is_goal: bool = False


@dataclass(frozen=True)
class InformedSearchNode:
    """A search node together with the heuristic estimate of its remaining cost."""

    search_node: Any
    heuristic: Any

    @property
    def cost(self) -> Any:
        """Accumulated cost g(n)."""
        return self.search_node.cost

    @property
    def f_score(self) -> Any:
        """Estimated total cost f(n) = g(n) + h(n)."""
        return self.search_node.cost + self.heuristic

    @property
    def is_goal(self) -> bool:
        return self.search_node.is_goal
