"""Collaborator contracts used by the solvers.

Problem domains plug into a solver through three capabilities: a heuristic
estimating remaining cost, a generator producing successor nodes and a
manager keeping the best solution. Any object with the right methods
qualifies; no common base class is required.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Protocol, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from informed_search.search.manager import Solution


class DomainError(Exception):
    """Raised by problem adapters when a generator or heuristic cannot proceed."""
    pass


@runtime_checkable
class Heuristic(Protocol):
    """Estimator of the cost remaining from a node to the nearest goal.

    Solvers only guarantee optimal solutions when the estimate is admissible,
    i.e. never larger than the true remaining cost. This is not checked.
    """

    def estimate_remaining_cost(self, node: Any, domain_context: Any) -> Any:
        ...


@runtime_checkable
class Generator(Protocol):
    """Producer of the successors of a search node."""

    def expand(self, node: Any, domain_context: Any) -> Iterable[Any]:
        ...


@runtime_checkable
class Manager(Protocol):
    """Keeper of the best solution found by a search."""

    def accept_solution(self, candidate: Any, optimal: bool = False) -> bool:
        ...

    def get_solution(self) -> Optional["Solution"]:
        ...
