"""Solution bookkeeping for searches."""

import logging
from dataclasses import dataclass
from typing import Any, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Solution:
    """Best goal node found so far.

    Attributes:
        node: The goal search node
        optimal: True once the search proved no cheaper goal exists
    """
    node: Any
    optimal: bool = False

    @property
    def cost(self) -> Any:
        return self.node.cost


class BasicManager:
    """Keeps the cheapest solution reported by a solver."""

    def __init__(self) -> None:
        self._solution: Optional[Solution] = None

    def accept_solution(self, candidate: Any, optimal: bool = False) -> bool:
        """Offer a goal node as solution.

        The stored solution is replaced when the candidate is strictly cheaper
        or when no solution is stored yet.

        Args:
            candidate: Goal search node
            optimal: Whether the solver proved no cheaper goal exists

        Returns:
            True if the candidate became the stored solution
        """
        current = self._solution
        if current is None or candidate.cost < current.cost:
            self._solution = Solution(candidate, optimal)
            logger.debug(f"Accepted solution with cost {candidate.cost} (optimal={optimal})")
            return True

        if optimal and not current.optimal and not current.cost > candidate.cost:
            # No goal is cheaper than an optimal candidate, so the stored one ties it.
            self._solution = Solution(current.node, True)
            logger.debug(f"Stored solution with cost {current.cost} proven optimal")
        return False

    def get_solution(self) -> Optional[Solution]:
        return self._solution
