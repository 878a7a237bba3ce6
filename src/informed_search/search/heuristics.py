"""Domain independent heuristics."""

from typing import Any, Optional

from informed_search.core.cost import zero_like


class ZeroHeuristic:
    """Heuristic estimating every remaining cost as zero.

    Trivially admissible; turns A* into uniform cost search and RBFS into
    its uninformed counterpart.
    """

    def __init__(self, zero: Optional[Any] = None):
        """Initialize heuristic.

        Args:
            zero: The zero value of the cost type used by the domain. When
                omitted, the zero of each node's own cost type is returned.
        """
        self.zero = zero

    def estimate_remaining_cost(self, node: Any, domain_context: Any) -> Any:
        if self.zero is None:
            return zero_like(node.cost)
        return self.zero
