"""Recursive best-first search (RBFS).

RBFS explores the search tree in best-first order while only keeping the
current path and the siblings along it in memory. Every level remembers the
best f-value among the alternatives of its ancestors (the bound). When all
successors of a node exceed that bound, the smallest successor f-value is
backed up into the parent and the search continues with the alternative.
With an admissible heuristic the first goal reached is optimal.

The recursion is run on an explicit stack of frames, so the depth of the
search is not limited by the interpreter's recursion limit.
"""

import logging
from dataclasses import dataclass, field
from operator import attrgetter
from typing import Any, List, Optional

from informed_search.core.cost import infinity_like, is_infinite
from informed_search.core.nodes import InformedSearchNode
from informed_search.search.base import BaseSolver, SearchConfig

logger = logging.getLogger(__name__)


@dataclass
class _Successor:
    node: InformedSearchNode
    f_score: Any  # backed-up value, never below the parent's


@dataclass
class _Frame:
    """One level of the (conceptual) recursion."""
    node: InformedSearchNode
    f_score: Any
    bound: Any
    depth: int
    successors: Optional[List[_Successor]] = field(default=None)


class RBFSSolver(BaseSolver):
    """Recursive best-first search in linear memory."""

    name = "rbfs"

    def solve(self, start: InformedSearchNode, domain_context: Any,
              heuristic: Any, generator: Any, manager: Any) -> None:
        """Run RBFS from ``start``.

        Args:
            start: Start node with its heuristic estimate
            domain_context: Opaque problem data handed to the collaborators
            heuristic: Object with ``estimate_remaining_cost(node, domain_context)``
            generator: Object with ``expand(node, domain_context)``
            manager: Receives the goal through ``accept_solution``

        Raises:
            Exception: Anything raised by the generator or heuristic aborts the search
        """
        stats = self._begin()
        infinity = infinity_like(start.f_score)
        logger.info(f"RBFS search started, initial f={start.f_score}")

        stack = [_Frame(start, start.f_score, infinity, 0)]
        backed_up = None
        reason = "exhausted"

        try:
            while stack:
                frame = stack[-1]

                if frame.successors is None:
                    if frame.node.is_goal:
                        manager.accept_solution(frame.node.search_node, optimal=True)
                        reason = "goal_found"
                        break

                    limit = self._limit_reached()
                    if limit is not None:
                        reason = limit
                        break

                    frame.successors = self._rank_successors(frame, domain_context, heuristic, generator)
                    stats.max_depth_reached = max(stats.max_depth_reached, frame.depth)
                    if not frame.successors:
                        stack.pop()
                        backed_up = infinity
                        continue
                else:
                    # Returning from the best successor with its backed-up value.
                    frame.successors[0].f_score = backed_up

                frame.successors.sort(key=attrgetter('f_score'))
                best = frame.successors[0]
                if frame.bound < best.f_score or is_infinite(best.f_score):
                    stack.pop()
                    backed_up = best.f_score
                    continue

                if len(frame.successors) > 1:
                    alternative = frame.successors[1].f_score
                else:
                    alternative = infinity
                bound = alternative if alternative < frame.bound else frame.bound
                stack.append(_Frame(best.node, best.f_score, bound, frame.depth + 1))
        except Exception as e:
            self._finish("error")
            logger.error(f"RBFS search aborted: {e}")
            raise

        self._finish(reason)

    def _rank_successors(self, frame: _Frame, domain_context: Any,
                         heuristic: Any, generator: Any) -> List[_Successor]:
        children = self._successors(frame.node.search_node, domain_context, generator)
        parent_f = frame.f_score
        successors = []
        for child in self._informed(children, domain_context, heuristic):
            # f never decreases along a path, even for inconsistent heuristics.
            child_f = child.f_score
            successors.append(_Successor(child, parent_f if child_f < parent_f else child_f))
        return successors


def create_rbfs_solver(config: Optional[SearchConfig] = None) -> RBFSSolver:
    """Factory function to create an RBFS solver.

    Args:
        config: Solver configuration

    Returns:
        Configured RBFSSolver instance
    """
    return RBFSSolver(config)
