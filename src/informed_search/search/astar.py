"""A* search on top of a Fibonacci heap.

The open list holds one entry per search space state. When a cheaper path to
an open state is found, the entry is updated in place with a decrease-key
rather than inserting a duplicate. States are identified by the ``state``
attribute of the search nodes, which must therefore be hashable.

With ``reopen_closed`` disabled the first goal popped is only optimal for
consistent heuristics, so it is reported without the optimality flag.
"""

import itertools
import logging
from typing import Any, Dict, Optional

from informed_search.core.nodes import InformedSearchNode
from informed_search.datastructure.fibonacci_heap import FibonacciHeap, FibonacciHeapEntry
from informed_search.search.base import BaseSolver, SearchConfig

logger = logging.getLogger(__name__)


class _OpenRecord:
    """Mutable payload of an open list entry."""

    __slots__ = ('informed',)

    def __init__(self, informed: InformedSearchNode):
        self.informed = informed


class AStarSolver(BaseSolver):
    """A* search with duplicate detection and decrease-key on the open list."""

    name = "astar"

    def solve(self, start: InformedSearchNode, domain_context: Any,
              heuristic: Any, generator: Any, manager: Any) -> None:
        """Run A* from ``start``; see ``RBFSSolver.solve`` for the arguments."""
        stats = self._begin()
        logger.info(f"A* search started, initial f={start.f_score}")

        sequence = itertools.count()
        open_list: FibonacciHeap = FibonacciHeap.create()
        open_entries: Dict[Any, FibonacciHeapEntry] = {}
        closed: Dict[Any, InformedSearchNode] = {}

        open_entries[start.search_node.state] = open_list.insert(
            (start.f_score, next(sequence)), _OpenRecord(start)
        )
        reason = "exhausted"

        try:
            while open_list:
                limit = self._limit_reached()
                if limit is not None:
                    reason = limit
                    break

                entry = open_list.delete_minimum()
                current = entry.value.informed
                node = current.search_node
                del open_entries[node.state]

                if node.is_goal:
                    # Without reopening, an inconsistent heuristic can close a state too early.
                    manager.accept_solution(node, optimal=self.config.reopen_closed)
                    reason = "goal_found"
                    break

                closed[node.state] = current
                for child in self._successors(node, domain_context, generator):
                    self._push(child, domain_context, heuristic, open_list,
                               open_entries, closed, sequence)
        except Exception as e:
            self._finish("error")
            logger.error(f"A* search aborted: {e}")
            raise

        self._finish(reason)

    def _push(self, child: Any, domain_context: Any, heuristic: Any,
              open_list: FibonacciHeap, open_entries: Dict[Any, FibonacciHeapEntry],
              closed: Dict[Any, InformedSearchNode], sequence: itertools.count) -> None:
        state = child.state

        existing = open_entries.get(state)
        if existing is not None:
            record = existing.value
            if not child.cost < record.informed.cost:
                return
            # Same state, same estimate: a cheaper g strictly lowers f.
            record.informed = InformedSearchNode(child, record.informed.heuristic)
            open_list.decrease_key(existing, (record.informed.f_score, existing.key[1]))
            return

        previous = closed.get(state)
        if previous is not None:
            if not self.config.reopen_closed or not child.cost < previous.cost:
                return
            del closed[state]
            informed = InformedSearchNode(child, previous.heuristic)
            logger.debug(f"Reopening closed state with cheaper cost {child.cost}")
        else:
            informed = InformedSearchNode(
                child, heuristic.estimate_remaining_cost(child, domain_context)
            )

        open_entries[state] = open_list.insert(
            (informed.f_score, next(sequence)), _OpenRecord(informed)
        )


def create_astar_solver(config: Optional[SearchConfig] = None) -> AStarSolver:
    """Factory function to create an A* solver.

    Args:
        config: Solver configuration

    Returns:
        Configured AStarSolver instance
    """
    return AStarSolver(config)
