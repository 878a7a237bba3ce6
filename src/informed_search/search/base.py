"""Configuration, statistics and shared plumbing for solvers."""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from informed_search.core.nodes import InformedSearchNode

logger = logging.getLogger(__name__)


@dataclass
class SearchConfig:
    """Configuration for a solver.

    Limits are disabled when None. A search stopped by a limit never claims
    an optimal solution.
    """
    max_nodes_expanded: Optional[int] = None
    max_computation_time: Optional[float] = None  # seconds
    reopen_closed: bool = True  # A* only: reopen closed states reached by a cheaper path

    @classmethod
    def from_config(cls, section: Any) -> 'SearchConfig':
        """Build a configuration from a ``search.<solver>`` config section."""
        if not section:
            return cls()

        max_nodes = section.get('max_nodes_expanded', None)
        max_time = section.get('max_computation_time', None)
        return cls(
            max_nodes_expanded=int(max_nodes) if max_nodes is not None else None,
            max_computation_time=float(max_time) if max_time is not None else None,
            reopen_closed=bool(section.get('reopen_closed', True))
        )

    @classmethod
    def from_global_config(cls, solver_name: str) -> 'SearchConfig':
        """Take the ``search.<solver_name>`` section of the loaded configuration, if any."""
        from informed_search.config import get_search_config

        return get_search_config(solver_name)


@dataclass
class SearchStatistics:
    """Counters collected during a single solve call."""
    nodes_expanded: int = 0
    nodes_generated: int = 0
    max_depth_reached: int = 0
    computation_time: float = 0.0
    termination_reason: str = "unknown"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'nodes_expanded': self.nodes_expanded,
            'nodes_generated': self.nodes_generated,
            'max_depth_reached': self.max_depth_reached,
            'computation_time': self.computation_time,
            'termination_reason': self.termination_reason
        }


class BaseSolver(ABC):
    """Common behaviour of the best-first solvers."""

    name = "solver"

    def __init__(self, config: Optional[SearchConfig] = None):
        """Initialize solver.

        Args:
            config: Solver configuration. Defaults to the ``search.<name>``
                section of the global configuration when one is loaded.
        """
        self.config = config or SearchConfig.from_global_config(self.name)
        self.statistics = SearchStatistics()
        self._start_time = 0.0

    @abstractmethod
    def solve(self, start: InformedSearchNode, domain_context: Any,
              heuristic: Any, generator: Any, manager: Any) -> None:
        """Search for a goal reachable from ``start``.

        Goals are reported to ``manager``; nothing is returned.
        """
        pass

    def _begin(self) -> SearchStatistics:
        self.statistics = SearchStatistics()
        self._start_time = time.perf_counter()
        return self.statistics

    def _finish(self, reason: str) -> None:
        stats = self.statistics
        stats.termination_reason = reason
        stats.computation_time = time.perf_counter() - self._start_time
        logger.info(f"{self.name} finished ({reason}): expanded {stats.nodes_expanded} nodes "
                    f"in {stats.computation_time:.3f}s")

    def _limit_reached(self) -> Optional[str]:
        """Return the name of the exceeded limit, if any."""
        config = self.config
        if (config.max_nodes_expanded is not None
                and self.statistics.nodes_expanded >= config.max_nodes_expanded):
            return "node_limit"
        if (config.max_computation_time is not None
                and time.perf_counter() - self._start_time >= config.max_computation_time):
            return "time_limit"
        return None

    def _successors(self, node: Any, domain_context: Any, generator: Any) -> List[Any]:
        successors = list(generator.expand(node, domain_context))
        self.statistics.nodes_expanded += 1
        self.statistics.nodes_generated += len(successors)
        logger.debug(f"Expanded node with cost {node.cost}: {len(successors)} successors")
        return successors

    @staticmethod
    def _informed(nodes: Iterable[Any], domain_context: Any, heuristic: Any) -> List[InformedSearchNode]:
        return [
            InformedSearchNode(node, heuristic.estimate_remaining_cost(node, domain_context))
            for node in nodes
        ]
