"""Informed search toolkit.

Reusable building blocks for best-first state-space search: a Fibonacci heap,
cost and node types, collaborator contracts, and the RBFS and A* solvers.
"""

from .core import (
    DoubleCost, IntegerCost, BasicSearchNode, InformedSearchNode, DomainError
)
from .datastructure import FibonacciHeap, FibonacciHeapEntry, InvalidEntryState, InvalidKeyUpdate
from .search import (
    SearchConfig, SearchStatistics, ZeroHeuristic, BasicManager, Solution,
    RBFSSolver, AStarSolver, create_rbfs_solver, create_astar_solver
)
from .utils import setup_logging

__version__ = "0.1.0"

__all__ = [
    'DoubleCost',
    'IntegerCost',
    'BasicSearchNode',
    'InformedSearchNode',
    'DomainError',
    'FibonacciHeap',
    'FibonacciHeapEntry',
    'InvalidEntryState',
    'InvalidKeyUpdate',
    'SearchConfig',
    'SearchStatistics',
    'ZeroHeuristic',
    'BasicManager',
    'Solution',
    'RBFSSolver',
    'AStarSolver',
    'create_rbfs_solver',
    'create_astar_solver',
    'setup_logging'
]
