"""Search algorithms for the informed search toolkit.

This module implements recursive best-first search (RBFS) and A* together
with the solution manager and generic heuristics they are used with.
"""

from .base import BaseSolver, SearchConfig, SearchStatistics
from .heuristics import ZeroHeuristic
from .manager import BasicManager, Solution
from .rbfs import RBFSSolver, create_rbfs_solver
from .astar import AStarSolver, create_astar_solver

__all__ = [
    'BaseSolver',
    'SearchConfig',
    'SearchStatistics',
    'ZeroHeuristic',
    'BasicManager',
    'Solution',
    'RBFSSolver',
    'create_rbfs_solver',
    'AStarSolver',
    'create_astar_solver'
]
