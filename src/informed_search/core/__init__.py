"""Core value types and collaborator contracts for informed search."""

from .cost import Cost, DoubleCost, IntegerCost, infinity_like, zero_like, is_infinite
from .nodes import SearchNode, BasicSearchNode, InformedSearchNode
from .contracts import Heuristic, Generator, Manager, DomainError

__all__ = [
    'Cost',
    'DoubleCost',
    'IntegerCost',
    'infinity_like',
    'zero_like',
    'is_infinite',
    'SearchNode',
    'BasicSearchNode',
    'InformedSearchNode',
    'Heuristic',
    'Generator',
    'Manager',
    'DomainError'
]
