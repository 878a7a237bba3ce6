"""Cost value types for accumulated path cost.

A cost is an immutable, totally ordered value that can be added to another
cost of the same kind. Every cost kind has a zero (the additive identity) and
an infinite value that compares greater than every finite cost.

Plain ``int`` and ``float`` values already behave this way and are accepted
wherever a cost is expected; ``DoubleCost`` and ``IntegerCost`` are provided
for domains that want an explicit cost type.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class Cost(Protocol):
    """Capabilities required from a path cost."""

    def __add__(self, other: Any) -> "Cost":
        ...

    def __lt__(self, other: Any) -> bool:
        ...

    def __le__(self, other: Any) -> bool:
        ...


@total_ordering
@dataclass(frozen=True)
class DoubleCost:
    """Floating point cost. ``math.inf`` is the infinite value."""

    value: float

    def __post_init__(self) -> None:
        if math.isnan(self.value):
            raise ValueError("DoubleCost does not accept NaN")

    @classmethod
    def value_of(cls, value: float) -> "DoubleCost":
        return cls(float(value))

    @classmethod
    def zero(cls) -> "DoubleCost":
        return _DOUBLE_ZERO

    @classmethod
    def infinity(cls) -> "DoubleCost":
        return _DOUBLE_INFINITY

    @property
    def is_infinite(self) -> bool:
        return math.isinf(self.value)

    def __add__(self, other: "DoubleCost") -> "DoubleCost":
        if not isinstance(other, DoubleCost):
            return NotImplemented
        return DoubleCost(self.value + other.value)

    def __lt__(self, other: "DoubleCost") -> bool:
        if not isinstance(other, DoubleCost):
            return NotImplemented
        return self.value < other.value

    def __str__(self) -> str:
        return str(self.value)


_DOUBLE_ZERO = DoubleCost(0.0)
_DOUBLE_INFINITY = DoubleCost(math.inf)


@total_ordering
@dataclass(frozen=True)
class IntegerCost:
    """Integer cost.

    Python integers are unbounded, so the infinite value is represented by a
    ``None`` payload rather than a maximal integer. Adding anything to the
    infinite cost yields the infinite cost.
    """

    value: Optional[int]

    @classmethod
    def value_of(cls, value: int) -> "IntegerCost":
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"IntegerCost requires an int, got {type(value).__name__}")
        return cls(value)

    @classmethod
    def zero(cls) -> "IntegerCost":
        return _INTEGER_ZERO

    @classmethod
    def infinity(cls) -> "IntegerCost":
        return _INTEGER_INFINITY

    @property
    def is_infinite(self) -> bool:
        return self.value is None

    def __add__(self, other: "IntegerCost") -> "IntegerCost":
        if not isinstance(other, IntegerCost):
            return NotImplemented
        if self.is_infinite or other.is_infinite:
            return _INTEGER_INFINITY
        return IntegerCost(self.value + other.value)

    def __lt__(self, other: "IntegerCost") -> bool:
        if not isinstance(other, IntegerCost):
            return NotImplemented
        if self.is_infinite:
            return False
        if other.is_infinite:
            return True
        return self.value < other.value

    def __str__(self) -> str:
        return "inf" if self.is_infinite else str(self.value)


_INTEGER_ZERO = IntegerCost(0)
_INTEGER_INFINITY = IntegerCost(None)


def infinity_like(cost: Any) -> Any:
    """Return the infinite value of the cost kind ``cost`` belongs to."""
    factory = getattr(type(cost), "infinity", None)
    if callable(factory):
        return factory()
    if isinstance(cost, (int, float)):
        return math.inf
    raise TypeError(f"Cannot derive an infinite value for cost type {type(cost).__name__}")


def zero_like(cost: Any) -> Any:
    """Return the zero value of the cost kind ``cost`` belongs to."""
    factory = getattr(type(cost), "zero", None)
    if callable(factory):
        return factory()
    if isinstance(cost, (int, float)):
        return type(cost)(0)
    raise TypeError(f"Cannot derive a zero value for cost type {type(cost).__name__}")


def is_infinite(cost: Any) -> bool:
    """Check whether ``cost`` is the infinite value of its kind."""
    flag = getattr(cost, "is_infinite", None)
    if isinstance(flag, bool):
        return flag
    return cost == infinity_like(cost)
