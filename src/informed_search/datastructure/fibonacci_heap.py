"""Fibonacci heap priority queue.

A Fibonacci heap is a forest of heap-ordered trees whose roots are kept in a
circular, doubly linked root list, together with a pointer to the root holding
the smallest key. Inserting, merging and peeking only touch the root list and
run in O(1). Deleting the minimum promotes the children of the removed root and
then consolidates the root list so that no two roots share a degree, which
costs O(log n) amortized. Decreasing a key cuts the entry loose from its parent
when heap order is violated; parents that already lost a child are cut as well
(cascading cut), which keeps every tree of degree d at least F(d+2) nodes large
and decrease-key at O(1) amortized.

Every insertion returns a ``FibonacciHeapEntry`` handle. The handle is the only
way to decrease the key of, or delete, a specific element. Handles stay valid
when their heap is merged into another heap; they become invalid once the entry
leaves the heap.

Heaps are not thread safe.
"""

from __future__ import annotations

from collections.abc import Collection
from typing import Any, Generic, Iterator, List, Optional, TypeVar

K = TypeVar('K')
V = TypeVar('V')


class InvalidEntryState(ValueError):
    """Raised when an entry is used with a heap it is no longer part of."""
    pass


class InvalidKeyUpdate(ValueError):
    """Raised when decrease_key is asked to increase a key."""
    pass


class _Ownership:
    """Identity token of a heap.

    Entries point at the token of the heap that created them. Merging a heap
    forwards its token to the token of the receiving heap, so ownership checks
    stay O(1) amortized (with path compression) while merge stays O(1).
    """

    __slots__ = ('forward',)

    def __init__(self) -> None:
        self.forward: Optional['_Ownership'] = None

    def resolve(self) -> '_Ownership':
        root = self
        while root.forward is not None:
            root = root.forward
        node = self
        while node.forward is not None and node.forward is not root:
            node.forward, node = root, node.forward
        return root


class FibonacciHeapEntry(Generic[K, V]):
    """Handle to an element stored in a ``FibonacciHeap``."""

    __slots__ = ('_key', '_value', '_owner', '_parent', '_child',
                 '_left', '_right', '_degree', '_marked', '_removed')

    def __init__(self, key: K, value: V, owner: _Ownership):
        self._key = key
        self._value = value
        self._owner = owner
        self._parent: Optional[FibonacciHeapEntry[K, V]] = None
        self._child: Optional[FibonacciHeapEntry[K, V]] = None
        self._left: FibonacciHeapEntry[K, V] = self
        self._right: FibonacciHeapEntry[K, V] = self
        self._degree = 0
        self._marked = False
        self._removed = False

    @property
    def key(self) -> K:
        return self._key

    @property
    def value(self) -> V:
        return self._value

    def __repr__(self) -> str:
        return f"FibonacciHeapEntry(key={self._key!r}, value={self._value!r})"


def _splice(one: Optional[FibonacciHeapEntry], two: Optional[FibonacciHeapEntry]) -> Optional[FibonacciHeapEntry]:
    """Join two disjoint circular lists in O(1) and return a member of the result."""
    if one is None:
        return two
    if two is None:
        return one
    one_right = one._right
    one._right = two._right
    one._right._left = one
    two._right = one_right
    two._right._left = two
    return one


def _smaller(one: FibonacciHeapEntry, two: FibonacciHeapEntry) -> FibonacciHeapEntry:
    # Ties keep the current minimum.
    return two if two._key < one._key else one


class FibonacciHeap(Generic[K, V]):
    """Mergeable min-priority queue keyed by totally ordered keys.

    Example:
        >>> heap = FibonacciHeap.create()
        >>> entry = heap.insert(5, 'five')
        >>> heap.insert(3, 'three').value
        'three'
        >>> heap.decrease_key(entry, 1)
        >>> heap.delete_minimum().value
        'five'
    """

    def __init__(self) -> None:
        self._min: Optional[FibonacciHeapEntry[K, V]] = None
        self._size = 0
        self._owner = _Ownership()

    @classmethod
    def create(cls) -> 'FibonacciHeap[K, V]':
        """Create an empty heap."""
        return cls()

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def insert(self, key: K, value: V = None) -> FibonacciHeapEntry[K, V]:
        """Add a value with the given key.

        Args:
            key: Priority of the value; smaller keys leave the heap first
            value: Payload stored alongside the key

        Returns:
            Handle to the new entry

        Raises:
            ValueError: If the key is unordered (not equal to itself, e.g. NaN)
        """
        if key != key:
            raise ValueError(f"Unordered key cannot be inserted: {key!r}")

        entry = FibonacciHeapEntry(key, value, self._owner)
        if self._min is None:
            self._min = entry
        else:
            _splice(self._min, entry)
            self._min = _smaller(self._min, entry)
        self._size += 1
        return entry

    def find_minimum(self) -> Optional[FibonacciHeapEntry[K, V]]:
        """Return the entry with the smallest key, or None when empty."""
        return self._min

    def delete_minimum(self) -> Optional[FibonacciHeapEntry[K, V]]:
        """Remove and return the entry with the smallest key, or None when empty."""
        minimum = self._min
        if minimum is None:
            return None

        if minimum._right is minimum:
            self._min = None
        else:
            minimum._left._right = minimum._right
            minimum._right._left = minimum._left
            self._min = minimum._right

        child = minimum._child
        if child is not None:
            node = child
            while True:
                node._parent = None
                node._marked = False
                node = node._right
                if node is child:
                    break
            self._min = _splice(self._min, child)

        minimum._child = None
        minimum._degree = 0
        minimum._left = minimum._right = minimum
        minimum._removed = True
        self._size -= 1

        if self._min is not None:
            self._consolidate()
        return minimum

    def decrease_key(self, entry: FibonacciHeapEntry[K, V], new_key: K) -> None:
        """Lower the key of an entry.

        Raises:
            InvalidEntryState: If the entry is not part of this heap
            InvalidKeyUpdate: If new_key is larger than (or unordered with) the current key
        """
        self._check_owned(entry)
        if not new_key <= entry._key:
            raise InvalidKeyUpdate(
                f"New key {new_key!r} is not smaller than or equal to current key {entry._key!r}"
            )

        entry._key = new_key
        parent = entry._parent
        if parent is not None and new_key < parent._key:
            self._cut(entry)
            self._cascading_cut(parent)
        self._min = _smaller(self._min, entry)

    def delete(self, entry: FibonacciHeapEntry[K, V]) -> None:
        """Remove an arbitrary entry from the heap.

        Raises:
            InvalidEntryState: If the entry is not part of this heap
        """
        self._check_owned(entry)
        parent = entry._parent
        if parent is not None:
            self._cut(entry)
            self._cascading_cut(parent)
        # Acts as if the key had been decreased below every other key.
        self._min = entry
        self.delete_minimum()

    def merge(self, other: 'FibonacciHeap[K, V]') -> None:
        """Move all entries of ``other`` into this heap, leaving ``other`` empty."""
        if other is self:
            raise ValueError("A heap cannot be merged with itself")

        if other._min is not None:
            if self._min is None:
                self._min = other._min
            else:
                _splice(self._min, other._min)
                self._min = _smaller(self._min, other._min)
        self._size += other._size

        other._owner.forward = self._owner
        other._owner = _Ownership()
        other._min = None
        other._size = 0

    def iterator(self) -> Iterator[FibonacciHeapEntry[K, V]]:
        return iter(self)

    def __iter__(self) -> Iterator[FibonacciHeapEntry[K, V]]:
        """Iterate over the entries present at call time, in no particular order.

        The entry references are gathered in one O(n) walk of the forest before
        anything is yielded, so deletions made while iterating neither corrupt
        the traversal nor hide entries that were present at call time.
        """
        return iter(self._collect_entries())

    def as_collection(self) -> 'HeapValues[V]':
        """Read-only collection view on the values in this heap."""
        return HeapValues(self)

    def _collect_entries(self) -> List[FibonacciHeapEntry[K, V]]:
        entries: List[FibonacciHeapEntry[K, V]] = []
        if self._min is None:
            return entries

        pending = [self._min]
        while pending:
            start = pending.pop()
            node = start
            while True:
                entries.append(node)
                if node._child is not None:
                    pending.append(node._child)
                node = node._right
                if node is start:
                    break
        return entries

    def _check_owned(self, entry: FibonacciHeapEntry[K, V]) -> None:
        if entry._removed or entry._owner.resolve() is not self._owner:
            raise InvalidEntryState(f"{entry!r} is not part of this heap")

    def _consolidate(self) -> None:
        """Link roots of equal degree until every degree occurs at most once."""
        roots = []
        start = self._min
        node = start
        while True:
            roots.append(node)
            node = node._right
            if node is start:
                break

        by_degree: List[Optional[FibonacciHeapEntry[K, V]]] = []
        for root in roots:
            current = root
            while True:
                degree = current._degree
                while degree >= len(by_degree):
                    by_degree.append(None)
                other = by_degree[degree]
                if other is None:
                    by_degree[degree] = current
                    break
                by_degree[degree] = None
                if other._key < current._key:
                    current, other = other, current
                self._link(other, current)

        self._min = None
        for root in by_degree:
            if root is None:
                continue
            if self._min is None or root._key < self._min._key:
                self._min = root

    def _link(self, child: FibonacciHeapEntry[K, V], parent: FibonacciHeapEntry[K, V]) -> None:
        """Make root ``child`` a child of root ``parent``."""
        child._left._right = child._right
        child._right._left = child._left
        child._left = child._right = child

        child._parent = parent
        child._marked = False
        parent._child = _splice(parent._child, child)
        parent._degree += 1

    def _cut(self, entry: FibonacciHeapEntry[K, V]) -> None:
        """Detach a non-root entry from its parent and add it to the root list."""
        parent = entry._parent
        if entry._right is entry:
            parent._child = None
        else:
            if parent._child is entry:
                parent._child = entry._right
            entry._left._right = entry._right
            entry._right._left = entry._left
            entry._left = entry._right = entry
        parent._degree -= 1

        entry._parent = None
        entry._marked = False
        _splice(self._min, entry)

    def _cascading_cut(self, node: FibonacciHeapEntry[K, V]) -> None:
        while node._parent is not None:
            if not node._marked:
                node._marked = True
                return
            parent = node._parent
            self._cut(node)
            node = parent


class HeapValues(Collection, Generic[V]):
    """Live view on the values of a heap.

    Each iteration walks the entries present when iteration starts.
    """

    def __init__(self, heap: FibonacciHeap[Any, V]):
        self._heap = heap

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[V]:
        return (entry.value for entry in self._heap)

    def __contains__(self, value: object) -> bool:
        return any(candidate is value or candidate == value for candidate in self)
