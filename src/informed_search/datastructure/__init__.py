"""Data structures backing the search algorithms."""

from .fibonacci_heap import (
    FibonacciHeap, FibonacciHeapEntry, HeapValues, InvalidEntryState, InvalidKeyUpdate
)

__all__ = [
    'FibonacciHeap',
    'FibonacciHeapEntry',
    'HeapValues',
    'InvalidEntryState',
    'InvalidKeyUpdate'
]
