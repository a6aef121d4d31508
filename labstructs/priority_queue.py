"""Bounded min-priority queue backed by a binary heap."""

from __future__ import annotations

from typing import Iterator, List


class PriorityQueueEmptyError(IndexError):
    """Raised when reading from an empty priority queue."""


class PriorityQueueFullError(OverflowError):
    """Raised when inserting into a full priority queue."""


def _parent(i: int) -> int:
    return (i - 1) // 2


class MinPriorityQueue:
    """Min-heap of integer priorities with a fixed capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._heap: List[int] = []

    def insert(self, priority: int) -> None:
        """Add ``priority`` to the queue."""
        if len(self._heap) >= self.capacity:
            raise PriorityQueueFullError("priority queue is full")
        self._heap.append(priority)
        self._sift_up(len(self._heap) - 1)

    def minimum(self) -> int:
        """Return the smallest priority without removing it."""
        if not self._heap:
            raise PriorityQueueEmptyError("minimum of an empty priority queue")
        return self._heap[0]

    def extract_min(self) -> int:
        """Remove and return the smallest priority."""
        if not self._heap:
            raise PriorityQueueEmptyError("extract from an empty priority queue")
        smallest = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._heapify(0)
        return smallest

    def decrease_key(self, index: int, priority: int) -> None:
        """Lower the priority stored at heap position ``index``."""
        if not self._heap:
            raise PriorityQueueEmptyError("decrease_key on an empty priority queue")
        if not 0 <= index < len(self._heap):
            raise IndexError(f"invalid heap index {index}")
        if priority > self._heap[index]:
            raise ValueError("new priority is greater than the current one")
        self._heap[index] = priority
        self._sift_up(index)

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0 and heap[index] < heap[_parent(index)]:
            up = _parent(index)
            heap[index], heap[up] = heap[up], heap[index]
            index = up

    def _heapify(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            left = 2 * index + 1
            right = left + 1
            smallest = left if left < size and heap[left] < heap[index] else index
            if right < size and heap[right] < heap[smallest]:
                smallest = right
            if smallest == index:
                return
            heap[index], heap[smallest] = heap[smallest], heap[index]
            index = smallest

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[int]:
        """Iterate over the priorities in heap-array order."""
        return iter(list(self._heap))

    def __repr__(self) -> str:
        return f"MinPriorityQueue(capacity={self.capacity}, heap={self._heap!r})"