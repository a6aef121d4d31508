"""FIFO queue with head and tail access."""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, Iterator


class QueueEmptyError(IndexError):
    """Raised when reading from an empty queue."""


class Queue:
    """First-in first-out queue."""

    def __init__(self) -> None:
        self._items: Deque[Any] = deque()

    def enqueue(self, item: Any) -> None:
        """Append ``item`` at the tail."""
        self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the item at the head."""
        if not self._items:
            raise QueueEmptyError("dequeue from an empty queue")
        return self._items.popleft()

    def head(self) -> Any:
        """Return the item at the head without removing it."""
        if not self._items:
            raise QueueEmptyError("head of an empty queue")
        return self._items[0]

    def tail(self) -> Any:
        """Return the item at the tail without removing it."""
        if not self._items:
            raise QueueEmptyError("tail of an empty queue")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from head to tail."""
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"