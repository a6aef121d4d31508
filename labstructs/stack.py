"""LIFO stack."""

from __future__ import annotations

from typing import Any, Iterator, List


class StackEmptyError(IndexError):
    """Raised when reading from an empty stack."""


class Stack:
    """Last-in first-out stack."""

    def __init__(self) -> None:
        self._items: List[Any] = []

    def push(self, item: Any) -> None:
        """Put ``item`` on top."""
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if not self._items:
            raise StackEmptyError("pop from an empty stack")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise StackEmptyError("top of an empty stack")
        return self._items[-1]

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from top to bottom."""
        return iter(self._items[::-1])

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"