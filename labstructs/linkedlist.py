"""Singly linked list of keyed items with insertion at the head."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Union

Key = Union[int, str]

KEY_MAX_LENGTH = 15
"""Longest string key accepted; string keys live in a 16-byte field."""


@dataclass(frozen=True)
class Item:
    """A record identified by ``key``, with optional satellite data."""

    key: Key
    value: int = 0
    ident: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.key, str) and len(self.key) > KEY_MAX_LENGTH:
            raise ValueError(
                f"string key longer than {KEY_MAX_LENGTH} characters: {self.key!r}"
            )
        if self.ident < 0:
            raise ValueError(f"ident must be non-negative, got {self.ident}")

    def __str__(self) -> str:
        return f"Item(key={self.key}, value={self.value}, ident={self.ident})"


class _Node:
    __slots__ = ("item", "next")

    def __init__(self, item: Item, next_node: Optional[_Node]) -> None:
        self.item = item
        self.next = next_node


class LinkedList:
    """Singly linked list; new items go in front, lookups match on key."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._size = 0

    def insert(self, item: Item) -> None:
        """Insert ``item`` at the head of the list."""
        self._head = _Node(item, self._head)
        self._size += 1

    def search(self, key: Key) -> Optional[Item]:
        """Return the first item whose key equals ``key``, or None."""
        return next((item for item in self if item.key == key), None)

    def delete(self, key: Key) -> Item:
        """Remove and return the first item with ``key``; KeyError if absent."""
        previous: Optional[_Node] = None
        node = self._head
        while node is not None:
            if node.item.key == key:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                self._size -= 1
                return node.item
            previous, node = node, node.next
        raise KeyError(key)

    def clear(self) -> None:
        """Remove every item."""
        self._head = None
        self._size = 0

    def __iter__(self) -> Iterator[Item]:
        node = self._head
        while node is not None:
            yield node.item
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return any(item.key == key for item in self)

    def __repr__(self) -> str:
        return f"LinkedList([{', '.join(repr(item) for item in self)}])"