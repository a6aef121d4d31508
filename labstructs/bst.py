"""Binary search tree of integer keys with parent links."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(eq=False)
class Node:
    """A tree node; ``key`` may be overwritten when a node is deleted."""

    key: int
    left: Optional[Node] = field(default=None, repr=False)
    right: Optional[Node] = field(default=None, repr=False)
    parent: Optional[Node] = field(default=None, repr=False)


def _subtree_max(node: Node) -> Node:
    while node.right is not None:
        node = node.right
    return node


def _subtree_min(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


class BinarySearchTree:
    """Unbalanced binary search tree; equal keys go to the left subtree."""

    def __init__(self) -> None:
        self.root: Optional[Node] = None
        self._size = 0

    def insert(self, key: int) -> Node:
        """Insert ``key`` and return the new node."""
        new = Node(key)
        parent: Optional[Node] = None
        current = self.root
        while current is not None:
            parent = current
            current = current.left if key <= current.key else current.right
        new.parent = parent
        if parent is None:
            self.root = new
        elif key > parent.key:
            parent.right = new
        else:
            parent.left = new
        self._size += 1
        return new

    def search(self, key: int) -> Optional[Node]:
        """Return a node holding ``key``, or None."""
        node = self.root
        while node is not None and node.key != key:
            node = node.left if key <= node.key else node.right
        return node

    def minimum(self) -> Node:
        """Return the node with the smallest key."""
        if self.root is None:
            raise ValueError("minimum of an empty tree")
        return _subtree_min(self.root)

    def maximum(self) -> Node:
        """Return the node with the largest key."""
        if self.root is None:
            raise ValueError("maximum of an empty tree")
        return _subtree_max(self.root)

    def predecessor(self, node: Node) -> Optional[Node]:
        """Return the in-order predecessor of ``node``, or None if it has none."""
        if node.left is not None:
            return _subtree_max(node.left)
        child, ancestor = node, node.parent
        while ancestor is not None and child is ancestor.left:
            child, ancestor = ancestor, ancestor.parent
        return ancestor

    def delete(self, node: Node) -> None:
        """Remove the key held by ``node`` from the tree."""
        removed = node
        if node.left is not None and node.right is not None:
            predecessor = self.predecessor(node)
            assert predecessor is not None
            removed = predecessor
        child = removed.left if removed.left is not None else removed.right
        if child is not None:
            child.parent = removed.parent
        if removed.parent is None:
            self.root = child
        elif removed is removed.parent.left:
            removed.parent.left = child
        else:
            removed.parent.right = child
        if removed is not node:
            node.key = removed.key
        removed.left = removed.right = removed.parent = None
        self._size -= 1

    def inorder(self) -> Iterator[int]:
        """Yield the keys in ascending order."""
        stack: list[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def clear(self) -> None:
        """Remove every key."""
        self.root = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return self.inorder()

    def __repr__(self) -> str:
        return f"BinarySearchTree({list(self.inorder())!r})"