"""Undirected graph stored as adjacency lists."""

from __future__ import annotations

from typing import List, TextIO, Tuple


def parse_edges(text: str) -> List[Tuple[int, int]]:
    """Parse whitespace-separated vertex pairs ``v1 v2``."""
    tokens = text.split()
    if len(tokens) % 2:
        raise ValueError("edge list has an odd number of vertices")
    try:
        numbers = [int(token) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"edge list holds a non-integer vertex: {exc}") from exc
    pairs = iter(numbers)
    return list(zip(pairs, pairs))


class Graph:
    """Undirected graph on vertices ``0 .. vertices - 1``.

    Each adjacency list keeps the most recently added neighbour first.
    """

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError(f"vertex count must be non-negative, got {vertices}")
        self._adjacency: List[List[int]] = [[] for _ in range(vertices)]
        self._edges = 0

    @property
    def vertex_count(self) -> int:
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        return self._edges

    def _check(self, v: int) -> None:
        if not 0 <= v < len(self._adjacency):
            raise IndexError(f"vertex {v} does not exist")

    def add_edge(self, v1: int, v2: int) -> bool:
        """Add edge {v1, v2}; return False if it was already present."""
        self._check(v1)
        self._check(v2)
        if v2 in self._adjacency[v1]:
            return False
        self._adjacency[v1].insert(0, v2)
        self._adjacency[v2].insert(0, v1)
        self._edges += 1
        return True

    def remove_edge(self, v1: int, v2: int) -> None:
        """Remove edge {v1, v2}; KeyError if it is not present."""
        self._check(v1)
        self._check(v2)
        if v2 not in self._adjacency[v1]:
            raise KeyError((v1, v2))
        self._adjacency[v1].remove(v2)
        self._adjacency[v2].remove(v1)
        self._edges -= 1

    def adjacent(self, v: int) -> List[int]:
        """Return the neighbours of ``v``, most recently added first."""
        self._check(v)
        return list(self._adjacency[v])

    def has_edge(self, v1: int, v2: int) -> bool:
        self._check(v1)
        self._check(v2)
        return v2 in self._adjacency[v1]

    def read_edges(self, stream: TextIO) -> int:
        """Add every edge listed in ``stream``; return how many were new."""
        return sum(self.add_edge(v1, v2) for v1, v2 in parse_edges(stream.read()))

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertex_count}, edges={self._edges})"