"""Breadth-first search on an undirected graph."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Sequence, Tuple

from labstructs.graph import Graph


class Color(IntEnum):
    """Visit state of a vertex."""

    WHITE = 0
    GRAY = 1
    BLACK = 2


@dataclass(frozen=True)
class BFSResult:
    """Outcome of a visit: distances, BFS-tree parents, colours, visit order."""

    source: int
    distances: Tuple[Optional[int], ...]
    parents: Tuple[Optional[int], ...]
    colors: Tuple[Color, ...]
    order: Tuple[int, ...]


def bfs(graph: Graph, source: int) -> BFSResult:
    """Visit ``graph`` breadth-first from ``source``."""
    n = graph.vertex_count
    if not 0 <= source < n:
        raise IndexError(f"invalid source vertex {source}")
    colors: List[Color] = [Color.WHITE] * n
    distances: List[Optional[int]] = [None] * n
    parents: List[Optional[int]] = [None] * n
    order: List[int] = []

    colors[source] = Color.GRAY
    distances[source] = 0
    pending = deque([source])
    while pending:
        u = pending.popleft()
        order.append(u)
        for v in graph.adjacent(u):
            if colors[v] is Color.WHITE:
                colors[v] = Color.GRAY
                parents[v] = u
                distances[v] = distances[u] + 1
                pending.append(v)
        colors[u] = Color.BLACK

    return BFSResult(
        source=source,
        distances=tuple(distances),
        parents=tuple(parents),
        colors=tuple(colors),
        order=tuple(order),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a graph from a file and print its BFS tree from vertex 0."""
    parser = argparse.ArgumentParser(
        prog="labstructs-bfs", description="Breadth-first search from vertex 0."
    )
    parser.add_argument("vertices", type=int, help="number of vertices")
    parser.add_argument("file", help="file of 'v1 v2' edge lines")
    args = parser.parse_args(argv)

    try:
        graph = Graph(args.vertices)
        with open(args.file, encoding="utf-8") as stream:
            graph.read_edges(stream)
        result = bfs(graph, 0)
    except FileNotFoundError:
        print(f"File {args.file} not found", file=sys.stderr)
        return 2
    except (ValueError, IndexError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"Number of edges: {graph.edge_count}")
    print()
    for node, parent in enumerate(result.parents):
        print(f"BFS tree: parent of node {node}: {-1 if parent is None else parent}")
    print()
    for node, distance in enumerate(result.distances):
        shown = "inf" if distance is None else distance
        print(f"Shortest distance: node {node}: {shown}")
    return 0


if __name__ == "__main__":
    sys.exit(main())