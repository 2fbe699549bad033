"""Shortest paths in an unweighted, undirected graph using breadth-first search."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterator
from typing import TextIO


class UndirectedGraph:
    """An undirected graph on the vertices ``0 .. num_vertices - 1``."""

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError(f"number of vertices must not be negative: {num_vertices}")
        self.num_vertices = num_vertices
        self._adjacency: list[list[int]] = [[] for _ in range(num_vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.num_vertices:
            raise ValueError(
                f"vertex {vertex} is outside the range 0..{self.num_vertices - 1}"
            )

    def neighbours(self, vertex: int) -> list[int]:
        """Return the neighbours of ``vertex`` in the order their edges were added."""
        self._check(vertex)
        return list(self._adjacency[vertex])

    def add_edge(self, src: int, dest: int) -> None:
        """Connect ``src`` and ``dest`` in both directions."""
        self._check(src)
        self._check(dest)
        self._adjacency[src].append(dest)
        self._adjacency[dest].append(src)

    def shortest_path(self, start: int, end: int) -> list[int] | None:
        """Return the vertices of a shortest path from ``start`` to ``end``, or None."""
        self._check(start)
        self._check(end)
        parent: dict[int, int | None] = {start: None}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            if current == end:
                break
            for neighbour in self._adjacency[current]:
                if neighbour not in parent:
                    parent[neighbour] = current
                    queue.append(neighbour)

        if end not in parent:
            return None

        path = []
        vertex: int | None = end
        while vertex is not None:
            path.append(vertex)
            vertex = parent[vertex]
        path.reverse()
        return path


def format_path(start: int, end: int, path: list[int] | None) -> str:
    """Describe the result of a shortest-path search as one line of text."""
    if path is None:
        return f"No path found from {start} to {end}"
    vertices = " ".join(str(v) for v in path)
    return f"Shortest path from {start} to {end}: {vertices}"


def _int_tokens(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def main(argv: list[str] | None = None) -> int:
    """Read a graph and two vertices from standard input and print a shortest path."""
    parser = argparse.ArgumentParser(
        description="Find a shortest path in an undirected graph read from standard input."
    )
    parser.parse_args(argv)

    tokens = _int_tokens(sys.stdin)
    try:
        _prompt("Enter number of vertices: ")
        graph = UndirectedGraph(next(tokens))
        _prompt("Enter number of edges: ")
        edge_count = next(tokens)
        print("Enter edges (src dest):")
        for _ in range(edge_count):
            src = next(tokens)
            dest = next(tokens)
            graph.add_edge(src, dest)
        _prompt("Enter start and end vertices to find shortest path: ")
        start = next(tokens)
        end = next(tokens)
        print(format_path(start, end, graph.shortest_path(start, end)))
    except StopIteration:
        print("error: unexpected end of input", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())