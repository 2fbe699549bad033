"""Depth-first traversal of a directed graph."""

from __future__ import annotations

import argparse
import sys
from collections import defaultdict
from collections.abc import Iterator
from typing import TextIO


class DirectedGraph:
    """A directed graph whose vertices are arbitrary integers."""

    def __init__(self) -> None:
        self._adjacency: defaultdict[int, list[int]] = defaultdict(list)

    def add_edge(self, v: int, w: int) -> None:
        """Add an edge from ``v`` to ``w``."""
        self._adjacency[v].append(w)

    def dfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in depth-first visiting order."""
        visited = {start}
        order = [start]
        stack = [iter(self._adjacency.get(start, ()))]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(iter(self._adjacency.get(neighbour, ())))
                    break
            else:
                stack.pop()
        return order


def _int_tokens(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def main(argv: list[str] | None = None) -> int:
    """Read a directed graph and a start vertex from standard input and print a DFS order."""
    parser = argparse.ArgumentParser(
        description="Print a depth-first traversal of a graph read from standard input."
    )
    parser.parse_args(argv)

    tokens = _int_tokens(sys.stdin)
    graph = DirectedGraph()
    try:
        _prompt("Enter the number of edges: ")
        edge_count = next(tokens)
        print("Enter edges in the format (from to):")
        for _ in range(edge_count):
            v = next(tokens)
            w = next(tokens)
            graph.add_edge(v, w)
        _prompt("Enter starting vertex for DFS: ")
        start = next(tokens)
    except StopIteration:
        print("error: unexpected end of input", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"Following is Depth First Traversal (starting from vertex {start}):")
    print(" ".join(str(v) for v in graph.dfs(start)))
    return 0


if __name__ == "__main__":
    sys.exit(main())