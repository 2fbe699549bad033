"""Minimum spanning trees with Kruskal's algorithm."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge."""

    src: int
    dest: int
    weight: int


class DisjointSet:
    """Union-find over the elements ``0 .. size - 1`` with path compression."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative: {size}")
        self._parent = list(range(size))

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, node: int) -> int:
        """Return the representative of the set holding ``node``."""
        if not 0 <= node < len(self._parent):
            raise ValueError(f"element {node} is outside the range 0..{len(self._parent) - 1}")
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            next_node = self._parent[node]
            self._parent[node] = root
            node = next_node
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; return False if they were already one."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        self._parent[root_b] = root_a
        return True


def kruskal(num_vertices: int, edges: Iterable[Edge]) -> list[Edge]:
    """Return the edges of a minimum spanning forest, in the order they were chosen."""
    components = DisjointSet(num_vertices)
    chosen = []
    for edge in sorted(edges, key=lambda e: e.weight):
        if components.union(edge.src, edge.dest):
            chosen.append(edge)
    return chosen


def _int_tokens(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def main(argv: list[str] | None = None) -> int:
    """Read a weighted edge list and print its minimum spanning tree."""
    parser = argparse.ArgumentParser(
        description="Find a minimum spanning tree with Kruskal's algorithm."
    )
    parser.parse_args(argv)

    tokens = _int_tokens(sys.stdin)
    try:
        _prompt("Enter number of vertices and edges: ")
        num_vertices = next(tokens)
        edge_count = next(tokens)
        print("Enter each edge (source destination weight):")
        edges = [Edge(next(tokens), next(tokens), next(tokens)) for _ in range(edge_count)]
        tree = kruskal(num_vertices, edges)
    except StopIteration:
        print("error: unexpected end of input", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print()
    print("Edges in the Minimum Spanning Tree:")
    for edge in tree:
        print(f"{edge.src} - {edge.dest}  (weight {edge.weight})")
    print(f"Total weight of MST: {sum(edge.weight for edge in tree)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())