"""Minimum spanning trees on an adjacency matrix with Prim's algorithm."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterator, Sequence
from typing import TextIO


def prim_mst(graph: Sequence[Sequence[int]]) -> list[int | None]:
    """Return the parent of each vertex in a minimum spanning tree rooted at 0.

    ``graph[u][v]`` is the weight of edge ``u``-``v``; zero means no edge. The
    root's parent is None. A disconnected graph raises ValueError.
    """
    size = len(graph)
    for row in graph:
        if len(row) != size:
            raise ValueError(f"adjacency matrix must be square, got a row of length {len(row)}")
    if size == 0:
        return []

    parent: list[int | None] = [None] * size
    key: list[float] = [math.inf] * size
    key[0] = 0
    in_tree = [False] * size

    for _ in range(size - 1):
        remaining = [v for v in range(size) if not in_tree[v]]
        u = min(remaining, key=lambda v: key[v])
        if key[u] == math.inf:
            raise ValueError("graph is not connected")
        in_tree[u] = True
        for v, weight in enumerate(graph[u]):
            if weight and not in_tree[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight

    if any(p is None for p in parent[1:]):
        raise ValueError("graph is not connected")
    return parent


def format_mst(parent: Sequence[int | None], graph: Sequence[Sequence[int]]) -> str:
    """Render the tree edges and their weights as a table."""
    lines = ["Edge \tWeight"]
    for vertex, p in enumerate(parent):
        if p is None:
            continue
        lines.append(f"{p} - {vertex} \t{graph[vertex][p]} ")
    return "\n".join(lines) + "\n"


def _int_tokens(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def main(argv: list[str] | None = None) -> int:
    """Read an adjacency matrix and print its minimum spanning tree."""
    parser = argparse.ArgumentParser(
        description="Find a minimum spanning tree with Prim's algorithm."
    )
    parser.parse_args(argv)

    tokens = _int_tokens(sys.stdin)
    try:
        _prompt("Enter the number of vertices: ")
        size = next(tokens)
        if size < 0:
            raise ValueError(f"number of vertices must not be negative: {size}")
        print(f"Enter the adjacency matrix ({size} x {size}):")
        graph = [[next(tokens) for _ in range(size)] for _ in range(size)]
        print()
        print("Minimum Spanning Tree using Prim's Algorithm:")
        print(format_mst(prim_mst(graph), graph), end="")
    except StopIteration:
        print("error: unexpected end of input", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())