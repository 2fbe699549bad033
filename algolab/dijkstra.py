"""Single-source shortest distances on a weighted adjacency matrix (Dijkstra)."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterator, Sequence
from typing import TextIO


def _matrix_size(graph: Sequence[Sequence[int]]) -> int:
    size = len(graph)
    for row in graph:
        if len(row) != size:
            raise ValueError(f"adjacency matrix must be square, got a row of length {len(row)}")
    return size


def dijkstra(graph: Sequence[Sequence[int]], src: int) -> list[int | None]:
    """Return the shortest distance from ``src`` to every vertex.

    ``graph[u][v]`` is the weight of the edge from ``u`` to ``v``; zero means no
    edge. Vertices that cannot be reached get ``None``.
    """
    size = _matrix_size(graph)
    if not 0 <= src < size:
        raise ValueError(f"source vertex {src} is outside the range 0..{size - 1}")

    dist: list[float] = [math.inf] * size
    dist[src] = 0
    processed = [False] * size

    for _ in range(size - 1):
        # Smallest distance first; on a tie the highest-numbered vertex wins.
        u = max(
            (v for v in range(size) if not processed[v]),
            key=lambda v: (-dist[v], v),
        )
        processed[u] = True
        if dist[u] == math.inf:
            continue
        for v, weight in enumerate(graph[u]):
            if not processed[v] and weight and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight

    return [None if d == math.inf else int(d) for d in dist]


def format_solution(dist: Sequence[int | None]) -> str:
    """Render a table of distances from the source vertex."""
    lines = ["", "Vertex \tDistance from Source"]
    for vertex, distance in enumerate(dist):
        shown = "INF" if distance is None else str(distance)
        lines.append(f"\t{vertex} \t\t\t {shown}")
    return "\n".join(lines) + "\n"


def _int_tokens(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def main(argv: list[str] | None = None) -> int:
    """Read an adjacency matrix and a source vertex and print shortest distances."""
    parser = argparse.ArgumentParser(
        description="Compute shortest distances from a source vertex with Dijkstra's algorithm."
    )
    parser.parse_args(argv)

    tokens = _int_tokens(sys.stdin)
    try:
        _prompt("Enter the number of vertices: ")
        size = next(tokens)
        if size < 0:
            raise ValueError(f"number of vertices must not be negative: {size}")
        print("Enter the adjacency matrix (enter 0 if no edge between vertices):")
        graph = [[next(tokens) for _ in range(size)] for _ in range(size)]
        _prompt(f"Enter the source vertex (0 to {size - 1}): ")
        src = next(tokens)
        print(format_solution(dijkstra(graph, src)), end="")
    except StopIteration:
        print("error: unexpected end of input", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())