# algolab

A small collection of classic algorithms. Each one has a plain Python API and
an interactive command that prompts for its input on standard input and
prints the result.

| Command | Module | What it does |
|---|---|---|
| `algolab-bfs` | `algolab.bfs` | Shortest path in an undirected graph by breadth-first search |
| `algolab-dfs` | `algolab.dfs` | Depth-first visiting order of a directed graph |
| `algolab-chatbot` | `algolab.chatbot` | A tiny rule-based customer chat bot |
| `algolab-dijkstra` | `algolab.dijkstra` | Single-source shortest distances over an adjacency matrix |
| `algolab-kruskal` | `algolab.kruskal` | Minimum spanning tree by Kruskal's algorithm |
| `algolab-nqueen` | `algolab.nqueen` | One solution to the N-queens puzzle by backtracking |
| `algolab-prim` | `algolab.prim` | Minimum spanning tree by Prim's algorithm |
| `algolab-selection-sort` | `algolab.selection_sort` | Selection sort of a list of integers |

## Installation

```
pip install .
```

Python 3.10 or later is required; there are no runtime dependencies.

## Command-line use

Every command reads whitespace-separated integers (or, for the chat bot,
lines of text) from standard input after printing a prompt. Malformed or
missing input is reported on standard error and the command exits with
status 1.

```
$ algolab-dijkstra
Enter the number of vertices: 5
Enter the adjacency matrix (enter 0 if no edge between vertices):
0 10 0 0 5
0 0 1 0 2
0 0 0 4 0
7 0 6 0 0
0 3 9 2 0
Enter the source vertex (0 to 4): 0
```

prints a table of the distances from vertex 0 to every vertex
(0, 8, 9, 7, 5). Unreachable vertices are shown as `INF`.

Notes on the other commands:

- `algolab-bfs` asks for the number of vertices, the number of edges, the
  edges and then a start and end vertex, and prints either
  `Shortest path from 0 to 3: 0 2 3` or `No path found from ... to ...`.
- `algolab-dfs` asks for the number of edges, the directed edges and a start
  vertex, and prints the vertices in depth-first order.
- `algolab-kruskal` asks for the number of vertices and edges, then each edge
  as `source destination weight`, and prints the chosen edges and their total
  weight.
- `algolab-prim` asks for an adjacency matrix and prints the tree edges
  rooted at vertex 0; a disconnected graph is reported as an error.
- `algolab-nqueen` asks for the number of queens and prints a board with `Q`
  for queens and `.` for empty squares. For 2 or 3 queens it prints
  `No solution exists for N = 2` (or 3).
- `algolab-selection-sort` asks for a count and that many integers and prints
  them sorted.
- `algolab-chatbot` answers `hello`, `how are you?` and `bye`
  (case-insensitive, otherwise matched exactly), gives a fallback reply to
  anything else, and ends the session after `bye` or at end of input.

## Library use

```python
from algolab.bfs import UndirectedGraph, format_path
from algolab.dfs import DirectedGraph
from algolab.dijkstra import dijkstra
from algolab.kruskal import Edge, kruskal
from algolab.nqueen import solve_n_queens, format_board
from algolab.prim import prim_mst
from algolab.selection_sort import selection_sort

g = UndirectedGraph(4)
for a, b in [(0, 1), (0, 2), (1, 2), (2, 3), (3, 3)]:
    g.add_edge(a, b)
g.shortest_path(0, 3)          # [0, 2, 3]; None when there is no path
format_path(0, 3, [0, 2, 3])   # 'Shortest path from 0 to 3: 0 2 3'

d = DirectedGraph()
for a, b in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
    d.add_edge(a, b)
d.dfs(2)                       # [2, 0, 1, 3]

dijkstra([[0, 4], [0, 0]], 0)  # [0, 4]; unreachable vertices are None

edges = [Edge(0, 1, 2), Edge(1, 2, 3), Edge(0, 2, 7)]
kruskal(3, edges)              # [Edge(0, 1, 2), Edge(1, 2, 3)]

prim_mst([[0, 2], [2, 0]])     # [None, 1 -> parent 0] i.e. [None, 0]

selection_sort([64, 25, 12, 22, 11])   # [11, 12, 22, 25, 64]

print(format_board(solve_n_queens(4)))
```

Further entry points:

- `algolab.chatbot.generate_response(text)` returns the reply to one
  already-lowercased message; `algolab.chatbot.chat(lines)` yields a reply for
  each line and stops after `bye`.
- `algolab.dijkstra.format_solution(dist)` and
  `algolab.prim.format_mst(parent, graph)` render results as the commands
  print them.
- `algolab.kruskal.DisjointSet` is a union-find structure with path
  compression; `union` returns `False` when both elements were already in the
  same set.
- `algolab.nqueen.is_safe(board, row, col)` checks a square against queens in
  the columns to its left.
- `UndirectedGraph.neighbours(vertex)` lists a vertex's neighbours in the
  order their edges were added.

Vertex numbers outside a graph's range, negative sizes and non-square
matrices raise `ValueError`.

## What this package does not do

The commands take their input interactively on standard input only; they do
not read graphs from files or accept command-line options beyond `--help`.
The chat bot knows only its three fixed phrases and keeps no history.

## Running the tests

```
pip install .[test]
pytest
```