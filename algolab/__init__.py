"""Graph search, spanning trees, shortest paths, N-queens, selection sort and a small chat bot."""

__version__ = "0.1.0"