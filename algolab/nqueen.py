"""The N-queens puzzle solved by backtracking."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

Board = list[list[bool]]


def is_safe(board: Sequence[Sequence[bool]], row: int, col: int) -> bool:
    """Return True if no queen to the left of ``col`` attacks ``(row, col)``."""
    size = len(board)
    if any(board[row][c] for c in range(col)):
        return False
    upper = zip(range(row, -1, -1), range(col, -1, -1))
    if any(board[r][c] for r, c in upper):
        return False
    lower = zip(range(row, size), range(col, -1, -1))
    return not any(board[r][c] for r, c in lower)


def _place(board: Board, col: int) -> bool:
    size = len(board)
    if col >= size:
        return True
    for row in range(size):
        if is_safe(board, row, col):
            board[row][col] = True
            if _place(board, col + 1):
                return True
            board[row][col] = False
    return False


def solve_n_queens(n: int) -> Board | None:
    """Return an ``n`` by ``n`` board with ``n`` non-attacking queens, or None."""
    if n < 0:
        raise ValueError(f"board size must not be negative: {n}")
    board = [[False] * n for _ in range(n)]
    return board if _place(board, 0) else None


def format_board(board: Sequence[Sequence[bool]]) -> str:
    """Render a board with ``Q`` for queens and ``.`` for empty squares."""
    return "".join(
        "".join("Q " if cell else ". " for cell in row) + "\n" for row in board
    )


def main(argv: list[str] | None = None) -> int:
    """Read the number of queens from standard input and print a solution."""
    parser = argparse.ArgumentParser(description="Solve the N-queens puzzle.")
    parser.parse_args(argv)

    print("Enter the number of queens: ", end="", flush=True)
    tokens = sys.stdin.read().split()
    if not tokens:
        print("error: unexpected end of input", file=sys.stderr)
        return 1
    try:
        n = int(tokens[0])
        if n in (2, 3):
            print(f"No solution exists for N = {n}")
            return 0
        board = solve_n_queens(n)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if board is None:
        print("Solution does not exist")
    else:
        print(format_board(board), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())