import io

import pytest

from algolab.nqueen import format_board, is_safe, main, solve_n_queens


def _queens(board):
    return [(r, c) for r, row in enumerate(board) for c, cell in enumerate(row) if cell]


@pytest.mark.parametrize("n", [1, 4, 5, 6, 7, 8])
def test_solution_is_valid(n):
    board = solve_n_queens(n)
    queens = _queens(board)
    assert len(queens) == n
    assert len({r for r, _ in queens}) == n
    assert len({c for _, c in queens}) == n
    assert len({r - c for r, c in queens}) == n
    assert len({r + c for r, c in queens}) == n


@pytest.mark.parametrize("n", [2, 3])
def test_no_solution(n):
    assert solve_n_queens(n) is None


def test_empty_board_is_trivially_solved():
    assert solve_n_queens(0) == []


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        solve_n_queens(-1)


def test_is_safe_on_empty_board():
    board = [[False] * 4 for _ in range(4)]
    assert all(is_safe(board, r, c) for r in range(4) for c in range(4))


def test_is_safe_detects_row_and_diagonals():
    board = [[False] * 4 for _ in range(4)]
    board[1][0] = True
    assert is_safe(board, 1, 2) is False
    assert is_safe(board, 0, 1) is False
    assert is_safe(board, 2, 1) is False
    assert is_safe(board, 3, 1) is True


def test_format_board():
    board = [[True, False], [False, False]]
    assert format_board(board) == "Q . \n. . \n"


def test_format_board_round_trip():
    board = solve_n_queens(6)
    text = format_board(board)
    parsed = [[cell == "Q" for cell in line.split()] for line in text.splitlines()]
    assert parsed == board


def test_main_small_unsolvable(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    assert main([]) == 0
    assert "No solution exists for N = 3" in capsys.readouterr().out


def test_main_prints_board(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.endswith(format_board(solve_n_queens(5)))
    assert out.count("Q") == 5