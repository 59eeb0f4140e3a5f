"""Backtracking puzzles: knight's tour, sudoku and the towers of Hanoi."""

from __future__ import annotations

from collections.abc import Sequence

_KNIGHT_MOVES = ((2, 1), (1, 2), (-1, 2), (-2, 1), (-2, -1), (-1, -2), (1, -2), (2, -1))
_DIGITS = "123456789"
_EMPTY = "."


def knight_tour(size: int = 8) -> list[list[int]] | None:
    """Find a knight's tour starting at the top-left corner.

    Returns a ``size`` x ``size`` board holding the move number at which each
    square is visited, or ``None`` when no complete tour exists.
    """
    if size < 1:
        raise ValueError("size must be at least 1")
    board = [[-1] * size for _ in range(size)]
    board[0][0] = 0
    total = size * size

    def extend(x: int, y: int, move: int) -> bool:
        if move == total:
            return True
        for dx, dy in _KNIGHT_MOVES:
            nx, ny = x + dx, y + dy
            if 0 <= nx < size and 0 <= ny < size and board[nx][ny] == -1:
                board[nx][ny] = move
                if extend(nx, ny, move + 1):
                    return True
                board[nx][ny] = -1
        return False

    return board if extend(0, 0, 1) else None


def _is_valid(board: list[list[str]], row: int, col: int, digit: str) -> bool:
    for i in range(9):
        if board[i][col] == digit or board[row][i] == digit:
            return False
        if board[3 * (row // 3) + i // 3][3 * (col // 3) + i % 3] == digit:
            return False
    return True


def _fill(board: list[list[str]]) -> bool:
    for row in range(9):
        for col in range(9):
            if board[row][col] != _EMPTY:
                continue
            for digit in _DIGITS:
                if _is_valid(board, row, col, digit):
                    board[row][col] = digit
                    if _fill(board):
                        return True
                    board[row][col] = _EMPTY
            return False
    return True


def solve_sudoku(board: Sequence[Sequence[str]]) -> list[list[str]]:
    """Return a solved copy of a 9 x 9 sudoku; empty cells are ``'.'``.

    Raises ``ValueError`` if the board is malformed or has no solution.
    """
    grid = [list(row) for row in board]
    if len(grid) != 9 or any(len(row) != 9 for row in grid):
        raise ValueError("sudoku board must be 9 x 9")
    if any(cell != _EMPTY and cell not in _DIGITS for row in grid for cell in row):
        raise ValueError("sudoku cells must be digits 1-9 or '.'")
    if not _fill(grid):
        raise ValueError("sudoku has no solution")
    return grid


def tower_of_hanoi(
    n: int, source: str = "A", helper: str = "B", destination: str = "C"
) -> list[tuple[str, str]]:
    """Return the moves, as (from, to) pairs, that carry ``n`` disks to ``destination``."""
    if n < 0:
        raise ValueError("number of disks must not be negative")
    if n == 0:
        return []
    if n == 1:
        return [(source, destination)]
    return (
        tower_of_hanoi(n - 1, source, destination, helper)
        + [(source, destination)]
        + tower_of_hanoi(n - 1, helper, source, destination)
    )