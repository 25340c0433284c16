"""Square and rectangular matrix puzzles."""

from __future__ import annotations


def zero_rows_and_columns(matrix: list[list[int]]) -> list[list[int]]:
    """Zero, in place, every row and column that holds a zero; return the matrix."""
    if not matrix or not matrix[0]:
        return matrix
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        if i in zero_rows:
            row[:] = [0] * len(row)
        else:
            row[:] = [0 if j in zero_cols else value for j, value in enumerate(row)]
    return matrix


def spiral_matrix(n: int) -> list[int]:
    """An n-by-n grid numbered 1..n*n clockwise from the top left, flattened by rows."""
    if n < 0:
        raise ValueError("size must be non-negative")
    grid = [0] * (n * n)
    row = col = 0
    drow, dcol = 0, 1
    for value in range(1, n * n + 1):
        grid[row * n + col] = value
        nrow, ncol = row + drow, col + dcol
        if not (0 <= nrow < n and 0 <= ncol < n) or grid[nrow * n + ncol]:
            drow, dcol = dcol, -drow
            nrow, ncol = row + drow, col + dcol
        row, col = nrow, ncol
    return grid