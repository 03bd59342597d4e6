"""Algorithms over two-dimensional integer grids."""

from __future__ import annotations

from collections.abc import Sequence

_NEIGHBOUR_OFFSETS = [
    (di, dj) for di in (-1, 0, 1) for dj in (-1, 0, 1) if (di, dj) != (0, 0)
]


def game_of_life(board: list[list[int]]) -> None:
    """Advance ``board`` one generation of Conway's Game of Life, in place."""
    rows = len(board)
    cols = len(board[0]) if board else 0

    def live_neighbours(i: int, j: int) -> int:
        return sum(
            board[i + di][j + dj] == 1
            for di, dj in _NEIGHBOUR_OFFSETS
            if 0 <= i + di < rows and 0 <= j + dj < cols
        )

    following = [
        [
            int(count == 3 or (cell == 1 and count == 2))
            for j, cell in enumerate(row)
            for count in (live_neighbours(i, j),)
        ]
        for i, row in enumerate(board)
    ]
    for row, new_row in zip(board, following):
        row[:] = new_row


def island_perimeter(grid: Sequence[Sequence[int]]) -> int:
    """Return the total perimeter of the land cells (value 1) in ``grid``."""
    perimeter = 0
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell != 1:
                continue
            perimeter += 4
            if i > 0 and grid[i - 1][j] == 1:
                perimeter -= 2
            if j > 0 and row[j - 1] == 1:
                perimeter -= 2
    return perimeter


def row_and_maximum_ones(mat: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Return the index of the first row with the most ones, and that count."""
    best_index, best_count = 0, 0
    for i, row in enumerate(mat):
        count = sum(1 for cell in row if cell == 1)
        if count > best_count:
            best_index, best_count = i, count
    return best_index, best_count