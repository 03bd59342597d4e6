"""Largest rectangles in histograms and binary matrices."""

from __future__ import annotations

from collections.abc import Sequence


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle that fits under the histogram."""
    extended = [*heights, 0]
    rising: list[int] = []
    best = 0
    for i, height in enumerate(extended):
        while rising and height < extended[rising[-1]]:
            bar = extended[rising.pop()]
            width = i - rising[-1] - 1 if rising else i
            best = max(best, bar * width)
        rising.append(i)
    return best


def maximal_rectangle(matrix: Sequence[Sequence[str]]) -> int:
    """Return the area of the largest all-``"1"`` rectangle in ``matrix``."""
    if not matrix or not matrix[0]:
        return 0
    heights = [0] * len(matrix[0])
    best = 0
    for row in matrix:
        heights = [h + 1 if cell == "1" else 0 for h, cell in zip(heights, row)]
        best = max(best, largest_rectangle_area(heights))
    return best