"""Integer arithmetic puzzles."""

from __future__ import annotations

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


def divide(dividend: int, divisor: int) -> int:
    """Divide, truncating toward zero and clamping to the 32-bit signed range."""
    if divisor == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return max(INT_MIN, min(INT_MAX, quotient))


def trailing_zeroes(n: int) -> int:
    """Return the number of trailing zeroes in ``n!``."""
    count = 0
    while n >= 5:
        n //= 5
        count += n
    return count


def compute_area(
    ax1: int, ay1: int, ax2: int, ay2: int, bx1: int, by1: int, bx2: int, by2: int
) -> int:
    """Return the area covered by two axis-aligned rectangles together."""
    area_a = (ax2 - ax1) * (ay2 - ay1)
    area_b = (bx2 - bx1) * (by2 - by1)
    overlap_width = max(0, min(ax2, bx2) - max(ax1, bx1))
    overlap_height = max(0, min(ay2, by2) - max(ay1, by1))
    return area_a + area_b - overlap_width * overlap_height