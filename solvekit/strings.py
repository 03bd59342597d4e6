"""Algorithms over strings."""

from __future__ import annotations

from collections import Counter


def zigzag_convert(s: str, num_rows: int) -> str:
    """Write ``s`` in a zigzag over ``num_rows`` rows and read it row by row."""
    if num_rows < 1:
        raise ValueError("num_rows must be positive")
    if num_rows == 1 or len(s) <= num_rows:
        return s
    rows: list[list[str]] = [[] for _ in range(num_rows)]
    row, step = 0, -1
    for ch in s:
        rows[row].append(ch)
        if row in (0, num_rows - 1):
            step = -step
        row += step
    return "".join("".join(chars) for chars in rows)


def is_subsequence(s: str, t: str) -> bool:
    """Tell whether ``s`` can be obtained from ``t`` by deleting characters."""
    remaining = iter(t)
    return all(ch in remaining for ch in s)


def fizz_buzz(n: int) -> list[str]:
    """Return the FizzBuzz sequence for 1 to ``n``."""
    def word(i: int) -> str:
        if i % 15 == 0:
            return "FizzBuzz"
        if i % 3 == 0:
            return "Fizz"
        if i % 5 == 0:
            return "Buzz"
        return str(i)

    return [word(i) for i in range(1, n + 1)]


def num_jewels_in_stones(jewels: str, stones: str) -> int:
    """Count the stones whose type appears among ``jewels``."""
    jewel_set = set(jewels)
    return sum(stone in jewel_set for stone in stones)


def are_occurrences_equal(s: str) -> bool:
    """Tell whether every character of ``s`` occurs the same number of times."""
    return len(set(Counter(s).values())) <= 1