"""Algorithms over integer sequences."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Sequence
from itertools import pairwise


def three_sum_closest(nums: Sequence[int], target: int) -> int:
    """Return the sum of three elements that lies closest to ``target``."""
    ordered = sorted(nums)
    if len(ordered) < 3:
        raise ValueError("at least three numbers are required")
    closest = sum(ordered[:3])
    last = len(ordered) - 1
    for i, first in enumerate(ordered[:-2]):
        left, right = i + 1, last
        while left < right:
            current = first + ordered[left] + ordered[right]
            if abs(target - current) < abs(target - closest):
                closest = current
            if current < target:
                left += 1
            else:
                right -= 1
    return closest


def can_jump(nums: Sequence[int]) -> bool:
    """Tell whether the last index is reachable from the first."""
    reachable = 0
    for i, step in enumerate(nums):
        if i > reachable:
            return False
        reachable = max(reachable, i + step)
    return True


def remove_duplicates(nums: list[int]) -> int:
    """Keep each value of a sorted list at most twice, in place.

    Returns the length of the kept prefix.
    """
    if len(nums) <= 2:
        return len(nums)
    kept = 2
    for value in nums[2:]:
        if value != nums[kept - 2]:
            nums[kept] = value
            kept += 1
    return kept


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every window of ``k`` consecutive elements."""
    if k < 1:
        raise ValueError("window size must be positive")
    window: deque[int] = deque()
    maxima: list[int] = []
    for i, value in enumerate(nums):
        if window and window[0] <= i - k:
            window.popleft()
        while window and nums[window[-1]] < value:
            window.pop()
        window.append(i)
        if i >= k - 1:
            maxima.append(nums[window[0]])
    return maxima


def third_max(nums: Sequence[int]) -> int:
    """Return the third largest distinct value, or the largest if there is none."""
    if not nums:
        raise ValueError("third_max() of an empty sequence")
    top = heapq.nlargest(3, set(nums))
    return top[2] if len(top) == 3 else top[0]


def next_greater_elements(nums: Sequence[int]) -> list[int]:
    """For each element, the next greater one in circular order, else -1."""
    n = len(nums)
    result = [-1] * n
    pending: list[int] = []
    for i, value in enumerate(list(nums) * 2):
        while pending and value > nums[pending[-1]]:
            result[pending.pop()] = value
        if i < n:
            pending.append(i)
    return result


def height_checker(heights: Sequence[int]) -> int:
    """Count positions where ``heights`` differs from its sorted order."""
    return sum(actual != expected for actual, expected in zip(heights, sorted(heights)))


def get_sneaky_numbers(nums: Sequence[int]) -> list[int]:
    """Return, in ascending order, the values that repeat in ``nums``."""
    return [a for a, b in pairwise(sorted(nums)) if a == b]