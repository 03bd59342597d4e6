from collections import Counter
from itertools import combinations

import pytest

from solvekit.arrays import (
    can_jump,
    get_sneaky_numbers,
    height_checker,
    max_sliding_window,
    next_greater_elements,
    remove_duplicates,
    third_max,
    three_sum_closest,
)


@pytest.mark.parametrize(
    "nums, target",
    [([-1, 2, 1, -4], 1), ([0, 0, 0], 1), ([1, 1, 1, 0], -100), ([4, 0, 5, -5, 3, 3, 0, -4, -5], -2)],
)
def test_three_sum_closest_is_an_optimal_triple(nums, target):
    original = list(nums)
    result = three_sum_closest(nums, target)
    sums = {sum(t) for t in combinations(nums, 3)}
    assert result in sums
    assert all(abs(target - result) <= abs(target - s) for s in sums)
    assert nums == original


def test_three_sum_closest_exact_triple():
    assert three_sum_closest([0, 0, 0], 1) == 0


def test_three_sum_closest_needs_three_numbers():
    with pytest.raises(ValueError):
        three_sum_closest([1, 2], 3)


def test_can_jump_reachable():
    assert can_jump([2, 3, 1, 1, 4])
    assert can_jump([1] * 5)
    assert can_jump([0])


def test_can_jump_blocked():
    assert not can_jump([3, 2, 1, 0, 4])
    assert not can_jump([1, 0, 5])


@pytest.mark.parametrize(
    "nums", [[1, 1, 1, 2, 2, 3], [0, 0, 1, 1, 1, 1, 2, 3, 3], [1, 2, 3], [5, 5], [7, 7, 7, 7]]
)
def test_remove_duplicates_keeps_at_most_two(nums):
    original = list(nums)
    kept = remove_duplicates(nums)
    prefix = nums[:kept]
    assert prefix == sorted(prefix)
    assert Counter(prefix) == {v: min(c, 2) for v, c in Counter(original).items()}
    assert len(nums) == len(original)


@pytest.mark.parametrize(
    "nums, k",
    [([1, 3, -1, -3, 5, 3, 6, 7], 3), ([1], 1), ([9, 8, 7, 6], 2), ([4, 4, 4], 3)],
)
def test_max_sliding_window_matches_window_maxima(nums, k):
    result = max_sliding_window(nums, k)
    assert len(result) == len(nums) - k + 1
    assert all(value == max(nums[i:i + k]) for i, value in enumerate(result))


def test_max_sliding_window_of_one_is_identity():
    assert max_sliding_window([3, -2, 8], 1) == [3, -2, 8]


def test_max_sliding_window_larger_than_input_is_empty():
    assert max_sliding_window([1, 2], 5) == []


def test_max_sliding_window_rejects_non_positive_k():
    with pytest.raises(ValueError):
        max_sliding_window([1, 2], 0)


def test_third_max_distinct():
    assert third_max([3, 2, 1]) == 1
    assert third_max([2, 2, 3, 1]) == 1


def test_third_max_falls_back_to_maximum():
    assert third_max([1, 2]) == 2
    assert third_max([7, 7, 6]) == 7


def test_third_max_handles_smallest_int():
    assert third_max([1, 2, -2**31]) == -2**31


def test_third_max_empty_raises():
    with pytest.raises(ValueError):
        third_max([])


def test_next_greater_elements_circular():
    assert next_greater_elements([1, 2, 1]) == [2, -1, 2]


def test_next_greater_elements_all_equal():
    assert next_greater_elements([5, 5, 5]) == [-1, -1, -1]


@pytest.mark.parametrize("nums", [[1, 2, 3, 4, 3], [5, 4, 3, 2, 1], [2, 7, 1, 8]])
def test_next_greater_elements_invariant(nums):
    result = next_greater_elements(nums)
    assert len(result) == len(nums)
    for i, found in enumerate(result):
        rotated = nums[i + 1:] + nums[:i]
        if found == -1:
            assert all(v <= nums[i] for v in rotated)
        else:
            assert found == next(v for v in rotated if v > nums[i])


def test_next_greater_elements_empty():
    assert next_greater_elements([]) == []


def test_height_checker_example():
    assert height_checker([1, 1, 4, 2, 1, 3]) == 3


def test_height_checker_sorted_input_has_no_mismatch():
    assert height_checker([1, 2, 3, 4, 5]) == 0


def test_get_sneaky_numbers():
    assert get_sneaky_numbers([0, 1, 1, 0]) == [0, 1]
    assert get_sneaky_numbers([0, 3, 2, 1, 3, 2]) == [2, 3]


def test_get_sneaky_numbers_none_repeated():
    assert get_sneaky_numbers([3, 1, 2]) == []