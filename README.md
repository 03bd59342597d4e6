# solvekit

A small library of well-known algorithm solutions, written as plain Python
functions and classes. It has no runtime dependencies and needs Python 3.10
or later.

## Installation

```
pip install solvekit
```

## Modules

### `solvekit.linkedlist`

- `ListNode(val=0, next=None)`: a node of a singly linked list of integers.
  Iterating over a node yields the values from it to the end of the list.
- `RandomNode(val=0, next=None, random=None)`: a list node with an extra
  pointer to any node of the list.
- `build_list(values)` builds a list (or returns `None` for no values);
  `list_values(head)` returns the values as a Python list.
- `add_two_numbers(l1, l2)`: adds two numbers stored as little-endian digit
  lists and returns a new list.
- `merge_two_lists(list1, list2)`: splices two sorted lists into one,
  reusing their nodes.
- `delete_duplicates(head)`: drops repeated values from a sorted list in place.
- `copy_random_list(head)`: deep-copies a list of `RandomNode`s, including
  the `random` pointers.
- `has_cycle(head)`: tells whether following `next` revisits a node.
- `sort_list(head)`: merge sort that relinks the nodes.
- `remove_elements(head, val)`: unlinks every node holding `val`.
- `is_palindrome(head)`: tells whether the values read the same both ways.
- `delete_node(node)`: removes a node given only the node; raises
  `ValueError` for the last node of a list.

### `solvekit.arrays`

- `three_sum_closest(nums, target)`: raises `ValueError` for fewer than
  three numbers.
- `can_jump(nums)`
- `remove_duplicates(nums)`: keeps each value of a sorted list at most
  twice, in place, and returns the length of the kept prefix.
- `max_sliding_window(nums, k)`: raises `ValueError` if `k < 1`.
- `third_max(nums)`: the third largest distinct value, or the largest when
  there are fewer than three; raises `ValueError` for an empty sequence.
- `next_greater_elements(nums)`: next greater value in circular order, or -1.
- `height_checker(heights)`: positions that differ from the sorted order.
- `get_sneaky_numbers(nums)`: repeated values, in ascending order.

### `solvekit.histogram`

- `largest_rectangle_area(heights)`
- `maximal_rectangle(matrix)`: largest all-`"1"` rectangle in a matrix of
  `"0"`/`"1"` strings.

### `solvekit.grids`

- `game_of_life(board)`: advances the board one generation in place.
- `island_perimeter(grid)`
- `row_and_maximum_ones(mat)`: returns `(row_index, count)` for the first
  row with the most ones.

### `solvekit.strings`

- `zigzag_convert(s, num_rows)`: raises `ValueError` if `num_rows < 1`.
- `is_subsequence(s, t)`
- `fizz_buzz(n)`
- `num_jewels_in_stones(jewels, stones)`
- `are_occurrences_equal(s)`

### `solvekit.numeric`

- `divide(dividend, divisor)`: truncates toward zero and clamps the result
  to the 32-bit signed range; raises `ZeroDivisionError` for a zero divisor.
- `trailing_zeroes(n)`: trailing zeroes of `n!`.
- `compute_area(ax1, ay1, ax2, ay2, bx1, by1, bx2, by2)`: area covered by
  two axis-aligned rectangles together.

### `solvekit.containers`

- `MinStack(size=100000)`: a bounded stack with `push`, `pop`, `top` and
  `get_min`. Pushing onto a full stack and popping an empty one are ignored;
  `top` and `get_min` raise `IndexError` when the stack is empty. `len()`
  gives the number of elements.
- `CircularDeque(k)`: a deque holding at most `k` elements (`k` must be
  positive). `insert_front`, `insert_last`, `delete_front` and `delete_last`
  return `False` when they cannot act; `get_front` and `get_rear` raise
  `IndexError` when the deque is empty; `is_empty`, `is_full` and `len()`
  report its state.

## Examples

```python
from solvekit.linkedlist import build_list, list_values, add_two_numbers
from solvekit.arrays import max_sliding_window
from solvekit.strings import zigzag_convert
from solvekit.containers import CircularDeque

total = add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4]))
print(list_values(total))                     # [7, 0, 8]

print(max_sliding_window([1, 3, -1, -3, 5, 3, 6, 7], 3))  # [3, 3, 5, 5, 6, 7]

print(zigzag_convert("PAYPALISHIRING", 3))    # PAHNAPLSIIGYIR

dq = CircularDeque(2)
dq.insert_last(1)
dq.insert_front(2)
print(dq.is_full(), dq.get_front(), dq.get_rear())  # True 2 1
```

## What it does not do

solvekit is a library only: it installs no command-line program and reads
no input files. Every function is called from Python code.

## Running the tests

```
pip install -e ".[test]"
pytest
```