"""Bounded stack and deque containers."""

from __future__ import annotations

from collections import deque


class MinStack:
    """A bounded stack that reports its minimum in constant time.

    Pushing onto a full stack and popping an empty one are ignored.
    """

    def __init__(self, size: int = 100_000) -> None:
        self._capacity = size
        self._items: list[int] = []
        self._minima: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, val: int) -> None:
        """Push ``val`` unless the stack is full."""
        if len(self._items) >= self._capacity:
            return
        self._items.append(val)
        if not self._minima or val <= self._minima[-1]:
            self._minima.append(val)

    def pop(self) -> None:
        """Remove the top element, if any."""
        if not self._items:
            return
        if self._items.pop() == self._minima[-1]:
            self._minima.pop()

    def top(self) -> int:
        """Return the top element."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def get_min(self) -> int:
        """Return the smallest element currently on the stack."""
        if not self._minima:
            raise IndexError("minimum of an empty stack")
        return self._minima[-1]


class CircularDeque:
    """A double-ended queue holding at most ``k`` elements."""

    def __init__(self, k: int) -> None:
        if k < 1:
            raise ValueError("capacity must be positive")
        self._capacity = k
        self._items: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def insert_front(self, value: int) -> bool:
        """Add ``value`` at the front; False if the deque is full."""
        if self.is_full():
            return False
        self._items.appendleft(value)
        return True

    def insert_last(self, value: int) -> bool:
        """Add ``value`` at the rear; False if the deque is full."""
        if self.is_full():
            return False
        self._items.append(value)
        return True

    def delete_front(self) -> bool:
        """Remove the front element; False if the deque is empty."""
        if self.is_empty():
            return False
        self._items.popleft()
        return True

    def delete_last(self) -> bool:
        """Remove the rear element; False if the deque is empty."""
        if self.is_empty():
            return False
        self._items.pop()
        return True

    def get_front(self) -> int:
        """Return the front element."""
        if self.is_empty():
            raise IndexError("front of an empty deque")
        return self._items[0]

    def get_rear(self) -> int:
        """Return the rear element."""
        if self.is_empty():
            raise IndexError("rear of an empty deque")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Tell whether the deque holds no elements."""
        return not self._items

    def is_full(self) -> bool:
        """Tell whether the deque is at capacity."""
        return len(self._items) >= self._capacity