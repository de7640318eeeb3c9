"""Bounded first-in, first-out queue of integers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator


class QueueFullError(Exception):
    """Raised when adding to a queue that has reached its capacity."""


class QueueEmptyError(IndexError):
    """Raised when taking from a queue that holds nothing."""


class Queue:
    """A FIFO queue with a fixed maximum capacity."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._items: deque[int] = deque()

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def enqueue(self, element: int) -> None:
        """Append an element at the rear of the queue."""
        if self.is_full():
            raise QueueFullError(f"Queue is full. Cannot enqueue element {element}.")
        self._items.append(element)

    def dequeue(self) -> int:
        """Remove and return the element at the front of the queue."""
        if self.is_empty():
            raise QueueEmptyError("Queue is empty. Nothing to dequeue.")
        return self._items.popleft()

    def peek(self) -> int:
        """Return the front element without removing it."""
        if self.is_empty():
            raise QueueEmptyError("Queue is empty. Nothing to peek.")
        return self._items[0]

    def display(self) -> None:
        """Print the capacity, size and elements from front to rear."""
        print(f"Capacity: {self.capacity}. Size: {len(self)}.")
        for position, element in enumerate(self._items):
            print(f"{position}: {element}")