"""Bounded binary min-heap keyed by floating-point priority."""

from __future__ import annotations

from dataclasses import dataclass

from gridnav.fifo import QueueEmptyError, QueueFullError


@dataclass
class QueueElement:
    """An item in the priority queue: an identifying index and its priority value."""

    index: int = 0
    value: float = 0.0


class PriorityQueue:
    """A min-priority queue with a fixed capacity and in-place key decrease."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._heap: list[QueueElement] = []

    def is_empty(self) -> bool:
        return not self._heap

    def is_full(self) -> bool:
        return len(self._heap) == self.capacity

    def __len__(self) -> int:
        return len(self._heap)

    def parent(self, child: int) -> int:
        return (child - 1) // 2

    def left_child(self, parent: int) -> int:
        return 2 * parent + 1

    def right_child(self, parent: int) -> int:
        return 2 * parent + 2

    def _sift_up(self, i: int) -> None:
        heap = self._heap
        while i > 0 and heap[i].value < heap[self.parent(i)].value:
            p = self.parent(i)
            heap[i], heap[p] = heap[p], heap[i]
            i = p

    def _sift_down(self, i: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            left, right = self.left_child(i), self.right_child(i)
            smallest = i
            if left < size and heap[left].value < heap[smallest].value:
                smallest = left
            if right < size and heap[right].value < heap[smallest].value:
                smallest = right
            if smallest == i:
                return
            heap[i], heap[smallest] = heap[smallest], heap[i]
            i = smallest

    def push(self, index: int, value: float) -> None:
        """Insert an element with the given priority."""
        if self.is_full():
            raise QueueFullError(
                f"Queue is full. Cannot enqueue element {index} with value {value:g}."
            )
        self._heap.append(QueueElement(index, value))
        self._sift_up(len(self._heap) - 1)

    def pop(self) -> QueueElement:
        """Remove and return the element with the smallest value."""
        if self.is_empty():
            raise QueueEmptyError("Queue is empty. Nothing to pop.")
        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return top

    def build_min_heap(self) -> None:
        """Restore the heap property over all stored elements."""
        for i in range(len(self._heap) // 2 - 1, -1, -1):
            self._sift_down(i)

    def decrease_key(self, index: int, value: float) -> None:
        """Set the value of the first element with this index and move it up the heap."""
        for position, element in enumerate(self._heap):
            if element.index == index:
                element.value = value
                self._sift_up(position)
                return
        raise KeyError(f"Element {index} could not be found.")

    def display(self) -> None:
        """Print the queue's capacity, size and heap contents."""
        print("Priority Queue")
        print(f"Capacity: {self.capacity}")
        print(f"Elements: {len(self._heap)}")
        for position, element in enumerate(self._heap):
            print(f"{position}: ({element.index}, {element.value:g})")
        print()