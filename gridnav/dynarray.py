"""Growable array of integers with classic sorting and searching routines."""

from __future__ import annotations

import sys
from collections.abc import Iterator


class DynamicArray:
    """An array that doubles its capacity whenever it runs out of room."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"DynamicArray({self._items!r}, capacity={self.capacity})"

    def __str__(self) -> str:
        return "[" + ", ".join(str(value) for value in self._items) + "]"

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range for array of size {len(self)}")

    def __getitem__(self, index: int) -> int:
        self._check(index)
        return self._items[index]

    def __setitem__(self, index: int, value: int) -> None:
        self._check(index)
        self._items[index] = value

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def is_sorted(self) -> bool:
        """True when every element is no greater than the one after it."""
        items = self._items
        return all(a <= b for a, b in zip(items, items[1:]))

    def _grow(self) -> None:
        self.capacity = max(1, self.capacity * 2)

    def insertion_sort(self) -> None:
        items = self._items
        for i in range(1, len(items)):
            current = items[i]
            j = i - 1
            while j >= 0 and items[j] > current:
                items[j + 1] = items[j]
                j -= 1
            items[j + 1] = current

    def selection_sort(self) -> None:
        items = self._items
        for start in range(len(items)):
            smallest = min(range(start, len(items)), key=items.__getitem__)
            items[start], items[smallest] = items[smallest], items[start]

    def bubble_sort(self) -> None:
        items = self._items
        for end in range(len(items) - 1, 0, -1):
            swapped = False
            for j in range(end):
                if items[j] > items[j + 1]:
                    items[j], items[j + 1] = items[j + 1], items[j]
                    swapped = True
            if not swapped:
                return

    def _partition(self, low: int, high: int) -> int:
        items = self._items
        mid = low + (high - low) // 2
        items[high], items[mid] = items[mid], items[high]
        pivot = items[high]
        i = low - 1
        for j in range(low, high):
            if items[j] <= pivot:
                i += 1
                items[i], items[j] = items[j], items[i]
        items[i + 1], items[high] = items[high], items[i + 1]
        return i + 1

    def quick_sort(self) -> None:
        pending = [(0, len(self._items) - 1)]
        while pending:
            low, high = pending.pop()
            if low < high:
                split = self._partition(low, high)
                pending.append((low, split - 1))
                pending.append((split + 1, high))

    def merge_sort(self) -> None:
        self._items = _merge_sorted(self._items)

    def search(self, element: int) -> int:
        """Return the index of the first occurrence of element, or -1."""
        for index, value in enumerate(self._items):
            if value == element:
                return index
        return -1

    def binary_search(self, element: int) -> int:
        """Return an index holding element in a sorted array, or -1."""
        items = self._items
        left, right = 0, len(items) - 1
        while left <= right:
            mid = left + (right - left) // 2
            if items[mid] == element:
                return mid
            if items[mid] > element:
                right = mid - 1
            else:
                left = mid + 1
        return -1

    def min(self) -> int:
        if not self._items:
            raise ValueError("min() of an empty array")
        return min(self._items)

    def max(self) -> int:
        if not self._items:
            raise ValueError("max() of an empty array")
        return max(self._items)

    def insert(self, element: int, index: int) -> None:
        """Insert element before index; an index past the end appends."""
        if index < 0:
            raise IndexError(f"index {index} must not be negative")
        if self.is_full():
            self._grow()
        self._items.insert(min(index, len(self._items)), element)

    def push_back(self, element: int) -> None:
        self.insert(element, len(self._items))

    def push_front(self, element: int) -> None:
        self.insert(element, 0)

    def remove(self, index: int) -> int:
        """Remove and return the element at index."""
        self._check(index)
        return self._items.pop(index)

    def pop_back(self) -> int:
        if not self._items:
            raise IndexError("pop from an empty array")
        return self._items.pop()

    def pop_front(self) -> int:
        return self.remove(0)

    def display(self) -> str:
        """Write the array as a bracketed list to stdout and return that line."""
        line = str(self) + "\n"
        sys.stdout.write(line)
        return line


def _merge_sorted(values: list[int]) -> list[int]:
    if len(values) < 2:
        return list(values)
    mid = (len(values) + 1) // 2
    left = _merge_sorted(values[:mid])
    right = _merge_sorted(values[mid:])
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged