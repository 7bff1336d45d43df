"""Indexed binary min-heap with decrease-key.

Entries are (key, item) pairs. A side index maps each item to its slot in the
heap so its key can be lowered in O(log n) without scanning.
"""

from collections.abc import Hashable
from typing import Any, Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class IndexedMinHeap(Generic[T]):
    """Min-heap of items ordered by a comparable key.

    Keys must give a total order over the items stored together, so include
    a tie-break component when distinct items can share a priority.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[Any, T]] = []
        self._slot: dict[T, int] = {}

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, item: object) -> bool:
        return item in self._slot

    def key_of(self, item: T) -> Any:
        return self._heap[self._slot[item]][0]

    def peek(self) -> tuple[Any, T]:
        if not self._heap:
            raise IndexError("peek from an empty heap")
        return self._heap[0]

    def push(self, item: T, key: Any) -> None:
        """Insert a new item.

        Raises:
            KeyError: If the item is already queued
        """
        if item in self._slot:
            raise KeyError(f"{item!r} is already in the heap")
        self._heap.append((key, item))
        self._slot[item] = len(self._heap) - 1
        self._sift_up(len(self._heap) - 1)

    def decrease_key(self, item: T, key: Any) -> None:
        """Lower the key of a queued item.

        Raises:
            KeyError: If the item is not queued
            ValueError: If the new key is greater than the current one
        """
        i = self._slot[item]
        if key > self._heap[i][0]:
            raise ValueError(f"New key {key!r} is greater than current key {self._heap[i][0]!r}")
        self._heap[i] = (key, item)
        self._sift_up(i)

    def push_or_decrease(self, item: T, key: Any) -> None:
        """Insert the item, or lower its key if it is already queued."""
        if item in self._slot:
            self.decrease_key(item, key)
        else:
            self.push(item, key)

    def pop(self) -> tuple[Any, T]:
        """Remove and return the (key, item) pair with the smallest key."""
        if not self._heap:
            raise IndexError("pop from an empty heap")
        top = self._heap[0]
        last = self._heap.pop()
        del self._slot[top[1]]
        if self._heap:
            self._heap[0] = last
            self._slot[last[1]] = 0
            self._sift_down(0)
        return top

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._slot[heap[i][1]] = i
        self._slot[heap[j][1]] = j

    def _sift_up(self, i: int) -> None:
        while i > 0:
            parent = (i - 1) // 2
            if self._heap[i][0] < self._heap[parent][0]:
                self._swap(i, parent)
                i = parent
            else:
                break

    def _sift_down(self, i: int) -> None:
        n = len(self._heap)
        while True:
            left = 2 * i + 1
            right = left + 1
            smallest = i
            if left < n and self._heap[left][0] < self._heap[smallest][0]:
                smallest = left
            if right < n and self._heap[right][0] < self._heap[smallest][0]:
                smallest = right
            if smallest == i:
                return
            self._swap(i, smallest)
            i = smallest
