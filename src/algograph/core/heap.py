"""
Indexed binary min-heap with decrease-key.

The heap stores ``(key, priority)`` entries in a dense array and keeps a
``positions`` index mapping every key to its current slot, which gives O(1)
lookup of a key and O(log n) ``insert``, ``delete_min`` and ``change_prio``.
Keys are dense node ids: each key is inserted at most once and extracted at
most once per run.

Ties between equal priorities are broken arbitrarily; callers must not rely
on the extraction order of equal-priority keys.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List

from .exceptions import HeapContractError

# Slot recorded for a key that has been extracted
REMOVED = -1


@dataclass
class HeapEntry:
    """Single heap slot."""

    __slots__ = ("key", "priority")

    key: int
    priority: float


def parent(i: int) -> int:
    return (i - 1) // 2


def left_child(i: int) -> int:
    return 2 * i + 1


def right_child(i: int) -> int:
    return left_child(i) + 1


class IndexedMinHeap:
    """Priority queue over node ids supporting priority changes in place."""

    def __init__(self) -> None:
        self.heap: List[HeapEntry] = []
        self._positions: Dict[int, int] = {}

    def __len__(self) -> int:
        return len(self.heap)

    def __contains__(self, key: int) -> bool:
        return self._positions.get(key, REMOVED) != REMOVED

    def __iter__(self) -> Iterator[HeapEntry]:
        return iter(self.heap)

    def is_empty(self) -> bool:
        """Return True if no live entries remain."""
        return not self.heap

    def position(self, key: int) -> int:
        """Slot currently holding ``key``, or ``REMOVED`` once extracted."""
        return self._positions[key]

    def insert(self, key: int, priority: float) -> None:
        """
        Add a key with the given priority.

        Raises:
            HeapContractError: If the key was already inserted in this run
        """
        if key in self._positions:
            raise HeapContractError(f"Key {key} already inserted")
        self.heap.append(HeapEntry(key, priority))
        self._positions[key] = len(self.heap) - 1
        self._move_up(len(self.heap) - 1)

    def peek(self) -> int:
        """Return the minimum-priority key without removing it."""
        if self.is_empty():
            raise HeapContractError("Empty heap")
        return self.heap[0].key

    def delete_min(self) -> int:
        """
        Remove and return the key with the lowest priority.

        The last entry is swapped into the root slot, the old root's key is
        marked removed, and the new root sifts down.

        Raises:
            HeapContractError: If the heap is empty
        """
        result = self.peek()
        last = self.heap.pop()
        if self.heap:
            self.heap[0] = last
            self._positions[last.key] = 0
            self._move_down(0)
        self._positions[result] = REMOVED
        return result

    def priority(self, key: int) -> float:
        """Current priority of a live key."""
        return self.heap[self._live_slot(key)].priority

    def change_prio(self, key: int, new_priority: float) -> None:
        """
        Update the priority of a live key and restore heap order.

        The entry sifts up when the priority decreased and down when it increased.

        Raises:
            HeapContractError: If the key was never inserted or already extracted
        """
        slot = self._live_slot(key)
        old_priority = self.heap[slot].priority
        self.heap[slot].priority = new_priority
        if new_priority > old_priority:
            self._move_down(slot)
        else:
            self._move_up(slot)

    def clear(self) -> None:
        """Drop every entry and forget every key."""
        self.heap.clear()
        self._positions.clear()

    def _live_slot(self, key: int) -> int:
        slot = self._positions.get(key)
        if slot is None:
            raise HeapContractError(f"Key {key} was never inserted")
        if slot == REMOVED:
            raise HeapContractError(f"Key {key} was already extracted")
        return slot

    def _swap(self, i: int, j: int) -> None:
        self.heap[i], self.heap[j] = self.heap[j], self.heap[i]
        self._positions[self.heap[i].key] = i
        self._positions[self.heap[j].key] = j

    def _min_child_of(self, i: int) -> int:
        left = left_child(i)
        right = right_child(i)
        if right < len(self.heap) and self.heap[right].priority < self.heap[left].priority:
            return right
        return left

    def _move_up(self, i: int) -> None:
        while i > 0:
            p = parent(i)
            if self.heap[i].priority >= self.heap[p].priority:
                break
            self._swap(i, p)
            i = p

    def _move_down(self, i: int) -> None:
        while True:
            child = self._min_child_of(i)
            if child >= len(self.heap) or self.heap[child].priority >= self.heap[i].priority:
                break
            self._swap(i, child)
            i = child
