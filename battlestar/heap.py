"""Heap ordering of fighters by their current speed."""

from __future__ import annotations

from typing import MutableSequence, Protocol


class _Fast(Protocol):
    speed: int


def heapify_up(fighters: MutableSequence[_Fast], index: int) -> None:
    """Move the fighter at ``index`` up until its parent is at least as fast."""
    while index > 0:
        parent = (index - 1) // 2
        if not fighters[index].speed > fighters[parent].speed:
            return
        fighters[index], fighters[parent] = fighters[parent], fighters[index]
        index = parent


def _sift_down(fighters: MutableSequence[_Fast], index: int, size: int) -> None:
    while True:
        left = 2 * index + 1
        if left >= size:
            return
        right = left + 1
        largest = index
        if fighters[left].speed > fighters[largest].speed:
            largest = left
        if right < size and fighters[right].speed > fighters[largest].speed:
            largest = right
        if largest == index:
            return
        fighters[index], fighters[largest] = fighters[largest], fighters[index]
        index = largest


def heapify_down(fighters: MutableSequence[_Fast], index: int) -> None:
    """Move the fighter at ``index`` down until both children are no faster."""
    _sift_down(fighters, index, len(fighters))


def heapsort(fighters: MutableSequence[_Fast]) -> None:
    """Sort fighters in place from slowest to fastest."""
    count = len(fighters)
    for index in range(count // 2 - 1, -1, -1):
        _sift_down(fighters, index, count)
    for end in range(count - 1, 0, -1):
        fighters[0], fighters[end] = fighters[end], fighters[0]
        _sift_down(fighters, 0, end)