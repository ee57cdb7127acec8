"""Ordering of item stacks by name or by the time their item was earned."""

from __future__ import annotations

import enum
import functools
import math
from typing import MutableSequence, Optional, Sequence

from battlestar.items import Item
from battlestar.stack import ItemStack

_TIME_TOLERANCE = 1e-6


class CompareBy(enum.Enum):
    """Which property of an item decides its place."""

    NAME = 0
    TIME = 1


class SortOrder(enum.Enum):
    """Direction of an ordering."""

    ASCENDING = 0
    DESCENDING = 1


def _in_order(lower, upper, order: SortOrder) -> bool:
    if order is SortOrder.ASCENDING:
        return lower <= upper
    if order is SortOrder.DESCENDING:
        return lower >= upper
    raise ValueError(f"invalid sort order {order!r}")


def compare(
    lower: Optional[Item],
    upper: Optional[Item],
    compare_by: CompareBy,
    order: SortOrder,
) -> bool:
    """Whether ``lower`` may stand before ``upper`` in the given order.

    Equal keys are always in order, and times closer than a microsecond
    count as equal.
    """
    if lower is None:
        raise ValueError("compare: lower item is missing")
    if upper is None:
        raise ValueError("compare: upper item is missing")
    if compare_by is CompareBy.NAME:
        return _in_order(lower.name, upper.name, order)
    if compare_by is CompareBy.TIME:
        if math.fabs(lower.time_earned - upper.time_earned) < _TIME_TOLERANCE:
            return True
        return _in_order(lower.time_earned, upper.time_earned, order)
    raise ValueError(f"compare: invalid compare_by {compare_by!r}")


class ItemSorter:
    """Sorts a list of stacks in place by one property of their items.

    Empty slots (``None``) are moved to the end.
    """

    def __init__(self, compare_by: CompareBy) -> None:
        self.compare_by = compare_by

    def _before(self, lower: ItemStack, upper: ItemStack, order: SortOrder) -> bool:
        return compare(lower.item, upper.item, self.compare_by, order)

    def sort(self, stacks: MutableSequence[Optional[ItemStack]], order: SortOrder) -> None:
        present = [stack for stack in stacks if stack is not None]
        holes = len(stacks) - len(present)

        def ordering(a: ItemStack, b: ItemStack) -> int:
            forward = self._before(a, b, order)
            backward = self._before(b, a, order)
            if forward and backward:
                return 0
            return -1 if forward else 1

        present.sort(key=functools.cmp_to_key(ordering))
        stacks[:] = present + [None] * holes

    def is_sorted(self, stacks: Sequence[Optional[ItemStack]], order: SortOrder) -> bool:
        """Whether the stacks are in order, with no gap before a filled slot."""
        for position in range(1, len(stacks)):
            current = stacks[position]
            if current is None:
                following = position + 1
                return not (following < len(stacks) and stacks[following] is not None)
            previous = stacks[position - 1]
            if previous is None or not self._before(previous, current, order):
                return False
        return True


class InsertionSort(ItemSorter):
    """A stable insertion sort of stacks."""

    def sort(self, stacks: MutableSequence[Optional[ItemStack]], order: SortOrder) -> None:
        for position in range(1, len(stacks)):
            key = stacks[position]
            slot = position - 1
            while slot >= 0 and not self._before(stacks[slot], key, order):
                stacks[slot + 1] = stacks[slot]
                slot -= 1
            stacks[slot + 1] = key


class MergeSort(ItemSorter):
    """A stable top-down merge sort of stacks."""

    def sort(self, stacks: MutableSequence[Optional[ItemStack]], order: SortOrder) -> None:
        stacks[:] = self._sorted(list(stacks), order)

    def _sorted(
        self, stacks: list[Optional[ItemStack]], order: SortOrder
    ) -> list[Optional[ItemStack]]:
        if len(stacks) <= 1:
            return stacks
        middle = (len(stacks) + 1) // 2
        return self._merge(
            self._sorted(stacks[:middle], order),
            self._sorted(stacks[middle:], order),
            order,
        )

    def _merge(
        self,
        left: list[Optional[ItemStack]],
        right: list[Optional[ItemStack]],
        order: SortOrder,
    ) -> list[Optional[ItemStack]]:
        merged: list[Optional[ItemStack]] = []
        i = j = 0
        while i < len(left) and j < len(right):
            first, second = left[i], right[j]
            if first is None:
                merged.append(second)
                j += 1
            elif second is None or self._before(first, second, order):
                merged.append(first)
                i += 1
            else:
                merged.append(second)
                j += 1
        merged.extend(left[i:])
        merged.extend(right[j:])
        return merged