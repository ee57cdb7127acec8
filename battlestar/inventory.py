"""A character's storage: stacks of items with a growing capacity."""

from __future__ import annotations

from typing import Optional

from battlestar.items import Item, ItemType
from battlestar.sorting import CompareBy, MergeSort, SortOrder
from battlestar.stack import ItemStack

_END_ITEM = "|END_ITEM|"


class Inventory:
    """Ordered stacks of items.

    Matching weapons, armour and potions share a stack. Adding to a full
    inventory doubles its capacity.
    """

    def __init__(self, capacity: int = 10) -> None:
        self.capacity = capacity
        self._stacks: list[ItemStack] = []

    def add(self, item: Item, quantity: int = 1) -> None:
        """Store a copy of ``item``; a matching stack grows by one instead."""
        if item is None:
            raise ValueError("add: item is missing")
        if self.is_full():
            self.capacity *= 2
        index = self.find(item)
        if index is not None:
            self._stacks[index].increase(1)
            return
        self._stacks.append(ItemStack(item.clone(), quantity))

    def _take_one(self, index: int) -> None:
        stack = self._stacks[index]
        held = stack.item
        if held is not None and held.item_type is ItemType.POTION and stack.quantity > 1:
            stack.decrease(1)
        else:
            del self._stacks[index]

    def _require_items(self) -> None:
        if self.is_empty():
            raise IndexError("Removing from empty inventory!")

    def remove(self, item: Item) -> None:
        """Remove one of ``item``: a potion stack shrinks, anything else goes."""
        self._require_items()
        index = self.find(item)
        if index is None:
            raise ValueError("remove: item is not in inventory!")
        self._take_one(index)

    def remove_named(self, name: str, item_type: Optional[ItemType] = None) -> None:
        """Remove one of the first item with this name (and type, if given)."""
        self._require_items()
        index = self.find_named(name, item_type)
        if index is None:
            raise ValueError(f"remove: no item named {name!r} in inventory!")
        self._take_one(index)

    def find(self, item: Optional[Item]) -> Optional[int]:
        """Index of the stack holding a match for ``item``, or None."""
        if item is None:
            return None
        for index, stack in enumerate(self._stacks):
            if stack.matches(item):
                return index
        return None

    def find_named(self, name: str, item_type: Optional[ItemType] = None) -> Optional[int]:
        """Index of the first stack whose item has this name and type, or None."""
        for index, stack in enumerate(self._stacks):
            held = stack.item
            if held is None or held.name != name:
                continue
            if item_type is None or held.item_type is item_type:
                return index
        return None

    def get(self, index: int) -> Item:
        if not 0 <= index < len(self._stacks):
            raise IndexError(f"inventory index {index} is invalid")
        return self._stacks[index].item

    def is_full(self) -> bool:
        return len(self._stacks) >= self.capacity

    def is_empty(self) -> bool:
        return not self._stacks

    def __len__(self) -> int:
        return len(self._stacks)

    def count_named(self, name: str) -> int:
        return sum(
            1 for stack in self._stacks if stack.item is not None and stack.item.name == name
        )

    def increase_capacity(self, amount: int) -> None:
        self.capacity += amount

    def increase_capacity_by_percent(self, percent: float) -> None:
        """Scale the capacity by ``percent``, truncating to a whole number."""
        self.capacity = int(self.capacity * percent)

    def sort_alphabetically(self) -> None:
        MergeSort(CompareBy.NAME).sort(self._stacks, SortOrder.ASCENDING)

    def latest_first(self) -> None:
        MergeSort(CompareBy.TIME).sort(self._stacks, SortOrder.DESCENDING)

    def oldest_first(self) -> None:
        MergeSort(CompareBy.TIME).sort(self._stacks, SortOrder.ASCENDING)

    def _text_of(self, item_type: ItemType) -> str:
        return "".join(
            str(stack)
            for stack in self._stacks
            if stack.item is not None and stack.item.item_type is item_type
        )

    def weapons_text(self) -> str:
        return self._text_of(ItemType.WEAPON)

    def potions_text(self) -> str:
        return self._text_of(ItemType.POTION)

    def armour_text(self) -> str:
        return self._text_of(ItemType.ARMOUR)

    def copy(self) -> "Inventory":
        """An independent copy; stacks without an item are dropped."""
        duplicate = Inventory(self.capacity)
        duplicate._stacks = [stack.clone() for stack in self._stacks if stack.item is not None]
        return duplicate

    def serialize(self) -> str:
        records = "".join(f"{stack.serialize()}{_END_ITEM}\n" for stack in self._stacks)
        return f"{len(self._stacks)}\n{self.capacity}\n{records}"

    @classmethod
    def deserialize(cls, data: str) -> "Inventory":
        head = data.split("\n", 2)
        if len(head) < 2:
            raise ValueError("inventory: missing size or capacity")
        try:
            size = int(head[0].strip())
            capacity = int(head[1].strip())
        except ValueError:
            raise ValueError("inventory: size and capacity must be integers") from None
        if size < 0 or capacity <= 0 or size > capacity:
            raise ValueError(f"inventory: invalid size {size} for capacity {capacity}")
        body = head[2] if len(head) > 2 else ""
        stacks = [
            ItemStack.deserialize(piece.strip("\n"))
            for piece in body.split(_END_ITEM)
            if piece.strip("\n")
        ]
        if len(stacks) != size:
            raise ValueError(f"inventory: expected {size} stacks, found {len(stacks)}")
        inventory = cls(capacity)
        inventory._stacks = stacks
        return inventory

    def __str__(self) -> str:
        return "".join(f"Item {index}:\n{stack}\n" for index, stack in enumerate(self._stacks))