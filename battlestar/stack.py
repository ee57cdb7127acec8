"""A quantity of one item held in an inventory slot."""

from __future__ import annotations

from typing import Optional

from battlestar.items import Armour, Item, Potion, Weapon, parse_item


class ItemStack:
    """An item together with how many of it are held."""

    def __init__(self, item: Optional[Item], quantity: int = 1) -> None:
        if quantity <= 0:
            raise ValueError(f"amount {quantity} is invalid!")
        self.item = item
        self.quantity = quantity

    def increase(self, amount: int) -> None:
        self.quantity += amount

    def decrease(self, amount: int) -> None:
        if amount > self.quantity:
            raise ValueError("decrease: amount larger than quantity!")
        if amount < 0:
            raise ValueError("decrease: amount negative!")
        self.quantity -= amount

    def matches(self, other: Item) -> bool:
        """Whether ``other`` is the same kind of item as the one held."""
        held = self.item
        if held is None:
            return False
        if held.name != other.name or held.item_type != other.item_type:
            return False
        if isinstance(held, Weapon) and isinstance(other, Weapon):
            return held.damage == other.damage
        if isinstance(held, Armour) and isinstance(other, Armour):
            return held.armour_stat == other.armour_stat
        if isinstance(held, Potion) and isinstance(other, Potion):
            return held.recovery_amount == other.recovery_amount
        return False

    def clone(self) -> "ItemStack":
        item = self.item.clone() if self.item is not None else None
        return ItemStack(item, self.quantity)

    def serialize(self) -> str:
        item_text = self.item.serialize() if self.item is not None else "null"
        return f"{item_text}\n{self.quantity}"

    @classmethod
    def deserialize(cls, data: str) -> "ItemStack":
        item_text, separator, quantity_text = data.rpartition("\n")
        if not separator:
            raise ValueError("item stack: missing quantity line")
        try:
            quantity = int(quantity_text.strip())
        except ValueError:
            raise ValueError(f"item stack: {quantity_text!r} is not a quantity") from None
        item = None if item_text == "null" else parse_item(item_text)
        return cls(item, quantity)

    def __str__(self) -> str:
        if self.item is None:
            return ""
        return f"{self.item}Quantity: {self.quantity}\n"

    def __repr__(self) -> str:
        return f"ItemStack({self.item!r}, {self.quantity})"