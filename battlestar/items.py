"""Items a character can carry: weapons, armour and potions."""

from __future__ import annotations

import copy
import enum
import time
from typing import Any, Optional

_PROGRAM_START = time.monotonic()


class ItemType(enum.IntEnum):
    """The kind of an item; the value is what the save format stores."""

    WEAPON = 0
    ARMOUR = 1
    POTION = 2

    @property
    def label(self) -> str:
        return _TYPE_LABELS[self]


_TYPE_LABELS = {
    ItemType.WEAPON: "WEAPON",
    ItemType.ARMOUR: "ARMOR",
    ItemType.POTION: "POTION",
}


class WeaponType(enum.IntEnum):
    """The style of a weapon; it decides the weapon's effect on speed."""

    SWORD = 0
    STAFF = 1
    BOW = 2

    @property
    def speed_effect(self) -> int:
        return _SPEED_EFFECTS[self]


_SPEED_EFFECTS = {
    WeaponType.SWORD: 0,
    WeaponType.BOW: -5,
    WeaponType.STAFF: -10,
}


def _elapsed_or(time_earned: Optional[float]) -> float:
    if time_earned is None or time_earned < 0:
        return time.monotonic() - _PROGRAM_START
    return float(time_earned)


def _split(data: str, count: int, what: str) -> list[str]:
    lines = data.split("\n")
    if len(lines) != count:
        raise ValueError(f"{what}: expected {count} lines, got {len(lines)}")
    return lines


def _to_int(text: str, what: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise ValueError(f"{what}: {text!r} is not an integer") from None


def _to_float(text: str, what: str) -> float:
    try:
        return float(text.strip())
    except ValueError:
        raise ValueError(f"{what}: {text!r} is not a number") from None


def _to_item_type(text: str) -> ItemType:
    value = _to_int(text, "item type")
    try:
        return ItemType(value)
    except ValueError:
        raise ValueError(f"unknown item type {value}") from None


def _expect_type(text: str, expected: ItemType) -> None:
    found = _to_item_type(text)
    if found is not expected:
        raise ValueError(f"expected a {expected.name} record, found {found.name}")


class Item:
    """A named thing with a kind and the time it was earned.

    Used directly it is a generic item that has no effect when used.
    """

    def __init__(
        self,
        item_type: ItemType = ItemType.WEAPON,
        name: str = "",
        description: str = "",
        time_earned: Optional[float] = None,
    ) -> None:
        self.item_type = ItemType(item_type)
        self.name = name
        self.description = description
        self.time_earned = _elapsed_or(time_earned)

    def use(self, target: Any) -> None:
        """Apply the item to a character. A generic item does nothing."""

    def clone(self) -> "Item":
        return copy.copy(self)

    def serialize(self) -> str:
        return "\n".join(
            [self.name, str(int(self.item_type)), self.description, repr(self.time_earned)]
        )

    @classmethod
    def deserialize(cls, data: str) -> "Item":
        name, type_text, description, time_text = _split(data, 4, "item")
        return Item(
            _to_item_type(type_text),
            name,
            description,
            _to_float(time_text, "time earned"),
        )

    def __str__(self) -> str:
        return (
            f"Name: {self.name}\n"
            f"Description: {self.description}\n"
            f"Type: {self.item_type.label}\n"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.item_type.name}, {self.name!r})"


class Potion(Item):
    """Restores a fixed amount of health when used."""

    def __init__(
        self,
        name: str = "Default Potion",
        description: str = "",
        recovery_amount: int = 0,
        time_earned: Optional[float] = None,
    ) -> None:
        super().__init__(ItemType.POTION, name, description, time_earned)
        self.recovery_amount = recovery_amount

    def use(self, target: Any) -> None:
        target.heal(self.recovery_amount)

    def serialize(self) -> str:
        return "\n".join(
            [
                str(int(self.item_type)),
                self.name,
                self.description,
                repr(self.time_earned),
                str(self.recovery_amount),
            ]
        )

    @classmethod
    def deserialize(cls, data: str) -> "Potion":
        type_text, name, description, time_text, amount_text = _split(data, 5, "potion")
        _expect_type(type_text, ItemType.POTION)
        return cls(
            name,
            description,
            _to_int(amount_text, "recovery amount"),
            _to_float(time_text, "time earned"),
        )

    def __str__(self) -> str:
        return super().__str__() + f"Recovery Amount: {self.recovery_amount}\n"


class Weapon(Item):
    """Deals damage; its type sets how much it slows the wielder."""

    def __init__(
        self,
        name: str = "Default Weapon",
        description: str = "",
        damage: int = 0,
        weapon_type: WeaponType = WeaponType.SWORD,
        time_earned: Optional[float] = None,
    ) -> None:
        super().__init__(ItemType.WEAPON, name, description, time_earned)
        self.damage = damage
        self.weapon_type = WeaponType(weapon_type)
        self.speed_effect = self.weapon_type.speed_effect

    def use(self, target: Any) -> None:
        target.take_damage(self.damage)

    def serialize(self) -> str:
        return "\n".join(
            [
                str(int(self.item_type)),
                self.name,
                self.description,
                repr(self.time_earned),
                str(self.damage),
                str(int(self.weapon_type)),
                str(self.speed_effect),
            ]
        )

    @classmethod
    def deserialize(cls, data: str) -> "Weapon":
        (
            type_text,
            name,
            description,
            time_text,
            damage_text,
            weapon_type_text,
            speed_text,
        ) = _split(data, 7, "weapon")
        _expect_type(type_text, ItemType.WEAPON)
        weapon_type_value = _to_int(weapon_type_text, "weapon type")
        try:
            weapon_type = WeaponType(weapon_type_value)
        except ValueError:
            raise ValueError(f"unknown weapon type {weapon_type_value}") from None
        weapon = cls(
            name,
            description,
            _to_int(damage_text, "damage"),
            weapon_type,
            _to_float(time_text, "time earned"),
        )
        weapon.speed_effect = _to_int(speed_text, "speed effect")
        return weapon

    def __str__(self) -> str:
        return (
            super().__str__()
            + f"Damage: {self.damage}\n"
            + f"Weapon Type: {int(self.weapon_type)}\n"
        )


class Armour(Item):
    """Adds its stat to the wearer's defense when equipped."""

    def __init__(
        self,
        name: str = "Default Armour",
        description: str = "",
        armour_stat: int = 0,
        time_earned: Optional[float] = None,
    ) -> None:
        super().__init__(ItemType.ARMOUR, name, description, time_earned)
        self.armour_stat = armour_stat

    def use(self, target: Any) -> None:
        target.equip_armour(self)

    def serialize(self) -> str:
        return "\n".join(
            [
                str(int(self.item_type)),
                self.name,
                self.description,
                repr(self.time_earned),
                str(self.armour_stat),
            ]
        )

    @classmethod
    def deserialize(cls, data: str) -> "Armour":
        type_text, name, description, time_text, stat_text = _split(data, 5, "armour")
        _expect_type(type_text, ItemType.ARMOUR)
        return cls(
            name,
            description,
            _to_int(stat_text, "armour stat"),
            _to_float(time_text, "time earned"),
        )

    def __str__(self) -> str:
        return super().__str__() + f"Armour Stat: {self.armour_stat}\n"


_RECORD_CLASSES: dict[ItemType, type[Item]] = {
    ItemType.WEAPON: Weapon,
    ItemType.ARMOUR: Armour,
    ItemType.POTION: Potion,
}


def parse_item(data: str) -> Item:
    """Read a weapon, armour or potion record, chosen by its leading type."""
    first = data.split("\n", 1)[0]
    item_type = _to_item_type(first)
    return _RECORD_CLASSES[item_type].deserialize(data)