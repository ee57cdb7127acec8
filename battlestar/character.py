"""Characters: the player and the enemies, with their gear and storage."""

from __future__ import annotations

import enum
from typing import Optional, Union

from battlestar.inventory import Inventory
from battlestar.items import Armour, Item, ItemType, Potion, Weapon, WeaponType


class AttackType(enum.IntEnum):
    """How a character fights; it limits the weapons it may wield."""

    RANGED = 0
    MELEE = 1

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def parse(cls, text: str) -> "AttackType":
        wanted = text.strip()
        for member in cls:
            if member.label == wanted:
                return member
        raise ValueError(f"unknown attack type {text!r}")


_WIELDABLE = {
    AttackType.MELEE: frozenset({WeaponType.SWORD}),
    AttackType.RANGED: frozenset({WeaponType.BOW, WeaponType.STAFF}),
}

_ARMOUR_LINES = 5
_WEAPON_LINES = 7
_HEADER_LINES = 7


def _to_int(text: str, what: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise ValueError(f"character: {what} {text!r} is not an integer") from None


def _read_record(lines: list[str], position: int, kind: type[Item], count: int):
    if position >= len(lines):
        raise ValueError(f"character: missing {kind.__name__.lower()} record")
    if lines[position] == "null":
        return None, position + 1
    chunk = lines[position:position + count]
    if len(chunk) < count:
        raise ValueError(f"character: truncated {kind.__name__.lower()} record")
    return kind.deserialize("\n".join(chunk)), position + count


class Character:
    """A fighter with health, speed, defense, equipped gear and an inventory."""

    def __init__(self, name: str = "Warrior") -> None:
        self.name = name
        self.storage = Inventory()
        self.armour: Optional[Armour] = None
        self.weapon: Optional[Weapon] = None
        self._health = 100
        self._dead = False
        self.defense = 0
        self.base_speed = 20
        self.speed = 20
        self._damage = 0
        self.attack_type = AttackType.RANGED
        self.experience = 0

    @property
    def health(self) -> int:
        return self._health

    @health.setter
    def health(self, value: float) -> None:
        self._health = int(value)
        self._dead = self._health <= 0

    @property
    def damage(self) -> int:
        return self._damage

    @damage.setter
    def damage(self, value: float) -> None:
        self._damage = int(value)

    @property
    def is_alive(self) -> bool:
        return not self._dead

    def copy(self) -> "Character":
        """An independent copy with its own inventory and gear."""
        twin = Character(self.name)
        twin.storage = self.storage.copy()
        twin.weapon = self.weapon.clone() if self.weapon is not None else None
        twin.armour = self.armour.clone() if self.armour is not None else None
        twin.attack_type = self.attack_type
        twin.damage = self.damage
        twin.health = self.health
        twin.defense = self.defense
        twin.base_speed = self.base_speed
        twin.speed = self.speed
        twin.experience = self.experience
        return twin

    def equip_armour(self, armour: Optional[Armour]) -> None:
        """Wear ``armour``; the armour worn before goes into storage."""
        self.unequip_armour()
        if armour is None:
            return
        if self.storage.find(armour) is not None:
            self.storage.remove(armour)
        self.armour = armour.clone()
        self.defense += self.armour.armour_stat

    def unequip_armour(self) -> None:
        if self.armour is not None:
            self.defense -= self.armour.armour_stat
            self.storage.add(self.armour.clone())
            self.armour = None

    def equip_weapon(self, weapon: Optional[Weapon]) -> None:
        """Wield ``weapon``; the weapon held before goes into storage.

        Equipping nothing drops the current weapon.
        """
        if weapon is None:
            self.reset_speed()
            self.weapon = None
            return
        if self.weapon is not None:
            self.storage.add(self.weapon.clone())
            self.reset_speed()
        if self.storage.find(weapon) is not None:
            self.storage.remove(weapon)
        self.weapon = weapon
        self.modify_speed(weapon.speed_effect)

    def unequip_weapon(self) -> None:
        if self.weapon is not None:
            self.reset_speed()
            self.storage.add(self.weapon.clone())
            self.weapon = None

    def change_weapon(self, index: int) -> None:
        """Wield the weapon kept at ``index`` in storage, if there is one."""
        if not 0 <= index < len(self.storage):
            return
        item = self.storage.get(index)
        if item.item_type is not ItemType.WEAPON or not isinstance(item, Weapon):
            raise ValueError(f"change_weapon: item at index {index} is not a weapon!")
        self.equip_weapon(item)

    def pick_up(self, item: Optional[Item]) -> bool:
        """Store ``item`` unless storage is full; report whether it was taken."""
        if item is None or self.storage.is_full():
            return False
        self.storage.add(item)
        return True

    def _locate(self, key: Union[str, int], item_type: Optional[ItemType]) -> Optional[int]:
        if isinstance(key, int):
            if not 0 <= key < len(self.storage):
                return None
            if item_type is not None and self.storage.get(key).item_type is not item_type:
                return None
            return key
        return self.storage.find_named(key, item_type)

    def _check_wieldable(self, weapon: Weapon) -> None:
        if weapon.weapon_type not in _WIELDABLE[self.attack_type]:
            raise ValueError("Inventory contains invalid weapon type!")

    def use_item(self, key: Union[str, int], item_type: Optional[ItemType] = None) -> bool:
        """Use a stored item found by name or by index.

        Weapons and armour are equipped, potions are drunk. Returns False
        when no such item is stored.
        """
        index = self._locate(key, item_type)
        if index is None:
            return False
        item = self.storage.get(index).clone()
        if isinstance(item, Weapon):
            self._check_wieldable(item)
            self.equip_weapon(item)
        elif isinstance(item, Potion):
            item.use(self)
            self.storage.remove(item)
        elif isinstance(item, Armour):
            self.equip_armour(item)
        else:
            raise ValueError("Item had improper type!")
        return True

    def throw_away(self, key: Union[str, int], item_type: Optional[ItemType] = None) -> bool:
        """Discard one stored item found by name or by index."""
        index = self._locate(key, item_type)
        if index is None:
            return False
        if isinstance(key, int):
            self.storage.remove(self.storage.get(index))
        else:
            self.storage.remove_named(key, item_type)
        return True

    def attack(self, target: "Character") -> None:
        """Strike ``target`` with the weapon, adding this character's damage."""
        if self.weapon is None:
            target.take_damage(self.damage)
            return
        self.weapon.damage += self.damage
        try:
            self.weapon.use(target)
        finally:
            self.weapon.damage -= self.damage

    def take_damage(self, amount: int) -> None:
        self.health = self._health - amount

    def heal(self, amount: int) -> None:
        self._health += amount

    def modify_speed(self, delta: int) -> None:
        self.speed += delta

    def reset_speed(self) -> None:
        self.speed = self.base_speed

    def inventory_text(self) -> str:
        return str(self.storage)

    def weapons_text(self) -> str:
        return self.storage.weapons_text()

    def potions_text(self) -> str:
        return self.storage.potions_text()

    def armour_text(self) -> str:
        return self.storage.armour_text()

    def count_named(self, name: str) -> int:
        return self.storage.count_named(name)

    def increase_storage_capacity(self, amount: int) -> None:
        self.storage.increase_capacity(amount)

    def increase_storage_capacity_by_percent(self, percent: float) -> None:
        self.storage.increase_capacity_by_percent(percent)

    def sort_alphabetically(self) -> None:
        self.storage.sort_alphabetically()

    def latest_first(self) -> None:
        self.storage.latest_first()

    def oldest_first(self) -> None:
        self.storage.oldest_first()

    def serialize(self) -> str:
        return "\n".join(
            [
                self.name,
                str(self._health),
                str(self.defense),
                str(self.base_speed),
                str(self.speed),
                "1" if self._dead else "0",
                self.attack_type.label,
                self.armour.serialize() if self.armour is not None else "null",
                self.weapon.serialize() if self.weapon is not None else "null",
                self.storage.serialize(),
            ]
        )

    @classmethod
    def deserialize(cls, data: str) -> "Character":
        lines = data.split("\n")
        if len(lines) < _HEADER_LINES + 2:
            raise ValueError("character: record is too short")
        character = cls(lines[0])
        character._health = _to_int(lines[1], "health")
        character.defense = _to_int(lines[2], "defense")
        character.base_speed = _to_int(lines[3], "base speed")
        character.speed = _to_int(lines[4], "speed")
        dead = _to_int(lines[5], "dead flag")
        if dead not in (0, 1):
            raise ValueError(f"character: dead flag must be 0 or 1, got {dead}")
        character._dead = bool(dead)
        character.attack_type = AttackType.parse(lines[6])
        position = _HEADER_LINES
        character.armour, position = _read_record(lines, position, Armour, _ARMOUR_LINES)
        character.weapon, position = _read_record(lines, position, Weapon, _WEAPON_LINES)
        character.storage = Inventory.deserialize("\n".join(lines[position:]))
        return character

    def __str__(self) -> str:
        text = (
            f"Name: {self.name}\n"
            f"Current Health: {self._health}\n"
            f"Current Speed: {self.speed}\n"
            f"Current Defense: {self.defense}\n"
        )
        if self.weapon is not None:
            text += f"Current Weapon: \n{self.weapon}"
        if self.armour is not None:
            text += f"Current Armour: \n{self.armour}"
        return text

    def __repr__(self) -> str:
        return f"Character({self.name!r}, health={self._health})"