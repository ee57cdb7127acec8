"""A room of the map, holding enemies and items."""

from __future__ import annotations

from typing import Optional

from battlestar.character import Character
from battlestar.items import Item, ItemType, parse_item

_ITEM_LINES = {ItemType.WEAPON: 7, ItemType.ARMOUR: 5, ItemType.POTION: 5}
_CHARACTER_HEADER_LINES = 7
_ARMOUR_LINES = 5
_WEAPON_LINES = 7


def _item_type_at(line: str) -> ItemType:
    try:
        return ItemType(int(line.strip()))
    except ValueError:
        raise ValueError(f"room: {line!r} does not start an item record") from None


def _item_end(lines: list[str], position: int) -> int:
    if lines[position] == "null":
        return position + 1
    return position + _ITEM_LINES[_item_type_at(lines[position])]


def _character_end(lines: list[str], position: int) -> int:
    position += _CHARACTER_HEADER_LINES
    position += 1 if lines[position] == "null" else _ARMOUR_LINES
    position += 1 if lines[position] == "null" else _WEAPON_LINES
    try:
        size = int(lines[position].strip())
    except ValueError:
        raise ValueError(f"room: {lines[position]!r} is not an inventory size") from None
    position += 2
    for _ in range(size):
        position = _item_end(lines, position) + 1
    if position > len(lines):
        raise IndexError(position)
    return position


class _Cursor:
    def __init__(self, data: str) -> None:
        self.lines = data.split("\n")
        self.position = 0

    def skip_blank(self) -> None:
        while self.position < len(self.lines) and not self.lines[self.position].strip():
            self.position += 1

    def count(self, what: str) -> int:
        self.skip_blank()
        if self.position >= len(self.lines):
            raise ValueError(f"room: missing {what} count")
        text = self.lines[self.position]
        self.position += 1
        try:
            value = int(text.strip())
        except ValueError:
            raise ValueError(f"room: {what} count {text!r} is not an integer") from None
        if value < 0:
            raise ValueError(f"room: negative {what} count {value}")
        return value

    def take(self, end: int) -> str:
        chunk = "\n".join(self.lines[self.position:end])
        self.position = end
        return chunk


class Room:
    """A place on the map with the enemies and items found there."""

    def __init__(self) -> None:
        self.enemies: list[Character] = []
        self.items: list[Optional[Item]] = []

    def add_enemy(self, enemy: Character) -> None:
        """Place a copy of ``enemy`` in the room."""
        self.enemies.append(enemy.copy())

    def add_item(self, item: Optional[Item]) -> None:
        self.items.append(item)

    def remove_enemies(self) -> None:
        self.enemies.clear()

    def remove_items(self) -> None:
        self.items.clear()

    def _has(self, item_type: ItemType) -> bool:
        return any(item is not None and item.item_type is item_type for item in self.items)

    def has_potions(self) -> bool:
        return self._has(ItemType.POTION)

    def has_weapons(self) -> bool:
        return self._has(ItemType.WEAPON)

    def has_armour(self) -> bool:
        return self._has(ItemType.ARMOUR)

    def experience(self) -> int:
        """The experience earned by defeating every enemy in the room."""
        return sum(enemy.experience for enemy in self.enemies)

    def serialize(self) -> str:
        enemies = "".join(f"{enemy.serialize()}\n" for enemy in self.enemies)
        items = "".join(
            f"{item.serialize() if item is not None else 'null'}\n" for item in self.items
        )
        return f"{len(self.enemies)}\n{enemies}{len(self.items)}\n{items}"

    @classmethod
    def deserialize(cls, data: str) -> "Room":
        room = cls()
        cursor = _Cursor(data)
        try:
            for _ in range(cursor.count("enemy")):
                cursor.skip_blank()
                end = _character_end(cursor.lines, cursor.position)
                room.enemies.append(Character.deserialize(cursor.take(end)))
            for _ in range(cursor.count("item")):
                cursor.skip_blank()
                if cursor.position >= len(cursor.lines):
                    raise IndexError(cursor.position)
                if cursor.lines[cursor.position] == "null":
                    cursor.position += 1
                    room.items.append(None)
                    continue
                end = _item_end(cursor.lines, cursor.position)
                if end > len(cursor.lines):
                    raise IndexError(end)
                room.items.append(parse_item(cursor.take(end)))
        except IndexError:
            raise ValueError("room: record is truncated") from None
        return room

    def __repr__(self) -> str:
        return f"Room(enemies={len(self.enemies)}, items={len(self.items)})"