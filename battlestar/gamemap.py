"""The world map: a 4 by 4 grid of rooms the player walks through."""

from __future__ import annotations

import random
from typing import Callable, Optional

from battlestar.character import AttackType, Character
from battlestar.items import Armour, Item, Potion, Weapon, WeaponType
from battlestar.room import Room

GRID_WIDTH = 4
ROOM_COUNT = 16
DEFAULT_SEED = 2

_ENEMY_ROOMS = 8
_POTION_ROOMS = 8
_STRONG_POTIONS = 4
_GEAR_ROOMS = 4
_ITEM_ROOM_RANGE = range(0, 15)
_SUPER_ROOM_RANGE = range(8, 15)


def _enemy(
    name: str,
    attack_type: AttackType,
    damage: int,
    health: int,
    experience: int,
    weapon_damage: int,
) -> Character:
    enemy = Character(name)
    enemy.attack_type = attack_type
    enemy.damage = damage
    enemy.health = health
    enemy.experience = experience
    weapon = Weapon("enemyweapon", "enemyweapon", weapon_damage, WeaponType.BOW)
    if attack_type is AttackType.MELEE:
        weapon.weapon_type = WeaponType.SWORD
    enemy.equip_weapon(weapon)
    return enemy


def _super_enemy() -> Character:
    boss = Character("Super Enemy")
    boss.attack_type = AttackType.MELEE
    boss.damage = 60
    boss.health = 300
    boss.experience = 600
    boss.equip_armour(Armour("superarmour", "superarmour", 30))
    boss.equip_weapon(Weapon("enemyweapon", "enemyweapon", 60, WeaponType.SWORD))
    return boss


def _opposite(attack_type: AttackType) -> AttackType:
    return AttackType.MELEE if attack_type is AttackType.RANGED else AttackType.RANGED


class GameMap:
    """Sixteen rooms laid out in four rows of four; the player starts in room 0."""

    def __init__(self) -> None:
        self.rooms: list[Room] = [Room() for _ in range(ROOM_COUNT)]
        self.player_index = 0

    def _room(self, index: int) -> Room:
        if not 0 <= index < len(self.rooms):
            raise IndexError(f"room index {index} is out of range")
        return self.rooms[index]

    def distribute(
        self, weapon_type: WeaponType = WeaponType.SWORD, seed: Optional[int] = DEFAULT_SEED
    ) -> None:
        """Place enemies, potions, weapons and armour in the rooms.

        Eight rooms other than the first get one or two enemies, and the last
        room always holds the Super Enemy. Eight rooms get potions, four of
        them a stronger one too. Four rooms get a weapon of ``weapon_type``
        and four an armour; a super weapon and a super armour go into rooms
        8 to 14 that already hold a weapon or an armour.
        """
        if len(self.rooms) != ROOM_COUNT:
            raise ValueError(f"distribute: the map must have {ROOM_COUNT} rooms")
        rng = random.Random(seed)
        self._place_enemies(rng)
        self._place_potions(rng)
        self._place_gear(
            rng,
            lambda index: Weapon("weapon1", "weapon1", 10 + 3 * index, weapon_type),
            lambda: Weapon("super-weapon", "super-weapon", 80, weapon_type),
        )
        self._place_gear(
            rng,
            lambda index: Armour("armour1", "armour1", 5 + 2 * index),
            lambda: Armour("super-armour", "armour1", 60),
        )

    def _place_enemies(self, rng: random.Random) -> None:
        for index in rng.sample(range(1, ROOM_COUNT), _ENEMY_ROOMS):
            room = self.rooms[index]
            first_type = AttackType.RANGED if rng.randrange(2) == 0 else AttackType.MELEE
            room.add_enemy(
                _enemy("enemy1", first_type, index * 2, index * 10, index * 25, index * 4)
            )
            if rng.randrange(2) == 1:
                room.add_enemy(
                    _enemy(
                        "enemy2",
                        _opposite(first_type),
                        index * 3,
                        index * 7,
                        index * 35,
                        index * 4,
                    )
                )
        self.rooms[-1].add_enemy(_super_enemy())

    def _place_potions(self, rng: random.Random) -> None:
        chosen = rng.sample(_ITEM_ROOM_RANGE, _POTION_ROOMS)
        for index in chosen:
            self.rooms[index].add_item(Potion("potion1", "red potion", 50 + index * 10))
        for index in chosen[:_STRONG_POTIONS]:
            self.rooms[index].add_item(Potion("potion2", "blue potion", 80 + index * 20))

    def _place_gear(
        self,
        rng: random.Random,
        make: Callable[[int], Item],
        make_super: Callable[[], Item],
    ) -> None:
        while True:
            chosen = rng.sample(_ITEM_ROOM_RANGE, _GEAR_ROOMS)
            super_rooms = [index for index in chosen if index in _SUPER_ROOM_RANGE]
            if super_rooms:
                break
        for index in chosen:
            self.rooms[index].add_item(make(index))
        self.rooms[rng.choice(super_rooms)].add_item(make_super())

    def remove_enemies(self, index: int) -> None:
        self._room(index).remove_enemies()

    def remove_items(self, index: int) -> None:
        self._room(index).remove_items()

    def room_has_enemies(self, index: int) -> bool:
        return bool(self._room(index).enemies)

    def room_has_items(self, index: int) -> bool:
        return bool(self._room(index).items)

    def room_has_potions(self, index: int) -> bool:
        return self._room(index).has_potions()

    def room_has_weapons(self, index: int) -> bool:
        return self._room(index).has_weapons()

    def room_has_armour(self, index: int) -> bool:
        return self._room(index).has_armour()

    def move(self, direction: str) -> bool:
        """Step left, right, up or down; False if that leaves the grid or is unknown."""
        wanted = direction.lower()
        column = self.player_index % GRID_WIDTH
        if wanted == "left":
            if column == 0:
                return False
            self.player_index -= 1
        elif wanted == "right":
            if column == GRID_WIDTH - 1:
                return False
            self.player_index += 1
        elif wanted == "up":
            if self.player_index < GRID_WIDTH:
                return False
            self.player_index -= GRID_WIDTH
        elif wanted == "down":
            if self.player_index + GRID_WIDTH >= ROOM_COUNT:
                return False
            self.player_index += GRID_WIDTH
        else:
            return False
        return True

    def enemies_in(self, index: int) -> list[Character]:
        return list(self._room(index).enemies)

    def items_in(self, index: int) -> list[Optional[Item]]:
        return list(self._room(index).items)

    def room_experience(self, index: int) -> int:
        return self._room(index).experience()

    def __len__(self) -> int:
        return len(self.rooms)

    def serialize(self) -> str:
        rooms = "".join(f"{room.serialize()}\n" for room in self.rooms)
        return f"{len(self.rooms)}\n{rooms}"

    @classmethod
    def deserialize(cls, data: str) -> "GameMap":
        count_text, _, rest = data.partition("\n")
        try:
            count = int(count_text.strip())
        except ValueError:
            raise ValueError(f"map: room count {count_text!r} is not an integer") from None
        if count < 0:
            raise ValueError(f"map: negative room count {count}")
        rooms = []
        for _ in range(count):
            rest = rest.lstrip("\n")
            room = Room.deserialize(rest)
            text = room.serialize()
            if not rest.startswith(text):
                raise ValueError("map: room record is not well formed")
            rest = rest[len(text):]
            rooms.append(room)
        game_map = cls()
        game_map.rooms = rooms
        return game_map

    def __repr__(self) -> str:
        return f"GameMap(rooms={len(self.rooms)}, player_index={self.player_index})"