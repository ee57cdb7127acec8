"""Turn-based battles between the player and the enemies of a room."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from battlestar.character import Character
from battlestar.heap import heapsort

Chooser = Callable[[Sequence[tuple[int, Character]]], int]


def _ask_player(options: Sequence[tuple[int, Character]]) -> int:
    print("Choose an enemy to attack")
    for index, fighter in options:
        print(f"{index}: {fighter.name} health {fighter.health}")
    try:
        return int(input().strip())
    except ValueError:
        return -1


class Combat:
    """A battle in which the first fighter is the player and the rest are enemies.

    ``choose`` is asked for the index of the enemy the player attacks; it is
    given the living enemies as ``(index, fighter)`` pairs and is asked again
    until it names one of them.
    """

    def __init__(
        self, fighters: Sequence[Character], choose: Optional[Chooser] = None
    ) -> None:
        self.fighters: list[Character] = list(fighters)
        self._choose = choose or _ask_player

    def start_battle(self) -> None:
        """Fight rounds in speed order until the player or every enemy falls."""
        if not self.fighters:
            raise ValueError("start_battle: there are no fighters")
        player = self.fighters[0]
        while player.is_alive and len(self.fighters) > 1:
            turn_order = list(self.fighters)
            heapsort(turn_order)
            for fighter in turn_order:
                if not player.is_alive or len(self.fighters) <= 1:
                    break
                if fighter not in self.fighters or not fighter.is_alive:
                    continue
                if fighter is player:
                    target = self.fighters[self.choose_target()]
                    player.attack(target)
                    if not target.is_alive:
                        self.fighters.remove(target)
                else:
                    fighter.attack(player)

    def choose_target(self) -> int:
        """Index of the living enemy the player picks."""
        options = [
            (index, fighter)
            for index, fighter in enumerate(self.fighters)
            if index > 0 and fighter.is_alive
        ]
        if not options:
            raise ValueError("choose_target: no enemy is left to attack")
        valid = {index for index, _ in options}
        while True:
            choice = self._choose(options)
            if choice in valid:
                return choice

    def remove_fighter(self, name: str) -> None:
        """Take every fighter with this name out of the battle."""
        self.fighters = [fighter for fighter in self.fighters if fighter.name != name]

    def enemies_remain(self) -> bool:
        return len(self.fighters) > 1

    def player_dead(self) -> bool:
        if not self.fighters:
            raise ValueError("player_dead: there are no fighters")
        return not self.fighters[0].is_alive