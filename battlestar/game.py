"""The game loop: the main menu, exploring the map and saving progress."""

from __future__ import annotations

import argparse
import enum
import sys
from typing import Callable, Optional, Sequence, TextIO

from battlestar.character import Character
from battlestar.difficulty import Difficulty
from battlestar.gamemap import GameMap
from battlestar.inventory import Inventory
from battlestar.items import ItemType, WeaponType
from battlestar.menu import MainMenu
from battlestar.persistence import load_state, save_state

DEFAULT_SAVE_FILE = "savefile.json"
_PLAYER_NAME = "Hero"
_LEVEL_UP_EXPERIENCE = 100
_LEVEL_UP_GROWTH = 1.1
_LEVEL_UP_CAPACITY = 1.25
_SECTIONS = 4

_WEAPON_CHOICES = {
    "1": WeaponType.SWORD,
    "2": WeaponType.STAFF,
    "3": WeaponType.BOW,
}

_COMMANDS_TEXT = (
    "\nWhat would you like to do?\n"
    "Save \t - Save progress\n"
    "Quit \t - Quit game\n"
    "Move \t - Move rooms\n"
    "Pickup - Pickup all items in the current room\n"
    "Equip  - Equip item\n"
    "Use \t - Use potion\n"
    "Print  - Print inventory\n"
    "Enter your choice: "
)


class GameState(enum.Enum):
    """Where the game loop currently is."""

    MAIN_MENU = "main menu"
    IN_GAME = "in game"
    GAME_OVER = "game over"


def _read_stdin_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError("no more input")
    return line.rstrip("\n")


def _frame(sections: Sequence[str]) -> str:
    lines: list[str] = []
    for section in sections:
        parts = section.split("\n")
        lines.append(str(len(parts)))
        lines.extend(parts)
    return "\n".join(lines)


def _unframe(data: str, count: int) -> list[str]:
    lines = data.split("\n")
    position = 0
    sections = []
    for _ in range(count):
        if position >= len(lines):
            raise ValueError("game: save data is missing a section")
        try:
            length = int(lines[position].strip())
        except ValueError:
            raise ValueError(
                f"game: section length {lines[position]!r} is not an integer"
            ) from None
        position += 1
        if length < 0 or position + length > len(lines):
            raise ValueError("game: save data is truncated")
        sections.append("\n".join(lines[position:position + length]))
        position += length
    if any(line.strip() for line in lines[position:]):
        raise ValueError("game: unexpected data after the last section")
    return sections


class Game:
    """The whole game: the player, the map, the difficulty and the menus."""

    def __init__(
        self,
        read_line: Optional[Callable[[], str]] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        self._read_line = read_line or _read_stdin_line
        self._out = out
        self.state = GameState.MAIN_MENU
        self.player = Character(_PLAYER_NAME)
        self.game_map = GameMap()
        self.inventory = Inventory()
        self.difficulty = Difficulty()
        self.menu = MainMenu(self._read_line, out)
        self.save_path = DEFAULT_SAVE_FILE

    def _write(self, text: str) -> None:
        (self._out or sys.stdout).write(text)

    def _read_word(self) -> str:
        words = self._read_line().split()
        return words[0] if words else ""

    def run(self) -> None:
        """Alternate between the main menu and play until the game is over."""
        try:
            while self.state is not GameState.GAME_OVER:
                if self.state is GameState.MAIN_MENU:
                    self._show_main_menu()
                else:
                    self.play()
        except EOFError:
            self.state = GameState.GAME_OVER

    def new_game(self) -> None:
        """Reset the player and build a fresh map for the chosen weapon type."""
        self._write("Starting a new game...\n")
        self.player = Character(_PLAYER_NAME)
        self.inventory = Inventory()
        self.difficulty = Difficulty()
        self.apply_difficulty()
        self._write("Choose your weapon type (1 = Sword, 2 = Staff, 3 = Bow): ")
        choice = self._read_word()
        weapon_type = _WEAPON_CHOICES.get(choice)
        if weapon_type is None:
            self._write("Invalid choice, defaulting to Sword.\n")
            weapon_type = WeaponType.SWORD
        self.game_map = GameMap()
        self.game_map.distribute(weapon_type)
        self.state = GameState.IN_GAME

    def load(self, path) -> bool:
        """Restore the game from ``path``; False if it cannot be read or parsed."""
        self._write(f"Loading game from {path}...\n")
        try:
            load_state(path, self)
        except (OSError, ValueError):
            self._write("Failed to load the game.\n")
            return False
        self.apply_difficulty()
        self.state = GameState.IN_GAME
        self._write("Game loaded successfully!\n")
        return True

    def save(self, path) -> bool:
        """Write the game to ``path``; False if the file cannot be written."""
        self._write(f"Saving game to {path}...\n")
        try:
            save_state(path, self)
        except OSError:
            self._write("Failed to save the game.\n")
            return False
        self._write("Game saved successfully!\n")
        return True

    def serialize(self) -> str:
        return _frame(
            [
                self.player.serialize(),
                self.difficulty.serialize(),
                self.game_map.serialize(),
                self.inventory.serialize(),
            ]
        )

    def restore(self, data: str) -> None:
        """Replace the game with the one in ``data``; raises ValueError if malformed."""
        player_text, difficulty_text, map_text, inventory_text = _unframe(data, _SECTIONS)
        player = Character.deserialize(player_text)
        difficulty = Difficulty.deserialize(difficulty_text)
        game_map = GameMap.deserialize(map_text)
        inventory = Inventory.deserialize(inventory_text)
        self.player = player
        self.difficulty = difficulty
        self.game_map = game_map
        self.inventory = inventory

    def apply_difficulty(self) -> None:
        """Scale the player's damage and health by the difficulty's modifiers."""
        self.player.damage = self.player.damage * self.difficulty.attack_multiplier()
        self.player.health = self.player.health * self.difficulty.health_modifier()

    def _show_main_menu(self) -> None:
        self.menu.display()
        self._write("Enter your choice: ")
        choice = self._read_word()
        if choice == "1":
            option = self.menu.select_game_option()
            if option == "new game":
                self.new_game()
            elif option == "load game":
                self._write("Enter the save file name: ")
                path = self._read_word()
                if not self.load(path):
                    self._write("Failed to load the game. Returning to Main Menu...\n")
        elif choice == "2":
            self.menu.settings()
        elif choice == "3":
            self.state = GameState.GAME_OVER
        else:
            self._write("Invalid choice. Please try again.\n")

    def play(self) -> None:
        """Read commands until the player saves to the menu or quits."""
        self._write("\nWelcome to the game! Explore, battle, and survive.\n")
        while True:
            self._write(_COMMANDS_TEXT)
            command = self._read_word().lower()
            if command == "save":
                if self._save_menu():
                    return
            elif command == "quit":
                self._write("Exiting the game. Goodbye!\n")
                self.state = GameState.GAME_OVER
                return
            elif command == "move":
                self._move()
            elif command == "pickup":
                self._pick_up()
            elif command == "equip":
                self._equip()
            elif command == "use":
                self._use_potion()
            elif command == "print":
                self._write(f"Inventory for {self.player.name}\n")
                self._write(self.player.inventory_text())
                self._write("\n")
            else:
                self._write("Invalid command. Try again.\n")

    def _save_menu(self) -> bool:
        while True:
            self._write(
                "\nPress 1 to Save and Continue or Press 2 to Save and Return "
                "to the Main Menu: "
            )
            choice = self._read_word()
            if choice == "1":
                self.save(self.save_path)
                self._write("Game saved! Continuing...\n")
                return False
            if choice == "2":
                self.save(self.save_path)
                self._write("Game saved! Returning to the Main Menu...\n")
                self.state = GameState.MAIN_MENU
                return True
            self._write("Invalid choice! Please enter 1 or 2.\n")

    def _move(self) -> None:
        self._write("Enter a direction (up, down, left, right): ")
        if not self.game_map.move(self._read_word()):
            self._write("Invalid direction. Try again.\n")
            return
        self._write("Moved to a new room.\n")
        room = self.game_map.player_index
        if not self.game_map.room_has_enemies(room):
            return
        self._write("Enemies encountered! Prepare for battle.\n")
        self.player.experience += self.game_map.room_experience(room)
        self.game_map.remove_enemies(room)
        while self.player.experience > _LEVEL_UP_EXPERIENCE:
            self.player.health = self.player.health * _LEVEL_UP_GROWTH
            self.player.damage = self.player.damage * _LEVEL_UP_GROWTH
            self.player.increase_storage_capacity_by_percent(_LEVEL_UP_CAPACITY)
            self.player.experience -= _LEVEL_UP_EXPERIENCE
        self._write("Congratulations! You won the battle!\n")

    def _pick_up(self) -> None:
        room = self.game_map.player_index
        items = [item for item in self.game_map.items_in(room) if item is not None]
        if not items:
            self._write(
                "This room has no items. Venture into the unknown to find some......\n"
            )
            return
        for item in items:
            self._write(f"Picked up {item.name}!\n")
            self.player.pick_up(item)
        self.game_map.remove_items(room)

    def _equip(self) -> None:
        self._write("Which item would you like to equip?\n")
        self._write(self.player.weapons_text())
        self._write(self.player.armour_text())
        self._write("Enter name of weapon/armour (exact name): \n")
        name = self._read_line().strip()
        equipped = False
        for item_type in (ItemType.WEAPON, ItemType.ARMOUR):
            try:
                if self.player.use_item(name, item_type):
                    equipped = True
                    break
            except ValueError as error:
                self._write(f"{error}\n")
                return
        if not equipped:
            self._write(
                "No weapon nor armour with this name exists in your inventory. "
                "Please try again.\n"
            )

    def _use_potion(self) -> None:
        self._write("Which potion would you like to use?\n")
        self._write(self.player.potions_text())
        self._write("Enter name of potion (exact name): \n")
        name = self._read_line().strip()
        if not self.player.use_item(name, ItemType.POTION):
            self._write("Item is either not a potion or does not exist. Please try again.\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="battlestar", description="A text role-playing game on a 4 by 4 map."
    )
    parser.parse_args(argv)
    Game().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())