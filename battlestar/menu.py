"""The main menu: choosing between a new or saved game and the difficulty."""

from __future__ import annotations

import sys
from typing import Callable, Optional, TextIO

from battlestar.difficulty import Level

_GAME_OPTIONS = {"new game": "New Game", "load game": "Load Game"}


def _read_stdin_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError("no more input")
    return line.rstrip("\n")


class MainMenu:
    """Menu text and choices, reading answers from ``read_line``."""

    def __init__(
        self,
        read_line: Optional[Callable[[], str]] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        self._read_line = read_line or _read_stdin_line
        self._out = out
        self.difficulty = Level.ELITE.value

    def _write(self, text: str) -> None:
        (self._out or sys.stdout).write(text)

    def display(self) -> None:
        self._write(
            "\n\n\n====== Main Menu ======\n"
            "1. Start Game\n"
            "2. Settings\n"
            "3. Exit\n\n"
        )

    def set_difficulty(self, name: str) -> bool:
        """Choose a difficulty by name, ignoring case; False if it is unknown."""
        try:
            level = Level.parse(self.normalize(name))
        except ValueError:
            self._write("\nInvalid Difficulty Level. Please try again.\n")
            return False
        self.difficulty = level.value
        self._write(f"\nDifficulty set to {self.difficulty}! You've got this!\n\n")
        return True

    def settings(self) -> None:
        """Ask for a new difficulty and apply it."""
        self._write("\nChoose a New Difficulty (Rookie, Elite, Battlestar): ")
        words = self._read_line().split()
        if not self.set_difficulty(words[0] if words else ""):
            self._write("Please try again.\n")

    def select_game_option(self) -> str:
        """Ask for "new game" or "load game"; an empty string if neither was given."""
        self._write("Select an option (New Game, Load Game): ")
        option = self.normalize(self._read_line())
        if option not in _GAME_OPTIONS:
            self._write("\nInvalid game option. Returning to Main Menu...\n")
            return ""
        return option

    @staticmethod
    def normalize(text: str) -> str:
        return text.lower()