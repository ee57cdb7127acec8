"""Difficulty levels and the modifiers they apply to the player."""

from __future__ import annotations

import enum


class Level(enum.Enum):
    """A difficulty level; the value is its saved name."""

    ROOKIE = "Rookie"
    ELITE = "Elite"
    BATTLESTAR = "Battlestar"

    @classmethod
    def parse(cls, text: str) -> "Level":
        wanted = text.lower()
        for level in cls:
            if level.value.lower() == wanted:
                return level
        raise ValueError(f"Invalid difficulty level: {text}")


_ATTACK_MULTIPLIERS = {
    Level.ROOKIE: 1.5,
    Level.ELITE: 1.0,
    Level.BATTLESTAR: 0.8,
}

_HEALTH_MODIFIERS = {
    Level.ROOKIE: 1.2,
    Level.ELITE: 1.0,
    Level.BATTLESTAR: 0.8,
}


class Difficulty:
    """The chosen difficulty; Elite unless set otherwise."""

    def __init__(self) -> None:
        self.level = Level.ELITE

    def set(self, name: str) -> None:
        """Choose a level by name, ignoring case."""
        self.level = Level.parse(name)

    def attack_multiplier(self) -> float:
        return _ATTACK_MULTIPLIERS[self.level]

    def health_modifier(self) -> float:
        return _HEALTH_MODIFIERS[self.level]

    def serialize(self) -> str:
        return self.level.value

    @classmethod
    def deserialize(cls, data: str) -> "Difficulty":
        difficulty = cls()
        difficulty.set(data)
        return difficulty

    def __repr__(self) -> str:
        return f"Difficulty({self.level.value})"