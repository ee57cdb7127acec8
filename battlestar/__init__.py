"""A text-based dungeon role-playing game: items, inventory, characters, map and save files."""

__version__ = "1.0.0"