"""Saving a game state to a file and loading it back."""

from __future__ import annotations

import os
from typing import Protocol, Union, runtime_checkable

PathLike = Union[str, "os.PathLike[str]"]


@runtime_checkable
class SavedState(Protocol):
    """Anything that can be written out as text and restored from it."""

    def serialize(self) -> str:
        """The state as text."""

    def restore(self, data: str) -> None:
        """Replace the state with the one described by ``data``."""


class TextState:
    """A state that is nothing but the text it was given."""

    def __init__(self, data: str = "") -> None:
        self.data = data

    def serialize(self) -> str:
        return self.data

    def restore(self, data: str) -> None:
        self.data = data

    def __repr__(self) -> str:
        return f"TextState({self.data!r})"


def save_state(path: PathLike, state: SavedState) -> None:
    """Write ``state`` to ``path``; raises OSError if the file cannot be written."""
    text = state.serialize()
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(text)


def load_state(path: PathLike, state: SavedState) -> None:
    """Restore ``state`` from ``path``; raises OSError if the file cannot be read."""
    with open(path, encoding="utf-8", newline="") as handle:
        text = handle.read()
    state.restore(text)