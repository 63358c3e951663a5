"""Creatures that populate the game field and the cells that hold them."""

from __future__ import annotations

import threading
from dataclasses import dataclass

_id_source = threading.local()


@dataclass
class Creature:
    """A creature identified by its owner's id; it is either alive or dead."""

    id: int
    color: str = ""
    is_alive: bool = False

    def kill(self) -> None:
        """Mark the creature as dead."""
        self.is_alive = False

    def revive(self) -> None:
        """Mark the creature as alive."""
        self.is_alive = True

    def __lt__(self, other: Creature) -> bool:
        if not isinstance(other, Creature):
            return NotImplemented
        return self.id < other.id


@dataclass
class Cell:
    """A single field cell holding one creature."""

    creature: Creature


def next_creature() -> Creature:
    """Return a new creature with the next id of the calling thread.

    Every thread counts from zero on its own.
    """
    current = getattr(_id_source, "next_id", 0)
    _id_source.next_id = current + 1
    return Creature(current)