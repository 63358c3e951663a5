"""Game events and a small observer/subject mechanism."""

from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from enum import IntEnum


class GameEvent(IntEnum):
    """Events exchanged between the parts of the game."""

    GAME_FIELD_UPDATE = 0
    USER_ASKED_CLOSE = 1
    USER_ASKED_RESTART = 2
    USER_ASKED_SET_CREATURE = 3
    PLAYER_KILL_CREATURE = 4


class Observer(ABC):
    """Something that reacts to events fired by a subject."""

    @abstractmethod
    def update(self, subject: Subject, event: int) -> None:
        """Handle ``event`` fired by ``subject``."""


class Subject:
    """Keeps weak references to observers, grouped by event.

    Observers that no longer exist are dropped when an event is fired.
    """

    def __init__(self) -> None:
        super().__init__()
        self._observers: dict[int, list[weakref.ReferenceType]] = {}

    def attach(self, observer: Observer, event: int) -> None:
        """Subscribe ``observer`` to ``event``."""
        self._observers.setdefault(event, []).append(weakref.ref(observer))

    def detach(self, observer: Observer, event: int) -> None:
        """Remove one subscription of ``observer`` to ``event``, if present."""
        refs = self._observers.get(event, [])
        for ref in refs:
            if ref() is observer:
                refs.remove(ref)
                return

    def notify(self, event: int) -> None:
        """Call ``update`` on every live observer subscribed to ``event``."""
        refs = self._observers.get(event)
        if not refs:
            return
        for ref in list(refs):
            observer = ref()
            if observer is None:
                if ref in refs:
                    refs.remove(ref)
            else:
                observer.update(self, event)