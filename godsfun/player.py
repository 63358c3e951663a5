"""A player who places and removes creatures in an area of the field."""

from __future__ import annotations

from dataclasses import replace

from godsfun.creature import Cell, Creature
from godsfun.game_field_area import GameFieldArea
from godsfun.observer import GameEvent, Observer, Subject


class Player(Observer, Subject):
    """Owns a creature kind and an area of the field to set it in.

    Reacts to ``USER_ASKED_SET_CREATURE`` from a user input by toggling the
    clicked cell, and fires ``PLAYER_KILL_CREATURE`` when it removes one of
    its own creatures.
    """

    def __init__(self, area: GameFieldArea | None, creature: Creature) -> None:
        super().__init__()
        self.area = area
        self.creature = creature

    def update(self, subject, event: int) -> None:
        if event == GameEvent.USER_ASKED_SET_CREATURE:
            coord = subject.last_coord_input()
            if coord.valid:
                self.set_one_cell(coord.x, coord.y)

    def set_one_cell(self, x: int, y: int) -> None:
        """Kill the player's own living creature at ``(x, y)`` or place a new one.

        Nothing happens when the cell is not available in the player's area.
        """
        if self.area is None or not self.area.is_cell_available(x, y):
            return
        current = self.area.get_cell(x, y).creature
        if current.is_alive and current.id == self.creature.id:
            current.kill()
            self.notify(GameEvent.PLAYER_KILL_CREATURE)
        else:
            self.area.set_cell(x, y, Cell(replace(self.creature, is_alive=True)))