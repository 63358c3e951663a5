"""Translation of window events into game events."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from godsfun.observer import GameEvent, Subject  # noqa: E402


@dataclass(frozen=True)
class CoordInput:
    """Cell coordinates of the last click; ``valid`` is False when unusable."""

    valid: bool = False
    x: int = 0
    y: int = 0


class UserInput(Subject):
    """Reads window events and fires the matching game events.

    Closing the window fires ``USER_ASKED_CLOSE``, a right click fires
    ``USER_ASKED_SET_CREATURE`` and Escape fires ``USER_ASKED_RESTART``.
    """

    def __init__(
        self,
        start_x: float,
        start_y: float,
        cell_height: float,
        cell_width: float,
    ) -> None:
        super().__init__()
        self.start_x = start_x
        self.start_y = start_y
        self.cell_height = cell_height
        self.cell_width = cell_width
        self._last_coord = CoordInput()

    def read_input(self) -> None:
        """Take one pending event from the window queue, if any, and handle it."""
        event = pygame.event.poll()
        if event.type != pygame.NOEVENT:
            self.handle_event(event)

    def handle_event(self, event: pygame.event.Event) -> None:
        """Fire the game event that ``event`` stands for."""
        if event.type == pygame.QUIT:
            self.notify(GameEvent.USER_ASKED_CLOSE)
        elif (
            event.type == pygame.MOUSEBUTTONDOWN
            and getattr(event, "button", None) == pygame.BUTTON_RIGHT
        ):
            x, y = event.pos
            self._last_coord = self._compute_coord(x, y)
            self.notify(GameEvent.USER_ASKED_SET_CREATURE)
        elif event.type == pygame.KEYDOWN and getattr(event, "key", None) == pygame.K_ESCAPE:
            self.notify(GameEvent.USER_ASKED_RESTART)

    def last_coord_input(self) -> CoordInput:
        return self._last_coord

    def _compute_coord(self, x: float, y: float) -> CoordInput:
        if x >= self.start_x and y >= self.start_y:
            return CoordInput(
                True,
                math.ceil((x - self.start_x) / self.cell_width),
                math.ceil((y - self.start_y) / self.cell_height),
            )
        return CoordInput()