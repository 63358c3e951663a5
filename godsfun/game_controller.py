"""The game loop: set-up phases, generations and the final result."""

from __future__ import annotations

from collections.abc import Sequence

from godsfun.game_field import GameFieldExcludedCells
from godsfun.game_field_area import GameFieldExcludedCellsAreaFactory
from godsfun.game_model import GameModel
from godsfun.observer import GameEvent, Observer
from godsfun.player import Player
from godsfun.view import DrawableComposite, DrawableText

TEXT_COMPONENT = "text"


class GameController(Observer):
    """Runs rounds of the game until the user asks to stop.

    Every player first places ``k`` creatures in their own area. Then the
    model computes up to ``t`` generations, after which every player places
    ``n`` more creatures, until only one kind of creature or none is left.
    Escape restarts the game, closing the window stops it.
    """

    def __init__(
        self,
        k: int,
        t: int,
        n: int,
        field: GameFieldExcludedCells,
        area_factory: GameFieldExcludedCellsAreaFactory,
        model: GameModel,
        view: DrawableComposite,
        players: Sequence[Player],
        user_input,
    ) -> None:
        if any(player.area is None for player in players):
            raise ValueError("every player needs a field area")
        self.k = k
        self.t = t
        self.n = n
        self.field = field
        self.area_factory = area_factory
        self.model = model
        self.view = view
        self.players = list(players)
        self.user_input = user_input

        self.asked_stop = False
        self.asked_restart = False
        self.winner_determined = False
        self._setup_phase = False
        self._remaining = 0

        field.attach(self, GameEvent.GAME_FIELD_UPDATE)
        user_input.attach(self, GameEvent.USER_ASKED_CLOSE)
        user_input.attach(self, GameEvent.USER_ASKED_RESTART)
        for player in self.players:
            player.area.lock()
            player.attach(self, GameEvent.PLAYER_KILL_CREATURE)
            user_input.attach(player, GameEvent.USER_ASKED_SET_CREATURE)

    @property
    def remaining(self) -> int:
        """Creatures the current player still has to place."""
        return self._remaining

    def game(self) -> None:
        """Play rounds until the user asks to stop."""
        while not self.asked_stop:
            if self.asked_restart:
                self._reset_field()
                self.asked_restart = False
            self.winner_determined = False
            self._setup_all(self.k)
            while not (self._interrupted or self.winner_determined):
                self._compute_model(self.t)
                if not self.winner_determined:
                    self._setup_all(self.n)
            while not self._interrupted:
                self.user_input.read_input()

    def update(self, subject, event: int) -> None:
        if event == GameEvent.USER_ASKED_CLOSE:
            self.asked_stop = True
        elif event == GameEvent.USER_ASKED_RESTART:
            self.asked_restart = True
        elif event == GameEvent.GAME_FIELD_UPDATE and self._setup_phase:
            self._remaining -= 1
        elif event == GameEvent.PLAYER_KILL_CREATURE and self._setup_phase:
            self._remaining += 1

    @property
    def _interrupted(self) -> bool:
        return self.asked_stop or self.asked_restart

    def _setup_all(self, count: int) -> None:
        for index in range(len(self.players)):
            if self._interrupted:
                return
            self._setup_player(index, count)

    def _setup_player(self, index: int, count: int) -> None:
        area = self.players[index].area
        self._remaining = count
        self._setup_phase = True
        area.unlock()
        try:
            while self._remaining > 0 and not self._interrupted:
                self._set_text(
                    f"Player: {index}. Remaining creatures: {self._remaining}."
                )
                self.user_input.read_input()
        finally:
            area.lock()
            self._setup_phase = False

    def _compute_model(self, steps: int) -> None:
        for _ in range(steps):
            if self._interrupted:
                return
            running, creature_id = self.model.compute()
            if running:
                continue
            if creature_id == -1:
                self._set_text("Draw!")
            else:
                for index, player in enumerate(self.players):
                    if player.creature.id == creature_id:
                        self._set_text(f"Won: {index}!")
            self.winner_determined = True
            return

    def _reset_field(self) -> None:
        for y in range(self.field.height()):
            for x in range(self.field.width()):
                if not self.field.is_excluded_cell(x, y):
                    self.field.get_cell(x, y).creature.kill()

    def _set_text(self, text: str) -> None:
        comp = self.view.get_component(TEXT_COMPONENT)
        if comp is None:
            raise LookupError("The view is missing the text component")
        if not isinstance(comp, DrawableText):
            raise TypeError("The view is missing the DrawableText component")
        comp.text = text