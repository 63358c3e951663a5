"""Evolution of the creatures living in an area of the game field."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass

from godsfun.game_field_area import GameFieldArea

_NEIGHBOR_OFFSETS = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0), (1, 0),
    (-1, 1), (0, 1), (1, 1),
)


def is_alive_next(is_alive: bool, neighbors_count: int) -> bool:
    """Tell whether a cell holds a living creature in the next generation.

    A living creature survives with more than two living neighbours; an
    empty cell comes to life with exactly three.
    """
    return (neighbors_count > 2 and is_alive) or neighbors_count == 3


@dataclass(frozen=True)
class _Change:
    creature_id: int
    alive: bool
    x: int
    y: int


class GameModel:
    """Computes generations of creatures inside one field area."""

    def __init__(self, area: GameFieldArea, player_count: int) -> None:
        self.area = area
        self.player_count = player_count

    def compute(self) -> tuple[bool, int]:
        """Advance one generation.

        Returns ``(True, 0)`` while at least two kinds of creatures are
        alive. Otherwise returns ``False`` with the id of the only kind
        left, or ``-1`` when nobody is alive.
        """
        changes = list(self._pending_changes())
        self._apply(changes)
        survivors = self._count_creatures()
        if len(survivors) >= 2:
            return True, 0
        if len(survivors) == 1:
            return False, next(iter(survivors))
        return False, -1

    def _available_cells(self) -> Iterator[tuple[int, int]]:
        left, top = self.area.upper_left_corner
        for y in range(top, top + self.area.height()):
            for x in range(left, left + self.area.width()):
                if self.area.is_cell_available(x, y):
                    yield x, y

    def _count_neighbors(self, x: int, y: int) -> Counter[int]:
        counts: Counter[int] = Counter()
        for dx, dy in _NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if self.area.is_cell_available(nx, ny):
                creature = self.area.get_cell(nx, ny).creature
                if creature.is_alive:
                    counts[creature.id] += 1
        return counts

    def _pending_changes(self) -> Iterator[_Change]:
        for x, y in self._available_cells():
            neighbors = self._count_neighbors(x, y)
            alive = self.area.get_cell(x, y).creature.is_alive
            if is_alive_next(alive, sum(neighbors.values())):
                if not alive:
                    # Ties go to the smallest id.
                    winner = min(neighbors, key=lambda cid: (-neighbors[cid], cid))
                    yield _Change(winner, True, x, y)
            else:
                yield _Change(0, False, x, y)

    def _apply(self, changes: list[_Change]) -> None:
        for change in changes:
            creature = self.area.get_cell(change.x, change.y).creature
            creature.id = change.creature_id
            if change.alive:
                creature.revive()
            else:
                creature.kill()

    def _count_creatures(self) -> dict[int, int]:
        counts: Counter[int] = Counter()
        for x, y in self._available_cells():
            creature = self.area.get_cell(x, y).creature
            if creature.is_alive:
                counts[creature.id] += 1
        return dict(sorted(counts.items()))