"""A rectangular game field in which some cells are forbidden."""

from __future__ import annotations

import copy
from collections.abc import Iterable

from godsfun.creature import Cell
from godsfun.observer import GameEvent, Subject


class GameFieldExcludedCells(Subject):
    """Grid of cells; excluded cells cannot be read or written.

    Cells are stored by value: the initial cell and every cell handed to
    ``set_cell`` are copied. Writing a cell fires ``GAME_FIELD_UPDATE``.
    """

    def __init__(
        self,
        width: int,
        height: int,
        init: Cell,
        excluded_cells: Iterable[tuple[int, int]] = (),
    ) -> None:
        super().__init__()
        self._rows = [
            [copy.deepcopy(init) for _ in range(width)] for _ in range(height)
        ]
        self._excluded = frozenset((x, y) for x, y in excluded_cells)

    def set_cell(self, x: int, y: int, cell: Cell) -> None:
        """Store a copy of ``cell`` at ``(x, y)`` and notify observers."""
        self._check_position(x, y)
        self._rows[y][x] = copy.deepcopy(cell)
        self.notify(GameEvent.GAME_FIELD_UPDATE)

    def get_cell(self, x: int, y: int) -> Cell:
        """Return the cell at ``(x, y)``; changes to it affect the field."""
        self._check_position(x, y)
        return self._rows[y][x]

    def clear(self) -> None:
        """Remove every cell from the field."""
        self._rows.clear()

    def width(self) -> int:
        return len(self._rows[-1]) if self._rows else 0

    def height(self) -> int:
        return len(self._rows)

    def is_excluded_cell(self, x: int, y: int) -> bool:
        return (x, y) in self._excluded

    def _check_position(self, x: int, y: int) -> None:
        if self.is_excluded_cell(x, y):
            raise ValueError("Accessing a forbidden cell.")
        if not (0 <= y < len(self._rows) and 0 <= x < len(self._rows[y])):
            raise IndexError(f"cell ({x}, {y}) is outside the field")