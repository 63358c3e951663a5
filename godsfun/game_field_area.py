"""Rectangular regions of a game field that can be locked."""

from __future__ import annotations

from abc import ABC, abstractmethod

from godsfun.creature import Cell
from godsfun.game_field import GameFieldExcludedCells


class GameFieldArea(ABC):
    """A rectangle of field cells between two inclusive corners.

    Coordinates grow to the right and downward, so the upper-left corner
    holds the smallest x and y of the area.
    """

    def __init__(
        self,
        upper_left_corner: tuple[int, int],
        lower_right_corner: tuple[int, int],
    ) -> None:
        self.upper_left_corner = tuple(upper_left_corner)
        self.lower_right_corner = tuple(lower_right_corner)

    @abstractmethod
    def lock(self) -> None:
        """Make every cell of the area unavailable."""

    @abstractmethod
    def unlock(self) -> None:
        """Make the cells of the area available again."""

    def is_cell_available(self, x: int, y: int) -> bool:
        """Tell whether ``(x, y)`` lies inside the area."""
        left, top = self.upper_left_corner
        right, bottom = self.lower_right_corner
        return left <= x <= right and top <= y <= bottom

    @abstractmethod
    def set_cell(self, x: int, y: int, cell: Cell) -> None:
        """Write ``cell`` at ``(x, y)``."""

    @abstractmethod
    def get_cell(self, x: int, y: int) -> Cell:
        """Return the cell at ``(x, y)``."""

    @abstractmethod
    def width(self) -> int:
        """Number of columns in the area."""

    @abstractmethod
    def height(self) -> int:
        """Number of rows in the area."""


class GameFieldExcludedCellsArea(GameFieldArea):
    """An area of a field with excluded cells.

    A cell is available when it lies inside the area, the area is not
    locked and the field does not exclude it.
    """

    def __init__(
        self,
        field: GameFieldExcludedCells,
        upper_left_corner: tuple[int, int],
        lower_right_corner: tuple[int, int],
    ) -> None:
        if not isinstance(field, GameFieldExcludedCells):
            raise TypeError("The field should actually be a GameFieldExcludedCells")
        super().__init__(upper_left_corner, lower_right_corner)
        self.field = field
        self.is_locked = False

    def lock(self) -> None:
        self.is_locked = True

    def unlock(self) -> None:
        self.is_locked = False

    def is_cell_available(self, x: int, y: int) -> bool:
        return (
            super().is_cell_available(x, y)
            and not self.is_locked
            and not self.field.is_excluded_cell(x, y)
        )

    def set_cell(self, x: int, y: int, cell: Cell) -> None:
        self._check_position(x, y)
        self.field.set_cell(x, y, cell)

    def get_cell(self, x: int, y: int) -> Cell:
        self._check_position(x, y)
        return self.field.get_cell(x, y)

    def width(self) -> int:
        return self.lower_right_corner[0] - self.upper_left_corner[0] + 1

    def height(self) -> int:
        return self.lower_right_corner[1] - self.upper_left_corner[1] + 1

    def _check_position(self, x: int, y: int) -> None:
        if not self.is_cell_available(x, y):
            raise ValueError("Accessing a forbidden cell.")


class GameFieldExcludedCellsAreaFactory:
    """Creates areas over fields with excluded cells."""

    def create_area(
        self,
        field: GameFieldExcludedCells,
        upper_left_corner: tuple[int, int],
        lower_right_corner: tuple[int, int],
    ) -> GameFieldExcludedCellsArea:
        return GameFieldExcludedCellsArea(field, upper_left_corner, lower_right_corner)