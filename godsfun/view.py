"""Drawable widgets: layouts, frames, a grid canvas and text."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

Point = tuple[float, float]
ColorLike = pygame.Color | tuple[int, int, int] | tuple[int, int, int, int] | str

BLACK = pygame.Color(0, 0, 0)
WHITE = pygame.Color(255, 255, 255)


def _fill_rect(
    surface: pygame.Surface,
    x: float,
    y: float,
    width: float,
    height: float,
    color: ColorLike,
) -> None:
    rect = pygame.Rect(round(x), round(y), round(width), round(height))
    surface.fill(color, rect)


def _draw_vertical_line(
    surface: pygame.Surface, start: Point, length: float, thickness: float, color: ColorLike
) -> None:
    _fill_rect(surface, start[0], start[1], thickness, length, color)


def _draw_horizontal_line(
    surface: pygame.Surface, start: Point, length: float, thickness: float, color: ColorLike
) -> None:
    _fill_rect(surface, start[0], start[1], length, thickness, color)


class Drawable(ABC):
    """Something that can be drawn at a position and reports its size."""

    @abstractmethod
    def draw(self, surface: pygame.Surface, start: Point) -> None:
        """Draw onto ``surface`` with the upper-left corner at ``start``."""

    @abstractmethod
    def size(self) -> tuple[float, float]:
        """Return ``(width, height)``."""


class DrawableComposite(Drawable):
    """A drawable made of named child drawables.

    Lookups and deletions by name also search nested composites.
    """

    def __init__(self) -> None:
        self._components: list[Drawable] = []
        self._names: dict[str, Drawable] = {}

    @property
    def components(self) -> list[Drawable]:
        """The children in the order they were added."""
        return list(self._components)

    def add_component(self, comp: Drawable, name: str) -> None:
        """Append ``comp``; a name already in use keeps its first component."""
        self._components.append(comp)
        self._names.setdefault(name, comp)

    def get_component(self, name: str) -> Drawable | None:
        """Return the component called ``name`` here or in a nested composite."""
        if name in self._names:
            return self._names[name]
        for comp in self._components:
            if isinstance(comp, DrawableComposite):
                found = comp.get_component(name)
                if found is not None:
                    return found
        return None

    def delete_component(self, name: str) -> None:
        """Remove the component called ``name`` here, or else from nested composites."""
        if name in self._names:
            target = self._names.pop(name)
            position = next(i for i, c in enumerate(self._components) if c is target)
            del self._components[position]
            return
        for comp in self._components:
            if isinstance(comp, DrawableComposite):
                comp.delete_component(name)


class DrawableStackLayout(DrawableComposite):
    """Stacks its children vertically, the last added on top."""

    def draw(self, surface: pygame.Surface, start: Point) -> None:
        x, y = start
        for comp in reversed(self._components):
            comp.draw(surface, (x, y))
            y += comp.size()[1]

    def size(self) -> tuple[float, float]:
        if not self._components:
            return 0.0, 0.0
        sizes = [comp.size() for comp in self._components]
        return max(w for w, _ in sizes), sum(h for _, h in sizes)


class DrawableNestedLayout(DrawableComposite):
    """Draws each child inside the previous one, shifted by fixed offsets.

    Every added child must be strictly smaller than the previous one.
    """

    def __init__(self, width_offset: float, height_offset: float) -> None:
        super().__init__()
        self.width_offset = width_offset
        self.height_offset = height_offset

    def draw(self, surface: pygame.Surface, start: Point) -> None:
        x, y = start
        for comp in self._components:
            comp.draw(surface, (x, y))
            x += self.width_offset
            y += self.height_offset

    def size(self) -> tuple[float, float]:
        if not self._components:
            return 0.0, 0.0
        return self._components[0].size()

    def add_component(self, comp: Drawable, name: str) -> None:
        if self._components:
            width, height = comp.size()
            last_width, last_height = self._components[-1].size()
            if width >= last_width or height >= last_height:
                raise ValueError(
                    "a nested component must be smaller than the previous one"
                )
        super().add_component(comp, name)


class DrawableFrame(Drawable):
    """A filled rectangle with a white inner rectangle leaving a border."""

    def __init__(
        self, width: float, height: float, thickness: float, color: ColorLike
    ) -> None:
        if thickness > min(width, height):
            raise ValueError("thickness > min(width, height)")
        self._width = width
        self._height = height
        self.thickness = thickness
        self._color = pygame.Color(color)
        self._inner_color = pygame.Color(WHITE)
        self._inner_size = (width - thickness * 2, height - thickness * 2)

    @property
    def color(self) -> pygame.Color:
        return pygame.Color(self._color)

    @color.setter
    def color(self, value: ColorLike) -> None:
        self._color = pygame.Color(value)
        self._inner_color = pygame.Color(value)

    def draw(self, surface: pygame.Surface, start: Point) -> None:
        x, y = start
        _fill_rect(surface, x, y, self._width, self._height, self._color)
        inner_w, inner_h = self._inner_size
        _fill_rect(
            surface, x + self.thickness, y + self.thickness, inner_w, inner_h, self._inner_color
        )

    def size(self) -> tuple[float, float]:
        return self._width, self._height


class DrawableGridCanvas(Drawable):
    """A grid of equal cells separated by lines; cells can be painted."""

    def __init__(
        self,
        width: float,
        height: float,
        width_in_cells: int,
        height_in_cells: int,
        grid_thickness: float,
        grid_color: ColorLike = BLACK,
    ) -> None:
        self._width = width
        self._height = height
        self.width_in_cells = width_in_cells
        self.height_in_cells = height_in_cells
        self.grid_thickness = grid_thickness
        self.grid_color = pygame.Color(grid_color)
        self.cell_width = (
            (width - grid_thickness) - grid_thickness * width_in_cells
        ) / width_in_cells
        self.cell_height = (
            (height - grid_thickness) - grid_thickness * height_in_cells
        ) / height_in_cells
        self._cells: list[tuple[tuple[int, int], pygame.Color]] = []

    @property
    def painted_cells(self) -> list[tuple[tuple[int, int], pygame.Color]]:
        """Painted cells in painting order."""
        return list(self._cells)

    def draw(self, surface: pygame.Surface, start: Point) -> None:
        self._draw_grid(surface, start)
        for pos, color in self._cells:
            self._draw_cell_at(surface, pos, start, color)

    def size(self) -> tuple[float, float]:
        return self._width, self._height

    def paint_cell(self, pos: tuple[int, int], color: ColorLike) -> None:
        """Paint the cell at column/row ``pos`` with ``color``."""
        self._cells.append((tuple(pos), pygame.Color(color)))

    def clear(self) -> None:
        """Forget every painted cell."""
        self._cells.clear()

    def _draw_cell_at(
        self, surface: pygame.Surface, pos: tuple[int, int], start: Point, color: ColorLike
    ) -> None:
        cell_x, cell_y = pos
        x = start[0] + cell_x * self.cell_width + self.grid_thickness * (cell_x + 1)
        y = start[1] + cell_y * self.cell_height + self.grid_thickness * (cell_y + 1)
        _fill_rect(surface, x, y, self.cell_width, self.cell_height, color)

    def _draw_grid(self, surface: pygame.Surface, start: Point) -> None:
        start_x, start_y = start
        x, limit_x = start_x, start_x + self._width
        while x < limit_x:
            _draw_vertical_line(
                surface, (x, start_y), self._height, self.grid_thickness, self.grid_color
            )
            x += self.cell_width + self.grid_thickness
        y, limit_y = start_y, start_y + self._height
        while y < limit_y:
            _draw_horizontal_line(
                surface, (start_x, y), self._width, self.grid_thickness, self.grid_color
            )
            y += self.cell_height + self.grid_thickness


class DrawableText(Drawable):
    """A line of text in a given font, drawn at an offset from its start."""

    def __init__(
        self,
        text: str,
        character_size: int,
        font: str | None,
        color: ColorLike = BLACK,
        start_pos: Point = (0, 0),
    ) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        self._font = pygame.font.Font(font, character_size)
        self.character_size = character_size
        self.start_pos = tuple(start_pos)
        self.color = pygame.Color(color)
        self.text = text

    def draw(self, surface: pygame.Surface, start: Point) -> None:
        rendered = self._font.render(self.text, True, self.color)
        surface.blit(
            rendered,
            (round(start[0] + self.start_pos[0]), round(start[1] + self.start_pos[1])),
        )

    def size(self) -> tuple[float, float]:
        if not self.text:
            return 0.0, float(self.character_size)
        width, height = self._font.size(self.text)
        return float(width), float(height + self.character_size)