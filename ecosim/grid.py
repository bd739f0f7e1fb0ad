"""Toroidal grid of cells, each holding at most one entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .entities import Entity
from .types import EntityType, Position


@dataclass
class Cell:
    """A single grid cell, empty or holding one entity."""

    occupant: Optional[Entity] = None

    def is_empty(self) -> bool:
        """Whether nothing occupies the cell."""
        return self.occupant is None

    def clear(self) -> None:
        """Remove the occupant, if any."""
        self.occupant = None

    @property
    def entity_type(self) -> EntityType:
        """Type of the occupant, or EMPTY for an empty cell."""
        if self.occupant is None:
            return EntityType.EMPTY
        return self.occupant.entity_type


class Grid:
    """A width x height field whose edges wrap around."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Grid dimensions must be positive")
        self.width = width
        self.height = height
        self._cells = [[Cell() for _ in range(width)] for _ in range(height)]

    def is_inside(self, pos: Position) -> bool:
        """Whether the position lies within the grid without wrapping."""
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def wrap_position(self, pos: Position) -> Position:
        """Map any position onto the grid toroidally."""
        return Position(pos.x % self.width, pos.y % self.height)

    def at(self, pos: Position) -> Cell:
        """Return the cell at the (wrapped) position."""
        wrapped = self.wrap_position(pos)
        return self._cells[wrapped.y][wrapped.x]

    def is_empty(self, pos: Position) -> bool:
        """Whether the cell at the position is empty."""
        return self.at(pos).is_empty()

    def clear_cell(self, pos: Position) -> None:
        """Empty the cell at the position."""
        self.at(pos).clear()

    def place_entity(self, entity: Entity) -> None:
        """Put the entity in the cell named by its (wrapped) position."""
        if entity is None:
            raise ValueError("Cannot place null entity")
        pos = self.wrap_position(entity.position)
        entity.position = pos
        self.at(pos).occupant = entity

    def moore_neighbors(self, pos: Position) -> list[Position]:
        """The eight surrounding positions, wrapped, row by row."""
        return [
            self.wrap_position(pos.offset(dx, dy))
            for dy in (-1, 0, 1)
            for dx in (-1, 0, 1)
            if (dx, dy) != (0, 0)
        ]

    def clear(self) -> None:
        """Empty every cell."""
        for row in self._cells:
            for cell in row:
                cell.clear()