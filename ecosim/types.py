"""Basic value types shared across the simulation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EntityType(Enum):
    """Kind of object that can occupy a grid cell."""

    EMPTY = 0
    PLANT = 1
    HERBIVORE = 2
    PREDATOR = 3
    OBSTACLE = 4


@dataclass(frozen=True)
class Position:
    """Integer coordinates of a cell on the grid."""

    x: int = 0
    y: int = 0

    def offset(self, dx: int, dy: int) -> Position:
        """Return the position shifted by ``dx`` and ``dy``."""
        return Position(self.x + dx, self.y + dy)