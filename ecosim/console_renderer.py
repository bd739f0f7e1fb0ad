"""Plain-text drawing of the grid for terminals."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .grid import Grid
from .types import EntityType, Position

SYMBOLS = {
    EntityType.EMPTY: ".",
    EntityType.PLANT: "*",
    EntityType.HERBIVORE: "H",
    EntityType.PREDATOR: "P",
    EntityType.OBSTACLE: "#",
}


def _step(size: int, limit: int) -> int:
    return size // limit if size > limit else 1


def render_text(grid: Grid, max_width: int = 60, max_height: int = 25) -> str:
    """Return the grid as text, sampling cells when it exceeds the limits."""
    if max_width <= 0 or max_height <= 0:
        raise ValueError("max_width and max_height must be positive")
    step_x = _step(grid.width, max_width)
    step_y = _step(grid.height, max_height)
    return "".join(
        "".join(
            SYMBOLS[grid.at(Position(x, y)).entity_type]
            for x in range(0, grid.width, step_x)
        )
        + "\n"
        for y in range(0, grid.height, step_y)
    )


def render(
    grid: Grid,
    max_width: int = 60,
    max_height: int = 25,
    stream: Optional[TextIO] = None,
) -> None:
    """Write the text form of the grid to ``stream`` (stdout by default)."""
    out = sys.stdout if stream is None else stream
    out.write(render_text(grid, max_width, max_height))