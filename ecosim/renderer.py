"""Graphical window that draws the grid and turns key presses into controls."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from .grid import Grid
from .types import EntityType, Position

WINDOW_TITLE = "Ecosystem Simulation"
FRAME_RATE_LIMIT = 60
DELAY_STEP_MS = 10

Color = tuple[int, int, int]

BACKGROUND: Color = (0, 0, 0)
FALLBACK_COLOR: Color = (255, 0, 255)

_COLORS: dict[EntityType, Color] = {
    EntityType.EMPTY: (20, 20, 20),
    EntityType.PLANT: (40, 180, 40),
    EntityType.HERBIVORE: (70, 130, 255),
    EntityType.PREDATOR: (220, 60, 60),
    EntityType.OBSTACLE: (120, 120, 120),
}


def color_for(entity_type: EntityType) -> Color:
    """RGB colour used to draw a cell holding the given kind of entity."""
    return _COLORS.get(entity_type, FALLBACK_COLOR)


@dataclass
class ControlState:
    """User-controlled run state changed by key presses."""

    paused: bool = False
    restart_requested: bool = False
    save_requested: bool = False
    tick_delay_ms: int = 60

    def __post_init__(self) -> None:
        if self.tick_delay_ms <= 0:
            raise ValueError("tick_delay_ms must be positive")

    def apply_key(self, key: int) -> None:
        """Update the state for a pressed pygame key code; other keys are ignored."""
        if key == pygame.K_SPACE:
            self.paused = not self.paused
        elif key == pygame.K_r:
            self.restart_requested = True
        elif key == pygame.K_s:
            self.save_requested = True
        elif key == pygame.K_UP:
            self.tick_delay_ms = max(1, self.tick_delay_ms - DELAY_STEP_MS)
        elif key == pygame.K_DOWN:
            self.tick_delay_ms += DELAY_STEP_MS


class Renderer:
    """A pygame window showing one square per grid cell."""

    def __init__(self, window_width: int, window_height: int, cell_size: int) -> None:
        if window_width <= 0 or window_height <= 0:
            raise ValueError("Window size must be positive")
        if cell_size <= 0:
            raise ValueError("Cell size must be positive")
        self.cell_size = cell_size
        pygame.init()
        self._screen = pygame.display.set_mode((window_width, window_height))
        pygame.display.set_caption(WINDOW_TITLE)
        self._clock = pygame.time.Clock()
        self._open = True

    def is_open(self) -> bool:
        """Whether the window is still open."""
        return self._open

    def process_events(self, state: ControlState) -> None:
        """Handle pending window events, applying key presses to ``state``."""
        if not self._open:
            return
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.close()
                return
            if event.type == pygame.KEYDOWN:
                state.apply_key(event.key)

    def render(self, grid: Grid, title_info: str) -> None:
        """Draw the grid and show ``title_info`` in the window title."""
        if not self._open:
            return
        pygame.display.set_caption(f"{WINDOW_TITLE} | {title_info}")
        self._screen.fill(BACKGROUND)
        side = self.cell_size - 1
        for y in range(grid.height):
            for x in range(grid.width):
                entity_type = grid.at(Position(x, y)).entity_type
                rect = pygame.Rect(x * self.cell_size, y * self.cell_size, side, side)
                self._screen.fill(color_for(entity_type), rect)
        pygame.display.flip()
        self._clock.tick(FRAME_RATE_LIMIT)

    def close(self) -> None:
        """Close the window and release pygame."""
        if self._open:
            self._open = False
            pygame.quit()

    def __enter__(self) -> Renderer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()