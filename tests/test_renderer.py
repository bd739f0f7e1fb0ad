import pygame
import pytest

from ecosim.entities import Herbivore, Plant
from ecosim.grid import Grid
from ecosim.renderer import ControlState, Renderer, color_for
from ecosim.types import EntityType, Position


@pytest.fixture
def renderer(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    window = Renderer(40, 30, 10)
    yield window
    window.close()


def test_colors_match_entity_kinds():
    assert color_for(EntityType.EMPTY) == (20, 20, 20)
    assert color_for(EntityType.PLANT) == (40, 180, 40)
    assert color_for(EntityType.HERBIVORE) == (70, 130, 255)
    assert color_for(EntityType.PREDATOR) == (220, 60, 60)
    assert color_for(EntityType.OBSTACLE) == (120, 120, 120)


def test_colors_are_distinct():
    colors = {color_for(kind) for kind in EntityType}
    assert len(colors) == len(EntityType)


def test_space_toggles_pause():
    state = ControlState()
    state.apply_key(pygame.K_SPACE)
    assert state.paused is True
    state.apply_key(pygame.K_SPACE)
    assert state.paused is False


def test_r_and_s_set_requests():
    state = ControlState()
    state.apply_key(pygame.K_r)
    state.apply_key(pygame.K_s)
    assert state.restart_requested is True
    assert state.save_requested is True


def test_up_lowers_delay_but_not_below_one():
    state = ControlState(tick_delay_ms=25)
    state.apply_key(pygame.K_UP)
    assert state.tick_delay_ms == 15
    state.apply_key(pygame.K_UP)
    state.apply_key(pygame.K_UP)
    assert state.tick_delay_ms == 1


def test_down_raises_delay():
    state = ControlState(tick_delay_ms=60)
    state.apply_key(pygame.K_DOWN)
    assert state.tick_delay_ms == 70


def test_unknown_key_changes_nothing():
    state = ControlState(tick_delay_ms=60)
    state.apply_key(pygame.K_q)
    assert state == ControlState(tick_delay_ms=60)


def test_control_state_rejects_non_positive_delay():
    with pytest.raises(ValueError):
        ControlState(tick_delay_ms=0)


@pytest.mark.parametrize("size", [(0, 30, 10), (40, -1, 10), (40, 30, 0)])
def test_renderer_rejects_bad_sizes(size):
    with pytest.raises(ValueError):
        Renderer(*size)


def test_render_draws_cells_and_title(renderer):
    grid = Grid(4, 3)
    grid.place_entity(Plant(Position(1, 2)))
    grid.place_entity(Herbivore(Position(3, 0), 5, 10, 10))
    renderer.render(grid, "tick=1")

    surface = pygame.display.get_surface()
    assert tuple(surface.get_at((15, 25)))[:3] == color_for(EntityType.PLANT)
    assert tuple(surface.get_at((35, 5)))[:3] == color_for(EntityType.HERBIVORE)
    assert tuple(surface.get_at((5, 5)))[:3] == color_for(EntityType.EMPTY)
    assert tuple(surface.get_at((19, 25)))[:3] == (0, 0, 0)
    assert pygame.display.get_caption()[0] == "Ecosystem Simulation | tick=1"


def test_key_events_update_state(renderer):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_DOWN))
    state = ControlState(tick_delay_ms=60)
    renderer.process_events(state)
    assert state.paused is True
    assert state.tick_delay_ms == 70
    assert renderer.is_open() is True


def test_quit_event_closes_window(renderer):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    renderer.process_events(ControlState())
    assert renderer.is_open() is False