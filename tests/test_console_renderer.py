import io

import pytest

from ecosim.console_renderer import render, render_text
from ecosim.entities import Herbivore, Obstacle, Plant, Predator
from ecosim.grid import Grid
from ecosim.types import Position


def _small_grid():
    grid = Grid(4, 2)
    grid.place_entity(Plant(Position(0, 0)))
    grid.place_entity(Herbivore(Position(1, 0), 5, 10, 20))
    grid.place_entity(Predator(Position(2, 1), 5, 10, 20))
    grid.place_entity(Obstacle(Position(3, 1)))
    return grid


def test_small_grid_symbols():
    assert render_text(_small_grid()) == "*H..\n..P#\n"


def test_empty_grid_is_all_dots():
    text = render_text(Grid(5, 3))
    assert text.splitlines() == ["." * 5] * 3


def test_large_grid_is_sampled():
    grid = Grid(120, 90)
    lines = render_text(grid).splitlines()
    assert len(lines[0]) == 60
    assert all(len(line) == len(lines[0]) for line in lines)
    assert len(lines) <= 90 // (90 // 25)


def test_sampling_picks_cells_on_step():
    grid = Grid(4, 4)
    grid.place_entity(Plant(Position(2, 2)))
    grid.place_entity(Plant(Position(1, 1)))
    text = render_text(grid, max_width=2, max_height=2)
    assert text == "..\n.*\n"


def test_render_writes_to_stream():
    stream = io.StringIO()
    grid = _small_grid()
    render(grid, stream=stream)
    assert stream.getvalue() == render_text(grid)


def test_render_defaults_to_stdout(capsys):
    grid = _small_grid()
    render(grid)
    assert capsys.readouterr().out == render_text(grid)


@pytest.mark.parametrize("width, height", [(0, 25), (60, 0), (-1, 5)])
def test_non_positive_limits_raise(width, height):
    with pytest.raises(ValueError):
        render_text(Grid(3, 3), width, height)