# ecosim

A small ecosystem simulation on a toroidal grid, where the edges wrap around.
Plants grow on empty cells. Herbivores eat plants and predators eat
herbivores. Obstacles take up cells and block movement. Animals spend energy,
grow older, die and reproduce. A pygame window shows the world as it changes,
and per-tick population counts can be saved as CSV.

## Installation

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Running

```
ecosim
ecosim --config path/to/settings.ini
```

At startup the program reads the settings file given by `--config`
(`config.ini` in the current directory by default). If the file cannot be
opened, built-in defaults are used. If a value in it cannot be parsed, the
program prints a configuration error and exits with status 1.

It then asks a few questions in the console. Press Enter at any of them to
keep the current value. An answer that is out of range or not understood also
keeps the current value:

- environment mode: `1` normal, `2` drought (plant growth probability times
  0.35) or `3` overgrowth (probability doubled, capped at 1)
- thread count (1..32)
- tick delay in milliseconds (1..1000)
- ticks to run in statistics (1..100000)

The settings are then checked, and the program exits with status 1 if any is
invalid. Otherwise a window opens and the simulation runs one tick per frame
until the window is closed. The window title shows the tick, the count of each
kind of entity, the thread count, the delay and whether the run is paused.

### Controls in the window

| Key       | Action                                   |
|-----------|------------------------------------------|
| Space     | pause / resume                           |
| R         | restart with a fresh random world        |
| S         | save statistics to CSV                   |
| Up / Down | tick delay down / up by 10 ms (minimum 1) |

When the window closes, the statistics are saved to the file named by
`stats_output`.

## Configuration

The settings file holds `key = value` lines. Blank lines, lines that start
with `#` and lines without `=` are skipped; unknown keys are ignored. The
recognised keys and their defaults are:

```
window_width = 1200
window_height = 900
grid_width = 120
grid_height = 90
cell_size = 8

initial_plants = 1500
initial_herbivores = 120
initial_predators = 40
initial_obstacles = 500

plant_growth_probability = 0.03

herbivore_max_energy = 20
herbivore_start_energy = 12
herbivore_move_cost = 1
herbivore_idle_cost = 1
herbivore_food_gain = 8
herbivore_reproduce_threshold = 16
herbivore_max_age = 120

predator_max_energy = 24
predator_start_energy = 14
predator_move_cost = 1
predator_idle_cost = 1
predator_food_gain = 10
predator_reproduce_threshold = 18
predator_max_age = 140

tick_delay_ms = 60
thread_count = 4
random_seed = 42

stats_output = simulation_stats.csv
ticks_to_run = 50
render_every_n_ticks = 10

environment_mode = normal
```

The window size is computed from `grid_width`, `grid_height` and `cell_size`.
`thread_count` decides how the rows are split into blocks, and each block gets
its own random stream for plant growth, so changing it changes the run; the
work itself is done in one thread. `ticks_to_run` and `render_every_n_ticks`
are checked by `Config.validate` but do not change how the window runs.

`Config.load_from_file` raises `OSError` if the file cannot be read and
`ConfigError` if a value cannot be parsed. `Config.validate` raises
`ConfigError` naming the first invalid setting.

## Using the library

```python
from ecosim.config import Config
from ecosim.engine import SimulationEngine
from ecosim.statistics import StatisticsCollector
from ecosim.console_renderer import render

config = Config(
    grid_width=40,
    grid_height=20,
    initial_plants=200,
    initial_herbivores=20,
    initial_predators=6,
    initial_obstacles=40,
)
config.validate()

engine = SimulationEngine(config)
engine.initialize_random()

stats = StatisticsCollector()
for _ in range(config.ticks_to_run):
    engine.step()
    stats.add(engine.snapshot())

render(engine.grid)
stats.save_csv("run.csv")
```

`render` writes the grid to standard output (or to the `stream` it is given)
using `.` for empty cells, `*` for plants, `H` for herbivores, `P` for
predators and `#` for obstacles; `render_text` returns the same text as a
string. Grids larger than `max_width` by `max_height` (60 by 25 by default) are
sampled.

The CSV file has the header `tick,plants,herbivores,predators,obstacles`, and
each row after it is one tick. `save_csv` raises `OSError` if the file cannot
be written.