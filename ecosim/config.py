"""Simulation settings and their loading from an ini-style file."""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Union

ENVIRONMENT_MODES = ("normal", "drought", "overgrowth")

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_UINT_MODULUS = 2**32
_UNSIGNED_FIELDS = frozenset({"random_seed"})

_WHITESPACE = " \t\n\r\f\v"
_INT_PREFIX = re.compile(r"[ \t\n\r\f\v]*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"[ \t\n\r\f\v]*("
    r"[+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?"
    r"|inf(?:inity)?|nan)"
    r")",
    re.IGNORECASE,
)


class ConfigError(ValueError):
    """Raised when a setting cannot be parsed or is out of bounds."""


def parse_ini(text: str) -> dict[str, str]:
    """Parse ``key = value`` lines, skipping blanks, comments and lines without '='."""
    values: dict[str, str] = {}
    for raw_line in text.split("\n"):
        line = raw_line.strip(_WHITESPACE)
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        values[key.strip(_WHITESPACE)] = value.strip(_WHITESPACE)
    return values


def _parse_int(key: str, text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ConfigError(f"{key}: invalid integer {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ConfigError(f"{key}: integer {text!r} out of range")
    return value


def _parse_unsigned(key: str, text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ConfigError(f"{key}: invalid integer {text!r}")
    return int(match.group(1)) % _UINT_MODULUS


def _parse_float(key: str, text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ConfigError(f"{key}: invalid number {text!r}")
    return float(match.group(1))


@dataclass
class Config:
    """All parameters of the world, its agents and the run."""

    window_width: int = 1200
    window_height: int = 900

    grid_width: int = 120
    grid_height: int = 90
    cell_size: int = 8

    initial_plants: int = 1500
    initial_herbivores: int = 120
    initial_predators: int = 40
    initial_obstacles: int = 500

    plant_growth_probability: float = 0.03

    herbivore_max_energy: int = 20
    herbivore_start_energy: int = 12
    herbivore_move_cost: int = 1
    herbivore_idle_cost: int = 1
    herbivore_food_gain: int = 8
    herbivore_reproduce_threshold: int = 16
    herbivore_max_age: int = 120

    predator_max_energy: int = 24
    predator_start_energy: int = 14
    predator_move_cost: int = 1
    predator_idle_cost: int = 1
    predator_food_gain: int = 10
    predator_reproduce_threshold: int = 18
    predator_max_age: int = 140

    tick_delay_ms: int = 60
    thread_count: int = 4
    random_seed: int = 42

    stats_output: str = "simulation_stats.csv"
    ticks_to_run: int = 50
    render_every_n_ticks: int = 10

    environment_mode: str = "normal"

    def apply(self, values: dict[str, str]) -> None:
        """Override fields named by ``values``; unknown keys are ignored."""
        for field in fields(self):
            text = values.get(field.name)
            if text is None:
                continue
            current = getattr(self, field.name)
            if field.name in _UNSIGNED_FIELDS:
                parsed: object = _parse_unsigned(field.name, text)
            elif isinstance(current, str):
                parsed = text
            elif isinstance(current, float):
                parsed = _parse_float(field.name, text)
            else:
                parsed = _parse_int(field.name, text)
            setattr(self, field.name, parsed)

    def load_from_file(self, filename: Union[str, Path]) -> None:
        """Read settings from an ini file; raises OSError if it cannot be read."""
        with open(filename, encoding="utf-8") as handle:
            text = handle.read()
        self.apply(parse_ini(text))

    def validate(self) -> None:
        """Raise ConfigError describing the first invalid setting."""
        if self.window_width <= 0 or self.window_height <= 0:
            raise ConfigError("Window size must be positive.")
        if self.grid_width <= 0 or self.grid_height <= 0:
            raise ConfigError("Grid size must be positive.")
        if self.cell_size <= 0:
            raise ConfigError("Cell size must be positive.")
        if min(
            self.initial_plants,
            self.initial_herbivores,
            self.initial_predators,
            self.initial_obstacles,
        ) < 0:
            raise ConfigError("Initial entity counts must be non-negative.")
        if not 0.0 <= self.plant_growth_probability <= 1.0:
            raise ConfigError("plant_growth_probability must be in [0, 1].")
        if (
            self.herbivore_max_energy <= 0
            or self.herbivore_start_energy <= 0
            or self.herbivore_move_cost < 0
            or self.herbivore_idle_cost < 0
            or self.herbivore_food_gain < 0
            or self.herbivore_reproduce_threshold <= 0
            or self.herbivore_max_age <= 0
        ):
            raise ConfigError("Invalid herbivore parameters.")
        if (
            self.predator_max_energy <= 0
            or self.predator_start_energy <= 0
            or self.predator_move_cost < 0
            or self.predator_idle_cost < 0
            or self.predator_food_gain < 0
            or self.predator_reproduce_threshold <= 0
            or self.predator_max_age <= 0
        ):
            raise ConfigError("Invalid predator parameters.")
        if self.tick_delay_ms <= 0:
            raise ConfigError("tick_delay_ms must be positive.")
        if self.thread_count <= 0:
            raise ConfigError("thread_count must be positive.")
        if self.ticks_to_run <= 0:
            raise ConfigError("ticks_to_run must be positive.")
        if self.render_every_n_ticks < 0:
            raise ConfigError("render_every_n_ticks must be non-negative.")
        if self.environment_mode not in ENVIRONMENT_MODES:
            raise ConfigError(
                "environment_mode must be normal, drought or overgrowth."
            )
        if not self.stats_output:
            raise ConfigError("stats_output must not be empty.")