"""Interactive entry point: menu, window loop and statistics export."""

from __future__ import annotations

import argparse
import re
import sys
import time
from collections.abc import Callable, Sequence
from typing import Optional

from .config import Config, ConfigError
from .engine import SimulationEngine
from .renderer import ControlState, Renderer
from .statistics import StatisticsCollector

InputFunc = Callable[[str], str]

_INT_PREFIX = re.compile(r"[ \t\n\r\f\v]*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_MODES_BY_CHOICE = {"1": "normal", "2": "drought", "3": "overgrowth"}


def _read_line(prompt: str, input_func: Optional[InputFunc]) -> str:
    reader = input if input_func is None else input_func
    try:
        return reader(prompt)
    except EOFError:
        return ""


def _parse_leading_int(text: str) -> Optional[int]:
    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


def read_int_in_range(
    prompt: str,
    left: int,
    right: int,
    default: int,
    input_func: Optional[InputFunc] = None,
) -> int:
    """Ask for an integer in [left, right]; empty or bad input gives ``default``."""
    line = _read_line(f"{prompt} [{left}..{right}, Enter = {default}]: ", input_func)
    if not line:
        return default
    value = _parse_leading_int(line)
    if value is None:
        print("Invalid number, default is used.")
        return default
    if not left <= value <= right:
        print("Value out of range, default is used.")
        return default
    return value


def read_environment_mode(
    default_mode: str, input_func: Optional[InputFunc] = None
) -> str:
    """Ask for an environment mode from a numbered menu."""
    print()
    print("Choose environment mode:")
    for choice, mode in _MODES_BY_CHOICE.items():
        print(f"{choice} - {mode}")
    line = _read_line(f"Enter choice [1..3, Enter = current: {default_mode}]: ", input_func)
    if not line:
        return default_mode
    mode = _MODES_BY_CHOICE.get(line)
    if mode is None:
        print("Invalid choice, current mode is used.")
        return default_mode
    return mode


def format_title(
    engine: SimulationEngine, thread_count: int, delay_ms: int, paused: bool
) -> str:
    """Status line shown in the window title."""
    title = (
        f"tick={engine.tick}"
        f" plants={engine.count_plants()}"
        f" herbivores={engine.count_herbivores()}"
        f" predators={engine.count_predators()}"
        f" obstacles={engine.count_obstacles()}"
        f" threads={thread_count}"
        f" delay={delay_ms}ms"
    )
    return title + " [PAUSED]" if paused else title


def _save_stats(stats: StatisticsCollector, filename: str) -> None:
    try:
        stats.save_csv(filename)
    except OSError:
        print("Failed to save statistics file.")
    else:
        print(f"Statistics saved to {filename}")


def _run(config: Config) -> None:
    engine = SimulationEngine(config)
    stats = StatisticsCollector()
    renderer = Renderer(
        config.grid_width * config.cell_size,
        config.grid_height * config.cell_size,
        config.cell_size,
    )
    state = ControlState(tick_delay_ms=config.tick_delay_ms)

    engine.initialize_random()

    print()
    print("Controls:")
    print("Space - pause/resume")
    print("R - restart simulation")
    print("S - save statistics")
    print("Up/Down - change speed")
    print()

    try:
        while renderer.is_open():
            state.restart_requested = False
            state.save_requested = False
            renderer.process_events(state)
            if not renderer.is_open():
                break

            if state.restart_requested:
                engine.initialize_random()
                stats = StatisticsCollector()
                state.paused = False
                print("Simulation restarted.")

            if state.save_requested:
                _save_stats(stats, config.stats_output)

            if not state.paused:
                engine.step()
                stats.add(engine.snapshot())

            title = format_title(engine, config.thread_count, state.tick_delay_ms, state.paused)
            renderer.render(engine.grid, title)
            time.sleep(state.tick_delay_ms / 1000)
    finally:
        renderer.close()

    _save_stats(stats, config.stats_output)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load settings, ask for run options and run the windowed simulation."""
    parser = argparse.ArgumentParser(prog="ecosim", description="Ecosystem simulation.")
    parser.add_argument("--config", default="config.ini", help="settings file to load")
    args = parser.parse_args(argv)

    config = Config()
    try:
        config.load_from_file(args.config)
    except OSError:
        print("Warning: could not load config.ini, default values will be used.")
    except ConfigError as error:
        print(f"Configuration error: {error}", file=sys.stderr)
        return 1
    else:
        print("Config loaded from build folder.")

    print()
    print("==== Ecosystem Simulation Menu ====")
    config.environment_mode = read_environment_mode(config.environment_mode)
    config.thread_count = read_int_in_range("Thread count", 1, 32, config.thread_count)
    config.tick_delay_ms = read_int_in_range("Tick delay (ms)", 1, 1000, config.tick_delay_ms)
    config.ticks_to_run = read_int_in_range(
        "Ticks to run in statistics", 1, 100000, config.ticks_to_run
    )

    try:
        config.validate()
    except ConfigError as error:
        print(f"Configuration error: {error}", file=sys.stderr)
        return 1

    _run(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())