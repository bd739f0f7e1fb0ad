import pytest

from ecosim.config import Config, ConfigError, parse_ini


def test_defaults_match_source():
    config = Config()
    assert config.grid_width == 120
    assert config.grid_height == 90
    assert config.plant_growth_probability == 0.03
    assert config.stats_output == "simulation_stats.csv"
    assert config.environment_mode == "normal"
    assert config.random_seed == 42


def test_defaults_are_valid():
    config = Config()
    config.validate()
    assert config.thread_count == 4


def test_parse_ini_skips_comments_blanks_and_lines_without_equals():
    text = "# comment\n\n  grid_width = 10  \nnot a setting\ncell_size=3\n"
    assert parse_ini(text) == {"grid_width": "10", "cell_size": "3"}


def test_parse_ini_splits_on_first_equals_and_last_wins():
    text = "stats_output = a=b.csv\nstats_output = c.csv\r\nmode = x=y\n"
    values = parse_ini(text)
    assert values["stats_output"] == "c.csv"
    assert values["mode"] == "x=y"


def test_parse_ini_indented_comment_is_skipped():
    assert parse_ini("   # grid_width = 5\n") == {}


def test_load_from_file_overrides_fields(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text(
        "grid_width = 30\n"
        "plant_growth_probability = 0.5\n"
        "environment_mode = drought\n"
        "stats_output = out.csv\n"
        "random_seed = 7\n"
        "unknown_key = 99\n",
        encoding="utf-8",
    )
    config = Config()
    config.load_from_file(path)
    assert config.grid_width == 30
    assert config.plant_growth_probability == 0.5
    assert config.environment_mode == "drought"
    assert config.stats_output == "out.csv"
    assert config.random_seed == 7
    assert config.grid_height == Config().grid_height


def test_load_from_missing_file_raises(tmp_path):
    config = Config()
    with pytest.raises(FileNotFoundError):
        config.load_from_file(tmp_path / "missing.ini")
    assert config == Config()


def test_integer_with_trailing_text_uses_leading_digits(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("thread_count = 8threads\n", encoding="utf-8")
    config = Config()
    config.load_from_file(path)
    assert config.thread_count == 8


def test_invalid_integer_raises(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("grid_width = wide\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        Config().load_from_file(path)


def test_out_of_range_integer_raises(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("grid_width = 99999999999\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        Config().load_from_file(path)


def test_invalid_float_raises(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("plant_growth_probability = often\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        Config().load_from_file(path)


@pytest.mark.parametrize(
    "changes, message",
    [
        ({"window_width": 0}, "Window size must be positive."),
        ({"grid_height": -1}, "Grid size must be positive."),
        ({"cell_size": 0}, "Cell size must be positive."),
        ({"initial_predators": -1}, "Initial entity counts must be non-negative."),
        ({"plant_growth_probability": 1.5}, "plant_growth_probability must be in [0, 1]."),
        ({"herbivore_move_cost": -1}, "Invalid herbivore parameters."),
        ({"predator_max_age": 0}, "Invalid predator parameters."),
        ({"tick_delay_ms": 0}, "tick_delay_ms must be positive."),
        ({"thread_count": 0}, "thread_count must be positive."),
        ({"ticks_to_run": 0}, "ticks_to_run must be positive."),
        ({"render_every_n_ticks": -1}, "render_every_n_ticks must be non-negative."),
        (
            {"environment_mode": "flood"},
            "environment_mode must be normal, drought or overgrowth.",
        ),
        ({"stats_output": ""}, "stats_output must not be empty."),
    ],
)
def test_validate_reports_first_problem(changes, message):
    config = Config(**changes)
    with pytest.raises(ConfigError) as excinfo:
        config.validate()
    assert str(excinfo.value) == message


def test_validate_checks_in_source_order():
    config = Config(window_width=0, grid_width=0)
    with pytest.raises(ConfigError, match="Window size"):
        config.validate()


def test_zero_render_interval_and_bounds_of_probability_are_valid():
    for probability in (0.0, 1.0):
        config = Config(render_every_n_ticks=0, plant_growth_probability=probability)
        config.validate()
        assert config.plant_growth_probability == probability