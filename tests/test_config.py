import pytest

from pathbot.utils.config import (
    SimulationConfig, ConfigError, parse_properties, load_config,
)


def test_defaults():
    config = SimulationConfig()

    assert config.iterations == 200
    assert config.delay_ms == 200
    assert config.debug is True


def test_parse_properties_handles_comments_and_separators():
    properties = parse_properties([
        "# comment",
        "! another comment",
        "",
        "ITERATIONS = 50",
        "DELAY:10",
        "TILESIZE=50",
        "FLAG",
    ])

    assert properties == {"ITERATIONS": "50", "DELAY": "10", "TILESIZE": "50", "FLAG": ""}


def test_from_properties_ignores_unknown_keys():
    config = SimulationConfig.from_properties(
        {"ITERATIONS": "50", "DEBUG": "false", "TILESIZE": "50"}
    )

    assert config == SimulationConfig(iterations=50, delay_ms=200, debug=False)


@pytest.mark.parametrize("properties", [
    {"ITERATIONS": "many"},
    {"DELAY": "1.5"},
    {"DEBUG": "maybe"},
    {"ITERATIONS": "0"},
    {"DELAY": "-1"},
])
def test_invalid_values(properties):
    with pytest.raises(ConfigError):
        SimulationConfig.from_properties(properties)


def test_load_config_from_file(tmp_path):
    path = tmp_path / "config.txt"
    path.write_text("ITERATIONS=25\nDELAY=0\nDEBUG=False\n")

    assert load_config(path) == SimulationConfig(iterations=25, delay_ms=0, debug=False)


def test_missing_config_gives_defaults(tmp_path):
    assert load_config(tmp_path / "absent.txt") == SimulationConfig()
    assert load_config(None) == SimulationConfig()
