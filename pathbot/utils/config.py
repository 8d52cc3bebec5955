"""Simulation configuration loaded from properties-style files."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"true", "yes", "on", "1"}
_FALSE_VALUES = {"false", "no", "off", "0"}


class ConfigError(ValueError):
    """Raised when a configuration value cannot be parsed."""


@dataclass
class SimulationConfig:
    """Configuration for a simulation run."""
    iterations: int = 200
    delay_ms: int = 200
    debug: bool = True

    def __post_init__(self):
        if self.iterations <= 0:
            raise ConfigError(f"ITERATIONS must be positive, got {self.iterations}")
        if self.delay_ms < 0:
            raise ConfigError(f"DELAY must not be negative, got {self.delay_ms}")

    @classmethod
    def from_properties(cls, properties: Dict[str, str]) -> 'SimulationConfig':
        """Create a config from parsed KEY=VALUE pairs. Unknown keys are ignored."""
        defaults = cls()
        return cls(
            iterations=_parse_int(properties, "ITERATIONS", defaults.iterations),
            delay_ms=_parse_int(properties, "DELAY", defaults.delay_ms),
            debug=_parse_bool(properties, "DEBUG", defaults.debug),
        )


def parse_properties(lines: Iterable[str]) -> Dict[str, str]:
    """
    Parse Java-properties style lines.
    '#' and '!' start comments; '=' or ':' separates key and value.
    """
    properties: Dict[str, str] = {}
    for line in lines:
        line = line.strip()
        if not line or line[0] in "#!":
            continue

        separators = [i for i in (line.find("="), line.find(":")) if i >= 0]
        if not separators:
            properties[line] = ""
            continue

        split_at = min(separators)
        properties[line[:split_at].strip()] = line[split_at + 1:].strip()
    return properties


def load_config(filepath: Optional[Union[str, Path]]) -> SimulationConfig:
    """
    Load configuration from a file.
    A missing file, or no file at all, gives the defaults.
    """
    if filepath is None:
        return SimulationConfig()

    path = Path(filepath)
    if not path.exists():
        logger.warning("Config file %s not found, using defaults", path)
        return SimulationConfig()

    with open(path, "r") as f:
        config = SimulationConfig.from_properties(parse_properties(f))
    logger.debug("Loaded config from %s: %s", path, config)
    return config


def _parse_int(properties: Dict[str, str], key: str, default: int) -> int:
    value = properties.get(key)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f"{key} must be an integer, got {value!r}") from None


def _parse_bool(properties: Dict[str, str], key: str, default: bool) -> bool:
    value = properties.get(key)
    if value is None or value == "":
        return default
    lowered = value.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"{key} must be true or false, got {value!r}")
