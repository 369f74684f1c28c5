"""Config — load simulation parameters from YAML files.

The pattern string, turn alphabet, RNG seed, tick rate, and ant geometry
live in YAML and are parsed into a typed dataclass here.  Values are
checked by :meth:`SimulationConfig.validate` before an engine is built.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from turmite.errors import ConfigurationError
from turmite.pattern.turns import alphabet_by_name
from turmite.world.heading import Heading

logger = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    """Top-level simulation configuration.

    Attributes:
        pattern: Turn pattern, e.g. ``"RL"`` (Langton's ant) or ``"RLLR"``.
        alphabet: Name of the turn alphabet (``"classic"`` or
            ``"extended"``).
        seed: RNG seed for marker colours; None draws fresh entropy.
        ticks_per_second: Rate at which the clock invokes the engine.
        step_length: Pixels per grid cell (and per ant move).
        initial_heading: Compass direction the ant starts facing.
        distinct_markers: Reject patterns whose random markers collide.
    """

    pattern: str = "RL"
    alphabet: str = "extended"
    seed: int | None = None
    ticks_per_second: float = 60.0
    step_length: float = 20.0
    initial_heading: str = "north"
    distinct_markers: bool = False

    @classmethod
    def from_yaml(cls, path: str | Path) -> SimulationConfig:
        """Load configuration from a YAML file.

        Missing keys fall back to the dataclass defaults.  Present keys
        must already have the right YAML type; nothing is coerced, so an
        empty ``pattern:`` is rejected rather than read as ``"None"``.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated SimulationConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ConfigurationError: If the file is not a YAML mapping or a
                value has the wrong type.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            msg = f"{path}: expected a mapping at top level"
            raise ConfigurationError(msg)

        values: dict[str, object] = {}
        for name, default in _defaults().items():
            value = data.get(name, default)
            try:
                _check_type(name, value)
            except ConfigurationError as exc:
                msg = f"{path}: {exc}"
                raise ConfigurationError(msg) from None
            if name in _NUMBER_FIELDS:
                value = float(value)
            values[name] = value

        logger.info("Loaded config from %s", path)
        return cls(**values)

    def validate(self) -> None:
        """Check every field, raising on the first bad value.

        Raises:
            ConfigurationError: If a value has the wrong type, is unknown,
                or is out of range.
        """
        for name in _defaults():
            _check_type(name, getattr(self, name))
        alphabet_by_name(self.alphabet)
        Heading.from_name(self.initial_heading)
        if self.ticks_per_second <= 0:
            msg = f"ticks_per_second must be positive, got {self.ticks_per_second}"
            raise ConfigurationError(msg)
        if self.step_length <= 0:
            msg = f"step_length must be positive, got {self.step_length}"
            raise ConfigurationError(msg)
        if self.seed is not None and self.seed < 0:
            msg = f"seed must be a non-negative integer, got {self.seed}"
            raise ConfigurationError(msg)


_STRING_FIELDS = frozenset({"pattern", "alphabet", "initial_heading"})
_NUMBER_FIELDS = frozenset({"ticks_per_second", "step_length"})


def _defaults() -> dict[str, object]:
    return {f.name: f.default for f in fields(SimulationConfig)}


def _check_type(name: str, value: object) -> None:
    """Raise ConfigurationError unless ``value`` suits field ``name``.

    ``bool`` is rejected wherever a number is expected.
    """
    if name in _STRING_FIELDS:
        ok = isinstance(value, str)
        expected = "a string"
    elif name in _NUMBER_FIELDS:
        ok = isinstance(value, (int, float)) and not isinstance(value, bool)
        expected = "a number"
    elif name == "seed":
        ok = value is None or (isinstance(value, int) and not isinstance(value, bool))
        expected = "an integer or null"
    else:
        ok = isinstance(value, bool)
        expected = "true or false"
    if not ok:
        msg = f"{name} must be {expected}, got {value!r}"
        raise ConfigurationError(msg)
