"""Shared fixtures for the turmite test suite."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.random import Generator

from turmite.pattern.table import Marker, PatternEntry, PatternTable
from turmite.pattern.turns import TurnCommand
from turmite.simulation.config import SimulationConfig
from turmite.simulation.engine import SimulationEngine


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def default_config() -> SimulationConfig:
    """Default simulation config (no YAML file needed), seeded."""
    return SimulationConfig(seed=7)


@pytest.fixture
def langton_table() -> PatternTable:
    """A hand-built ``RL`` table with easy-to-read markers."""
    return PatternTable(
        entries=(
            PatternEntry(Marker(1.0, 0.0, 0.0), TurnCommand.RIGHT),
            PatternEntry(Marker(0.0, 1.0, 0.0), TurnCommand.LEFT),
        ),
    )


@pytest.fixture
def langton_engine(langton_table: PatternTable) -> SimulationEngine:
    """An engine at the origin facing north, driven by ``langton_table``."""
    return SimulationEngine(table=langton_table)
