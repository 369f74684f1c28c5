"""SimulationEngine — the per-tick turmite state machine.

Owns the rule table, the tile grid, and the ant, and advances them one
tick at a time:

1. Find the grid cell under the ant.
2. Look up the rule: ``next_entry`` for a painted cell, ``first_entry``
   for a fresh one.  Paint the rule's marker on the cell.
3. Turn the ant by the rule's command.
4. Move the ant one step forward.

A tick always runs to completion; pausing only skips future ticks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

from turmite.agent.ant import AntState
from turmite.pattern.table import Marker, PatternTable
from turmite.pattern.turns import TurnCommand, alphabet_by_name
from turmite.simulation.config import SimulationConfig
from turmite.world.grid import Coord, TileGrid
from turmite.world.heading import Heading

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepRecord:
    """What one tick did.

    Attributes:
        tick: Tick number after the step (first step is 1).
        coord: Cell that was painted.
        marker: Marker written to that cell.
        turn: Turn command applied.
        first_visit: True if the cell had never been painted before.
    """

    tick: int
    coord: Coord
    marker: Marker
    turn: TurnCommand
    first_visit: bool


@dataclass
class SimulationEngine:
    """Drives the turmite forward tick by tick.

    Attributes:
        table: Read-only rule table.
        grid: Painted tiles (written only by :meth:`step`).
        ant: The agent's position and heading.
        tick: Number of completed ticks.
        paused: When set, :meth:`tick_if_running` skips ticks.
    """

    table: PatternTable
    grid: TileGrid = field(default_factory=TileGrid)
    ant: AntState = field(default_factory=AntState)
    tick: int = 0
    paused: bool = False

    @classmethod
    def from_config(cls, config: SimulationConfig) -> SimulationEngine:
        """Validate ``config`` and build a fresh engine at the origin.

        Raises:
            ConfigurationError: If the config or its pattern is invalid.
        """
        config.validate()
        rng = np.random.default_rng(config.seed)
        table = PatternTable.parse(
            config.pattern,
            rng,
            alphabet=alphabet_by_name(config.alphabet),
            distinct_markers=config.distinct_markers,
        )
        ant = AntState(
            heading=Heading.from_name(config.initial_heading),
            step_length=config.step_length,
        )
        logger.info(
            "Built engine: pattern=%s alphabet=%s rules=%d",
            table.symbols,
            table.alphabet.name,
            len(table),
        )
        return cls(table=table, ant=ant)

    @property
    def visited_cells(self) -> int:
        return len(self.grid)

    def step(self) -> StepRecord:
        """Advance the simulation by exactly one tick.

        Returns:
            A record of the cell painted and the turn taken.

        Raises:
            MarkerLookupError: If the current cell holds a marker that is
                not in the rule table.
        """
        coord = self.ant.cell
        current = self.grid.get(coord)
        if current is None:
            rule = self.table.first_entry()
        else:
            rule = self.table.next_entry(current)
        self.grid.set(coord, rule.marker)

        self.ant.turn(rule.turn)
        self.ant.advance()

        self.tick += 1
        logger.debug(
            "tick %d: painted %s, turned %s, now facing %s",
            self.tick,
            coord,
            rule.turn.name,
            self.ant.heading.name,
        )
        return StepRecord(
            tick=self.tick,
            coord=coord,
            marker=rule.marker,
            turn=rule.turn,
            first_visit=current is None,
        )

    def run(self, ticks: int) -> list[StepRecord]:
        """Run the simulation for a fixed number of ticks.

        Ignores :attr:`paused`; callers that honour pausing should use
        :meth:`tick_if_running`.

        Args:
            ticks: Number of ticks to advance.

        Returns:
            One record per tick, in order.
        """
        return [self.step() for _ in range(ticks)]

    def tick_if_running(self) -> StepRecord | None:
        """Step once unless paused.  Returns None for a skipped tick."""
        if self.paused:
            return None
        return self.step()

    def toggle_pause(self) -> bool:
        """Flip the pause gate and return the new state."""
        self.paused = not self.paused
        state = "paused" if self.paused else "resumed"
        logger.info("Simulation %s at tick %d", state, self.tick)
        return self.paused
