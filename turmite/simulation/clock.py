"""FixedRateClock — headless fixed-rate driver for the engine.

Converts elapsed wall-clock time into whole simulation ticks with a tick
accumulator, so the engine advances at ``ticks_per_second`` regardless of
how often the loop wakes up.  Pausing is delegated to the engine's pause
gate: while paused, no time accumulates and no ticks run.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING, ClassVar

from turmite.errors import ConfigurationError

if TYPE_CHECKING:
    from turmite.simulation.engine import SimulationEngine

logger = logging.getLogger(__name__)


class FixedRateClock:
    """Invokes ``engine.step`` at a fixed rate.

    Attributes:
        engine: The simulation engine to drive.
        ticks_per_second: Simulation ticks per real-time second.
    """

    # Speed presets for step_up / step_down
    _SPEED_STEPS: ClassVar[list[float]] = [
        0.5,
        1.0,
        3.0,
        5.0,
        10.0,
        15.0,
        30.0,
        60.0,
        120.0,
        300.0,
        600.0,
    ]

    def __init__(
        self,
        engine: SimulationEngine,
        ticks_per_second: float = 60.0,
        *,
        time_source: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialise the clock.

        Args:
            engine: The simulation engine to drive.
            ticks_per_second: Simulation ticks per real-time second.
            time_source: Monotonic clock returning seconds.
            sleep: Function used to wait between ticks.

        Raises:
            ConfigurationError: If ``ticks_per_second`` is not positive.
        """
        if ticks_per_second <= 0:
            msg = f"ticks_per_second must be positive, got {ticks_per_second}"
            raise ConfigurationError(msg)
        self.engine = engine
        self.ticks_per_second = ticks_per_second
        self._speed_index = self._nearest_speed(ticks_per_second)
        self._tick_accumulator = 0.0
        self._time_source = time_source
        self._sleep = sleep

    def _nearest_speed(self, tps: float) -> int:
        """Return the index of the closest speed preset."""
        best = 0
        best_diff = abs(self._SPEED_STEPS[0] - tps)
        for i, s in enumerate(self._SPEED_STEPS):
            diff = abs(s - tps)
            if diff < best_diff:
                best, best_diff = i, diff
        return best

    def speed_up(self) -> float:
        """Move to the next faster preset and return the new rate."""
        self._speed_index = min(len(self._SPEED_STEPS) - 1, self._speed_index + 1)
        self.ticks_per_second = self._SPEED_STEPS[self._speed_index]
        return self.ticks_per_second

    def slow_down(self) -> float:
        """Move to the next slower preset and return the new rate."""
        self._speed_index = max(0, self._speed_index - 1)
        self.ticks_per_second = self._SPEED_STEPS[self._speed_index]
        return self.ticks_per_second

    def advance(self, dt: float, *, max_ticks: int | None = None) -> int:
        """Account for ``dt`` seconds of wall time and run the ticks due.

        Args:
            dt: Seconds elapsed since the previous call.
            max_ticks: Upper bound on ticks run by this call.

        Returns:
            Number of ticks actually run.
        """
        if self.engine.paused:
            return 0
        self._tick_accumulator += self.ticks_per_second * dt
        steps = int(self._tick_accumulator)
        if max_ticks is not None:
            steps = min(steps, max_ticks)
        self._tick_accumulator -= steps
        for _ in range(steps):
            self.engine.tick_if_running()
        return steps

    def run(
        self,
        *,
        duration: float | None = None,
        max_ticks: int | None = None,
    ) -> int:
        """Main loop: sleep, accumulate, step.

        Stops once ``duration`` seconds have passed or ``max_ticks`` ticks
        have run, whichever comes first.  With neither limit it runs until
        interrupted.

        Returns:
            Number of ticks run.
        """
        start = last = self._time_source()
        done = 0
        logger.info("Clock running at %.1f ticks/s", self.ticks_per_second)

        while True:
            if max_ticks is not None and done >= max_ticks:
                break
            now = self._time_source()
            if duration is not None and now - start >= duration:
                break
            remaining = None if max_ticks is None else max_ticks - done
            done += self.advance(now - last, max_ticks=remaining)
            last = now
            self._sleep(1.0 / self.ticks_per_second)

        logger.info("Clock stopped after %d ticks", done)
        return done
