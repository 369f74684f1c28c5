"""AntState -- the turmite's position, heading, and sprite rotation.

Position lives in continuous pixel space and moves exactly one
``step_length`` per tick, so it always sits on a cell centre.  ``cell``
converts it back to integer grid coordinates.
"""

from __future__ import annotations

from dataclasses import dataclass

from turmite.pattern.turns import TurnCommand
from turmite.world.heading import Heading


@dataclass
class AntState:
    """The single agent walking the grid.

    Attributes:
        x: Horizontal position in pixels.
        y: Vertical position in pixels (grows northward).
        heading: Current facing direction.
        step_length: Pixels moved per tick (one grid cell).
        rotation: Accumulated sprite rotation in degrees, kept in
            ``[0, 360)``.  Only renderers read it.
    """

    x: float = 0.0
    y: float = 0.0
    heading: Heading = Heading.NORTH
    step_length: float = 20.0
    rotation: float = 0.0

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def cell(self) -> tuple[int, int]:
        """Grid coordinate of the tile under the ant."""
        return (
            round(self.x / self.step_length),
            round(self.y / self.step_length),
        )

    def turn(self, command: TurnCommand) -> None:
        """Rotate the heading (and sprite) by ``command``."""
        self.heading = self.heading.turn(command)
        self.rotation = (self.rotation + command.rotation_degrees) % 360.0

    def advance(self) -> None:
        """Move one step along the current heading."""
        self.x += self.heading.dx * self.step_length
        self.y += self.heading.dy * self.step_length
