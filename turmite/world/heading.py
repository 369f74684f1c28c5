"""Heading — the ant's compass direction and its turn transitions.

Grid y grows upward, so NORTH moves toward larger y.
"""

from __future__ import annotations

from enum import Enum

from turmite.errors import ConfigurationError
from turmite.pattern.turns import TurnCommand


class Heading(Enum):
    """One of the four compass directions.  Values are unit vectors."""

    NORTH = (0, 1)
    EAST = (1, 0)
    SOUTH = (0, -1)
    WEST = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def angle(self) -> float:
        """Sprite angle in degrees, counter-clockwise from NORTH."""
        return _ANGLES[self]

    @classmethod
    def from_name(cls, name: str) -> Heading:
        """Parse a heading from a config string such as ``"north"``.

        Raises:
            ConfigurationError: If the name is not a compass direction.
        """
        try:
            return cls[name.upper()]
        except KeyError:
            msg = f"unknown heading {name!r} (expected north, east, south or west)"
            raise ConfigurationError(msg) from None

    def turn(self, command: TurnCommand) -> Heading:
        """Return the heading after applying ``command``."""
        return _TRANSITIONS[command][self]

    def opposite(self) -> Heading:
        return _TRANSITIONS[TurnCommand.U_TURN][self]


_ANGLES: dict[Heading, float] = {
    Heading.NORTH: 0.0,
    Heading.WEST: 90.0,
    Heading.SOUTH: 180.0,
    Heading.EAST: 270.0,
}

_TRANSITIONS: dict[TurnCommand, dict[Heading, Heading]] = {
    TurnCommand.LEFT: {
        Heading.NORTH: Heading.WEST,
        Heading.WEST: Heading.SOUTH,
        Heading.SOUTH: Heading.EAST,
        Heading.EAST: Heading.NORTH,
    },
    TurnCommand.RIGHT: {
        Heading.NORTH: Heading.EAST,
        Heading.EAST: Heading.SOUTH,
        Heading.SOUTH: Heading.WEST,
        Heading.WEST: Heading.NORTH,
    },
    TurnCommand.U_TURN: {
        Heading.NORTH: Heading.SOUTH,
        Heading.SOUTH: Heading.NORTH,
        Heading.EAST: Heading.WEST,
        Heading.WEST: Heading.EAST,
    },
    TurnCommand.NO_TURN: {h: h for h in Heading},
}
