"""Turn commands and the alphabets that map pattern symbols onto them.

A pattern string such as ``"RLR"`` is read one symbol at a time; each
symbol the active alphabet recognises becomes one rule-table entry.  The
alphabet also decides how marker colours are drawn, mirroring the two
configurations the simulator ships with:

- **classic** -- left/right only, yellow-green markers (no blue channel).
- **extended** -- left/right/u-turn/no-turn, full-colour markers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from turmite.errors import ConfigurationError


class TurnCommand(Enum):
    """Instruction read from a marker: how the ant turns before moving.

    The value is the pattern symbol (lower-case).
    """

    LEFT = "l"
    RIGHT = "r"
    U_TURN = "u"
    NO_TURN = "n"

    @property
    def symbol(self) -> str:
        """Upper-case pattern symbol, as users usually write it."""
        return self.value.upper()

    @property
    def rotation_degrees(self) -> float:
        """Sprite rotation implied by this turn (counter-clockwise positive)."""
        return _ROTATION_DEGREES[self]


_ROTATION_DEGREES: dict[TurnCommand, float] = {
    TurnCommand.LEFT: 90.0,
    TurnCommand.RIGHT: -90.0,
    TurnCommand.U_TURN: 180.0,
    TurnCommand.NO_TURN: 0.0,
}


@dataclass(frozen=True)
class TurnAlphabet:
    """A named set of usable turn commands plus its marker colour profile.

    Attributes:
        name: Identifier used in config files and on the command line.
        commands: Turn commands a pattern may use.
        channel_low: Inclusive lower bound for random colour channels.
        channel_high: Exclusive upper bound for random colour channels.
        blue_channel: Whether the blue channel is randomised (otherwise 0).
    """

    name: str
    commands: frozenset[TurnCommand]
    channel_low: float
    channel_high: float
    blue_channel: bool = True

    def lookup(self, char: str) -> TurnCommand | None:
        """Return the command for a single pattern character, if any."""
        try:
            command = TurnCommand(char.lower())
        except ValueError:
            return None
        return command if command in self.commands else None

    @property
    def symbols(self) -> str:
        """Valid symbols in canonical order, e.g. ``"L, R, U, N"``."""
        ordered = [c.symbol for c in TurnCommand if c in self.commands]
        return ", ".join(ordered)


CLASSIC = TurnAlphabet(
    name="classic",
    commands=frozenset({TurnCommand.LEFT, TurnCommand.RIGHT}),
    channel_low=0.1,
    channel_high=0.8,
    blue_channel=False,
)

EXTENDED = TurnAlphabet(
    name="extended",
    commands=frozenset(TurnCommand),
    channel_low=0.2,
    channel_high=0.8,
)

ALPHABETS: dict[str, TurnAlphabet] = {a.name: a for a in (CLASSIC, EXTENDED)}


def alphabet_by_name(name: str) -> TurnAlphabet:
    """Resolve an alphabet from its config name (case-insensitive).

    Raises:
        ConfigurationError: If no alphabet has that name.
    """
    try:
        return ALPHABETS[name.lower()]
    except KeyError:
        known = ", ".join(sorted(ALPHABETS))
        msg = f"unknown turn alphabet {name!r} (expected one of: {known})"
        raise ConfigurationError(msg) from None
