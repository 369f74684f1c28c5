"""PatternTable — the cyclic marker-to-turn rule table.

A table is an ordered sequence of ``(marker, turn)`` entries built from a
pattern string.  Reading a marker ``entries[i].marker`` off the grid means
"paint ``entries[i + 1].marker`` (wrapping around) and turn
``entries[i].turn``".  Unvisited cells use :meth:`PatternTable.first_entry`.

Markers are random colours.  By default no uniqueness check is made, so two
entries can share a marker; lookups then resolve to the first match in
table order.  Pass ``distinct_markers=True`` to reject such tables instead.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from turmite.errors import InvalidPatternError, MarkerLookupError
from turmite.pattern.turns import EXTENDED, TurnAlphabet, TurnCommand

if TYPE_CHECKING:
    from numpy.random import Generator

logger = logging.getLogger(__name__)

_MIN_ENTRIES = 2


@dataclass(frozen=True)
class Marker:
    """An RGB colour painted on a tile.  Equality is exact per channel.

    Attributes:
        r: Red channel (0.0-1.0).
        g: Green channel (0.0-1.0).
        b: Blue channel (0.0-1.0).
    """

    r: float
    g: float
    b: float

    @classmethod
    def random(cls, rng: Generator, alphabet: TurnAlphabet) -> Marker:
        """Draw a fresh marker using the alphabet's colour profile."""
        lo, hi = alphabet.channel_low, alphabet.channel_high
        r = float(rng.uniform(lo, hi))
        g = float(rng.uniform(lo, hi))
        b = float(rng.uniform(lo, hi)) if alphabet.blue_channel else 0.0
        return cls(r, g, b)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class PatternEntry:
    """One rule: the marker and the turn command paired with it."""

    marker: Marker
    turn: TurnCommand


@dataclass(frozen=True)
class PatternTable:
    """Immutable cyclic rule table.

    Attributes:
        entries: Rules in pattern order (always at least two).
        alphabet: Alphabet the table was parsed with.
    """

    entries: tuple[PatternEntry, ...]
    alphabet: TurnAlphabet = EXTENDED

    def __post_init__(self) -> None:
        if len(self.entries) < _MIN_ENTRIES:
            msg = (
                "incorrect pattern: should be at least "
                f"{_MIN_ENTRIES} correct values ({self.alphabet.symbols})"
            )
            raise InvalidPatternError(msg)

    @classmethod
    def parse(
        cls,
        pattern: str,
        rng: Generator | None = None,
        *,
        alphabet: TurnAlphabet = EXTENDED,
        distinct_markers: bool = False,
    ) -> PatternTable:
        """Build a table from a pattern string such as ``"RL"`` or ``"ruln"``.

        Symbols are case-insensitive.  Characters outside the alphabet are
        skipped without complaint.  A marker is drawn for every character,
        recognised or not, so a seeded generator yields the same colours
        for the same input string.

        Args:
            pattern: Turn pattern, one symbol per rule.
            rng: Random generator for marker colours (fresh if omitted).
            alphabet: Which turn commands are recognised.
            distinct_markers: Reject tables whose random markers collide.

        Returns:
            The parsed table.

        Raises:
            InvalidPatternError: If fewer than two symbols are recognised,
                or if ``distinct_markers`` is set and two markers collide.
        """
        if rng is None:
            rng = np.random.default_rng()

        entries: list[PatternEntry] = []
        for char in pattern.lower():
            marker = Marker.random(rng, alphabet)
            command = alphabet.lookup(char)
            if command is not None:
                entries.append(PatternEntry(marker, command))

        table = cls(entries=tuple(entries), alphabet=alphabet)
        if distinct_markers and not table.has_distinct_markers:
            msg = f"pattern {pattern!r} produced duplicate markers"
            raise InvalidPatternError(msg)

        logger.debug("Parsed pattern %r into %d rules", pattern, len(table))
        return table

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[PatternEntry]:
        return iter(self.entries)

    @property
    def markers(self) -> tuple[Marker, ...]:
        return tuple(e.marker for e in self.entries)

    @property
    def turns(self) -> tuple[TurnCommand, ...]:
        return tuple(e.turn for e in self.entries)

    @property
    def symbols(self) -> str:
        """The recognised part of the source pattern, upper-cased."""
        return "".join(e.turn.symbol for e in self.entries)

    @property
    def has_distinct_markers(self) -> bool:
        return len(set(self.markers)) == len(self.entries)

    def index_of(self, marker: Marker) -> int | None:
        """Return the first entry index holding ``marker``, or None."""
        for i, entry in enumerate(self.entries):
            if entry.marker == marker:
                return i
        return None

    def first_entry(self) -> PatternEntry:
        """Rule applied to a cell the ant has never visited.

        Pairs the *second* marker with the *first* turn.  The very first
        paint on a fresh cell is therefore ``entries[1].marker``, and a
        fresh cell behaves as if it had carried ``entries[0].marker``.
        """
        return PatternEntry(self.entries[1].marker, self.entries[0].turn)

    def next_entry(self, current: Marker) -> PatternEntry:
        """Rule applied to a cell already painted with ``current``.

        Scans adjacent pairs ``(entries[i], entries[(i + 1) % N])`` in
        order and returns the following marker with ``entries[i].turn``
        for the first ``i`` whose marker equals ``current``.

        Raises:
            MarkerLookupError: If ``current`` is not in the table.
        """
        markers = self.markers
        following = markers[1:] + markers[:1]
        for marker, next_marker, turn in zip(markers, following, self.turns):
            if marker == current:
                return PatternEntry(next_marker, turn)
        raise MarkerLookupError(current)
