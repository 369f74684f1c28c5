"""Errors — the exception hierarchy raised by the turmite core.

Configuration problems (bad pattern strings, unknown option values) are
reported to the caller before a simulation starts.  Internal-consistency
errors mean the grid holds a marker the rule table never produced; they
indicate a programming defect, not bad input.
"""

from __future__ import annotations


class TurmiteError(Exception):
    """Base class for all turmite errors."""


class ConfigurationError(TurmiteError, ValueError):
    """A configuration value is missing, unknown, or out of range."""


class InvalidPatternError(ConfigurationError):
    """A turn pattern cannot be turned into a usable rule table."""


class InternalConsistencyError(TurmiteError, RuntimeError):
    """An invariant of the simulation state was violated."""


class MarkerLookupError(InternalConsistencyError):
    """A grid marker did not originate from the rule table.

    Attributes:
        marker: The marker that could not be matched.
    """

    def __init__(self, marker: object) -> None:
        self.marker = marker
        super().__init__(f"can't find matching marker {marker!r} in pattern table")
