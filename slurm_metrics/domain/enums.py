"""Domain enums for query modes and entry outcomes."""

from enum import Enum


class QueryMode(str, Enum):
    """Query execution mode enum."""

    INSTANT = "instant"
    RANGE = "range"


class RangeUnit(str, Enum):
    """Range window unit enum."""

    DAY = "day"


class EntryStatus(str, Enum):
    """Aggregated entry status enum."""

    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
