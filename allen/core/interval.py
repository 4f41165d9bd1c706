from typing import TYPE_CHECKING, Tuple

from allen.core.boundaries import EndBound, IntervalBoundaries, StartBound
from allen.core.exceptions import EmptyIntervalError, ErrorMessages, InvalidDataTypeError
from allen.core.types import IntervalBoundary
from allen.core.validation import IntervalValidator
from allen.relations.types import (
    CONTAINS,
    EQUALS,
    FINISHES,
    IS_CONTAINED_BY,
    IS_FINISHED_BY,
    IS_MET_BY,
    IS_OVERLAPPED_BY,
    IS_PRECEDED_BY,
    IS_STARTED_BY,
    MEETS,
    OVERLAPS,
    PRECEDES,
    STARTS,
)

if TYPE_CHECKING:
    from allen.relations.types import Relation


class Interval:
    """
    A stretch of time between a start and an end boundary.

    Boundaries may be any mutually ordered values (ints, floats, dates,
    timestamps, datetime strings, ...). A ``None`` boundary leaves that side
    unbounded. An Interval carries no validity guarantee: it may be empty
    (start == end) or inverted (start > end). Convert it with
    ``try_into_non_empty`` before relating it to other intervals.
    """

    def __init__(self, start: IntervalBoundary = None, end: IntervalBoundary = None):
        self._boundaries = IntervalBoundaries.create(start=start, end=end)

    @classmethod
    def create(cls, start: IntervalBoundary, end: IntervalBoundary) -> "Interval":
        return cls(start=start, end=end)

    @classmethod
    def starting_at(cls, start: IntervalBoundary) -> "Interval":
        """An interval bounded below only"""
        return cls(start=start)

    @classmethod
    def ending_at(cls, end: IntervalBoundary) -> "Interval":
        """An interval bounded above only"""
        return cls(end=end)

    @classmethod
    def full(cls) -> "Interval":
        """The interval covering the whole domain"""
        return cls()

    @property
    def start(self) -> IntervalBoundary:
        return self._boundaries.start

    @property
    def end(self) -> IntervalBoundary:
        return self._boundaries.end

    @property
    def boundaries(self) -> Tuple[IntervalBoundary, IntervalBoundary]:
        return self._boundaries.start, self._boundaries.end

    @property
    def interval_boundaries(self) -> IntervalBoundaries:
        return self._boundaries

    @property
    def start_bound(self) -> StartBound:
        return self._boundaries.internal_start

    @property
    def end_bound(self) -> EndBound:
        return self._boundaries.internal_end

    def is_empty(self) -> bool:
        """True if the start does not lie strictly before the end"""
        try:
            IntervalValidator.validate_non_empty(self._boundaries)
        except EmptyIntervalError:
            return True
        return False

    def try_into_non_empty(self) -> "NonEmptyInterval":
        """
        Converts this interval into a NonEmptyInterval.

        Raises:
            EmptyIntervalError: if start >= end
            AmbiguousOrderError: if start and end cannot be ordered
        """
        return NonEmptyInterval(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._boundaries == other._boundaries

    def __hash__(self) -> int:
        return hash(self._boundaries)

    def __repr__(self) -> str:
        return f"Interval(start={self.start!r}, end={self.end!r})"


class NonEmptyInterval:
    """
    An Interval whose start lies strictly before its end.

    The invariant is checked once, on construction, so every instance is a
    valid operand of Allen's interval algebra. Relations to other non-empty
    intervals are available through ``relation_to`` and the predicate methods,
    all of which are projections of the same classification.
    """

    def __init__(self, interval: Interval):
        if not isinstance(interval, Interval):
            raise InvalidDataTypeError(ErrorMessages.NOT_INTERVAL.format(type(interval)))
        IntervalValidator.validate_non_empty(interval.interval_boundaries)
        self._interval = interval

    @classmethod
    def try_from(cls, interval: Interval) -> "NonEmptyInterval":
        return cls(interval)

    @classmethod
    def create(cls, start: IntervalBoundary, end: IntervalBoundary) -> "NonEmptyInterval":
        return cls(Interval(start=start, end=end))

    @property
    def interval(self) -> Interval:
        return self._interval

    @property
    def start(self) -> IntervalBoundary:
        return self._interval.start

    @property
    def end(self) -> IntervalBoundary:
        return self._interval.end

    @property
    def boundaries(self) -> Tuple[IntervalBoundary, IntervalBoundary]:
        return self._interval.boundaries

    @property
    def start_bound(self) -> StartBound:
        return self._interval.start_bound

    @property
    def end_bound(self) -> EndBound:
        return self._interval.end_bound

    # Interval Relationships
    # ---------------------

    def relation_to(self, other: "NonEmptyInterval") -> "Relation":
        """Returns the relation of this interval to ``other``"""
        # deferred: the classifier module depends on this one
        from allen.relations.classifier import from_intervals

        return from_intervals(self, other)

    def precedes(self, other: "NonEmptyInterval") -> bool:
        return self.relation_to(other) == PRECEDES

    def is_preceded_by(self, other: "NonEmptyInterval") -> bool:
        return self.relation_to(other) == IS_PRECEDED_BY

    def meets(self, other: "NonEmptyInterval") -> bool:
        return self.relation_to(other) == MEETS

    def is_met_by(self, other: "NonEmptyInterval") -> bool:
        return self.relation_to(other) == IS_MET_BY

    def overlaps(self, other: "NonEmptyInterval") -> bool:
        return self.relation_to(other) == OVERLAPS

    def is_overlapped_by(self, other: "NonEmptyInterval") -> bool:
        return self.relation_to(other) == IS_OVERLAPPED_BY

    def starts(self, other: "NonEmptyInterval") -> bool:
        return self.relation_to(other) == STARTS

    def is_started_by(self, other: "NonEmptyInterval") -> bool:
        return self.relation_to(other) == IS_STARTED_BY

    def finishes(self, other: "NonEmptyInterval") -> bool:
        return self.relation_to(other) == FINISHES

    def is_finished_by(self, other: "NonEmptyInterval") -> bool:
        return self.relation_to(other) == IS_FINISHED_BY

    def contains(self, other: "NonEmptyInterval") -> bool:
        return self.relation_to(other) == CONTAINS

    def is_contained_by(self, other: "NonEmptyInterval") -> bool:
        return self.relation_to(other) == IS_CONTAINED_BY

    def equals(self, other: "NonEmptyInterval") -> bool:
        return self.relation_to(other) == EQUALS

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NonEmptyInterval):
            return NotImplemented
        return self._interval == other._interval

    def __hash__(self) -> int:
        return hash(self._interval)

    def __repr__(self) -> str:
        return f"NonEmptyInterval(start={self.start!r}, end={self.end!r})"
