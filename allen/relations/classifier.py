from collections import OrderedDict

from allen.core.exceptions import ErrorMessages, IntervalValidationError, InvalidDataTypeError
from allen.core.interval import NonEmptyInterval
from allen.relations.atomic import AtomicRelations
from allen.relations.detection import (
    ContainedByChecker,
    ContainsChecker,
    EqualsChecker,
    FinishedByChecker,
    FinishesChecker,
    MeetsChecker,
    MetByChecker,
    OverlappedByChecker,
    OverlapsChecker,
    PrecededByChecker,
    PrecedesChecker,
    StartedByChecker,
    StartsChecker,
)
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
    Relation,
)


class RelationClassifier:
    """
    Decides which of Allen's thirteen relations holds between two non-empty
    intervals.

    The checks run in a fixed order and the first match wins. Boundary
    equalities (meets, equals, starts, finishes) are tested before the strict
    containment and overlap checks, since any shared boundary value rules out
    a proper overlap or containment.
    """

    def __init__(self) -> None:
        self.checkers = OrderedDict([
            # 1. Disjoint relationships
            (PRECEDES, PrecedesChecker()),  # interval ends before other starts
            (IS_PRECEDED_BY, PrecededByChecker()),  # other ends before interval starts

            # 2. Boundary touching relationships
            (MEETS, MeetsChecker()),  # interval ends where other starts
            (IS_MET_BY, MetByChecker()),  # other ends where interval starts

            # 3. Exact equality
            (EQUALS, EqualsChecker()),

            # 4. Shared start
            (STARTS, StartsChecker()),  # interval ends first
            (IS_STARTED_BY, StartedByChecker()),  # other ends first

            # 5. Shared end
            (FINISHES, FinishesChecker()),  # interval starts later
            (IS_FINISHED_BY, FinishedByChecker()),  # other starts later

            # 6. Strict containment
            (CONTAINS, ContainsChecker()),
            (IS_CONTAINED_BY, ContainedByChecker()),

            # 7. Partial overlap
            (OVERLAPS, OverlapsChecker()),  # interval starts first
            (IS_OVERLAPPED_BY, OverlappedByChecker()),  # other starts first
        ])

    @staticmethod
    def validate_intervals(interval: NonEmptyInterval, other: NonEmptyInterval) -> None:
        """Only non-empty intervals take part in Allen's algebra"""
        for candidate in (interval, other):
            if not isinstance(candidate, NonEmptyInterval):
                raise InvalidDataTypeError(ErrorMessages.NOT_NON_EMPTY.format(type(candidate)))

    def classify(self, interval: NonEmptyInterval, other: NonEmptyInterval) -> Relation:
        """Returns the relation of ``interval`` to ``other``"""
        self.validate_intervals(interval, other)
        return self.classify_atomic(AtomicRelations.from_intervals(interval, other))

    def classify_atomic(self, atoms: AtomicRelations) -> Relation:
        for relation, checker in self.checkers.items():
            if checker.check(atoms):
                return relation

        # unreachable for orderings taken from two non-empty intervals
        raise IntervalValidationError(ErrorMessages.UNCLASSIFIED)


_CLASSIFIER = RelationClassifier()


def from_intervals(s: NonEmptyInterval, t: NonEmptyInterval) -> Relation:
    """Classifies the relation of ``s`` to ``t``"""
    return _CLASSIFIER.classify(s, t)
