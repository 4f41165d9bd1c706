from itertools import product

import pytest

from allen.core.boundaries import Ordering
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

LESS, EQUAL, GREATER = Ordering.LESS, Ordering.EQUAL, Ordering.GREATER

ALL_CHECKERS = [
    PrecedesChecker(), PrecededByChecker(), MeetsChecker(), MetByChecker(), EqualsChecker(),
    StartsChecker(), StartedByChecker(), FinishesChecker(), FinishedByChecker(),
    ContainsChecker(), ContainedByChecker(), OverlapsChecker(), OverlappedByChecker(),
]


def atoms(bb, be, eb, ee):
    return AtomicRelations(bb=bb, be=be, eb=eb, ee=ee)


class TestAtomicRelations:
    def test_from_intervals(self):
        s = NonEmptyInterval.create(1, 4)
        t = NonEmptyInterval.create(4, 8)

        assert AtomicRelations.from_intervals(s, t) == atoms(LESS, LESS, EQUAL, LESS)
        assert AtomicRelations.from_intervals(t, s) == atoms(GREATER, EQUAL, GREATER, GREATER)

    def test_from_unbounded_intervals(self):
        s = NonEmptyInterval.create(None, 4)
        t = NonEmptyInterval.create(None, None)

        assert AtomicRelations.from_intervals(s, t) == atoms(EQUAL, LESS, GREATER, LESS)


class TestCheckers:
    @pytest.mark.parametrize("checker, matching, not_matching", [
        (PrecedesChecker(), atoms(LESS, LESS, LESS, LESS), atoms(LESS, LESS, EQUAL, LESS)),
        (PrecededByChecker(), atoms(GREATER, GREATER, GREATER, GREATER),
         atoms(GREATER, EQUAL, GREATER, GREATER)),
        (MeetsChecker(), atoms(LESS, LESS, EQUAL, LESS), atoms(LESS, LESS, GREATER, LESS)),
        (MetByChecker(), atoms(GREATER, EQUAL, GREATER, GREATER), atoms(GREATER, LESS, GREATER, GREATER)),
        (EqualsChecker(), atoms(EQUAL, LESS, GREATER, EQUAL), atoms(EQUAL, LESS, GREATER, LESS)),
        (StartsChecker(), atoms(EQUAL, LESS, GREATER, LESS), atoms(EQUAL, LESS, GREATER, GREATER)),
        (StartedByChecker(), atoms(EQUAL, LESS, GREATER, GREATER), atoms(EQUAL, LESS, GREATER, LESS)),
        (FinishesChecker(), atoms(GREATER, LESS, GREATER, EQUAL), atoms(LESS, LESS, GREATER, EQUAL)),
        (FinishedByChecker(), atoms(LESS, LESS, GREATER, EQUAL), atoms(GREATER, LESS, GREATER, EQUAL)),
        (ContainsChecker(), atoms(LESS, LESS, GREATER, GREATER), atoms(LESS, LESS, GREATER, EQUAL)),
        (ContainedByChecker(), atoms(GREATER, LESS, GREATER, LESS), atoms(EQUAL, LESS, GREATER, LESS)),
        (OverlapsChecker(), atoms(LESS, LESS, GREATER, LESS), atoms(LESS, LESS, EQUAL, LESS)),
        (OverlappedByChecker(), atoms(GREATER, LESS, GREATER, GREATER),
         atoms(GREATER, EQUAL, GREATER, GREATER)),
    ])
    def test_checker(self, checker, matching, not_matching):
        assert checker.check(matching) is True
        assert checker.check(not_matching) is False

    def test_exactly_one_checker_matches_each_pair(self):
        # every non-empty interval over 0..4 plus the unbounded variants
        points = range(5)
        intervals = [NonEmptyInterval.create(start, end) for start, end in product(points, points) if start < end]
        intervals += [NonEmptyInterval.create(None, 2), NonEmptyInterval.create(2, None),
                      NonEmptyInterval.create(None, None)]

        for s, t in product(intervals, intervals):
            relation_atoms = AtomicRelations.from_intervals(s, t)
            matches = [checker for checker in ALL_CHECKERS if checker.check(relation_atoms)]
            assert len(matches) == 1, f"{s} vs {t} matched {matches}"
