from dataclasses import dataclass
from typing import TYPE_CHECKING

from allen.core.boundaries import Ordering

if TYPE_CHECKING:
    from allen.core.interval import NonEmptyInterval


@dataclass(frozen=True)
class AtomicRelations:
    """
    The four boundary comparisons every Allen relation is built from.

    For intervals ``s`` and ``t`` with begin ``b`` and end ``e``:

    - ``bb``: b(s) vs b(t)
    - ``be``: b(s) vs e(t)
    - ``eb``: e(s) vs b(t)
    - ``ee``: e(s) vs e(t)

    Each comparison is computed exactly once; the relation checkers only
    inspect these orderings.
    """

    bb: Ordering
    be: Ordering
    eb: Ordering
    ee: Ordering

    @classmethod
    def from_intervals(cls, s: "NonEmptyInterval", t: "NonEmptyInterval") -> "AtomicRelations":
        return cls(
            bb=s.start_bound.compare(t.start_bound),
            be=s.start_bound.compare(t.end_bound),
            eb=s.end_bound.compare(t.start_bound),
            ee=s.end_bound.compare(t.end_bound),
        )
