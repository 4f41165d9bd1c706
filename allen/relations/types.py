from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import TYPE_CHECKING, Dict, Tuple

from allen.core.exceptions import ErrorMessages, InvalidDataTypeError

if TYPE_CHECKING:
    from allen.core.interval import NonEmptyInterval


class RelationFamily(Enum):
    """
    The seven families of Allen's interval relations. Every family except
    EQUALS pairs a relation with its converse (e.g. precedes / is preceded by).
    """

    PRECEDES = "precedes"
    MEETS = "meets"
    OVERLAPS = "overlaps"
    FINISHES = "finishes"
    CONTAINS = "contains"
    STARTS = "starts"
    EQUALS = "equals"


_CONVERSE_LABELS: Dict[RelationFamily, str] = {
    RelationFamily.PRECEDES: "is preceded by",
    RelationFamily.MEETS: "is met by",
    RelationFamily.OVERLAPS: "is overlapped by",
    RelationFamily.FINISHES: "is finished by",
    RelationFamily.CONTAINS: "is contained by",
    RelationFamily.STARTS: "is started by",
}


@total_ordering
@dataclass(frozen=True)
class Relation:
    """
    One of the thirteen relations between two intervals ``s`` and ``t``.

    A relation is a family plus an inversion flag: ``is_inverted=False`` reads
    "s <family> t", ``is_inverted=True`` reads "s is <family>-ed by t".
    EQUALS is its own converse and is never inverted.

    Relations are ordered by how early ``s`` starts relative to ``t`` and,
    within that, by how early ``s`` ends::

        precedes < meets < overlaps < is finished by < contains < starts
        < equals < is started by < is contained by < finishes
        < is overlapped by < is met by < is preceded by
    """

    family: RelationFamily
    is_inverted: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.family, RelationFamily):
            raise InvalidDataTypeError(f"family must be a RelationFamily, got {type(self.family)}")
        if not isinstance(self.is_inverted, bool):
            raise InvalidDataTypeError(f"is_inverted must be a bool, got {type(self.is_inverted)}")
        if self.family is RelationFamily.EQUALS and self.is_inverted:
            raise ValueError("equals is its own converse and cannot be inverted")

    @classmethod
    def from_intervals(cls, s: "NonEmptyInterval", t: "NonEmptyInterval") -> "Relation":
        """Classifies the relation of ``s`` to ``t``"""
        from allen.relations.classifier import from_intervals

        return from_intervals(s, t)

    @classmethod
    def all(cls) -> Tuple["Relation", ...]:
        """All thirteen relations, in relation order"""
        return _ORDERED_RELATIONS

    @classmethod
    def from_label(cls, label: str) -> "Relation":
        for relation in _ORDERED_RELATIONS:
            if relation.label == label:
                return relation
        raise ValueError(ErrorMessages.UNKNOWN_RELATION.format(label))

    @property
    def label(self) -> str:
        if self.is_inverted:
            return _CONVERSE_LABELS[self.family]
        return self.family.value

    def as_converse(self) -> "Relation":
        """Returns the relation of ``t`` to ``s``"""
        if self.family is RelationFamily.EQUALS:
            return self
        return Relation(self.family, not self.is_inverted)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Relation):
            return NotImplemented
        return _ORDERED_RELATIONS.index(self) < _ORDERED_RELATIONS.index(other)

    def __str__(self) -> str:
        return self.label


PRECEDES = Relation(RelationFamily.PRECEDES)
IS_PRECEDED_BY = Relation(RelationFamily.PRECEDES, is_inverted=True)
MEETS = Relation(RelationFamily.MEETS)
IS_MET_BY = Relation(RelationFamily.MEETS, is_inverted=True)
OVERLAPS = Relation(RelationFamily.OVERLAPS)
IS_OVERLAPPED_BY = Relation(RelationFamily.OVERLAPS, is_inverted=True)
FINISHES = Relation(RelationFamily.FINISHES)
IS_FINISHED_BY = Relation(RelationFamily.FINISHES, is_inverted=True)
CONTAINS = Relation(RelationFamily.CONTAINS)
IS_CONTAINED_BY = Relation(RelationFamily.CONTAINS, is_inverted=True)
STARTS = Relation(RelationFamily.STARTS)
IS_STARTED_BY = Relation(RelationFamily.STARTS, is_inverted=True)
EQUALS = Relation(RelationFamily.EQUALS)

_ORDERED_RELATIONS: Tuple[Relation, ...] = (
    PRECEDES,
    MEETS,
    OVERLAPS,
    IS_FINISHED_BY,
    CONTAINS,
    STARTS,
    EQUALS,
    IS_STARTED_BY,
    IS_CONTAINED_BY,
    FINISHES,
    IS_OVERLAPPED_BY,
    IS_MET_BY,
    IS_PRECEDED_BY,
)
