from abc import ABC, abstractmethod

from allen.core.boundaries import Ordering
from allen.relations.atomic import AtomicRelations


class RelationChecker(ABC):
    """Abstract base class for relation checking strategies"""

    def check(self, atoms: AtomicRelations) -> bool:
        return self._check_impl(atoms)

    @abstractmethod
    def _check_impl(self, atoms: AtomicRelations) -> bool:
        """Implementation of the specific relation test"""
        pass


class PrecedesChecker(RelationChecker):
    """Checks if interval ends strictly before other starts"""

    def _check_impl(self, atoms: AtomicRelations) -> bool:
        return atoms.eb is Ordering.LESS


class PrecededByChecker(RelationChecker):
    """Checks if interval starts strictly after other ends"""

    def _check_impl(self, atoms: AtomicRelations) -> bool:
        return atoms.be is Ordering.GREATER


class MeetsChecker(RelationChecker):
    """Checks if interval ends exactly where other starts"""

    def _check_impl(self, atoms: AtomicRelations) -> bool:
        return atoms.eb is Ordering.EQUAL


class MetByChecker(RelationChecker):
    """Checks if other ends exactly where interval starts"""

    def _check_impl(self, atoms: AtomicRelations) -> bool:
        return atoms.be is Ordering.EQUAL


class EqualsChecker(RelationChecker):
    """Checks if interval is identical to other"""

    def _check_impl(self, atoms: AtomicRelations) -> bool:
        return atoms.bb is Ordering.EQUAL and atoms.ee is Ordering.EQUAL


class StartsChecker(RelationChecker):
    """Checks if interval starts together with other but ends earlier"""

    def _check_impl(self, atoms: AtomicRelations) -> bool:
        return atoms.bb is Ordering.EQUAL and atoms.ee is Ordering.LESS


class StartedByChecker(RelationChecker):
    """Checks if other starts together with interval but ends earlier"""

    def _check_impl(self, atoms: AtomicRelations) -> bool:
        return atoms.bb is Ordering.EQUAL and atoms.ee is Ordering.GREATER


class FinishesChecker(RelationChecker):
    """Checks if interval ends together with other but starts later"""

    def _check_impl(self, atoms: AtomicRelations) -> bool:
        return atoms.ee is Ordering.EQUAL and atoms.bb is Ordering.GREATER


class FinishedByChecker(RelationChecker):
    """Checks if other ends together with interval but starts later"""

    def _check_impl(self, atoms: AtomicRelations) -> bool:
        return atoms.ee is Ordering.EQUAL and atoms.bb is Ordering.LESS


class ContainsChecker(RelationChecker):
    """Checks if interval strictly contains other on both sides"""

    def _check_impl(self, atoms: AtomicRelations) -> bool:
        return atoms.bb is Ordering.LESS and atoms.ee is Ordering.GREATER


class ContainedByChecker(RelationChecker):
    """Checks if interval lies strictly inside other"""

    def _check_impl(self, atoms: AtomicRelations) -> bool:
        return atoms.bb is Ordering.GREATER and atoms.ee is Ordering.LESS


class OverlapsChecker(RelationChecker):
    """Checks if interval starts first and ends inside other"""

    def _check_impl(self, atoms: AtomicRelations) -> bool:
        return (
            atoms.bb is Ordering.LESS
            and atoms.eb is Ordering.GREATER
            and atoms.ee is Ordering.LESS
        )


class OverlappedByChecker(RelationChecker):
    """Checks if other starts first and ends inside interval"""

    def _check_impl(self, atoms: AtomicRelations) -> bool:
        return (
            atoms.bb is Ordering.GREATER
            and atoms.be is Ordering.LESS
            and atoms.ee is Ordering.GREATER
        )
