import math
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import IntEnum
from typing import (
    Any,
    ClassVar,
    Optional,
    Protocol,
    Union,
)

from numpy import floating, integer
from pandas import Timestamp

from allen.core.exceptions import AmbiguousOrderError, ErrorMessages, InvalidDataTypeError
from allen.core.types import IntervalBoundary


class Ordering(IntEnum):
    """Outcome of comparing two boundary values"""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def compare_values(left: Any, right: Any) -> Ordering:
    """
    Compares two values using only their own ordering operators.

    Raises AmbiguousOrderError when the values are not totally ordered with
    respect to each other (e.g. NaN, a Decimal NaN that signals on comparison,
    or mixed types that refuse comparison).
    """
    try:
        if left < right:
            return Ordering.LESS
        if left == right:
            return Ordering.EQUAL
        if left > right:
            return Ordering.GREATER
    except (TypeError, ArithmeticError) as e:
        raise AmbiguousOrderError(ErrorMessages.AMBIGUOUS_ORDER.format(left, right)) from e
    raise AmbiguousOrderError(ErrorMessages.AMBIGUOUS_ORDER.format(left, right))


def _infinite_sign(value: Any) -> Optional[int]:
    """Returns +1/-1 for positive/negative infinity, None for anything else"""
    if isinstance(value, (float, floating)) and math.isinf(value):
        return 1 if value > 0 else -1
    if isinstance(value, Decimal) and value.is_infinite():
        return 1 if value > 0 else -1
    return None


class ToInternalProtocol(Protocol):
    def __call__(self, value: Any) -> Any: ...


@dataclass
class BoundaryConverter:
    """
    Handles conversion between user-provided boundary types and the internal
    comparable representation.
    """

    to_internal: ToInternalProtocol

    @classmethod
    def for_type(cls, sample_value: IntervalBoundary) -> "BoundaryConverter":
        """Factory method to create appropriate converter based on input type"""

        if isinstance(sample_value, integer):
            return cls(to_internal=int)
        elif isinstance(sample_value, floating):
            return cls(to_internal=float)
        # pandas.Timestamp is a datetime subclass and passes through unchanged
        elif isinstance(sample_value, datetime):
            return cls(to_internal=Timestamp)
        else:
            return cls(to_internal=lambda value: value)


@dataclass(frozen=True)
class BoundaryValue:
    """
    Wrapper class that maintains both the internal comparable value and the
    value as the user supplied it.
    """

    _value: Any
    _internal: Any

    @classmethod
    def from_user_value(cls, value: IntervalBoundary) -> "BoundaryValue":
        if value is None:
            raise InvalidDataTypeError(ErrorMessages.UNSUPPORTED_BOUNDARY.format(type(None)))
        converter = BoundaryConverter.for_type(value)
        return cls(_value=value, _internal=converter.to_internal(value))

    @property
    def internal_value(self) -> Any:
        """Get the internal comparable representation"""
        return self._internal

    def to_user_value(self) -> IntervalBoundary:
        """Convert back to the original user format"""
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundaryValue):
            return NotImplemented
        return bool(self._internal == other._internal)

    def __hash__(self) -> int:
        return hash(self._internal)


@dataclass(frozen=True, eq=False)
class _Bound:
    """
    An endpoint of an interval. A bound without a value is unbounded and sits
    at infinity on its own side: -inf for a start, +inf for an end.
    """

    value: Optional[BoundaryValue] = None
    _side: ClassVar[int] = 0

    @classmethod
    def create(cls, value: Union[IntervalBoundary, BoundaryValue]) -> "_Bound":
        if value is None or isinstance(value, BoundaryValue):
            return cls(value)
        return cls(BoundaryValue.from_user_value(value))

    @property
    def is_unbounded(self) -> bool:
        return self.value is None

    def _infinity(self) -> Optional[int]:
        if self.value is None:
            return self._side
        return _infinite_sign(self.value.internal_value)

    def compare(self, other: "_Bound") -> Ordering:
        """Orders this bound against another start or end bound"""
        mine, theirs = self._infinity(), other._infinity()
        if mine is None and theirs is None:
            return compare_values(self.value.internal_value, other.value.internal_value)

        # a finite value still has to be orderable against itself (rules out NaN)
        for bound, infinity in ((self, mine), (other, theirs)):
            if infinity is None:
                compare_values(bound.value.internal_value, bound.value.internal_value)

        return compare_values(mine or 0, theirs or 0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Bound):
            return NotImplemented
        try:
            return self.compare(other) is Ordering.EQUAL
        except AmbiguousOrderError:
            return False

    def __hash__(self) -> int:
        infinity = self._infinity()
        if infinity is not None:
            return hash(("infinity", infinity))
        return hash(self.value)

    def __lt__(self, other: "_Bound") -> bool:
        return self.compare(other) is Ordering.LESS

    def __le__(self, other: "_Bound") -> bool:
        return self.compare(other) is not Ordering.GREATER

    def __gt__(self, other: "_Bound") -> bool:
        return self.compare(other) is Ordering.GREATER

    def __ge__(self, other: "_Bound") -> bool:
        return self.compare(other) is not Ordering.LESS

    def to_user_value(self) -> IntervalBoundary:
        return None if self.value is None else self.value.to_user_value()


class StartBound(_Bound):
    """Lower endpoint; unbounded means -infinity"""

    _side = -1

    def __repr__(self) -> str:
        return f"StartBound({self.to_user_value()!r})"


class EndBound(_Bound):
    """Upper endpoint; unbounded means +infinity"""

    _side = 1

    def __repr__(self) -> str:
        return f"EndBound({self.to_user_value()!r})"


@dataclass(frozen=True)
class IntervalBoundaries:
    _start: StartBound
    _end: EndBound

    @classmethod
    def create(
            cls,
            start: Union[IntervalBoundary, BoundaryValue],
            end: Union[IntervalBoundary, BoundaryValue],
    ) -> "IntervalBoundaries":
        return cls(_start=StartBound.create(start), _end=EndBound.create(end))

    @property
    def start(self) -> IntervalBoundary:
        """Get start boundary in user format"""
        return self._start.to_user_value()

    @property
    def end(self) -> IntervalBoundary:
        """Get end boundary in user format"""
        return self._end.to_user_value()

    @property
    def internal_start(self) -> StartBound:
        return self._start

    @property
    def internal_end(self) -> EndBound:
        return self._end
