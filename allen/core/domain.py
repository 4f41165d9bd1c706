from datetime import date, datetime, timedelta
from enum import Enum
from typing import Tuple

from numpy import bool_, floating, integer

from allen.core.exceptions import ErrorMessages, InvalidDataTypeError
from allen.core.types import IntervalBoundary
from allen.core.validation import IntervalValidator


class Domain(Enum):
    """
    The time domain an interval's values live in.

    DISCRETE values are quantized (integers, calendar dates): each value is a
    period of unit width, so an inclusive end of ``4`` covers up to, but not
    including, ``5``. CONTINUOUS values (floats, timestamps) are points of zero
    width, so inclusive and exclusive endpoints resolve to the same boundary.

    The domain only matters when a range literal is turned into an Interval
    (see ``resolve``). Once boundaries are resolved, classification compares
    them exactly, in either domain: touching boundaries always meet and never
    overlap, and no epsilon tolerance is applied to continuous values.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"

    @classmethod
    def infer(cls, value: IntervalBoundary) -> "Domain":
        """Picks the domain implied by a boundary value's type"""
        if isinstance(value, (bool, bool_)):
            raise InvalidDataTypeError(ErrorMessages.UNSUPPORTED_BOUNDARY.format(type(value)))
        if isinstance(value, (int, integer)):
            return cls.DISCRETE
        if isinstance(value, date) and not isinstance(value, datetime):
            return cls.DISCRETE
        return cls.CONTINUOUS

    @classmethod
    def infer_from(cls, *values: IntervalBoundary) -> "Domain":
        """Infers the domain from the first bounded value; all-unbounded is continuous"""
        for value in values:
            if value is not None:
                return cls.infer(value)
        return cls.CONTINUOUS

    @property
    def is_discrete(self) -> bool:
        return self is Domain.DISCRETE

    def successor(self, value: IntervalBoundary) -> IntervalBoundary:
        """Returns the value one quantum after ``value``"""
        if self.is_discrete and not isinstance(value, (bool, bool_)):
            if isinstance(value, (int, integer)):
                return value + 1
            # integer columns holding nulls arrive as floats
            if isinstance(value, (float, floating)) and float(value).is_integer():
                return value + 1
            if isinstance(value, date) and not isinstance(value, datetime):
                return value + timedelta(days=1)
        raise InvalidDataTypeError(ErrorMessages.NO_SUCCESSOR.format(type(value), self.value))

    def resolve(
            self,
            start: IntervalBoundary,
            end: IntervalBoundary,
            inclusive: str = "left",
    ) -> Tuple[IntervalBoundary, IntervalBoundary]:
        """
        Resolves a range literal into half-open ``[start, end)`` boundaries.

        ``inclusive`` uses the pandas vocabulary: "left", "right", "both" or
        "neither". Unbounded (None) endpoints are passed through.
        """
        IntervalValidator.validate_inclusive(inclusive)
        if not self.is_discrete:
            return start, end

        if start is not None and inclusive in ("right", "neither"):
            start = self.successor(start)
        if end is not None and inclusive in ("right", "both"):
            end = self.successor(end)
        return start, end
