from dataclasses import dataclass
from typing import Optional

from allen.core.boundaries import IntervalBoundaries, Ordering
from allen.core.exceptions import EmptyIntervalError, ErrorMessages, InvalidDataTypeError

INCLUSIVE_OPTIONS = ("left", "right", "both", "neither")


@dataclass
class ValidationResult:
    is_valid: bool
    message: Optional[str] = None


class IntervalValidator:
    """Validates interval boundaries and range literal options"""

    @staticmethod
    def validate_non_empty(boundaries: IntervalBoundaries) -> ValidationResult:
        """
        Allen's relations are only defined for intervals whose start lies
        strictly before their end. Empty and inverted intervals raise
        EmptyIntervalError; boundaries that cannot be ordered raise
        AmbiguousOrderError.
        """
        ordering = boundaries.internal_start.compare(boundaries.internal_end)
        if ordering is not Ordering.LESS:
            raise EmptyIntervalError(
                ErrorMessages.EMPTY_INTERVAL.format(boundaries.start, boundaries.end)
            )
        return ValidationResult(is_valid=True)

    @staticmethod
    def validate_inclusive(inclusive: str) -> ValidationResult:
        if inclusive not in INCLUSIVE_OPTIONS:
            raise InvalidDataTypeError(
                ErrorMessages.INVALID_INCLUSIVE.format(INCLUSIVE_OPTIONS, inclusive)
            )
        return ValidationResult(is_valid=True)
