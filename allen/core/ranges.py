import logging
from typing import Any, Optional

import pandas as pd

from allen.core.domain import Domain
from allen.core.exceptions import ErrorMessages, InvalidDataTypeError
from allen.core.interval import Interval, NonEmptyInterval
from allen.core.types import IntervalBoundary
from allen.relations.types import Relation

logger = logging.getLogger(__name__)


def parse_timestamp(value: IntervalBoundary) -> IntervalBoundary:
    """Parses a string boundary as a pandas.Timestamp; other values pass through"""
    if not isinstance(value, str):
        return value
    try:
        return pd.Timestamp(value)
    except ValueError as e:
        raise InvalidDataTypeError(ErrorMessages.UNPARSEABLE_TIMESTAMP.format(value)) from e


def interval_from_bounds(
        start: IntervalBoundary,
        end: IntervalBoundary,
        inclusive: str = "left",
        domain: Optional[Domain] = None,
        parse_timestamps: bool = False,
) -> Interval:
    """
    Builds an Interval from a range literal.

    Args:
        start: lower endpoint, or None for unbounded
        end: upper endpoint, or None for unbounded
        inclusive: which endpoints the literal includes; one of
            "left", "right", "both" or "neither"
        domain: time domain of the values; inferred from the endpoints if omitted
        parse_timestamps: parse string endpoints as timestamps instead of
            comparing them as strings
    """
    if parse_timestamps:
        start, end = parse_timestamp(start), parse_timestamp(end)
    if domain is None:
        domain = Domain.infer_from(start, end)
        logger.debug(f"Inferred {domain.value} domain for range [{start!r}, {end!r}]")
    resolved_start, resolved_end = domain.resolve(start, end, inclusive)
    return Interval(start=resolved_start, end=resolved_end)


def _check_step(step: Optional[int]) -> None:
    if step not in (None, 1):
        raise InvalidDataTypeError(ErrorMessages.INVALID_STEP.format(step))


def interval_from_range(value: range) -> Interval:
    """A python range is a half-open run of integers"""
    _check_step(value.step)
    return Interval(start=value.start, end=value.stop)


def interval_from_slice(value: slice) -> Interval:
    """A slice is half-open and discrete; omitted endpoints are unbounded"""
    _check_step(value.step)
    return Interval(start=value.start, end=value.stop)


def interval_from_pandas(value: pd.Interval, domain: Optional[Domain] = None) -> Interval:
    """Converts a pandas.Interval, honouring its ``closed`` side(s)"""
    return interval_from_bounds(value.left, value.right, inclusive=value.closed, domain=domain)


def to_interval(value: Any, domain: Optional[Domain] = None) -> Interval:
    """
    Converts a range-like value into an Interval.

    Supports Interval, NonEmptyInterval, range, slice, pandas.Interval and
    2-tuples of (start, end), which are read as half-open.
    """
    if isinstance(value, Interval):
        return value
    if isinstance(value, NonEmptyInterval):
        return value.interval
    if isinstance(value, range):
        return interval_from_range(value)
    if isinstance(value, slice):
        return interval_from_slice(value)
    if isinstance(value, pd.Interval):
        return interval_from_pandas(value, domain=domain)
    if isinstance(value, tuple) and len(value) == 2:
        return interval_from_bounds(value[0], value[1], domain=domain)
    raise InvalidDataTypeError(ErrorMessages.UNSUPPORTED_BOUNDARY.format(type(value)))


def relation_from_ranges(s: Any, t: Any, domain: Optional[Domain] = None) -> Relation:
    """
    Classifies the relation between two range-like values.

    Raises:
        EmptyIntervalError: if either range is empty
    """
    s_interval = to_interval(s, domain=domain).try_into_non_empty()
    t_interval = to_interval(t, domain=domain).try_into_non_empty()
    return s_interval.relation_to(t_interval)
