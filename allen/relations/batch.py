import logging
from typing import Optional

from pandas import DataFrame, Series, isna
from pandas.api.types import is_float_dtype, is_integer_dtype

from allen.core.domain import Domain
from allen.core.exceptions import EmptyIntervalError
from allen.core.interval import NonEmptyInterval
from allen.core.ranges import interval_from_bounds, parse_timestamp
from allen.core.types import IntervalBoundary
from allen.relations.operations import ClassificationConfig

logger = logging.getLogger(__name__)


def _boundary(value: IntervalBoundary) -> IntervalBoundary:
    """Missing values (None, NaN, NaT) leave that side of the interval unbounded"""
    if value is None or isna(value):
        return None
    return value


def _is_integral(column: Series) -> bool:
    values = column.dropna()
    return bool((values % 1 == 0).all())


def infer_frame_domain(pdf: DataFrame, config: ClassificationConfig) -> Domain:
    """
    Infers a single domain for all boundary columns of ``pdf``.

    Numeric frames are discrete when they hold integers only. pandas stores an
    integer column holding nulls as float64, so float columns with only
    integral values count as integer columns, provided at least one boundary
    column is a true integer column. Other frames are decided by the first
    non-null boundary value.
    """
    columns = [pdf[field] for field in config.boundary_fields]
    if all(is_integer_dtype(column) or is_float_dtype(column) for column in columns):
        if any(is_integer_dtype(column) for column in columns) and all(
            is_integer_dtype(column) or _is_integral(column) for column in columns
        ):
            return Domain.DISCRETE
        return Domain.CONTINUOUS

    for column in columns:
        values = column.dropna()
        if not values.empty:
            value = values.iloc[0]
            if config.parse_timestamps:
                value = parse_timestamp(value)
            return Domain.infer(value)
    return Domain.CONTINUOUS


def _to_non_empty(
        start: IntervalBoundary,
        end: IntervalBoundary,
        config: ClassificationConfig,
        domain: Optional[Domain],
) -> NonEmptyInterval:
    return interval_from_bounds(
        _boundary(start),
        _boundary(end),
        inclusive=config.inclusive,
        domain=domain,
        parse_timestamps=config.parse_timestamps,
    ).try_into_non_empty()


def classify_row(
        left_start: IntervalBoundary,
        left_end: IntervalBoundary,
        right_start: IntervalBoundary,
        right_end: IntervalBoundary,
        config: ClassificationConfig,
        domain: Optional[Domain] = None,
) -> Optional[str]:
    """
    Returns the label of the relation of the left interval to the right one,
    or None for an empty interval when ``config.on_empty`` is "null".

    ``domain`` overrides ``config.domain``; with neither set, each interval's
    domain is inferred from its own values.
    """
    domain = domain or config.domain
    try:
        left = _to_non_empty(left_start, left_end, config, domain)
        right = _to_non_empty(right_start, right_end, config, domain)
    except EmptyIntervalError:
        if config.on_empty == "raise":
            raise
        return None
    return left.relation_to(right).label


def classify_pairs(pdf: DataFrame, config: Optional[ClassificationConfig] = None) -> Series:
    """
    Classifies every row of ``pdf`` as a pair of intervals.

    Args:
        pdf: DataFrame holding the four boundary columns named by ``config``
        config: column mapping and behaviour; defaults to ClassificationConfig()

    Returns:
        Series of relation labels aligned with ``pdf``'s index
    """
    config = config or ClassificationConfig()

    missing = [field for field in config.boundary_fields if field not in pdf.columns]
    if missing:
        raise ValueError(f"Missing boundary columns: {missing}")

    domain = config.domain
    if domain is None:
        domain = infer_frame_domain(pdf, config)
        logger.debug(f"Inferred {domain.value} domain for {len(pdf)} interval pairs")

    rows = pdf[list(config.boundary_fields)].itertuples(index=False, name=None)
    labels = [classify_row(*row, config=config, domain=domain) for row in rows]

    unclassified = sum(label is None for label in labels)
    if unclassified:
        logger.warning(
            f"{unclassified} of {len(labels)} interval pairs contained an empty interval "
            f"and were left unclassified"
        )

    return Series(labels, index=pdf.index, dtype=object, name=config.relation_field)


def classify_frame(pdf: DataFrame, config: Optional[ClassificationConfig] = None) -> DataFrame:
    """Returns a copy of ``pdf`` with the relation label column appended"""
    config = config or ClassificationConfig()
    result = pdf.copy()
    result[config.relation_field] = classify_pairs(pdf, config)
    return result
