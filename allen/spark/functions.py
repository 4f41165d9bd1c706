import logging
from typing import Callable, Iterator, Optional

from pandas import DataFrame
from pyspark.sql.types import (
    ByteType,
    DateType,
    DecimalType,
    DoubleType,
    FloatType,
    IntegerType,
    LongType,
    ShortType,
    StringType,
    StructField,
    StructType,
    TimestampType,
)

from allen.core.domain import Domain
from allen.relations.batch import classify_frame
from allen.relations.operations import ClassificationConfig

logger = logging.getLogger(__name__)

_DISCRETE_TYPES = (ByteType, ShortType, IntegerType, LongType, DateType)


def is_boundary_col(col: StructField) -> bool:
    """Numeric, date and timestamp columns can hold interval boundaries"""
    return isinstance(
        col.dataType,
        (
            ByteType,
            ShortType,
            IntegerType,
            LongType,
            FloatType,
            DoubleType,
            DecimalType,
            DateType,
            TimestampType,
        ),
    )


def relation_struct_field(name: str = "relation") -> StructField:
    """Schema field for the relation label column"""
    return StructField(name, StringType(), True)


def relation_schema(schema: StructType, config: ClassificationConfig) -> StructType:
    """
    Output schema of ``make_classify_wrap`` for an input frame of ``schema``.

    Raises ValueError if a configured boundary column is missing or cannot
    hold boundary values.
    """
    fields = {field.name: field for field in schema.fields}
    for name in config.boundary_fields:
        if name not in fields:
            raise ValueError(f"Missing boundary column: {name}")
        if not is_boundary_col(fields[name]):
            raise ValueError(
                f"Column {name} of type {fields[name].dataType} cannot hold interval boundaries"
            )
    return StructType(schema.fields + [relation_struct_field(config.relation_field)])


def schema_domain(schema: StructType, config: ClassificationConfig) -> Domain:
    """
    Domain of the boundary columns in ``schema``: discrete when every boundary
    column holds integers or dates, continuous otherwise.
    """
    fields = {field.name: field for field in schema.fields}
    discrete = all(
        isinstance(fields[name].dataType, _DISCRETE_TYPES)
        for name in config.boundary_fields
        if name in fields
    )
    return Domain.DISCRETE if discrete else Domain.CONTINUOUS


def make_classify_wrap(
    config: ClassificationConfig,
    schema: Optional[StructType] = None,
) -> Callable[[Iterator[DataFrame]], Iterator[DataFrame]]:
    """
    Returns a function for ``DataFrame.mapInPandas`` that appends the relation
    label of each row's interval pair. Pair it with ``relation_schema`` for the
    output schema.

    Passing the input ``schema`` fixes the domain for every batch; Arrow hands
    nullable integer columns over as floats, which would otherwise be inferred
    per batch.
    """
    if schema is not None and config.domain is None:
        config = config.with_domain(schema_domain(schema, config))
        logger.debug(f"Using {config.domain.value} domain from the input schema")

    def classify_inner(batches: Iterator[DataFrame]) -> Iterator[DataFrame]:
        """
        Classifies each Arrow batch handed over by Spark.

        Args:
            batches (Iterator[DataFrame]): Pandas DataFrames, one per batch.

        Yields:
            DataFrame: each batch with the relation column appended.
        """
        for pdf in batches:
            logger.debug(f"Classifying batch of {len(pdf)} interval pairs")
            yield classify_frame(pdf, config)

    return classify_inner
