from allen.core.domain import Domain
from allen.core.exceptions import AmbiguousOrderError, EmptyIntervalError, IntervalValidationError
from allen.core.interval import Interval, NonEmptyInterval
from allen.core.ranges import relation_from_ranges, to_interval
from allen.relations.classifier import from_intervals
from allen.relations.types import Relation, RelationFamily
