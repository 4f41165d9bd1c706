from datetime import date, datetime
from decimal import Decimal
from typing import Any, Union

from numpy import floating, integer
from pandas import Timestamp

# Any totally ordered value is accepted; None leaves a side unbounded
IntervalBoundary = Union[str, int, float, Decimal, Timestamp, datetime, date, integer, floating, Any, None]
