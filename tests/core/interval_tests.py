import re
from datetime import datetime
from decimal import Decimal

import numpy as np
import pytest
from pandas import Timestamp

from allen.core.exceptions import AmbiguousOrderError, EmptyIntervalError, InvalidDataTypeError
from allen.core.interval import Interval, NonEmptyInterval


class TestInterval:
    def test_create_interval(self):
        interval = Interval.create(1, 4)

        assert interval.start == 1
        assert interval.end == 4
        assert interval.boundaries == (1, 4)
        assert not interval.start_bound.is_unbounded
        assert not interval.end_bound.is_unbounded

    def test_user_values_are_kept(self):
        interval = Interval(np.int64(1), datetime(2023, 1, 2))

        assert interval.boundaries == (np.int64(1), datetime(2023, 1, 2))
        assert interval.end_bound.value.internal_value == Timestamp("2023-01-02")

    def test_string_boundaries(self):
        interval = Interval("apple", "kiwi")

        assert interval.boundaries == ("apple", "kiwi")
        assert not interval.is_empty()
        assert Interval("kiwi", "apple").is_empty()

    def test_unbounded_factories(self):
        assert Interval.starting_at(5).boundaries == (5, None)
        assert Interval.ending_at(5).boundaries == (None, 5)
        assert Interval.full().boundaries == (None, None)
        assert Interval.full().end_bound.is_unbounded

    @pytest.mark.parametrize("start, end, expected", [
        (1, 4, False),
        (4, 4, True),
        (5, 4, True),
        (None, 4, False),
        (4, None, False),
        (None, None, False),
        (None, float("-inf"), True),
        (float("inf"), None, True),
    ])
    def test_is_empty(self, start, end, expected):
        assert Interval(start, end).is_empty() is expected

    def test_equality_and_hash(self):
        assert Interval(1, 4) == Interval(1, 4)
        assert Interval(np.int64(1), 4) == Interval(1.0, 4)
        assert Interval(1, 4) != Interval(1, 5)
        assert Interval(1, None) != Interval(1, 5)
        assert len({Interval(1, 4), Interval(1, 4), Interval(2, 4)}) == 2

    def test_not_equal_to_other_types(self):
        assert Interval(1, 4) != (1, 4)

    def test_repr(self):
        assert repr(Interval(1, None)) == "Interval(start=1, end=None)"


class TestTryIntoNonEmpty:
    def test_strictly_ordered_succeeds(self):
        non_empty = Interval(1, 4).try_into_non_empty()

        assert isinstance(non_empty, NonEmptyInterval)
        assert non_empty.interval == Interval(1, 4)
        assert non_empty.boundaries == (1, 4)

    @pytest.mark.parametrize("value", [-10, 0, 7, 2.5])
    def test_zero_width_fails(self, value):
        with pytest.raises(EmptyIntervalError):
            Interval(value, value).try_into_non_empty()

    @pytest.mark.parametrize("start, end", [(5, 1), (0, -3), (2.5, 1.5)])
    def test_inverted_fails(self, start, end):
        with pytest.raises(EmptyIntervalError):
            Interval(start, end).try_into_non_empty()

    def test_error_message(self):
        with pytest.raises(EmptyIntervalError, match=re.escape("Interval [3, 3) is empty")):
            Interval(3, 3).try_into_non_empty()

    def test_nan_is_ambiguous(self):
        with pytest.raises(AmbiguousOrderError):
            Interval(float("nan"), 1.0).try_into_non_empty()

    def test_decimal_nan_is_ambiguous(self):
        with pytest.raises(AmbiguousOrderError):
            Interval(Decimal("NaN"), Decimal("5")).try_into_non_empty()

    def test_mixed_types_are_ambiguous(self):
        with pytest.raises(AmbiguousOrderError):
            Interval(1, Timestamp("2023-01-01")).try_into_non_empty()

    @pytest.mark.parametrize("interval", [
        Interval.starting_at(5),
        Interval.ending_at(5),
        Interval.full(),
    ])
    def test_unbounded_succeeds(self, interval):
        assert interval.try_into_non_empty().interval == interval


class TestNonEmptyInterval:
    def test_create(self):
        non_empty = NonEmptyInterval.create(1, 4)

        assert non_empty.start == 1
        assert non_empty.end == 4
        assert non_empty == Interval(1, 4).try_into_non_empty()
        assert non_empty == NonEmptyInterval.try_from(Interval(1, 4))

    def test_constructor_validates(self):
        with pytest.raises(EmptyIntervalError):
            NonEmptyInterval(Interval(4, 1))

    def test_requires_interval(self):
        with pytest.raises(InvalidDataTypeError, match="Expected an Interval"):
            NonEmptyInterval((1, 4))

    def test_hash(self):
        assert hash(NonEmptyInterval.create(1, 4)) == hash(NonEmptyInterval.create(1, 4))

    def test_not_equal_to_plain_interval(self):
        assert NonEmptyInterval.create(1, 4) != Interval(1, 4)

    def test_repr(self):
        assert repr(NonEmptyInterval.create(1, 4)) == "NonEmptyInterval(start=1, end=4)"
