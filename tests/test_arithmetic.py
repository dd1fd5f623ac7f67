"""Tests for the datum.arithmetic day-count operations.

This test module verifies:
    - add_days / subtract_days / delta_days against known values
    - Year rollover and leap-year February in both directions
    - Range limits at 0000-01-01 and 9999-12-31
    - Algebraic properties, cross-checked against datetime.date
    - The internal walk refusing to pass its target
"""

from __future__ import annotations

import datetime

import pytest

from datum import Datum
from datum.arithmetic import (
    add_days,
    days_until_first_day_of_next_month,
    delta_days,
    difference_days,
    shift_days,
    subtract_days,
)
from datum.arithmetic.ops import _walk_forward
from datum.errors import InvariantViolation, ValidationError

SAMPLE_DATES = [
    Datum(1, 1, 1),
    Datum(1373, 10, 11),
    Datum(1600, 2, 29),
    Datum(1900, 2, 28),
    Datum(1988, 9, 11),
    Datum(2000, 2, 29),
    Datum(2019, 8, 26),
    Datum(2028, 12, 30),
    Datum(3994, 2, 8),
    Datum(5159, 4, 22),
    Datum(9999, 12, 31),
]

PAIR_DATES = [
    Datum(1373, 10, 11),
    Datum(1600, 2, 29),
    Datum(1900, 2, 28),
    Datum(1988, 9, 11),
    Datum(2000, 2, 29),
    Datum(2019, 8, 26),
    Datum(2028, 12, 30),
]

SAMPLE_COUNTS = [0, 1, 27, 28, 29, 30, 31, 59, 365, 366, 1461, 36524, 146097]


def _ordinal(d: Datum) -> int:
    return d.to_date().toordinal()


class TestDaysUntilFirstDayOfNextMonth:
    """Tests for the forward stride."""

    def test_stride(self) -> None:
        """Test strides at the start, middle and end of a month."""
        assert Datum(2019, 7, 22).days_until_first_day_of_next_month() == 10
        assert Datum(2019, 7, 31).days_until_first_day_of_next_month() == 1
        assert Datum(2019, 8, 1).days_until_first_day_of_next_month() == 31

    def test_stride_february(self) -> None:
        """February's stride depends on the year."""
        assert days_until_first_day_of_next_month(Datum(2020, 2, 1)) == 29
        assert days_until_first_day_of_next_month(Datum(2019, 2, 1)) == 28


class TestAddDays:
    """Tests for add_days()."""

    def test_add_zero(self) -> None:
        """Adding zero returns an equal date."""
        assert Datum(2028, 12, 30).add_days(0) == Datum(2028, 12, 30)

    def test_add_year_rollover(self) -> None:
        """Crossing December rolls the year."""
        assert Datum(2028, 12, 30).add_days(1) == Datum(2028, 12, 31)
        assert Datum(2028, 12, 30).add_days(2) == Datum(2029, 1, 1)

    def test_add_longer_spans(self) -> None:
        """Test multi-month and multi-year spans."""
        assert Datum(2028, 5, 29).add_days(133) == Datum(2028, 10, 9)
        assert Datum(2030, 6, 15).add_days(2499) == Datum(2037, 4, 18)

    def test_add_across_leap_february(self) -> None:
        """February 29 exists only in leap years."""
        assert add_days(Datum(2020, 2, 28), 1) == Datum(2020, 2, 29)
        assert add_days(Datum(2019, 2, 28), 1) == Datum(2019, 3, 1)
        assert add_days(Datum(1900, 2, 28), 1) == Datum(1900, 3, 1)

    def test_add_across_year_zero(self) -> None:
        """Year 0 is a leap year of 366 days."""
        assert add_days(Datum(0, 1, 1), 366) == Datum(1, 1, 1)

    def test_add_to_last_day(self) -> None:
        """Reaching 9999-12-31 works, passing it does not."""
        assert add_days(Datum(9999, 12, 30), 1) == Datum(9999, 12, 31)
        with pytest.raises(ValidationError, match="year must be between"):
            add_days(Datum(9999, 12, 31), 1)

    def test_add_negative(self) -> None:
        """Negative counts are rejected."""
        with pytest.raises(ValidationError, match="days must be non-negative"):
            Datum(2024, 1, 15).add_days(-1)

    def test_add_non_integer(self) -> None:
        """Non-integer counts are rejected."""
        with pytest.raises(ValidationError, match="days must be an integer"):
            Datum(2024, 1, 15).add_days(1.5)  # type: ignore[arg-type]


class TestSubtractDays:
    """Tests for subtract_days()."""

    def test_subtract_zero(self) -> None:
        """Subtracting zero returns an equal date."""
        assert Datum(2029, 1, 1).subtract_days(0) == Datum(2029, 1, 1)

    def test_subtract_year_rollover(self) -> None:
        """Crossing January rolls the year back."""
        assert Datum(2029, 1, 1).subtract_days(1) == Datum(2028, 12, 31)
        assert Datum(2029, 1, 1).subtract_days(2) == Datum(2028, 12, 30)

    def test_subtract_into_leap_february(self) -> None:
        """Stepping back from March lands on Feb 29 in a leap year."""
        assert Datum(2020, 3, 16).subtract_days(16) == Datum(2020, 2, 29)
        assert Datum(2019, 3, 16).subtract_days(16) == Datum(2019, 2, 28)

    def test_subtract_longer_spans(self) -> None:
        """Test multi-month and multi-year spans."""
        assert Datum(2028, 10, 9).subtract_days(133) == Datum(2028, 5, 29)
        assert Datum(2037, 4, 18).subtract_days(2499) == Datum(2030, 6, 15)

    def test_subtract_to_first_day(self) -> None:
        """Reaching 0000-01-01 works, passing it does not."""
        assert subtract_days(Datum(1, 1, 1), 366) == Datum(0, 1, 1)
        with pytest.raises(ValidationError, match="year must be between"):
            subtract_days(Datum(0, 1, 1), 1)

    def test_subtract_negative(self) -> None:
        """Negative counts are rejected."""
        with pytest.raises(ValidationError, match="days must be non-negative"):
            Datum(2024, 1, 15).subtract_days(-3)


class TestShiftDays:
    """Tests for shift_days()."""

    def test_shift_both_directions(self) -> None:
        """Positive counts go forward, negative counts go back."""
        assert shift_days(Datum(2024, 1, 15), 17) == Datum(2024, 2, 1)
        assert shift_days(Datum(2024, 1, 15), -15) == Datum(2023, 12, 31)
        assert shift_days(Datum(2024, 1, 15), 0) == Datum(2024, 1, 15)

    def test_shift_non_integer(self) -> None:
        """Non-integers are rejected even when negative."""
        with pytest.raises(ValidationError, match="days must be an integer"):
            shift_days(Datum(2024, 1, 15), -1.0)  # type: ignore[arg-type]


class TestDeltaDays:
    """Tests for delta_days() and difference_days()."""

    def test_delta_same_date(self) -> None:
        """Equal dates are zero days apart."""
        assert Datum(2028, 12, 30).delta_days(Datum(2028, 12, 30)) == 0

    def test_delta_known_values(self) -> None:
        """Test distances within a month, across a year, and across years."""
        assert Datum(2028, 12, 30).delta_days(Datum(2028, 12, 31)) == 1
        assert Datum(2028, 12, 30).delta_days(Datum(2029, 1, 1)) == 2
        assert Datum(2028, 5, 29).delta_days(Datum(2028, 10, 9)) == 133
        assert Datum(2037, 4, 18).delta_days(Datum(2030, 6, 15)) == 2499
        assert Datum(2024, 4, 17).delta_days(Datum(2030, 8, 25)) == 2321

    def test_delta_same_month(self) -> None:
        """Dates in the same month differ by their day numbers."""
        assert delta_days(Datum(2019, 8, 3), Datum(2019, 8, 29)) == 26
        assert delta_days(Datum(2019, 8, 29), Datum(2019, 8, 3)) == 26

    def test_delta_full_range(self) -> None:
        """0000-01-01 to 9999-12-31 spans every supported day."""
        assert delta_days(Datum(0, 1, 1), Datum(9999, 12, 31)) == 3652424

    def test_difference_is_signed(self) -> None:
        """difference_days(a, b) is positive when a is later."""
        assert difference_days(Datum(2029, 1, 1), Datum(2028, 12, 30)) == 2
        assert difference_days(Datum(2028, 12, 30), Datum(2029, 1, 1)) == -2
        assert difference_days(Datum(2028, 12, 30), Datum(2028, 12, 30)) == 0


class TestArithmeticProperties:
    """Algebraic properties over a fixed sample, checked against datetime."""

    def test_add_matches_datetime(self) -> None:
        """add_days agrees with ordinal arithmetic."""
        for d in SAMPLE_DATES:
            for n in SAMPLE_COUNTS:
                target = _ordinal(d) + n
                if target > datetime.date.max.toordinal():
                    continue
                expected = Datum.from_date(datetime.date.fromordinal(target))
                assert d.add_days(n) == expected, (d, n)

    def test_subtract_matches_datetime(self) -> None:
        """subtract_days agrees with ordinal arithmetic."""
        for d in SAMPLE_DATES:
            for n in SAMPLE_COUNTS:
                target = _ordinal(d) - n
                if target < 1:
                    continue
                expected = Datum.from_date(datetime.date.fromordinal(target))
                assert d.subtract_days(n) == expected, (d, n)

    def test_add_then_subtract(self) -> None:
        """d.add_days(n).subtract_days(n) == d."""
        for d in SAMPLE_DATES[:-1]:
            for n in SAMPLE_COUNTS:
                assert d.add_days(n).subtract_days(n) == d, (d, n)

    def test_delta_symmetric_and_consistent(self) -> None:
        """delta is symmetric, matches datetime, and add_days undoes it."""
        for a in PAIR_DATES:
            for b in PAIR_DATES:
                delta = a.delta_days(b)
                assert delta == b.delta_days(a)
                assert delta == abs(_ordinal(a) - _ordinal(b))
                if a.is_before(b):
                    assert a.add_days(delta) == b
                    assert b.subtract_days(delta) == a


class TestWalkInvariant:
    """Tests for the internal consistency check in the forward walk."""

    def test_walk_past_target(self, log_records: list[dict]) -> None:
        """Walking from a later date toward an earlier one is a defect."""
        with pytest.raises(InvariantViolation, match="passed its target"):
            _walk_forward(Datum(2020, 5, 1), Datum(2020, 1, 1))

        errors = [r for r in log_records if r["level"].name == "ERROR"]
        assert len(errors) == 1
        assert "overran its target" in errors[0]["message"]

    def test_walk_past_target_same_month(self) -> None:
        """The check also covers the final same-month step."""
        with pytest.raises(InvariantViolation):
            _walk_forward(Datum(2020, 1, 20), Datum(2020, 1, 10))

    def test_invariant_is_not_validation_error(self) -> None:
        """Engine defects are distinct from bad input."""
        with pytest.raises(InvariantViolation) as exc_info:
            _walk_forward(Datum(2021, 1, 1), Datum(2020, 1, 1))
        assert not isinstance(exc_info.value, ValidationError)
