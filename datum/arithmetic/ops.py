"""Day-count arithmetic for Datum.

This module provides the canonical implementation of adding,
subtracting and measuring days. Datum's methods and operators delegate
to these functions.

All operations walk the calendar one month at a time instead of
converting to a linear day number and back. Month lengths come only
from days_in_month(), and every intermediate step is a fully validated
Datum, so a walk that leaves years 0-9999 fails with ValidationError
from the constructor.

Supported operations:
    - days_until_first_day_of_next_month: the forward stride
    - add_days: move forward by a non-negative count
    - subtract_days: move backward by a non-negative count
    - shift_days: move by a signed count
    - delta_days: unsigned distance between two dates
    - difference_days: signed distance (left - right)
"""

from __future__ import annotations

from loguru import logger

from datum._internal.calendar import days_in_month
from datum._internal.validation import assert_day_count
from datum.arithmetic.comparisons import is_after, is_equal
from datum.core.datum import Datum
from datum.errors import InvariantViolation


def days_until_first_day_of_next_month(datum: Datum) -> int:
    """Return the number of days from datum to the first of the next month.

    Examples:
        >>> days_until_first_day_of_next_month(Datum(2019, 7, 22))
        10
        >>> days_until_first_day_of_next_month(Datum(2019, 7, 31))
        1
    """
    return days_in_month(datum.year, datum.month) - datum.day + 1


def _first_day_of_next_month(datum: Datum) -> Datum:
    if datum.month == 12:
        return Datum(datum.year + 1, 1, 1)
    return Datum(datum.year, datum.month + 1, 1)


def _last_day_of_previous_month(datum: Datum) -> Datum:
    if datum.month == 1:
        year, month = datum.year - 1, 12
    else:
        year, month = datum.year, datum.month - 1
    return Datum(year, month, days_in_month(year, month))


def add_days(datum: Datum, days: int) -> Datum:
    """Return the date a non-negative number of days after datum.

    Args:
        datum: The starting date.
        days: Number of days to add (>= 0).

    Returns:
        A new Datum.

    Raises:
        ValidationError: If days is not a non-negative int, or the
            result lies after 9999-12-31.

    Examples:
        >>> add_days(Datum(2028, 12, 30), 2)
        Datum(2029, 1, 1)
        >>> add_days(Datum(2028, 5, 29), 133)
        Datum(2028, 10, 9)
    """
    assert_day_count(days)

    remaining = days
    current = datum
    while True:
        stride = days_until_first_day_of_next_month(current)
        if remaining < stride:
            return Datum(current.year, current.month, current.day + remaining)
        remaining -= stride
        current = _first_day_of_next_month(current)


def subtract_days(datum: Datum, days: int) -> Datum:
    """Return the date a non-negative number of days before datum.

    Args:
        datum: The starting date.
        days: Number of days to subtract (>= 0).

    Returns:
        A new Datum.

    Raises:
        ValidationError: If days is not a non-negative int, or the
            result lies before 0000-01-01.

    Examples:
        >>> subtract_days(Datum(2029, 1, 1), 2)
        Datum(2028, 12, 30)
        >>> subtract_days(Datum(2020, 3, 16), 16)
        Datum(2020, 2, 29)
    """
    assert_day_count(days)

    remaining = days
    current = datum
    while remaining >= current.day:
        remaining -= current.day
        current = _last_day_of_previous_month(current)
    return Datum(current.year, current.month, current.day - remaining)


def shift_days(datum: Datum, days: int) -> Datum:
    """Return datum moved by a signed number of days.

    Negative counts move backward. Backs the + and - operators.
    """
    if isinstance(days, int) and not isinstance(days, bool) and days < 0:
        return subtract_days(datum, -days)
    return add_days(datum, days)


def _walk_forward(current: Datum, until: Datum) -> int:
    """Count days from current forward to until, a month at a time.

    Raises:
        InvariantViolation: If the walk finds itself past until.
    """
    total = 0
    while True:
        if is_after(current, until):
            logger.error(
                "day walk overran its target: current={} until={} walked={}",
                current,
                until,
                total,
            )
            raise InvariantViolation(
                f"walk from {current} passed its target {until}"
            )

        if current.year == until.year and current.month == until.month:
            return total + (until.day - current.day)

        # Different months and not past until, so the next first-of-month
        # is at most until itself.
        total += days_until_first_day_of_next_month(current)
        current = _first_day_of_next_month(current)


def delta_days(left: Datum, right: Datum) -> int:
    """Return the unsigned number of days between two dates.

    Examples:
        >>> delta_days(Datum(2028, 12, 30), Datum(2029, 1, 1))
        2
        >>> delta_days(Datum(2037, 4, 18), Datum(2030, 6, 15))
        2499
        >>> delta_days(Datum(2024, 4, 17), Datum(2024, 4, 17))
        0
    """
    if is_equal(left, right):
        return 0

    if is_after(left, right):
        until, current = left, right
    else:
        until, current = right, left
    return _walk_forward(current, until)


def difference_days(left: Datum, right: Datum) -> int:
    """Return the signed number of days from right to left.

    Positive when left is after right, so that
    ``shift_days(right, difference_days(left, right)) == left``.
    """
    delta = delta_days(left, right)
    return delta if is_after(left, right) else -delta


__all__ = [
    "days_until_first_day_of_next_month",
    "add_days",
    "subtract_days",
    "shift_days",
    "delta_days",
    "difference_days",
]
