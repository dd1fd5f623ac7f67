"""Calendar tables for datum.

Leap-year rule and month/year lengths in the proleptic Gregorian
calendar. Every month-walking operation in datum.arithmetic reads month
lengths from days_in_month() and nowhere else.

This module is not part of the public API; the same functions are
exposed as static methods on Datum.
"""

from __future__ import annotations

from datum._internal.constants import DAYS_IN_MONTH
from datum._internal.validation import assert_month, assert_year


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (0-9999).

    Returns:
        True if the year is a leap year.

    Raises:
        ValidationError: If year is out of range.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2023)  # Not divisible by 4
        False
    """
    assert_year(year)
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValidationError: If year or month is out of range.
    """
    assert_year(year)
    assert_month(month)

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return the number of days in a year.

    Returns:
        366 for leap years, 365 otherwise.
    """
    return 366 if is_leap_year(year) else 365


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
]
