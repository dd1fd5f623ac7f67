"""Validation utilities for datum.

This module provides the range assertions run by the Datum constructor
and by the calendar table functions.

This module is not part of the public API.
"""

from __future__ import annotations

from datum._internal.constants import (
    MAX_DAY,
    MAX_MONTH,
    MAX_YEAR,
    MIN_DAY,
    MIN_MONTH,
    MIN_YEAR,
)
from datum.errors import ValidationError


def _assert_int(name: str, value: object) -> None:
    # bool is an int subclass, but True is not a year
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(
            f"{name} must be an integer, got {type(value).__name__} {value!r}"
        )


def assert_year(year: int) -> None:
    """Validate that a year is an integer within the supported range.

    Args:
        year: The year to validate.

    Raises:
        ValidationError: If year is not an int or is outside
            MIN_YEAR to MAX_YEAR.
    """
    _assert_int("year", year)
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ValidationError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def assert_month(month: int) -> None:
    """Validate that a month is an integer within 1-12.

    Raises:
        ValidationError: If month is not an int or is outside 1-12.
    """
    _assert_int("month", month)
    if month < MIN_MONTH or month > MAX_MONTH:
        raise ValidationError(
            f"month must be between {MIN_MONTH} and {MAX_MONTH}, got {month}"
        )


def assert_day(day: int) -> None:
    """Validate that a day is an integer within 1-31.

    This is only the coarse bound. Whether the day exists in a given
    month is checked by the Datum constructor.

    Raises:
        ValidationError: If day is not an int or is outside 1-31.
    """
    _assert_int("day", day)
    if day < MIN_DAY or day > MAX_DAY:
        raise ValidationError(
            f"day must be between {MIN_DAY} and {MAX_DAY}, got {day}"
        )


def assert_day_count(days: int) -> None:
    """Validate a day count for add_days/subtract_days.

    Raises:
        ValidationError: If days is not an int or is negative.
    """
    _assert_int("days", days)
    if days < 0:
        raise ValidationError(f"days must be non-negative, got {days}")


__all__ = [
    "assert_year",
    "assert_month",
    "assert_day",
    "assert_day_count",
]
