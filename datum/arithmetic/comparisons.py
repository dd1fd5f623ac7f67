"""Comparison operations for Datum.

This module provides explicit comparison functions for Datum values.
They are the canonical implementation; the rich comparison operators
on Datum delegate here.

Ordering is lexicographic on (year, month, day), which for valid
dates is chronological ordering.

Supported Operations:
    - is_equal: Test equality
    - is_before: Strictly earlier
    - is_after: Strictly later
    - compare_ascending: -1/0/1 comparator, earliest first
    - compare_descending: -1/0/1 comparator, latest first
    - min_datum, max_datum: Find extremes of an iterable
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

if TYPE_CHECKING:
    from datum.core.datum import Datum


def is_equal(left: Datum, right: Datum) -> bool:
    """Test whether two Datums name the same calendar day.

    Examples:
        >>> from datum.core.datum import Datum
        >>> is_equal(Datum(2024, 1, 15), Datum(2024, 1, 15))
        True
        >>> is_equal(Datum(2024, 1, 15), Datum(2024, 1, 16))
        False
    """
    return (
        left.year == right.year
        and left.month == right.month
        and left.day == right.day
    )


def is_before(left: Datum, right: Datum) -> bool:
    """Test if left is strictly earlier than right.

    Examples:
        >>> from datum.core.datum import Datum
        >>> is_before(Datum(2024, 1, 15), Datum(2024, 1, 16))
        True
        >>> is_before(Datum(2024, 1, 15), Datum(2024, 1, 15))
        False
    """
    if left.year != right.year:
        return left.year < right.year
    if left.month != right.month:
        return left.month < right.month
    return left.day < right.day


def is_after(left: Datum, right: Datum) -> bool:
    """Test if left is strictly later than right."""
    if left.year != right.year:
        return left.year > right.year
    if left.month != right.month:
        return left.month > right.month
    return left.day > right.day


def compare_ascending(left: Datum, right: Datum) -> int:
    """Compare two Datums for an earliest-first sort.

    Returns:
        -1 if left is before right, 1 if after, 0 if equal.

    Examples:
        >>> from functools import cmp_to_key
        >>> from datum.core.datum import Datum
        >>> sorted([Datum(2020, 1, 2), Datum(2020, 1, 1)],
        ...        key=cmp_to_key(compare_ascending))
        [Datum(2020, 1, 1), Datum(2020, 1, 2)]
    """
    if is_before(left, right):
        return -1
    if is_after(left, right):
        return 1
    return 0


def compare_descending(left: Datum, right: Datum) -> int:
    """Compare two Datums for a latest-first sort.

    Returns:
        The negation of compare_ascending(left, right).
    """
    return -compare_ascending(left, right)


def min_datum(datums: Iterable[Datum]) -> Optional[Datum]:
    """Return the earliest Datum in an iterable.

    The iterable is consumed in a single pass. Among equal extremes
    the first one seen is returned.

    Returns:
        The earliest Datum, or None if the iterable is empty.
    """
    result: Optional[Datum] = None
    for datum in datums:
        if result is None or is_before(datum, result):
            result = datum
    return result


def max_datum(datums: Iterable[Datum]) -> Optional[Datum]:
    """Return the latest Datum in an iterable.

    Returns:
        The latest Datum, or None if the iterable is empty.
    """
    result: Optional[Datum] = None
    for datum in datums:
        if result is None or is_after(datum, result):
            result = datum
    return result


__all__ = [
    "is_equal",
    "is_before",
    "is_after",
    "compare_ascending",
    "compare_descending",
    "min_datum",
    "max_datum",
]
