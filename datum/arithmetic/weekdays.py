"""Weekday derivation.

The weekday of a date is found from its day distance to a reference
date known to be a Monday (2019-08-26). Because delta_days() is
unsigned, dates before the reference read the remainder backwards:
one day before a Monday is a Sunday, six days before is a Tuesday.
"""

from __future__ import annotations

from loguru import logger

from datum._internal.constants import DAYS_IN_WEEK, REFERENCE_MONDAY
from datum.arithmetic.comparisons import is_before
from datum.arithmetic.ops import delta_days
from datum.core.datum import Datum
from datum.errors import InvariantViolation
from datum.units.weekday import Weekday

_REFERENCE = Datum(*REFERENCE_MONDAY)

# remainder of (days after the reference) % 7
_FORWARD: dict[int, Weekday] = {
    0: Weekday.MONDAY,
    1: Weekday.TUESDAY,
    2: Weekday.WEDNESDAY,
    3: Weekday.THURSDAY,
    4: Weekday.FRIDAY,
    5: Weekday.SATURDAY,
    6: Weekday.SUNDAY,
}

# remainder of (days before the reference) % 7
_BACKWARD: dict[int, Weekday] = {
    0: Weekday.MONDAY,
    1: Weekday.SUNDAY,
    2: Weekday.SATURDAY,
    3: Weekday.FRIDAY,
    4: Weekday.THURSDAY,
    5: Weekday.WEDNESDAY,
    6: Weekday.TUESDAY,
}


def _lookup(table: dict[int, Weekday], remainder: int, datum: Datum) -> Weekday:
    try:
        return table[remainder]
    except KeyError:
        logger.error(
            "weekday remainder {} outside table for {}", remainder, datum
        )
        raise InvariantViolation(
            f"weekday remainder {remainder} for {datum} is not in 0-6"
        ) from None


def weekday_of(datum: Datum) -> Weekday:
    """Return the weekday of a date in the proleptic Gregorian calendar.

    Examples:
        >>> weekday_of(Datum(2019, 8, 26))
        <Weekday.MONDAY: 0>
        >>> weekday_of(Datum(1988, 9, 11))
        <Weekday.SUNDAY: 6>
    """
    remainder = delta_days(datum, _REFERENCE) % DAYS_IN_WEEK
    if is_before(datum, _REFERENCE):
        return _lookup(_BACKWARD, remainder, datum)
    return _lookup(_FORWARD, remainder, datum)


def weekday_label(datum: Datum) -> str:
    """Return the three-letter lowercase weekday label, e.g. 'sun'."""
    return weekday_of(datum).label


__all__ = [
    "weekday_of",
    "weekday_label",
]
