"""Conversion between Datum and the host's datetime values.

Python's datetime.date already numbers months from 1, so values pass
through without re-basing. Any time of day on a datetime.datetime is
dropped, and tzinfo is ignored: the date is whatever the value says
locally.
"""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING, Optional

from loguru import logger

from datum.errors import ValidationError

if TYPE_CHECKING:
    from datum.core.datum import Datum


def from_native(value: datetime.date) -> Datum:
    """Create a Datum from a datetime.date or datetime.datetime.

    Examples:
        >>> import datetime
        >>> from_native(datetime.datetime(2017, 5, 15, 23, 59))
        Datum(2017, 5, 15)

    Raises:
        TypeError: If value is not a datetime.date.
    """
    from datum.core.datum import Datum

    if not isinstance(value, datetime.date):
        raise TypeError(
            f"expected datetime.date or datetime.datetime, got {type(value).__name__}"
        )
    return Datum(value.year, value.month, value.day)


def to_native(datum: Datum) -> datetime.date:
    """Return the datetime.date for a Datum.

    Raises:
        ValidationError: For year 0, which datetime.date cannot hold.
    """
    if datum.year < datetime.MINYEAR:
        raise ValidationError(
            f"year {datum.year} is below datetime.MINYEAR ({datetime.MINYEAR})"
        )
    return datetime.date(datum.year, datum.month, datum.day)


def today() -> Datum:
    """Return the current date in the local timezone."""
    now = datetime.date.today()
    logger.debug("read host clock: {}", now.isoformat())
    return from_native(now)


def age(birthday: Datum, on: Optional[Datum] = None) -> int:
    """Return the whole years elapsed from birthday to on.

    One year is subtracted when the anniversary has not yet been
    reached in on's year. A 29 February birthday counts as reached on
    1 March in common years.

    Args:
        birthday: The starting date.
        on: The date to measure to (defaults to today()).

    Returns:
        The age in whole years. Negative when on precedes birthday.

    Examples:
        >>> from datum.core.datum import Datum
        >>> age(Datum(1988, 9, 11), on=Datum(2019, 9, 10))
        30
        >>> age(Datum(1988, 9, 11), on=Datum(2019, 9, 11))
        31
    """
    if on is None:
        on = today()

    years = on.year - birthday.year
    if (on.month, on.day) < (birthday.month, birthday.day):
        years -= 1
    return years


__all__ = [
    "from_native",
    "to_native",
    "today",
    "age",
]
