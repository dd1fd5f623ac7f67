"""Datum class representing a calendar date.

This module provides the Datum class for representing calendar dates
without time of day or timezone, in the proleptic Gregorian calendar
over years 0-9999.
"""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING, Any, Iterable, Optional

from datum._internal import calendar
from datum._internal.validation import assert_day, assert_month, assert_year
from datum.errors import ValidationError

if TYPE_CHECKING:
    from datum.units.weekday import Weekday


class Datum:
    """A calendar date in the proleptic Gregorian calendar.

    Datum is an immutable (year, month, day) value. Every instance is a
    real calendar date: the constructor rejects anything else, and all
    arithmetic builds its results through the constructor.

    Two Datums with equal fields are equal, hash alike, and are
    interchangeable.

    Attributes:
        year: The year (0-9999).
        month: The month (1-12).
        day: The day of the month (1-31, at most the month's length).

    Examples:
        >>> d = Datum(2018, 10, 5)
        >>> str(d)
        '2018-10-05'

        >>> Datum(2024, 2, 29)  # Valid leap year date
        Datum(2024, 2, 29)

        >>> Datum(2019, 8, 26).weekday_label()
        'mon'
    """

    __slots__ = ("_year", "_month", "_day")

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a Datum from year, month, and day.

        Raises:
            ValidationError: If any component is not an int, is out of
                range, or day exceeds the length of the month.

        Examples:
            >>> Datum(2019, 2, 29)  # 2019 is not a leap year
            Traceback (most recent call last):
            ...
            ValidationError: the month 2019-02 has only 28 days, got day 29
        """
        assert_year(year)
        assert_month(month)
        assert_day(day)

        max_day = calendar.days_in_month(year, month)
        if day > max_day:
            raise ValidationError(
                f"the month {year:04d}-{month:02d} has only {max_day} days, "
                f"got day {day}"
            )

        self._year = year
        self._month = month
        self._day = day

    # Factories

    @classmethod
    def today(cls) -> Datum:
        """Return today's date in the local timezone."""
        from datum.convert.native import today

        return today()

    @classmethod
    def from_date(cls, value: datetime.date) -> Datum:
        """Create a Datum from a datetime.date or datetime.datetime.

        Time of day is discarded.

        Examples:
            >>> import datetime
            >>> Datum.from_date(datetime.date(2017, 5, 15))
            Datum(2017, 5, 15)
        """
        from datum.convert.native import from_native

        return from_native(value)

    @classmethod
    def from_string(cls, s: str) -> Datum:
        """Parse a Datum from a ``YYYY-MM-DD`` string.

        Raises:
            ParseError: If the string is not exactly ``YYYY-MM-DD``.
            ValidationError: If the fields do not name a real date.

        Examples:
            >>> Datum.from_string("1576-05-27")
            Datum(1576, 5, 27)
        """
        from datum.format.iso8601 import parse_iso8601

        return parse_iso8601(s)

    from_iso_format = from_string

    @classmethod
    def from_tuple(cls, ymd: tuple[int, int, int]) -> Datum:
        """Create a Datum from a (year, month, day) tuple."""
        year, month, day = ymd
        return cls(year, month, day)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Datum:
        """Create a Datum from a JSON dictionary.

        Examples:
            >>> Datum.from_json({'_type': 'Datum', 'value': '2024-01-15'})
            Datum(2024, 1, 15)
        """
        from datum.convert.json import from_json

        return from_json(data)

    # Components

    @property
    def year(self) -> int:
        """Return the year component (0-9999)."""
        return self._year

    @property
    def month(self) -> int:
        """Return the month component (1-12)."""
        return self._month

    @property
    def day(self) -> int:
        """Return the day of the month."""
        return self._day

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> Datum:
        """Return a new Datum with specified components replaced.

        Raises:
            ValidationError: If the resulting date is invalid.

        Examples:
            >>> Datum(2024, 1, 31).replace(month=3)
            Datum(2024, 3, 31)
        """
        return Datum(
            year if year is not None else self._year,
            month if month is not None else self._month,
            day if day is not None else self._day,
        )

    # Conversions

    def to_tuple(self) -> tuple[int, int, int]:
        """Return the date as a (year, month, day) tuple."""
        return (self._year, self._month, self._day)

    def to_iso_format(self) -> str:
        """Return the date as a ``YYYY-MM-DD`` string.

        Examples:
            >>> Datum(5, 1, 2).to_iso_format()
            '0005-01-02'
        """
        from datum.format.iso8601 import format_iso8601

        return format_iso8601(self)

    def to_json(self) -> dict[str, Any]:
        """Return the date as a JSON-serializable dictionary.

        Examples:
            >>> Datum(2024, 1, 15).to_json()
            {'_type': 'Datum', 'value': '2024-01-15'}
        """
        from datum.convert.json import to_json

        return to_json(self)

    def to_date(self) -> datetime.date:
        """Return the equivalent datetime.date.

        Raises:
            ValidationError: For year 0, which datetime.date cannot hold.
        """
        from datum.convert.native import to_native

        return to_native(self)

    # Calendar tables

    @staticmethod
    def is_leap_year(year: int) -> bool:
        """Return True if year is a Gregorian leap year."""
        return calendar.is_leap_year(year)

    @staticmethod
    def days_in_month(year: int, month: int) -> int:
        """Return the number of days in the given month."""
        return calendar.days_in_month(year, month)

    @staticmethod
    def days_in_year(year: int) -> int:
        """Return 366 for leap years, 365 otherwise."""
        return calendar.days_in_year(year)

    # Arithmetic

    def days_until_first_day_of_next_month(self) -> int:
        """Return the days from this date to the first of the next month."""
        from datum.arithmetic.ops import days_until_first_day_of_next_month

        return days_until_first_day_of_next_month(self)

    def add_days(self, days: int) -> Datum:
        """Return the date a non-negative number of days later.

        Raises:
            ValidationError: If days is negative or not an int, or the
                result is past 9999-12-31.

        Examples:
            >>> Datum(2028, 12, 30).add_days(2)
            Datum(2029, 1, 1)
        """
        from datum.arithmetic.ops import add_days

        return add_days(self, days)

    def subtract_days(self, days: int) -> Datum:
        """Return the date a non-negative number of days earlier.

        Examples:
            >>> Datum(2020, 3, 16).subtract_days(16)
            Datum(2020, 2, 29)
        """
        from datum.arithmetic.ops import subtract_days

        return subtract_days(self, days)

    def delta_days(self, other: Datum) -> int:
        """Return the unsigned number of days between this date and other.

        Examples:
            >>> Datum(2024, 4, 17).delta_days(Datum(2030, 8, 25))
            2321
        """
        from datum.arithmetic.ops import delta_days

        return delta_days(self, other)

    def weekday(self) -> Weekday:
        """Return the day of the week.

        Examples:
            >>> Datum(1988, 9, 11).weekday()
            <Weekday.SUNDAY: 6>
        """
        from datum.arithmetic.weekdays import weekday_of

        return weekday_of(self)

    def weekday_label(self) -> str:
        """Return the three-letter lowercase weekday label, e.g. 'tue'."""
        from datum.arithmetic.weekdays import weekday_label

        return weekday_label(self)

    def age(self, on: Optional[Datum] = None) -> int:
        """Treat this date as a birthday and return the age in whole years.

        Args:
            on: The date to measure to (defaults to today).
        """
        from datum.convert.native import age

        return age(self, on)

    # Ordering

    def is_equal(self, other: Datum) -> bool:
        """Return True if other is the same calendar day."""
        from datum.arithmetic.comparisons import is_equal

        return is_equal(self, other)

    def is_before(self, other: Datum) -> bool:
        """Return True if this date is strictly earlier than other."""
        from datum.arithmetic.comparisons import is_before

        return is_before(self, other)

    def is_after(self, other: Datum) -> bool:
        """Return True if this date is strictly later than other."""
        from datum.arithmetic.comparisons import is_after

        return is_after(self, other)

    @staticmethod
    def compare_ascending(left: Datum, right: Datum) -> int:
        """Comparator for earliest-first sorting (-1, 0 or 1).

        Use with functools.cmp_to_key.
        """
        from datum.arithmetic.comparisons import compare_ascending

        return compare_ascending(left, right)

    @staticmethod
    def compare_descending(left: Datum, right: Datum) -> int:
        """Comparator for latest-first sorting (-1, 0 or 1)."""
        from datum.arithmetic.comparisons import compare_descending

        return compare_descending(left, right)

    @staticmethod
    def min(datums: Iterable[Datum]) -> Optional[Datum]:
        """Return the earliest Datum, or None for an empty iterable."""
        from datum.arithmetic.comparisons import min_datum

        return min_datum(datums)

    @staticmethod
    def max(datums: Iterable[Datum]) -> Optional[Datum]:
        """Return the latest Datum, or None for an empty iterable."""
        from datum.arithmetic.comparisons import max_datum

        return max_datum(datums)

    # Operators

    def __add__(self, other: object) -> Datum:
        """Add a signed number of days.

        Examples:
            >>> Datum(2024, 1, 15) + 10
            Datum(2024, 1, 25)
        """
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented  # type: ignore[return-value]

        from datum.arithmetic.ops import shift_days

        return shift_days(self, other)

    __radd__ = __add__

    def __sub__(self, other: object) -> Any:
        """Subtract a number of days, or the signed days between two dates.

        Examples:
            >>> Datum(2024, 1, 25) - 10
            Datum(2024, 1, 15)

            >>> Datum(2024, 1, 25) - Datum(2024, 1, 15)
            10
        """
        from datum.arithmetic.ops import difference_days, shift_days

        if isinstance(other, Datum):
            return difference_days(self, other)
        if isinstance(other, int) and not isinstance(other, bool):
            return shift_days(self, -other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Datum):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Datum):
            return NotImplemented
        return self.is_before(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Datum):
            return NotImplemented
        return not self.is_after(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Datum):
            return NotImplemented
        return self.is_after(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Datum):
            return NotImplemented
        return not self.is_before(other)

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def __repr__(self) -> str:
        """Return a string like 'Datum(2024, 1, 15)'."""
        return f"Datum({self._year}, {self._month}, {self._day})"

    def __str__(self) -> str:
        """Return the ``YYYY-MM-DD`` representation."""
        return self.to_iso_format()

    def __bool__(self) -> bool:
        """Dates are always truthy."""
        return True


__all__ = ["Datum"]
