"""Weekday enumeration.

This module provides the Weekday enum for the seven ISO weekdays,
numbered Monday=0 through Sunday=6 to match Python's
datetime.date.weekday().
"""

from __future__ import annotations

from enum import Enum

from datum.errors import ValidationError


class Weekday(Enum):
    """Day of the week.

    Each member's value is its ordinal. The label is the lowercase
    three-letter English abbreviation.

    Examples:
        >>> Weekday.MONDAY.ordinal
        0
        >>> Weekday.SUNDAY.label
        'sun'
        >>> Weekday.from_ordinal(2)
        <Weekday.WEDNESDAY: 2>
    """

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def ordinal(self) -> int:
        """Return the ordinal (0=Monday, 6=Sunday)."""
        return self.value

    @property
    def label(self) -> str:
        """Return the three-letter lowercase label, e.g. 'mon'."""
        return self.name[:3].lower()

    @property
    def is_weekend(self) -> bool:
        """Return True for Saturday and Sunday."""
        return self in (Weekday.SATURDAY, Weekday.SUNDAY)

    @classmethod
    def from_ordinal(cls, ordinal: int) -> Weekday:
        """Return the Weekday for an ordinal in 0-6.

        Raises:
            ValidationError: If ordinal is not in 0-6.
        """
        try:
            return cls(ordinal)
        except ValueError:
            raise ValidationError(
                f"weekday ordinal must be between 0 and 6, got {ordinal!r}"
            ) from None


__all__ = ["Weekday"]
