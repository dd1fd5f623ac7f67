"""Internal constants for datum.

These constants define the limits and formats used throughout the
library. This module is not part of the public API.
"""

from __future__ import annotations

import re

# Year limits
MIN_YEAR: int = 0
MAX_YEAR: int = 9999

MIN_MONTH: int = 1
MAX_MONTH: int = 12

# Coarse day bound, refined per month by days_in_month()
MIN_DAY: int = 1
MAX_DAY: int = 31

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

DAYS_IN_WEEK: int = 7

# String form
ISO_STRING_LENGTH: int = 10
ISO_FORMAT: str = "YYYY-MM-DD"
ISO_PATTERN: re.Pattern[str] = re.compile(r"^(\d{4})-(\d\d)-(\d\d)$", re.ASCII)

# A known Monday, used to derive weekdays
REFERENCE_MONDAY: tuple[int, int, int] = (2019, 8, 26)


__all__ = [
    "MIN_YEAR",
    "MAX_YEAR",
    "MIN_MONTH",
    "MAX_MONTH",
    "MIN_DAY",
    "MAX_DAY",
    "DAYS_IN_MONTH",
    "DAYS_IN_WEEK",
    "ISO_STRING_LENGTH",
    "ISO_FORMAT",
    "ISO_PATTERN",
    "REFERENCE_MONDAY",
]
