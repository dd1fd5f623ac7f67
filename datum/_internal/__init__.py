"""Internal utilities for datum.

This module contains private implementation details:
    - Limits and format constants
    - Range assertions
    - Calendar tables (leap years, month lengths)

Note: This module is not part of the public API.
"""

from __future__ import annotations

from datum._internal.calendar import days_in_month, days_in_year, is_leap_year
from datum._internal.validation import (
    assert_day,
    assert_day_count,
    assert_month,
    assert_year,
)

__all__: list[str] = [
    "assert_day",
    "assert_day_count",
    "assert_month",
    "assert_year",
    "days_in_month",
    "days_in_year",
    "is_leap_year",
]
