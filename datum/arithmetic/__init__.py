"""Calendar arithmetic on Datum.

The functions in this module serve as the canonical implementations
for date arithmetic. They provide explicit function-based APIs that
complement the method and operator APIs on Datum.

Day-count Operations (from datum.arithmetic.ops):
    - days_until_first_day_of_next_month: forward stride
    - add_days, subtract_days: move by a non-negative count
    - shift_days: move by a signed count
    - delta_days: unsigned distance
    - difference_days: signed distance

Comparison Operations (from datum.arithmetic.comparisons):
    - is_equal, is_before, is_after: field-wise ordering
    - compare_ascending, compare_descending: sort comparators
    - min_datum, max_datum: find extremes

Weekday Operations (from datum.arithmetic.weekdays):
    - weekday_of: derive the Weekday
    - weekday_label: three-letter label
"""

from __future__ import annotations

from datum.arithmetic.comparisons import (
    compare_ascending,
    compare_descending,
    is_after,
    is_before,
    is_equal,
    max_datum,
    min_datum,
)
from datum.arithmetic.ops import (
    add_days,
    days_until_first_day_of_next_month,
    delta_days,
    difference_days,
    shift_days,
    subtract_days,
)
from datum.arithmetic.weekdays import weekday_label, weekday_of

__all__ = [
    # Day-count operations
    "days_until_first_day_of_next_month",
    "add_days",
    "subtract_days",
    "shift_days",
    "delta_days",
    "difference_days",
    # Comparison operations
    "is_equal",
    "is_before",
    "is_after",
    "compare_ascending",
    "compare_descending",
    "min_datum",
    "max_datum",
    # Weekday operations
    "weekday_of",
    "weekday_label",
]
