"""Datum: an immutable calendar date without time or timezone.

A Datum is a (year, month, day) value in the proleptic Gregorian
calendar, years 0 through 9999. All date arithmetic walks the calendar
a month at a time, so month lengths have a single source of truth.

Core Types:
    Datum: Calendar date (year, month, day)

Units:
    Weekday: ISO weekday, Monday=0 through Sunday=6

Format Functions:
    parse_iso8601: Parse a ``YYYY-MM-DD`` string
    format_iso8601: Format a Datum as ``YYYY-MM-DD``

Exceptions:
    DatumError: Base exception
    ValidationError: Invalid input values
    ParseError: Failed to parse string
    InvariantViolation: Internal consistency failure

Logging:
    The package logs through loguru and is disabled by default. Call
    ``logger.enable("datum")`` to see its records.

Example:
    >>> from datum import Datum
    >>> d = Datum(2028, 12, 30)
    >>> d.add_days(2)
    Datum(2029, 1, 1)
    >>> d.weekday_label()
    'sat'
"""

from __future__ import annotations

from loguru import logger

__version__ = "0.1.0"

# Core types
from datum.core.datum import Datum

# Units
from datum.units.weekday import Weekday

# Exceptions
from datum.errors import (
    DatumError,
    InvariantViolation,
    ParseError,
    ValidationError,
)

# Format functions
from datum.format import format_iso8601, parse_iso8601

# Calendar tables
from datum._internal.calendar import days_in_month, days_in_year, is_leap_year

logger.disable("datum")

__all__: list[str] = [
    "__version__",
    # Core types
    "Datum",
    # Units
    "Weekday",
    # Exceptions
    "DatumError",
    "ValidationError",
    "ParseError",
    "InvariantViolation",
    # Format functions
    "parse_iso8601",
    "format_iso8601",
    # Calendar tables
    "is_leap_year",
    "days_in_month",
    "days_in_year",
]
