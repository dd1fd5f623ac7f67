"""Datum exception hierarchy.

All datum-specific exceptions inherit from DatumError.
"""

from __future__ import annotations


class DatumError(Exception):
    """Base exception for all datum errors."""

    pass


class ValidationError(DatumError):
    """Invalid input values.

    Raised when a calendar value is not an integer, is out of range,
    or does not name a real date.

    Examples:
        - Year value outside 0-9999
        - Month value outside 1-12
        - Day 30 in February
        - Negative day count passed to add_days
    """

    pass


class ParseError(ValidationError):
    """Failed to parse string representation.

    A ParseError is also a ValidationError, so callers that only care
    about bad input can catch the latter.

    Examples:
        - String not exactly 10 characters long
        - String not in YYYY-MM-DD form
        - JSON payload without a "value" field
    """

    pass


class InvariantViolation(DatumError):
    """Internal consistency failure in the calendar engine.

    Never raised for bad input. Seeing one means the arithmetic itself
    is wrong, and the operation is aborted rather than returning a
    plausible but incorrect answer.
    """

    pass


__all__ = [
    "DatumError",
    "ValidationError",
    "ParseError",
    "InvariantViolation",
]
