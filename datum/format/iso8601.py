"""ISO 8601 formatting and parsing.

This module converts Datum values to and from the fixed calendar-date
form ``YYYY-MM-DD``: always exactly 10 characters, four-digit unsigned
year, two-digit month and day, no time component.

Functions:
    format_iso8601: Format a Datum as ``YYYY-MM-DD``.
    parse_iso8601: Parse a ``YYYY-MM-DD`` string into a Datum.
    pad_with_leading_zeros: Left-pad a string with zeros.

Examples:
    >>> from datum.core.datum import Datum
    >>> format_iso8601(Datum(5, 3, 7))
    '0005-03-07'
    >>> parse_iso8601("2019-08-26")
    Datum(2019, 8, 26)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from datum._internal.constants import ISO_FORMAT, ISO_PATTERN, ISO_STRING_LENGTH
from datum.errors import ParseError

if TYPE_CHECKING:
    from datum.core.datum import Datum


def pad_with_leading_zeros(s: str, width: int) -> str:
    """Left-pad s with '0' until it is at least width characters long.

    Strings already at or beyond width are returned unchanged.

    Examples:
        >>> pad_with_leading_zeros("4", 2)
        '04'
        >>> pad_with_leading_zeros("22", 4)
        '0022'
        >>> pad_with_leading_zeros("3", 0)
        '3'
    """
    if len(s) >= width:
        return s
    return "0" * (width - len(s)) + s


def format_iso8601(datum: Datum) -> str:
    """Format a Datum as ``YYYY-MM-DD``.

    Examples:
        >>> from datum.core.datum import Datum
        >>> format_iso8601(Datum(1988, 9, 11))
        '1988-09-11'
    """
    year = pad_with_leading_zeros(str(datum.year), 4)
    month = pad_with_leading_zeros(str(datum.month), 2)
    day = pad_with_leading_zeros(str(datum.day), 2)
    return f"{year}-{month}-{day}"


def parse_iso8601(s: str) -> Datum:
    """Parse a ``YYYY-MM-DD`` string into a Datum.

    The fields are read as base-10 integers and passed to the Datum
    constructor, so calendar validity is checked as well as shape.

    Args:
        s: The string to parse.

    Returns:
        The parsed Datum.

    Raises:
        ParseError: If s is not a 10-character ``YYYY-MM-DD`` string.
        ValidationError: If the fields do not name a real date.

    Examples:
        >>> parse_iso8601("0000-01-01")
        Datum(0, 1, 1)

        >>> parse_iso8601("2019-02-30")
        Traceback (most recent call last):
        ...
        ValidationError: the month 2019-02 has only 28 days, got day 30
    """
    # Import here to avoid circular imports
    from datum.core.datum import Datum

    if not isinstance(s, str):
        raise ParseError(f"expected str, got {type(s).__name__}")

    if len(s) != ISO_STRING_LENGTH:
        raise ParseError(
            f"date string must have length {ISO_STRING_LENGTH}, "
            f"got {len(s)}: {s!r}"
        )

    match = ISO_PATTERN.fullmatch(s)
    if match is None:
        raise ParseError(f"date string must match format {ISO_FORMAT}, got {s!r}")

    year = int(match.group(1), 10)
    month = int(match.group(2), 10)
    day = int(match.group(3), 10)

    return Datum(year, month, day)


__all__ = [
    "format_iso8601",
    "parse_iso8601",
    "pad_with_leading_zeros",
]
