"""Date formatting and parsing.

Functions:
    parse_iso8601: Parse a ``YYYY-MM-DD`` string.
    format_iso8601: Format a Datum as ``YYYY-MM-DD``.
    pad_with_leading_zeros: Left-pad a string with zeros.
"""

from __future__ import annotations

from datum.format.iso8601 import (
    format_iso8601,
    pad_with_leading_zeros,
    parse_iso8601,
)

__all__: list[str] = [
    "parse_iso8601",
    "format_iso8601",
    "pad_with_leading_zeros",
]
