"""Datum conversion utilities.

This module provides functions for converting Datum values to and from
other representations:
    - JSON serialization and deserialization
    - Python's datetime.date, and the host clock

Examples:
    >>> from datum import Datum
    >>> from datum.convert import to_json, from_json
    >>> from_json(to_json(Datum(2024, 1, 15))) == Datum(2024, 1, 15)
    True
"""

from __future__ import annotations

from datum.convert.json import from_json, to_json
from datum.convert.native import age, from_native, to_native, today

__all__ = [
    # JSON
    "to_json",
    "from_json",
    # Host values
    "from_native",
    "to_native",
    "today",
    "age",
]
