"""Core value types.

This module provides:
    - Datum: Calendar date in the proleptic Gregorian calendar
"""

from __future__ import annotations

from datum.core.datum import Datum

__all__: list[str] = [
    "Datum",
]
