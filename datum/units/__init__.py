"""Calendar units and enumerations.

This module provides:
    - Weekday: ISO weekday enum (Monday=0 ... Sunday=6)
"""

from __future__ import annotations

from datum.units.weekday import Weekday

__all__: list[str] = [
    "Weekday",
]
