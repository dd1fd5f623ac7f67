"""JSON serialization and deserialization for Datum.

The JSON form is a tagged dictionary holding the ISO 8601 string:

    {"_type": "Datum", "value": "2024-01-15"}

Examples:
    >>> from datum import Datum
    >>> to_json(Datum(2024, 1, 15))
    {'_type': 'Datum', 'value': '2024-01-15'}
    >>> from_json({"_type": "Datum", "value": "2024-01-15"})
    Datum(2024, 1, 15)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from datum.errors import ParseError
from datum.format.iso8601 import format_iso8601, parse_iso8601

if TYPE_CHECKING:
    from datum.core.datum import Datum

_TYPE_TAG = "Datum"


def to_json(value: Datum) -> dict[str, Any]:
    """Convert a Datum to a JSON-serializable dictionary.

    Raises:
        TypeError: If value is not a Datum.
    """
    from datum.core.datum import Datum

    if not isinstance(value, Datum):
        raise TypeError(f"expected Datum, got {type(value).__name__}")

    return {"_type": _TYPE_TAG, "value": format_iso8601(value)}


def from_json(data: dict[str, Any]) -> Datum:
    """Create a Datum from a JSON dictionary.

    Args:
        data: Dictionary with _type and value keys.

    Returns:
        The Datum named by data["value"].

    Raises:
        ParseError: If data is not a dict, has the wrong _type, or
            its value is missing or malformed.
        ValidationError: If the value is well-formed but not a real date.
    """
    if not isinstance(data, dict):
        raise ParseError(f"expected dict, got {type(data).__name__}")

    type_tag = data.get("_type")
    if type_tag != _TYPE_TAG:
        raise ParseError(f"expected _type {_TYPE_TAG!r}, got {type_tag!r}")

    value = data.get("value")
    if not isinstance(value, str):
        raise ParseError("missing or non-string 'value' field for Datum")

    return parse_iso8601(value)


__all__ = [
    "to_json",
    "from_json",
]
