"""
Per-day value lookup for the heatmap.
"""

import math
from typing import Optional


def to_finite(value) -> Optional[float]:
    """Return value if it is a real finite number, otherwise None."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return value


def index_values(data: list[dict]) -> dict[str, Optional[float]]:
    """
    Build a date -> value lookup from raw day entries.

    Args:
        data: List of dicts with 'date' (YYYY-MM-DD) and 'value' keys

    Returns:
        Dictionary mapping each date string to a finite number, or None when
        the entry carries no usable value. When a date appears more than
        once the last entry wins. Date strings are not validated; a malformed
        date simply never matches a calendar cell.
    """
    index: dict[str, Optional[float]] = {}

    for entry in data or []:
        if not isinstance(entry, dict):
            continue
        day = entry.get("date")
        if not isinstance(day, str) or not day:
            continue
        index[day] = to_finite(entry.get("value"))

    return index


def finite_values(data: list[dict]) -> list[float]:
    """
    Collect every finite value in the data, in input order.

    The whole data set is used, not only the displayed month, so a value
    renders the same color whichever month is shown.
    """
    values = []
    for entry in data or []:
        if not isinstance(entry, dict):
            continue
        value = to_finite(entry.get("value"))
        if value is not None:
            values.append(value)
    return values
