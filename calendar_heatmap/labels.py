"""
Text shown around and inside heatmap cells: weekday headers, month labels,
formatted values and accessibility labels.
"""

import math
from typing import Optional

WEEKDAY_LABELS = {
    "en": ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"],
    "ko": ["일", "월", "화", "수", "목", "금", "토"],
}

ARIA_TEMPLATES = {
    "en": {
        "other_month": "{iso} (other month)",
        "no_data": "{iso}, no data",
        "value": "{iso}, value {value}",
    },
    "ko": {
        "other_month": "{iso} (다른 달)",
        "no_data": "{iso} 데이터 없음",
        "value": "{iso} 값 {value}",
    },
}


def ordered_weekday_labels(language: str = "en", week_start: str = "sun") -> list[str]:
    """Return weekday headers in column order for the week-start convention."""
    labels = WEEKDAY_LABELS.get(language, WEEKDAY_LABELS["en"])
    if week_start == "mon":
        return labels[1:] + labels[:1]
    return list(labels)


def format_month_label(year: int, month: int) -> str:
    """Format a 0-based month as "YYYY/MM"."""
    return f"{year}/{month + 1:02d}"


def format_day_value(value: Optional[float], unit: str = "") -> Optional[str]:
    """
    Format a day's value for display inside a cell.

    The value is rounded half up to an integer and grouped with thousands
    separators, e.g. 1234.5 -> "1,235". The unit, if any, is appended
    without a space.

    Returns:
        The formatted string, or None if there is no finite value
    """
    if value is None or isinstance(value, bool) or not math.isfinite(value):
        return None

    formatted = f"{math.floor(value + 0.5):,}"
    if not unit:
        return formatted
    return f"{formatted}{unit}"


def accessibility_label(
    iso: str,
    value: Optional[float],
    in_month: bool,
    unit: str = "",
    language: str = "en",
) -> str:
    """Build the screen reader label for a cell."""
    templates = ARIA_TEMPLATES.get(language, ARIA_TEMPLATES["en"])

    if not in_month:
        return templates["other_month"].format(iso=iso)

    formatted = format_day_value(value, unit)
    if formatted is None:
        return templates["no_data"].format(iso=iso)

    return templates["value"].format(iso=iso, value=formatted)
