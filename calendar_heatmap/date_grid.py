"""
Month grid construction for the heatmap calendar.

Each month is laid out as complete 7-day weeks, padded with days from the
neighbouring months so the grid always has a fixed number of columns.
"""

import calendar
import logging
import re
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Optional

from calendar_heatmap.labels import format_month_label

logger = logging.getLogger(__name__)

YEAR_MONTH_PATTERN = re.compile(r"^\s*(\d{4})-(\d{1,2})\s*$")

# Every month in these years can be padded to whole weeks within date.min and date.max
MIN_YEAR = 2
MAX_YEAR = 9998

# date.weekday() value of the first column for each week-start convention
WEEK_START_WEEKDAY = {"sun": 6, "mon": 0}


@dataclass(frozen=True)
class MonthDay:
    """One grid cell date."""

    iso: str
    in_month: bool  # False for padding days from adjacent months


@dataclass
class MonthGrid:
    """All grid days for one calendar month."""

    year: int
    month: int  # 0-based, January = 0
    days: list[MonthDay] = field(default_factory=list)

    @property
    def label(self) -> str:
        """Return the month as shown in the month switcher, e.g. "2025/02"."""
        return format_month_label(self.year, self.month)

    @property
    def weeks(self) -> list[list[MonthDay]]:
        """Return the days split into rows of seven."""
        return [self.days[i:i + 7] for i in range(0, len(self.days), 7)]


def parse_year_month(value: str) -> tuple[int, int]:
    """
    Parse a "YYYY-MM" string.

    Args:
        value: Year and 1-based month, e.g. "2025-02"

    Returns:
        Tuple of (year, 0-based month)

    Raises:
        ValueError: If the string is not a valid year-month, or the year is
            outside MIN_YEAR..MAX_YEAR
    """
    match = YEAR_MONTH_PATTERN.match(value) if isinstance(value, str) else None
    if match is None:
        raise ValueError(f"Invalid month {value!r}, expected YYYY-MM")

    year = int(match.group(1))
    month = int(match.group(2))
    if not 1 <= month <= 12 or not MIN_YEAR <= year <= MAX_YEAR:
        raise ValueError(f"Invalid month {value!r}, expected YYYY-MM")

    return year, month - 1


def start_of_week(day: date, week_start: str) -> date:
    """Return the most recent week-start day on or before the given day."""
    target = WEEK_START_WEEKDAY[week_start]
    return day - timedelta(days=(day.weekday() - target) % 7)


def end_of_week(day: date, week_start: str) -> date:
    """Return the last day of the week containing the given day."""
    target = (WEEK_START_WEEKDAY[week_start] - 1) % 7
    return day + timedelta(days=(target - day.weekday()) % 7)


def build_month_days(year: int, month: int, week_start: str = "sun") -> list[MonthDay]:
    """
    Build the padded day list for one month.

    Args:
        year: Calendar year
        month: 0-based month
        week_start: "sun" or "mon"

    Returns:
        List of MonthDay whose length is a multiple of 7
    """
    first_of_month = date(year, month + 1, 1)
    last_of_month = date(year, month + 1, calendar.monthrange(year, month + 1)[1])

    grid_start = start_of_week(first_of_month, week_start)
    grid_end = end_of_week(last_of_month, week_start)

    days = []
    current = grid_start
    while current <= grid_end:
        days.append(MonthDay(
            iso=current.isoformat(),
            in_month=current.month == month + 1 and current.year == year,
        ))
        current += timedelta(days=1)

    return days


def build_months(
    start: str,
    end: Optional[str] = None,
    week_start: str = "sun",
    today: Optional[date] = None,
) -> list[MonthGrid]:
    """
    Build one MonthGrid per month from start to end inclusive.

    Args:
        start: First month as "YYYY-MM"
        end: Last month as "YYYY-MM"; defaults to the month of today
        week_start: "sun" or "mon"
        today: Override for today's date (for testing)

    Returns:
        List of MonthGrid, empty if end precedes start

    Raises:
        ValueError: If start or end is not a valid "YYYY-MM" string
    """
    start_year, start_month = parse_year_month(start)

    if end is None:
        if today is None:
            today = date.today()
        end_year, end_month = today.year, today.month - 1
    else:
        end_year, end_month = parse_year_month(end)

    months = []
    year, month = start_year, start_month
    while (year, month) <= (end_year, end_month):
        months.append(MonthGrid(
            year=year,
            month=month,
            days=build_month_days(year, month, week_start),
        ))
        year, month = (year + 1, 0) if month == 11 else (year, month + 1)

    return months


def build_months_or_fallback(
    start: str,
    end: Optional[str] = None,
    week_start: str = "sun",
    today: Optional[date] = None,
) -> list[MonthGrid]:
    """
    Like build_months(), but never returns an empty list.

    When end precedes start, or is not a valid "YYYY-MM" string, the single
    month of start is returned instead, so there is always something to
    render.

    Raises:
        ValueError: If start is not a valid "YYYY-MM" string
    """
    year, month = parse_year_month(start)

    if end is not None:
        try:
            parse_year_month(end)
        except ValueError:
            logger.debug("End month %r is invalid, showing %s only", end, start)
            return [MonthGrid(year=year, month=month, days=build_month_days(year, month, week_start))]

    months = build_months(start, end, week_start, today=today)
    if months:
        return months

    logger.info("End month %s precedes start %s, showing %s only", end, start, start)
    return [MonthGrid(year=year, month=month, days=build_month_days(year, month, week_start))]
