"""
Demo data for the heatmap page and CLI.
"""

import random
from datetime import date, timedelta
from typing import Optional

from calendar_heatmap.date_grid import parse_year_month


def generate_demo_data(
    start: str,
    end: str,
    max_value: int = 5000,
    seed: Optional[int] = None,
) -> list[dict]:
    """
    Generate one random value for every day from start to end.

    Args:
        start: First month as "YYYY-MM"
        end: Last month as "YYYY-MM" (inclusive, through its last day)
        max_value: Upper bound for the random integers
        seed: Seed for reproducible output

    Returns:
        List of {date, value} dicts ordered by date
    """
    rng = random.Random(seed)

    start_year, start_month = parse_year_month(start)
    end_year, end_month = parse_year_month(end)

    current = date(start_year, start_month + 1, 1)
    # First day of the month after end
    if end_month == 11:
        stop = date(end_year + 1, 1, 1)
    else:
        stop = date(end_year, end_month + 2, 1)

    data = []
    while current < stop:
        data.append({"date": current.isoformat(), "value": rng.randint(0, max_value)})
        current += timedelta(days=1)

    return data
