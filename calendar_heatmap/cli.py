"""
CLI display functions for calendar-heatmap.
"""

import json
from pathlib import Path

from calendar_heatmap.assembler import HeatmapView

# One shade per legend level, lightest first
SHADES = ["░", "▒", "▓", "█"]
NO_DATA = "·"
CELL_WIDTH = 4


def shade_for(intensity: float) -> str:
    """
    Pick the shade character closest to an intensity.

    Args:
        intensity: Value in [0, 1]

    Returns:
        One of SHADES; legend levels 0, 1/3, 2/3 and 1 map to the four shades
    """
    index = round(max(0.0, min(1.0, intensity)) * (len(SHADES) - 1))
    return SHADES[index]


def format_cell(cell) -> str:
    """Format one cell as a fixed-width string for the terminal grid."""
    if not cell.in_month:
        return " " * CELL_WIDTH

    marker = shade_for(cell.intensity) if cell.raw_value is not None else NO_DATA
    day = f"{cell.day_number:>2}" if cell.show_day_number else "  "
    return f"{day}{marker} "


def format_legend(view: HeatmapView) -> str:
    """Format the legend as a single line."""
    parts = [f"{shade_for(level.intensity)} {level.label}" for level in view.legend]
    return "Legend: " + "  ".join(parts)


def display_heatmap(view: HeatmapView) -> None:
    """
    Display the selected month of a heatmap to the console.

    Args:
        view: Presentation model from build_heatmap()
    """
    config = view.config

    if config.show_month:
        print(f"📅 {view.month_label}")

    if config.show_legend and config.legend_position == "top":
        print(format_legend(view))

    if config.show_weekday:
        header = "".join(f"{label:<{CELL_WIDTH}}" for label in view.weekday_labels)
        print(header.rstrip())

    for week in view.weeks:
        row = "".join(format_cell(cell) for cell in week)
        print(row.rstrip())

    if config.show_legend and config.legend_position == "bottom":
        print(format_legend(view))

    print()


def display_months(view: HeatmapView) -> None:
    """Display the selectable months, marking the one being shown."""
    if not view.has_multiple_months:
        return

    print("Months:")
    for month in view.months:
        marker = "▶" if month["index"] == view.selected_index else " "
        print(f" {marker} [{month['index']:>2}] {month['label']}")
    print()


def display_values(view: HeatmapView) -> None:
    """
    Display the days of the selected month that have data.

    Args:
        view: Presentation model from build_heatmap()
    """
    rows = [cell for cell in view.cells if cell.in_month and cell.formatted_value is not None]
    if not rows:
        print("No data for this month.")
        print()
        return

    for cell in rows:
        print(f"  {cell.iso}  {cell.formatted_value:>12}  {shade_for(cell.intensity)}")
    print()


def load_data_file(path: Path) -> list[dict]:
    """
    Load day values from a JSON file.

    The file may hold a list of {date, value} objects, or an object with a
    "data" key containing that list.

    Raises:
        ValueError: If the file cannot be read or has the wrong shape
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ValueError(f"Could not read data file {path}: {e}") from e

    if isinstance(payload, dict):
        payload = payload.get("data")

    if not isinstance(payload, list):
        raise ValueError(f"Data file {path} must contain a list of {{date, value}} objects")

    return payload
