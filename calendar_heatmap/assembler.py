"""
Presentation model assembly for the calendar heatmap.

Combines the month grids, value lookup, intensity scale and resolved options
into per-cell view models for the selected month. Everything is recomputed
from the inputs on each call; the selected month index is passed in and the
clamped index is returned with the result.
"""

import logging
from dataclasses import asdict, dataclass, field
from datetime import date, datetime
from typing import Any, Optional

from calendar_heatmap.color_scale import IntensityScale, build_scale, mix_to_white
from calendar_heatmap.date_grid import MonthGrid, build_months_or_fallback
from calendar_heatmap.labels import (
    accessibility_label,
    format_day_value,
    ordered_weekday_labels,
)
from calendar_heatmap.legend import LegendLevel, build_legend
from calendar_heatmap.options import ResolvedConfig, resolve_config
from calendar_heatmap.values import finite_values, index_values

logger = logging.getLogger(__name__)

COLUMNS = 7
OUT_OF_MONTH_OPACITY = 0.5


@dataclass(frozen=True)
class CellViewModel:
    """Everything a renderer needs to paint one grid cell."""

    iso: str
    in_month: bool
    raw_value: Optional[float]
    intensity: float
    fill_color: str
    day_number: int
    formatted_value: Optional[str]
    accessibility_label: str
    is_interactive: bool
    opacity: float = 1.0
    show_day_number: bool = True
    show_value: bool = False


@dataclass
class HeatmapView:
    """Presentation model for one render pass of the widget."""

    months: list[dict]
    selected_index: int
    month_label: str
    has_multiple_months: bool
    weekday_labels: list[str]
    cells: list[CellViewModel]
    legend: list[LegendLevel]
    grid_width: float
    config: ResolvedConfig
    scale_thresholds: tuple[float, float]
    weeks: list[list[CellViewModel]] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Return a JSON-serializable dictionary (weeks omitted, cells are flat)."""
        result = asdict(self)
        result.pop("weeks")
        result["config"]["legend_labels"] = list(self.config.legend_labels)
        result["scale_thresholds"] = list(self.scale_thresholds)
        return result


def clamp_month_index(index: Any, month_count: int) -> int:
    """
    Clamp a selected month index into the available range.

    Args:
        index: Requested index (anything not an int is treated as 0)
        month_count: Number of available months

    Returns:
        An index in [0, month_count - 1], or 0 when there are no months
    """
    if isinstance(index, bool) or not isinstance(index, int) or index < 0:
        return 0
    if month_count <= 0:
        return 0
    return min(index, month_count - 1)


def _day_number(iso: str) -> int:
    return datetime.strptime(iso, "%Y-%m-%d").day


def assemble_cells(
    grid: MonthGrid,
    value_index: dict[str, Optional[float]],
    scale: IntensityScale,
    config: ResolvedConfig,
    clickable: bool = False,
) -> list[CellViewModel]:
    """
    Build one view model per day of a month grid.

    Padding days from adjacent months are always rendered empty and are never
    interactive, even when the data has a value for that date. An in-month
    day accepts clicks when a handler is attached and the data has an entry
    for that date, with or without a usable value.

    Args:
        grid: Month grid to render
        value_index: Lookup from index_values()
        scale: Scale built from the whole data set
        config: Resolved widget options
        clickable: Whether a day-click handler is attached

    Returns:
        List of CellViewModel in grid order
    """
    cells = []

    for day in grid.days:
        has_entry = day.in_month and day.iso in value_index
        value = value_index.get(day.iso) if day.in_month else None
        has_value = value is not None

        intensity = scale(value) if has_value else 0.0
        fill_color = mix_to_white(config.base_color, intensity) if has_value else config.empty_color
        formatted_value = format_day_value(value, config.value_unit)

        cells.append(CellViewModel(
            iso=day.iso,
            in_month=day.in_month,
            raw_value=value,
            intensity=intensity,
            fill_color=fill_color,
            day_number=_day_number(day.iso),
            formatted_value=formatted_value,
            accessibility_label=accessibility_label(
                day.iso,
                value,
                day.in_month,
                unit=config.value_unit,
                language=config.weekday_language,
            ),
            is_interactive=clickable and has_entry,
            opacity=1.0 if day.in_month else OUT_OF_MONTH_OPACITY,
            show_day_number=config.show_date and day.in_month,
            show_value=config.show_value and day.in_month and formatted_value is not None,
        ))

    return cells


def day_click_payload(cell: CellViewModel) -> Optional[dict]:
    """
    Return the payload delivered to a day-click handler for a cell.

    Returns:
        Dict with 'date', 'value' and 'inMonth', or None if the cell does not
        accept clicks
    """
    if not cell.is_interactive:
        return None
    return {"date": cell.iso, "value": cell.raw_value, "inMonth": cell.in_month}


def build_heatmap(
    start: str,
    data: list[dict],
    options: Optional[dict] = None,
    selected_index: int = 0,
    clickable: bool = False,
    today: Optional[date] = None,
) -> HeatmapView:
    """
    Build the complete presentation model for the widget.

    Args:
        start: First month as "YYYY-MM"
        data: List of {date, value} dicts
        options: Nested option groups, see resolve_config(); the end month
            comes from options["range"]["end"]
        selected_index: Index of the month to display
        clickable: Whether a day-click handler is attached
        today: Override for today's date, used when no end month is given

    Returns:
        HeatmapView for the (clamped) selected month

    Raises:
        ValueError: If start is not a valid "YYYY-MM" string (an invalid end
            month falls back to the start month)
    """
    config = resolve_config(options)

    range_opts = options.get("range") if isinstance(options, dict) else None
    end = range_opts.get("end") if isinstance(range_opts, dict) else None

    months = build_months_or_fallback(start, end, config.week_start, today=today)
    index = clamp_month_index(selected_index, len(months))
    active = months[index]

    value_index = index_values(data)
    scale = build_scale(finite_values(data))
    cells = assemble_cells(active, value_index, scale, config, clickable=clickable)

    logger.debug(
        "Built heatmap for %s: %d months, %d cells, scale %s",
        active.label, len(months), len(cells), scale.thresholds,
    )

    return HeatmapView(
        months=[
            {"index": i, "year": m.year, "month": m.month, "label": m.label}
            for i, m in enumerate(months)
        ],
        selected_index=index,
        month_label=active.label,
        has_multiple_months=len(months) > 1,
        weekday_labels=ordered_weekday_labels(config.weekday_language, config.week_start),
        cells=cells,
        legend=build_legend(config.legend_labels, show=config.show_legend),
        grid_width=COLUMNS * config.cell_width + config.gap * (COLUMNS - 1),
        config=config,
        scale_thresholds=scale.thresholds,
        weeks=[cells[i:i + COLUMNS] for i in range(0, len(cells), COLUMNS)],
    )
