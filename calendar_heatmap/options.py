"""
Widget option resolution for calendar-heatmap.

Callers pass nested option groups where every group and every field is
optional. resolve_config() merges them with the documented defaults into a
single flat ResolvedConfig. Malformed values never raise; they fall back to
their default and are logged at DEBUG level.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Optional

from calendar_heatmap.color_scale import is_hex_color

logger = logging.getLogger(__name__)

DEFAULT_CELL_SIZE = 44
DEFAULT_GAP = 4
DEFAULT_BASE_COLOR = "#3b82f6"
DEFAULT_EMPTY_COLOR = "#FFECEC"
DEFAULT_CELL_TEXT_COLOR = "#172343"
DEFAULT_TEXT_COLOR = "#ffffff"
DEFAULT_WEEKDAY_MARGIN_TOP = 6
DEFAULT_LEGEND_MARGIN = 12
DEFAULT_LEGEND_LABELS = ("Low", "Medium", "High", "Very High")
DEFAULT_CONTAINER_WIDTH = "auto"

# Applied under any caller-supplied container style
BASE_CONTAINER_STYLE = {"display": "inline-flex", "flexDirection": "column"}

WEEK_STARTS = ("sun", "mon")
WEEKDAY_LANGUAGES = ("en", "ko")
LEGEND_POSITIONS = ("top", "bottom")


@dataclass(frozen=True)
class ResolvedConfig:
    """Fully defaulted widget configuration."""

    cell_width: float = DEFAULT_CELL_SIZE
    cell_height: float = DEFAULT_CELL_SIZE
    gap: float = DEFAULT_GAP
    base_color: str = DEFAULT_BASE_COLOR
    empty_color: str = DEFAULT_EMPTY_COLOR
    cell_text_color: str = DEFAULT_CELL_TEXT_COLOR
    show_date: bool = True
    show_value: bool = True
    value_unit: str = ""  # empty string means no unit suffix
    show_month: bool = True
    show_weekday: bool = True
    weekday_language: str = "en"
    weekday_margin_top: float = DEFAULT_WEEKDAY_MARGIN_TOP
    week_start: str = "sun"
    show_legend: bool = True
    legend_position: str = "bottom"
    legend_labels: tuple[str, ...] = DEFAULT_LEGEND_LABELS
    legend_margin: float = DEFAULT_LEGEND_MARGIN
    container_width: Any = DEFAULT_CONTAINER_WIDTH  # number of px or CSS string
    container_style: dict = field(default_factory=lambda: dict(BASE_CONTAINER_STYLE))
    text_color: str = DEFAULT_TEXT_COLOR


def is_finite_number(value: Any) -> bool:
    """Return True for real, finite numbers (booleans excluded)."""
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def _group(options: dict, name: str) -> dict:
    group = options.get(name)
    if group is None:
        return {}
    if not isinstance(group, dict):
        logger.debug("Ignoring option group %r: expected a mapping, got %r", name, group)
        return {}
    return group


def _pick(group: dict, key: str, default: Any, is_valid) -> Any:
    """Return group[key] if present and valid, otherwise the default."""
    if key not in group or group[key] is None:
        return default

    value = group[key]
    if not is_valid(value):
        logger.debug("Option %r=%r is invalid, using default %r", key, value, default)
        return default
    return value


def _non_negative_number(value: Any) -> bool:
    return is_finite_number(value) and value >= 0


def _positive_number(value: Any) -> bool:
    return is_finite_number(value) and value > 0


def _boolean(value: Any) -> bool:
    return isinstance(value, bool)


def _text(value: Any) -> bool:
    return isinstance(value, str)


def _color(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _one_of(choices: tuple):
    return lambda value: value in choices


def resolve_cell_size(size: Any, fallback: float = DEFAULT_CELL_SIZE) -> tuple[float, float]:
    """
    Resolve a cell size option into (width, height).

    Args:
        size: A number (square), a mapping with "width" and/or "height", or None
        fallback: Square size used when nothing usable is supplied

    Returns:
        Tuple of (width, height)
    """
    if _positive_number(size):
        return (size, size)

    if isinstance(size, dict):
        width = size.get("width") if _positive_number(size.get("width")) else None
        height = size.get("height") if _positive_number(size.get("height")) else None

        if width and height:
            return (width, height)
        if width:
            return (width, width)
        if height:
            return (height, height)

    if size is not None:
        logger.debug("Cell size %r is invalid, using %spx square", size, fallback)
    return (fallback, fallback)


def resolve_labels_list(labels: Any) -> tuple[str, ...]:
    """
    Resolve a legend label list, or fall back to the defaults.

    A non-string entry is replaced by the default label at the same position
    so the caller's other labels keep their levels.
    """
    if not isinstance(labels, (list, tuple)):
        if labels is not None:
            logger.debug("Legend labels %r are not a list, using defaults", labels)
        return DEFAULT_LEGEND_LABELS

    resolved = []
    for i, label in enumerate(labels):
        if isinstance(label, str):
            resolved.append(label)
        elif i < len(DEFAULT_LEGEND_LABELS):
            logger.debug("Legend label %r at %d is invalid, using default", label, i)
            resolved.append(DEFAULT_LEGEND_LABELS[i])
    return tuple(resolved) or DEFAULT_LEGEND_LABELS


def resolve_config(options: Optional[dict] = None) -> ResolvedConfig:
    """
    Merge caller options with defaults.

    Args:
        options: Mapping with optional "range", "cell", "labels", "legend",
            "container" and "typography" groups (camelCase keys, as the
            widget's callers send them)

    Returns:
        ResolvedConfig with every field populated
    """
    if not isinstance(options, dict):
        options = {}

    range_opts = _group(options, "range")
    cell = _group(options, "cell")
    labels = _group(options, "labels")
    legend = _group(options, "legend")
    container = _group(options, "container")
    typography = _group(options, "typography")

    cell_width, cell_height = resolve_cell_size(cell.get("size"))

    container_style = dict(BASE_CONTAINER_STYLE)
    extra_style = container.get("style")
    if isinstance(extra_style, dict):
        container_style.update(extra_style)
    elif extra_style is not None:
        logger.debug("Container style %r is not a mapping, ignoring", extra_style)

    return ResolvedConfig(
        cell_width=cell_width,
        cell_height=cell_height,
        gap=_pick(cell, "gap", DEFAULT_GAP, _non_negative_number),
        base_color=_pick(cell, "baseColor", DEFAULT_BASE_COLOR, is_hex_color),
        empty_color=_pick(cell, "emptyColor", DEFAULT_EMPTY_COLOR, _color),
        cell_text_color=_pick(cell, "textColor", DEFAULT_CELL_TEXT_COLOR, _color),
        show_date=_pick(cell, "showDate", True, _boolean),
        show_value=_pick(cell, "showValue", True, _boolean),
        value_unit=_pick(cell, "valueUnit", "", _text),
        show_month=_pick(labels, "showMonth", True, _boolean),
        show_weekday=_pick(labels, "showWeekday", True, _boolean),
        weekday_language=_pick(labels, "weekdayLanguage", "en", _one_of(WEEKDAY_LANGUAGES)),
        weekday_margin_top=_pick(
            labels, "weekdayMarginTop", DEFAULT_WEEKDAY_MARGIN_TOP, _non_negative_number
        ),
        week_start=_pick(range_opts, "weekStart", "sun", _one_of(WEEK_STARTS)),
        show_legend=_pick(legend, "show", True, _boolean),
        legend_position=_pick(legend, "position", "bottom", _one_of(LEGEND_POSITIONS)),
        legend_labels=resolve_labels_list(legend.get("labels")),
        legend_margin=_pick(legend, "margin", DEFAULT_LEGEND_MARGIN, _non_negative_number),
        container_width=_pick(
            container,
            "width",
            DEFAULT_CONTAINER_WIDTH,
            lambda v: _positive_number(v) or (isinstance(v, str) and v.strip() != ""),
        ),
        container_style=container_style,
        text_color=_pick(typography, "textColor", DEFAULT_TEXT_COLOR, _color),
    )
