"""
Legend levels for the heatmap color scale.
"""

from dataclasses import dataclass
from typing import Optional

from calendar_heatmap.options import DEFAULT_LEGEND_LABELS

LEGEND_STEP_COUNT = 4


@dataclass(frozen=True)
class LegendLevel:
    """One labelled reference point on the color scale."""

    label: str
    intensity: float


def resolve_legend_labels(labels: Optional[list[str]]) -> list[str]:
    """
    Return exactly LEGEND_STEP_COUNT labels.

    Caller labels are used left to right; missing ones are filled from the
    defaults at the same position, extras are dropped.
    """
    base = list(labels) if labels else list(DEFAULT_LEGEND_LABELS)
    if len(base) >= LEGEND_STEP_COUNT:
        return base[:LEGEND_STEP_COUNT]
    return base + list(DEFAULT_LEGEND_LABELS[len(base):LEGEND_STEP_COUNT])


def build_legend(labels: Optional[list[str]] = None, show: bool = True) -> list[LegendLevel]:
    """
    Build the legend entries.

    Args:
        labels: Caller-supplied labels (any number, may be empty)
        show: Whether the legend is displayed at all

    Returns:
        Four LegendLevel entries at intensities 0, 1/3, 2/3 and 1, or an
        empty list when the legend is hidden
    """
    if not show:
        return []

    resolved = resolve_legend_labels(labels)
    return [
        LegendLevel(label=resolved[i], intensity=i / (LEGEND_STEP_COUNT - 1))
        for i in range(LEGEND_STEP_COUNT)
    ]
