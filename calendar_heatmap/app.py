"""
FastAPI web application for calendar-heatmap.

Provides the heatmap presentation model as JSON and a server-rendered demo
page that paints it.
"""

import logging
import re
from pathlib import Path
from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, Field

from calendar_heatmap.assembler import build_heatmap, day_click_payload
from calendar_heatmap.color_scale import mix_to_white
from calendar_heatmap.config import DEMO_END, DEMO_SEED, DEMO_START, validate_config
from calendar_heatmap.demo import generate_demo_data

logger = logging.getLogger(__name__)

app = FastAPI(
    title="calendar-heatmap",
    description="Calendar-style heatmap of daily values",
    version="0.1.0",
)

templates = Jinja2Templates(directory=Path(__file__).parent / "templates")

# CSS properties that take plain numbers rather than pixel lengths
UNITLESS_CSS = {"opacity", "font-weight", "line-height", "z-index", "flex", "flex-grow", "flex-shrink"}

# Widget options used for the demo page
DEMO_OPTIONS = {
    "cell": {
        "size": {"width": 52, "height": 40},
        "gap": 4,
        "baseColor": "#fdbab0",
        "emptyColor": "#FFECEC",
        "textColor": "#172343",
    },
    "labels": {"weekdayLanguage": "en", "showWeekday": True},
    "legend": {"show": True, "position": "bottom"},
    "container": {
        "style": {"padding": 24, "borderRadius": 8, "background": "#172343"},
    },
    "typography": {"textColor": "#ffffff"},
}


def css_style(style: dict) -> str:
    """
    Render a style mapping as an inline CSS declaration string.

    camelCase keys become kebab-case and bare numbers become pixel lengths,
    e.g. {"borderRadius": 8} -> "border-radius: 8px".
    """
    declarations = []
    for key, value in (style or {}).items():
        prop = re.sub(r"(?<!^)(?=[A-Z])", "-", key).lower()
        if isinstance(value, (int, float)) and not isinstance(value, bool) and prop not in UNITLESS_CSS:
            value = f"{value}px"
        declarations.append(f"{prop}: {value}")
    return "; ".join(declarations)


templates.env.filters["css"] = css_style
templates.env.globals["mix_to_white"] = mix_to_white


class HeatmapRequest(BaseModel):
    """Request model for building a heatmap."""

    start: str = Field(..., description="First month, YYYY-MM")
    data: list[Any] = Field(default_factory=list, description="List of {date, value} objects")
    range: Any = Field(None, description="{end, weekStart}")
    cell: Any = Field(None, description="Cell options")
    labels: Any = Field(None, description="Month and weekday label options")
    legend: Any = Field(None, description="Legend options")
    container: Any = Field(None, description="Container options")
    typography: Any = Field(None, description="Typography options")
    selected_index: int = Field(0, description="Index of the month to display")
    clickable: bool = Field(False, description="Whether the host handles day clicks")

    def options(self) -> dict:
        """Return the option groups in the shape resolve_config() expects."""
        return {
            "range": self.range,
            "cell": self.cell,
            "labels": self.labels,
            "legend": self.legend,
            "container": self.container,
            "typography": self.typography,
        }


class DayClickRequest(HeatmapRequest):
    """Request model for resolving a click on a day cell."""

    date: str = Field(..., description="Clicked day, YYYY-MM-DD")


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "detail": str(exc)},
    )


def _build_view(request: HeatmapRequest, clickable: bool):
    try:
        return build_heatmap(
            request.start,
            request.data,
            options=request.options(),
            selected_index=request.selected_index,
            clickable=clickable,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


@app.post("/api/heatmap")
def get_heatmap(request: HeatmapRequest):
    """
    Build the heatmap presentation model.

    Args:
        request: HeatmapRequest with start month, data and option groups

    Returns:
        JSON with months, selected_index, weekday_labels, cells, legend and
        the resolved config
    """
    return _build_view(request, clickable=request.clickable).to_dict()


@app.post("/api/heatmap/click")
def click_day(request: DayClickRequest):
    """
    Resolve a click on a day of the selected month.

    Returns:
        JSON with date, value and inMonth for an interactive cell

    Raises:
        HTTPException: 404 if the date is not a clickable cell of the month
    """
    view = _build_view(request, clickable=True)

    for cell in view.cells:
        if cell.iso == request.date:
            payload = day_click_payload(cell)
            if payload is not None:
                return payload
            break

    raise HTTPException(
        status_code=404,
        detail=f"{request.date} is not a clickable day of {view.month_label}",
    )


@app.get("/", response_class=HTMLResponse)
def index(request: Request, month: Optional[int] = None):
    """Render the demo heatmap page."""
    try:
        validate_config()
    except ValueError as e:
        raise HTTPException(status_code=500, detail=f"Configuration error: {e}")

    data = generate_demo_data(DEMO_START, DEMO_END, seed=int(DEMO_SEED))
    options = dict(DEMO_OPTIONS, range={"end": DEMO_END, "weekStart": "sun"})
    view = build_heatmap(DEMO_START, data, options=options, selected_index=month or 0)

    return templates.TemplateResponse(request, "index.html", {"view": view, "config": view.config})
