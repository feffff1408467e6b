"""
calendar-heatmap: calendar-style heatmap of daily values

Entry point for the command line tool.
"""

import argparse
import logging
from pathlib import Path
from typing import Optional

from calendar_heatmap.assembler import build_heatmap
from calendar_heatmap.cli import display_heatmap, display_months, display_values, load_data_file
from calendar_heatmap.config import DEMO_SEED, get_log_level, validate_config
from calendar_heatmap.date_grid import build_months_or_fallback
from calendar_heatmap.demo import generate_demo_data

logger = logging.getLogger(__name__)


def configure_logging(level: Optional[int] = None) -> None:
    """Configure root logging for the CLI and server."""
    logging.basicConfig(
        level=level if level is not None else get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all CLI flags."""
    parser = argparse.ArgumentParser(
        prog="calendar-heatmap",
        description="Show daily values as a calendar heatmap",
    )
    parser.add_argument("start", help="First month, YYYY-MM")
    parser.add_argument("--end", help="Last month, YYYY-MM (default: current month)")
    parser.add_argument("--week-start", choices=["sun", "mon"], default="sun",
                        help="First day of the week")
    parser.add_argument("--data", type=Path,
                        help="JSON file with [{date, value}, ...] (default: demo data)")
    parser.add_argument("--month", type=int, default=0,
                        help="Index of the month to show")
    parser.add_argument("--lang", choices=["en", "ko"], default="en",
                        help="Weekday label language")
    parser.add_argument("--unit", default="", help="Unit appended to values")
    parser.add_argument("--list", action="store_true",
                        help="List the days with data below the grid")
    parser.add_argument("--serve", action="store_true",
                        help="Start the web app instead of printing")
    parser.add_argument("--host", default="127.0.0.1", help="Server host")
    parser.add_argument("--port", type=int, default=8000, help="Server port")
    return parser


def serve(host: str, port: int) -> int:
    """Run the web app with uvicorn."""
    import uvicorn

    from calendar_heatmap.app import app

    uvicorn.run(app, host=host, port=port, log_level="info")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    args = create_parser().parse_args(argv)
    configure_logging()

    # Validate configuration
    try:
        validate_config()
    except ValueError as e:
        print(f"\nConfiguration Error:\n{e}")
        return 1

    if args.serve:
        return serve(args.host, args.port)

    try:
        if args.data is not None:
            data = load_data_file(args.data)
        else:
            # Demo data covers the same months the grid shows
            last = build_months_or_fallback(args.start, args.end, args.week_start)[-1]
            data = generate_demo_data(
                args.start, f"{last.year:04d}-{last.month + 1:02d}", seed=int(DEMO_SEED)
            )
            logger.info("No data file given, using %d days of demo data", len(data))

        view = build_heatmap(
            args.start,
            data,
            options={
                "range": {"end": args.end, "weekStart": args.week_start},
                "labels": {"weekdayLanguage": args.lang},
                "cell": {"valueUnit": args.unit},
            },
            selected_index=args.month,
        )
    except ValueError as e:
        print(f"\nError: {e}")
        return 1

    display_months(view)
    display_heatmap(view)
    if args.list:
        display_values(view)

    return 0


if __name__ == "__main__":
    exit(main())
