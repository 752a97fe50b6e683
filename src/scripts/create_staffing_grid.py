#!/usr/bin/env python3
"""
Render the weekly staffing grid from a planning snapshot.

Reads a JSON file with Daylite contacts and projects plus assignments, prints
the grid for the requested week and optionally exports it as a workbook.

Usage:
    uv run python src/scripts/create_staffing_grid.py data/planning.json --week-offset 1
    uv run python src/scripts/create_staffing_grid.py data/planning.json --format xlsx
"""

import argparse
import json
import sys
import traceback
from datetime import date, datetime
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import ACTIVE_EMPLOYEE_KEYWORD, MAX_WEEK_OFFSET, OUTPUT_DIR
from services.calendar import today_in_planning_timezone
from services.grid import build_week_grid, render_grid_text
from services.planning import PlanningSnapshot, build_snapshot
from services.reports import create_staffing_grid_excel, create_staffing_grid_numbers

FORMATS = ("text", "xlsx", "numbers")


# =============================================================================
# INPUT
# =============================================================================


def load_payload(path: Path) -> dict:
    """
    Read a planning snapshot file.

    Raises:
        ValueError: if the file is missing, not JSON, or not a JSON object
    """
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ValueError(f"Cannot read {path}: {e.strerror or e}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise ValueError(f"{path} must contain a JSON object")
    return payload


def parse_as_of_date(date_str: str | None) -> date:
    """Parse --date (YYYY-MM-DD); defaults to today in the planning timezone."""
    if not date_str:
        return today_in_planning_timezone()
    return datetime.strptime(date_str, "%Y-%m-%d").date()


def default_output_path(fmt: str, week_start: date) -> Path:
    """e.g. output/grids/staffing_grid_2026_01_26.xlsx"""
    return OUTPUT_DIR / "grids" / f"staffing_grid_{week_start.strftime('%Y_%m_%d')}.{fmt}"


def report_snapshot(snapshot: PlanningSnapshot):
    """Print what was loaded and everything that was skipped."""
    print(
        f"Loaded {len(snapshot.employees)} employee(s), {len(snapshot.projects)} project(s), "
        f"{len(snapshot.assignments)} assignment(s)"
    )
    for error in snapshot.rejected:
        print(f"  Skipping: {error}")
    for issue in snapshot.sync_issues:
        print(f"  Sync issue [{issue.source}] {issue.code}: {issue.message} ({issue.timestamp})")


# =============================================================================
# MAIN
# =============================================================================


def main(
    payload: dict,
    week_offset: int = 0,
    as_of: date | None = None,
    fmt: str = "text",
    output_path: Path | None = None,
    keyword: str = ACTIVE_EMPLOYEE_KEYWORD,
) -> Path | None:
    """
    Main entry point.

    Returns:
        Path of the written workbook, or None for text output
    """
    try:
        today = as_of or today_in_planning_timezone()
        snapshot = build_snapshot(payload, active_keyword=keyword)
        report_snapshot(snapshot)

        grid = build_week_grid(snapshot, week_offset, today)
        print()
        print(render_grid_text(grid))

        if fmt == "text":
            return None

        output_path = output_path or default_output_path(fmt, grid.days[0].day)
        if fmt == "xlsx":
            create_staffing_grid_excel(grid, output_path)
        else:
            create_staffing_grid_numbers(grid, output_path)
        return output_path

    except Exception as e:
        print(f"\nError: {e}")
        traceback.print_exc()
        raise


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render the weekly staffing grid")
    parser.add_argument("input", type=Path, help="Planning snapshot JSON file")
    parser.add_argument(
        "--week-offset",
        type=int,
        default=0,
        help="Weeks relative to the current week (e.g. -1 for last week). Defaults to 0.",
    )
    parser.add_argument(
        "--date",
        help="Treat this date (YYYY-MM-DD) as today. Defaults to today.",
    )
    parser.add_argument("--format", choices=FORMATS, default="text", help="Output format")
    parser.add_argument("--output", type=Path, help="Workbook path (xlsx/numbers only)")
    parser.add_argument(
        "--keyword",
        default=ACTIVE_EMPLOYEE_KEYWORD,
        help=f"Contact keyword selecting grid rows; '' shows all contacts. Defaults to '{ACTIVE_EMPLOYEE_KEYWORD}'.",
    )
    return parser


def run(argv: list[str] | None = None) -> Path | None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if abs(args.week_offset) > MAX_WEEK_OFFSET:
        parser.error(f"--week-offset must be between -{MAX_WEEK_OFFSET} and {MAX_WEEK_OFFSET}")

    try:
        as_of = parse_as_of_date(args.date)
    except ValueError:
        parser.error(f"invalid --date '{args.date}', expected YYYY-MM-DD")

    try:
        payload = load_payload(args.input)
    except ValueError as e:
        parser.error(str(e))

    return main(payload, args.week_offset, as_of, args.format, args.output, args.keyword)


if __name__ == "__main__":
    run()
