"""
Assembly of the weekly staffing grid: one row per employee, one cell per business day.
"""

from datetime import date, datetime

from core.config import CONTINUES_MARKER, GRID_EMPLOYEE_HEADER, RESUMED_MARKER
from models.planning import Employee, GridCell, GridEntry, GridRow, WeekGrid
from services.calendar import current_day_index, format_day_header, is_current_day, resolve_week
from services.continuity import analyze_continuity, resolve_co_assignees, summarize_co_assignees
from services.planning import PlanningSnapshot, StaffingPlan


def build_grid_row(
    plan: StaffingPlan,
    employee: Employee,
    week_days: list[date],
    today: date | datetime,
    employees_by_id: dict[str, Employee],
) -> GridRow:
    """Resolve the five cells of one employee's row."""
    work_items = {item.id: item for item in plan.work_items_for_week(employee.id, week_days)}

    cells = []
    for index, day in enumerate(week_days):
        entries = []
        for cell_item in plan.work_items_for_cell(employee.id, day):
            work_item = work_items[cell_item.project_id]
            co_assignees = resolve_co_assignees(
                work_item.assigned_employee_ids, employee.id, employees_by_id
            )
            entries.append(
                GridEntry(
                    item=cell_item,
                    continuity=analyze_continuity(work_item.days, index),
                    co_assignees=summarize_co_assignees(co_assignees),
                )
            )
        cells.append(
            GridCell(day_index=index, is_today=is_current_day(day, today), entries=tuple(entries))
        )

    return GridRow(employee=employee, cells=tuple(cells))


def build_week_grid(snapshot: PlanningSnapshot, week_offset: int, today: date | datetime) -> WeekGrid:
    """
    Build the grid for the week `week_offset` weeks away from `today`.

    Rows follow the snapshot's employee order; entries within a cell follow
    assignment insertion order.
    """
    week = resolve_week(week_offset, today)
    week_days = [week_day.day for week_day in week]
    plan = snapshot.plan()
    employees_by_id = {employee.id: employee for employee in snapshot.employees}

    rows = [
        build_grid_row(plan, employee, week_days, today, employees_by_id)
        for employee in snapshot.employees
    ]

    return WeekGrid(
        week_offset=week_offset,
        days=tuple(week),
        today_index=current_day_index(week_days, today),
        rows=tuple(rows),
    )


# =============================================================================
# TEXT RENDERING
# =============================================================================


def entry_label(entry: GridEntry) -> str:
    """
    Short text for one badge.

    '…' marks a resumed span, '→' a span continuing into the next day, and
    co-assignee initials follow in brackets with a '+N' overflow count.
    """
    label = entry.item.title
    if entry.continuity.is_paused_and_resumed:
        label = RESUMED_MARKER + label
    if entry.continuity.continues_to_next:
        label = f"{label} {CONTINUES_MARKER}"

    summary = entry.co_assignees
    if summary.shown:
        initials = ", ".join(employee.name[:1] for employee in summary.shown)
        if summary.overflow:
            initials += f" +{summary.overflow}"
        label = f"{label} [{initials}]"
    return label


def render_grid_text(grid: WeekGrid) -> str:
    """Plain-text table of the grid for terminal output. Today's column is starred."""
    headers = [GRID_EMPLOYEE_HEADER]
    for week_day in grid.days:
        header = format_day_header(week_day.day)
        if week_day.index == grid.today_index:
            header += " *"
        headers.append(header)

    # Each row becomes a list of columns, each column a list of lines
    table: list[list[list[str]]] = []
    for row in grid.rows:
        columns = [[row.employee.name]]
        for cell in row.cells:
            columns.append([entry_label(entry) for entry in cell.entries] or ["-"])
        table.append(columns)

    widths = [len(header) for header in headers]
    for columns in table:
        for col_idx, lines in enumerate(columns):
            widths[col_idx] = max(widths[col_idx], *(len(line) for line in lines))

    def format_line(values: list[str]) -> str:
        return " | ".join(value.ljust(widths[i]) for i, value in enumerate(values)).rstrip()

    separator = "-+-".join("-" * width for width in widths)
    output = [format_line(headers), separator]
    for columns in table:
        height = max(len(lines) for lines in columns)
        for line_idx in range(height):
            output.append(
                format_line([lines[line_idx] if line_idx < len(lines) else "" for lines in columns])
            )
        output.append(separator)

    return "\n".join(output)
