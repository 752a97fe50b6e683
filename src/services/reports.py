"""
Staffing grid export to Excel and Numbers formats.
"""

from pathlib import Path

from numbers_parser import Document
from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from core.config import GRID_EMPLOYEE_HEADER, GRID_SHEET_NAME
from models.planning import GridCell, WeekGrid
from services.calendar import format_day_header
from services.grid import entry_label

EMPLOYEE_COLUMN_WIDTH = 24
DAY_COLUMN_WIDTH = 32


def grid_headers(grid: WeekGrid) -> list[str]:
    """Header row: employee column followed by the five day columns."""
    return [GRID_EMPLOYEE_HEADER] + [format_day_header(d.day) for d in grid.days]


def cell_text(cell: GridCell) -> str:
    """All badges of a cell, one per line."""
    return "\n".join(entry_label(entry) for entry in cell.entries)


# =============================================================================
# EXCEL
# =============================================================================


def write_excel_grid_sheet(ws, grid: WeekGrid):
    """
    Write the week grid to an Excel worksheet.

    Row 1 holds the headers (today's column in bold italics), then one row per
    employee. A cell is filled with the color of its first badge.
    """
    for col_idx, header in enumerate(grid_headers(grid), start=1):
        cell = ws.cell(row=1, column=col_idx, value=header)
        is_today = grid.today_index is not None and col_idx - 2 == grid.today_index
        cell.font = Font(bold=True, italic=is_today)

    for row_idx, row in enumerate(grid.rows, start=2):
        ws.cell(row=row_idx, column=1, value=row.employee.name)

        for col_idx, grid_cell in enumerate(row.cells, start=2):
            cell = ws.cell(row=row_idx, column=col_idx, value=cell_text(grid_cell) or None)
            cell.alignment = Alignment(wrap_text=True, vertical="top")
            if grid_cell.entries:
                color = grid_cell.entries[0].item.color
                cell.fill = PatternFill(start_color=color, end_color=color, fill_type="solid")

    ws.column_dimensions["A"].width = EMPLOYEE_COLUMN_WIDTH
    for col_idx in range(2, len(grid.days) + 2):
        ws.column_dimensions[get_column_letter(col_idx)].width = DAY_COLUMN_WIDTH
    ws.freeze_panes = "B2"


def create_staffing_grid_excel(grid: WeekGrid, output_path: Path):
    """Create a single-sheet Excel workbook with the week grid."""
    wb = Workbook()
    ws = wb.active
    ws.title = GRID_SHEET_NAME
    write_excel_grid_sheet(ws, grid)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(str(output_path))
    print(f"Saved Excel report to: {output_path}")


# =============================================================================
# NUMBERS
# =============================================================================


def create_staffing_grid_numbers(grid: WeekGrid, output_path: Path):
    """Create a Numbers document with the same table as the Excel export."""
    headers = grid_headers(grid)
    doc = Document(
        sheet_name=GRID_SHEET_NAME,
        table_name=GRID_SHEET_NAME,
        num_rows=len(grid.rows) + 1,
        num_cols=len(headers),
        num_header_rows=1,
        num_header_cols=1,
    )
    table = doc.sheets[GRID_SHEET_NAME].tables[GRID_SHEET_NAME]

    for col_idx, header in enumerate(headers):
        table.write(0, col_idx, header)

    for row_idx, row in enumerate(grid.rows, start=1):
        table.write(row_idx, 0, row.employee.name)
        for col_idx, grid_cell in enumerate(row.cells, start=1):
            text = cell_text(grid_cell)
            if text:
                table.write(row_idx, col_idx, text)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    doc.save(str(output_path))
    print(f"Saved Numbers report to: {output_path}")
