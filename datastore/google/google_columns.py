"""Transposes the cell feed into columns.

The feed gives us one entry per filled cell, in row order:

    (1, 1) "Year"   (1, 2) "Sales"
    (2, 1) "2019"   (2, 2) "12"
                    (3, 2) "14"

and we want dense, 0-based, column-major arrays:

    [["Year", 2019.0, None], ["Sales", 12.0, 14.0]]

Only the cells inside the configured row/column window are kept, and the
window start becomes index 0.
"""
from typing import List, Optional

from datastore.pattern.cell_value import CellValue, Columns
from datastore.pattern.sheet_cell import SheetCell, parse_entries
from datastore.pattern.sheet_options import SheetOptions

DATE_SEPARATORS = ("/", "-")


def get_cell_value(cell: SheetCell) -> CellValue:
    text = cell.text
    if cell.has_numeric_value:
        try:
            number = float(cell.numeric_value)
        except (TypeError, ValueError):
            number = None
        if number is not None:
            if any(separator in text for separator in DATE_SEPARATORS):
                # Dates come with a serial numeric value, keep what the sheet displays.
                return text
            if text.find("%") > 0:
                return number * 100
            return number
    if text:
        return text
    return None


def get_sheet_columns(entries: Optional[list], options: SheetOptions) -> Columns:
    cells = parse_entries(entries)

    # Size of the area actually filled with data
    col_count = max((cell.col for cell in cells), default=0)
    row_count = max((cell.row for cell in cells), default=0)

    columns: Columns = [[] for i in range(col_count) if options.start_column <= i <= options.end_column]

    placed = False
    for cell in cells:
        gr = cell.row - 1
        gc = cell.col - 1
        if not (options.start_column <= gc <= options.end_column and options.start_row <= gr <= options.end_row):
            continue
        column = columns[gc - options.start_column]
        index = gr - options.start_row
        if len(column) <= index:
            column.extend([None] * (index + 1 - len(column)))
        column[index] = get_cell_value(cell)
        placed = True

    if not placed:
        return []

    # Empty spreadsheet cells are not in the feed (#5298)
    length = min(row_count - 1, options.end_row) - options.start_row + 1
    for column in columns:
        column.extend([None] * (length - len(column)))
    return columns


def format_header(value: CellValue) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def get_headers(columns: Columns) -> List[str]:
    return [format_header(column[0] if column else None) for column in columns]
