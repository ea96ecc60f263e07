import json
from pathlib import Path

import pytest

from datastore.google.google_columns import format_header, get_cell_value, get_headers, get_sheet_columns
from datastore.pattern.sheet_cell import SheetCell
from datastore.pattern.sheet_options import SheetOptions


def load_entries(name="cells"):
    path = Path("tests", "fixtures", "google", f"{name}.json")
    with open(path, encoding="utf8") as f:
        return json.load(f)["feed"].get("entry")


def cell(row, col, text, numeric=None):
    inner = {"row": str(row), "col": str(col), "$t": text}
    if numeric is not None:
        inner["numericValue"] = numeric
    return {"gs$cell": inner}


def test_get_sheet_columns():
    columns = get_sheet_columns(load_entries(), SheetOptions())
    assert columns == [
        ["Year", 2019.0, 2020.0, 2021.0],
        ["Sales", 12.5, None, 14.0],
        ["Growth", pytest.approx(5.0), pytest.approx(10.0), None],
        ["Updated", "2019-12-31", "31/12/2020", "n/a"],
    ]


def test_get_sheet_columns_single_numeric_cell():
    assert get_sheet_columns([cell(1, 1, "5", "5")], SheetOptions()) == [[5]]


def test_get_sheet_columns_percentage():
    assert get_sheet_columns([cell(1, 1, "10%", "10")], SheetOptions()) == [[1000]]


def test_get_sheet_columns_date():
    assert get_sheet_columns([cell(1, 1, "2021-01-01", "44197")], SheetOptions()) == [["2021-01-01"]]


def test_get_sheet_columns_window():
    options = SheetOptions(start_row=1, start_column=1, end_column=2)
    columns = get_sheet_columns(load_entries(), options)
    assert columns == [
        [12.5, None, 14.0],
        [pytest.approx(5.0), pytest.approx(10.0), None],
    ]


def test_get_sheet_columns_end_row():
    columns = get_sheet_columns(load_entries(), SheetOptions(end_row=1, end_column=0))
    assert columns == [["Year", 2019.0]]


def test_get_sheet_columns_outside_window():
    entries = [cell(1, 1, "a"), cell(2, 2, "b")]
    assert get_sheet_columns(entries, SheetOptions(start_row=5)) == []
    assert get_sheet_columns(entries, SheetOptions(start_column=3)) == []


def test_get_sheet_columns_empty_feed():
    assert get_sheet_columns([], SheetOptions()) == []
    assert get_sheet_columns(None, SheetOptions()) == []


def test_get_sheet_columns_fills_gaps():
    entries = [cell(1, 1, "a"), cell(3, 3, "c")]
    assert get_sheet_columns(entries, SheetOptions()) == [
        ["a", None, None],
        [None, None, None],
        [None, None, "c"],
    ]


def test_get_sheet_columns_ignores_malformed_entries():
    entries = [
        cell(1, 1, "a"),
        {"gs$cell": {"col": "2", "$t": "no row"}},
        "junk",
        {"content": {"$t": "x"}},
        {"gs$cell": {"row": "2", "col": "1"}, "content": "x"},
    ]
    assert get_sheet_columns(entries, SheetOptions()) == [["a"]]


def test_get_sheet_columns_is_idempotent():
    entries = load_entries()
    options = SheetOptions(start_row=1)
    assert get_sheet_columns(entries, options) == get_sheet_columns(entries, options)


def test_get_cell_value():
    assert get_cell_value(SheetCell(row=1, col=1, text="12", numeric_value="12.0")) == 12.0
    assert get_cell_value(SheetCell(row=1, col=1, text="01/02/2021", numeric_value="44228")) == "01/02/2021"
    assert get_cell_value(SheetCell(row=1, col=1, text="-3", numeric_value="-3")) == "-3"
    assert get_cell_value(SheetCell(row=1, col=1, text="hello")) == "hello"
    assert get_cell_value(SheetCell(row=1, col=1, text="")) is None
    # numeric value google could not give us
    assert get_cell_value(SheetCell(row=1, col=1, text="#REF!", numeric_value="#REF!")) == "#REF!"
    assert get_cell_value(SheetCell(row=1, col=1, text="", numeric_value="oops")) is None


def test_get_headers():
    columns = [["Year", 2019.0], [2020.0, 1.5], [None, "x"], [0.5], []]
    assert get_headers(columns) == ["Year", "2020", "", "0.5", ""]


def test_format_header():
    assert format_header(12.0) == "12"
    assert format_header("Sales") == "Sales"
    assert format_header(None) == ""
