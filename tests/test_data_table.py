import pytest

from datastore.data_table import DataTable


def test_from_columns():
    columns = [["Year", 2019.0, 2020.0], ["Sales", 12.5, None]]
    table = DataTable.from_columns(columns, ["Year", "Sales"])

    assert table.column_names == ["Year", "Sales"]
    assert table.row_count == 2
    assert len(table) == 2
    assert table.get_column("Sales") == [12.5, None]
    assert table.get_cell("Year", 1) == 2020.0
    assert table.get_cell("Year", 5) is None
    assert table.get_column("Unknown") is None
    assert list(table.rows()) == [{"Year": 2019.0, "Sales": 12.5}, {"Year": 2020.0, "Sales": None}]


def test_from_columns_keep_first_row():
    table = DataTable.from_columns([["a", "b"]], ["A"], first_row_as_names=False)
    assert table.get_column("A") == ["a", "b"]


def test_uneven_columns():
    table = DataTable(["A", "B"], [[1, 2, 3], [4]])
    assert table.row_count == 3
    assert table.asdict() == {"columns": ["A", "B"], "rows": [[1, 4], [2, None], [3, None]]}


def test_empty_table():
    table = DataTable()
    assert table.row_count == 0
    assert list(table.rows()) == []


def test_names_must_match_columns():
    with pytest.raises(ValueError):
        DataTable(["A"], [[1], [2]])


def test_cell_value_aliases_are_shared():
    import datastore.data_table
    import datastore.google.google_columns
    from datastore.pattern import cell_value

    assert datastore.data_table.CellValue is cell_value.CellValue
    assert datastore.google.google_columns.Columns is cell_value.Columns
