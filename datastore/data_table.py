from typing import Iterator, List, Optional, Sequence

from datastore.pattern.cell_value import CellValue


class DataTable:
    def __init__(self, column_names: Optional[Sequence[str]] = None, columns: Optional[Sequence[list]] = None):
        self.column_names: List[str] = list(column_names or [])
        self.columns: List[List[CellValue]] = [list(column) for column in columns or []]
        if len(self.column_names) != len(self.columns):
            raise ValueError(f"{len(self.column_names)} column names for {len(self.columns)} columns")

    @classmethod
    def from_columns(cls, columns: Sequence[list], headers: Sequence[str], first_row_as_names: bool = True):
        """
        Builds a table from column arrays. With `first_row_as_names`, the first
        cell of each column is the header and is not kept as a data row.
        """
        start = 1 if first_row_as_names else 0
        return cls(headers, [column[start:] for column in columns])

    @property
    def row_count(self) -> int:
        return max((len(column) for column in self.columns), default=0)

    def get_column(self, name: str) -> Optional[List[CellValue]]:
        if name not in self.column_names:
            return None
        return self.columns[self.column_names.index(name)]

    def get_cell(self, name: str, row: int) -> CellValue:
        column = self.get_column(name)
        if column is None or row >= len(column):
            return None
        return column[row]

    def row_values(self) -> Iterator[List[CellValue]]:
        for i in range(self.row_count):
            yield [column[i] if i < len(column) else None for column in self.columns]

    def rows(self) -> Iterator[dict]:
        for values in self.row_values():
            yield dict(zip(self.column_names, values))

    def asdict(self):
        return {"columns": self.column_names, "rows": [values for values in self.row_values()]}

    def __len__(self):
        return self.row_count

    def __repr__(self):
        return f"DataTable(columns={self.column_names!r}, rows={self.row_count})"
