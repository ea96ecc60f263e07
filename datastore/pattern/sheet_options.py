from __future__ import annotations

import dataclasses
import sys
from typing import Any, Mapping, Optional, Union

from pydantic.dataclasses import dataclass

from datastore.error import InvalidOptionsError

# Option names as they appear in chart configurations.
CAMEL_CASE_NAMES = {
    "googleSpreadsheetKey": "google_spreadsheet_key",
    "worksheet": "worksheet",
    "startColumn": "start_column",
    "endColumn": "end_column",
    "startRow": "start_row",
    "endRow": "end_row",
    "enablePolling": "enable_polling",
    "dataRefreshRate": "data_refresh_rate",
}


@dataclass(frozen=True)
class SheetOptions:
    google_spreadsheet_key: str = ""
    worksheet: int = 1
    start_column: int = 0
    end_column: int = sys.maxsize
    start_row: int = 0
    end_row: int = sys.maxsize
    enable_polling: bool = False
    data_refresh_rate: float = 2

    def __post_init__(self):
        if self.worksheet < 1:
            raise InvalidOptionsError(f"worksheet must be >= 1, got {self.worksheet}")
        if self.start_column < 0 or self.start_row < 0:
            raise InvalidOptionsError("start_column and start_row must not be negative")
        if self.start_column > self.end_column:
            raise InvalidOptionsError(f"start_column ({self.start_column}) > end_column ({self.end_column})")
        if self.start_row > self.end_row:
            raise InvalidOptionsError(f"start_row ({self.start_row}) > end_row ({self.end_row})")
        if self.data_refresh_rate <= 0:
            raise InvalidOptionsError(f"data_refresh_rate must be > 0, got {self.data_refresh_rate}")

    @property
    def refresh_delay(self) -> float:
        return float(self.data_refresh_rate)

    @classmethod
    def normalize_keys(cls, data: Mapping[str, Any]) -> dict:
        field_names = {field.name for field in dataclasses.fields(cls)}
        normalized = {}
        for key, value in data.items():
            name = CAMEL_CASE_NAMES.get(key, key)
            if name not in field_names:
                raise InvalidOptionsError(f"unknown option '{key}'")
            normalized[name] = value
        return normalized

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SheetOptions:
        return cls(**cls.normalize_keys(data))

    def asdict(self) -> dict:
        return dataclasses.asdict(self)


def merge_options(
    defaults: SheetOptions, overrides: Optional[Union[SheetOptions, Mapping[str, Any]]] = None
) -> SheetOptions:
    """
    Returns a new SheetOptions where every value given in `overrides` replaces the default one.

    >>> merge_options(SheetOptions(), {"googleSpreadsheetKey": "abc", "worksheet": 2}).worksheet
    2
    """
    if overrides is None:
        return defaults
    if isinstance(overrides, SheetOptions):
        overrides = overrides.asdict()
    return dataclasses.replace(defaults, **SheetOptions.normalize_keys(overrides))
