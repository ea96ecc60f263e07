"""One entry of the public cell feed.

The feed is a flattened view of the worksheet, each entry describing a single
non-empty cell:

```json
{
    "gs$cell": {"row": "2", "col": "3", "inputValue": "=A2*2", "numericValue": "84.0", "$t": "84"},
    "content": {"type": "text", "$t": "84"}
}
```

Rows and columns are 1-based strings.
"""
from __future__ import annotations

from typing import Optional, Union

from pydantic import ValidationError
from pydantic.dataclasses import dataclass

from utils.gds_logger import get_logger

logger = get_logger()


@dataclass(frozen=True)
class SheetCell:
    row: int
    col: int
    text: str = ""
    numeric_value: Optional[Union[float, str]] = None
    input_value: Optional[str] = None

    @property
    def has_numeric_value(self) -> bool:
        return self.numeric_value is not None and self.numeric_value != ""

    @classmethod
    def from_entry(cls, entry: dict) -> Optional[SheetCell]:
        if not isinstance(entry, dict):
            return None
        inner = entry.get("gs$cell")
        content = inner if isinstance(inner, dict) and "$t" in inner else entry.get("content") or {}
        if not isinstance(inner, dict) or not isinstance(content, dict):
            logger.debug(f"Ignoring malformed feed entry {entry}")
            return None
        text = content.get("$t")
        try:
            return cls(
                row=inner["row"],
                col=inner["col"],
                text="" if text is None else str(text),
                numeric_value=inner.get("numericValue"),
                input_value=inner.get("inputValue"),
            )
        except (KeyError, TypeError, ValidationError):
            logger.debug(f"Ignoring malformed feed entry {entry}")
            return None


def parse_entries(entries: Optional[list]) -> list:
    cells = (SheetCell.from_entry(entry) for entry in entries or [])
    return [cell for cell in cells if cell is not None]
