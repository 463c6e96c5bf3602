"""
Interface to the external calculation engine.

The sweep core never evaluates formulas. It writes scratch inputs into named
slots, asks the engine to recalculate a region, and reads values or table
rows back. Anything that can do those round trips (a live Excel host, a
COM/xlwings bridge, the in-memory workbook used in tests) implements
CalculationEngine.

Contract expected from implementations:
  - recalculate() is synchronous: it returns only once the region is settled.
  - Output depends only on the current scratch inputs, never on earlier
    scenarios.
  - Table bodies are row arenas addressed by absolute 0-based row offset.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Literal, Optional, Sequence


class ClearScope(str, Enum):
    CONTENTS = "contents"
    FORMATS = "formats"
    ALL = "all"


@dataclass(frozen=True)
class Region:
    """
    A recalculation / clear target.

    kind:
      "range"      named range or A1 anchor, resized to (height, width)
      "table_body" the data rows of a table (between header and total row)
      "rows"       entire worksheet rows spanned by the resized range
    """

    sheet: str
    name: str
    kind: Literal["range", "table_body", "rows"] = "range"
    height: int = 1
    width: int = 1

    @classmethod
    def range(cls, sheet: str, name: str, *, height: int = 1, width: int = 1) -> "Region":
        return cls(sheet, name, "range", height, width)

    @classmethod
    def table_body(cls, sheet: str, table: str) -> "Region":
        return cls(sheet, table, "table_body")

    @classmethod
    def rows(cls, sheet: str, name: str, *, height: int = 1) -> "Region":
        return cls(sheet, name, "rows", height, 1)

    def __str__(self) -> str:
        if self.kind == "table_body":
            return f"{self.sheet}!{self.name}[#Data]"
        suffix = f" ({self.height}x{self.width})" if (self.height, self.width) != (1, 1) else ""
        prefix = "rows of " if self.kind == "rows" else ""
        return f"{prefix}{self.sheet}!{self.name}{suffix}"


class CalculationEngine:
    """Interface for the workbook + calculation engine the sweeps drive."""

    # --- named values / scratch slots ---

    def read_value(self, sheet: str, name: str) -> Any:
        raise NotImplementedError

    def write_scratch_inputs(self, sheet: str, name: str, values: Any) -> None:
        """Write a scalar, or one row of values starting at the named cell."""
        raise NotImplementedError

    def recalculate(self, region: Region) -> None:
        raise NotImplementedError

    def clear_region(self, region: Region, scope: ClearScope = ClearScope.ALL) -> None:
        raise NotImplementedError

    # --- tables ---

    def table_row_count(self, table: str) -> int:
        raise NotImplementedError

    def table_column_count(self, table: str) -> int:
        raise NotImplementedError

    def read_table_rows(
        self, table: str, start: int = 0, height: Optional[int] = None
    ) -> List[List[Any]]:
        raise NotImplementedError

    def write_table_rows(self, table: str, start: int, rows: Sequence[Sequence[Any]]) -> None:
        raise NotImplementedError

    def append_table_rows(self, table: str, rows: Sequence[Sequence[Any]]) -> None:
        raise NotImplementedError

    # --- host housekeeping ---

    def remove_filters(self, sheet: str) -> None:
        raise NotImplementedError

    def set_calculation_mode(self, mode: Literal["manual", "automatic"]) -> None:
        raise NotImplementedError
