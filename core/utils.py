from __future__ import annotations

from typing import Any, Optional, Sequence

import numpy as np
from openpyxl.utils.cell import (
    column_index_from_string,
    coordinate_from_string,
    get_column_letter,
)
from openpyxl.utils.exceptions import CellCoordinatesException


def is_blank(value: Any) -> bool:
    """Excel-style emptiness: None, "", whitespace-only text or NaN."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, float) and np.isnan(value):
        return True
    return False


def valid_prefix_length(rows: Sequence[Sequence[Any]], key_index: int = 0) -> int:
    """
    Number of leading rows before the first sentinel row.

    A sentinel row has a blank key cell. Rows after it are never looked at,
    even if they hold data.
    """
    for i, row in enumerate(rows):
        if len(row) <= key_index or is_blank(row[key_index]):
            return i
    return len(rows)


def offset_cell(address: str, rows: int = 0, cols: int = 0) -> str:
    """Shift an A1 address, e.g. offset_cell("B1", rows=2) -> "B3"."""
    column, row = coordinate_from_string(address.replace("$", ""))
    col_idx = column_index_from_string(column) + cols
    row += rows
    if col_idx < 1 or row < 1:
        raise ValueError(f"Offset ({rows}, {cols}) from {address} leaves the sheet.")
    return f"{get_column_letter(col_idx)}{row}"


def is_a1_address(name: str) -> bool:
    try:
        coordinate_from_string(name.replace("$", ""))
    except CellCoordinatesException:
        return False
    return True


def as_year(value: Any) -> Optional[int]:
    """
    Read a year cell, or None when it is blank or not a number.

    Whole-number floats and numeric text ("2025", 2025.0) are accepted.
    """
    if is_blank(value) or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if np.isnan(number) or np.isinf(number):
        return None
    return int(number)
