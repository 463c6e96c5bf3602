from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Tuple, Union

import openpyxl
import pandas as pd

from .memory import InMemoryWorkbook

PathLike = Union[str, Path]


def load_tables(path: PathLike) -> Dict[str, Tuple[str, pd.DataFrame]]:
    """
    Read every Excel table (ListObject) of an .xlsx file.

    Returns {table name: (sheet title, DataFrame of the data rows)}. Cached
    values are read (data_only=True); formulas are not evaluated.
    """
    wb = openpyxl.load_workbook(path, data_only=True)
    out: Dict[str, Tuple[str, pd.DataFrame]] = {}
    for ws in wb.worksheets:
        for table in ws.tables.values():
            cells = ws[table.ref]
            header = [str(c.value).strip() for c in cells[0]]
            n_body = len(cells) - 1 - (table.totalsRowCount or 0)
            body = [["" if c.value is None else c.value for c in row]
                    for row in cells[1:1 + n_body]]
            out[table.displayName] = (ws.title, pd.DataFrame(body, columns=header, dtype=object))
    return out


def load_defined_values(path: PathLike) -> Dict[Tuple[str, str], Any]:
    """
    Read the top-left value of every defined name.

    Workbook-scoped names are keyed by the sheet they point at; sheet-scoped
    names by their owning sheet, so "term" on Base_CF and on Rider_CF stay
    distinct.
    """
    wb = openpyxl.load_workbook(path, data_only=True)
    values: Dict[Tuple[str, str], Any] = {}

    def _first_value(defined_name):
        for title, coord in defined_name.destinations:
            first = coord.replace("$", "").split(":")[0]
            return title, wb[title][first].value
        return None, None

    for name, dn in wb.defined_names.items():
        title, value = _first_value(dn)
        if title is not None:
            values[(title, name)] = value

    for ws in wb.worksheets:
        for name, dn in ws.defined_names.items():
            title, value = _first_value(dn)
            if title is not None:
                values[(ws.title, name)] = value
    return values


def workbook_from_xlsx(path: PathLike) -> InMemoryWorkbook:
    """Build an InMemoryWorkbook holding the tables and named values of an .xlsx file."""
    book = InMemoryWorkbook()
    for name, (sheet, frame) in load_tables(path).items():
        book.add_table(sheet, name, list(frame.columns), frame.values.tolist())
    for (sheet, name), value in load_defined_values(path).items():
        book.set_value(sheet, name, "" if value is None else value)
    return book
