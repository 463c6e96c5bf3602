"""
Summary window copy — moves one scenario's summary rows into the flat result table.

With S = summary row count and T = the scenario's term, a window of exactly T
rows is read and written at absolute row `idx` of the result table:

  - S == T: summary rows 0..T-1.
  - S >  T: "head" alignment (default) keeps the first T rows, so a
            fixed-height summary contributes years 1..T; "tail" keeps the
            last T rows instead.
  - S <  T: "error" (default) raises SummaryWindowError; "pad" copies the S
            rows and fills the remaining T-S rows with blanks.

Summary and result tables share their column layout. That is not checked up
front; a mismatch fails at write time with SchemaMismatch.
"""

from __future__ import annotations

from typing import Any, List, Literal

from core.errors import SummaryWindowError
from workbook.base import CalculationEngine


def summary_window(
    engine: CalculationEngine,
    summary_table: str,
    term: int,
    *,
    align: Literal["head", "tail"] = "head",
    short: Literal["error", "pad"] = "error",
) -> List[List[Any]]:
    """Read the T-row window of the summary table."""
    available = engine.table_row_count(summary_table)

    if available >= term:
        start = available - term if align == "tail" else 0
        return engine.read_table_rows(summary_table, start, term)

    if short == "error":
        raise SummaryWindowError(summary_table, available, term)

    rows = engine.read_table_rows(summary_table, 0, available)
    width = engine.table_column_count(summary_table)
    rows.extend([""] * width for _ in range(term - available))
    return rows


def copy_summary_to_result(
    engine: CalculationEngine,
    summary_table: str,
    result_table: str,
    term: int,
    idx: int,
    *,
    align: Literal["head", "tail"] = "head",
    short: Literal["error", "pad"] = "error",
) -> int:
    """
    Copy the summary window into result rows [idx, idx + term).

    Returns the next free row offset (idx + term).
    """
    if term <= 0:
        return idx
    values = summary_window(engine, summary_table, term, align=align, short=short)
    engine.write_table_rows(result_table, idx, values)
    return idx + term
