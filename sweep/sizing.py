from __future__ import annotations

import logging

from workbook.base import CalculationEngine, ClearScope, Region

logger = logging.getLogger(__name__)


def add_rows_to_table(
    engine: CalculationEngine, sheet: str, table: str, total_rows: int
) -> None:
    """
    Clear a result table and make sure it has at least `total_rows` data rows.

    The body is always cleared first, so no rows survive from an earlier run.
    The table only ever grows: existing rows are kept (blank) rather than
    deleted, to avoid reflowing the live sheet. Call once before a sweep with
    the full row count, not per scenario.
    """
    engine.clear_region(Region.table_body(sheet, table), ClearScope.ALL)

    current_rows = engine.table_row_count(table)
    if current_rows >= total_rows:
        logger.debug("%s: %d rows available, %d needed", table, current_rows, total_rows)
        return

    rows_to_add = total_rows - current_rows
    width = engine.table_column_count(table)
    engine.append_table_rows(table, [[""] * width for _ in range(rows_to_add)])
    logger.debug("%s: added %d rows (now %d)", table, rows_to_add, total_rows)
