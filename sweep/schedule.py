"""
Withdrawal schedule normalization.

The Input sheet lets the user enter withdrawals as year ranges:

    Start Year | End Year | Amount
    2025       | 2027     | 100

The calculation tables need one row per year, so each range is expanded:

    Year | Amount
    2025 | 100
    2026 | 100
    2027 | 100

Reading stops at the first row with an empty start year; anything below it is
ignored. A range whose end is before its start, or whose end year is blank
or not a number, expands to no rows.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from core.config import SweepConfig
from core.utils import as_year, valid_prefix_length
from workbook.base import CalculationEngine

from .sizing import add_rows_to_table

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WithdrawalInputRecord:
    start_year: Optional[int]
    end_year: Optional[int]
    amount: Any


@dataclass(frozen=True)
class WithdrawalYearAmount:
    year: int
    amount: Any

    def as_row(self) -> List[Any]:
        return [self.year, self.amount]


def parse_withdrawal_rows(rows: Sequence[Sequence[Any]]) -> List[WithdrawalInputRecord]:
    """Convert raw table rows up to the first sentinel row into records."""
    n_valid = valid_prefix_length(rows)
    return [
        WithdrawalInputRecord(
            start_year=as_year(row[0]),
            end_year=as_year(row[1]),
            amount=row[2],
        )
        for row in rows[:n_valid]
    ]


def expand_withdrawals(records: Sequence[WithdrawalInputRecord]) -> List[WithdrawalYearAmount]:
    """One WithdrawalYearAmount per year in [start_year, end_year], amounts unchanged."""
    out: List[WithdrawalYearAmount] = []
    for rec in records:
        if rec.start_year is None or rec.end_year is None:
            continue
        for year in range(rec.start_year, rec.end_year + 1):
            out.append(WithdrawalYearAmount(year=year, amount=rec.amount))
    return out


def normalize_withdrawal_table(
    engine: CalculationEngine, config: SweepConfig
) -> List[WithdrawalYearAmount]:
    """
    Expand tblWithdrawal into tblWithdrawal_Output.

    The output table is sized and written only when there is something to
    write; with no expanded rows it is left exactly as it was.
    """
    layout = config.input
    rows = engine.read_table_rows(layout.withdrawal_table)
    expanded = expand_withdrawals(parse_withdrawal_rows(rows))

    if not expanded:
        logger.debug("No withdrawal rows to expand; %s left untouched",
                     layout.withdrawal_output_table)
        return expanded

    add_rows_to_table(engine, layout.sheet, layout.withdrawal_output_table, len(expanded))
    engine.write_table_rows(
        layout.withdrawal_output_table, 0, [w.as_row() for w in expanded]
    )
    logger.debug("Expanded %d withdrawal ranges into %d yearly rows",
                 valid_prefix_length(rows), len(expanded))
    return expanded
