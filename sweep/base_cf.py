"""
Base cash flow sweep.

For the product on Base_CF!base, every scenario combination is pushed through
the workbook one at a time:

    write int_rate / risk / prem_term scratch cells
    -> recalculate the scenario input block, tblBaseCF, tblBaseCFSummary
    -> copy the summary window into tblBaseCFResult at row i * term

The result table is sized once, up front, to combinations * term rows. The
scratch cells are blanked when the sweep ends, however many scenarios ran.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

import pandas as pd

from core.config import SweepConfig
from workbook.base import CalculationEngine, Region

from .reporting import clear_status, print_timestamp
from .scenarios import ScenarioCombination, scenario_combinations
from .schedule import WithdrawalYearAmount, normalize_withdrawal_table
from .sizing import add_rows_to_table
from .window import copy_summary_to_result

logger = logging.getLogger(__name__)


class SweepState(str, Enum):
    IDLE = "idle"
    NORMALIZING = "normalizing"
    PLANNING = "planning"
    SIZING = "sizing"
    SWEEPING = "sweeping"
    DONE = "done"


@dataclass(frozen=True)
class RowPlacement:
    """Where one scenario's rows landed in a result table."""
    label: str
    start_row: int
    term: int

    @property
    def end_row(self) -> int:
        return self.start_row + self.term


@dataclass
class BaseSweepResult:
    product: str
    term: int
    combinations: List[ScenarioCombination]
    withdrawals: List[WithdrawalYearAmount]
    placements: List[RowPlacement] = field(default_factory=list)

    @property
    def total_rows(self) -> int:
        return len(self.combinations) * self.term


class BaseSweepRunner:
    def __init__(self, engine: CalculationEngine, config: Optional[SweepConfig] = None):
        self.engine = engine
        self.config = config or SweepConfig()
        self.state = SweepState.IDLE
        self.current: Optional[int] = None

    def run(self) -> BaseSweepResult:
        engine = self.engine
        layout = self.config.base
        started = pd.Timestamp.now()

        term = int(engine.read_value(layout.sheet, layout.term_range))
        product = str(engine.read_value(layout.sheet, layout.product_range)).strip()

        clear_status(engine, layout.sheet, layout.status_cell,
                     height=layout.status_clear_height)
        engine.remove_filters(layout.sheet)

        self.state = SweepState.NORMALIZING
        withdrawals = normalize_withdrawal_table(engine, self.config)

        combinations = scenario_combinations(product)
        result = BaseSweepResult(product=product, term=term,
                                 combinations=combinations, withdrawals=withdrawals)
        if not combinations:
            logger.debug("No scenarios configured for product %r", product)

        self.state = SweepState.SIZING
        add_rows_to_table(engine, layout.sheet, layout.result_table, result.total_rows)

        self.state = SweepState.SWEEPING
        try:
            row = 0
            for i, scenario in enumerate(combinations):
                self.current = i
                logger.debug("Base scenario %d/%d: %s", i + 1, len(combinations), scenario.label)
                self._calculate(scenario)
                copy_summary_to_result(
                    engine,
                    layout.summary_table,
                    layout.result_table,
                    term,
                    row,
                    align=self.config.summary_alignment,
                    short=self.config.short_summary,
                )
                result.placements.append(RowPlacement(scenario.label, row, term))
                row += term
        finally:
            self._clear_scenario_inputs()

        self.state = SweepState.DONE
        if self.config.print_timestamps:
            print_timestamp(engine, layout.sheet, layout.status_cell,
                            started, pd.Timestamp.now())
        return result

    def _calculate(self, scenario: ScenarioCombination) -> None:
        engine = self.engine
        layout = self.config.base
        engine.write_scratch_inputs(layout.sheet, layout.int_rate_slot, scenario.interest_rate_level)
        engine.write_scratch_inputs(layout.sheet, layout.risk_slot, scenario.risk_type)
        engine.write_scratch_inputs(layout.sheet, layout.prem_term_slot, scenario.premium_term_mode)

        engine.recalculate(Region.range(layout.sheet, layout.int_rate_slot,
                                        height=layout.scenario_block_height))
        engine.recalculate(Region.table_body(layout.sheet, layout.calc_table))
        engine.recalculate(Region.table_body(layout.sheet, layout.summary_table))

    def _clear_scenario_inputs(self) -> None:
        layout = self.config.base
        for slot in (layout.int_rate_slot, layout.risk_slot, layout.prem_term_slot):
            self.engine.write_scratch_inputs(layout.sheet, slot, "")


def run_base_cashflows(
    engine: CalculationEngine, config: Optional[SweepConfig] = None
) -> BaseSweepResult:
    return BaseSweepRunner(engine, config).run()
