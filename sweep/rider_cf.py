"""
Rider cash flow sweep.

Two steps:

1. Plan (dry run). Each rider row of tblRider, up to the first empty rider,
   is written to Rider_CF!input and only the input block is recalculated, to
   read back its waiver flag and projection term. This gives the result
   table size (2 risk classes * sum of terms) and splits riders into
   non-waiver and waiver (WOP) groups without running the full calculation.

2. Sweep. Non-waiver riders first, then waiver riders. Within each group
   the risk class is the outer loop (Standard, then Sub-standard) and the
   riders the inner loop. Rows are appended at a single cursor that runs
   across both groups and both risk classes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

import pandas as pd

from core.config import SweepConfig
from core.schema import RIDER_RISK_CLASSES
from core.utils import valid_prefix_length
from workbook.base import CalculationEngine, Region

from .base_cf import RowPlacement, SweepState
from .reporting import clear_status, print_timestamp
from .sizing import add_rows_to_table
from .window import copy_summary_to_result

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RiderClassification:
    record_index: int
    projection_term: int
    is_waiver: bool


@dataclass
class RiderPlan:
    records: List[List[Any]]
    classifications: List[RiderClassification]

    @property
    def non_waiver_indices(self) -> List[int]:
        return [c.record_index for c in self.classifications if not c.is_waiver]

    @property
    def waiver_indices(self) -> List[int]:
        return [c.record_index for c in self.classifications if c.is_waiver]

    @property
    def total_rows(self) -> int:
        # every rider runs once per risk class
        return len(RIDER_RISK_CLASSES) * sum(c.projection_term for c in self.classifications)


@dataclass(frozen=True)
class RiderPlacement(RowPlacement):
    record_index: int = -1
    risk_class: str = ""
    is_waiver: bool = False


@dataclass
class RiderSweepResult:
    plan: RiderPlan
    placements: List[RiderPlacement] = field(default_factory=list)

    @property
    def rows_written(self) -> int:
        return sum(p.term for p in self.placements)


def _as_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().upper() in ("TRUE", "Y", "YES", "1")
    return bool(value)


def plan_rider_rows(engine: CalculationEngine, config: Optional[SweepConfig] = None) -> RiderPlan:
    """Classify every rider and collect its projection term (dry run)."""
    config = config or SweepConfig()
    layout = config.rider

    data = engine.read_table_rows(config.input.rider_table)
    records = [list(r) for r in data[:valid_prefix_length(data)]]

    classifications: List[RiderClassification] = []
    for i, record in enumerate(records):
        engine.write_scratch_inputs(layout.sheet, layout.input_slot, record)
        engine.recalculate(Region.range(layout.sheet, layout.input_slot,
                                        width=layout.input_width))

        is_waiver = _as_flag(engine.read_value(layout.sheet, layout.waiver_range))
        term = int(engine.read_value(layout.sheet, layout.term_range))
        classifications.append(RiderClassification(i, term, is_waiver))

    plan = RiderPlan(records=records, classifications=classifications)
    logger.debug("Rider plan: %d riders (%d WOP), %d result rows",
                 len(records), len(plan.waiver_indices), plan.total_rows)
    return plan


class RiderSweepRunner:
    def __init__(self, engine: CalculationEngine, config: Optional[SweepConfig] = None):
        self.engine = engine
        self.config = config or SweepConfig()
        self.state = SweepState.IDLE
        self.cursor = 0

    def run(self) -> RiderSweepResult:
        engine = self.engine
        layout = self.config.rider
        started = pd.Timestamp.now()

        clear_status(engine, layout.sheet, layout.status_cell, width=layout.status_clear_width)
        engine.remove_filters(layout.sheet)

        try:
            self.state = SweepState.PLANNING
            plan = plan_rider_rows(engine, self.config)
            result = RiderSweepResult(plan=plan)

            self.state = SweepState.SIZING
            add_rows_to_table(engine, layout.sheet, layout.result_table, plan.total_rows)

            self.state = SweepState.SWEEPING
            self.cursor = 0
            self._run_pass(plan, plan.non_waiver_indices, result, is_waiver=False)
            self._run_pass(plan, plan.waiver_indices, result, is_waiver=True)
        finally:
            engine.write_scratch_inputs(layout.sheet, layout.input_slot, [""] * layout.input_width)
            engine.write_scratch_inputs(layout.sheet, layout.risk_slot, "")

        self.state = SweepState.DONE
        if self.config.print_timestamps:
            print_timestamp(engine, layout.sheet, layout.status_cell,
                            started, pd.Timestamp.now())
        return result

    def _run_pass(
        self,
        plan: RiderPlan,
        indices: Sequence[int],
        result: RiderSweepResult,
        *,
        is_waiver: bool,
    ) -> None:
        engine = self.engine
        layout = self.config.rider

        for risk_class in RIDER_RISK_CLASSES:
            engine.write_scratch_inputs(layout.sheet, layout.risk_slot, risk_class)

            for idx in indices:
                engine.write_scratch_inputs(layout.sheet, layout.input_slot, plan.records[idx])

                # modal factors sit outside the tables and are not refreshed by them
                engine.recalculate(Region.rows(layout.sheet, layout.modal_factor_anchor,
                                               height=layout.modal_factor_height))
                engine.recalculate(Region.table_body(layout.sheet, layout.calc_table))
                engine.recalculate(Region.table_body(layout.sheet, layout.summary_table))

                term = int(engine.read_value(layout.sheet, layout.term_range))
                logger.debug("Rider %d (%s%s): rows %d..%d", idx, risk_class,
                             ", WOP" if is_waiver else "", self.cursor, self.cursor + term)

                start = self.cursor
                self.cursor = copy_summary_to_result(
                    engine,
                    layout.summary_table,
                    layout.result_table,
                    term,
                    start,
                    align=self.config.summary_alignment,
                    short=self.config.short_summary,
                )
                result.placements.append(RiderPlacement(
                    label=f"{plan.records[idx][0]} / {risk_class}",
                    start_row=start,
                    term=term,
                    record_index=idx,
                    risk_class=risk_class,
                    is_waiver=is_waiver,
                ))


def run_rider_cashflows(
    engine: CalculationEngine, config: Optional[SweepConfig] = None
) -> RiderSweepResult:
    return RiderSweepRunner(engine, config).run()
