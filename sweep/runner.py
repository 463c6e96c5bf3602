"""
Run orchestrator — the entry point that drives one full cash flow run.

    manual calculation
      -> input validation gate (stop here if it fails)
      -> base cash flows (withdrawal normalization + scenario sweep)
      -> rider cash flows (plan + two-pass sweep)
    automatic calculation

Everything runs sequentially on the single engine instance: each scenario
writes shared scratch cells, so scenario i+1 may only start once scenario
i's rows have been copied out. Calculation mode is restored on every exit
path; any engine error ends the run and propagates to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import pandas as pd

from core.config import SweepConfig
from workbook.base import CalculationEngine
from workbook.validators import ValidationResult, validate_input

from .base_cf import BaseSweepResult, run_base_cashflows
from .reporting import print_timestamp
from .rider_cf import RiderSweepResult, run_rider_cashflows

logger = logging.getLogger(__name__)


@dataclass
class RunReport:
    validation: ValidationResult
    started: pd.Timestamp
    finished: Optional[pd.Timestamp] = None
    base: Optional[BaseSweepResult] = None
    rider: Optional[RiderSweepResult] = None

    @property
    def completed(self) -> bool:
        return self.validation.is_valid and self.base is not None and self.rider is not None

    @property
    def duration_seconds(self) -> float:
        if self.finished is None:
            return 0.0
        return (self.finished - self.started).total_seconds()


def run_cashflows(
    engine: CalculationEngine, config: Optional[SweepConfig] = None
) -> RunReport:
    """Run the base and rider cash flow sweeps against `engine`."""
    config = config or SweepConfig()
    report = RunReport(validation=ValidationResult(), started=pd.Timestamp.now())

    engine.set_calculation_mode("manual")
    try:
        report.validation = validate_input(engine, config)
        if not report.validation.is_valid:
            logger.debug("Input validation failed; no sweep run")
            return report

        report.base = run_base_cashflows(engine, config)
        logger.debug("Base cash flows: %d scenarios, %d rows",
                     len(report.base.combinations), report.base.total_rows)

        report.rider = run_rider_cashflows(engine, config)
        logger.debug("Rider cash flows: %d rows", report.rider.rows_written)
    finally:
        engine.set_calculation_mode("automatic")

    report.finished = pd.Timestamp.now()
    if config.print_timestamps:
        print_timestamp(engine, config.input.sheet, config.input.status_cell,
                        report.started, report.finished)
    return report
