"""
Cash flow sweeps — withdrawal normalization, scenario enumeration, result
table sizing, summary window copy, and the base / rider sweep runners.
"""

from .base_cf import BaseSweepResult, BaseSweepRunner, RowPlacement, SweepState, run_base_cashflows
from .rider_cf import (
    RiderClassification,
    RiderPlacement,
    RiderPlan,
    RiderSweepResult,
    RiderSweepRunner,
    plan_rider_rows,
    run_rider_cashflows,
)
from .runner import RunReport, run_cashflows
from .scenarios import ScenarioAxisSet, ScenarioCombination, scenario_axes, scenario_combinations
from .schedule import (
    WithdrawalInputRecord,
    WithdrawalYearAmount,
    expand_withdrawals,
    normalize_withdrawal_table,
    parse_withdrawal_rows,
)
from .sizing import add_rows_to_table
from .window import copy_summary_to_result, summary_window

__all__ = [
    "BaseSweepResult",
    "BaseSweepRunner",
    "RowPlacement",
    "SweepState",
    "run_base_cashflows",
    "RiderClassification",
    "RiderPlacement",
    "RiderPlan",
    "RiderSweepResult",
    "RiderSweepRunner",
    "plan_rider_rows",
    "run_rider_cashflows",
    "RunReport",
    "run_cashflows",
    "ScenarioAxisSet",
    "ScenarioCombination",
    "scenario_axes",
    "scenario_combinations",
    "WithdrawalInputRecord",
    "WithdrawalYearAmount",
    "expand_withdrawals",
    "normalize_withdrawal_table",
    "parse_withdrawal_rows",
    "add_rows_to_table",
    "copy_summary_to_result",
    "summary_window",
]
