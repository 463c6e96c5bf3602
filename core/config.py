"""
Sweep configuration.

Every sheet, table and named range the sweeps touch is addressed by a stable
logical name collected here. Defaults match the production ILP/UVL workbook.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal


@dataclass(frozen=True)
class InputLayout:
    sheet: str = "Input"
    withdrawal_table: str = "tblWithdrawal"
    withdrawal_output_table: str = "tblWithdrawal_Output"
    rider_table: str = "tblRider"
    validation_range: str = "input_validation"

    # status block: anchor cell + the two cells below it
    status_cell: str = "M1"


@dataclass(frozen=True)
class BaseLayout:
    sheet: str = "Base_CF"
    calc_table: str = "tblBaseCF"
    summary_table: str = "tblBaseCFSummary"
    result_table: str = "tblBaseCFResult"

    term_range: str = "term"
    product_range: str = "base"

    int_rate_slot: str = "int_rate_scenario"
    risk_slot: str = "risk_scenario"
    prem_term_slot: str = "prem_term_scenario"
    # rows recalculated below int_rate_scenario (dependent input block)
    scenario_block_height: int = 10

    status_cell: str = "B1"
    status_clear_height: int = 3


@dataclass(frozen=True)
class RiderLayout:
    sheet: str = "Rider_CF"
    calc_table: str = "tblRiderCF"
    summary_table: str = "tblRiderCFSummary"
    result_table: str = "tblRiderCFResult"

    input_slot: str = "input"
    input_width: int = 7
    risk_slot: str = "risk"
    waiver_range: str = "is_waiver"
    term_range: str = "term"

    # modal factors live in entire rows anchored here, outside every table
    modal_factor_anchor: str = "gender"
    modal_factor_height: int = 4

    status_cell: str = "B1"
    status_clear_width: int = 3


@dataclass(frozen=True)
class SweepConfig:
    input: InputLayout = field(default_factory=InputLayout)
    base: BaseLayout = field(default_factory=BaseLayout)
    rider: RiderLayout = field(default_factory=RiderLayout)

    # summary window copy policies
    summary_alignment: Literal["head", "tail"] = "head"
    short_summary: Literal["error", "pad"] = "error"

    # status blocks (Started / Finished / Duration)
    print_timestamps: bool = True
