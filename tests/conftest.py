from __future__ import annotations

from typing import Any, List, Sequence

import pytest

from workbook.memory import InMemoryWorkbook

BASE_COLUMNS = ["Year", "Interest Rate", "Premium Term", "Risk", "Cash Flow"]
RIDER_COLUMNS = ["Rider", "Risk Class", "Year", "Modal Factor"]
RIDER_INPUT_COLUMNS = ["Rider", "Type", "Term", "Gender", "Age", "Sum Assured", "Mode"]

DEFAULT_RIDERS: List[List[Any]] = [
    ["R1", "CI", 5, "M", 40, 100000, "Annual"],
    ["W1", "WOP", 10, "F", 35, 0, "Annual"],
    ["R2", "ADD", 3, "M", 40, 50000, "Monthly"],
]


def _base_calculators(book: InMemoryWorkbook) -> None:
    def calc_table(b: InMemoryWorkbook) -> None:
        term = int(b.read_value("Base_CF", "term"))
        rate = b.read_value("Base_CF", "int_rate_scenario")
        prem = b.read_value("Base_CF", "prem_term_scenario")
        risk = b.read_value("Base_CF", "risk_scenario")
        rows = [[k + 1, rate, prem, risk, 100.0 * (k + 1)] for k in range(term)]
        b.add_table("Base_CF", "tblBaseCF", BASE_COLUMNS, rows)

    def calc_summary(b: InMemoryWorkbook) -> None:
        b.add_table("Base_CF", "tblBaseCFSummary", BASE_COLUMNS, b.read_table_rows("tblBaseCF"))

    book.on_calculate("Base_CF", "tblBaseCF", calc_table)
    book.on_calculate("Base_CF", "tblBaseCFSummary", calc_summary)


def _rider_calculators(book: InMemoryWorkbook) -> None:
    def derive_inputs(b: InMemoryWorkbook) -> None:
        record = b.read_value("Rider_CF", "input")
        b.set_value("Rider_CF", "is_waiver", record[1] == "WOP")
        b.set_value("Rider_CF", "term", int(record[2]) if record[2] != "" else 0)

    def modal_factors(b: InMemoryWorkbook) -> None:
        derive_inputs(b)
        record = b.read_value("Rider_CF", "input")
        b.set_value("Rider_CF", "modal_factor", 0.0875 if record[6] == "Monthly" else 1.0)

    def calc_table(b: InMemoryWorkbook) -> None:
        record = b.read_value("Rider_CF", "input")
        risk = b.read_value("Rider_CF", "risk")
        modal = b.read_value("Rider_CF", "modal_factor")
        term = int(b.read_value("Rider_CF", "term"))
        rows = [[record[0], risk, k + 1, modal] for k in range(term)]
        b.add_table("Rider_CF", "tblRiderCF", RIDER_COLUMNS, rows)

    def calc_summary(b: InMemoryWorkbook) -> None:
        b.add_table("Rider_CF", "tblRiderCFSummary", RIDER_COLUMNS, b.read_table_rows("tblRiderCF"))

    book.on_calculate("Rider_CF", "input", derive_inputs)
    book.on_calculate("Rider_CF", "gender", modal_factors)
    book.on_calculate("Rider_CF", "tblRiderCF", calc_table)
    book.on_calculate("Rider_CF", "tblRiderCFSummary", calc_summary)


def make_workbook(
    *,
    product: str = "UVL01",
    term: int = 3,
    withdrawals: Sequence[Sequence[Any]] = ((2025, 2027, 100), ("", "", "")),
    riders: Sequence[Sequence[Any]] = tuple(DEFAULT_RIDERS),
    valid: bool = True,
) -> InMemoryWorkbook:
    book = InMemoryWorkbook()

    # Input sheet
    book.set_value("Input", "input_validation", valid)
    book.add_table("Input", "tblWithdrawal", ["Start Year", "End Year", "Amount"], withdrawals)
    book.add_table("Input", "tblWithdrawal_Output", ["Year", "Amount"])
    book.add_table("Input", "tblRider", RIDER_INPUT_COLUMNS,
                   list(riders) + [[""] * len(RIDER_INPUT_COLUMNS)])

    # Base_CF sheet
    book.set_value("Base_CF", "term", term)
    book.set_value("Base_CF", "base", product)
    for slot in ("int_rate_scenario", "risk_scenario", "prem_term_scenario"):
        book.set_value("Base_CF", slot, "")
    book.add_table("Base_CF", "tblBaseCF", BASE_COLUMNS)
    book.add_table("Base_CF", "tblBaseCFSummary", BASE_COLUMNS)
    book.add_table("Base_CF", "tblBaseCFResult", BASE_COLUMNS)
    _base_calculators(book)

    # Rider_CF sheet
    book.set_value("Rider_CF", "input", [""] * len(RIDER_INPUT_COLUMNS))
    book.set_value("Rider_CF", "risk", "")
    book.set_value("Rider_CF", "is_waiver", False)
    book.set_value("Rider_CF", "term", 0)
    book.set_value("Rider_CF", "modal_factor", "")
    book.add_table("Rider_CF", "tblRiderCF", RIDER_COLUMNS)
    book.add_table("Rider_CF", "tblRiderCFSummary", RIDER_COLUMNS)
    book.add_table("Rider_CF", "tblRiderCFResult", RIDER_COLUMNS)
    _rider_calculators(book)

    return book


@pytest.fixture()
def book() -> InMemoryWorkbook:
    return make_workbook()


@pytest.fixture()
def make_book():
    return make_workbook
