from __future__ import annotations

import pytest

from core.errors import WorkbookError
from sweep.rider_cf import RiderSweepRunner, plan_rider_rows, run_rider_cashflows
from workbook.base import Region
from workbook.memory import InMemoryWorkbook


def test_plan_classifies_and_totals_terms(book):
    plan = plan_rider_rows(book)

    assert plan.non_waiver_indices == [0, 2]
    assert plan.waiver_indices == [1]
    assert [c.projection_term for c in plan.classifications] == [5, 10, 3]
    assert plan.total_rows == 2 * (5 + 10 + 3) == 36


def test_plan_only_recalculates_input_block(book):
    plan_rider_rows(book)
    assert book.calc_log == [Region.range("Rider_CF", "input", width=7)] * 3


def test_plan_stops_at_first_empty_rider(make_book):
    riders = [
        ["R1", "CI", 5, "M", 40, 1, "Annual"],
        ["", "", "", "", "", "", ""],
        ["R9", "CI", 7, "M", 40, 1, "Annual"],
    ]
    plan = plan_rider_rows(make_book(riders=riders))
    assert len(plan.records) == 1
    assert plan.total_rows == 10


def test_non_waiver_before_waiver_standard_before_substandard(book):
    result = run_rider_cashflows(book)

    visits = [(p.record_index, p.risk_class, p.start_row, p.term) for p in result.placements]
    assert visits == [
        (0, "Standard", 0, 5),
        (2, "Standard", 5, 3),
        (0, "Sub-standard", 8, 5),
        (2, "Sub-standard", 13, 3),
        (1, "Standard", 16, 10),
        (1, "Sub-standard", 26, 10),
    ]
    assert result.rows_written == 36
    assert [p.is_waiver for p in result.placements] == [False] * 4 + [True] * 2


def test_result_rows_land_at_cursor_offsets(book):
    run_rider_cashflows(book)
    rows = book.read_table_rows("tblRiderCFResult")

    assert len(rows) == 36
    assert rows[0] == ["R1", "Standard", 1, 1.0]
    assert rows[7] == ["R2", "Standard", 3, 0.0875]
    assert rows[13] == ["R2", "Sub-standard", 1, 0.0875]
    assert rows[16] == ["W1", "Standard", 1, 1.0]
    assert rows[35] == ["W1", "Sub-standard", 10, 1.0]


def test_modal_factor_rows_recalculated_before_tables(book):
    run_rider_cashflows(book)
    sweep_log = book.calc_log[3:]
    assert sweep_log[:3] == [
        Region.rows("Rider_CF", "gender", height=4),
        Region.table_body("Rider_CF", "tblRiderCF"),
        Region.table_body("Rider_CF", "tblRiderCFSummary"),
    ]
    assert len(sweep_log) == 3 * 6


def test_scratch_slots_cleared_after_run(book):
    runner = RiderSweepRunner(book)
    runner.run()
    assert book.read_value("Rider_CF", "input") == [""] * 7
    assert book.read_value("Rider_CF", "risk") == ""
    assert runner.cursor == 36


def test_no_riders_sizes_nothing(make_book):
    book = make_book(riders=[])
    result = run_rider_cashflows(book)
    assert result.plan.total_rows == 0
    assert result.placements == []
    assert book.table_row_count("tblRiderCFResult") == 0


def test_fixed_height_summary_copies_first_term_rows(book):
    # summary laid out for the longest term; years past the rider term are blank
    def fixed_height_summary(b: InMemoryWorkbook) -> None:
        calc_rows = b.read_table_rows("tblRiderCF")
        name, risk = calc_rows[0][0], calc_rows[0][1]
        rows = list(calc_rows)
        rows += [[name, risk, k + 1, ""] for k in range(len(calc_rows), 10)]
        b.add_table("Rider_CF", "tblRiderCFSummary",
                    ["Rider", "Risk Class", "Year", "Modal Factor"], rows)

    book.on_calculate("Rider_CF", "tblRiderCFSummary", fixed_height_summary)
    result = run_rider_cashflows(book)
    rows = book.read_table_rows("tblRiderCFResult")

    r2_standard = next(p for p in result.placements
                       if p.record_index == 2 and p.risk_class == "Standard")
    block = rows[r2_standard.start_row:r2_standard.end_row]
    assert [r[2] for r in block] == [1, 2, 3]
    assert [r[3] for r in block] == [0.0875] * 3
    assert [r[2] for r in rows[0:5]] == [1, 2, 3, 4, 5]


def test_term_larger_than_planned_fails_and_clears_scratch(book):
    def longer_waiver_term(b: InMemoryWorkbook) -> None:
        if b.read_value("Rider_CF", "input")[0] == "W1":
            b.set_value("Rider_CF", "term", 12)

    book.on_calculate("Rider_CF", "gender", longer_waiver_term)
    runner = RiderSweepRunner(book)

    with pytest.raises(WorkbookError):
        runner.run()

    assert book.read_value("Rider_CF", "input") == [""] * 7
    assert book.read_value("Rider_CF", "risk") == ""
    assert book.table_row_count("tblRiderCFResult") == 36
