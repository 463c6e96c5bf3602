from __future__ import annotations

from core.config import SweepConfig
from workbook.validators import ValidationResult, check_withdrawal_rows, validate_input


def test_gate_passes(book):
    result = validate_input(book, SweepConfig())
    assert result.is_valid
    assert result.summary() == "All checks passed."


def test_gate_string_false_fails(make_book):
    book = make_book()
    book.set_value("Input", "input_validation", "FALSE")
    assert not validate_input(book, SweepConfig()).is_valid


def test_reversed_range_and_trailing_rows_are_warnings():
    result = ValidationResult()
    check_withdrawal_rows(
        [[2025, 2027, 1], [2030, 2028, 5], ["", "", ""], [2040, 2041, 9], ["", "", ""]],
        result,
    )
    assert result.is_valid
    assert len(result.warnings) == 2
    assert "end year 2028" in result.warnings[0]
    assert "1 withdrawal rows after the first empty row" in result.warnings[1]


def test_warnings_surface_through_gate(make_book):
    book = make_book(withdrawals=[[2025, 2024, 1], ["", "", ""]])
    result = validate_input(book, SweepConfig())
    assert result.is_valid
    assert "WARNINGS (1)" in result.summary()


def test_blank_end_year_is_a_warning():
    result = ValidationResult()
    check_withdrawal_rows([[2025, "", 100], [2026, "soon", 1], ["", "", ""]], result)
    assert result.is_valid
    assert result.warnings == [
        "Withdrawal row 1: end year is blank or not a number; it expands to no years.",
        "Withdrawal row 2: end year is blank or not a number; it expands to no years.",
    ]
