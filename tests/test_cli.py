from __future__ import annotations

import openpyxl
import pandas as pd
from openpyxl.worksheet.table import Table

from app.cli import main


def test_scenarios_command(capsys):
    assert main(["scenarios", "ILP01"]) == 0
    out = capsys.readouterr().out
    assert "Must-pay term" in out
    assert len([line for line in out.splitlines() if "Subrisk" in line]) == 6


def test_scenarios_unknown_product(capsys):
    assert main(["scenarios", "ABC"]) == 0
    assert "No scenarios configured" in capsys.readouterr().out


def test_withdrawals_to_csv(tmp_path):
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Input"
    ws.append(["Start Year", "End Year", "Amount"])
    ws.append([2025, 2027, 100])
    ws.add_table(Table(displayName="tblWithdrawal", ref="A1:C2"))
    ws["F1"] = "Year"
    ws["G1"] = "Amount"
    ws.add_table(Table(displayName="tblWithdrawal_Output", ref="F1:G2"))
    src = tmp_path / "model.xlsx"
    wb.save(src)

    out = tmp_path / "withdrawals.csv"
    assert main(["withdrawals", str(src), "--csv", str(out)]) == 0

    df = pd.read_csv(out)
    assert df["Year"].tolist() == [2025, 2026, 2027]
    assert df["Amount"].tolist() == [100, 100, 100]
