from __future__ import annotations

import io

from openpyxl import load_workbook

from src.qr_attendance.qr_attendance.attendance.model import AttendanceMark
from src.qr_attendance.qr_attendance.reports.exporters import marks_csv, matrix_xlsx, reconciliation_xlsx
from src.qr_attendance.qr_attendance.reports.model import Matrix, MatrixRow, Reconciliation, ReconciliationRow


def test_marks_csv_quotes_every_field():
    marks = [AttendanceMark("dev1", "100", 'Ada "Ace"', "2025-03-04T09:00:00.000Z")]

    text = marks_csv("X", marks).decode("utf-8-sig")

    assert text.splitlines() == [
        '"code","time","name","studentNo","deviceId"',
        '"X","2025-03-04T09:00:00.000Z","Ada ""Ace""","100","dev1"',
    ]


def test_reconciliation_workbook_has_summary_and_rows():
    rec = Reconciliation(
        code="X",
        total=2,
        present_count=1,
        rows=[
            ReconciliationRow("100", "A", True, "2025-03-04T09:00:00.000Z"),
            ReconciliationRow("200", "B", False),
        ],
    )

    ws = load_workbook(io.BytesIO(reconciliation_xlsx(rec)))["Attendance"]

    assert ws["A1"].value == "Code: X"
    assert ws["C1"].value == "Present: 1"
    assert ws["D1"].value == "Absent: 1"
    assert [c.value for c in ws[3]][:4] == ["No", "Student No", "Name", "Status"]
    assert [c.value for c in ws[4]][1:4] == ["100", "A", "✓"]
    assert [c.value for c in ws[5]][1:4] == ["200", "B", "✗"]


def test_matrix_workbook_adds_extras_sheet():
    matrix = Matrix(
        course="c",
        session_codes=["c 1", "c 2"],
        rows=[MatrixRow("100", "A", [True, False])],
        extras=[MatrixRow("900", "Z", [False, True])],
    )

    wb = load_workbook(io.BytesIO(matrix_xlsx(matrix)))

    assert wb.sheetnames == ["Matrix", "Extras"]
    ws = wb["Matrix"]
    assert [c.value for c in ws[3]] == ["No", "Student No", "Name", "c 1", "c 2", "Total"]
    assert [c.value for c in ws[4]] == [1, "100", "A", "✓", "✗", 1]


def test_matrix_session_named_like_a_fixed_column_keeps_both():
    matrix = Matrix(
        course="name",
        session_codes=["Name", "Total"],
        rows=[MatrixRow("100", "A", [True, False])],
        extras=[],
    )

    ws = load_workbook(io.BytesIO(matrix_xlsx(matrix)))["Matrix"]

    assert [c.value for c in ws[3]] == ["No", "Student No", "Name", "Name", "Total", "Total"]
    assert [c.value for c in ws[4]] == [1, "100", "A", "✓", "✗", 1]
