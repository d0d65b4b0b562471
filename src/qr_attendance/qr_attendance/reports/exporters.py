"""File renderings of ledger and report data (CSV, XLSX)."""
from __future__ import annotations

import csv
import io
from typing import Sequence

import pandas as pd

from ..attendance.model import AttendanceMark
from .model import Matrix, Reconciliation

PRESENT_MARK = "✓"
ABSENT_MARK = "✗"


def marks_csv(code: str, marks: Sequence[AttendanceMark]) -> bytes:
    """Raw ledger export: every mark, including students missing from the roster."""
    out = io.StringIO()
    writer = csv.writer(out, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(["code", "time", "name", "studentNo", "deviceId"])
    for m in marks:
        writer.writerow([code, m.time, m.name, m.student_no, m.device_token])
    return out.getvalue().encode("utf-8-sig")


def _xlsx_bytes(sheets: Sequence[tuple[str, pd.DataFrame, list[str]]]) -> bytes:
    """Write (sheet name, table, heading line) triples; the table starts on row 3."""
    buf = io.BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        for sheet_name, df, heading in sheets:
            df.to_excel(writer, index=False, sheet_name=sheet_name, startrow=2)
            ws = writer.sheets[sheet_name]
            for col, text in enumerate(heading, start=1):
                ws.cell(row=1, column=col, value=text)
    return buf.getvalue()


def reconciliation_xlsx(rec: Reconciliation) -> bytes:
    df = pd.DataFrame(
        [
            {
                "No": i,
                "Student No": row.student_no,
                "Name": row.name,
                "Status": PRESENT_MARK if row.present else ABSENT_MARK,
                "Time": row.time or "",
                "Code": rec.code,
                "Note": "",
            }
            for i, row in enumerate(rec.rows, start=1)
        ],
        columns=["No", "Student No", "Name", "Status", "Time", "Code", "Note"],
    )
    heading = [
        f"Code: {rec.code}",
        f"Total: {rec.total}",
        f"Present: {rec.present_count}",
        f"Absent: {rec.absent_count}",
    ]
    return _xlsx_bytes([("Attendance", df, heading)])


def _matrix_frame(matrix: Matrix, rows) -> pd.DataFrame:
    columns = ["No", "Student No", "Name", *matrix.session_codes, "Total"]
    # Rows are positional: a session may be named like a fixed column.
    records = [
        [i, row.student_no, row.name, *(PRESENT_MARK if p else ABSENT_MARK for p in row.per_session), row.total]
        for i, row in enumerate(rows, start=1)
    ]
    return pd.DataFrame(records, columns=columns)


def matrix_xlsx(matrix: Matrix) -> bytes:
    heading = [f"Course: {matrix.course}", f"Sessions: {len(matrix.session_codes)}", f"Students: {len(matrix.rows)}"]
    sheets = [("Matrix", _matrix_frame(matrix, matrix.rows), heading)]
    if matrix.extras:
        sheets.append(("Extras", _matrix_frame(matrix, matrix.extras), ["Not on roster"]))
    return _xlsx_bytes(sheets)
