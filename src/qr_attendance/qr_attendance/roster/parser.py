from __future__ import annotations

import csv
import io

from ..core.exceptions import ValidationError
from .model import RosterEntry

REQUIRED_COLUMNS = ("studentNo", "name")


def parse_roster_csv(text: str) -> list[RosterEntry]:
    """Parse a roster CSV with a ``studentNo,name`` header.

    Blank lines and rows without a studentNo are skipped; a repeated studentNo
    keeps its first occurrence.
    """

    text = (text or "").lstrip("\ufeff")
    if not text.strip():
        return []

    reader = csv.DictReader(io.StringIO(text))
    header = [h.strip() for h in (reader.fieldnames or [])]
    missing = [c for c in REQUIRED_COLUMNS if c not in header]
    if missing:
        raise ValidationError(f"Roster header must contain: {', '.join(missing)}")
    reader.fieldnames = header

    entries: list[RosterEntry] = []
    seen: set[str] = set()
    for row in reader:
        student_no = (row.get("studentNo") or "").strip()
        if not student_no or student_no in seen:
            continue
        seen.add(student_no)
        entries.append(RosterEntry(student_no=student_no, name=(row.get("name") or "").strip()))
    return entries
