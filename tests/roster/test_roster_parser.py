from __future__ import annotations

import pytest

from src.qr_attendance.qr_attendance.core.exceptions import AuthorizationError, ValidationError
from src.qr_attendance.qr_attendance.roster.model import RosterEntry
from src.qr_attendance.qr_attendance.roster.parser import parse_roster_csv


def test_parse_keeps_file_order_and_trims():
    text = "\ufeffstudentNo , name\n 200 , B \n\n100,A\n"

    assert parse_roster_csv(text) == [RosterEntry("200", "B"), RosterEntry("100", "A")]


def test_duplicate_student_no_keeps_first():
    text = "name,studentNo\nA,100\nA again,100\n,\n"

    assert parse_roster_csv(text) == [RosterEntry("100", "A")]


def test_missing_header_column_is_rejected():
    with pytest.raises(ValidationError):
        parse_roster_csv("no,fullname\n1,A\n")


def test_empty_text_is_empty_roster():
    assert parse_roster_csv("") == []


def test_import_requires_admin(container):
    with pytest.raises(AuthorizationError):
        container.roster_service.import_csv("studentNo,name\n1,A\n", is_admin=False)

    assert container.roster_service.import_csv("studentNo,name\n1,A\n", is_admin=True) == 1
    assert container.roster_service.get_roster() == [RosterEntry("1", "A")]


def test_seed_from_file_only_when_roster_is_empty(container, tmp_path):
    path = tmp_path / "roster.csv"
    path.write_text("studentNo,name\n1,A\n2,B\n", encoding="utf-8")

    assert container.roster_service.seed_from_file(path) == 2
    path.write_text("studentNo,name\n3,C\n", encoding="utf-8")
    assert container.roster_service.seed_from_file(path) == 0
    assert [e.student_no for e in container.roster_service.get_roster()] == ["1", "2"]


def test_import_of_empty_file_keeps_current_roster(container):
    container.roster_service.import_csv("studentNo,name\n1,A\n", is_admin=True)

    with pytest.raises(ValidationError):
        container.roster_service.import_csv("studentNo,name\n", is_admin=True)

    assert container.roster_service.get_roster() == [RosterEntry("1", "A")]
