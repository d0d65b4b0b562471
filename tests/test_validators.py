from __future__ import annotations

import pytest

from src.qr_attendance.qr_attendance.common.validators import clean, request_fields, require_non_empty
from src.qr_attendance.qr_attendance.core.exceptions import ValidationError


@pytest.mark.parametrize("value, expected", [(None, ""), ("  a b ", "a b"), (100, "100"), (0, "0")])
def test_clean(value, expected):
    assert clean(value) == expected


def test_require_non_empty_accepts_numbers():
    assert require_non_empty(2024001, "studentNo") == "2024001"


@pytest.mark.parametrize("value", [None, "", "   "])
def test_require_non_empty_rejects_blank(value):
    with pytest.raises(ValidationError, match="studentNo is required"):
        require_non_empty(value, "studentNo")


def test_request_fields_prefers_json_object():
    assert request_fields({"code": "X"}, {"code": "form"}) == {"code": "X"}


def test_request_fields_falls_back_to_form_without_json():
    assert request_fields(None, {"code": "form"}) == {"code": "form"}


@pytest.mark.parametrize("body", [[1], "X", 5, False])
def test_request_fields_ignores_non_object_json(body):
    assert request_fields(body, {"code": "form"}) == {}
