from __future__ import annotations

from typing import Any, Mapping

from ..core.exceptions import ValidationError


def clean(value: Any) -> str:
    """Trimmed text form of a request field; None becomes ""."""
    if value is None:
        return ""
    return str(value).strip()


def require_non_empty(value: Any, field_name: str) -> str:
    text = clean(value)
    if not text:
        raise ValidationError(f"{field_name} is required")
    return text


def request_fields(json_body: Any, form: Mapping[str, Any]) -> Mapping[str, Any]:
    # A JSON body that is not an object (list, number, string) carries no fields.
    if isinstance(json_body, dict):
        return json_body
    if json_body is not None:
        return {}
    return form
