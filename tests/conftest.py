from __future__ import annotations

import pytest

from src.qr_attendance.qr_attendance.container import build_container, build_store


@pytest.fixture
def store(tmp_path):
    return build_store(backend="json", data_dir=tmp_path / "data")


@pytest.fixture
def container(store):
    return build_container(store=store, admin_user="admin", admin_pass="admin123")
