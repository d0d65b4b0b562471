from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .attendance.kv_attendance_repository import KVAttendanceRepository
from .attendance.service import AttendanceService
from .auth.service import AdminAuthService
from .database.connection import DatabaseConnection, DBConfig
from .devices.kv_device_repository import KVDeviceRepository
from .devices.service import DeviceRegistryService
from .reports.matrix import MatrixAggregator
from .reports.reconciler import RosterReconciler
from .reports.service import ReportService
from .roster.repository import KVRosterRepository
from .roster.service import RosterService
from .sessions.repository import KVActiveSessionRepository
from .sessions.service import SessionService
from .storage.json_file_store import JsonFileKeyValueStore
from .storage.mysql_store import MySQLKeyValueStore
from .storage.store import KeyValueStore


@dataclass(frozen=True)
class Container:
    store: KeyValueStore

    attendance_repo: KVAttendanceRepository
    devices_repo: KVDeviceRepository
    active_repo: KVActiveSessionRepository
    roster_repo: KVRosterRepository

    auth_service: AdminAuthService
    device_service: DeviceRegistryService
    session_service: SessionService
    attendance_service: AttendanceService
    roster_service: RosterService
    report_service: ReportService


def build_store(*, backend: str, data_dir: str | Path, db_config: Optional[dict] = None) -> KeyValueStore:
    backend = (backend or "json").lower()
    if backend == "json":
        return JsonFileKeyValueStore(data_dir)
    if backend == "mysql":
        return MySQLKeyValueStore(DatabaseConnection(DBConfig.from_dict(db_config or {})))
    raise ValueError(f"Unknown STORE_BACKEND: {backend!r}")


def build_container(*, store: KeyValueStore, admin_user: str, admin_pass: str) -> Container:
    attendance_repo = KVAttendanceRepository(store)
    devices_repo = KVDeviceRepository(store)
    active_repo = KVActiveSessionRepository(store)
    roster_repo = KVRosterRepository(store)

    auth_service = AdminAuthService(username=admin_user, password=admin_pass)
    device_service = DeviceRegistryService(devices_repo)
    session_service = SessionService(active_repo)
    attendance_service = AttendanceService(attendance_repo, device_service)
    roster_service = RosterService(roster_repo)
    report_service = ReportService(
        roster_service,
        RosterReconciler(attendance_repo),
        MatrixAggregator(attendance_repo),
    )

    return Container(
        store=store,
        attendance_repo=attendance_repo,
        devices_repo=devices_repo,
        active_repo=active_repo,
        roster_repo=roster_repo,
        auth_service=auth_service,
        device_service=device_service,
        session_service=session_service,
        attendance_service=attendance_service,
        roster_service=roster_service,
        report_service=report_service,
    )
