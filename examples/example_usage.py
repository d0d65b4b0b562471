"""Example: drive the services directly (no Flask).

Controllers are a thin layer; the rules live in the services.
"""

import tempfile

from src.qr_attendance.qr_attendance.container import build_container, build_store


def main():
    store = build_store(backend="json", data_dir=tempfile.mkdtemp())
    container = build_container(store=store, admin_user="admin", admin_pass="admin123")

    container.roster_service.import_csv("studentNo,name\n100,Ada\n200,Bora\n", is_admin=True)
    container.session_service.set_active("ybs311 week-1", is_admin=True)

    code = container.session_service.get_active().code
    print(container.attendance_service.check_in(code, "device-1", "100", "Ada"))
    print(container.attendance_service.check_in(code, "device-1", "100", "Ada"))
    print(container.report_service.roster_status(code).to_dict())
    print(container.report_service.course_matrix("ybs311").to_dict())


if __name__ == "__main__":
    main()
