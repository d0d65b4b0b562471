"""Replace the stored roster with a CSV file (header: studentNo,name).

Usage: python scripts/import_roster.py path/to/roster.csv
"""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.qr_attendance.qr_attendance.container import build_container, build_store
from src.qr_attendance.qr_attendance.core.exceptions import ValidationError


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("csv_path", type=Path)
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    store = build_store(
        backend=settings.STORE_BACKEND,
        data_dir=settings.DATA_DIR,
        db_config=getattr(settings, "DB_CONFIG", {}),
    )
    container = build_container(store=store, admin_user=settings.ADMIN_USER, admin_pass=settings.ADMIN_PASS)

    text = args.csv_path.read_text(encoding="utf-8-sig")
    try:
        count = container.roster_service.import_csv(text, is_admin=True)
    except ValidationError as e:
        parser.exit(1, f"ERROR: {e}\n")
    print(f"OK: Imported {count} students from {args.csv_path}")


if __name__ == "__main__":
    main()
