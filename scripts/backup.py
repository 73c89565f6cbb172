"""Backup the local store.

Copies the sqlite file configured by STORE_PATH into ./backups with a timestamp.
"""

from __future__ import annotations

import importlib
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.attendance_tracker.attendance_tracker.core.logging import setup_logging
from src.attendance_tracker.attendance_tracker.database.connection import StoreConfig
from src.attendance_tracker.attendance_tracker.database.store import LocalStore


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    config = StoreConfig(path=settings.STORE_PATH)
    if config.in_memory:
        raise SystemExit("STORE_PATH is :memory:, nothing to back up.")

    out_dir = REPO_ROOT / "backups"
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"attendance_store_{ts}.db"

    store = LocalStore(config)
    store.open()
    try:
        if not store.backup(out_file):
            raise SystemExit("Backup failed, see log for details.")
    finally:
        store.close()
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
