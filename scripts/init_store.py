from __future__ import annotations

import sys
from pathlib import Path

import importlib

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.attendance_tracker.attendance_tracker.container import build_container
from src.attendance_tracker.attendance_tracker.core.constants import DB_VERSION_KEY
from src.attendance_tracker.attendance_tracker.core.logging import setup_logging
from src.attendance_tracker.attendance_tracker.database.connection import StoreConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(store_config=StoreConfig(path=settings.STORE_PATH))
    try:
        container.settings_service.perform_migration()
        version = container.settings_service.get_setting(DB_VERSION_KEY)
        boxes = container.store.list_boxes()
    finally:
        container.close()

    print(f"OK: Local store ready -> {settings.STORE_PATH} (boxes={len(boxes)}, db_version={version})")


if __name__ == "__main__":
    main()
