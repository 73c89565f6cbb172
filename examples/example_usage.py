"""Example: use the service layer directly (no Flask).

Controllers are thin; the behaviour lives in the services built by the container.
"""

import importlib

from config import get_settings_module

from src.attendance_tracker.attendance_tracker.container import build_container
from src.attendance_tracker.attendance_tracker.core.enums import AttendanceType, LeaveCriteria, MarkType
from src.attendance_tracker.attendance_tracker.core.logging import setup_logging
from src.attendance_tracker.attendance_tracker.database.connection import MEMORY_PATH, StoreConfig
from src.attendance_tracker.attendance_tracker.leave_types.model import LeaveType


def main():
    settings = importlib.import_module(get_settings_module())
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    container = build_container(store_config=StoreConfig(path=MEMORY_PATH))

    subscription = container.attendance_service.subscribe(
        lambda records: print(f"attendance stream: {len(records)} record(s)")
    )

    container.attendance_service.take_attendance(
        AttendanceType.CHECK_IN, lat=21.0278, lng=105.8342, mark_type=MarkType.GEOLOCATION
    )
    container.leave_type_service.create(LeaveType("annual", "Annual Leave", 12, LeaveCriteria.YEARLY))

    for record in container.attendance_service.get_pending_uploads():
        print(record.type.display_name, record.timestamp.isoformat())
    print([lt.name for lt in container.leave_type_service.get_all()])

    subscription.cancel()
    container.close()


if __name__ == "__main__":
    main()
