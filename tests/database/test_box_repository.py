from datetime import datetime

from src.attendance_tracker.attendance_tracker.attendance.box_attendance_repository import BoxAttendanceRepository
from src.attendance_tracker.attendance_tracker.attendance.model import Attendance
from src.attendance_tracker.attendance_tracker.core.enums import AttendanceType, LeaveCriteria
from src.attendance_tracker.attendance_tracker.leave_types.box_leave_type_repository import BoxLeaveTypeRepository
from src.attendance_tracker.attendance_tracker.leave_types.model import LeaveType


def _attendance(attendance_id: str, hour: int) -> Attendance:
    return Attendance(attendance_id, datetime(2024, 3, 14, hour, 0), AttendanceType.CHECK_IN)


def test_records_are_stored_as_wire_maps(store):
    repo = BoxAttendanceRepository(store)
    repo.put("a1", _attendance("a1", 8))

    raw = store.attendance_box.get("a1")
    assert raw["id"] == "a1"
    assert raw["type"] == "checkIn"
    assert raw["datetime"] == "2024-03-14T08:00:00"
    assert repo.get("a1") == _attendance("a1", 8)


def test_undecodable_maps_are_skipped(store, caplog):
    repo = BoxAttendanceRepository(store)
    repo.put("a1", _attendance("a1", 8))
    store.attendance_box.put("missing-fields", {"id": "missing-fields"})
    store.attendance_box.put("unknown-type", {"id": "x", "datetime": "2024-03-14T08:00:00", "type": "lunch"})
    store.attendance_box.put("not-a-map", "hello")

    assert repo.list_all() == [_attendance("a1", 8)]
    assert repo.get("missing-fields") is None
    assert "Failed to convert map to Attendance object" in caplog.text


def test_repositories_use_their_own_box(store):
    attendance = BoxAttendanceRepository(store)
    leave_types = BoxLeaveTypeRepository(store)
    attendance.put("same", _attendance("same", 8))
    leave_types.put("same", LeaveType("same", "Sick", 5, LeaveCriteria.MONTHLY))

    assert attendance.get("same").type is AttendanceType.CHECK_IN
    assert leave_types.get("same").name == "Sick"
    assert leave_types.clear() == 1
    assert attendance.contains("same")
    assert attendance.delete("same") is True
    assert attendance.list_all() == []
