from dataclasses import replace
from datetime import datetime, timedelta

from src.attendance_tracker.attendance_tracker.core.enums import LeaveCriteria, LeaveStatus, UploadStatus
from src.attendance_tracker.attendance_tracker.leave_types.model import LeaveType
from src.attendance_tracker.attendance_tracker.leaves.model import Leave

SICK = LeaveType("sick", "Sick Leave", 5, LeaveCriteria.MONTHLY)


def test_to_json_embeds_leave_type():
    leave = Leave(
        leave_id="l1",
        leave_type=SICK,
        applied_on=datetime(2024, 3, 10, 9, 0),
        remark="flu",
        upload_status=UploadStatus.PENDING,
        device_id="pixel-7",
    )

    data = leave.to_json()
    assert data["type"] == SICK.to_json()
    assert data["appliedOn"] == "2024-03-10T09:00:00"
    assert data["leavestatus"] == "pending"
    assert data["status"] == "Pending"
    assert data["approvedby"] is None
    assert Leave.from_json_string(leave.to_json_string()) == leave


def test_leave_status_defaults_to_pending():
    leave = Leave.from_json({"id": "l1", "type": SICK.to_json(), "appliedOn": "2024-03-10T09:00:00"})
    assert leave.leave_status is LeaveStatus.PENDING
    assert leave.is_pending and not leave.is_approved


def test_is_valid(fixed_now):
    leave = Leave("l1", SICK, fixed_now - timedelta(days=1))
    assert leave.is_valid(fixed_now)
    assert not replace(leave, applied_on=fixed_now + timedelta(days=1)).is_valid(fixed_now)
    assert not replace(leave, leave_type=replace(SICK, maximum_days=0)).is_valid(fixed_now)
