from __future__ import annotations

from ..database.box_repository import BoxRepository
from ..database.store import LocalStore
from .model import Attendance
from .repository import AttendanceRepository


class BoxAttendanceRepository(BoxRepository[Attendance], AttendanceRepository):
    entity_name = "Attendance"

    def __init__(self, store: LocalStore):
        super().__init__(lambda: store.attendance_box)

    def _to_map(self, record: Attendance) -> dict:
        return record.to_json()

    def _from_map(self, data: dict) -> Attendance:
        return Attendance.from_json(data)
